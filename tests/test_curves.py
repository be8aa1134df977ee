"""Tests for engine/curves.py — adoption curve shapes and boundary pinning."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from unity_sim.config import CurveKind, CurveSpec
from unity_sim.engine.curves import activation_curve, activation_fraction

RAMPED_KINDS = [
    CurveKind.LINEAR,
    CurveKind.S_CURVE_MODERATE,
    CurveKind.AGGRESSIVE,
    CurveKind.CONSERVATIVE,
]


class TestImmediate:
    def test_full_from_month_zero(self):
        curve = CurveSpec(kind=CurveKind.IMMEDIATE)
        assert activation_fraction(curve, 0) == 1.0
        assert activation_fraction(curve, 11) == 1.0

    def test_duration_is_ignored(self):
        """Immediate curves store duration 0 whatever the caller sent."""
        curve = CurveSpec(kind="immediate", duration_months=7)
        assert curve.duration_months == 0
        assert curve == CurveSpec(kind=CurveKind.IMMEDIATE)


class TestLinear:
    def test_half_way_at_month_two_of_six(self):
        curve = CurveSpec(kind=CurveKind.LINEAR, duration_months=6)
        assert activation_fraction(curve, 2) == 0.5

    def test_first_month_is_one_step(self):
        curve = CurveSpec(kind=CurveKind.LINEAR, duration_months=4)
        assert activation_fraction(curve, 0) == pytest.approx(0.25)

    def test_full_at_last_ramp_month(self):
        curve = CurveSpec(kind=CurveKind.LINEAR, duration_months=6)
        assert activation_fraction(curve, 5) == 1.0
        assert activation_fraction(curve, 6) == 1.0


class TestSCurves:
    @pytest.mark.parametrize("kind", [CurveKind.S_CURVE_MODERATE, CurveKind.AGGRESSIVE, CurveKind.CONSERVATIVE])
    def test_pinned_to_zero_at_start(self, kind):
        curve = CurveSpec(kind=kind, duration_months=6)
        assert activation_fraction(curve, 0) == pytest.approx(0.0, abs=1e-12)

    def test_moderate_is_symmetric(self):
        curve = CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6)
        assert activation_fraction(curve, 3) == pytest.approx(0.5, abs=1e-9)

    def test_shape_ordering_mid_ramp(self):
        """Aggressive ramps fastest, conservative slowest."""
        mid = {
            kind: activation_fraction(CurveSpec(kind=kind, duration_months=6), 3)
            for kind in (CurveKind.AGGRESSIVE, CurveKind.S_CURVE_MODERATE, CurveKind.CONSERVATIVE)
        }
        assert mid[CurveKind.AGGRESSIVE] > mid[CurveKind.S_CURVE_MODERATE] > mid[CurveKind.CONSERVATIVE]
        assert mid[CurveKind.AGGRESSIVE] == pytest.approx(0.8366, abs=1e-3)
        assert mid[CurveKind.CONSERVATIVE] == pytest.approx(0.2908, abs=1e-3)

    def test_steepness_override(self):
        """A steeper moderate curve starts slower."""
        default = CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6)
        steep = CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6, steepness=20)
        assert activation_fraction(steep, 1) < activation_fraction(default, 1)
        assert activation_fraction(steep, 6) == 1.0

    def test_center_override(self):
        late = CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6, center_ratio=0.8)
        default = CurveSpec(kind=CurveKind.S_CURVE_MODERATE, duration_months=6)
        assert activation_fraction(late, 3) < activation_fraction(default, 3)


class TestCurveProperties:
    @pytest.mark.parametrize("kind", RAMPED_KINDS)
    @pytest.mark.parametrize("duration", [1, 2, 3, 6, 9, 12])
    def test_monotone_bounded_and_complete(self, kind, duration):
        curve = CurveSpec(kind=kind, duration_months=duration)
        values = [activation_fraction(curve, m) for m in range(duration + 4)]
        assert all(0.0 <= v <= 1.0 for v in values)
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert all(v == 1.0 for v in values[duration:])

    def test_negative_month_is_inactive(self):
        curve = CurveSpec(kind=CurveKind.LINEAR, duration_months=3)
        assert activation_fraction(curve, -1) == 0.0

    def test_vector_matches_scalar(self):
        curve = CurveSpec(kind=CurveKind.AGGRESSIVE, duration_months=5)
        vec = activation_curve(curve, 8)
        assert vec.shape == (8,)
        np.testing.assert_allclose(vec, [activation_fraction(curve, m) for m in range(8)])

    def test_empty_horizon(self):
        assert activation_curve(CurveSpec(), 0).shape == (0,)


class TestCurveValidation:
    @pytest.mark.parametrize("duration", [0, 13, -1])
    def test_ramped_duration_out_of_range(self, duration):
        with pytest.raises(ValidationError):
            CurveSpec(kind=CurveKind.LINEAR, duration_months=duration)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            CurveSpec(kind="exponential", duration_months=3)

    def test_bad_center_ratio(self):
        with pytest.raises(ValidationError):
            CurveSpec(kind=CurveKind.AGGRESSIVE, duration_months=3, center_ratio=1.0)
