"""Adoption curves — fraction of a track's licenses in service at month t.

One pure function dispatches over ``CurveKind``:

  - immediate:     1.0 from month 0
  - linear:        (t + 1) / D, capped at 1.0 — full at month D − 1
  - S-curve family: logistic L(t) = 1 / (1 + e^(−k(t − t0))), pinned so that
                    month 0 → 0.0 and month D → 1.0:

                        f(t) = (L(t) − L(0)) / (L(D) − L(0))

    with k = steepness / D and t0 = center_ratio × D.  The three variants
    differ only in (center_ratio, steepness):

      aggressive    (1/3, 10)  fast early ramp
      moderate      (1/2,  8)  slow start, fast middle, plateau
      conservative  (2/3,  6)  slow, prolonged ramp

Every curve returns 1.0 once t ≥ D.
"""

from __future__ import annotations

import math

import numpy as np

from unity_sim.config.curve import CurveKind, CurveSpec

S_CURVE_SHAPES: dict[CurveKind, tuple[float, float]] = {
    CurveKind.S_CURVE_MODERATE: (1 / 2, 8.0),
    CurveKind.AGGRESSIVE: (1 / 3, 10.0),
    CurveKind.CONSERVATIVE: (2 / 3, 6.0),
}
"""(center_ratio, steepness) defaults per S-curve variant."""


def _logistic(t: float, k: float, t0: float) -> float:
    return 1.0 / (1.0 + math.exp(-k * (t - t0)))


def _pinned_logistic(t: float, duration: int, center_ratio: float, steepness: float) -> float:
    k = steepness / duration
    t0 = center_ratio * duration
    low = _logistic(0.0, k, t0)
    high = _logistic(float(duration), k, t0)
    return (_logistic(float(t), k, t0) - low) / (high - low)


def s_curve_shape(curve: CurveSpec) -> tuple[float, float]:
    """Effective (center_ratio, steepness) for an S-curve spec, overrides applied."""
    center, steepness = S_CURVE_SHAPES[curve.kind]
    if curve.center_ratio is not None:
        center = curve.center_ratio
    if curve.steepness is not None:
        steepness = curve.steepness
    return center, steepness


def activation_fraction(curve: CurveSpec, month_index: int) -> float:
    """Fraction of the track's licenses active at ``month_index`` (0-based)."""
    duration = curve.duration_months
    if curve.kind is CurveKind.IMMEDIATE or duration <= 0:
        return 1.0
    if month_index < 0:
        return 0.0
    if month_index >= duration:
        return 1.0

    if curve.kind is CurveKind.LINEAR:
        return min(1.0, (month_index + 1) / duration)

    center, steepness = s_curve_shape(curve)
    value = _pinned_logistic(month_index, duration, center, steepness)
    # Clamp float noise at the pinned endpoints
    return min(1.0, max(0.0, value))


def activation_curve(curve: CurveSpec, horizon_months: int) -> np.ndarray:
    """Activation fractions for months 0..horizon−1 as a float array."""
    return np.array(
        [activation_fraction(curve, m) for m in range(horizon_months)],
        dtype=np.float64,
    )
