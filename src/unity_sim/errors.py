"""Error types raised at the pipeline boundary."""

from __future__ import annotations

from pydantic import ValidationError


class ConfigurationError(ValueError):
    """A scenario field is outside its documented domain.

    Raised before any simulation work starts — there is never a partial series.
    """

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ConfigurationError":
        """Flatten a pydantic ``ValidationError`` into one readable message."""
        details = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err.get("loc", ()))
            details.append(f"{loc or '<root>'}: {err.get('msg', 'invalid value')}")
        return cls(
            "Invalid scenario configuration — " + "; ".join(details),
            errors=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        )
