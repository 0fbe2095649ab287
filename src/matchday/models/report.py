"""Validation report model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationReport(BaseModel):
    """Outcome of checking a schedule. Violations are data, not errors."""
    valid: bool
    violations: list[str] = Field(default_factory=list)
    statistics: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_violations(
        cls, violations: list[str], statistics: dict[str, int] | None = None,
    ) -> "ValidationReport":
        return cls(
            valid=not violations,
            violations=list(violations),
            statistics=dict(statistics or {}),
        )

    def __bool__(self) -> bool:
        return self.valid
