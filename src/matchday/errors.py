"""Error taxonomy for fixture scheduling.

Validation findings are not errors: they are returned as data in a
ValidationReport. Only malformed input or configuration raises.
"""

from __future__ import annotations


class SchedulingError(ValueError):
    """Base class for all scheduling failures."""


class InvalidInput(SchedulingError):
    """Team data is malformed or insufficient (fewer than two teams, duplicate ids)."""


class InvalidConfiguration(SchedulingError):
    """Schedule configuration is malformed (missing start date, empty slots, bad day gap)."""
