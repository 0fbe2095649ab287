"""Model exports for matchday."""

from matchday.models.config import (
    DEFAULT_TIME_SLOTS,
    UNASSIGNED_VENUE,
    ScheduleConfig,
    ScheduleFormat,
    SlotPolicy,
)
from matchday.models.fixture import Fixture, Leg, ScheduledMatch
from matchday.models.report import ValidationReport
from matchday.models.team import TeamRef, as_team_refs

__all__ = [
    "DEFAULT_TIME_SLOTS",
    "Fixture",
    "Leg",
    "ScheduleConfig",
    "ScheduleFormat",
    "ScheduledMatch",
    "SlotPolicy",
    "TeamRef",
    "UNASSIGNED_VENUE",
    "ValidationReport",
    "as_team_refs",
]
