"""matchday — round-robin fixture generation, scheduling and validation."""

from matchday.engine import (
    SchedulePlan,
    SchedulePlanner,
    generate_fixtures,
    materialize_schedule,
    plan_schedule,
    recommend,
    summarize_schedule,
    validate_schedule,
)
from matchday.errors import InvalidConfiguration, InvalidInput, SchedulingError
from matchday.models import (
    Fixture,
    Leg,
    ScheduleConfig,
    ScheduledMatch,
    ScheduleFormat,
    SlotPolicy,
    TeamRef,
    ValidationReport,
)

__version__ = "0.1.0"

__all__ = [
    "Fixture",
    "InvalidConfiguration",
    "InvalidInput",
    "Leg",
    "ScheduleConfig",
    "ScheduleFormat",
    "SchedulePlan",
    "SchedulePlanner",
    "ScheduledMatch",
    "SchedulingError",
    "SlotPolicy",
    "TeamRef",
    "ValidationReport",
    "generate_fixtures",
    "materialize_schedule",
    "plan_schedule",
    "recommend",
    "summarize_schedule",
    "validate_schedule",
]
