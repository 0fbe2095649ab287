"""Scheduling engine: generation, materialization, validation."""

from matchday.engine.fixture_generator import (
    generate_fixtures,
    group_by_round,
    matches_per_team,
    total_fixtures,
    total_rounds,
)
from matchday.engine.materializer import materialize_schedule, resolve_venue
from matchday.engine.planner import SchedulePlan, SchedulePlanner, plan_schedule
from matchday.engine.summary import (
    Recommendation,
    ScheduleSummary,
    TeamTally,
    recommend,
    summarize_schedule,
)
from matchday.engine.validator import validate_schedule

__all__ = [
    "Recommendation",
    "SchedulePlan",
    "SchedulePlanner",
    "ScheduleSummary",
    "TeamTally",
    "generate_fixtures",
    "group_by_round",
    "materialize_schedule",
    "matches_per_team",
    "plan_schedule",
    "recommend",
    "resolve_venue",
    "summarize_schedule",
    "total_fixtures",
    "total_rounds",
    "validate_schedule",
]
