"""Schedule planner facade.

Runs fixture generation, materialization and validation in sequence so a
caller (web handler, CLI, notebook) gets everything needed to persist and
review a season through one call.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from matchday.engine.fixture_generator import generate_fixtures
from matchday.engine.materializer import materialize_schedule
from matchday.engine.summary import ScheduleSummary, summarize_schedule
from matchday.engine.validator import validate_schedule
from matchday.errors import InvalidInput
from matchday.models.config import ScheduleConfig
from matchday.models.fixture import Fixture, ScheduledMatch
from matchday.models.report import ValidationReport
from matchday.models.team import TeamRef, as_team_refs

logger = logging.getLogger(__name__)


@dataclass
class SchedulePlan:
    """Everything produced for one generation request."""

    fixtures: list[Fixture]
    matches: list[ScheduledMatch]
    report: ValidationReport
    summary: ScheduleSummary

    @property
    def total_rounds(self) -> int:
        return self.summary.total_rounds

    @property
    def is_valid(self) -> bool:
        return self.report.valid


class SchedulePlanner:
    """Holds a configuration and plans schedules for team lists."""

    def __init__(self, config: ScheduleConfig, strict: bool = False):
        """Initialize the planner.

        Args:
            config: Schedule configuration used for every plan.
            strict: If True, an invalid validation report raises InvalidInput
                    instead of being returned.
        """
        self.config = config
        self.strict = strict

    def plan(self, teams: Sequence[TeamRef | str]) -> SchedulePlan:
        team_list = as_team_refs(teams)
        fmt = self.config.format

        fixtures = generate_fixtures(team_list, fmt, seed=self.config.seed)
        matches = materialize_schedule(fixtures, self.config)
        report = validate_schedule(matches, team_list, fmt)
        summary = summarize_schedule(matches, team_list)

        logger.info(
            "Planned %s round-robin: %d teams, %d matches, %d rounds, valid=%s",
            fmt.value, len(team_list), len(matches), summary.total_rounds, report.valid,
        )

        if self.strict and not report.valid:
            raise InvalidInput(
                "Generated schedule is invalid: " + "; ".join(report.violations)
            )
        return SchedulePlan(fixtures=fixtures, matches=matches, report=report, summary=summary)


def plan_schedule(
    teams: Sequence[TeamRef | str], config: ScheduleConfig, strict: bool = False,
) -> SchedulePlan:
    """Generate, materialize and validate a schedule in one call."""
    return SchedulePlanner(config, strict=strict).plan(teams)
