"""Schedule summary and operator recommendations.

Aggregates a schedule into per-team totals, venue and time-slot
distributions and a date range, then turns that plus a ValidationReport
into short, actionable hints for whoever publishes the calendar.
"""

from __future__ import annotations

import datetime as dt
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from matchday.models.config import UNASSIGNED_VENUE
from matchday.models.fixture import ScheduledMatch
from matchday.models.report import ValidationReport
from matchday.models.team import TeamRef, as_team_refs

MAX_SEASON_DAYS = 365


@dataclass
class TeamTally:
    """Home/away totals for one team."""
    home: int = 0
    away: int = 0

    @property
    def total(self) -> int:
        return self.home + self.away


@dataclass
class ScheduleSummary:
    """Aggregate view of a materialized schedule."""
    total_matches: int = 0
    total_rounds: int = 0
    teams_count: int = 0
    matches_per_team: dict[str, TeamTally] = field(default_factory=dict)  # keyed by team id
    venue_distribution: dict[str, int] = field(default_factory=dict)
    time_distribution: dict[str, int] = field(default_factory=dict)
    start_date: dt.date | None = None
    end_date: dt.date | None = None

    @property
    def duration_days(self) -> int:
        if self.start_date is None or self.end_date is None:
            return 0
        return (self.end_date - self.start_date).days


@dataclass
class Recommendation:
    level: str  # "success", "info" or "warning"
    title: str
    action: str
    issues: list[str] = field(default_factory=list)


def summarize_schedule(
    matches: Sequence[ScheduledMatch], teams: Sequence[TeamRef | str],
) -> ScheduleSummary:
    """Count matches per team, venue and slot usage, and the calendar span."""
    team_list = as_team_refs(teams)
    tallies = {t.id: TeamTally() for t in team_list}
    venues: Counter[str] = Counter()
    times: Counter[str] = Counter()

    for match in matches:
        tallies.setdefault(match.home.id, TeamTally()).home += 1
        tallies.setdefault(match.away.id, TeamTally()).away += 1
        venues[match.venue or UNASSIGNED_VENUE] += 1
        times[match.time] += 1

    dates = [m.date for m in matches]
    return ScheduleSummary(
        total_matches=len(matches),
        total_rounds=max((m.round for m in matches), default=0),
        teams_count=len(team_list),
        matches_per_team=tallies,
        venue_distribution=dict(venues),
        time_distribution=dict(times),
        start_date=min(dates, default=None),
        end_date=max(dates, default=None),
    )


def recommend(
    summary: ScheduleSummary,
    report: ValidationReport | None = None,
    unassigned_venue: str = UNASSIGNED_VENUE,
) -> list[Recommendation]:
    """Turn a summary (and optional validation report) into operator hints."""
    recommendations: list[Recommendation] = []

    if report is not None and not report.valid:
        recommendations.append(Recommendation(
            level="warning",
            title="Schedule balance issues detected",
            action="Regenerate the schedule from the current team list.",
            issues=list(report.violations),
        ))

    if summary.venue_distribution and set(summary.venue_distribution) == {unassigned_venue}:
        recommendations.append(Recommendation(
            level="warning",
            title="No venues assigned",
            action="Set a home venue per team or pass venue overrides.",
        ))

    if len(summary.time_distribution) == 1 and summary.total_matches > 1:
        recommendations.append(Recommendation(
            level="info",
            title="Limited time slots",
            action="Spread matches across more time slots.",
        ))

    if summary.duration_days > MAX_SEASON_DAYS:
        recommendations.append(Recommendation(
            level="warning",
            title="Season longer than a year",
            action=(
                f"Schedule spans {summary.duration_days} days; "
                "reduce the gap between rounds."
            ),
        ))

    if not recommendations:
        recommendations.append(Recommendation(
            level="success",
            title="Schedule looks good",
            action="No action needed.",
        ))
    return recommendations
