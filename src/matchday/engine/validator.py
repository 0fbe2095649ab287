"""Schedule validator — post-hoc consistency checks for a round-robin.

Problems are collected into a ValidationReport instead of being raised,
so a caller can still decide to keep an imperfect schedule.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations

from matchday.models.config import ScheduleFormat
from matchday.models.fixture import Fixture
from matchday.models.report import ValidationReport
from matchday.models.team import TeamRef, as_team_refs

logger = logging.getLogger(__name__)


def validate_schedule(
    matches: Sequence[Fixture],
    teams: Sequence[TeamRef | str],
    format: ScheduleFormat | str = ScheduleFormat.DOUBLE,
) -> ValidationReport:
    """Check pair counts, per-team counts, home/away balance and round exclusivity.

    Accepts plain Fixtures as well as ScheduledMatches. Never raises and never
    mutates its inputs.
    """
    try:
        fmt = ScheduleFormat.coerce(format)
        team_list = as_team_refs(teams or [])
        matches = list(matches or [])
    except (TypeError, ValueError) as exc:
        return ValidationReport.from_violations([f"Cannot validate schedule: {exc}"])

    names = {t.id: t.display_name for t in team_list}
    known = list(names)
    integrity: list[str] = []
    if len(known) != len(team_list):
        integrity.append("Team list contains duplicate ids")
    meetings_per_pair = fmt.meetings_per_pair
    expected_per_team = (len(known) - 1) * meetings_per_pair

    played: Counter[str] = Counter()
    home_count: Counter[str] = Counter()
    away_count: Counter[str] = Counter()
    by_pair: dict[tuple[str, str], list[Fixture]] = defaultdict(list)
    by_round: dict[int, Counter[str]] = defaultdict(Counter)

    for position, match in enumerate(matches, 1):
        home = getattr(match, "home", None)
        away = getattr(match, "away", None)
        round_number = getattr(match, "round", None)
        if not (isinstance(home, TeamRef) and isinstance(away, TeamRef)
                and isinstance(round_number, int)):
            integrity.append(f"Match #{position} is not a fixture: {match!r}")
            continue
        home_id, away_id = home.id, away.id
        if home_id == away_id:
            integrity.append(f"Round {round_number}: {names.get(home_id, home_id)} is drawn against itself")
            continue
        unknown = [tid for tid in (home_id, away_id) if tid not in names]
        if unknown:
            integrity.append(
                f"Round {round_number}: match {home_id} vs {away_id} names unknown team(s) "
                f"{', '.join(unknown)}"
            )
        played[home_id] += 1
        played[away_id] += 1
        home_count[home_id] += 1
        away_count[away_id] += 1
        by_pair[(home_id, away_id) if home_id <= away_id else (away_id, home_id)].append(match)
        by_round[round_number][home_id] += 1
        by_round[round_number][away_id] += 1

    violations: list[str] = []

    for team_id in known:
        count = played[team_id]
        if count != expected_per_team:
            violations.append(
                f"Team {names[team_id]} has {count} matches, expected {expected_per_team}"
            )

    for a, b in combinations(known, 2):
        key = (a, b) if a <= b else (b, a)
        pair_matches = by_pair.get(key, [])
        label = f"{names[key[0]]} vs {names[key[1]]}"
        if len(pair_matches) != meetings_per_pair:
            violations.append(
                f"Pair {label} has {len(pair_matches)} matches, expected {meetings_per_pair}"
            )
        if fmt is ScheduleFormat.DOUBLE and len(pair_matches) == 2:
            first, second = pair_matches
            if first.home.id == second.home.id:
                violations.append(
                    f"Pair {label} is played twice with {names[first.home.id]} at home"
                )

    for team_id in known:
        home, away = home_count[team_id], away_count[team_id]
        if abs(home - away) > 1:
            violations.append(
                f"Team {names[team_id]} is unbalanced: {home} home, {away} away "
                f"(difference {abs(home - away)})"
            )

    for round_number in sorted(by_round):
        for team_id, count in by_round[round_number].items():
            if count > 1:
                violations.append(
                    f"Round {round_number}: {names.get(team_id, team_id)} plays {count} times"
                )

    violations.extend(integrity)

    statistics = {
        "total_matches": len(matches),
        "teams_count": len(known),
        "expected_matches_per_team": expected_per_team,
        "head_to_head_pairs": len(by_pair),
    }
    report = ValidationReport.from_violations(violations, statistics)
    if report.valid:
        logger.info("Schedule valid: %d matches, %d teams", len(matches), len(known))
    else:
        logger.warning("Schedule has %d violation(s)", len(violations))
        for violation in violations:
            logger.debug("Violation: %s", violation)
    return report
