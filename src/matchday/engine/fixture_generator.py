"""Fixture generator — round-robin pairings via the circle method.

Team 0 stays fixed while the remaining teams rotate around a ring. Each
round pairs the fixed team with the ring's current front and pairs the
other ring positions symmetrically around it. With n teams (padded to an
even count with a bye) this gives n-1 rounds in which every pair meets
exactly once. A double round-robin appends the reversed fixtures as a
second leg.

Home/away is a deterministic function of round and slot unless the caller
supplies a seed, so identical inputs always produce identical fixture lists.
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from collections.abc import Iterable, Sequence

from matchday.errors import InvalidInput
from matchday.models.config import ScheduleFormat
from matchday.models.fixture import Fixture, Leg
from matchday.models.team import TeamRef, as_team_refs

logger = logging.getLogger(__name__)

BYE = TeamRef(id="__BYE__", name="BYE")


def generate_fixtures(
    teams: Sequence[TeamRef | str],
    format: ScheduleFormat | str = ScheduleFormat.DOUBLE,
    seed: int | None = None,
) -> list[Fixture]:
    """Generate a round-robin fixture list.

    Args:
        teams: Team references (or plain ids) in the order that seeds the circle.
        format: "single" (every pair once) or "double" (every pair twice, venues swapped).
        seed: If given, first-leg home/away is decided by a seeded coin instead of
              the deterministic rule. Same seed, same output.

    Returns:
        Fixtures ordered by round; for double format all first-leg fixtures come
        before the second leg. Rounds are 1-based and contiguous.

    Raises:
        InvalidInput: Fewer than 2 teams, or duplicate team ids.
    """
    fmt = _coerce_format(format)
    team_list = _check_teams(teams)

    roster = list(team_list)
    # Pad to even number with a bye sentinel
    if len(roster) % 2 != 0:
        roster.append(BYE)

    n = len(roster)
    rounds_per_leg = n - 1
    coin = random.Random(seed) if seed is not None else None

    first_leg: list[Fixture] = []
    for r in range(rounds_per_leg):
        for home, away in _round_pairings(roster, r):
            if home is BYE or away is BYE:
                continue
            if coin is not None and coin.random() < 0.5:
                home, away = away, home
            first_leg.append(Fixture(round=r + 1, home=home, away=away, leg=Leg.FIRST))

    fixtures = list(first_leg)
    if fmt is ScheduleFormat.DOUBLE:
        fixtures.extend(f.reversed(round_offset=rounds_per_leg) for f in first_leg)

    logger.info(
        "Generated %d fixtures over %d rounds (%s round-robin, %d teams%s)",
        len(fixtures),
        rounds_per_leg * fmt.meetings_per_pair,
        fmt.value,
        len(team_list),
        ", bye padded" if n != len(team_list) else "",
    )
    return fixtures


def _round_pairings(roster: list[TeamRef], r: int) -> list[tuple[TeamRef, TeamRef]]:
    """Return (home, away) pairs for 0-based round r of an even-sized roster."""
    fixed = roster[0]
    ring = roster[1:]
    size = len(ring)

    # Slot 0: fixed team against the ring front, alternating venue by round
    front = ring[r % size]
    pairs = [(fixed, front) if r % 2 == 0 else (front, fixed)]

    for i in range(1, len(roster) // 2):
        team_a = ring[(r + i) % size]
        team_b = ring[(r - i + size) % size]
        pairs.append((team_a, team_b))
    return pairs


def _check_teams(teams: Sequence[TeamRef | str]) -> list[TeamRef]:
    if teams is None:
        raise InvalidInput("Need at least 2 teams, got none")
    try:
        team_list = as_team_refs(teams)
    except ValueError as exc:
        raise InvalidInput(f"Invalid team reference: {exc}") from exc

    if len(team_list) < 2:
        raise InvalidInput(f"Need at least 2 teams, got {len(team_list)}")

    seen: set[str] = set()
    duplicates: list[str] = []
    for team in team_list:
        if team.id == BYE.id:
            raise InvalidInput(f"Team id {BYE.id!r} is reserved")
        if team.id in seen and team.id not in duplicates:
            duplicates.append(team.id)
        seen.add(team.id)
    if duplicates:
        raise InvalidInput(f"Duplicate team ids: {', '.join(duplicates)}")
    return team_list


def _coerce_format(format: ScheduleFormat | str) -> ScheduleFormat:
    try:
        return ScheduleFormat.coerce(format)
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc


def group_by_round(fixtures: Iterable[Fixture]) -> dict[int, list[Fixture]]:
    """Group fixtures by round number, rounds in ascending order, input order kept within a round."""
    rounds: dict[int, list[Fixture]] = defaultdict(list)
    for fixture in fixtures:
        rounds[fixture.round].append(fixture)
    return {r: rounds[r] for r in sorted(rounds)}


def matches_per_team(num_teams: int, format: ScheduleFormat | str = ScheduleFormat.DOUBLE) -> int:
    """Matches each team plays in a complete round-robin."""
    return (num_teams - 1) * ScheduleFormat.coerce(format).meetings_per_pair


def total_fixtures(num_teams: int, format: ScheduleFormat | str = ScheduleFormat.DOUBLE) -> int:
    """Total fixtures in a complete round-robin."""
    return num_teams * (num_teams - 1) // 2 * ScheduleFormat.coerce(format).meetings_per_pair


def total_rounds(num_teams: int, format: ScheduleFormat | str = ScheduleFormat.DOUBLE) -> int:
    """Total rounds, counting bye padding for odd team counts."""
    n = num_teams if num_teams % 2 == 0 else num_teams + 1
    return (n - 1) * ScheduleFormat.coerce(format).meetings_per_pair
