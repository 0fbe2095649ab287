"""Schedule materializer — dates, time slots and venues for a fixture list.

Rounds are processed in ascending order. Every match in a round shares the
round's date; the date advances by ``days_between_rounds`` after each round.
Time slots are cycled from the configured pool and venues come from the
override map, then the home team's own venue, then the unassigned sentinel.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Sequence

from matchday.engine.fixture_generator import group_by_round
from matchday.errors import InvalidConfiguration
from matchday.models.config import ScheduleConfig, SlotPolicy
from matchday.models.fixture import Fixture, ScheduledMatch

logger = logging.getLogger(__name__)


def materialize_schedule(
    fixtures: Sequence[Fixture], config: ScheduleConfig,
) -> list[ScheduledMatch]:
    """Assign a date, time slot and venue to every fixture.

    Args:
        fixtures: Fixtures grouped implicitly by round number.
        config: Schedule configuration (start date, day gap, slots, venue overrides).

    Returns:
        One ScheduledMatch per input fixture, in round order.

    Raises:
        InvalidConfiguration: Missing start date, empty or blank time slots,
            or a day gap below 1.
    """
    _check_config(config)

    slots = config.time_slots
    gap = dt.timedelta(days=config.days_between_rounds)
    current_date = config.start_date
    counter = 0
    matches: list[ScheduledMatch] = []

    for round_number, round_fixtures in group_by_round(fixtures).items():
        if config.slot_policy is SlotPolicy.PER_ROUND:
            counter = 0
        for fixture in round_fixtures:
            matches.append(
                ScheduledMatch.from_fixture(
                    fixture,
                    date=current_date,
                    time=slots[counter % len(slots)],
                    venue=resolve_venue(fixture, config),
                )
            )
            counter += 1
        logger.debug(
            "Round %d: %d matches on %s", round_number, len(round_fixtures), current_date,
        )
        current_date += gap

    if matches:
        logger.info(
            "Materialized %d matches from %s to %s",
            len(matches), matches[0].date.isoformat(), matches[-1].date.isoformat(),
        )
    return matches


def resolve_venue(fixture: Fixture, config: ScheduleConfig) -> str:
    """Venue for a fixture: override, then the home team's venue, then the sentinel."""
    override = config.venue_overrides.get(fixture.home.id)
    if override:
        return override
    if fixture.home.venue:
        return fixture.home.venue
    return config.unassigned_venue


def _check_config(config: ScheduleConfig | None) -> None:
    if config is None:
        raise InvalidConfiguration("Schedule configuration is required")
    if config.start_date is None:
        raise InvalidConfiguration("start_date is required")
    if not config.time_slots:
        raise InvalidConfiguration("time_slots must contain at least one slot")
    if any(not slot.strip() for slot in config.time_slots):
        raise InvalidConfiguration("time_slots must not contain blank entries")
    if config.days_between_rounds < 1:
        raise InvalidConfiguration(
            f"days_between_rounds must be >= 1, got {config.days_between_rounds}"
        )
