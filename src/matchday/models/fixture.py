"""Fixture and ScheduledMatch models.

A Fixture is an abstract pairing tagged with a round and a leg. The
materializer turns it into a ScheduledMatch by adding a date, a time slot
and a venue; the pairing itself is never changed.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from matchday.models.team import TeamRef


class Leg(str, Enum):
    """Which pass through the pairings a fixture belongs to."""
    FIRST = "first"
    SECOND = "second"


class Fixture(BaseModel):
    """An ordered (home, away) pairing in a given round."""
    model_config = ConfigDict(frozen=True)

    round: int = Field(ge=1, description="1-based round number")
    home: TeamRef
    away: TeamRef
    leg: Leg = Field(default=Leg.FIRST)

    @model_validator(mode="after")
    def no_self_match(self) -> "Fixture":
        if self.home.id == self.away.id:
            raise ValueError(f"Team {self.home.id!r} cannot play itself")
        return self

    @property
    def pair_key(self) -> tuple[str, str]:
        """Unordered pair identity, independent of home/away."""
        a, b = self.home.id, self.away.id
        return (a, b) if a <= b else (b, a)

    @property
    def is_first_leg(self) -> bool:
        return self.leg is Leg.FIRST

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home.id, self.away.id)

    def reversed(self, round_offset: int = 0) -> "Fixture":
        """Return the return fixture: swapped venue, second leg, shifted round."""
        return Fixture(
            round=self.round + round_offset,
            home=self.away,
            away=self.home,
            leg=Leg.SECOND,
        )

    def __str__(self) -> str:
        return f"R{self.round}: {self.home} vs {self.away}"


class ScheduledMatch(Fixture):
    """A fixture with a concrete date, time slot and venue."""

    date: dt.date
    time: str
    venue: str
    matchday: int = Field(ge=1)

    @classmethod
    def from_fixture(
        cls, fixture: Fixture, date: dt.date, time: str, venue: str,
    ) -> "ScheduledMatch":
        return cls(
            round=fixture.round,
            home=fixture.home,
            away=fixture.away,
            leg=fixture.leg,
            date=date,
            time=time,
            venue=venue,
            matchday=fixture.round,
        )

    def as_fixture(self) -> Fixture:
        return Fixture(round=self.round, home=self.home, away=self.away, leg=self.leg)

    def to_record(self) -> dict[str, object]:
        """Flat dict suitable for persistence or tabular export."""
        return {
            "round": self.round,
            "matchday": self.matchday,
            "date": self.date.isoformat(),
            "time": self.time,
            "home_team": self.home.id,
            "away_team": self.away.id,
            "venue": self.venue,
            "is_first_leg": self.is_first_leg,
        }

    def __str__(self) -> str:
        return (
            f"R{self.round} {self.date.isoformat()} {self.time}: "
            f"{self.home} vs {self.away} @ {self.venue}"
        )
