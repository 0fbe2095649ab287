"""Schedule configuration model.

The configuration is an immutable value passed explicitly into the
materializer. Field validation here covers types and normalization only;
the semantic checks (start date present, slots non-empty, positive day
gap) are enforced by the materializer so they fail as InvalidConfiguration
at the point of use.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from matchday.errors import InvalidConfiguration

UNASSIGNED_VENUE = "TBD"
DEFAULT_TIME_SLOTS = ("18:00", "19:30", "21:00")


class ScheduleFormat(str, Enum):
    """Round-robin format: every pair meets once or twice."""
    SINGLE = "single"
    DOUBLE = "double"

    @classmethod
    def coerce(cls, value: "ScheduleFormat | str") -> "ScheduleFormat":
        """Accept enum members, short names and the long '-round-robin' spellings."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower().replace("_", "-")
        if text.endswith("-round-robin"):
            text = text[: -len("-round-robin")]
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"Unknown schedule format {value!r}; expected 'single' or 'double'"
            ) from None

    @property
    def meetings_per_pair(self) -> int:
        return 2 if self is ScheduleFormat.DOUBLE else 1


class SlotPolicy(str, Enum):
    """How the time-slot counter advances."""
    CONTINUOUS = "continuous"  # one counter across the whole schedule
    PER_ROUND = "per_round"    # counter restarts at every round


class ScheduleConfig(BaseModel):
    """Options for turning fixtures into a dated calendar."""
    model_config = ConfigDict(frozen=True)

    start_date: dt.date | None = Field(default=None, description="Calendar date of round 1")
    format: ScheduleFormat = Field(default=ScheduleFormat.DOUBLE)
    days_between_rounds: int = Field(default=7, description="Gap in days between round dates")
    time_slots: tuple[str, ...] = Field(
        default=DEFAULT_TIME_SLOTS,
        description="Time-of-day strings cycled across matches",
    )
    venue_overrides: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Team id -> venue, takes precedence over the team's own venue",
    )
    slot_policy: SlotPolicy = Field(default=SlotPolicy.CONTINUOUS)
    unassigned_venue: str = Field(default=UNASSIGNED_VENUE)
    seed: int | None = Field(
        default=None,
        description="Opt-in seed for randomized first-leg home/away assignment",
    )

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        return ScheduleFormat.coerce(v)

    @field_validator("venue_overrides", mode="after")
    @classmethod
    def freeze_venue_overrides(cls, v):
        return MappingProxyType(dict(v))

    @field_serializer("venue_overrides")
    def dump_venue_overrides(self, v) -> dict[str, str]:
        return dict(v)

    @field_validator("time_slots", mode="before")
    @classmethod
    def strip_time_slots(cls, v):
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return tuple(str(slot).strip() for slot in v)
        return v

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> "ScheduleConfig":
        """Build a config from plain data, reporting problems as InvalidConfiguration."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidConfiguration(f"Invalid schedule configuration: {exc}") from exc

    def with_overrides(self, **changes: Any) -> "ScheduleConfig":
        """Return a re-validated copy with some fields replaced; None values are ignored."""
        merged = self.model_dump()
        merged.update({k: v for k, v in changes.items() if v is not None})
        return ScheduleConfig.parse(merged)
