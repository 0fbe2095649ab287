"""Team reference model — the only team data the scheduler needs."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TeamRef(BaseModel):
    """An opaque team identifier plus optional display name and home venue."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Opaque identifier, e.g. a document id or short code")
    name: str | None = Field(default=None, description="Display name")
    venue: str | None = Field(default=None, description="Default home stadium")

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            v = v.strip()
        return v

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def __str__(self) -> str:
        return self.display_name


def as_team_refs(teams: Iterable[TeamRef | str]) -> list[TeamRef]:
    """Coerce plain identifiers into TeamRef, leaving TeamRef instances untouched."""
    refs: list[TeamRef] = []
    for team in teams:
        if isinstance(team, TeamRef):
            refs.append(team)
        else:
            refs.append(TeamRef(id=team))
    return refs
