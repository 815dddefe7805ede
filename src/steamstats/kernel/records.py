"""Pydantic models for parsed stats and achievements."""

from typing import Dict
from pydantic import BaseModel, ConfigDict, Field


class Achievement(BaseModel):
    """An achievement record discovered in a stats dump."""
    id: str  # Raw identifier token, e.g. "ach_first_blood"
    name: str = ""  # First "english" line after the id
    display: str = ""  # Second "english" line after the id (description)

    model_config = ConfigDict(frozen=True, extra="forbid")


class Stat(BaseModel):
    """A stat record discovered in a stats dump."""
    id: str  # Raw identifier token, e.g. "stat_kills"
    display: str = ""  # Next "name" line after the id

    model_config = ConfigDict(frozen=True, extra="forbid")


class ParseResult(BaseModel):
    """Ordered records produced by a single parse pass.

    Both sequences keep discovery order. Duplicate ids are kept as-is.
    """
    achievements: tuple[Achievement, ...] = Field(default_factory=tuple)
    stats: tuple[Stat, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def counts(self) -> Dict[str, int]:
        """Number of records per category."""
        return {"achievements": len(self.achievements), "stats": len(self.stats)}

    def achievement_ids(self) -> list[str]:
        """Achievement ids in discovery order."""
        return [a.id for a in self.achievements]

    def stat_ids(self) -> list[str]:
        """Stat ids in discovery order."""
        return [s.id for s in self.stats]
