from __future__ import annotations

from pydantic import BaseModel, Field


class AttemptStat(BaseModel):
    username: str
    attempts: int = Field(ge=0)


class RegistrySnapshot(BaseModel):
    """Point-in-time summary of a registry.

    Each table is read separately, so ``claimed`` and the attempt figures may
    come from slightly different moments under concurrent use.
    """

    claimed: int = Field(ge=0, description="Number of claimed usernames")
    tracked: int = Field(ge=0, description="Number of usernames with at least one availability check")
    total_attempts: int = Field(ge=0)
    top: list[AttemptStat] = Field(default_factory=list)
