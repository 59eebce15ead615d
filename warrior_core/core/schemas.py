"""Pydantic models for the externally reportable unit record."""

from __future__ import annotations

from pydantic import BaseModel, Field


class UnitSchema(BaseModel):
    """Identity and vitals of a unit.

    Score, position, bonds, effects and abilities are runtime state and are
    deliberately not part of this record.
    """

    name: str
    character: str
    max_health: int = Field(alias="maxHealth", gt=0)
    health: int = Field(ge=0)

    class Config:
        frozen = True
        populate_by_name = True
        extra = "forbid"
