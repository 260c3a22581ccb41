"""Data models for users, workouts and partial user updates."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Workout:
    """
    A single logged workout session.

    Immutable once created. Validation of duration and calories happens
    when the workout is logged against a user, not here.
    """
    type: str
    duration: int  # minutes
    calories_burned: int
    date: datetime = field(default_factory=datetime.now)

    def matches_type(self, workout_type: str) -> bool:
        """Case-insensitive comparison against a workout type label."""
        return self.type.casefold() == workout_type.casefold()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "duration": self.duration,
            "calories_burned": self.calories_burned,
            "date": self.date.isoformat(),
        }


@dataclass
class User:
    """A registered user and their chronological workout log."""
    id: str
    name: str
    age: int
    weight: float
    height: float
    workouts: List[Workout] = field(default_factory=list)

    def snapshot(self) -> "User":
        """Copy of this record whose workout list is independent of the original."""
        return replace(self, workouts=list(self.workouts))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "weight": self.weight,
            "height": self.height,
            "workouts": [w.to_dict() for w in self.workouts],
        }


UPDATABLE_FIELDS = ("name", "age", "weight", "height")


class UserUpdate(BaseModel):
    """
    Partial update for a user's mutable fields.

    Only fields that were explicitly given a non-None value are applied.
    Positivity of age, weight and height is not checked.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, description="New display name")
    age: Optional[int] = Field(None, description="New age in years")
    weight: Optional[float] = Field(None, description="New weight")
    height: Optional[float] = Field(None, description="New height")

    def changes(self) -> Dict[str, Any]:
        """Fields present in this patch, keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)

    @property
    def is_empty(self) -> bool:
        return not self.changes()
