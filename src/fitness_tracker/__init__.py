"""In-memory fitness tracker: users, workout logs and an interactive menu."""

from fitness_tracker.exceptions import (
    ErrorCode,
    FitnessTrackerError,
    DuplicateUserError,
    InvalidAttributeError,
    InvalidWorkoutError,
    UserNotFoundError,
)
from fitness_tracker.models import User, UserUpdate, Workout
from fitness_tracker.registry import FitnessTracker

__version__ = "0.1.0"

__all__ = [
    "FitnessTracker",
    "User",
    "UserUpdate",
    "Workout",
    "ErrorCode",
    "FitnessTrackerError",
    "DuplicateUserError",
    "InvalidAttributeError",
    "InvalidWorkoutError",
    "UserNotFoundError",
]
