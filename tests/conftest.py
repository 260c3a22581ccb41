"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from fitness_tracker.models import Workout
from fitness_tracker.registry import FitnessTracker


@pytest.fixture
def tracker():
    """Empty registry."""
    return FitnessTracker()


@pytest.fixture
def tracker_with_user(tracker):
    """Registry holding a single user 'u1'."""
    tracker.add_user("u1", "Alice", 30, 62.5, 168.0)
    return tracker


@pytest.fixture
def make_workout():
    """Factory for workouts with a fixed date."""

    def _make(
        workout_type: str = "Run",
        duration: int = 30,
        calories_burned: int = 300,
        date: datetime = datetime(2024, 3, 1, 7, 30),
    ) -> Workout:
        return Workout(
            type=workout_type,
            duration=duration,
            calories_burned=calories_burned,
            date=date,
        )

    return _make
