"""In-memory registry of users and their workout logs.

The registry is the only owner of user records. Every operation is a single
synchronous step: it either completes or raises before mutating anything.
There is no internal locking; a host that shares one registry between
threads must serialize calls itself.
"""

import logging
from typing import Dict, List, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    DuplicateUserError,
    InvalidAttributeError,
    InvalidWorkoutError,
    UserNotFoundError,
)
from .models import UPDATABLE_FIELDS, User, UserUpdate, Workout

logger = logging.getLogger(__name__)


class FitnessTracker:
    """
    Registry of users keyed by id.

    Users are enumerated in the order they were added. Lookups that take a
    user id raise UserNotFoundError when the id is unknown, except
    get_user, which returns None.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def _require_user(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            logger.warning(f"User not found: {user_id}")
            raise UserNotFoundError(user_id)
        return user

    def add_user(
        self,
        user_id: str,
        name: str,
        age: int,
        weight: float,
        height: float,
    ) -> None:
        """
        Register a new user with an empty workout log.

        Args:
            user_id: Unique identifier chosen by the caller
            name: Display name
            age: Age in years, must be positive
            weight: Body weight, must be positive
            height: Height, must be positive

        Raises:
            DuplicateUserError: If user_id is already registered
            InvalidAttributeError: If age, weight or height is not positive
        """
        if user_id in self._users:
            logger.warning(f"Rejected duplicate user id: {user_id}")
            raise DuplicateUserError(user_id)

        for field_name, value in (("age", age), ("weight", weight), ("height", height)):
            if not value > 0:
                logger.warning(f"Rejected user {user_id}: {field_name}={value}")
                raise InvalidAttributeError(field=field_name)

        self._users[user_id] = User(
            id=user_id,
            name=name,
            age=age,
            weight=weight,
            height=height,
        )
        logger.info(f"Added user {user_id}")

    def log_workout(self, user_id: str, workout: Workout) -> None:
        """
        Append a workout to a user's log.

        Raises:
            UserNotFoundError: If user_id is not registered
            InvalidWorkoutError: If duration <= 0 or calories_burned < 0
        """
        user = self._require_user(user_id)

        if workout.duration <= 0:
            logger.warning(f"Rejected workout for {user_id}: duration={workout.duration}")
            raise InvalidWorkoutError(field="duration")
        if workout.calories_burned < 0:
            logger.warning(
                f"Rejected workout for {user_id}: calories_burned={workout.calories_burned}"
            )
            raise InvalidWorkoutError(field="calories_burned")

        user.workouts.append(workout)
        logger.info(f"Logged {workout.type} workout for {user_id} ({len(user.workouts)} total)")

    def get_all_workouts_of(self, user_id: str) -> List[Workout]:
        """Return a copy of the user's workouts in logging order."""
        return list(self._require_user(user_id).workouts)

    def get_all_workouts_by_type(self, user_id: str, workout_type: str) -> List[Workout]:
        """Return the user's workouts whose type matches case-insensitively."""
        user = self._require_user(user_id)
        return [w for w in user.workouts if w.matches_type(workout_type)]

    def get_users(self) -> List[User]:
        """Return all users in the order they were added."""
        return [user.snapshot() for user in self._users.values()]

    def get_user(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None if there is none."""
        user = self._users.get(user_id)
        if user is None:
            return None
        return user.snapshot()

    def update_user(
        self,
        user_id: str,
        updated_fields: Union[UserUpdate, Mapping[str, object]],
    ) -> None:
        """
        Overwrite the mutable fields present in updated_fields.

        Fields absent from the update keep their current value. The id and
        workout log can't be changed here. New age, weight and height values
        are stored as given, without a positivity check.

        Raises:
            UserNotFoundError: If user_id is not registered
            InvalidAttributeError: If the update names a field that is not
                updatable or has a value of the wrong type
        """
        user = self._require_user(user_id)

        if isinstance(updated_fields, UserUpdate):
            patch = updated_fields
        else:
            for key in updated_fields:
                if key not in UPDATABLE_FIELDS:
                    raise InvalidAttributeError(
                        f"Field '{key}' cannot be updated.", field=str(key)
                    )
            try:
                patch = UserUpdate.model_validate(dict(updated_fields))
            except PydanticValidationError as e:
                raise InvalidAttributeError(
                    f"Invalid user update: {e.error_count()} field(s) rejected.",
                    details={"errors": e.errors(include_url=False)},
                ) from e

        if patch.is_empty:
            logger.info(f"Update for user {user_id} had no changes")
            return

        changes = patch.changes()
        for field_name, value in changes.items():
            setattr(user, field_name, value)
        logger.info(f"Updated user {user_id}: {', '.join(changes)}")
