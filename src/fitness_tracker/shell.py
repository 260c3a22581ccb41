"""
Interactive menu for the Fitness Tracker.

Reads menu selections and field values, converts raw text to typed values,
calls the registry and renders results. The shell holds no business state
of its own; a failed operation is reported and the loop continues.
"""

import logging
import math
import re
from datetime import datetime
from typing import Callable, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .exceptions import FitnessTrackerError
from .models import User, UserUpdate, Workout
from .registry import FitnessTracker

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")

MENU = {
    "1": "Add User",
    "2": "Log Workout",
    "3": "Get All Workouts",
    "4": "Get Workouts By Type",
    "5": "Get Users",
    "6": "Get User Details",
    "7": "Update User",
    "8": "Exit",
}

EXIT_CHOICE = "8"


class InputError(ValueError):
    """Raised when typed text can't be converted to the expected value."""


def parse_int(text: str, label: str) -> int:
    """Parse a whole number typed at a prompt."""
    value = text.strip()
    if not _INT_RE.match(value):
        raise InputError(f"{label} must be a whole number, got '{text}'.")
    return int(value)


def parse_float(text: str, label: str) -> float:
    """Parse a finite decimal number typed at a prompt."""
    try:
        value = float(text.strip())
    except ValueError:
        raise InputError(f"{label} must be a number, got '{text}'.") from None
    if not math.isfinite(value):
        raise InputError(f"{label} must be a finite number, got '{text}'.")
    return value


class InteractiveShell:
    """Menu loop driving a FitnessTracker."""

    def __init__(
        self,
        tracker: Optional[FitnessTracker] = None,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
        json_indent: int = 2,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.tracker = tracker if tracker is not None else FitnessTracker()
        self.console = console or Console()
        self._input = input_func or self.console.input
        self.json_indent = json_indent
        self._clock = clock
        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.add_user,
            "2": self.log_workout,
            "3": self.show_workouts,
            "4": self.show_workouts_by_type,
            "5": self.show_users,
            "6": self.show_user,
            "7": self.update_user,
        }

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def print_menu(self) -> None:
        self.console.print()
        self.console.print(Panel("[bold]Fitness Tracker[/bold]", expand=False))
        for key, label in MENU.items():
            self.console.print(f"{key}. {label}")

    def run(self) -> None:
        """Run the menu loop until the exit choice or end of input."""
        while True:
            self.print_menu()
            try:
                choice = self.ask("Enter your choice: ").strip()
                if choice == EXIT_CHOICE:
                    self.console.print("Exiting...")
                    return
                self.dispatch(choice)
            except (EOFError, KeyboardInterrupt):
                # End of input or Ctrl-C at any prompt, including mid-operation
                self.console.print()
                self.console.print("Exiting...")
                return

    def dispatch(self, choice: str) -> bool:
        """
        Run the handler for a menu choice.

        Returns:
            True if the operation succeeded, False if the choice was invalid
            or the operation failed.
        """
        handler = self._handlers.get(choice)
        if handler is None:
            self.console.print("[yellow]Invalid choice. Please try again.[/yellow]")
            return False

        try:
            handler()
        except FitnessTrackerError as e:
            logger.debug(f"Operation {MENU[choice]!r} failed: {e!r}")
            self.console.print(f"[red]Error: {escape(e.message)}[/red]")
            return False
        except InputError as e:
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            return False
        return True

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_user(self) -> None:
        user_id = self.ask("Enter User ID: ")
        name = self.ask("Enter Name: ")
        age = parse_int(self.ask("Enter Age: "), "Age")
        weight = parse_float(self.ask("Enter Weight: "), "Weight")
        height = parse_float(self.ask("Enter Height: "), "Height")
        self.tracker.add_user(user_id, name, age, weight, height)
        self.console.print("[green]User added successfully![/green]")

    def log_workout(self) -> None:
        user_id = self.ask("Enter User ID: ")
        workout_type = self.ask("Enter Workout Type: ")
        duration = parse_int(self.ask("Enter Duration (minutes): "), "Duration")
        calories = parse_int(self.ask("Enter Calories Burned: "), "Calories burned")
        workout = Workout(
            type=workout_type,
            duration=duration,
            calories_burned=calories,
            date=self._clock(),
        )
        self.tracker.log_workout(user_id, workout)
        self.console.print("[green]Workout logged successfully![/green]")

    def show_workouts(self) -> None:
        user_id = self.ask("Enter User ID: ")
        workouts = self.tracker.get_all_workouts_of(user_id)
        self.render_workouts(workouts, title=f"Workouts for {user_id}")

    def show_workouts_by_type(self) -> None:
        user_id = self.ask("Enter User ID: ")
        workout_type = self.ask("Enter Workout Type: ")
        workouts = self.tracker.get_all_workouts_by_type(user_id, workout_type)
        self.render_workouts(workouts, title=f"{workout_type} workouts for {user_id}")

    def show_users(self) -> None:
        users = self.tracker.get_users()
        self.render_json([u.to_dict() for u in users])

    def show_user(self) -> None:
        user_id = self.ask("Enter User ID: ")
        user = self.tracker.get_user(user_id)
        if user is None:
            self.console.print(f"[yellow]No user with ID {escape(user_id)}.[/yellow]")
            return
        self.render_user(user)

    def update_user(self) -> None:
        user_id = self.ask("Enter User ID: ")
        name = self.ask("Enter New Name (leave blank to skip): ")
        age = self.ask("Enter New Age (leave blank to skip): ")
        weight = self.ask("Enter New Weight (leave blank to skip): ")
        height = self.ask("Enter New Height (leave blank to skip): ")

        changes = {}
        if name:
            changes["name"] = name
        if age.strip():
            changes["age"] = parse_int(age, "Age")
        if weight.strip():
            changes["weight"] = parse_float(weight, "Weight")
        if height.strip():
            changes["height"] = parse_float(height, "Height")

        self.tracker.update_user(user_id, UserUpdate(**changes))
        self.console.print("[green]User updated successfully![/green]")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_workouts(self, workouts: List[Workout], title: str) -> None:
        if not workouts:
            self.console.print("No workouts found.")
            return

        table = Table(title=escape(title), box=box.ROUNDED)
        table.add_column("#", justify="right")
        table.add_column("Type", style="cyan")
        table.add_column("Duration (min)", justify="right")
        table.add_column("Calories", justify="right")
        table.add_column("Date")
        for i, w in enumerate(workouts, start=1):
            table.add_row(
                str(i),
                escape(w.type),
                str(w.duration),
                str(w.calories_burned),
                w.date.strftime("%Y-%m-%d %H:%M"),
            )
        self.console.print(table)

    def render_user(self, user: User) -> None:
        self.render_json(user.to_dict())

    def render_json(self, data) -> None:
        self.console.print_json(data=data, indent=self.json_indent)
