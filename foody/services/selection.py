from typing import Optional, Sequence

from foody.core.errors import InputError
from foody.models import Recipe
from foody.utils.numbers import parse_int


class SelectionFlow:
    """Validates the recipe number a user picks from a result list."""

    def __init__(self, results: Sequence[Recipe], exit_token: str = "n"):
        self.results = results
        self.exit_token = exit_token

    def is_exit(self, choice: str) -> bool:
        return choice.strip() == self.exit_token

    def parse_choice(self, choice: str) -> int:
        """
        Convert a 1-based recipe number into a 0-based index.

        Raises:
            InputError: the choice is not an integer in ``1..len(results)``.
        """
        choice = choice.strip()
        try:
            number = parse_int(choice)
        except ValueError:
            raise InputError(f"'{choice}' is not a number")
        if number < 1 or number > len(self.results):
            raise InputError(f"{number} is not between 1 and {len(self.results)}")
        return number - 1

    def select(self, choice: str) -> Optional[Recipe]:
        """Return the chosen recipe, or None when the user asked to exit."""
        if self.is_exit(choice):
            return None
        return self.results[self.parse_choice(choice)]
