from enum import Enum
from typing import List, Sequence, Tuple

from foody.core.config import RESULT_PAGE_SIZE
from foody.core.errors import InputError
from foody.models import Recipe

NEXT_PAGE = "f"
PREVIOUS_PAGE = "b"
CONFIRM = ""


class Navigation(Enum):
    MOVED = "moved"
    LAST_PAGE = "last_page"
    FIRST_PAGE = "first_page"
    CONFIRMED = "confirmed"


class ResultBrowser:
    """
    Pages through a fixed result list.

    ``offset`` is the 0-based index of the first entry on the current page.
    A transition that would leave the result list is rejected and the offset
    is left unchanged.
    """

    def __init__(self, results: Sequence[Recipe], page_size: int = RESULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page size must be positive, got {page_size}")
        self.results: List[Recipe] = list(results)
        self.page_size = page_size
        self.offset = 0

    def page(self) -> List[Tuple[int, Recipe]]:
        """Current page as (1-based global number, recipe) pairs."""
        end = min(self.offset + self.page_size, len(self.results))
        return [(idx + 1, self.results[idx]) for idx in range(self.offset, end)]

    def has_next_page(self) -> bool:
        return self.offset + self.page_size < len(self.results)

    def has_previous_page(self) -> bool:
        return self.offset - self.page_size >= 0

    def advance(self) -> Navigation:
        if not self.has_next_page():
            return Navigation.LAST_PAGE
        self.offset += self.page_size
        return Navigation.MOVED

    def retreat(self) -> Navigation:
        if not self.has_previous_page():
            return Navigation.FIRST_PAGE
        self.offset -= self.page_size
        return Navigation.MOVED

    def handle(self, command: str) -> Navigation:
        """
        Apply one navigation command.

        Raises:
            InputError: the command is not 'f', 'b' or empty.
        """
        command = command.strip()
        if command == CONFIRM:
            return Navigation.CONFIRMED
        if command == NEXT_PAGE:
            return self.advance()
        if command == PREVIOUS_PAGE:
            return self.retreat()
        raise InputError(
            f"'{command}' is not a valid choice, please enter '{NEXT_PAGE}', "
            f"'{PREVIOUS_PAGE}', or nothing to choose a recipe"
        )
