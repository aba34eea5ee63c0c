import time
from enum import Enum
from typing import Callable, Optional

from foody.core.config import BrowseSettings
from foody.core.errors import InputError
from foody.core.logging_config import get_logger
from foody.models import Recipe
from foody.services.browser import NEXT_PAGE, PREVIOUS_PAGE, Navigation, ResultBrowser
from foody.services.display import ImageRenderer, format_page, render_detail
from foody.services.selection import SelectionFlow
from foody.services.sources.base import RecipeSource

logger = get_logger(__name__)


class SessionState(Enum):
    PROMPTING = "prompting"
    PAGINATING = "paginating"
    SELECTING = "selecting"
    DONE = "done"


class RecipeSession:
    """
    One interactive search: ask for a query, page through the results,
    then pick a recipe and show its details.

    Input and output are injected so the loop can be driven without a
    terminal. Prompts and notices go through ``write`` so the log level
    never hides them. ``read_line`` raises EOFError when input is exhausted; that
    error is not handled here.
    """

    def __init__(
        self,
        source: RecipeSource,
        read_line: Callable[[], str],
        write: Callable[[str], None],
        settings: BrowseSettings = BrowseSettings(),
        renderer: Optional[ImageRenderer] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.source = source
        self.read_line = read_line
        self.write = write
        self.settings = settings
        self.renderer = renderer or ImageRenderer()
        self.sleep = sleep

        self.state = SessionState.PROMPTING
        self.query = ""
        self.browser: Optional[ResultBrowser] = None
        self.selection: Optional[SelectionFlow] = None
        self.chosen: Optional[Recipe] = None

    def run(self) -> Optional[Recipe]:
        """Drive the session to completion and return the chosen recipe, if any."""
        handlers = {
            SessionState.PROMPTING: self._prompt,
            SessionState.PAGINATING: self._paginate,
            SessionState.SELECTING: self._select,
        }
        while self.state is not SessionState.DONE:
            handlers[self.state]()
        return self.chosen

    def _prompt(self) -> None:
        self.write("What kind of food are you looking for? Enter one or more words separated by spaces")
        query = self.read_line().strip()
        if not query:
            return

        self.query = query
        recipes = self.source.fetch_recipes(query)
        if not recipes:
            self.write(f"No results found for search query '{query}', exiting")
            self.state = SessionState.DONE
            return

        self.write(f"Found {len(recipes)} total recipe recommendations")
        self.browser = ResultBrowser(recipes, page_size=self.settings.page_size)
        self.selection = SelectionFlow(recipes, exit_token=self.settings.exit_token)
        self.state = SessionState.PAGINATING

    def _paginate(self) -> None:
        self.write(format_page(self.browser.page(), self.settings.color, self.settings.reset))
        self.write(
            f"Hit '{NEXT_PAGE}' to go the next page of results, '{PREVIOUS_PAGE}' to go back, "
            "or enter if you've found a recipe you like"
        )

        try:
            outcome = self.browser.handle(self.read_line())
        except InputError as exc:
            self.write(str(exc))
            return

        if outcome is Navigation.CONFIRMED:
            self.state = SessionState.SELECTING
        elif outcome is Navigation.LAST_PAGE:
            self.write("Cannot go forward, this is the last page")
            self.sleep(self.settings.notice_delay)
        elif outcome is Navigation.FIRST_PAGE:
            self.write("Cannot go back, this is the first page")
            self.sleep(self.settings.notice_delay)

    def _select(self) -> None:
        self.write(
            f"Find something good? Enter the recipe number or '{self.settings.exit_token}' for no"
        )
        try:
            recipe = self.selection.select(self.read_line())
        except InputError as exc:
            # Re-prompt without telling the user why.
            logger.debug(f"Ignoring selection: {exc}")
            return

        if recipe is None:
            self.write("That's fair. Goodbye.")
            self.state = SessionState.DONE
            return

        logger.info(f"Chose '{recipe.name}'")
        self.write("You chose:")
        render_detail(recipe, self.write, self.renderer, self.settings.color, self.settings.reset)
        self.chosen = recipe
        self.state = SessionState.DONE
