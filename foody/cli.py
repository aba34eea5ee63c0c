"""Foody - find a recipe from the command line."""
import logging
import sys

import click

from foody.core.config import RESULT_PAGE_SIZE, BrowseSettings, load_source_config
from foody.core.errors import FoodyError
from foody.core.logging_config import get_logger, setup_logging
from foody.services.recipe_service import SOURCE_FACTORIES, new_recipe_source
from foody.session import RecipeSession

logger = get_logger(__name__)


def _read_line() -> str:
    return input()


@click.command()
@click.version_option(version="0.1.0")
@click.option(
    "--source",
    type=click.Choice(sorted(SOURCE_FACTORIES)),
    default=None,
    help="Choice of recipe source [env: SOURCE]",
)
@click.option("--spoonacular-app-key", default=None, help="App key for Spoonacular [env: SPOONACULAR_APP_KEY]")
@click.option("--edamam-app-id", default=None, help="App id for Edamam [env: EDAMAM_APP_ID]")
@click.option("--edamam-app-key", default=None, help="App key for Edamam [env: EDAMAM_APP_KEY]")
@click.option("--csv-location", default=None, help="File location for the recipe CSV [env: CSV_LOCATION]")
@click.option("--page-size", default=RESULT_PAGE_SIZE, show_default=True, type=click.IntRange(min=1), help="Results per page")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
def cli(source, spoonacular_app_key, edamam_app_id, edamam_app_key, csv_location, page_size, log_level):
    """Search one recipe source, browse the results and pick a recipe."""
    setup_logging(getattr(logging, log_level.upper()))

    config = load_source_config(
        source=source,
        spoonacular_app_key=spoonacular_app_key,
        edamam_app_id=edamam_app_id,
        edamam_app_key=edamam_app_key,
        csv_location=csv_location,
    )

    try:
        recipe_source = new_recipe_source(config)
        session = RecipeSession(
            recipe_source,
            read_line=_read_line,
            write=click.echo,
            settings=BrowseSettings(page_size=page_size),
        )
        session.run()
    except FoodyError as exc:
        logger.error(str(exc))
        sys.exit(1)
    except EOFError:
        logger.error("Input closed before a recipe was chosen")
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
