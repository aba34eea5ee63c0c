from typing import Callable, Dict

from foody.core.config import SOURCE_CSV, SOURCE_EDAMAM, SOURCE_SPOONACULAR, SourceConfig
from foody.core.errors import ConfigurationError
from foody.core.logging_config import get_logger
from foody.services.sources.base import RecipeSource
from foody.services.sources.csv_source import CsvSource
from foody.services.sources.edamam import EdamamSource
from foody.services.sources.spoonacular import SpoonacularSource

logger = get_logger(__name__)

SOURCE_FACTORIES: Dict[str, Callable[[SourceConfig], RecipeSource]] = {
    SOURCE_EDAMAM: lambda cfg: EdamamSource(
        cfg.edamam_app_id, cfg.edamam_app_key, timeout=cfg.request_timeout
    ),
    SOURCE_SPOONACULAR: lambda cfg: SpoonacularSource(
        cfg.spoonacular_app_key, timeout=cfg.request_timeout
    ),
    SOURCE_CSV: lambda cfg: CsvSource(cfg.csv_location),
}


def new_recipe_source(config: SourceConfig) -> RecipeSource:
    """
    Build the one recipe source named by ``config.source``.

    Raises:
        ConfigurationError: the source kind is unknown or the chosen source
            rejected its credentials or file path.
    """
    logger.info(f"Input source is '{config.source}'")

    factory = SOURCE_FACTORIES.get(config.source)
    if factory is None:
        choices = ", ".join(sorted(SOURCE_FACTORIES))
        raise ConfigurationError(
            f"'{config.source}' is not a valid choice of source (expected one of: {choices})"
        )
    return factory(config)
