from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from foody.core.errors import ConfigurationError, DecodeError, EmptyResultError
from foody.core.logging_config import get_logger
from foody.models import Recipe
from foody.services.sources.base import RemoteRecipeSource

logger = get_logger(__name__)

# https://spoonacular.com/food-api/docs


class SpoonacularResult(BaseModel):
    title: Optional[str] = None
    image: Optional[str] = None
    source_url: Optional[str] = Field(default=None, alias="sourceUrl")
    servings: Optional[int] = None


class SpoonacularResponse(BaseModel):
    results: Optional[List[Optional[SpoonacularResult]]] = None


class SpoonacularSource(RemoteRecipeSource):
    name = "Spoonacular"
    api_search_base = "https://api.spoonacular.com/recipes/complexSearch"
    MAX_RESULTS = 100

    def __init__(self, app_key: str, timeout: Optional[float] = None):
        if not app_key:
            raise ConfigurationError("spoonacular: missing app key")
        super().__init__(timeout=timeout)
        self.app_key = app_key

    def query_params(self, query: str) -> Dict[str, str]:
        return {
            "apiKey": self.app_key,
            "addRecipeInformation": "true",
            "number": str(self.MAX_RESULTS),
            "query": query,
        }

    def fetch_recipes(self, query: str) -> List[Recipe]:
        payload = self.get_payload(query)
        try:
            response = SpoonacularResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"spoonacular: unexpected response shape: {exc}") from exc

        # Spoonacular reports misses as an error, unlike the other sources.
        results = response.results or []
        if not results:
            raise EmptyResultError(query)

        logger.info(f"Found {len(results)} total results for query '{query}'")
        return [self._adapt(result if result is not None else SpoonacularResult()) for result in results]

    def _adapt(self, data: SpoonacularResult) -> Recipe:
        return Recipe(
            name=data.title or "",
            url=data.source_url or "",
            image_url=data.image or "",
            servings=max(data.servings or 0, 0),
        )
