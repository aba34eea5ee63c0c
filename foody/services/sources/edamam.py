from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from foody.core.errors import ConfigurationError, DecodeError
from foody.core.logging_config import get_logger
from foody.models import Recipe
from foody.services.sources.base import RemoteRecipeSource

logger = get_logger(__name__)

# https://developer.edamam.com/edamam-docs-recipe-api


class EdamamRecipe(BaseModel):
    label: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    ingredients: Optional[List[Any]] = None
    yield_: Optional[float] = Field(default=None, alias="yield")


class EdamamHit(BaseModel):
    recipe: Optional[EdamamRecipe] = None


class EdamamResponse(BaseModel):
    hits: Optional[List[Optional[EdamamHit]]] = None


class EdamamSource(RemoteRecipeSource):
    name = "Edamam"
    api_search_base = "https://api.edamam.com/search"
    MAX_HITS = 100

    def __init__(self, app_id: str, app_key: str, timeout: Optional[float] = None):
        if not app_id:
            raise ConfigurationError("edamam: missing app id")
        if not app_key:
            raise ConfigurationError("edamam: missing app key")
        super().__init__(timeout=timeout)
        self.app_id = app_id
        self.app_key = app_key

    def query_params(self, query: str) -> Dict[str, str]:
        return {
            "app_key": self.app_key,
            "app_id": self.app_id,
            "from": "0",
            "to": str(self.MAX_HITS),
            "q": query,
        }

    def fetch_recipes(self, query: str) -> List[Recipe]:
        payload = self.get_payload(query)
        try:
            response = EdamamResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"edamam: unexpected response shape: {exc}") from exc

        # Zero hits is a valid, empty answer for Edamam; null counts as zero.
        hits = response.hits or []
        logger.info(f"Found {len(hits)} total results for query '{query}'")
        return [
            self._adapt(hit.recipe if hit is not None and hit.recipe is not None else EdamamRecipe())
            for hit in hits
        ]

    def _adapt(self, data: EdamamRecipe) -> Recipe:
        return Recipe(
            name=data.label or "",
            url=data.url or "",
            image_url=data.image or "",
            num_ingredients=len(data.ingredients or []),
            servings=max(int(data.yield_ or 0), 0),
        )
