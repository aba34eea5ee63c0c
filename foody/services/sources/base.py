import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests

from foody.core.errors import DecodeError, TransportError
from foody.core.logging_config import get_logger
from foody.models import Recipe

logger = get_logger(__name__)


class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def fetch_recipes(self, query: str) -> List[Recipe]:
        """
        Fetch recipes matching a trimmed, non-empty search query.
        Must return a list of canonical `Recipe` objects, in source order.
        """
        pass


class RemoteRecipeSource(RecipeSource):
    """A recipe search API reached with a single GET request."""

    api_search_base: str = ""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    @abstractmethod
    def query_params(self, query: str) -> Dict[str, str]:
        pass

    def build_request_url(self, query: str) -> str:
        request = requests.PreparedRequest()
        request.prepare_url(self.api_search_base, self.query_params(query))
        return request.url

    def get_payload(self, query: str) -> Any:
        url = self.build_request_url(query)
        logger.debug(f"Making request to {self.name} API with url: {url}")

        try:
            with requests.get(url, timeout=self.timeout) as response:
                body = response.text
                status_code = response.status_code
        except requests.RequestException as exc:
            raise TransportError(f"{self.name}: request failed: {exc}") from exc

        if status_code != requests.codes.ok:
            raise TransportError(
                f"{self.name}: received non-ok response {status_code}, {body}",
                status_code=status_code,
                body=body,
            )

        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"{self.name}: response is not valid JSON: {exc}") from exc
