import json
from unittest.mock import MagicMock

import pytest

from foody.models import Recipe

CSV_HEADER_LINE = "name,url,time,num_ingredients,ingredients,directions"


@pytest.fixture
def write_csv(tmp_path):
    """Factory fixture writing a recipe CSV file and returning its path."""
    def _write(*lines, name="recipes.csv", header=CSV_HEADER_LINE):
        path = tmp_path / name
        content = [header] if header is not None else []
        content.extend(lines)
        path.write_text("\n".join(content) + ("\n" if content else ""), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def make_recipes():
    def _make(count):
        return [Recipe(name=f"Recipe {i}") for i in range(1, count + 1)]
    return _make


@pytest.fixture
def mock_http_response():
    """Configure a patched ``requests.get`` mock to return the given status and body."""
    def _configure(mock_get, status_code=200, body=None, text=None):
        response = MagicMock()
        response.status_code = status_code
        response.text = text if text is not None else json.dumps(body)
        mock_get.return_value.__enter__.return_value = response
        return response
    return _configure
