from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from foody.core.errors import ConfigurationError, DecodeError, TransportError
from foody.services.sources.edamam import EdamamSource


@pytest.fixture
def source():
    return EdamamSource(app_id="my-id", app_key="my-key")


def test_missing_credentials_fail_at_construction():
    with pytest.raises(ConfigurationError, match="missing app id"):
        EdamamSource(app_id="", app_key="key")
    with pytest.raises(ConfigurationError, match="missing app key"):
        EdamamSource(app_id="id", app_key="")


def test_request_url_carries_credentials_window_and_query(source):
    url = source.build_request_url("thai curry & rice")
    parsed = urlparse(url)
    params = parse_qs(parsed.query)

    assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == "https://api.edamam.com/search"
    assert params["app_id"] == ["my-id"]
    assert params["app_key"] == ["my-key"]
    assert params["from"] == ["0"]
    assert params["to"] == ["100"]
    assert params["q"] == ["thai curry & rice"]


@patch("foody.services.sources.base.requests.get")
def test_hits_are_mapped_in_order(mock_get, source, mock_http_response):
    mock_http_response(mock_get, body={
        "hits": [
            {"recipe": {
                "label": "Chicken Curry",
                "image": "https://img/curry.jpg",
                "url": "https://example.com/curry",
                "ingredients": [{"text": "chicken"}, {"text": "curry paste"}, {"text": "rice"}],
                "yield": 4.9,
            }},
            {"recipe": {"label": "Plain Rice"}},
        ]
    })

    recipes = source.fetch_recipes("curry")

    assert [r.name for r in recipes] == ["Chicken Curry", "Plain Rice"]
    curry = recipes[0]
    assert curry.image_url == "https://img/curry.jpg"
    assert curry.url == "https://example.com/curry"
    assert curry.num_ingredients == 3
    assert curry.servings == 4  # truncated, not rounded
    assert curry.location == ""
    assert curry.time == ""

    rice = recipes[1]
    assert rice.num_ingredients == 0
    assert rice.servings == 0


@patch("foody.services.sources.base.requests.get")
def test_zero_hits_is_an_empty_success(mock_get, source, mock_http_response):
    mock_http_response(mock_get, body={"hits": []})

    assert source.fetch_recipes("nothing") == []


@patch("foody.services.sources.base.requests.get")
def test_non_ok_status_is_a_transport_error(mock_get, source, mock_http_response):
    mock_http_response(mock_get, status_code=401, text="invalid app key")

    with pytest.raises(TransportError) as exc_info:
        source.fetch_recipes("curry")

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "invalid app key"
    assert "401" in str(exc_info.value)
    assert mock_get.call_count == 1


@patch("foody.services.sources.base.requests.get")
def test_network_failure_is_a_transport_error(mock_get, source):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(TransportError, match="connection refused"):
        source.fetch_recipes("curry")
    assert mock_get.call_count == 1


@patch("foody.services.sources.base.requests.get")
def test_invalid_json_is_a_decode_error(mock_get, source, mock_http_response):
    mock_http_response(mock_get, text="<html>oops</html>")

    with pytest.raises(DecodeError):
        source.fetch_recipes("curry")


@patch("foody.services.sources.base.requests.get")
def test_unexpected_shape_is_a_decode_error(mock_get, source, mock_http_response):
    mock_http_response(mock_get, body={"hits": "not a list"})

    with pytest.raises(DecodeError):
        source.fetch_recipes("curry")


@patch("foody.services.sources.base.requests.get")
def test_timeout_is_passed_to_transport(mock_get, mock_http_response):
    mock_http_response(mock_get, body={"hits": []})

    EdamamSource(app_id="id", app_key="key", timeout=3.5).fetch_recipes("curry")

    assert mock_get.call_args.kwargs["timeout"] == 3.5


@patch("foody.services.sources.base.requests.get")
def test_null_hits_is_an_empty_success(mock_get, source, mock_http_response):
    mock_http_response(mock_get, text='{"hits": null}')

    assert source.fetch_recipes("soup") == []


@patch("foody.services.sources.base.requests.get")
def test_null_fields_fall_back_to_defaults(mock_get, source, mock_http_response):
    mock_http_response(
        mock_get,
        text='{"hits": [{"recipe": {"label": "Soup", "ingredients": null, "yield": null}},'
             ' {"recipe": null}, null]}',
    )

    recipes = source.fetch_recipes("soup")

    assert len(recipes) == 3
    assert recipes[0].name == "Soup"
    assert recipes[0].num_ingredients == 0
    assert recipes[0].servings == 0
    assert recipes[1].name == ""
    assert recipes[2].num_ingredients == 0
