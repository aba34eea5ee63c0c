from typing import Optional


class FoodyError(Exception):
    """Base class for every error Foody reports to the user."""


class ConfigurationError(FoodyError):
    """A source could not be built: bad credentials, path, kind or CSV header."""


class TransportError(FoodyError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(FoodyError):
    """The response body or file content could not be decoded."""


class EmptyResultError(FoodyError):
    def __init__(self, query: str):
        super().__init__(f"no results found for search query '{query}'")
        self.query = query


class InputError(FoodyError):
    """Navigation or selection input that cannot be acted on."""


class RenderError(FoodyError):
    """The external image renderer failed."""
