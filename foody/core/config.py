import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from foody.core.logging_config import get_logger

logger = get_logger(__name__)

SOURCE_EDAMAM = "edamam"
SOURCE_SPOONACULAR = "spoonacular"
SOURCE_CSV = "csv"

ANSI_LIGHT_GREEN = "\033[0;92m"
ANSI_NO_COLOR = "\033[0m"

RESULT_PAGE_SIZE = 5


@dataclass(frozen=True)
class SourceConfig:
    source: str = ""
    spoonacular_app_key: str = ""
    edamam_app_id: str = ""
    edamam_app_key: str = ""
    csv_location: str = ""
    request_timeout: Optional[float] = None


@dataclass(frozen=True)
class BrowseSettings:
    page_size: int = RESULT_PAGE_SIZE
    exit_token: str = "n"
    # Pause after a first/last page notice so the user has time to read it.
    notice_delay: float = 2.0
    color: str = ANSI_LIGHT_GREEN
    reset: str = ANSI_NO_COLOR


def _as_float(value: Any, default: Optional[float]) -> Optional[float]:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            return float(value.strip())
        except ValueError:
            logger.warning(f"Ignoring non-numeric timeout value '{value}'")
            return default
    return default


def load_source_config(env_file: str = ".env", **overrides: Any) -> SourceConfig:
    """
    Build the source configuration from the environment.

    Values passed as keyword overrides (typically command line flags) win over
    environment variables; ``None`` overrides are ignored.
    """
    load_dotenv(env_file)

    values = {
        "source": os.getenv("SOURCE", ""),
        "spoonacular_app_key": os.getenv("SPOONACULAR_APP_KEY", ""),
        "edamam_app_id": os.getenv("EDAMAM_APP_ID", ""),
        "edamam_app_key": os.getenv("EDAMAM_APP_KEY", ""),
        "csv_location": os.getenv("CSV_LOCATION", ""),
        "request_timeout": os.getenv("REQUEST_TIMEOUT"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    return SourceConfig(
        source=str(values["source"]).strip(),
        spoonacular_app_key=str(values["spoonacular_app_key"]),
        edamam_app_id=str(values["edamam_app_id"]),
        edamam_app_key=str(values["edamam_app_key"]),
        csv_location=str(values["csv_location"]),
        request_timeout=_as_float(values["request_timeout"], None),
    )
