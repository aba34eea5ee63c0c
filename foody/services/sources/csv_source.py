import csv
import os
from dataclasses import dataclass
from typing import Iterator, List

from foody.core.errors import ConfigurationError, DecodeError
from foody.core.logging_config import get_logger
from foody.models import Recipe
from foody.services.sources.base import RecipeSource
from foody.utils.numbers import parse_int

logger = get_logger(__name__)

CSV_EXTENSION = ".csv"
CSV_HEADER = ("name", "url", "time", "num_ingredients", "ingredients", "directions")


@dataclass(frozen=True)
class CsvRow:
    name: str
    url: str
    time: str
    num_ingredients: str
    ingredients: str
    directions: str
    location: str


class CsvSource(RecipeSource):
    name = "CSV"

    def __init__(self, file_path: str):
        if not file_path:
            raise ConfigurationError("recipe csv: missing file location")
        if not file_path.endswith(CSV_EXTENSION):
            raise ConfigurationError(f"recipe csv must have {CSV_EXTENSION} extension")
        if not os.path.exists(file_path):
            raise ConfigurationError(f"recipe csv: {file_path} not found")
        self.file_path = file_path

    def fetch_recipes(self, query: str) -> List[Recipe]:
        """
        Scans the file for rows whose lower-cased name contains any word of the query.

        The query is split on single spaces (runs of spaces do not produce empty
        words). Each matching word adds the row once more, so a row matching two
        words appears twice in the results.
        """
        search_words = [word for word in query.split(" ") if word]

        hits: List[CsvRow] = []
        for row in self._read_rows():
            title = row.name.lower()
            for word in search_words:
                if word in title:
                    hits.append(row)

        logger.info(f"Found {len(hits)} total results for query '{query}'")
        return [self._adapt(row) for row in hits]

    def _read_rows(self) -> Iterator[CsvRow]:
        try:
            with open(self.file_path, "r", encoding="utf-8", newline="") as handle:
                reader = csv.reader(handle, strict=True)
                header = next(reader, None)
                if header is None:
                    raise ConfigurationError(f"{self.file_path} is empty, expected a header row")
                self._validate_header(header)

                for row_number, row in enumerate(reader, start=1):
                    if len(row) != len(CSV_HEADER):
                        # Rows with the wrong number of fields are skipped.
                        continue
                    yield CsvRow(
                        name=row[0],
                        url=row[1],
                        time=row[2],
                        num_ingredients=row[3],
                        ingredients=row[4],
                        directions=row[5],
                        location=f"{self.file_path}: row {row_number}",
                    )
        except csv.Error as exc:
            raise DecodeError(f"recipe csv: malformed content in {self.file_path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise DecodeError(f"recipe csv: {self.file_path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ConfigurationError(f"recipe csv: cannot read {self.file_path}: {exc}") from exc

    def _validate_header(self, header: List[str]) -> None:
        if len(header) != len(CSV_HEADER):
            raise ConfigurationError(
                f"csv contains {len(header)} cols in the first row, expected {len(CSV_HEADER)}"
            )
        for idx, expected in enumerate(CSV_HEADER):
            if header[idx] != expected:
                raise ConfigurationError(
                    f"expected header {expected} for col {idx}, got header {header[idx]}"
                )

    def _adapt(self, row: CsvRow) -> Recipe:
        return Recipe(
            name=row.name,
            url=row.url,
            time=row.time,
            num_ingredients=_parse_count(row.num_ingredients),
            location=row.location,
        )


def _parse_count(raw: str) -> int:
    try:
        value = parse_int(raw)
    except ValueError:
        return 0
    return value if value > 0 else 0
