import re

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """
    Parse a plain base-10 integer.

    Stricter than ``int()``: ASCII digits with an optional sign only, so
    underscores, surrounding whitespace and non-ASCII digits are rejected.

    Raises:
        ValueError: ``raw`` is not a plain integer.
    """
    if not _DECIMAL_INT.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)
