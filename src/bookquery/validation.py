import re
from decimal import Decimal
from typing import Final

from .constants import (
    MAX_RATING,
    MIN_PUBLICATION_YEAR,
    MIN_RATING,
    YEAR_BOUND_CEILING,
    YEAR_WIDTH,
)
from .exceptions import InvalidInput

INVALID_RATING_MESSAGE: Final[str] = (
    "Invalid rating. Rating must be a number between 0 and 5."
)
INVALID_YEAR_MESSAGE: Final[str] = "Invalid year"

# float() and int() would also take "nan", "inf", "1_000" and non-ASCII digits
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII
)
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+", re.ASCII)


def parse_rating(raw: str) -> float:
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise InvalidInput(INVALID_RATING_MESSAGE)

    rating = float(text)
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidInput(INVALID_RATING_MESSAGE)
    return rating


def parse_year_bound(raw: str) -> int:
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise InvalidInput(INVALID_YEAR_MESSAGE)

    if text.startswith("-"):
        raise InvalidInput(INVALID_YEAR_MESSAGE)

    # Avoid int() on huge inputs and keep the bound bindable as a SQL integer
    if len(text.lstrip("+").lstrip("0")) > YEAR_WIDTH:
        return YEAR_BOUND_CEILING

    year = int(text)
    if year < MIN_PUBLICATION_YEAR:
        raise InvalidInput(INVALID_YEAR_MESSAGE)
    return year


def format_rating(rating: float) -> str:
    """Render a rating the way it reads in a URL: ``4`` rather than ``4.0``."""
    if rating.is_integer():
        return str(int(rating))
    return format(Decimal(repr(rating)), "f")
