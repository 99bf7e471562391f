"""
Publication year derivation.

``publication_date`` is stored exactly as it came from the source catalog,
in no consistent format ("9/16/2006", "2004-11-01", "1/1/05" ...). The only
part that is relied upon is the trailing four characters, which hold the
year when the record is well formed.

The same rule exists in two forms: a plain function for records already in
memory, and a SQL expression so that year filtering runs inside the store.
"""

from typing import Any

from sqlalchemy import Integer, and_, cast, func
from sqlalchemy.sql.elements import ColumnElement

from .constants import YEAR_WIDTH


class UndatableRecord(ValueError):
    """The trailing characters of a publication date are not a 4 digit year."""


def _trailing(date: str) -> str:
    return date[-YEAR_WIDTH:]


def has_publication_year(date: str | None) -> bool:
    if date is None or len(date) < YEAR_WIDTH:
        return False
    tail = _trailing(date)
    return tail.isascii() and tail.isdigit()


def extract_publication_year(date: str) -> int:
    if not has_publication_year(date):
        raise UndatableRecord(f"No 4 digit year at the end of {date!r}")
    return int(_trailing(date))


def _trailing_expr(column: Any) -> ColumnElement[str]:
    # SQL substr is 1-based: the last four characters start at length - 3
    return func.substr(column, func.length(column) - (YEAR_WIDTH - 1), YEAR_WIDTH)


def publication_year_expr(column: Any) -> ColumnElement[int]:
    return cast(_trailing_expr(column), Integer)


def publication_year_guard(column: Any) -> ColumnElement[bool]:
    """True only for rows whose trailing characters are all digits.

    Integer casts in the store are lenient ("1/05" -> 1, "ab12" -> 0), so year
    comparisons must be paired with this guard to keep undatable records out
    of both bounds.
    """
    return and_(
        column.is_not(None),
        func.length(column) >= YEAR_WIDTH,
        _trailing_expr(column).op("GLOB", is_comparison=True)("[0-9]" * YEAR_WIDTH),
    )
