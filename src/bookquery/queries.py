"""
Translation of query intents into store statements.

Every function here is pure: it takes already validated input and returns a
SQLAlchemy ``Select`` without touching the store. ``BookStore`` executes the
result.
"""

import re
from typing import Any, Final

from sqlalchemy import Float, and_, cast, not_
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import col, select

from .models import Book
from .year import publication_year_expr, publication_year_guard

PUBLICATION_YEAR = "publication_year"

_RATING_TEXT_RE: Final[re.Pattern[str]] = re.compile(
    r"\d+(?:\.\d*)?|\.\d+", re.ASCII
)


def average_rating_value(text: str) -> float:
    """In-process counterpart of the rating comparison done in the store."""
    if not _RATING_TEXT_RE.fullmatch(text):
        raise ValueError(f"Not a rating: {text!r}")
    return float(text)


def _average_rating_expr() -> ColumnElement[float]:
    return cast(col(Book.average_rating), Float)


def _average_rating_guard() -> ColumnElement[bool]:
    """True only for ratings made of digits and at most one dot.

    Float casts in the store are lenient ("n/a" -> 0.0, "" -> 0.0), so unrated
    records must not reach the comparison.
    """
    rating = col(Book.average_rating)
    return and_(
        rating.is_not(None),
        rating.op("GLOB", is_comparison=True)("*[0-9]*"),
        not_(rating.op("GLOB", is_comparison=True)("*[^0-9.]*")),
        not_(rating.op("GLOB", is_comparison=True)("*.*.*")),
    )


def _publication_year() -> ColumnElement[int]:
    return publication_year_expr(col(Book.publication_date)).label(PUBLICATION_YEAR)


def all_books() -> Select[Any]:
    return select(Book)


def by_id(book_id: str) -> Select[Any]:
    return select(Book).where(col(Book.bookID) == book_id)


def by_author(author: str) -> Select[Any]:
    # autoescape turns % and _ in user input into literals
    return select(Book).where(col(Book.authors).icontains(author, autoescape=True))


def by_title(title: str) -> Select[Any]:
    return select(Book).where(col(Book.title).icontains(title, autoescape=True))


def by_min_rating(rating: float) -> Select[Any]:
    return select(Book).where(
        _average_rating_guard(), _average_rating_expr() >= rating
    )


def _by_year(*conditions: ColumnElement[bool]) -> Select[Any]:
    year = _publication_year()
    return (
        select(Book, year)
        .where(publication_year_guard(col(Book.publication_date)))
        .where(*conditions)
    )


def by_year_from(year: int) -> Select[Any]:
    return _by_year(publication_year_expr(col(Book.publication_date)) >= year)


def by_year_until(year: int) -> Select[Any]:
    return _by_year(publication_year_expr(col(Book.publication_date)) <= year)
