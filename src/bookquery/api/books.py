from typing import Annotated

from fastapi import APIRouter, Depends

from .. import queries
from ..envelope import (
    EnvelopeResponse,
    collection_or_not_found,
    record_or_not_found,
    success,
)
from ..logging_config import get_logger
from ..store import BookStore, get_store
from ..validation import format_rating, parse_rating, parse_year_bound

logger = get_logger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])

StoreDep = Annotated[BookStore, Depends(get_store)]

BOOK_NOT_FOUND = "Book not found"
NO_BOOKS_BY_AUTHOR = "No books found by this author"
NO_BOOKS_WITH_TITLE = "No books found with this title"
NO_BOOKS_FROM_YEAR = "No books found for this year or later"
NO_BOOKS_UNTIL_YEAR = "No books found for this year or earlier"


def _no_books_with_rating(rating: float) -> str:
    return (
        f"No books found with an average rating of {format_rating(rating)} or higher."
    )


@router.get("", response_class=EnvelopeResponse)
async def list_books(store: StoreDep) -> EnvelopeResponse:
    books = await store.find_many(queries.all_books())
    # The full listing is never a 404, even when the catalog is empty
    return success(books)


@router.get("/author/{author:path}", response_class=EnvelopeResponse)
async def books_by_author(author: str, store: StoreDep) -> EnvelopeResponse:
    books = await store.find_many(queries.by_author(author))
    logger.debug("Author lookup", author=author, matches=len(books))
    return collection_or_not_found(books, NO_BOOKS_BY_AUTHOR)


@router.get("/title/{title:path}", response_class=EnvelopeResponse)
async def books_by_title(title: str, store: StoreDep) -> EnvelopeResponse:
    books = await store.find_many(queries.by_title(title))
    logger.debug("Title lookup", title=title, matches=len(books))
    return collection_or_not_found(books, NO_BOOKS_WITH_TITLE)


@router.get("/rating/{rating}", response_class=EnvelopeResponse)
async def books_by_min_rating(rating: str, store: StoreDep) -> EnvelopeResponse:
    min_rating = parse_rating(rating)
    books = await store.find_many(queries.by_min_rating(min_rating))
    return collection_or_not_found(books, _no_books_with_rating(min_rating))


@router.get("/year-ge/{year}", response_class=EnvelopeResponse)
async def books_from_year(year: str, store: StoreDep) -> EnvelopeResponse:
    """Books whose publication year is ``year`` or later."""
    bound = parse_year_bound(year)
    books = await store.aggregate(queries.by_year_from(bound))
    return collection_or_not_found(books, NO_BOOKS_FROM_YEAR)


@router.get("/year-le/{year}", response_class=EnvelopeResponse)
async def books_until_year(year: str, store: StoreDep) -> EnvelopeResponse:
    """Books whose publication year is ``year`` or earlier."""
    bound = parse_year_bound(year)
    books = await store.aggregate(queries.by_year_until(bound))
    return collection_or_not_found(books, NO_BOOKS_UNTIL_YEAR)


@router.get("/{book_id}", response_class=EnvelopeResponse)
async def get_book(book_id: str, store: StoreDep) -> EnvelopeResponse:
    book = await store.find_one(queries.by_id(book_id))
    return record_or_not_found(book, BOOK_NOT_FOUND)
