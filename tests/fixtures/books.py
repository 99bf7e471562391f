import pytest

from bookquery.models import Book

SAMPLE_BOOKS: list[dict[str, str]] = [
    {
        "bookID": "1",
        "title": "The Hobbit",
        "authors": "J.R.R. Tolkien",
        "average_rating": "4.5",
        "isbn": "0618260307",
        "isbn13": "9780618260300",
        "language_code": "eng",
        "num_pages": "366",
        "ratings_count": "2530894",
        "text_reviews_count": "32871",
        "publication_date": "8/15/1937",
        "publisher": "Houghton Mifflin",
    },
    {
        "bookID": "2",
        "title": "The Fellowship of the Ring (The Lord of the Rings  #1)",
        "authors": "J.R.R. Tolkien/Alan Lee",
        "average_rating": "4.36",
        "publication_date": "10/1/2000",
        "publisher": "Houghton Mifflin Harcourt",
    },
    {
        "bookID": "3",
        "title": "Harry Potter and the Half-Blood Prince (Harry Potter  #6)",
        "authors": "J.K. Rowling/Mary GrandPré",
        "average_rating": "4.57",
        "publication_date": "9/16/2006",
        "publisher": "Scholastic Inc.",
    },
    {
        "bookID": "4",
        "title": "100% Pure_Data",
        "authors": "Jane Doe",
        "average_rating": "3.2",
        "publication_date": "11/1/2005",
        "publisher": "Nowhere Press",
    },
    {
        "bookID": "5",
        "title": "Undated Almanac",
        "authors": "Anonymous",
        "average_rating": "2.1",
        "publication_date": "1/1/05",
        "publisher": "Unknown",
    },
    {
        "bookID": "6",
        "title": "Regular Expressions (.*) Explained",
        "authors": "R. Exp",
        "average_rating": "0",
        "publication_date": "2/2/1999",
        "publisher": "Pattern House",
    },
]


@pytest.fixture
def sample_books() -> list[Book]:
    return [Book(**fields) for fields in SAMPLE_BOOKS]
