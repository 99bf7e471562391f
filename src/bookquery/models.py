from sqlmodel import Field, SQLModel

# ─────────────────────────────────────────────────────────────────────────────
# Book Models
# ─────────────────────────────────────────────────────────────────────────────


class BookRecord(SQLModel):
    """
    A catalog entry as clients see it.

    Every field is stored as text, including the numeric ones. Numbers and
    years are derived at query time (see ``queries`` and ``year``).
    """

    bookID: str = Field(index=True)
    title: str = Field(index=True)
    authors: str = Field(index=True)
    average_rating: str | None = None
    isbn: str | None = None
    isbn13: str | None = None
    language_code: str | None = None
    num_pages: str | None = None
    ratings_count: str | None = None
    text_reviews_count: str | None = None
    publication_date: str | None = None
    publisher: str | None = None


class Book(BookRecord, table=True):
    id: int | None = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Book(bookID={self.bookID!r}, title={self.title!r})"

    def to_record(self) -> BookRecord:
        return BookRecord.model_validate(self)


class DatedBookRecord(BookRecord):
    """A record returned by the year aggregation, carrying its derived year."""

    publication_year: int
