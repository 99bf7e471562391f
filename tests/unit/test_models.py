import pytest
from pydantic import ValidationError

from bookquery.models import Book, BookRecord, DatedBookRecord


class TestBookModel:
    def test_to_record_drops_storage_id(self) -> None:
        book = Book(id=42, bookID="1", title="Test", authors="Someone")

        record = book.to_record()

        assert isinstance(record, BookRecord)
        assert record.bookID == "1"
        assert "id" not in record.model_dump()

    def test_numeric_fields_stay_text(self) -> None:
        book = Book(
            bookID="1",
            title="Test",
            authors="Someone",
            average_rating="4.5",
            num_pages="320",
        )

        record = book.to_record()

        assert record.average_rating == "4.5"
        assert record.num_pages == "320"


class TestDatedBookRecord:
    def test_requires_publication_year(self) -> None:
        with pytest.raises(ValidationError):
            DatedBookRecord(bookID="1", title="Test", authors="Someone")

    def test_carries_derived_year(self) -> None:
        record = DatedBookRecord(
            bookID="1",
            title="Test",
            authors="Someone",
            publication_date="11/1/2005",
            publication_year=2005,
        )

        assert record.model_dump()["publication_year"] == 2005
