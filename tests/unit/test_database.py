from pathlib import Path

from sqlalchemy import inspect

from bookquery.config import Settings
from bookquery.database import create_db_and_tables, create_store_engine


def test_create_store_engine_makes_data_dir(tmp_path: Path) -> None:
    settings = Settings(DATA_PATH=tmp_path / "nested" / "data")

    engine = create_store_engine(settings)

    assert settings.DATA_PATH.is_dir()
    assert str(engine.url) == settings.db_url
    engine.dispose()


def test_create_db_and_tables_is_idempotent(tmp_path: Path) -> None:
    engine = create_store_engine(Settings(DATA_PATH=tmp_path))

    create_db_and_tables(engine)
    create_db_and_tables(engine)

    columns = {c["name"] for c in inspect(engine).get_columns("book")}
    assert {"id", "bookID", "authors", "publication_date"} <= columns
    engine.dispose()


def test_explicit_url_leaves_data_path_alone(tmp_path: Path) -> None:
    settings = Settings(
        DATA_PATH=tmp_path / "unused", DATABASE_URL="sqlite+pysqlite:///:memory:"
    )

    engine = create_store_engine(settings)

    assert engine.url.database == ":memory:"
    assert not (tmp_path / "unused").exists()
    engine.dispose()
