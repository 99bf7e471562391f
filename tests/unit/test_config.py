import os
from pathlib import Path
from unittest.mock import patch

import pytest

from bookquery.config import Settings, get_settings


class TestConfigValidation:
    @pytest.fixture(autouse=True)
    def ignore_env_file(self):
        """Ignore local .env file for all tests in this class."""
        original_config = Settings.model_config.copy()
        Settings.model_config["env_file"] = None
        get_settings.cache_clear()
        yield
        Settings.model_config = original_config
        get_settings.cache_clear()

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.STORE_TIMEOUT_SECONDS == 5.0
        assert settings.db_url.endswith("/books.db")

    def test_env_overrides_defaults(self) -> None:
        env = {
            "BQ_LOG_LEVEL": "DEBUG",
            "BQ_STORE_TIMEOUT_SECONDS": "1.5",
            "BQ_PORT": "8080",
        }

        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.STORE_TIMEOUT_SECONDS == 1.5
        assert settings.PORT == 8080

    def test_database_url_takes_precedence(self, tmp_path: Path) -> None:
        settings = Settings(DATA_PATH=tmp_path, DATABASE_URL="sqlite:///other.db")

        assert settings.db_url == "sqlite:///other.db"

    def test_db_url_under_data_path(self, tmp_path: Path) -> None:
        settings = Settings(DATA_PATH=tmp_path)

        assert settings.db_url == f"sqlite:///{tmp_path}/books.db"

    def test_invalid_value_exits(self) -> None:
        env = {"BQ_STORE_TIMEOUT_SECONDS": "0"}

        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(SystemExit) as exc:
                get_settings()

        assert "BQ_STORE_TIMEOUT_SECONDS" in str(exc.value)
