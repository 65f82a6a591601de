"""Tests for environment-driven settings."""

from pathlib import Path

import pydantic
import pytest

from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("CATALOG_BACKEND", "CATALOG_DATA_DIR", "CATALOG_LOG_LEVEL", "CATALOG_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.backend == "json"
        assert settings.data_dir == Path("./data")
        assert settings.log_level == "INFO"
        assert settings.products_file == Path("./data/products.json")

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CATALOG_BACKEND", "sqlite")
        monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "store"))
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.backend == "sqlite"
        assert settings.database_file == tmp_path / "store" / "catalog.db"
        assert settings.log_level == "DEBUG"

    def test_unknown_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("CATALOG_BACKEND", "postgres")
        with pytest.raises(pydantic.ValidationError):
            Settings()

    def test_unknown_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="loud")


class TestBootstrap:

    def test_json_backend(self, tmp_path):
        repo = product_repository(Settings(backend="json", data_dir=tmp_path))
        assert isinstance(repo, JsonProductRepository)
        assert (tmp_path / "products.json").exists()

    def test_sqlite_backend(self, tmp_path):
        repo = product_repository(Settings(backend="sqlite", data_dir=tmp_path))
        assert isinstance(repo, SqliteProductRepository)
        assert (tmp_path / "catalog.db").exists()
