from __future__ import annotations

from pathlib import Path

import pytest

from listing_reports.infra import settings
from listing_reports.infra.settings import database_url

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_listings_source_defaults_to_json(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LISTINGS_SOURCE", raising=False)

    assert settings.listings_source() == settings.SOURCE_JSON


def test_listings_source_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_SOURCE", " Database ")

    assert settings.listings_source() == settings.SOURCE_DATABASE


def test_unknown_listings_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_SOURCE", "s3")

    with pytest.raises(RuntimeError, match="LISTINGS_SOURCE"):
        settings.listings_source()


def test_listings_file_default_is_bundled_data(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LISTINGS_FILE", raising=False)

    assert settings.listings_file() == PROJECT_ROOT / "data" / "listings.json"
    assert settings.listings_file().is_file()


def test_listings_file_does_not_depend_on_cwd(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("LISTINGS_FILE", raising=False)
    monkeypatch.chdir(tmp_path)

    assert settings.listings_file() == PROJECT_ROOT / "data" / "listings.json"


def test_listings_file_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_FILE", "/tmp/other.json")
    assert settings.listings_file() == Path("/tmp/other.json")

    monkeypatch.setenv("LISTINGS_FILE", "fixtures/listings.json")
    assert settings.listings_file() == PROJECT_ROOT / "fixtures" / "listings.json"


def test_load_delay_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LISTINGS_LOAD_DELAY_SECONDS", raising=False)

    assert settings.load_delay_seconds() == 0.3


def test_load_delay_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_LOAD_DELAY_SECONDS", "0")

    assert settings.load_delay_seconds() == 0.0


@pytest.mark.parametrize("raw", ["soon", "-1"])
def test_invalid_load_delay(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("LISTINGS_LOAD_DELAY_SECONDS", raw)

    with pytest.raises(RuntimeError, match="LISTINGS_LOAD_DELAY_SECONDS"):
        settings.load_delay_seconds()


def test_database_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@localhost/listings")

    assert database_url() == "postgresql+psycopg://u:p@localhost/listings"
