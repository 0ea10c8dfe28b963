"""Unit tests for the dependency wiring."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest

from listing_reports.adapters.in_memory_listing_source import InMemoryListingSource
from listing_reports.adapters.json_file_listing_source import JsonFileListingSource
from listing_reports.adapters.sql_listing_source import SqlListingSource
from listing_reports.entrypoints.http.dependencies import (
    build_listing_source,
    get_query_controller,
)


def test_json_source_is_the_default(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("LISTINGS_SOURCE", raising=False)
    monkeypatch.setenv("LISTINGS_FILE", str(tmp_path / "listings.json"))

    source = build_listing_source()

    assert isinstance(source, JsonFileListingSource)
    assert source._path == tmp_path / "listings.json"


def test_database_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_SOURCE", "database")

    # No engine is created until load() runs
    assert isinstance(build_listing_source(), SqlListingSource)


def test_memory_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_SOURCE", "memory")

    source = build_listing_source()

    assert isinstance(source, InMemoryListingSource)
    assert source.load() == []


def test_unknown_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LISTINGS_SOURCE", "ftp")

    with pytest.raises(RuntimeError):
        build_listing_source()


def test_get_query_controller_reads_app_state() -> None:
    controller = Mock()
    request = Mock()
    request.app.state.query_controller = controller

    assert get_query_controller(request) is controller
