"""Tests for the one-shot command."""

from __future__ import annotations

import importlib

import pytest

from bgg_picker.cli import main as cli_main
from bgg_picker.collection.fetcher import CollectionFetcher

from conftest import FakeSession, make_response


def patch_fetcher(monkeypatch: pytest.MonkeyPatch, session: FakeSession) -> None:
    def factory() -> CollectionFetcher:
        return CollectionFetcher(base_url="https://bgg.example.com/xmlapi2", retry_delay=0,
                                 session=session)  # type: ignore[arg-type]

    # bgg_picker.cli.main resolves to the main() function re-exported by the package
    monkeypatch.setattr(importlib.import_module("bgg_picker.cli.main"), "CollectionFetcher", factory)


def test_prints_one_name_per_line(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
                                  sample_collection: str) -> None:
    session = FakeSession([make_response(200, sample_collection)])
    patch_fetcher(monkeypatch, session)

    exit_code = cli_main(["--username", "alice", "--players", "3", "--play-time", "medium"])

    assert exit_code == 0
    assert capsys.readouterr().out.splitlines() == ["Catan", "Carcassonne"]
    assert session.closed is True


def test_upstream_failure_prints_nothing(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    session = FakeSession([make_response(202)] * 5)
    patch_fetcher(monkeypatch, session)

    exit_code = cli_main(["--username", "alice"])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_rejects_unknown_play_time(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["--username", "alice", "--play-time", "forever"])

    assert excinfo.value.code == 2
