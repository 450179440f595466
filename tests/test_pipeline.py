"""Tests for the fetch → decode → filter pipeline."""

from __future__ import annotations

import requests

from bgg_picker.collection.fetcher import CollectionFetcher
from bgg_picker.models import PickOutcome
from bgg_picker.pipeline import GamePicker, pick_games

from conftest import FakeSession, make_response


def build_picker(session: FakeSession) -> GamePicker:
    fetcher = CollectionFetcher(base_url="https://bgg.example.com/xmlapi2", retry_delay=0,
                                session=session)  # type: ignore[arg-type]
    return GamePicker(fetcher)


def test_pick_returns_matching_items(sample_collection: str) -> None:
    session = FakeSession([make_response(202), make_response(200, sample_collection)])

    result = build_picker(session).pick("alice", 5, "medium")

    assert result.outcome is PickOutcome.SUCCESS
    assert result.success
    assert result.error is None
    assert [item.name for item in result.items] == ["Carcassonne"]


def test_pick_games_returns_a_list(sample_collection: str) -> None:
    session = FakeSession([make_response(200, sample_collection)])

    games = pick_games("alice", 3, "medium", picker=build_picker(session))

    assert isinstance(games, list)
    assert [game.name for game in games] == ["Catan", "Carcassonne"]


def test_queue_never_ready_yields_empty_list() -> None:
    session = FakeSession([make_response(202)] * 5)
    picker = build_picker(session)

    result = picker.pick("alice", 3, "medium")

    assert result.outcome is PickOutcome.NOT_READY
    assert result.items == ()
    assert "not ready after 5 attempt(s)" in result.error
    assert len(session.calls) == 5


def test_transport_error_yields_empty_list() -> None:
    session = FakeSession([requests.ConnectionError("connection refused")])

    result = build_picker(session).pick("alice", 3, "medium")

    assert result.outcome is PickOutcome.TRANSPORT_ERROR
    assert result.items == ()
    assert "connection refused" in result.error


def test_decode_error_yields_empty_list() -> None:
    session = FakeSession([make_response(200, "<errors><error><message>Invalid username</message></error></errors>")])

    result = build_picker(session).pick("nobody", 3, "medium")

    assert result.outcome is PickOutcome.DECODE_ERROR
    assert result.items == ()


def test_pick_games_swallows_upstream_failures() -> None:
    session = FakeSession([requests.Timeout("timed out")])

    assert pick_games("alice", 3, "medium", picker=build_picker(session)) == []
