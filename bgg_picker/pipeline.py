"""
Picks games from a BGG collection: fetch, decode, then filter.

Upstream trouble never escapes from here. Callers always get a (possibly
empty) list of items; the reason for an empty result is logged and recorded
on the PickResult.
"""

import logging
import threading
from typing import List, Optional

from .collection import CollectionFetcher, decode_collection, filter_collection
from .error_handling import DecodeError, TransportError
from .models import Item, PickOutcome, PickResult

logger = logging.getLogger(__name__)


class GamePicker:
    """
    Runs the fetch → decode → filter pipeline for one owner at a time.
    """

    def __init__(self, fetcher: Optional[CollectionFetcher] = None):
        self.fetcher = fetcher or CollectionFetcher()

    def pick(self, owner: str, player_count: int, play_time: str,
             weight: Optional[str] = None,
             cancel: Optional[threading.Event] = None) -> PickResult:
        """
        Pick the games in owner's collection matching the given criteria.

        Args:
            owner: BGG username
            player_count: Number of players
            play_time: Play time bucket name
            weight: Complexity bucket name (not applied)
            cancel: Optional event that stops the fetch retry loop

        Returns:
            PickResult with the matching items and how the pick ended
        """
        try:
            fetched = self.fetcher.fetch_document(owner, cancel=cancel)
        except TransportError as e:
            logger.error(f"Giving up on '{owner}': {e}")
            return PickResult(PickOutcome.TRANSPORT_ERROR, error=str(e))

        if not fetched.ready:
            message = f"Collection for '{owner}' was not ready after {fetched.attempts} attempt(s)"
            logger.warning(message)
            return PickResult(PickOutcome.NOT_READY, error=message)

        try:
            collection = decode_collection(fetched.body)
        except DecodeError as e:
            logger.error(f"Could not decode collection for '{owner}': {e}")
            return PickResult(PickOutcome.DECODE_ERROR, error=str(e))

        filtered = filter_collection(collection, player_count, play_time, weight)
        return PickResult(PickOutcome.SUCCESS, items=filtered.items)


def pick_games(owner: str, player_count: int, play_time: str,
               weight: Optional[str] = None,
               picker: Optional[GamePicker] = None) -> List[Item]:
    """
    Return the owner's games matching the criteria; empty on any upstream failure.
    """
    if picker is not None:
        return list(picker.pick(owner, player_count, play_time, weight).items)
    with CollectionFetcher() as fetcher:
        return list(GamePicker(fetcher).pick(owner, player_count, play_time, weight).items)
