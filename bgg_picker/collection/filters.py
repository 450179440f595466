"""
Filters a decoded collection down to the games a group can play.
"""

import logging
from typing import Iterable, List, Optional

from ..models import Collection, Item
from ..ranges import matches, play_time_range, weight_range

logger = logging.getLogger(__name__)


def supports_player_count(item: Item, player_count: int) -> bool:
    """True if the game's inclusive player range covers player_count."""
    return item.stats.min_players <= player_count and item.stats.max_players >= player_count


def filter_collection(collection: Collection, player_count: int, play_time: str,
                      weight: Optional[str] = None) -> Collection:
    """
    Keep the items playable by player_count within the play_time bucket.

    Args:
        collection: Decoded collection
        player_count: Number of people who want to play
        play_time: Play time bucket name (short, medium, long)
        weight: Complexity bucket name; accepted but not applied

    Returns:
        A Collection holding only the matching items, in input order. Its
        metadata (total items, pub date, terms of use) is left at defaults.
    """
    interval = play_time_range(play_time)
    if weight is not None:
        logger.debug(f"Weight bucket '{weight}' {weight_range(weight)} is not applied to filtering")

    items = tuple(
        item for item in collection.items
        if supports_player_count(item, player_count)
        and matches(interval, item.stats.playing_time)
    )
    logger.info(f"Filtered {len(collection.items)} item(s) to {len(items)} "
                f"for {player_count} player(s), {play_time} play time")
    return Collection(items=items)


def game_names(items: Iterable[Item]) -> List[str]:
    """Names of the given items, in order."""
    return [item.name for item in items]
