"""
Collection module for acquiring and filtering BGG collections.

This module handles:
- Fetching collection XML from the BGG XML API2 (with its queue/retry protocol)
- Decoding the XML into the collection models
- Filtering collections by player count and play time
"""

from .fetcher import CollectionFetcher
from .decoder import decode_collection
from .filters import filter_collection, game_names, supports_player_count

__all__ = [
    "CollectionFetcher",
    "decode_collection",
    "filter_collection",
    "game_names",
    "supports_player_count",
]
