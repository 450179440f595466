"""
BGG Picker Package - pick games from a BoardGameGeek collection.

This package provides:
1. Fetching a user's collection from the BGG XML API2 (queue-aware retries)
2. Decoding the collection XML into immutable models
3. Filtering the collection by player count and play time
"""

__version__ = "0.1.0"
__author__ = "BGG Picker Team"

# Main package imports for convenience
from .collection import CollectionFetcher, decode_collection, filter_collection
from .models import Collection, Item, PickOutcome, PickResult
from .pipeline import GamePicker, pick_games
from .logging_config import setup_logging

__all__ = [
    "CollectionFetcher",
    "decode_collection",
    "filter_collection",
    "Collection",
    "Item",
    "PickOutcome",
    "PickResult",
    "GamePicker",
    "pick_games",
    "setup_logging",
]
