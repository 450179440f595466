"""
Shared data models for the BGG picker package.

The collection models mirror the shape of the BGG XML API2 ``<items>``
document. They are frozen: an item is never modified after decoding.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Rank:
    """One ranking entry (overall or per family) for a game."""
    type: str = ""
    id: int = 0
    name: str = ""
    friendly_name: str = ""
    value: str = ""  # "Not Ranked" is a legal value
    bayes_average: str = ""


@dataclass(frozen=True)
class Rating:
    """Community rating statistics. Informational only."""
    value: str = ""  # the owner's own rating, "N/A" when unrated
    users_rated: int = 0
    average: float = 0.0
    bayes_average: float = 0.0
    std_dev: float = 0.0
    median: float = 0.0
    ranks: Tuple[Rank, ...] = ()


@dataclass(frozen=True)
class Stats:
    """Player count and play time figures for a game."""
    min_players: int = 0
    max_players: int = 0
    min_play_time: int = 0
    max_play_time: int = 0
    playing_time: int = 0
    num_owned: int = 0
    rating: Rating = field(default_factory=Rating)


@dataclass(frozen=True)
class Status:
    """Ownership flags for a collection entry."""
    own: bool = False
    prev_owned: bool = False
    for_trade: bool = False
    want: bool = False
    want_to_play: bool = False
    want_to_buy: bool = False
    wishlist: bool = False
    preordered: bool = False
    last_modified: str = ""


@dataclass(frozen=True)
class Item:
    """One game in a user's collection."""
    object_id: int = 0
    coll_id: int = 0
    name: str = ""
    sort_index: int = 0
    object_type: str = ""
    subtype: str = ""
    year_published: int = 0
    image: str = ""
    thumbnail: str = ""
    num_plays: int = 0
    stats: Stats = field(default_factory=Stats)
    status: Status = field(default_factory=Status)


@dataclass(frozen=True)
class Collection:
    """A decoded collection plus the provenance BGG attaches to it."""
    total_items: int = 0
    terms_of_use: str = ""
    pub_date: str = ""
    items: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class FetchResult:
    """Result of asking BGG for a collection document."""
    body: str
    ready: bool
    attempts: int
    status_code: Optional[int] = None


class PickOutcome(Enum):
    """How a pick request ended."""
    SUCCESS = "success"
    NOT_READY = "not_ready"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class PickResult:
    """Result of a pick: the matching items plus the upstream outcome."""
    outcome: PickOutcome
    items: Tuple[Item, ...] = ()
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is PickOutcome.SUCCESS
