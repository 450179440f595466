"""
Decoder for BGG XML API2 collection documents.

Maps ``<items>``/``<item>`` attributes and child elements straight onto the
frozen models in ``bgg_picker.models``. Anything missing is left at its zero
value; only markup that cannot be parsed at all, a foreign root element or a
non-numeric value in a numeric field is rejected.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Union

from ..error_handling import DecodeError
from ..models import Collection, Item, Rank, Rating, Stats, Status

logger = logging.getLogger(__name__)


def _int(value: Optional[str], field_name: str) -> int:
    if value is None or not value.strip():
        return 0
    try:
        return int(value.strip())
    except ValueError:
        raise DecodeError(f"Invalid integer for '{field_name}': {value!r}")


def _float(value: Optional[str], field_name: str) -> float:
    if value is None or not value.strip():
        return 0.0
    try:
        return float(value.strip())
    except ValueError:
        raise DecodeError(f"Invalid number for '{field_name}': {value!r}")


def _flag(value: Optional[str], field_name: str) -> bool:
    return _int(value, field_name) != 0


def _text(element: Optional[ET.Element], tag: str) -> str:
    if element is None:
        return ""
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _value(element: Optional[ET.Element], tag: str) -> Optional[str]:
    """Read ``<tag value="..."/>``, falling back to the element text."""
    if element is None:
        return None
    child = element.find(tag)
    if child is None:
        return None
    return child.get('value', child.text)


def _decode_rank(element: ET.Element) -> Rank:
    return Rank(
        type=element.get('type', ''),
        id=_int(element.get('id'), 'rank.id'),
        name=element.get('name', ''),
        friendly_name=element.get('friendlyname', ''),
        value=element.get('value', ''),
        bayes_average=element.get('bayesaverage', ''),
    )


def _decode_rating(element: Optional[ET.Element]) -> Rating:
    if element is None:
        return Rating()
    return Rating(
        value=element.get('value', ''),
        users_rated=_int(_value(element, 'usersrated'), 'usersrated'),
        average=_float(_value(element, 'average'), 'average'),
        bayes_average=_float(_value(element, 'bayesaverage'), 'bayesaverage'),
        std_dev=_float(_value(element, 'stddev'), 'stddev'),
        median=_float(_value(element, 'median'), 'median'),
        ranks=tuple(_decode_rank(rank) for rank in element.findall('ranks/rank')),
    )


def _decode_stats(element: Optional[ET.Element]) -> Stats:
    if element is None:
        return Stats()
    return Stats(
        min_players=_int(element.get('minplayers'), 'minplayers'),
        max_players=_int(element.get('maxplayers'), 'maxplayers'),
        min_play_time=_int(element.get('minplaytime'), 'minplaytime'),
        max_play_time=_int(element.get('maxplaytime'), 'maxplaytime'),
        playing_time=_int(element.get('playingtime'), 'playingtime'),
        num_owned=_int(element.get('numowned'), 'numowned'),
        rating=_decode_rating(element.find('rating')),
    )


def _decode_status(element: Optional[ET.Element]) -> Status:
    if element is None:
        return Status()
    return Status(
        own=_flag(element.get('own'), 'own'),
        prev_owned=_flag(element.get('prevowned'), 'prevowned'),
        for_trade=_flag(element.get('fortrade'), 'fortrade'),
        want=_flag(element.get('want'), 'want'),
        want_to_play=_flag(element.get('wanttoplay'), 'wanttoplay'),
        want_to_buy=_flag(element.get('wanttobuy'), 'wanttobuy'),
        wishlist=_flag(element.get('wishlist'), 'wishlist'),
        preordered=_flag(element.get('preordered'), 'preordered'),
        last_modified=element.get('lastmodified', ''),
    )


def _decode_item(element: ET.Element) -> Item:
    name = element.find('name')
    return Item(
        object_id=_int(element.get('objectid'), 'objectid'),
        coll_id=_int(element.get('collid'), 'collid'),
        name=(name.text or "").strip() if name is not None else "",
        sort_index=_int(name.get('sortindex'), 'sortindex') if name is not None else 0,
        object_type=element.get('objecttype', ''),
        subtype=element.get('subtype', ''),
        year_published=_int(_text(element, 'yearpublished'), 'yearpublished'),
        image=_text(element, 'image'),
        thumbnail=_text(element, 'thumbnail'),
        num_plays=_int(_text(element, 'numplays'), 'numplays'),
        stats=_decode_stats(element.find('stats')),
        status=_decode_status(element.find('status')),
    )


def decode_collection(document: Union[str, bytes]) -> Collection:
    """
    Parse a BGG collection document.

    Args:
        document: Raw XML as returned by the collection endpoint

    Returns:
        Collection with items in document order

    Raises:
        DecodeError: if the document is malformed or its root is not <items>
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise DecodeError(f"Malformed collection document: {e}") from e

    if root.tag != 'items':
        raise DecodeError(f"Expected <items> root element, got <{root.tag}>")

    collection = Collection(
        total_items=_int(root.get('totalitems'), 'totalitems'),
        terms_of_use=root.get('termsofuse', ''),
        pub_date=root.get('pubdate', ''),
        items=tuple(_decode_item(item) for item in root.findall('item')),
    )
    logger.debug(f"Decoded {len(collection.items)} item(s) (totalitems={collection.total_items})")
    return collection
