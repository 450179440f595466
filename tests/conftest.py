"""Pytest configuration and test helpers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest
import requests


# Ensure the package is importable when running tests without an editable install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_COLLECTION = """<?xml version="1.0" encoding="utf-8" standalone="yes"?>
<items totalitems="2" termsofuse="https://boardgamegeek.com/xmlapi/termsofuse" pubdate="Sat, 17 Oct 2026 09:12:44 +0000">
    <item objecttype="thing" objectid="13" subtype="boardgame" collid="12345">
        <name sortindex="1">Catan</name>
        <yearpublished>1995</yearpublished>
        <image>https://cf.geekdo-images.com/catan.jpg</image>
        <thumbnail>https://cf.geekdo-images.com/catan_t.jpg</thumbnail>
        <stats minplayers="2" maxplayers="4" minplaytime="60" maxplaytime="120" playingtime="45" numowned="250000">
            <rating value="N/A">
                <usersrated value="120000"/>
                <average value="7.1"/>
                <bayesaverage value="6.9"/>
                <stddev value="1.48"/>
                <median value="0"/>
                <ranks>
                    <rank type="subtype" id="1" name="boardgame" friendlyname="Board Game Rank" value="500" bayesaverage="6.9"/>
                    <rank type="family" id="5497" name="strategygames" friendlyname="Strategy Game Rank" value="Not Ranked" bayesaverage="Not Ranked"/>
                </ranks>
            </rating>
        </stats>
        <status own="1" prevowned="0" fortrade="0" want="0" wanttoplay="1" wanttobuy="0" wishlist="0" preordered="0" lastmodified="2024-01-01 10:00:00"/>
        <numplays>7</numplays>
    </item>
    <item objecttype="thing" objectid="822" subtype="boardgame" collid="12346">
        <name sortindex="1">Carcassonne</name>
        <yearpublished>2000</yearpublished>
        <stats minplayers="2" maxplayers="5" minplaytime="30" maxplaytime="45" playingtime="45" numowned="300000">
            <rating value="8">
                <usersrated value="130000"/>
                <average value="7.4"/>
            </rating>
        </stats>
        <status own="1" prevowned="0" fortrade="1" want="0" wanttoplay="0" wanttobuy="0" wishlist="0" preordered="0" lastmodified="2023-05-05 12:00:00"/>
        <numplays>0</numplays>
    </item>
</items>
"""


def make_response(status_code: int, body: str = "", content_type: str = "text/xml") -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.url = "https://boardgamegeek.com/xmlapi2/collection"
    return response


class FakeSession:
    """Stands in for requests.Session, replaying canned responses in order."""

    def __init__(self, responses: Iterable[requests.Response | Exception]):
        self.responses = list(responses)
        self.calls: list[dict] = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self.responses:
            raise AssertionError("FakeSession ran out of responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def sample_collection() -> str:
    return SAMPLE_COLLECTION
