"""
HTTP entry point: ``GET /?username=...&playerCount=...&playTime=...``.

Answers with a JSON array of game names. Upstream failures are not surfaced
to the caller; they show up as an empty array and in the logs. Client errors
are answered with ``400 {"message": ...}``.
"""

import logging
import re
from typing import Callable, List, Literal, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .. import __version__
from ..collection import CollectionFetcher, game_names
from ..logging_config import setup_logging
from ..pipeline import GamePicker

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only: no whitespace, decimals or underscores
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

FetcherFactory = Callable[[], CollectionFetcher]


class PickRequest(BaseModel):
    """Query parameters of a pick request."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(min_length=1)
    player_count: int = Field(alias="playerCount", ge=0, strict=True)
    play_time: str = Field(alias="playTime", min_length=1)
    weight: Optional[Literal["light", "medium", "heavy"]] = None

    @field_validator("player_count", mode="before")
    @classmethod
    def parse_player_count(cls, value: object) -> object:
        if isinstance(value, str):
            if not INTEGER_PATTERN.fullmatch(value):
                raise ValueError(f"not an integer: {value!r}")
            return int(value)
        return value


def _validation_message(error: ValidationError) -> str:
    fields = {str(err["loc"][0]) for err in error.errors() if err.get("loc")}
    if fields & {"playerCount", "player_count"}:
        return "Invalid player count"
    if "weight" in fields:
        return "Invalid weight"
    return "Invalid parameters"


def client_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": message})


def get_fetcher_factory(app: FastAPI) -> FetcherFactory:
    factory = getattr(app.state, "fetcher_factory", None)
    if not callable(factory):
        raise RuntimeError("Collection fetcher factory not initialised")
    return factory


def register_routes(app: FastAPI) -> None:
    @app.get("/", response_model=List[str])
    def pick_games_endpoint(
        request: Request,
        username: Optional[str] = None,
        playerCount: Optional[str] = None,
        playTime: Optional[str] = None,
        weight: Optional[str] = None,
    ):
        # Sync route: FastAPI runs it in the thread pool, so the blocking fetch is fine
        if not username or not playerCount or not playTime:
            return client_error("Missing parameters")

        try:
            query = PickRequest.model_validate({
                "username": username,
                "playerCount": playerCount,
                "playTime": playTime,
                "weight": weight or None,
            })
        except ValidationError as e:
            message = _validation_message(e)
            logger.info(f"Rejected request for '{username}': {message}")
            return client_error(message)

        # One fetcher (and requests session) per request; sessions are not shared across threads
        with get_fetcher_factory(request.app)() as fetcher:
            result = GamePicker(fetcher).pick(
                query.username, query.player_count, query.play_time, query.weight
            )
        if not result.success:
            logger.warning(f"Answering '{query.username}' with no games ({result.outcome.value}): {result.error}")
        return game_names(result.items)


def create_app(fetcher_factory: Optional[FetcherFactory] = None) -> FastAPI:
    """Build the FastAPI application. Called by the server and Lambda entry points."""
    setup_logging()
    fastapi_app = FastAPI(
        title="BGG Picker",
        description="Pick games from a BoardGameGeek collection by player count and play time",
        version=__version__,
    )
    fastapi_app.state.fetcher_factory = fetcher_factory or CollectionFetcher
    register_routes(fastapi_app)
    return fastapi_app
