"""
Main CLI entry point for the BGG picker.

Prints the names of the matching games, one per line.
"""

import argparse
import logging
from typing import List, Optional

from ..collection import CollectionFetcher, game_names
from ..config import BGG_USERNAME, PLAYER_COUNT, PLAY_TIME, WEIGHT
from ..logging_config import setup_logging
from ..pipeline import GamePicker
from ..ranges import PLAY_TIMES, WEIGHTS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pick games from a BGG collection by player count and play time")
    parser.add_argument("--username", default=BGG_USERNAME, required=not BGG_USERNAME,
                        help="BGG username whose collection is searched (default: $BGG_USERNAME)")
    parser.add_argument("--players", type=int, default=PLAYER_COUNT,
                        help=f"Number of players (default: {PLAYER_COUNT})")
    parser.add_argument("--play-time", default=PLAY_TIME, choices=sorted(PLAY_TIMES),
                        help=f"Play time bucket (default: {PLAY_TIME})")
    parser.add_argument("--weight", default=WEIGHT, choices=sorted(WEIGHTS),
                        help=f"Complexity bucket, accepted but not applied yet (default: {WEIGHT})")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file (bare names go to the logs dir)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file)

    try:
        with CollectionFetcher() as fetcher:
            result = GamePicker(fetcher).pick(args.username, args.players, args.play_time, args.weight)
    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 130

    if not result.success:
        logger.warning(f"No games picked ({result.outcome.value}): {result.error}")

    for name in game_names(result.items):
        print(name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
