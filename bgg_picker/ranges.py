"""
Named numeric buckets used to classify play time and complexity weight.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValueRange:
    """Inclusive integer interval [min, max]."""
    min: int = 0
    max: int = 0

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


def matches(interval: ValueRange, value: int) -> bool:
    """Return True if value lies within the closed interval."""
    return interval.contains(value)


# Boundaries overlap on purpose: 30 minutes is both short and medium.
PLAY_TIMES: Mapping[str, ValueRange] = MappingProxyType({
    "short": ValueRange(0, 30),
    "medium": ValueRange(30, 90),
    "long": ValueRange(90, 1000),
})

# Complexity weight buckets. Collection stats carry no weight, so nothing filters on these yet.
WEIGHTS: Mapping[str, ValueRange] = MappingProxyType({
    "light": ValueRange(1, 2),
    "medium": ValueRange(2, 3),
    "heavy": ValueRange(3, 5),
})

# Lookup misses fall back to [0, 0], which only matches a value of zero
EMPTY_RANGE = ValueRange(0, 0)


def _lookup(table: Mapping[str, ValueRange], name: str, kind: str) -> ValueRange:
    interval = table.get(name)
    if interval is None:
        logger.warning(f"Unknown {kind} bucket '{name}', using {EMPTY_RANGE}")
        return EMPTY_RANGE
    return interval


def play_time_range(name: str) -> ValueRange:
    """Interval for a play time bucket name (short, medium, long)."""
    return _lookup(PLAY_TIMES, name, "play time")


def weight_range(name: str) -> ValueRange:
    """Interval for a complexity weight bucket name (light, medium, heavy)."""
    return _lookup(WEIGHTS, name, "weight")
