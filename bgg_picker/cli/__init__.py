"""
Command-line interface for the BGG picker.

This module provides the one-shot command that prints the games in a
collection matching a player count and play time.
"""

from .main import main

__all__ = [
    "main",
]
