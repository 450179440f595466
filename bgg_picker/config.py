"""
Configuration settings for the BGG collection picker.
"""

import logging
import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent  # Go up one level to workspace root
# Logs directory for per-run logs
LOGS_DIR = Path(os.environ.get("BGG_PICKER_LOGS_DIR", PROJECT_ROOT / "bgg_picker_cache" / "logs"))
LOG_LEVEL = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

# BGG XML API2 configuration
BGG_BASE_URL = os.environ.get("BGG_BASE_URL", "https://boardgamegeek.com/xmlapi2").rstrip("/")
# BGG queues collection requests; keep asking until it answers 200 or we give up
MAX_REQUEST_ATTEMPTS = int(os.environ.get("MAX_REQUEST_ATTEMPTS", "5"))
RETRY_DELAY = float(os.environ.get("RETRY_DELAY", "0"))  # seconds between attempts
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "30"))

# HTTP server configuration
HTTP_HOST = os.environ.get("HTTP_HOST", "localhost")
HTTP_PORT = int(os.environ.get("HTTP_PORT", "8080"))

# Defaults for the one-shot command
BGG_USERNAME = os.environ.get("BGG_USERNAME", "")
PLAYER_COUNT = int(os.environ.get("PLAYER_COUNT", "2"))
PLAY_TIME = os.environ.get("PLAY_TIME", "medium")
WEIGHT = os.environ.get("WEIGHT", "medium")
