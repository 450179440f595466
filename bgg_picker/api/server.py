"""
Runs the HTTP endpoint under uvicorn.
"""

import logging

import uvicorn

from ..config import HTTP_HOST, HTTP_PORT
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the uvicorn server on HTTP_HOST:HTTP_PORT."""
    setup_logging()
    logger.info(f"Starting HTTP server on {HTTP_HOST}:{HTTP_PORT}")
    uvicorn.run("bgg_picker.api.app:create_app", factory=True, host=HTTP_HOST, port=HTTP_PORT)


if __name__ == "__main__":
    main()
