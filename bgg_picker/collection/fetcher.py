"""
Collection fetcher for the BGG XML API2.

BGG does not answer collection requests synchronously. The first request for
a user's collection queues a job server-side and is answered with a non-200
status (usually 202 Accepted); the client is expected to repeat the identical
request until the document is ready.
"""

import logging
import threading
import time
from typing import Dict, Optional

import requests

from ..config import BGG_BASE_URL, MAX_REQUEST_ATTEMPTS, RETRY_DELAY, REQUEST_TIMEOUT
from ..error_handling import TransportError
from ..models import FetchResult

logger = logging.getLogger(__name__)


class CollectionFetcher:
    """
    Retrieves the raw XML of a user's owned board games from BGG.
    """

    def __init__(self,
                 base_url: str = BGG_BASE_URL,
                 max_attempts: int = MAX_REQUEST_ATTEMPTS,
                 retry_delay: float = RETRY_DELAY,
                 timeout: float = REQUEST_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """
        Initialize the collection fetcher.

        Args:
            base_url: Root of the XML API2 (without trailing slash)
            max_attempts: Maximum number of identical requests per fetch
            retry_delay: Seconds to wait between attempts (0 means retry immediately)
            timeout: Per-request timeout in seconds
            session: Optional requests session to reuse
        """
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.session = session or requests.Session()

    def __enter__(self) -> "CollectionFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/collection"

    @staticmethod
    def collection_params(owner: str) -> Dict[str, object]:
        """Query parameters for an owner's owned board games, with stats."""
        return {
            'subtype': 'boardgame',
            'own': 1,
            'stats': 1,
            'username': owner,
        }

    def fetch_document(self, owner: str, cancel: Optional[threading.Event] = None) -> FetchResult:
        """
        Request an owner's collection until BGG reports it ready.

        Args:
            owner: BGG username whose collection is fetched
            cancel: Optional event; when set, no further attempts are made

        Returns:
            FetchResult; ``ready`` is False when every attempt was answered
            with a non-200 status (or the fetch was cancelled), in which case
            ``body`` is empty

        Raises:
            TransportError: if a request fails before any response is received
        """
        params = self.collection_params(owner)
        attempts = 0
        status_code = None

        while attempts < self.max_attempts:
            if cancel is not None and cancel.is_set():
                logger.info(f"Fetch for '{owner}' cancelled after {attempts} attempt(s)")
                break

            attempts += 1
            try:
                response = self.session.get(self.collection_url, params=params, timeout=self.timeout)
            except requests.RequestException as e:
                logger.error(f"Error fetching collection for '{owner}' (attempt {attempts}): {e}")
                raise TransportError(owner, e) from e

            status_code = response.status_code
            if status_code == requests.codes.ok:
                logger.info(f"Collection for '{owner}' ready after {attempts} attempt(s)")
                return FetchResult(body=self._read_body(response), ready=True,
                                   attempts=attempts, status_code=status_code)

            logger.info(f"Collection for '{owner}' not ready (HTTP {status_code}), "
                        f"attempt {attempts}/{self.max_attempts}")
            if self.retry_delay > 0 and attempts < self.max_attempts:
                time.sleep(self.retry_delay)

        logger.warning(f"Collection for '{owner}' never became ready after {attempts} attempt(s)")
        return FetchResult(body="", ready=False, attempts=attempts, status_code=status_code)

    def fetch(self, owner: str) -> str:
        """
        Return the raw collection document for an owner.

        An empty string is returned (without error) when BGG never became ready.
        Use fetch_document() to tell that apart from a real response.
        """
        return self.fetch_document(owner).body

    @staticmethod
    def _read_body(response: requests.Response) -> str:
        # requests assumes ISO-8859-1 for text/* without a charset; BGG serves UTF-8
        content_type = response.headers.get('content-type', '').lower()
        if 'charset' not in content_type:
            response.encoding = 'utf-8'
        return response.text
