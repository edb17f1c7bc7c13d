"""
Document retrieval for the decoder.

A single GET against the published document. There is no retry: a transport
failure or a non-success status ends the run.

Classes:
    DocumentFetchError: Raised when the document cannot be retrieved
    DocumentFetcher: Fetches a document body as text
"""

import logging
from typing import Optional

import requests

from logging_config import log_document_summary


class DocumentFetchError(Exception):
    """Raised when the source document is unreachable or returns a non-success status."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url
        self.status_code = status_code


class DocumentFetcher:
    """
    Fetches the published document that carries the coordinate table.
    """

    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT, logger: Optional[logging.Logger] = None):
        """
        Initialize DocumentFetcher.

        Args:
            timeout (float, optional): Request timeout in seconds; None waits indefinitely
            logger (logging.Logger, optional): Logger instance
        """
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    def fetch(self, url: str) -> str:
        """
        Download the document body as text.

        Args:
            url (str): Document URL

        Returns:
            str: The response body

        Raises:
            DocumentFetchError: On any transport error or non-success status
        """
        self.logger.info(f"fetch(): Requesting {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self.logger.error(f"fetch(): HTTP {status} for {url}")
            raise DocumentFetchError(url, str(e), status_code=status) from e
        except requests.exceptions.Timeout as e:
            self.logger.error(f"fetch(): Timeout fetching {url}")
            raise DocumentFetchError(url, "request timed out") from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"fetch(): Failed to fetch {url}: {e}")
            raise DocumentFetchError(url, str(e)) from e

        document_text = response.text
        log_document_summary("fetch()", url, document_text, self.logger)
        return document_text
