"""
Web document fetcher.

Downloads a URL and reduces it to plain text. Fails soft: any HTTP or
network error is logged and reported as empty content.

Dependencies: requests, bs4
System role: Document Fetcher collaborator for the ingestion pipeline
"""

import asyncio
import logging

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "webrag/0.1"

_NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


def html_to_text(html: str) -> str:
    """Strip markup and non-content elements, keeping visible text."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup(_NON_CONTENT_TAGS):
        element.decompose()
    return soup.get_text(separator=" ")


class WebDocumentFetcher:
    """Fetch URLs over HTTP(S) and extract their text."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize fetcher with HTTP settings.

        Args:
            timeout: Per-request timeout in seconds
            user_agent: User-Agent header value
            session: Optional pre-configured requests session (its headers are kept)
        """
        self._timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = user_agent
        self._session = session

    async def fetch(self, url: str) -> str:
        """
        Fetch a URL and return its plain text.

        Args:
            url: Document URL

        Returns:
            str: Extracted text, or "" when the document could not be fetched
        """
        return await asyncio.to_thread(self._fetch_sync, url)

    async def aclose(self) -> None:
        self._session.close()

    def _fetch_sync(self, url: str) -> str:
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(
                "%s:fetch - Request failed: %s",
                __name__,
                e,
                extra={"url": url, "error_type": type(e).__name__},
            )
            return ""

        content_type = response.headers.get("Content-Type", "").lower()
        if not content_type or "html" in content_type or "xml" in content_type:
            text = html_to_text(response.text)
        elif content_type.startswith("text/"):
            text = response.text
        else:
            logger.warning(
                "%s:fetch - Unsupported content type %s",
                __name__,
                content_type,
                extra={"url": url},
            )
            return ""

        logger.info(
            "%s:fetch - Fetched document",
            __name__,
            extra={"url": url, "status_code": response.status_code, "text_length": len(text)},
        )
        return text
