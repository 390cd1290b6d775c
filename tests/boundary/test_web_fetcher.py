"""Tests for the requests + BeautifulSoup web fetcher."""

from unittest.mock import MagicMock

import pytest
import requests

from webrag.boundary.fetcher import WebDocumentFetcher, html_to_text

URL = "https://example.com/paris"

PAGE = """
<html>
  <head><title>Paris</title><style>body { color: red; }</style></head>
  <body>
    <script>var tracking = true;</script>
    <h1>Paris</h1>
    <p>Paris is the capital of France.</p>
    <noscript>Enable JavaScript</noscript>
  </body>
</html>
"""


def make_response(text: str, content_type: str = "text/html; charset=utf-8", status: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status
    response.headers = {"Content-Type": content_type}
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


class TestHtmlToText:
    """Test markup stripping."""

    def test_keeps_visible_text_only(self) -> None:
        """Should drop script, style and noscript content."""
        text = html_to_text(PAGE)

        assert "Paris is the capital of France." in text
        assert "tracking" not in text
        assert "color: red" not in text
        assert "Enable JavaScript" not in text


class TestWebDocumentFetcher:
    """Test fetching with a mocked requests session."""

    @pytest.mark.asyncio
    async def test_fetch_html_page(self, session) -> None:
        """Should return extracted text of an HTML page."""
        session.get.return_value = make_response(PAGE)
        fetcher = WebDocumentFetcher(timeout=5.0, session=session)

        text = await fetcher.fetch(URL)

        assert "Paris is the capital of France." in text
        assert "<p>" not in text
        session.get.assert_called_once_with(URL, timeout=5.0)

    @pytest.mark.asyncio
    async def test_plain_text_passes_through(self, session) -> None:
        """Should return text/plain bodies unchanged."""
        session.get.return_value = make_response("Paris  is\nthe capital.", content_type="text/plain")

        text = await WebDocumentFetcher(session=session).fetch(URL)

        assert text == "Paris  is\nthe capital."

    @pytest.mark.asyncio
    async def test_unsupported_content_type_returns_empty(self, session) -> None:
        """Should return "" for binary content."""
        session.get.return_value = make_response("%PDF-1.7", content_type="application/pdf")

        assert await WebDocumentFetcher(session=session).fetch(URL) == ""

    @pytest.mark.asyncio
    async def test_http_error_returns_empty(self, session) -> None:
        """Should fail soft on 4xx/5xx responses."""
        session.get.return_value = make_response("Not Found", status=404)

        assert await WebDocumentFetcher(session=session).fetch(URL) == ""

    @pytest.mark.asyncio
    async def test_network_error_returns_empty(self, session) -> None:
        """Should fail soft on connection errors and timeouts."""
        session.get.side_effect = requests.ConnectionError("connection refused")

        assert await WebDocumentFetcher(session=session).fetch(URL) == ""

    @pytest.mark.asyncio
    async def test_default_session_sends_user_agent(self) -> None:
        """Should set the configured User-Agent on its own session."""
        fetcher = WebDocumentFetcher(user_agent="webrag-test/1.0")

        assert fetcher._session.headers["User-Agent"] == "webrag-test/1.0"
        await fetcher.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_session(self, session) -> None:
        """Should close the underlying requests session."""
        await WebDocumentFetcher(session=session).aclose()

        session.close.assert_called_once_with()
