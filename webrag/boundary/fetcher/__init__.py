"""Document fetcher adapters."""

from webrag.boundary.fetcher.web_fetcher import WebDocumentFetcher, html_to_text

__all__ = ["WebDocumentFetcher", "html_to_text"]
