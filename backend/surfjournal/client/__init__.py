"""HTTP client for the news API."""

from surfjournal.client.api_client import NewsApiClient

__all__ = ["NewsApiClient"]
