"""Open Food Facts search API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from nutrition_query.domain.errors import (
    LookupBadJsonError,
    LookupHttpError,
    LookupNetworkError,
)

SEARCH_FIELDS = "product_name,nutriments,categories_tags,languages_tags"
ERROR_BODY_LIMIT = 200


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts product searches."""

    async def search_products(
        self, term: str, language: str, page_size: int = 10
    ) -> object:
        """Search products by term and return the decoded JSON payload."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client.

    Transport failures, non-2xx answers and undecodable bodies are raised as
    ``LookupNetworkError``, ``LookupHttpError`` and ``LookupBadJsonError``.
    """

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, user_agent: str, timeout_seconds: float = 15
    ) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(headers={"User-Agent": user_agent}),
            timeout_seconds=timeout_seconds,
        )

    async def search_products(
        self, term: str, language: str, page_size: int = 10
    ) -> object:
        """Run a full-text search restricted to one language tag."""
        url = f"{self.base_url.rstrip('/')}/cgi/search.pl"
        params = {
            "search_terms": term,
            "search_simple": "1",
            "action": "process",
            "json": "1",
            "page_size": str(page_size),
            "tagtype_0": "languages",
            "tag_contains_0": "contains",
            "tag_0": language,
            "fields": SEARCH_FIELDS,
            "sort_by": "unique_scans_n",
        }
        try:
            response = await self.http_client.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise LookupNetworkError(str(exc)) from exc

        if not response.is_success:
            raise LookupHttpError(
                response.status_code, response.text[:ERROR_BODY_LIMIT]
            )
        try:
            return response.json()
        except ValueError as exc:
            raise LookupBadJsonError("Response body is not valid JSON") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
