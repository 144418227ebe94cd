from __future__ import annotations

from typing import TYPE_CHECKING

from httpx import QueryParams

if TYPE_CHECKING:
    from collections.abc import Iterable

    from musicbrainz_api_client.api_client import ApiClient


class ApiBase:
    def __init__(self, api_client: ApiClient) -> None:
        self.api_client: ApiClient = api_client

    @staticmethod
    def _search_params(query: str, limit: int) -> QueryParams:
        return QueryParams({"query": query, "limit": str(limit)})

    @staticmethod
    def _lookup_params(inc: Iterable[str] | None) -> QueryParams:
        """Joins subqueries with spaces, the ``+`` in ``inc=a+b``"""
        if not inc:
            return QueryParams()
        return QueryParams({"inc": " ".join(inc)})
