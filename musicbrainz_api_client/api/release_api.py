from __future__ import annotations

from typing import TYPE_CHECKING

from musicbrainz_api_client.api._api_base import ApiBase
from musicbrainz_api_client.models.release import Release
from musicbrainz_api_client.models.search_result import ReleaseSearchResult

if TYPE_CHECKING:
    from collections.abc import Iterable


class ReleaseApi(ApiBase):
    def search_releases(
        self, title: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Release, ...]:
        """Searches for releases by their title."""
        result: ReleaseSearchResult = self.api_client.call_api(
            relative_path="release/",
            params=self._search_params(query=title, limit=limit),
            return_type=ReleaseSearchResult,
            timeout=timeout,
        )
        return result.releases

    def get_release_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Release:
        """Fetches a release by its MBID."""
        return self.api_client.call_api(
            relative_path=f"release/{id}",
            params=self._lookup_params(inc),
            return_type=Release,
            timeout=timeout,
        )
