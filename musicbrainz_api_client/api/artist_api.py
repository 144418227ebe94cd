from __future__ import annotations

from typing import TYPE_CHECKING

from musicbrainz_api_client.api._api_base import ApiBase
from musicbrainz_api_client.models.artist import Artist
from musicbrainz_api_client.models.search_result import ArtistSearchResult

if TYPE_CHECKING:
    from collections.abc import Iterable


class ArtistApi(ApiBase):
    def search_artists(
        self, name: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Artist, ...]:
        """Searches for artists by their name."""
        result: ArtistSearchResult = self.api_client.call_api(
            relative_path="artist/",
            params=self._search_params(query=name, limit=limit),
            return_type=ArtistSearchResult,
            timeout=timeout,
        )
        return result.artists

    def get_artist_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Artist:
        """Fetches an artist by its MBID."""
        return self.api_client.call_api(
            relative_path=f"artist/{id}",
            params=self._lookup_params(inc),
            return_type=Artist,
            timeout=timeout,
        )
