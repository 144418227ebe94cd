from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase
from musicbrainz_api_client.models.artist import Artist
from musicbrainz_api_client.models.recording import Recording
from musicbrainz_api_client.models.release import Release


class SearchResultBase(FrozenBase, frozen=True):
    created: str | None = None
    count: int | None = None
    offset: int | None = None


class ArtistSearchResult(SearchResultBase, frozen=True):
    artists: tuple[Artist, ...] | None = ()


class ReleaseSearchResult(SearchResultBase, frozen=True):
    releases: tuple[Release, ...] | None = ()


class RecordingSearchResult(SearchResultBase, frozen=True):
    recordings: tuple[Recording, ...] | None = ()
