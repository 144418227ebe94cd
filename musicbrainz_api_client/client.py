from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from musicbrainz_api_client.api import ArtistApi, RecordingApi, ReleaseApi
from musicbrainz_api_client.api_client import ApiClient
from musicbrainz_api_client.client_config import ClientConfig

if not sys.version_info < (3, 11):
    from typing import Self  # pyright: ignore[reportUnreachable]
else:
    from typing_extensions import Self

if TYPE_CHECKING:
    from collections.abc import Iterable
    from logging import Logger
    from types import TracebackType

    import httpx

    from musicbrainz_api_client.models.artist import Artist
    from musicbrainz_api_client.models.recording import Recording
    from musicbrainz_api_client.models.release import Release
    from musicbrainz_api_client.models.tag import Tag


class MusicBrainzClient:
    """All MusicBrainz operations behind a single shared ApiClient."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        logger: Logger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config: ClientConfig = config if config else ClientConfig()
        self.api_client: ApiClient = ApiClient(
            user_agent=self.config.user_agent,
            base_url=self.config.base_url,
            logger=logger,
            timeout=self.config.timeout,
            http2=self.config.http2,
            transport=transport,
        )
        self.artist_api: ArtistApi = ArtistApi(api_client=self.api_client)
        self.release_api: ReleaseApi = ReleaseApi(api_client=self.api_client)
        self.recording_api: RecordingApi = RecordingApi(
            api_client=self.api_client
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self.api_client.close()

    def search_artists(
        self, name: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Artist, ...]:
        return self.artist_api.search_artists(name, limit, timeout=timeout)

    def get_artist_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Artist:
        return self.artist_api.get_artist_by_id(id, inc, timeout=timeout)

    def search_releases(
        self, title: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Release, ...]:
        return self.release_api.search_releases(title, limit, timeout=timeout)

    def get_release_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Release:
        return self.release_api.get_release_by_id(id, inc, timeout=timeout)

    def search_recordings(
        self, title: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Recording, ...]:
        return self.recording_api.search_recordings(
            title, limit, timeout=timeout
        )

    def get_recording_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Recording:
        return self.recording_api.get_recording_by_id(id, inc, timeout=timeout)

    def search_recordings_by_title_and_artist(
        self, title: str, artist: str, *, timeout: float | None = None
    ) -> tuple[Recording, ...]:
        return self.recording_api.search_recordings_by_title_and_artist(
            title, artist, timeout=timeout
        )

    def get_tags_by_title_and_artist_and_album(
        self,
        title: str,
        artist: str,
        album: str,
        *,
        timeout: float | None = None,
    ) -> tuple[tuple[Tag, ...], str | None]:
        return self.recording_api.get_tags_by_title_and_artist_and_album(
            title, artist, album, timeout=timeout
        )

    def get_recording_by_id_with_tags(
        self, id: str, *, timeout: float | None = None
    ) -> Recording:
        return self.recording_api.get_recording_by_id_with_tags(
            id, timeout=timeout
        )
