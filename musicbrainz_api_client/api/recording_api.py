from __future__ import annotations

from typing import TYPE_CHECKING

from musicbrainz_api_client.api._api_base import ApiBase
from musicbrainz_api_client.exceptions import AmbiguousOrNotFoundError
from musicbrainz_api_client.models.recording import Recording
from musicbrainz_api_client.models.search_result import RecordingSearchResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from musicbrainz_api_client.models.tag import Tag

TITLE_AND_ARTIST_LIMIT: int = 20


def field_query(**fields: str) -> str:
    """Builds a search query such as ``recording:Creep artist:Radiohead``.

    Values are inserted as-is, URL escaping happens when the query is
    encoded as a parameter.
    """
    return " ".join(f"{field}:{value}" for field, value in fields.items())


class RecordingApi(ApiBase):
    def search_recordings(
        self, title: str, limit: int, *, timeout: float | None = None
    ) -> tuple[Recording, ...]:
        """Searches for recordings by their title."""
        return self._search(
            query=title, limit=limit, timeout=timeout
        ).recordings

    def get_recording_by_id(
        self,
        id: str,
        inc: Iterable[str] | None = None,
        *,
        timeout: float | None = None,
    ) -> Recording:
        """Fetches a recording by its MBID."""
        return self.api_client.call_api(
            relative_path=f"recording/{id}",
            params=self._lookup_params(inc),
            return_type=Recording,
            timeout=timeout,
        )

    def search_recordings_by_title_and_artist(
        self, title: str, artist: str, *, timeout: float | None = None
    ) -> tuple[Recording, ...]:
        """Searches for recordings by song title and artist name."""
        return self._search(
            query=field_query(recording=title, artist=artist),
            limit=TITLE_AND_ARTIST_LIMIT,
            timeout=timeout,
        ).recordings

    def get_tags_by_title_and_artist_and_album(
        self,
        title: str,
        artist: str,
        album: str,
        *,
        timeout: float | None = None,
    ) -> tuple[tuple[Tag, ...], str | None]:
        """Returns the tags and first release date of a single recording.

        The search must match exactly one recording, which is then looked
        up by its MBID to get the tags.

        Raises:
            AmbiguousOrNotFoundError: the search matched zero or several
                recordings
        """
        recordings: tuple[Recording, ...] = self._search(
            query=field_query(recording=title, artist=artist, release=album),
            limit=1,
            timeout=timeout,
        ).recordings
        if len(recordings) != 1 or recordings[0].id is None:
            raise AmbiguousOrNotFoundError(
                "MusicBrainz didn't find the song", count=len(recordings)
            )

        recording: Recording = self.get_recording_by_id_with_tags(
            recordings[0].id, timeout=timeout
        )
        return recording.tags, recording.first_release_date

    def get_recording_by_id_with_tags(
        self, id: str, *, timeout: float | None = None
    ) -> Recording:
        """Fetches a recording by its MBID.

        Same request as get_recording_by_id, named for callers that read
        the tags.
        """
        return self.get_recording_by_id(id, timeout=timeout)

    def _search(
        self, query: str, limit: int, timeout: float | None
    ) -> RecordingSearchResult:
        return self.api_client.call_api(
            relative_path="recording/",
            params=self._search_params(query=query, limit=limit),
            return_type=RecordingSearchResult,
            timeout=timeout,
        )
