from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase
from musicbrainz_api_client.models.artist import Relation
from musicbrainz_api_client.models.release import Release
from musicbrainz_api_client.models.tag import Tag


class ArtistName(FrozenBase, frozen=True):
    """Artist credit as it appears on a recording.

    Same shape as ArtistCredit; the two are kept apart so each response
    type keeps its own record.
    """

    name: str | None = None


class Recording(FrozenBase, frozen=True):
    id: str | None = None
    title: str | None = None
    # milliseconds
    length: int | None = None
    first_release_date: str | None = None
    relations: tuple[Relation, ...] | None = ()
    tags: tuple[Tag, ...] | None = ()
    artist_credit: tuple[ArtistName, ...] | None = ()
    releases: tuple[Release, ...] | None = ()
