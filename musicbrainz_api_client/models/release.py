from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase
from musicbrainz_api_client.models.artist import Relation
from musicbrainz_api_client.models.cover_art import CoverArtURL
from musicbrainz_api_client.models.tag import Tag


class TextRepresentation(FrozenBase, frozen=True):
    language: str | None = None
    script: str | None = None


class ArtistCredit(FrozenBase, frozen=True):
    """Artist credit as it appears on a release"""

    name: str | None = None


class ReleaseGroup(FrozenBase, frozen=True):
    id: str | None = None
    type: str | None = None
    title: str | None = None
    primary_type: str | None = None


class Release(FrozenBase, frozen=True):
    id: str | None = None
    title: str | None = None
    status: str | None = None
    text_representation: TextRepresentation | None = None
    artist_credit: tuple[ArtistCredit, ...] | None = ()
    release_group: ReleaseGroup | None = None
    relations: tuple[Relation, ...] | None = ()
    tags: tuple[Tag, ...] | None = ()
    cover_art_archive: CoverArtURL | tuple[CoverArtURL, ...] | None = None
