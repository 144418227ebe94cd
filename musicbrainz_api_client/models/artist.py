from __future__ import annotations

import msgspec

from musicbrainz_api_client.models import FrozenBase
from musicbrainz_api_client.models.alias import Alias
from musicbrainz_api_client.models.area import Area
from musicbrainz_api_client.models.relation_url import RelationURL
from musicbrainz_api_client.models.tag import Tag


class Relation(FrozenBase, frozen=True):
    """Relationship to another entity.

    Shared by artists, releases and recordings. Only the target kinds the
    client reads are declared.
    """

    type: str | None = None
    url: RelationURL | str | None = None
    artist: Artist | None = None


class Artist(FrozenBase, frozen=True):
    id: str | None = None
    name: str | None = None
    sort_name: str | None = None
    type: str | None = None
    country: str | None = None
    area: Area | str | None = None
    begin_date: str | None = msgspec.field(default=None, name="begin_date")
    end_date: str | None = msgspec.field(default=None, name="end_date")
    disambiguation: str | None = None
    aliases: tuple[Alias, ...] | None = ()
    relations: tuple[Relation, ...] | None = ()
    tags: tuple[Tag, ...] | None = ()
