from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase


class RelationURL(FrozenBase, frozen=True):
    """Target of a url relationship, ``resource`` holds the link itself"""

    id: str | None = None
    resource: str | None = None
