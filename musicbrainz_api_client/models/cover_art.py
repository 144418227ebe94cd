from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase


class GBImage(FrozenBase, frozen=True):
    image: str | None = None
    types: tuple[str, ...] | None = ()


class CoverArtURL(FrozenBase, frozen=True):
    """Cover Art Archive summary attached to a release lookup"""

    artwork: bool | None = False
    front: bool | None = False
    back: bool | None = False
    count: int | None = 0
    images: tuple[GBImage, ...] | None = ()
