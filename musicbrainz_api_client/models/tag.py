from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase


class Tag(FrozenBase, frozen=True):
    name: str | None = None
    count: int | None = None
