from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase


class Area(FrozenBase, frozen=True):
    id: str | None = None
    name: str | None = None
    sort_name: str | None = None
    type: str | None = None
