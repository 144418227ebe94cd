from __future__ import annotations

from musicbrainz_api_client.models import FrozenBase


class Alias(FrozenBase, frozen=True):
    name: str | None = None
    type: str | None = None
