from musicbrainz_api_client.version import __version__

# Define package exports
__all__ = [
    "__version__",
    "AmbiguousOrNotFoundError",
    "ApiClient",
    "Alias",
    "Area",
    "Artist",
    "ArtistApi",
    "ArtistCredit",
    "ArtistName",
    "ArtistSearchResult",
    "ClientConfig",
    "CoverArtURL",
    "DecodeError",
    "GBImage",
    "MUSICBRAINZ_API_ENDPOINT",
    "MusicBrainzClient",
    "MusicBrainzError",
    "Recording",
    "RecordingApi",
    "RecordingSearchResult",
    "Relation",
    "RelationURL",
    "Release",
    "ReleaseApi",
    "ReleaseGroup",
    "ReleaseSearchResult",
    "Tag",
    "TextRepresentation",
    "TransportError",
]

# import apis into sdk package
from musicbrainz_api_client.api import ArtistApi, RecordingApi, ReleaseApi
from musicbrainz_api_client.api_client import MUSICBRAINZ_API_ENDPOINT, ApiClient
from musicbrainz_api_client.client import MusicBrainzClient
from musicbrainz_api_client.client_config import ClientConfig
from musicbrainz_api_client.exceptions import (
    AmbiguousOrNotFoundError,
    DecodeError,
    MusicBrainzError,
    TransportError,
)
from musicbrainz_api_client.models.alias import Alias
from musicbrainz_api_client.models.area import Area
from musicbrainz_api_client.models.artist import Artist, Relation
from musicbrainz_api_client.models.cover_art import CoverArtURL, GBImage
from musicbrainz_api_client.models.recording import ArtistName, Recording
from musicbrainz_api_client.models.relation_url import RelationURL
from musicbrainz_api_client.models.release import (
    ArtistCredit,
    Release,
    ReleaseGroup,
    TextRepresentation,
)
from musicbrainz_api_client.models.search_result import (
    ArtistSearchResult,
    RecordingSearchResult,
    ReleaseSearchResult,
)
from musicbrainz_api_client.models.tag import Tag
