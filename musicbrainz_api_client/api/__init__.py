from musicbrainz_api_client.api.artist_api import ArtistApi
from musicbrainz_api_client.api.recording_api import RecordingApi
from musicbrainz_api_client.api.release_api import ReleaseApi

__all__ = ["ArtistApi", "RecordingApi", "ReleaseApi"]
