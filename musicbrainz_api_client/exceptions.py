"""Errors raised by the MusicBrainz API client"""

from __future__ import annotations


class MusicBrainzError(Exception):
    """Base class for every error raised by this package"""


class TransportError(MusicBrainzError):
    """The request could not be sent or its response could not be read"""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url: str = url


class DecodeError(MusicBrainzError):
    """The response body is not JSON of the expected shape"""

    def __init__(self, message: str, content: str) -> None:
        super().__init__(message)
        self.content: str = content


class AmbiguousOrNotFoundError(MusicBrainzError):
    """A search expected to match exactly one entity matched some other number"""

    def __init__(self, message: str, count: int) -> None:
        super().__init__(message)
        self.count: int = count
