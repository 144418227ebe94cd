from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import httpx
import pytest

from musicbrainz_api_client import ApiClient

if TYPE_CHECKING:
    from collections.abc import Iterator

BASE_URL: str = "https://mb.test/ws/2/"


class RecordingTransport(httpx.MockTransport):
    """Serves the given bodies in order and keeps every request it handled.

    Without bodies every request fails as if the connection was refused.
    """

    def __init__(self, bodies: tuple[str, ...], status_code: int) -> None:
        self.requests: list[httpx.Request] = []
        self._bodies: list[str] = list(bodies)
        self._status_code: int = status_code
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._bodies:
            raise httpx.ConnectError(
                "[Errno 111] Connection refused", request=request
            )
        return httpx.Response(
            status_code=self._status_code,
            content=self._bodies.pop(0).encode(),
            headers={"content-type": "application/json"},
        )


MakeApiClient = Callable[..., tuple[ApiClient, RecordingTransport]]


@pytest.fixture
def make_api_client() -> Iterator[MakeApiClient]:
    clients: list[ApiClient] = []

    def factory(
        *bodies: str, status_code: int = 200
    ) -> tuple[ApiClient, RecordingTransport]:
        transport = RecordingTransport(bodies, status_code=status_code)
        client = ApiClient(
            user_agent="musicbrainz-api-client-tests/0",
            base_url=BASE_URL,
            transport=transport,
        )
        clients.append(client)
        return client, transport

    yield factory
    for client in clients:
        client.close()
