from __future__ import annotations

import logging
import weakref
from functools import cache
from typing import TYPE_CHECKING, TypeVar

import httpx
import msgspec

from musicbrainz_api_client.exceptions import DecodeError, TransportError

if TYPE_CHECKING:
    from logging import Logger


T = TypeVar("T")

MUSICBRAINZ_API_ENDPOINT: str = "https://musicbrainz.org/ws/2/"


class ApiClient:
    """
    Generic MusicBrainz API client using httpx and msgspec
    """

    def __init__(
        self,
        user_agent: str,
        base_url: httpx.URL | str = MUSICBRAINZ_API_ENDPOINT,
        logger: Logger | None = None,
        timeout: float = 10,
        http2: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._log: Logger = (
            logger
            if logger is not None
            else logging.getLogger("musicbrainz_api_client")
        )
        self.default_headers: httpx.Headers = httpx.Headers(
            headers={
                "accept": "application/json",
            }
        )
        self.user_agent = user_agent
        self.base_url: str | httpx.URL = base_url
        self.client: httpx.Client = httpx.Client(
            base_url=httpx.URL(url=self.base_url),
            http2=http2,
            timeout=timeout,
            transport=transport,
        )
        _ = weakref.finalize(self, self.client.close)

    @property
    def user_agent(self) -> str:
        """User agent for this API client"""
        return self.default_headers["User-Agent"]

    @user_agent.setter
    def user_agent(self, value: str) -> None:
        self.default_headers["User-Agent"] = value

    @classmethod
    @cache
    def _get_decoder(cls, target_type: type[T]) -> msgspec.json.Decoder[T]:
        """Caches and returns a decoder for the specified type"""
        return msgspec.json.Decoder(type=target_type)

    def decode(self, content: str | bytes, target_type: type[T]) -> T:
        decoder: msgspec.json.Decoder[T] = self._get_decoder(
            target_type=target_type
        )
        return decoder.decode(content)

    def call_api(
        self,
        relative_path: str,
        params: httpx.QueryParams,
        return_type: type[T],
        headers: httpx.Headers | None = None,
        timeout: float | None = None,
    ) -> T:
        """Makes a GET request to the API and returns structured response data.

        The status code is not checked: an error page that is valid JSON
        decodes into an empty result of ``return_type``.

        Args:
            relative_path: API endpoint path to request
            params: query parameters, ``fmt=json`` is appended
            return_type: type the response body is decoded into
            headers: extra headers, the default headers take precedence
            timeout: seconds, overrides the client timeout for this call

        Returns:
            Structured response data

        Raises:
            TransportError: the request failed or the body could not be read
            DecodeError: the body is not JSON of the shape of ``return_type``
        """
        if not headers:
            headers = httpx.Headers()
        headers.update(headers=self.default_headers)
        params = params.set("fmt", "json")

        request: httpx.Request = self.client.build_request(
            method="GET",
            url=relative_path,
            headers=headers,
            params=params,
            timeout=(
                httpx.USE_CLIENT_DEFAULT if timeout is None else timeout
            ),
        )
        self._log.debug("url: %s", request.url)
        try:
            response: httpx.Response = self.client.send(request=request)
        except httpx.HTTPError as e:
            self._log.error("Error fetching data - %s", e)
            raise TransportError(str(e), url=str(request.url)) from e

        if response.is_error:
            self._log.warning(
                "%s returned status %d, decoding body anyway",
                request.url,
                response.status_code,
            )
        try:
            return self.decode(
                content=response.content, target_type=return_type
            )
        except msgspec.DecodeError as e:
            self._log.debug("Undecodable response body: %s", response.text)
            raise DecodeError(str(e), content=response.text) from e

    def close(self) -> None:
        self._log.debug("Closing %s", self.client)
        self.client.close()
