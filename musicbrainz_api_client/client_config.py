"""Things related to configuration management"""

from __future__ import annotations

from typing import TYPE_CHECKING

import msgspec

from musicbrainz_api_client.api_client import MUSICBRAINZ_API_ENDPOINT
from musicbrainz_api_client.version import __version__

if TYPE_CHECKING:
    from confuse import ConfigView


USER_AGENT: str = f"musicbrainz-api-client/{__version__}"


class ClientConfig(msgspec.Struct, frozen=True):
    """Stores the configuration of the client conveniently"""

    base_url: str = MUSICBRAINZ_API_ENDPOINT
    user_agent: str = USER_AGENT
    timeout: float = 10
    http2: bool = True

    # convert fields to serializable types
    def to_dict(self) -> dict[str, str | float | bool]:
        return {
            "base_url": self.base_url,
            "user_agent": self.user_agent,
            "timeout": self.timeout,
            "http2": self.http2,
        }

    @classmethod
    def from_config_view(
        cls, config: ConfigView, default: ClientConfig | None = None
    ) -> ClientConfig:
        """Creates a ClientConfig from a configuration view.

        Args:
            config: A view of the host application's configuration
            default: Optional default ClientConfig to use as base values.
                    If None, creates a new default instance.

        Returns:
            A new ClientConfig instance populated with values from the config,
            falling back to defaults when values are missing.
        """

        config.add((default if default else ClientConfig()).to_dict())  # pyright: ignore[reportUnknownMemberType]

        return cls(
            base_url=config["base_url"].as_str(),  # pyright: ignore[reportArgumentType]
            user_agent=config["user_agent"].as_str(),  # pyright: ignore[reportArgumentType]
            timeout=config["timeout"].as_number(),  # pyright: ignore[reportArgumentType]
            http2=config["http2"].get(bool),  # pyright: ignore[reportArgumentType]
        )
