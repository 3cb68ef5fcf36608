# awg_warp_service/services/generator.py
import logging
from collections.abc import Callable

from ..common.crypto import generate_key_pair
from ..common.models import KeyPair, RenderedConfig
from .awg_config import DEFAULT_PROFILE, render_config
from .cloudflare_warp import WarpApiClient

WarpClientFactory = Callable[[], WarpApiClient]


class Awg15Service:
    """Runs the whole flow: keypair, WARP registration, WARP enablement, rendering."""

    def __init__(
        self,
        client_factory: WarpClientFactory = WarpApiClient,
        key_generator: Callable[[], KeyPair] = generate_key_pair,
        profile_name: str = DEFAULT_PROFILE,
    ) -> None:
        self._client_factory = client_factory
        self._key_generator = key_generator
        self._profile_name = profile_name

    def generate_config(self, endpoint: str | None = None) -> RenderedConfig:
        key_pair = self._key_generator()
        with self._client_factory() as client:
            registration = client.register(key_pair.public_key)
            network = client.enable_warp(registration.client_id, registration.token)

        rendered = render_config(key_pair, network, endpoint=endpoint, profile_name=self._profile_name)
        logging.info(f"Generated configuration {rendered.file_name}.")
        return rendered


def generate_config(endpoint: str | None = None) -> RenderedConfig:
    """High-level factory function to produce a fresh AWG config."""
    logging.info("Generating a new AWG configuration from a fresh WARP registration...")
    return Awg15Service().generate_config(endpoint)
