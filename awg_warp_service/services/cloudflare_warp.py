# awg_warp_service/services/cloudflare_warp.py
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import cast

import requests
from requests import Response, Session

from ..common.exceptions import NetworkError, UpstreamContractError
from ..common.models import (
    RegistrationResult,
    WarpApiDeviceResponse,
    WarpApiRegistrationResponse,
    WarpNetworkConfig,
)


@dataclass(frozen=True)
class WarpApiSettings:
    """Fixed identity the client presents to the WARP API."""
    base_url: str = "https://api.cloudflareclient.com/v0i1909051800"
    user_agent: str = "okhttp/3.12.1"
    device_type: str = "ios"
    locale: str = "en_US"
    timeout: float = 30

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }


class WarpApiClient:
    """Registers a device with Cloudflare WARP and enables the WARP tier for it."""

    _session: Session
    _settings: WarpApiSettings

    def __init__(self, settings: WarpApiSettings | None = None, session: Session | None = None) -> None:
        self._settings = settings or WarpApiSettings()
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(self._settings.default_headers)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "WarpApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def register(self, public_key: str) -> RegistrationResult:
        """Registers a new device for the given public key."""
        logging.info("Registering new device with the WARP API...")
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        payload: dict[str, str] = {
            "install_id": "",
            "tos": timestamp,
            "key": public_key,
            "fcm_token": "",
            "type": self._settings.device_type,
            "locale": self._settings.locale,
        }
        data = cast(WarpApiRegistrationResponse, self._request("POST", "reg", payload))

        result = data.get("result") if isinstance(data, dict) else None
        if not isinstance(result, dict) or not result.get("id") or not result.get("token"):
            raise UpstreamContractError("Invalid registration response structure")

        logging.info(f"Device registered with id {result['id']}.")
        return RegistrationResult(client_id=result["id"], token=result["token"])

    def enable_warp(self, client_id: str, token: str) -> WarpNetworkConfig:
        """Switches the registered device to WARP mode and returns its network parameters."""
        logging.info(f"Enabling WARP for device {client_id}...")
        headers = {"Authorization": f"Bearer {token}"}
        data = cast(
            WarpApiDeviceResponse,
            self._request("PATCH", f"reg/{client_id}", {"warp_enabled": True}, headers),
        )

        try:
            config = data["result"]["config"]
            peer = config["peers"][0]
            addresses = config["interface"]["addresses"]
            fields = {
                "public_key": cast(object, peer["public_key"]),
                "v4": cast(object, addresses["v4"]),
                "v6": cast(object, addresses["v6"]),
            }
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamContractError(f"Invalid WARP configuration response structure: missing {e}") from e

        for name, value in fields.items():
            if not isinstance(value, str) or not value:
                raise UpstreamContractError(
                    f"Invalid WARP configuration response structure: '{name}' is {value!r}"
                )

        return WarpNetworkConfig(
            peer_public_key=peer["public_key"],
            address_v4=addresses["v4"],
            address_v6=addresses["v6"],
        )

    def _request(
        self,
        method: str,
        endpoint: str,
        body: dict[str, object] | dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> object:
        url = f"{self._settings.base_url}/{endpoint}"
        try:
            response: Response = self._session.request(
                method, url, json=body, headers=headers, timeout=self._settings.timeout,
            )
            if not response.ok:
                logging.error(f"WARP API {method} {endpoint} returned {response.status_code}. Body: {response.text}")
                raise NetworkError(
                    f"Cloudflare API request failed: HTTP {response.status_code}: {response.reason}"
                )
            return cast(object, response.json())
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Cloudflare API request failed: {e}") from e
