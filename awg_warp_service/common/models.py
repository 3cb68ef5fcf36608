# awg_warp_service/common/models.py
from dataclasses import dataclass
from typing import NotRequired, TypedDict


# --- Dataclasses passed between the generation steps ---
@dataclass(frozen=True)
class KeyPair:
    """A Base64-encoded X25519 keypair for the tunnel handshake identity."""
    private_key: str
    public_key: str


@dataclass(frozen=True)
class RegistrationResult:
    """Identifier and bearer token of a freshly registered WARP device."""
    client_id: str
    token: str


@dataclass(frozen=True)
class WarpNetworkConfig:
    """Network parameters assigned by WARP once the tier is enabled."""
    peer_public_key: str
    address_v4: str
    address_v6: str


@dataclass(frozen=True)
class RenderedConfig:
    """The final AWG config text and the file name it should be saved under."""
    text: str
    file_name: str


# --- Type Definitions for the raw WARP API responses ---

class WarpApiRegistration(TypedDict):
    id: str
    token: str

class WarpApiRegistrationResponse(TypedDict):
    result: WarpApiRegistration

class WarpApiPeer(TypedDict):
    public_key: str
    endpoint: NotRequired[dict[str, str]]

class WarpApiInterfaceAddresses(TypedDict):
    v4: str
    v6: str

class WarpApiInterface(TypedDict):
    addresses: WarpApiInterfaceAddresses

class WarpApiConfig(TypedDict):
    peers: list[WarpApiPeer]
    interface: WarpApiInterface

class WarpApiDevice(TypedDict):
    id: str
    config: WarpApiConfig

class WarpApiDeviceResponse(TypedDict):
    result: WarpApiDevice


# --- Type Definitions for the HTTP surface ---

SiteverifyResponse = TypedDict(
    "SiteverifyResponse",
    {"success": bool, "error-codes": NotRequired[list[str]]},
)
