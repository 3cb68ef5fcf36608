# awg_warp_service/services/awg_config.py
import logging
from dataclasses import dataclass

from ..common.exceptions import ValidationError
from ..common.models import KeyPair, RenderedConfig, WarpNetworkConfig

DEFAULT_PROFILE = "awg15"
DEFAULT_ENDPOINT = "162.159.195.1:500"
DNS_SERVERS = "1.1.1.1, 2606:4700:4700::1111, 1.0.0.1, 2606:4700:4700::1001"
MTU = 1280
ALLOWED_IPS = "0.0.0.0/0, ::/0"


@dataclass(frozen=True)
class ObfuscationProfile:
    """AmneziaWG junk-packet, padding and header knobs plus the I1 scrambling payload."""
    name: str
    file_prefix: str
    jc: int
    jmin: int
    jmax: int
    s1: int
    s2: int
    h1: int
    h2: int
    h3: int
    h4: int
    i1: str


# Opaque, protocol-version-specific payload. Must be emitted exactly as is.
_AWG15_I1 = (
    "<b 0x"
    "c2000000011419fa4bb3599f336777de79f81ca9a8d80d91eeec000044c635cef024a885"
    "dcb66d1420a91a8c427e87d6cf8e08b563932f449412cddf77d3e2594ea1c7a183c238a8"
    "9e9adb7ffa57c133e55c59bec101634db90afb83f75b19fe703179e26a31902324c73f82"
    "d9354e1ed8da39af610afcb27e6590a44341a0828e5a3d2f0e0f7b0945d7bf3402feea0e"
    "e6332e19bdf48ffc387a97227aa97b205a485d282cd66d1c384bafd63dc42f822c4df210"
    "9db5b5646c458236ddcc01ae1c493482128bc0830c9e1233f0027a0d262f92b49d9d8abd"
    "9a9e0341f6e1214761043c021d7aa8c464b9d865f5fbe234e49626e00712031703a3e23e"
    "f82975f014ee1e1dc428521dc23ce7c6c13663b19906240b3efe403cf30559d798871557"
    "e4e60e86c29ea4504ed4d9bb8b549d0e8acd6c334c39bb8fb42ede68fb2aadf00cfc8bcc"
    "12df03602bbd4fe701d64a39f7ced112951a83b1dbbe6cd696dd3f15985c1b9fef72fa8d"
    "0319708b633cc4681910843ce753fac596ed9945d8b839aeff8d3bf0449197bd0bb22ab8"
    "efd5d63eb4a95db8d3ffc796ed5bcf2f4a136a8a36c7a0c65270d511aebac733e61d4140"
    "50088a1c3d868fb52bc7e57d3d9fd132d78b740a6ecdc6c24936e92c28672dbe00928d89"
    "b891865f885aeb4c4996d50c2bbbb7a99ab5de02ac89b3308e57bcecf13f2da0333d1420"
    "e18b66b4c23d625d836b538fc0c221d6bd7f566a31fa292b85be96041d8e0bfe655d5dc1"
    "afed23eb8f2b3446561bbee7644325cc98d31cea38b865bdcc507e48c6ebdc7553be7bd6"
    "ab963d5a14615c4b81da7081c127c791224853e2d19bafdc0d9f3f3a6de898d14abb0e2b"
    "c849917e0a599ed4a541268ad0e60ea4d147dc33d17fa82f22aa505ccb53803a31d10a7c"
    "a2fea0b290a52ee92c7bf4aab7cea4e3c07b1989364eed87a3c6ba65188cd349d37ce4ee"
    "fde9ec43bab4b4dc79e03469c2ad6b902e28e0bbbbf696781ad4edf424ffb35ce0236d37"
    "3629008f142d04b5e08a124237e03e3149f4cdde92d7fae581a1ac332e26b2c9c1a6bdec"
    "5b3a9c7a2a870f7a0c25fc6ce245e029b686e346c6d862ad8df6d9b62474fbc31dbb9147"
    "11f78074d4441f4e6e9edca3c52315a5c0653856e23f681558d669f4a4e6915bcf42b56c"
    "e36cb7dd3983b0b1d6fdf0f8efddb68e7ca0ae9dd4570fe6978fbb524109f6ec957ca61f"
    "1767ef74eb803b0f16abd0087cf2d01bc1db1c01d97ac81b3196c934586963fe7cf2d310"
    "e0739621e8bd00dc23fded18576d8c8f285d7bb5f43b547af3c76235de8b6f757f817683"
    "b2151600b11721219212bf27558edd439e73fce951f61d582320e5f4d6c315c71129b719"
    "277fc144bbe8ded25ab6d29b6"
)

PROFILES: dict[str, ObfuscationProfile] = {
    "awg15": ObfuscationProfile(
        name="awg15",
        file_prefix="AWG15",
        jc=120,
        jmin=23,
        jmax=911,
        s1=0,
        s2=0,
        h1=1,
        h2=2,
        h3=3,
        h4=4,
        i1=_AWG15_I1,
    ),
}


def get_profile(name: str) -> ObfuscationProfile:
    try:
        return PROFILES[name]
    except KeyError:
        raise ValidationError(f"Unknown obfuscation profile '{name}'. Available: {', '.join(sorted(PROFILES))}")


def config_file_name(address_v4: str, profile: ObfuscationProfile) -> str:
    """AWG15_<ipv4 without prefix length>.conf"""
    return f"{profile.file_prefix}_{address_v4.split('/')[0]}.conf"


def _interface_section(key_pair: KeyPair, network: WarpNetworkConfig, profile: ObfuscationProfile) -> str:
    return "\n".join([
        "[Interface]",
        f"PrivateKey = {key_pair.private_key}",
        f"Address = {network.address_v4}, {network.address_v6}",
        f"DNS = {DNS_SERVERS}",
        f"MTU = {MTU}",
        f"S1 = {profile.s1}",
        f"S2 = {profile.s2}",
        f"Jc = {profile.jc}",
        f"Jmin = {profile.jmin}",
        f"Jmax = {profile.jmax}",
        f"H1 = {profile.h1}",
        f"H2 = {profile.h2}",
        f"H3 = {profile.h3}",
        f"H4 = {profile.h4}",
        f"I1 = {profile.i1}",
    ])


def _peer_section(network: WarpNetworkConfig, endpoint: str) -> str:
    return "\n".join([
        "[Peer]",
        f"PublicKey = {network.peer_public_key}",
        f"AllowedIPs = {ALLOWED_IPS}",
        f"Endpoint = {endpoint}",
    ])


def render_config(
    key_pair: KeyPair,
    network: WarpNetworkConfig,
    endpoint: str | None = None,
    profile_name: str = DEFAULT_PROFILE,
) -> RenderedConfig:
    """
    Renders an AmneziaWG client config from the local keypair and the
    parameters WARP assigned to the device.

    The output depends only on the arguments, so identical inputs always
    produce identical text.
    """
    profile = get_profile(profile_name)
    logging.info(f"Rendering {profile.file_prefix} config for {network.address_v4}.")
    text = f"{_interface_section(key_pair, network, profile)}\n\n{_peer_section(network, endpoint or DEFAULT_ENDPOINT)}"
    return RenderedConfig(text=text, file_name=config_file_name(network.address_v4, profile))
