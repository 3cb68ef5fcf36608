from pathlib import Path

import pytest

from awg_warp_service.common.exceptions import ValidationError
from awg_warp_service.services.awg_config import (
    DEFAULT_ENDPOINT,
    PROFILES,
    config_file_name,
    render_config,
)
from conftest import PEER_PUBLIC_KEY, PRIVATE_KEY

GOLDEN_CONFIG = Path(__file__).parent / "data" / "AWG15_172.16.0.2.conf"


def test_render_is_deterministic(key_pair, network_config):
    first = render_config(key_pair, network_config, "engage.cloudflareclient.com:2408")
    second = render_config(key_pair, network_config, "engage.cloudflareclient.com:2408")
    assert first == second
    assert first.text.encode("utf-8") == second.text.encode("utf-8")


def test_sections_are_ordered_and_separated(key_pair, network_config):
    text = render_config(key_pair, network_config).text

    assert text.count("[Interface]") == 1
    assert text.count("[Peer]") == 1
    interface, peer = text.split("\n\n")
    assert interface.startswith("[Interface]\n")
    assert peer.startswith("[Peer]\n")
    assert not text.endswith("\n")


def test_interface_section_lines(key_pair, network_config):
    interface = render_config(key_pair, network_config).text.split("\n\n")[0]
    lines = interface.split("\n")

    assert lines[:15] == [
        "[Interface]",
        f"PrivateKey = {PRIVATE_KEY}",
        "Address = 172.16.0.2/32, 2606:4700:110:8a36::2/128",
        "DNS = 1.1.1.1, 2606:4700:4700::1111, 1.0.0.1, 2606:4700:4700::1001",
        "MTU = 1280",
        "S1 = 0",
        "S2 = 0",
        "Jc = 120",
        "Jmin = 23",
        "Jmax = 911",
        "H1 = 1",
        "H2 = 2",
        "H3 = 3",
        "H4 = 4",
        f"I1 = {PROFILES['awg15'].i1}",
    ]
    assert len(lines) == 15


def test_scrambling_payload_is_fixed():
    i1 = PROFILES["awg15"].i1
    assert i1.startswith("<b 0xc2000000011419fa4bb3599f")
    assert i1.endswith("8ded25ab6d29b6")
    assert len(i1) == 1974


def test_peer_section_defaults_to_relay_endpoint(key_pair, network_config):
    peer = render_config(key_pair, network_config).text.split("\n\n")[1]
    assert peer.split("\n") == [
        "[Peer]",
        f"PublicKey = {PEER_PUBLIC_KEY}",
        "AllowedIPs = 0.0.0.0/0, ::/0",
        f"Endpoint = {DEFAULT_ENDPOINT}",
    ]
    assert DEFAULT_ENDPOINT == "162.159.195.1:500"
    assert "PersistentKeepalive" not in peer


def test_endpoint_override(key_pair, network_config):
    text = render_config(key_pair, network_config, "188.114.97.1:4500").text
    assert text.endswith("Endpoint = 188.114.97.1:4500")


def test_file_name_drops_prefix_length(key_pair, network_config):
    assert render_config(key_pair, network_config).file_name == "AWG15_172.16.0.2.conf"
    assert config_file_name("10.0.0.7", PROFILES["awg15"]) == "AWG15_10.0.0.7.conf"


def test_unknown_profile_is_rejected(key_pair, network_config):
    with pytest.raises(ValidationError, match="Unknown obfuscation profile"):
        _ = render_config(key_pair, network_config, profile_name="awg20")


def test_matches_golden_config(key_pair, network_config):
    rendered = render_config(key_pair, network_config)
    assert rendered.text + "\n" == GOLDEN_CONFIG.read_text(encoding="utf-8")
    assert rendered.file_name == GOLDEN_CONFIG.name
