from unittest.mock import MagicMock

import pytest

from awg_warp_service.common.models import KeyPair, WarpNetworkConfig

PRIVATE_KEY = "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk="
PUBLIC_KEY = "HIgo9xNzJMWLKASShiTqIybxZ0U3wGLiUeJ1PKf8ykw="
PEER_PUBLIC_KEY = "bmXOC+F1FxEMF9dyiK2H5/1SUtzH0JuVo51h2wPfgyo="

REGISTRATION_BODY = {"result": {"id": "t.abc123", "token": "tok-xyz"}}
WARP_BODY = {
    "result": {
        "id": "t.abc123",
        "config": {
            "peers": [{"public_key": PEER_PUBLIC_KEY, "endpoint": {"v4": "162.159.192.1:0"}}],
            "interface": {"addresses": {"v4": "172.16.0.2/32", "v6": "2606:4700:110:8a36::2/128"}},
        },
    }
}


def make_response(json_data=None, status_code=200, reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.text = "" if json_data is None else str(json_data)
    response.json.return_value = json_data
    return response


def make_session(*responses):
    """A stand-in for requests.Session answering `request` calls in order."""
    session = MagicMock()
    session.headers = {}
    session.request.side_effect = list(responses)
    return session


@pytest.fixture
def key_pair():
    return KeyPair(private_key=PRIVATE_KEY, public_key=PUBLIC_KEY)


@pytest.fixture
def network_config():
    return WarpNetworkConfig(
        peer_public_key=PEER_PUBLIC_KEY,
        address_v4="172.16.0.2/32",
        address_v6="2606:4700:110:8a36::2/128",
    )
