from unittest.mock import patch

import pytest

from awg_warp_service.cli import main
from awg_warp_service.common.exceptions import NetworkError
from awg_warp_service.common.models import RenderedConfig

RENDERED = RenderedConfig(text="[Interface]\nPrivateKey = x\n\n[Peer]\nPublicKey = y", file_name="AWG15_172.16.0.2.conf")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("PASSWORDS", "TURNSTILE_SECRET_KEY", "LOG_LEVEL", "HOST", "PORT"):
        monkeypatch.delenv(var, raising=False)


def test_generate_writes_config_file(tmp_path):
    with patch("awg_warp_service.cli.generate_config", return_value=RENDERED) as fake_generate:
        main(["generate", "--output-dir", str(tmp_path), "--endpoint", "188.114.97.1:4500"])

    fake_generate.assert_called_once_with("188.114.97.1:4500")
    written = (tmp_path / "AWG15_172.16.0.2.conf").read_text(encoding="utf-8")
    assert written == RENDERED.text + "\n"


def test_generate_to_stdout(capsys):
    with patch("awg_warp_service.cli.generate_config", return_value=RENDERED):
        main(["generate", "--stdout"])
    assert capsys.readouterr().out == RENDERED.text + "\n"


def test_generate_failure_exits_nonzero():
    with patch("awg_warp_service.cli.generate_config", side_effect=NetworkError("HTTP 500")):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", "--stdout"])
    assert excinfo.value.code == 1


def test_serve_uses_settings(monkeypatch):
    monkeypatch.setenv("PORT", "9100")
    with patch("awg_warp_service.server.create_app") as fake_create_app:
        main(["serve"])
    fake_create_app.return_value.run.assert_called_once_with(host="127.0.0.1", port=9100)
