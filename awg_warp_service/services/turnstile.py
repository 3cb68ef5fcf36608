# awg_warp_service/services/turnstile.py
import logging
from typing import cast

import requests
from requests import Session

from ..common.exceptions import CaptchaRejectedError, NetworkError
from ..common.models import SiteverifyResponse

SITEVERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


class TurnstileVerifier:
    """Checks Cloudflare Turnstile tokens against the siteverify endpoint."""

    def __init__(
        self,
        secret_key: str,
        session: Session | None = None,
        verify_url: str = SITEVERIFY_URL,
        timeout: float = 10,
    ) -> None:
        self._secret_key = secret_key
        self._session = session if session is not None else requests.Session()
        self._verify_url = verify_url
        self._timeout = timeout

    def verify(self, token: str | None, remote_ip: str | None = None) -> bool:
        """Returns the siteverify verdict. A missing token is never sent upstream."""
        if not token:
            logging.warning("CAPTCHA token missing from request.")
            return False

        form = {"secret": self._secret_key, "response": token}
        if remote_ip:
            form["remoteip"] = remote_ip

        try:
            response = self._session.post(self._verify_url, data=form, timeout=self._timeout)
            response.raise_for_status()
            data = cast(SiteverifyResponse, response.json())
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"CAPTCHA verification request failed: {e}") from e

        success = data.get("success") is True
        if not success:
            logging.warning(f"CAPTCHA token rejected: {data.get('error-codes', [])}")
        return success

    def require(self, token: str | None, remote_ip: str | None = None) -> None:
        if not self.verify(token, remote_ip):
            raise CaptchaRejectedError("CAPTCHA verification failed")

    def close(self) -> None:
        self._session.close()
