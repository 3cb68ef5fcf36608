# awg_warp_service/common/config.py
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .utils import get_env_or_none, get_int_env, parse_password_list

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for the HTTP service.

    `passwords` is None when no allow-list is configured, which opens
    /auth to any password. `turnstile_secret_key` is None when CAPTCHA
    verification is disabled.
    """
    passwords: tuple[str, ...] | None = None
    turnstile_secret_key: str | None = None
    log_level: str = "INFO"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        raw_passwords = get_env_or_none("PASSWORDS", env)
        passwords = parse_password_list(raw_passwords) if raw_passwords else None

        secret = get_env_or_none("TURNSTILE_SECRET_KEY", env)

        return cls(
            passwords=passwords,
            turnstile_secret_key=secret,
            log_level=get_env_or_none("LOG_LEVEL", env) or "INFO",
            host=get_env_or_none("HOST", env) or DEFAULT_HOST,
            port=get_int_env("PORT", DEFAULT_PORT, env),
        )
