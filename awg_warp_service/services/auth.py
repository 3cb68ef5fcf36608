# awg_warp_service/services/auth.py
import hmac
import logging


def is_password_accepted(password: str, allowed: tuple[str, ...] | None) -> bool:
    """
    Checks a submitted password against the configured allow-list.
    With no allow-list configured every password is accepted.
    """
    if allowed is None:
        logging.info("No password allow-list configured; granting access.")
        return True
    # Compare every entry so timing does not reveal which one matched.
    matches = [hmac.compare_digest(password.encode("utf-8"), item.encode("utf-8")) for item in allowed]
    return any(matches)
