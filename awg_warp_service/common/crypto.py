# awg_warp_service/common/crypto.py
import base64
import logging

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519

from .exceptions import CryptographyError
from .models import KeyPair


def generate_key_pair() -> KeyPair:
    """Generates and returns a new Base64-encoded X25519 keypair."""
    logging.info("Generating new X25519 keypair.")
    try:
        private_key = x25519.X25519PrivateKey.generate()
        public_key = private_key.public_key()
        private_bytes = private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        public_bytes = public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    except Exception as e:
        raise CryptographyError(f"X25519 key generation failed: {e}") from e

    return KeyPair(
        private_key=base64.b64encode(private_bytes).decode("utf-8"),
        public_key=base64.b64encode(public_bytes).decode("utf-8"),
    )
