"""
Fresh RSA key pairs for certificate fixtures.
"""
import logging
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa

from ..models.config import GeneratorConfig
from .engine import register_engine
from .exceptions import CryptoOperationFailed
from .models import KeyPair


class KeyPairSource:
    """Generates a new key pair on every call."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        register_engine()
        self.config = config or GeneratorConfig()
        self.logger = logging.getLogger(__name__)

    def generate(self) -> KeyPair:
        try:
            private_key = rsa.generate_private_key(
                public_exponent=self.config.public_exponent,
                key_size=self.config.key_size
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise CryptoOperationFailed("key generation", str(e)) from e

        self.logger.debug(f"Generated {self.config.key_size}-bit RSA key pair")
        return KeyPair(private_key=private_key, public_key=private_key.public_key())
