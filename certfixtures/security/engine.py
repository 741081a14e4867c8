"""
One-time registration of the cryptographic engine.
"""
import logging
import threading

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from .exceptions import CryptoOperationFailed


logger = logging.getLogger(__name__)

_registration_lock = threading.Lock()
_registered = False


def register_engine() -> None:
    """Resolve the cryptography backend once; later calls are no-ops."""
    global _registered

    with _registration_lock:
        if _registered:
            return

        try:
            backend = default_backend()
        except (UnsupportedAlgorithm, ImportError) as e:
            raise CryptoOperationFailed("engine registration", str(e)) from e

        logger.debug(f"Registered cryptographic engine: {backend.openssl_version_text()}")
        _registered = True


def is_engine_registered() -> bool:
    return _registered


def resolve_hash_algorithm(name: str) -> hashes.HashAlgorithm:
    """Map a hash name such as ``SHA256`` to a supported hash instance."""
    algorithm_class = getattr(hashes, name.upper(), None)
    if not isinstance(algorithm_class, type) or not issubclass(algorithm_class, hashes.HashAlgorithm):
        raise CryptoOperationFailed("hash resolution", f"unknown hash algorithm {name!r}")

    algorithm = algorithm_class()
    if not default_backend().hash_supported(algorithm):
        raise CryptoOperationFailed("hash resolution", f"hash algorithm {name!r} is not supported")

    return algorithm
