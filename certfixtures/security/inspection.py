"""
Inspection helpers for generated certificates.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes

from .models import CertificateChain, CertificateInfo


logger = logging.getLogger(__name__)


def get_path_length(cert: x509.Certificate) -> Optional[int]:
    """Path length of the BasicConstraints extension, or None when absent."""
    try:
        extension = cert.extensions.get_extension_for_class(x509.BasicConstraints)
    except x509.ExtensionNotFound:
        return None
    return extension.value.path_length


def is_issued_by(cert: x509.Certificate, issuer: x509.Certificate) -> bool:
    """Check the issuer name and the signature of ``cert`` against ``issuer``."""
    try:
        cert.verify_directly_issued_by(issuer)
    except (ValueError, TypeError, InvalidSignature) as e:
        logger.debug(f"Signature verification failed: {e}")
        return False
    return True


def is_coherent_chain(chain: CertificateChain) -> bool:
    """True when every certificate is issued by its successor and the root by itself."""
    for cert, issuer in zip(chain, list(chain)[1:]):
        if not is_issued_by(cert, issuer):
            return False
    return is_issued_by(chain.root, chain.root)


def describe_certificate(cert: x509.Certificate, now: Optional[datetime] = None) -> CertificateInfo:
    """Extract information from a certificate."""
    now = now or datetime.now(timezone.utc)

    not_before = cert.not_valid_before_utc
    not_after = cert.not_valid_after_utc

    return CertificateInfo(
        subject=cert.subject.rfc4514_string(),
        issuer=cert.issuer.rfc4514_string(),
        serial_number=str(cert.serial_number),
        not_before=not_before,
        not_after=not_after,
        is_valid=not_before <= now <= not_after,
        is_self_signed=cert.issuer == cert.subject,
        path_length=get_path_length(cert),
        fingerprint=cert.fingerprint(hashes.SHA256()).hex()
    )
