"""
Synthetic X.509 certificates and chains for certificate validation tests.
"""

from .fixtures import (
    CertificateFixtures,
    generate_valid_certificate_chain,
    generate_certificate_chain_with_expired_intermediate_cert,
    generate_certificate_chain_with_expired_root_cert,
    generate_valid_certificate,
    generate_expired_certificate,
    generate_self_signed_certificate,
    generate_expired_self_signed_certificate,
)
from .models.config import GeneratorConfig
from .security.exceptions import CryptoOperationFailed
from .security.models import CertificateChain

__all__ = [
    'CertificateFixtures',
    'CertificateChain',
    'CryptoOperationFailed',
    'GeneratorConfig',
    'generate_valid_certificate_chain',
    'generate_certificate_chain_with_expired_intermediate_cert',
    'generate_certificate_chain_with_expired_root_cert',
    'generate_valid_certificate',
    'generate_expired_certificate',
    'generate_self_signed_certificate',
    'generate_expired_self_signed_certificate'
]
