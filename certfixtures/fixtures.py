"""
Certificate fixtures for tests of certificate validation logic.

Each call generates fresh key pairs and certificates; nothing is cached
between calls. Chains are ordered from the end-entity certificate (index 0)
to the self-signed root (index 3), and each certificate is issued by the
certificate at the next position.
"""
from typing import Optional

from cryptography import x509

from .models.config import GeneratorConfig
from .security.certificate_forge import CertificateForge
from .security.chain_builder import (
    ChainBuilder, EXPIRED_INTERMEDIATE_POSITION, EXPIRED_ROOT_POSITION
)
from .security.key_pair_source import KeyPairSource
from .security.models import CertificateChain
from .services.logging_service import PerformanceMonitor


class CertificateFixtures:
    """Wires key generation, certificate forging and chain building together."""

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 performance_monitor: Optional[PerformanceMonitor] = None):
        self.config = config or GeneratorConfig()
        self.chain_builder = ChainBuilder(
            KeyPairSource(self.config),
            CertificateForge(self.config),
            performance_monitor
        )

    def generate_valid_certificate_chain(self) -> CertificateChain:
        """A chain in which every certificate is currently valid."""
        return self.chain_builder.build_chain()

    def generate_certificate_chain_with_expired_intermediate_cert(self) -> CertificateChain:
        """A chain in which the first intermediate (index 1) is expired."""
        return self.chain_builder.build_chain(EXPIRED_INTERMEDIATE_POSITION)

    def generate_certificate_chain_with_expired_root_cert(self) -> CertificateChain:
        """A chain in which the root (index 3) is expired."""
        return self.chain_builder.build_chain(EXPIRED_ROOT_POSITION)

    def generate_valid_certificate(self) -> x509.Certificate:
        """
        A certificate whose validity started in the past and ends in the future.

        The end of the window is far enough ahead to outlast any test run, but
        should not be assumed to be in the distant future.
        """
        return self.chain_builder.build_single_certificate(is_valid=True, is_self_signed=False)

    def generate_expired_certificate(self) -> x509.Certificate:
        """A certificate whose notAfter lies in the past."""
        return self.chain_builder.build_single_certificate(is_valid=False, is_self_signed=False)

    def generate_self_signed_certificate(self) -> x509.Certificate:
        """A currently valid certificate with identical issuer and subject."""
        return self.chain_builder.build_single_certificate(is_valid=True, is_self_signed=True)

    def generate_expired_self_signed_certificate(self) -> x509.Certificate:
        """An expired certificate with identical issuer and subject."""
        return self.chain_builder.build_single_certificate(is_valid=False, is_self_signed=True)


def generate_valid_certificate_chain(config: Optional[GeneratorConfig] = None) -> CertificateChain:
    return CertificateFixtures(config).generate_valid_certificate_chain()


def generate_certificate_chain_with_expired_intermediate_cert(
        config: Optional[GeneratorConfig] = None) -> CertificateChain:
    return CertificateFixtures(config).generate_certificate_chain_with_expired_intermediate_cert()


def generate_certificate_chain_with_expired_root_cert(
        config: Optional[GeneratorConfig] = None) -> CertificateChain:
    return CertificateFixtures(config).generate_certificate_chain_with_expired_root_cert()


def generate_valid_certificate(config: Optional[GeneratorConfig] = None) -> x509.Certificate:
    return CertificateFixtures(config).generate_valid_certificate()


def generate_expired_certificate(config: Optional[GeneratorConfig] = None) -> x509.Certificate:
    return CertificateFixtures(config).generate_expired_certificate()


def generate_self_signed_certificate(config: Optional[GeneratorConfig] = None) -> x509.Certificate:
    return CertificateFixtures(config).generate_self_signed_certificate()


def generate_expired_self_signed_certificate(
        config: Optional[GeneratorConfig] = None) -> x509.Certificate:
    return CertificateFixtures(config).generate_expired_self_signed_certificate()
