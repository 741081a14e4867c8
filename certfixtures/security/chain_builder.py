"""
Certificate chain construction.
"""
import logging
from contextlib import nullcontext
from typing import Optional

from cryptography import x509

from .certificate_forge import CertificateForge
from .key_pair_source import KeyPairSource
from .models import CHAIN_LENGTH, CertificateChain

EXPIRED_INTERMEDIATE_POSITION = 1
EXPIRED_ROOT_POSITION = CHAIN_LENGTH - 1


class ChainBuilder:
    """Builds four-certificate chains and single certificates."""

    def __init__(self, key_pair_source: KeyPairSource, forge: CertificateForge,
                 performance_monitor=None):
        self.key_pair_source = key_pair_source
        self.forge = forge
        self.performance_monitor = performance_monitor
        self.logger = logging.getLogger(__name__)

    def _measure(self, operation: str, **extra_data):
        if self.performance_monitor is None:
            return nullcontext()
        return self.performance_monitor.measure_operation(operation, extra_data)

    def build_chain(self, invalid_position: Optional[int] = None) -> CertificateChain:
        """
        Build a chain ordered from end-entity (index 0) to root (index 3).

        Args:
            invalid_position: Index of the certificate that receives the
                expired window, or None for an all-valid chain

        Returns:
            CertificateChain where each certificate is issued by the next one
            and the root is self-signed
        """
        if invalid_position is not None and not 0 <= invalid_position < CHAIN_LENGTH:
            raise ValueError(f"invalid_position must be between 0 and {CHAIN_LENGTH - 1}")

        with self._measure("build_chain", invalid_position=invalid_position):
            # The root is self-signed.
            subject_key_pair = self.key_pair_source.generate()
            issuer_key_pair = subject_key_pair

            certificates = [None] * CHAIN_LENGTH
            for position in range(CHAIN_LENGTH - 1, -1, -1):
                certificates[position] = self.forge.build_certificate(
                    issuer_key_pair,
                    subject_key_pair,
                    is_valid=(position != invalid_position),
                    distance_from_leaf=position
                )

                # Moving away from the root, each certificate is issued by the previous subject.
                if position > 0:
                    issuer_key_pair = subject_key_pair
                    subject_key_pair = self.key_pair_source.generate()

        self.logger.info(f"Built certificate chain (invalid position: {invalid_position})")
        return CertificateChain(certificates=tuple(certificates))

    def build_single_certificate(self, is_valid: bool, is_self_signed: bool) -> x509.Certificate:
        """Build an end-entity certificate, self-signed or issued by a fresh key pair."""
        with self._measure("build_single_certificate",
                           is_valid=is_valid, is_self_signed=is_self_signed):
            subject_key_pair = self.key_pair_source.generate()
            if is_self_signed:
                issuer_key_pair = subject_key_pair
            else:
                issuer_key_pair = self.key_pair_source.generate()

            certificate = self.forge.build_certificate(
                issuer_key_pair, subject_key_pair, is_valid=is_valid, distance_from_leaf=0
            )

        self.logger.info(
            f"Built single certificate (valid: {is_valid}, self-signed: {is_self_signed})"
        )
        return certificate
