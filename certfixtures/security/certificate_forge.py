"""
Construction and signing of individual fixture certificates.
"""
import base64
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import NameOID

from ..models.config import GeneratorConfig
from .engine import register_engine, resolve_hash_algorithm
from .exceptions import CryptoOperationFailed
from .models import CertificateSpec, KeyPair, ValidityWindow


def name_for_public_key(public_key) -> x509.Name:
    """
    Derive a distinguished name from a public key.

    The common name is the URL-safe base64 SHA-256 digest of the DER encoded
    SubjectPublicKeyInfo, so equal keys give equal names and distinct keys
    give distinct names. The raw key encoding would exceed the 64 character
    limit on common names.
    """
    der = public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )
    digest = hashes.Hash(hashes.SHA256())
    digest.update(der)
    common_name = base64.urlsafe_b64encode(digest.finalize()).decode('ascii')

    return x509.Name([
        x509.NameAttribute(NameOID.COMMON_NAME, common_name),
    ])


class CertificateForge:
    """Builds one signed certificate from an issuer and a subject key pair."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        register_engine()
        self.config = config or GeneratorConfig()
        self.hash_algorithm = resolve_hash_algorithm(self.config.signature_hash)
        self.logger = logging.getLogger(__name__)

    def validity_window(self, is_valid: bool, now: Optional[datetime] = None) -> ValidityWindow:
        """The valid or expired window, relative to ``now``."""
        now = now or datetime.now(timezone.utc)

        if is_valid:
            return ValidityWindow(
                not_before=now - timedelta(days=self.config.valid_not_before_days),
                not_after=now + timedelta(days=self.config.valid_not_after_days)
            )

        return ValidityWindow(
            not_before=now - timedelta(days=self.config.expired_not_before_days),
            not_after=now - timedelta(days=self.config.expired_not_after_days)
        )

    def describe(self, issuer_key_pair: KeyPair, subject_key_pair: KeyPair,
                 is_valid: bool, distance_from_leaf: int) -> CertificateSpec:
        """Produce the unsigned description of a certificate."""
        if issuer_key_pair is None or subject_key_pair is None:
            raise ValueError("issuer_key_pair and subject_key_pair are required")
        if distance_from_leaf < 0:
            raise ValueError("distance_from_leaf must be a non-negative integer")

        return CertificateSpec(
            issuer_name=name_for_public_key(issuer_key_pair.public_key),
            subject_name=name_for_public_key(subject_key_pair.public_key),
            serial_number=x509.random_serial_number(),
            validity=self.validity_window(is_valid),
            path_length=distance_from_leaf - 1 if distance_from_leaf > 0 else None
        )

    def sign(self, spec: CertificateSpec, issuer_key_pair: KeyPair,
             subject_key_pair: KeyPair) -> x509.Certificate:
        """Sign ``spec`` with the issuer's private key."""
        try:
            builder = x509.CertificateBuilder().subject_name(
                spec.subject_name
            ).issuer_name(
                spec.issuer_name
            ).public_key(
                subject_key_pair.public_key
            ).serial_number(
                spec.serial_number
            ).not_valid_before(
                spec.validity.not_before
            ).not_valid_after(
                spec.validity.not_after
            )

            # Only certificates that sign other certificates carry basic constraints.
            if spec.is_ca:
                builder = builder.add_extension(
                    x509.BasicConstraints(ca=True, path_length=spec.path_length),
                    critical=True,
                )

            return builder.sign(issuer_key_pair.private_key, self.hash_algorithm)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise CryptoOperationFailed("certificate signing", str(e)) from e

    def build_certificate(self, issuer_key_pair: KeyPair, subject_key_pair: KeyPair,
                          is_valid: bool, distance_from_leaf: int) -> x509.Certificate:
        """
        Build and sign a certificate.

        Args:
            issuer_key_pair: Key pair whose private key signs the certificate
            subject_key_pair: Key pair whose public key is certified
            is_valid: Use the valid window when true, the expired one otherwise
            distance_from_leaf: 0 for an end-entity, increasing toward the root

        Returns:
            The signed certificate

        Raises:
            ValueError: If a key pair is missing or the distance is negative
            CryptoOperationFailed: If the engine fails to build or sign
        """
        spec = self.describe(issuer_key_pair, subject_key_pair, is_valid, distance_from_leaf)
        certificate = self.sign(spec, issuer_key_pair, subject_key_pair)

        self.logger.debug(
            f"Issued certificate serial={spec.serial_number} "
            f"distance_from_leaf={distance_from_leaf} valid={is_valid}"
        )
        return certificate
