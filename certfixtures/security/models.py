"""
Certificate fixture models.
"""
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
from datetime import datetime

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


CHAIN_LENGTH = 4


@dataclass(frozen=True)
class KeyPair:
    """An RSA private key together with its public key."""
    private_key: rsa.RSAPrivateKey
    public_key: rsa.RSAPublicKey


@dataclass(frozen=True)
class ValidityWindow:
    """The (not_before, not_after) interval during which a certificate is current."""
    not_before: datetime
    not_after: datetime

    def __post_init__(self):
        if self.not_before >= self.not_after:
            raise ValueError("not_before must be earlier than not_after")

    def contains(self, moment: datetime) -> bool:
        return self.not_before <= moment <= self.not_after


@dataclass(frozen=True)
class CertificateSpec:
    """Logical description of one certificate before it is signed."""
    issuer_name: x509.Name
    subject_name: x509.Name
    serial_number: int
    validity: ValidityWindow
    path_length: Optional[int] = None

    @property
    def is_ca(self) -> bool:
        return self.path_length is not None


@dataclass(frozen=True)
class CertificateChain:
    """
    Four certificates ordered from the end-entity (index 0) to the
    self-signed root (index 3).
    """
    certificates: Tuple[x509.Certificate, ...]

    def __post_init__(self):
        if len(self.certificates) != CHAIN_LENGTH:
            raise ValueError(
                f"A certificate chain holds exactly {CHAIN_LENGTH} certificates, "
                f"got {len(self.certificates)}"
            )

    def __len__(self) -> int:
        return len(self.certificates)

    def __getitem__(self, index):
        return self.certificates[index]

    def __iter__(self) -> Iterator[x509.Certificate]:
        return iter(self.certificates)

    @property
    def end_entity(self) -> x509.Certificate:
        return self.certificates[0]

    @property
    def root(self) -> x509.Certificate:
        return self.certificates[-1]

    def to_pem(self) -> str:
        """Concatenated PEM encoding, end-entity first."""
        return "".join(
            cert.public_bytes(serialization.Encoding.PEM).decode('ascii')
            for cert in self.certificates
        )


@dataclass
class CertificateInfo:
    """Information about a certificate."""
    subject: str
    issuer: str
    serial_number: str
    not_before: datetime
    not_after: datetime
    is_valid: bool
    is_self_signed: bool
    path_length: Optional[int]
    fingerprint: str
