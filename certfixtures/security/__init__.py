"""
Security package for generating fixture certificates.
"""
from .models import KeyPair, ValidityWindow, CertificateSpec, CertificateChain, CertificateInfo
from .exceptions import CryptoOperationFailed
from .engine import register_engine, is_engine_registered
from .key_pair_source import KeyPairSource
from .certificate_forge import CertificateForge, name_for_public_key
from .chain_builder import ChainBuilder
from .inspection import describe_certificate, is_issued_by, is_coherent_chain, get_path_length

__all__ = [
    'KeyPair',
    'ValidityWindow',
    'CertificateSpec',
    'CertificateChain',
    'CertificateInfo',
    'CryptoOperationFailed',
    'register_engine',
    'is_engine_registered',
    'KeyPairSource',
    'CertificateForge',
    'name_for_public_key',
    'ChainBuilder',
    'describe_certificate',
    'is_issued_by',
    'is_coherent_chain',
    'get_path_length'
]
