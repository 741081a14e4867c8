"""
Command line entry point for the certificate fixture generator.
Prints the certificates of a named scenario to stdout.
"""

import sys
import logging
from dataclasses import replace
from typing import Optional, List

from cryptography.hazmat.primitives import serialization

from .fixtures import CertificateFixtures
from .models.config import GeneratorConfig
from .security.exceptions import CryptoOperationFailed
from .security.inspection import describe_certificate
from .security.models import CertificateChain
from .services.config_service import ConfigService
from .services.logging_service import PerformanceMonitor, configure_logging


SCENARIOS = {
    'valid-chain': 'generate_valid_certificate_chain',
    'expired-intermediate-chain': 'generate_certificate_chain_with_expired_intermediate_cert',
    'expired-root-chain': 'generate_certificate_chain_with_expired_root_cert',
    'valid': 'generate_valid_certificate',
    'expired': 'generate_expired_certificate',
    'self-signed': 'generate_self_signed_certificate',
    'expired-self-signed': 'generate_expired_self_signed_certificate',
}


def load_generator_config(config_path: Optional[str], log_level: Optional[str]) -> GeneratorConfig:
    """Load configuration from file (if given) and apply the log level override."""
    if config_path:
        config = ConfigService().load_config(config_path)
    else:
        config = GeneratorConfig()

    if log_level:
        config = replace(config, log_level=log_level.upper())

    return config


def render_scenario(result, describe: bool) -> str:
    """Render a certificate or a chain as PEM or as summary lines."""
    is_chain = isinstance(result, CertificateChain)

    if not describe:
        if is_chain:
            return result.to_pem()
        return result.public_bytes(serialization.Encoding.PEM).decode('ascii')

    certificates = list(result) if is_chain else [result]

    lines = []
    for position, cert in enumerate(certificates):
        info = describe_certificate(cert)
        lines.append(
            f"[{position}] subject={info.subject} issuer={info.issuer} "
            f"serial={info.serial_number} not_before={info.not_before.isoformat()} "
            f"not_after={info.not_after.isoformat()} valid={info.is_valid} "
            f"self_signed={info.is_self_signed} path_length={info.path_length}"
        )
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    import argparse

    parser = argparse.ArgumentParser(description='Generate X.509 certificate fixtures')
    parser.add_argument('--scenario', '-s', required=True, choices=sorted(SCENARIOS),
                        help='Certificate scenario to generate')
    parser.add_argument('--config', '-c', help='Configuration file path')
    parser.add_argument('--describe', action='store_true',
                        help='Print a summary of each certificate instead of PEM')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')

    args = parser.parse_args(argv)

    try:
        config = load_generator_config(args.config, args.log_level)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        configure_logging(config)
    except OSError as e:
        print(f"Logging setup error: {e}", file=sys.stderr)
        return 1
    logger = logging.getLogger(__name__)

    try:
        fixtures = CertificateFixtures(config, PerformanceMonitor())
        result = getattr(fixtures, SCENARIOS[args.scenario])()
    except CryptoOperationFailed as e:
        logger.error(f"Failed to generate scenario {args.scenario}: {e}", exc_info=True)
        return 1

    sys.stdout.write(render_scenario(result, args.describe))
    return 0


if __name__ == '__main__':
    sys.exit(main())
