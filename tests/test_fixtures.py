"""
Tests for the public certificate fixture functions.
"""
import unittest
from datetime import datetime, timezone

from cryptography import x509

import certfixtures
from certfixtures import CertificateFixtures, GeneratorConfig
from certfixtures.security.inspection import describe_certificate, is_coherent_chain


class TestChainFixtures(unittest.TestCase):
    """Test the three chain scenarios."""

    def assertChainShape(self, chain):
        self.assertEqual(len(chain), 4)
        for position in range(3):
            self.assertEqual(chain[position].issuer, chain[position + 1].subject)
        self.assertEqual(chain[3].issuer, chain[3].subject)
        self.assertTrue(is_coherent_chain(chain))

    def expired_positions(self, chain):
        now = datetime.now(timezone.utc)
        return [position for position, cert in enumerate(chain)
                if cert.not_valid_after_utc < now]

    def test_generate_valid_certificate_chain(self):
        """Test that every certificate of the valid chain is current."""
        chain = certfixtures.generate_valid_certificate_chain()

        self.assertChainShape(chain)
        self.assertTrue(all(describe_certificate(cert).is_valid for cert in chain))

    def test_generate_chain_with_expired_intermediate(self):
        """Test that only the first intermediate is expired."""
        chain = certfixtures.generate_certificate_chain_with_expired_intermediate_cert()

        self.assertChainShape(chain)
        self.assertEqual(self.expired_positions(chain), [1])
        for position in (0, 2, 3):
            self.assertTrue(describe_certificate(chain[position]).is_valid)

    def test_generate_chain_with_expired_root(self):
        """Test that only the root is expired."""
        chain = certfixtures.generate_certificate_chain_with_expired_root_cert()

        self.assertChainShape(chain)
        self.assertEqual(self.expired_positions(chain), [3])
        for position in (0, 1, 2):
            self.assertTrue(describe_certificate(chain[position]).is_valid)

    def test_path_lengths(self):
        """Test basic constraints at every chain position."""
        chain = certfixtures.generate_valid_certificate_chain()

        with self.assertRaises(x509.ExtensionNotFound):
            chain[0].extensions.get_extension_for_class(x509.BasicConstraints)
        for position in (1, 2, 3):
            constraints = chain[position].extensions.get_extension_for_class(
                x509.BasicConstraints
            ).value
            self.assertTrue(constraints.ca)
            self.assertEqual(constraints.path_length, position - 1)

    def test_successive_chains_are_independent(self):
        """Test that two calls share no certificates or serial numbers."""
        first = certfixtures.generate_valid_certificate_chain()
        second = certfixtures.generate_valid_certificate_chain()

        self.assertTrue({c.serial_number for c in first}.isdisjoint(
            {c.serial_number for c in second}))
        self.assertNotEqual(first.root.subject, second.root.subject)


class TestSingleCertificateFixtures(unittest.TestCase):
    """Test the four single-certificate scenarios."""

    def test_generate_valid_certificate(self):
        """Test a current certificate issued by another key pair."""
        info = describe_certificate(certfixtures.generate_valid_certificate())

        self.assertTrue(info.is_valid)
        self.assertNotEqual(info.issuer, info.subject)
        self.assertIsNone(info.path_length)

    def test_generate_expired_certificate(self):
        """Test an expired certificate issued by another key pair."""
        info = describe_certificate(certfixtures.generate_expired_certificate())

        self.assertFalse(info.is_valid)
        self.assertLess(info.not_after, datetime.now(timezone.utc))
        self.assertFalse(info.is_self_signed)

    def test_generate_self_signed_certificate(self):
        """Test a current self-signed certificate."""
        info = describe_certificate(certfixtures.generate_self_signed_certificate())

        self.assertTrue(info.is_valid)
        self.assertEqual(info.issuer, info.subject)
        self.assertTrue(info.is_self_signed)

    def test_generate_expired_self_signed_certificate(self):
        """Test an expired self-signed certificate."""
        info = describe_certificate(certfixtures.generate_expired_self_signed_certificate())

        self.assertEqual(info.issuer, info.subject)
        self.assertLess(info.not_after, datetime.now(timezone.utc))

    def test_distinct_serial_numbers(self):
        """Test that successive calls produce distinct serial numbers."""
        generators = [
            certfixtures.generate_valid_certificate,
            certfixtures.generate_expired_certificate,
            certfixtures.generate_self_signed_certificate,
            certfixtures.generate_expired_self_signed_certificate,
        ]

        for generator in generators:
            self.assertNotEqual(generator().serial_number, generator().serial_number)


class TestCertificateFixtures(unittest.TestCase):
    """Test the fixture facade with a custom configuration."""

    def test_custom_configuration(self):
        """Test that configuration reaches key generation and signing."""
        fixtures = CertificateFixtures(GeneratorConfig(key_size=2048, signature_hash="SHA512"))

        cert = fixtures.generate_self_signed_certificate()

        self.assertEqual(cert.public_key().key_size, 2048)
        self.assertEqual(cert.signature_hash_algorithm.name, "sha512")

    def test_module_functions_accept_configuration(self):
        """Test that the module-level functions pass configuration through."""
        config = GeneratorConfig(valid_not_after_days=2)

        cert = certfixtures.generate_valid_certificate(config)

        remaining = cert.not_valid_after_utc - datetime.now(timezone.utc)
        self.assertLessEqual(remaining.days, 2)


if __name__ == '__main__':
    unittest.main()
