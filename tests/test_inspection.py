"""
Tests for certificate inspection helpers.
"""
import unittest
from datetime import datetime, timedelta, timezone

from certfixtures import generate_valid_certificate_chain, generate_self_signed_certificate
from certfixtures.security.inspection import (
    describe_certificate, get_path_length, is_coherent_chain, is_issued_by
)
from certfixtures.security.models import CertificateChain


class TestInspection(unittest.TestCase):
    """Test cases for certificate inspection."""

    @classmethod
    def setUpClass(cls):
        """Generate one chain shared by the tests."""
        cls.chain = generate_valid_certificate_chain()

    def test_describe_certificate(self):
        """Test the extracted certificate information."""
        info = describe_certificate(self.chain[1])

        self.assertEqual(info.issuer, self.chain[2].subject.rfc4514_string())
        self.assertEqual(info.serial_number, str(self.chain[1].serial_number))
        self.assertTrue(info.is_valid)
        self.assertFalse(info.is_self_signed)
        self.assertEqual(info.path_length, 0)
        self.assertEqual(len(info.fingerprint), 64)

    def test_describe_certificate_at_other_moment(self):
        """Test validity evaluated at a moment outside the window."""
        future = datetime.now(timezone.utc) + timedelta(days=200)

        self.assertFalse(describe_certificate(self.chain[0], now=future).is_valid)

    def test_is_issued_by_rejects_wrong_issuer(self):
        """Test that a certificate does not verify against an unrelated certificate."""
        self.assertTrue(is_issued_by(self.chain[0], self.chain[1]))
        self.assertFalse(is_issued_by(self.chain[0], self.chain[2]))
        self.assertFalse(is_issued_by(self.chain[1], self.chain[0]))

    def test_is_issued_by_rejects_unrelated_root(self):
        """Test that an unrelated self-signed certificate is not an issuer."""
        impostor = generate_self_signed_certificate()

        self.assertFalse(is_issued_by(self.chain[0], impostor))

    def test_is_coherent_chain_detects_reordering(self):
        """Test that a shuffled chain is not coherent."""
        shuffled = CertificateChain(certificates=(
            self.chain[1], self.chain[0], self.chain[2], self.chain[3]
        ))

        self.assertTrue(is_coherent_chain(self.chain))
        self.assertFalse(is_coherent_chain(shuffled))

    def test_get_path_length(self):
        """Test reading the BasicConstraints path length."""
        self.assertIsNone(get_path_length(self.chain[0]))
        self.assertEqual(get_path_length(self.chain[3]), 2)


if __name__ == '__main__':
    unittest.main()
