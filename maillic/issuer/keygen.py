"""
Key generator for license key material.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.hazmat.primitives.asymmetric import rsa

from maillic.common.config import Config
from maillic.common.models import CryptoParameters, KeyRing, KeyType
from maillic.common.persistence import KeyRingStore

logger = logging.getLogger(__name__)


class KeyGenerator:
    """Key generator for creating RSA key material for every key type."""

    def __init__(self, keyring_path: Path | None = None, bits: int | None = None):
        self.config = Config()
        self.keyring_path = keyring_path or self.config.KEYRING_PATH
        self.bits = bits or self.config.DEFAULT_KEY_BITS
        if self.bits % 16 or self.bits <= self.config.KEY_LENGTH_MARGIN:
            msg = f"Key size must be a multiple of 16 bits, got {self.bits}"
            raise ValueError(msg)

    def generate_parameters(self) -> CryptoParameters:
        """Generate one RSA key pair as license key material."""
        private_key = rsa.generate_private_key(
            public_exponent=self.config.PUBLIC_EXPONENT, key_size=self.bits
        )
        numbers = private_key.private_numbers()
        return CryptoParameters(
            modulus=format(numbers.public_numbers.n, "x"),
            decryption_exponent=format(numbers.d, "x"),
            encryption_exponent=format(numbers.public_numbers.e, "x"),
            key_length=self.bits - self.config.KEY_LENGTH_MARGIN,
            max_digits=self.bits // 16 + 1,
        )

    def generate_keyring(self) -> KeyRing:
        return KeyRing(
            keys={key_type: self.generate_parameters() for key_type in KeyType}
        )

    def generate_keys(self) -> KeyRing:
        """Generate key material and save it to the keyring file."""
        logger.info("Generating %d-bit RSA license keys...", self.bits)
        keyring = self.generate_keyring()
        KeyRingStore.save(self.keyring_path, keyring)

        logger.info("Keyring generated and saved: %s", self.keyring_path)
        logger.info("Keep the encryption exponents out of shipped keyrings!")
        return keyring
