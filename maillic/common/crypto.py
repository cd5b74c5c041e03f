"""Cryptographic primitives for license keys.

License ciphertext uses raw RSA over fixed-size blocks: the plaintext bytes are
zero padded to a multiple of the block size, each block is read as a
little-endian integer, raised to the key exponent and written as hex. Blocks
are separated by a single space.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from maillic.common.exceptions import DecryptionFailed

if TYPE_CHECKING:
    from maillic.common.interfaces import ICryptoProvider
    from maillic.common.models import CryptoParameters, KeyRing, KeyType

logger = logging.getLogger(__name__)

_HEX_BLOCK = re.compile(r"[0-9a-fA-F]+")
_HEX_DIGITS_PER_WORD = 4


def _to_hex(value: int) -> str:
    text = format(value, "x")
    width = -(-len(text) // _HEX_DIGITS_PER_WORD) * _HEX_DIGITS_PER_WORD
    return text.zfill(width)


def _word_count(value: int) -> int:
    """Number of 16-bit words needed to hold value (at least one)."""
    return max(1, -(-value.bit_length() // 16))


class BlockRSAProvider:
    """Textbook RSA over little-endian byte blocks."""

    def encrypt(self, parameters: CryptoParameters, plaintext: str) -> str:
        exponent = parameters.encryption_int()
        if exponent is None:
            msg = "Key material has no encryption exponent"
            raise ValueError(msg)
        if not plaintext:
            msg = "Nothing to encrypt"
            raise ValueError(msg)

        modulus = parameters.modulus_int()
        chunk = parameters.chunk_size
        data = plaintext.encode("latin-1")
        data += b"\0" * (-len(data) % chunk)

        blocks = []
        for start in range(0, len(data), chunk):
            block = int.from_bytes(data[start : start + chunk], "little")
            if block >= modulus:
                msg = "Block size exceeds the modulus"
                raise ValueError(msg)
            blocks.append(_to_hex(pow(block, exponent, modulus)))
        return " ".join(blocks)

    def decrypt(self, parameters: CryptoParameters, ciphertext: str) -> str:
        modulus = parameters.modulus_int()
        exponent = parameters.decryption_int()
        max_hex = parameters.max_digits * _HEX_DIGITS_PER_WORD

        data = bytearray()
        for text in ciphertext.split(" "):
            if not _HEX_BLOCK.fullmatch(text):
                msg = f"Cipher block is not hexadecimal: {text[:16]!r}"
                raise ValueError(msg)
            if len(text.lstrip("0")) > max_hex:
                msg = "Cipher block exceeds the digit limit"
                raise ValueError(msg)
            block = int(text, 16)
            if block >= modulus:
                msg = "Cipher block is not smaller than the modulus"
                raise ValueError(msg)
            plain = pow(block, exponent, modulus)
            data += plain.to_bytes(2 * _word_count(plain), "little")

        return bytes(data).rstrip(b"\0").decode("latin-1")


def resolve_parameters(keyring: KeyRing, key_type: KeyType) -> CryptoParameters:
    """Look up the key material for a key type."""
    try:
        return keyring.keys[key_type]
    except KeyError:
        msg = f"No key material for {key_type.value} licenses"
        raise DecryptionFailed(msg) from None


class CryptoAdapter:
    """Runs a crypto provider and turns every failure into DecryptionFailed."""

    def __init__(self, keyring: KeyRing, provider: ICryptoProvider | None = None):
        self.keyring = keyring
        self.provider: ICryptoProvider = provider or BlockRSAProvider()

    def resolve_parameters(self, key_type: KeyType) -> CryptoParameters:
        return resolve_parameters(self.keyring, key_type)

    def decrypt(self, ciphertext: str, parameters: CryptoParameters) -> str:
        """Recover the plaintext payload of a license."""
        try:
            plaintext = self.provider.decrypt(parameters, ciphertext)
        except Exception as e:
            logger.info("Decryption failed: %s", type(e).__name__)
            raise DecryptionFailed(str(e)) from e

        if not plaintext:
            msg = "Decryption produced no payload"
            raise DecryptionFailed(msg)
        if any(ch < " " or ch == "\x7f" for ch in plaintext):
            msg = "Decryption produced unprintable characters"
            raise DecryptionFailed(msg)
        logger.debug("Decryption complete: %r", plaintext)
        return plaintext

    def encrypt(self, plaintext: str, parameters: CryptoParameters) -> str:
        """Encrypt a payload. Development and test use only."""
        return self.provider.encrypt(parameters, plaintext)
