"""
Custom exceptions for the license system.
"""

from __future__ import annotations


class LicenseError(Exception):
    """Base exception for license processing failures."""


class MalformedLicense(LicenseError):
    """Exception for license strings that do not follow the key grammar."""


class DecryptionFailed(LicenseError):
    """Exception for ciphertext that cannot be turned into a usable payload."""


class ConfigurationError(LicenseError):
    """Exception for missing or unreadable key material."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
