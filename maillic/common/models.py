"""
Pydantic models and enumerations shared across the package.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class KeyType(str, Enum):
    """License tier, selecting key material and matching mode."""

    PERSONAL = "personal"
    DOMAIN = "domain"
    STANDARD = "standard"


class ValidationStatus(IntEnum):
    """Terminal outcomes of a license validation."""

    NOT_VALIDATED = 0
    VALID = 1
    EXPIRED = 2
    INVALID = 3
    MAIL_NOT_CONFIGURED = 4
    MAIL_DIFFERENT = 5
    EMPTY = 6


class CryptoParameters(BaseModel):
    """Key material for one key type. Big integers are hex strings."""

    model_config = ConfigDict(frozen=True)

    modulus: str
    decryption_exponent: str
    encryption_exponent: str = ""
    key_length: int = Field(gt=0, multiple_of=16)
    max_digits: int = Field(gt=0)

    @field_validator("modulus", "decryption_exponent", "encryption_exponent")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        value = value.strip().lower()
        if value:
            int(value, 16)
        return value

    @property
    def chunk_size(self) -> int:
        """Plaintext bytes per cipher block."""
        return self.key_length // 8

    def modulus_int(self) -> int:
        return int(self.modulus, 16)

    def decryption_int(self) -> int:
        return int(self.decryption_exponent, 16)

    def encryption_int(self) -> int | None:
        if not self.encryption_exponent:
            return None
        return int(self.encryption_exponent, 16)


class KeyRing(BaseModel):
    """Key material for every supported key type."""

    keys: dict[KeyType, CryptoParameters] = Field(default_factory=dict)


class Identity(BaseModel):
    id: str
    email: str = ""


class Account(BaseModel):
    id: str
    name: str = ""
    identities: list[Identity] = Field(default_factory=list)
    default_identity_id: str | None = None


class LicenserOptions(BaseModel):
    force_secondary_identity: bool = False
    settings_root: str = ""
    log_level: int | None = None
    keyring_path: Path | None = None


class LicenseInfo(BaseModel):
    """Read-only snapshot of the last validation, safe to hand to callers."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    status: str
    description: str
    licensed_days_left: int = Field(ge=0)
    expired_days: int = Field(ge=0)
    expiry_date: str
    email: str
    license_key: str
    decrypted_part: str
    key_type: KeyType | None
    is_valid: bool
    is_expired: bool
