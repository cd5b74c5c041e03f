"""
License generator for development and tests.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from maillic.common import setup_logger
from maillic.common.config import Config
from maillic.common.crypto import CryptoAdapter
from maillic.common.models import KeyType
from maillic.common.persistence import KeyRingStore
from maillic.licenser.domain.expiry import is_well_formed_date
from maillic.licenser.domain.key_format import KEY_PREFIXES

if TYPE_CHECKING:
    from maillic.common.interfaces import ICryptoProvider
    from maillic.common.models import KeyRing


class LicenseGenerator:
    """License generator for creating encrypted license keys."""

    def __init__(
        self,
        keyring: KeyRing | None = None,
        provider: ICryptoProvider | None = None,
        log_level: int | None = None,
    ):
        self.config = Config()
        self.logger = logging.getLogger(__name__)
        setup_logger(
            self.logger, log_level if log_level is not None else self.config.LOG_LEVEL
        )
        if keyring is None:
            keyring = KeyRingStore.load(self.config.KEYRING_PATH)
        self.crypto = CryptoAdapter(keyring, provider)
        self.prefixes = {key_type: prefix for prefix, key_type in KEY_PREFIXES.items()}

    def header(self, mail: str, expiry_date: str, key_type: KeyType) -> str:
        """Clear-text part of a license key."""
        return f"{self.prefixes[key_type]}-{mail}:{expiry_date}"

    def generate_license(
        self,
        mail: str,
        expiry_date: str,
        key_type: KeyType = KeyType.PERSONAL,
    ) -> str:
        """Generate a license key for a mail address valid through expiry_date."""
        if not mail or ":" in mail or ";" in mail:
            msg = f"Invalid license mail: {mail!r}"
            raise ValueError(msg)
        if not is_well_formed_date(expiry_date):
            msg = f"Expiry date must be YYYY-MM-DD, got {expiry_date!r}"
            raise ValueError(msg)
        if key_type == KeyType.DOMAIN and mail.count("*") != 1:
            msg = "Domain licenses need exactly one '*' in the mail pattern"
            raise ValueError(msg)

        header = self.header(mail, expiry_date, key_type)
        parameters = self.crypto.resolve_parameters(key_type)
        ciphertext = self.crypto.encrypt(header, parameters)
        self.logger.debug("Generated %s license for %s", key_type.value, mail)
        return f"{header};{ciphertext}"
