"""
Configuration settings for the license validation system.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # License key format
        self.KEY_TYPE_PREFIXES: dict[str, str] = {
            "ST": "personal",
            "S1": "domain",
            "STD": "standard",
        }
        self.DATE_FORMAT: str = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

        # Key material settings
        self.DEFAULT_KEY_BITS: int = 1024
        self.PUBLIC_EXPONENT: int = 65537
        # Block size is kept below the modulus so every block stays in range
        self.KEY_LENGTH_MARGIN: int = 16

        # File paths
        self.BASE_DIR: Path = Path(__file__).parent.parent
        self.KEYS_DIR: Path = self.BASE_DIR / "keys"
        self.KEYRING_PATH: Path = Path(
            os.getenv("MAILLIC_KEYRING", str(self.KEYS_DIR / "keyring.json"))
        )

        # Legacy place to store the trial period, not read by validation
        self.SETTINGS_ROOT: str = ""
        self.FORCE_SECONDARY_IDENTITY: bool = False

        # Logging
        self.LOG_LEVEL: int = logging.getLevelName(
            os.getenv("MAILLIC_LOG_LEVEL", "INFO").upper()
        )
        if not isinstance(self.LOG_LEVEL, int):
            self.LOG_LEVEL = logging.INFO
