"""
Data persistence utilities.
"""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003

from pydantic import ValidationError

from maillic.common.exceptions import ConfigurationError
from maillic.common.models import Account, KeyRing


class KeyRingStore:
    """Handles loading and saving key material."""

    @staticmethod
    def load(file_path: Path) -> KeyRing:
        """Load a keyring from file."""
        try:
            with file_path.open() as f:
                content = f.read()
        except FileNotFoundError as err:
            msg = (
                f"Keyring not found at {file_path}. "
                "Run 'maillic keygen' to generate one."
            )
            raise ConfigurationError(msg, str(file_path)) from err
        try:
            return KeyRing.model_validate_json(content)
        except ValidationError as err:
            msg = f"Invalid keyring format in {file_path}: {err}"
            raise ConfigurationError(msg, str(file_path)) from err

    @staticmethod
    def save(file_path: Path, keyring: KeyRing) -> None:
        """Save a keyring to file."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w") as f:
            f.write(keyring.model_dump_json(indent=2))


class AccountStore:
    """Handles loading account listings for file-backed directories."""

    @staticmethod
    def load(file_path: Path) -> list[Account]:
        """Load accounts from a JSON list."""
        try:
            with file_path.open() as f:
                data = json.load(f)
        except FileNotFoundError as err:
            msg = f"Accounts file not found: {file_path}"
            raise ConfigurationError(msg, str(file_path)) from err
        except json.JSONDecodeError as err:
            msg = f"Invalid accounts file {file_path}: {err}"
            raise ConfigurationError(msg, str(file_path)) from err
        if not isinstance(data, list):
            msg = f"Accounts file {file_path} must contain a JSON list"
            raise ConfigurationError(msg, str(file_path))
        try:
            return [Account.model_validate(item) for item in data]
        except ValidationError as err:
            msg = f"Invalid account entry in {file_path}: {err}"
            raise ConfigurationError(msg, str(file_path)) from err
