"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from maillic.common.models import Account, CryptoParameters, Identity


class ICryptoProvider(Protocol):
    """Protocol for the asymmetric cipher behind the license format."""

    def decrypt(self, parameters: CryptoParameters, ciphertext: str) -> str: ...

    def encrypt(self, parameters: CryptoParameters, plaintext: str) -> str: ...


class IIdentityDirectory(Protocol):
    """Protocol for enumerating mail accounts and their identities."""

    async def list_accounts(self) -> Sequence[Account]: ...

    async def get_default_identity(self, account_id: str) -> Identity | None: ...
