"""Infrastructure layer: identity directories backed by memory or files.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from maillic.common.persistence import AccountStore

if TYPE_CHECKING:
    from pathlib import Path

    from maillic.common.models import Account, Identity


class StaticIdentityDirectory:
    """Identity directory over a fixed list of accounts.

    An account's default identity is the identity whose id equals the
    account's ``default_identity_id``; accounts without one report none.
    """

    def __init__(self, accounts: Sequence[Account]):
        self.accounts = list(accounts)

    @classmethod
    def from_file(cls, file_path: Path) -> StaticIdentityDirectory:
        """Load the accounts from a JSON list."""
        return cls(AccountStore.load(file_path))

    async def list_accounts(self) -> Sequence[Account]:
        return list(self.accounts)

    async def get_default_identity(self, account_id: str) -> Identity | None:
        for account in self.accounts:
            if account.id != account_id or account.default_identity_id is None:
                continue
            for identity in account.identities:
                if identity.id == account.default_identity_id:
                    return identity
        return None
