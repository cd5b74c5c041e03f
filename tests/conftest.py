from datetime import date

import pytest

from maillic.common.models import Account, Identity, KeyRing
from maillic.issuer.keygen import KeyGenerator
from maillic.issuer.license_generator import LicenseGenerator
from maillic.licenser.infrastructure.directory import StaticIdentityDirectory

TODAY = date(2026, 10, 19)


@pytest.fixture(scope="session")
def keyring() -> KeyRing:
    """Key material for all key types, generated once per test run."""
    return KeyGenerator(bits=1024).generate_keyring()


@pytest.fixture
def generator(keyring: KeyRing) -> LicenseGenerator:
    return LicenseGenerator(keyring=keyring)


def make_account(
    account_id: str,
    *emails: str,
    default: int | None = 0,
) -> Account:
    """Account with one identity per email; default is an index into emails."""
    identities = [
        Identity(id=f"{account_id}-id{i}", email=email) for i, email in enumerate(emails)
    ]
    default_id = identities[default].id if default is not None and identities else None
    return Account(
        id=account_id,
        name=f"account {account_id}",
        identities=identities,
        default_identity_id=default_id,
    )


def make_directory(*accounts: Account) -> StaticIdentityDirectory:
    return StaticIdentityDirectory(accounts)
