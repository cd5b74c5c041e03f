"""
Application layer: license validation use case.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from maillic.common import Configurable, setup_logger
from maillic.common.config import Config
from maillic.common.crypto import CryptoAdapter
from maillic.common.exceptions import (
    ConfigurationError,
    LicenseError,
    MalformedLicense,
)
from maillic.common.models import (
    KeyType,
    LicenseInfo,
    LicenserOptions,
    ValidationStatus,
)
from maillic.common.persistence import KeyRingStore
from maillic.licenser.domain import entities
from maillic.licenser.domain.entities import ValidationState
from maillic.licenser.domain.expiry import (
    evaluate_expiry,
    is_well_formed_date,
    parse_license_date,
    utc_today,
)
from maillic.licenser.domain.identity import matches
from maillic.licenser.domain.key_format import (
    clear_text_mail,
    parse_prefix,
    split_ciphertext,
    split_mail_date,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from maillic.common.interfaces import ICryptoProvider, IIdentityDirectory
    from maillic.common.models import Account, Identity, KeyRing


class Licenser(Configurable):
    """Validates a license key against the mail identities of the host."""

    def __init__(
        self,
        license_key: str,
        directory: IIdentityDirectory,
        options: LicenserOptions | None = None,
        *,
        keyring: KeyRing | None = None,
        provider: ICryptoProvider | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.config = Config()
        options = options or LicenserOptions()
        self.apply_overrides(
            options.model_dump(),
            self.config,
            ["force_secondary_identity", "settings_root", "log_level", "keyring_path"],
        )

        self.logger = logging.getLogger(__name__)
        setup_logger(self.logger, self.log_level)

        self.license_key = license_key
        self.directory = directory
        self._today = today
        try:
            self.key_type: KeyType | None = parse_prefix(license_key)
        except MalformedLicense:
            self.key_type = None

        if self.key_type == KeyType.DOMAIN and self.force_secondary_identity:
            self.force_secondary_identity = False
            self.logger.warning(
                "Forcing secondary email addresses is not supported "
                "with a Domain license, option ignored"
            )

        self._keyring = keyring
        self._provider = provider
        self._crypto: CryptoAdapter | None = None
        self._state = ValidationState()

    @property
    def crypto(self) -> CryptoAdapter:
        """Crypto adapter, loading the keyring file on first use."""
        if self._crypto is None:
            keyring = self._keyring
            if keyring is None:
                keyring = KeyRingStore.load(self.keyring_path)
            self._crypto = CryptoAdapter(keyring, self._provider)
        return self._crypto

    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def info(self) -> LicenseInfo:
        """Snapshot of the current validation state."""
        state = self._state
        return LicenseInfo(
            status=entities.short_description(state),
            description=entities.description(state),
            licensed_days_left=state.licensed_days_left,
            expired_days=state.expired_days,
            expiry_date=state.decrypted_date,
            email=state.decrypted_mail,
            license_key=self.license_key,
            decrypted_part=state.decrypted_part,
            key_type=self.key_type,
            is_valid=entities.is_valid(state),
            is_expired=entities.is_expired(state),
        )

    async def validate(self) -> LicenseInfo:
        """Run a full validation and return the resulting snapshot."""
        self._state = ValidationState()
        self._state = await self._evaluate()
        self.logger.info(
            "License validation finished: %s", entities.description(self._state)
        )
        return self.info

    def encrypt_license(self) -> str:
        """Encrypt the license key with its key material. Tooling only."""
        if self.key_type is None:
            msg = "License key has no known prefix"
            raise MalformedLicense(msg)
        parameters = self.crypto.resolve_parameters(self.key_type)
        self.logger.debug(
            "Encrypting license with block size %d", parameters.chunk_size
        )
        return self.crypto.encrypt(self.license_key, parameters)

    async def _evaluate(self) -> ValidationState:
        self.logger.debug("Validating license %s", self.license_key.split(";")[0])

        if not self.license_key:
            return ValidationState(status=ValidationStatus.EMPTY)

        try:
            _, ciphertext = split_ciphertext(self.license_key)
            decrypted = self._decrypt(ciphertext)
        except ConfigurationError:
            raise
        except LicenseError as e:
            self.logger.info("License rejected: %s", e)
            return ValidationState(status=ValidationStatus.INVALID)

        invalid = ValidationState(
            status=ValidationStatus.INVALID, decrypted_part=decrypted
        )
        try:
            payload_mail, license_date = split_mail_date(decrypted)
        except MalformedLicense as e:
            self.logger.info("License rejected: %s", e)
            return invalid
        if not is_well_formed_date(license_date):
            self.logger.info("Encountered garbage date: %r", license_date)
            return invalid
        try:
            expiry = parse_license_date(license_date)
        except ValueError:
            self.logger.info("License date out of range: %s", license_date)
            return invalid

        decrypted_mail = payload_mail.lower()
        if clear_text_mail(self.license_key).lower() != decrypted_mail:
            self.logger.info("License mail does not match its encrypted part")
            return ValidationState(
                status=ValidationStatus.MAIL_DIFFERENT,
                decrypted_mail=decrypted_mail,
                decrypted_date=license_date,
                decrypted_part=decrypted,
            )

        expired_days, days_left = evaluate_expiry(expiry, self._today())
        # Expiry only applies once an identity matched
        if await self._match_identity(decrypted_mail):
            status = (
                ValidationStatus.VALID
                if expired_days == 0
                else ValidationStatus.EXPIRED
            )
        else:
            status = ValidationStatus.MAIL_NOT_CONFIGURED

        return ValidationState(
            status=status,
            decrypted_mail=decrypted_mail,
            decrypted_date=license_date,
            expired_days=expired_days,
            licensed_days_left=days_left,
            decrypted_part=decrypted,
        )

    def _decrypt(self, ciphertext: str) -> str:
        if self.key_type is None:
            msg = "License key has no known prefix"
            raise MalformedLicense(msg)
        parameters = self.crypto.resolve_parameters(self.key_type)
        return self.crypto.decrypt(ciphertext, parameters)

    async def _match_identity(self, license_mail: str) -> bool:
        """Scan the accounts in directory order until one identity matches."""
        accounts = await self.directory.list_accounts()

        allow_secondary = self.force_secondary_identity
        if (
            self.key_type == KeyType.PERSONAL
            and not allow_secondary
            and not await self._any_default_identity(accounts)
        ):
            allow_secondary = True
            self.logger.warning(
                "There is no account with a default identity. You may want to "
                "check your account configuration. Allowing use of secondary "
                "email addresses."
            )

        for account in accounts:
            default = await self.directory.get_default_identity(account.id)
            if default is not None and not self.force_secondary_identity:
                self.logger.debug(
                    "Checking default identity %s of account %s",
                    default.id,
                    account.name,
                )
                if not default.email:
                    self.logger.debug(
                        "Default identity of account %s has no email", account.name
                    )
                    continue
                if self._is_match(default, license_mail, account):
                    return True

            elif allow_secondary:
                self.logger.debug("Checking all identities of account %s", account.name)
                for identity in account.identities:
                    if (
                        self.force_secondary_identity
                        and default is not None
                        and default.id == identity.id
                    ):
                        self.logger.debug("Skipping default identity %s", identity.id)
                        continue
                    if not identity.email:
                        self.logger.debug("Identity %s has no email", identity.id)
                        continue
                    if self._is_match(identity, license_mail, account):
                        return True
        return False

    async def _any_default_identity(self, accounts: Sequence[Account]) -> bool:
        for account in accounts:
            if await self.directory.get_default_identity(account.id) is not None:
                return True
        return False

    def _is_match(
        self, identity: Identity, license_mail: str, account: Account
    ) -> bool:
        if self.key_type is None or not matches(
            self.key_type, identity.email, license_mail
        ):
            return False
        self.logger.debug(
            "Identity %s of account %s matched", identity.email, account.name
        )
        return True
