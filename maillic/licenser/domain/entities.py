"""Domain layer: validation state and the values derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from maillic.common.models import ValidationStatus

_SHORT_DESCRIPTIONS = {
    ValidationStatus.NOT_VALIDATED: "NotValidated",
    ValidationStatus.VALID: "Valid",
    ValidationStatus.EXPIRED: "Expired",
    ValidationStatus.INVALID: "Invalid",
    ValidationStatus.MAIL_NOT_CONFIGURED: "MailNotConfigured",
    ValidationStatus.MAIL_DIFFERENT: "MailDifferent",
    ValidationStatus.EMPTY: "Empty",
}

_DESCRIPTIONS = {
    ValidationStatus.NOT_VALIDATED: "Not Validated",
    ValidationStatus.VALID: "Valid",
    ValidationStatus.INVALID: "Invalid",
    ValidationStatus.MAIL_NOT_CONFIGURED: "Mail Not Configured",
    ValidationStatus.MAIL_DIFFERENT: "Mail Different",
    ValidationStatus.EMPTY: "Empty",
}


@dataclass(frozen=True)
class ValidationState:
    """Outcome of one validation pass. The defaults are the reset state."""

    status: ValidationStatus = ValidationStatus.NOT_VALIDATED
    decrypted_mail: str = ""
    decrypted_date: str = ""
    expired_days: int = 0
    licensed_days_left: int = 0
    decrypted_part: str = ""


def short_description(state: ValidationState) -> str:
    return _SHORT_DESCRIPTIONS.get(state.status, "UnknownStatus")


def description(state: ValidationState) -> str:
    """Human readable status, suitable for display."""
    if state.status == ValidationStatus.EXPIRED:
        return f"Valid but expired since {state.expired_days} days"
    return _DESCRIPTIONS.get(state.status, "Unknown Status")


def is_valid(state: ValidationState) -> bool:
    return state.status == ValidationStatus.VALID


def is_expired(state: ValidationState) -> bool:
    """Valid signature and identity, but the license date has passed."""
    return state.status == ValidationStatus.EXPIRED
