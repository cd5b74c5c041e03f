# Mail-bound license validation

from maillic.common.models import (
    KeyType,
    LicenseInfo,
    LicenserOptions,
    ValidationStatus,
)
from maillic.licenser.application.licenser import Licenser
from maillic.licenser.infrastructure.directory import StaticIdentityDirectory

__all__ = [
    "KeyType",
    "LicenseInfo",
    "Licenser",
    "LicenserOptions",
    "StaticIdentityDirectory",
    "ValidationStatus",
]
