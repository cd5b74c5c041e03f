"""Parsing of the license key wire format.

    <prefix>-<localpart>@<domain>:<date>;<ciphertext>

The prefix selects the key type, the text before the last ``;`` is the
clear-text header and everything after it is ciphertext. The decrypted
payload repeats the header as ``<mail>:<date>[;<ignored>]``.
"""

from __future__ import annotations

from collections.abc import Mapping

from maillic.common.config import Config
from maillic.common.exceptions import MalformedLicense
from maillic.common.models import KeyType

KEY_PREFIXES: dict[str, KeyType] = {
    prefix: KeyType(name) for prefix, name in Config().KEY_TYPE_PREFIXES.items()
}


def _strip_prefix(fragment: str) -> str:
    # everything up to and including the first dash, e.g. ST- or STD-
    return fragment[fragment.find("-") + 1 :]


def parse_prefix(
    raw: str, prefixes: Mapping[str, KeyType] | None = None
) -> KeyType:
    """Return the key type encoded in the license prefix."""
    prefixes = KEY_PREFIXES if prefixes is None else prefixes
    prefix, sep, _ = raw.partition("-")
    if not sep:
        msg = "License key has no prefix separator"
        raise MalformedLicense(msg)
    try:
        return prefixes[prefix]
    except KeyError:
        msg = f"Unknown license prefix {prefix!r}"
        raise MalformedLicense(msg) from None


def split_ciphertext(raw: str) -> tuple[str, str]:
    """Split a license key into its clear-text header and ciphertext."""
    header, sep, ciphertext = raw.rpartition(";")
    if not sep:
        msg = "License key has no ciphertext separator"
        raise MalformedLicense(msg)
    if not header:
        msg = "License key has no header"
        raise MalformedLicense(msg)
    if not ciphertext:
        msg = "License key has an empty ciphertext"
        raise MalformedLicense(msg)
    return header, ciphertext


def split_mail_date(decrypted: str) -> tuple[str, str]:
    """Split a decrypted payload into its mail and date fragments."""
    fields = decrypted.split(";", 1)[0].split(":")
    if len(fields) < 2:
        msg = "Decrypted payload has no date separator"
        raise MalformedLicense(msg)
    return _strip_prefix(fields[0]), fields[1]


def clear_text_mail(raw: str) -> str:
    """Mail fragment of the clear-text header."""
    return _strip_prefix(raw.split(":", 1)[0])
