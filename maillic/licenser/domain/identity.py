"""Matching of mail identities against the mail a license is bound to.
"""

from __future__ import annotations

import logging
import re

from maillic.common.models import KeyType

logger = logging.getLogger(__name__)

WILDCARD = "*"


def _matches_wildcard(candidate: str, pattern: str) -> bool:
    # Only the wildcard is translated; the rest of the pattern is used as a
    # regular expression verbatim, so "." matches any character.
    if pattern.count(WILDCARD) != 1:
        return False
    try:
        expression = re.compile(pattern.replace(WILDCARD, ".*"), re.IGNORECASE)
    except re.error:
        logger.info("Domain license pattern is not a valid expression: %s", pattern)
        return False
    return expression.fullmatch(candidate) is not None


def matches(key_type: KeyType, candidate: str, pattern: str) -> bool:
    """True if the candidate address is covered by the license mail."""
    if key_type == KeyType.DOMAIN:
        return _matches_wildcard(candidate, pattern)
    return candidate.lower() == pattern.lower()
