"""Expiry date checks for decrypted licenses.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

from maillic.common.config import Config

_DATE_PATTERN = re.compile(Config().DATE_FORMAT, re.ASCII)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def is_well_formed_date(text: str) -> bool:
    """True for the exact shape YYYY-MM-DD."""
    return _DATE_PATTERN.fullmatch(text) is not None


def parse_license_date(text: str) -> date:
    """
    Convert a well-formed license date into a calendar date.

    Months and days outside their range roll over into the following
    month or year, so 2023-02-30 is read as 2023-03-02.

    Raises:
        ValueError: if the text is not well formed or the year is not
            representable.
    """
    if not is_well_formed_date(text):
        msg = f"Not a license date: {text!r}"
        raise ValueError(msg)
    year, month, day = (int(part) for part in text.split("-"))
    year, month_index = divmod(year * 12 + month - 1, 12)
    try:
        return date(year, month_index + 1, 1) + timedelta(days=day - 1)
    except OverflowError as err:
        msg = f"License date out of range: {text!r}"
        raise ValueError(msg) from err


def days_between(later: date, earlier: date) -> int:
    """Signed number of whole days from earlier to later."""
    return (later - earlier).days


def evaluate_expiry(license_date: date, today: date) -> tuple[int, int]:
    """
    Compute (expired_days, licensed_days_left) for a license date.

    A license stays valid through its expiry date and is expired from
    the following day on. One of the two values is always zero.
    """
    if license_date < today:
        return days_between(today, license_date), 0
    return 0, days_between(license_date, today)
