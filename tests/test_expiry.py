from datetime import date

import pytest

from maillic.licenser.domain.expiry import (
    days_between,
    evaluate_expiry,
    is_well_formed_date,
    parse_license_date,
)


@pytest.mark.parametrize("text", ["2015-05-20", "0001-01-01", "9999-12-31", "2023-02-30"])
def test_well_formed_dates(text: str) -> None:
    assert is_well_formed_date(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2015-5-20",
        "15-05-20",
        "2015/05/20",
        "2015-05-20 ",
        "2015-05-20\n",
        " 2015-05-20",
        "20150520",
        "2015-05-20T10:00",
        "２０１５-05-20",
    ],
)
def test_malformed_dates(text: str) -> None:
    assert not is_well_formed_date(text)


def test_parse_license_date() -> None:
    assert parse_license_date("2015-05-20") == date(2015, 5, 20)


def test_parse_license_date_rolls_over() -> None:
    assert parse_license_date("2023-02-30") == date(2023, 3, 2)
    assert parse_license_date("2023-13-01") == date(2024, 1, 1)
    assert parse_license_date("2023-01-00") == date(2022, 12, 31)


@pytest.mark.parametrize("text", ["0000-01-01", "9999-12-32", "9999-99-99", "not a date"])
def test_parse_license_date_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        parse_license_date(text)


def test_days_between_is_signed() -> None:
    assert days_between(date(2020, 3, 1), date(2020, 2, 1)) == 29  # noqa: PLR2004
    assert days_between(date(2020, 2, 1), date(2020, 3, 1)) == -29  # noqa: PLR2004


def test_evaluate_expiry_future() -> None:
    assert evaluate_expiry(date(2026, 10, 29), date(2026, 10, 19)) == (0, 10)


def test_evaluate_expiry_same_day() -> None:
    assert evaluate_expiry(date(2026, 10, 19), date(2026, 10, 19)) == (0, 0)


def test_evaluate_expiry_past() -> None:
    assert evaluate_expiry(date(2026, 10, 9), date(2026, 10, 19)) == (10, 0)
