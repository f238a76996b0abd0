from __future__ import annotations

from datetime import datetime, timezone

import pytest

from getnotes2vault.dates import CANONICAL_FORMAT, normalize_datetime, now_timestamp


@pytest.mark.parametrize(
    "raw",
    ["2023-3-5 8:07", "2023/3/5 8:07", "2023-03-05 08:07", "2023/03/05 08:07:00"],
)
def test_separator_does_not_change_result(raw: str) -> None:
    assert normalize_datetime(raw) == "2023-03-05 08:07:00"


def test_missing_time_defaults_to_midnight() -> None:
    assert normalize_datetime("2023-03-05") == "2023-03-05 00:00:00"


def test_us_dates() -> None:
    assert normalize_datetime("3/5/2023 14:30:15") == "2023-03-05 14:30:15"
    assert normalize_datetime("12/25/2022") == "2022-12-25 00:00:00"


def test_iso_naive_is_kept_as_local() -> None:
    assert normalize_datetime("2023-03-05T08:09:10") == "2023-03-05 08:09:10"


def test_iso_with_offset_is_converted_to_local_time() -> None:
    expected = (
        datetime(2023, 3, 5, 8, 9, 10, tzinfo=timezone.utc)
        .astimezone()
        .strftime(CANONICAL_FORMAT)
    )
    assert normalize_datetime("2023-03-05T08:09:10Z") == expected


def test_invalid_iso_falls_back_to_numeric_pattern() -> None:
    assert normalize_datetime("2023-03-05T99:99") == "2023-03-05 00:00:00"


def test_unrecognized_input_is_returned_unchanged() -> None:
    assert normalize_datetime("yesterday") == "yesterday"
    assert normalize_datetime("Tomorrow") == "Tomorrow"


def test_now_timestamp() -> None:
    assert now_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02 03:04:05"


def test_fullwidth_digits_are_not_canonicalized() -> None:
    assert normalize_datetime("２０２３-０３-０５ １２:００") == "２０２３-０３-０５ １２:００"
