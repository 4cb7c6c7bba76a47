from datetime import UTC, datetime, timedelta, timezone

import pytest

from darksky.utils import TimeUtils


def test_epoch_roundtrip() -> None:
    dt = TimeUtils.epoch_to_datetime(1544378256)
    assert dt.tzinfo is UTC
    assert TimeUtils.datetime_to_epoch(dt) == 1544378256


def test_naive_datetime_is_utc() -> None:
    assert TimeUtils.datetime_to_epoch(datetime(1970, 1, 2)) == 86400


@pytest.mark.parametrize(
    "when, expected",
    [
        (255657600, 255657600),
        (datetime(1978, 2, 6, 19, 0, tzinfo=timezone(timedelta(hours=-5))), 255657600),
        (datetime(1970, 1, 1, 0, 1), 60),
    ],
)
def test_to_epoch(when: datetime | int, expected: int) -> None:
    assert TimeUtils.to_epoch(when) == expected
