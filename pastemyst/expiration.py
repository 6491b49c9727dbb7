"""Mapping arbitrary durations onto the expiration buckets PasteMyst supports."""

from __future__ import annotations

import bisect
import enum
import math
import numbers
import sys
import typing

HOUR = 60 * 60
DAY = HOUR * 24
WEEK = DAY * 7
MONTH = DAY * 30
YEAR = MONTH * 12


class Expiration(str, enum.Enum):
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    TEN_HOURS = "10h"
    ONE_DAY = "1d"
    TWO_DAYS = "2d"
    ONE_WEEK = "1w"
    ONE_MONTH = "1m"
    ONE_YEAR = "1y"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


# Strictly increasing, closed above by the unbounded "never"
EXPIRATIONS: typing.Tuple[typing.Tuple[float, str], ...] = (
    (HOUR, Expiration.ONE_HOUR.value),
    (HOUR * 2, Expiration.TWO_HOURS.value),
    (HOUR * 10, Expiration.TEN_HOURS.value),
    (DAY, Expiration.ONE_DAY.value),
    (DAY * 2, Expiration.TWO_DAYS.value),
    (WEEK, Expiration.ONE_WEEK.value),
    (MONTH, Expiration.ONE_MONTH.value),
    (YEAR, Expiration.ONE_YEAR.value),
    (math.inf, Expiration.NEVER.value),
)

_THRESHOLDS = tuple(seconds for seconds, _ in EXPIRATIONS)
_LABELS = tuple(label for _, label in EXPIRATIONS)
_SECONDS_BY_LABEL = {label: seconds for seconds, label in EXPIRATIONS}


def _validate_seconds(seconds) -> float:
    if isinstance(seconds, bool) or not isinstance(seconds, numbers.Real):
        raise TypeError(
            "seconds must be a real number, not %s" % type(seconds).__name__
        )
    try:
        seconds = float(seconds)
    except OverflowError:
        # Too large for a float but finite, longer than every finite bucket
        if seconds < 0:
            raise ValueError("seconds must not be negative") from None
        return sys.float_info.max
    if not math.isfinite(seconds):
        raise ValueError("seconds must be finite, got %r" % seconds)
    if seconds < 0:
        raise ValueError("seconds must not be negative, got %r" % seconds)
    return seconds


def get_next_lower_expiration(seconds: float) -> str:
    """Return the label of the largest bucket that does not exceed ``seconds``.

    Durations shorter than an hour are clamped up to ``"1h"``, and anything
    longer than a year gives ``"1y"`` since ``"never"`` is not a lower bound
    of any finite duration.

    Raises
    ------
    TypeError
        ``seconds`` is not a real number.
    ValueError
        ``seconds`` is negative, NaN or infinite.
    """
    seconds = _validate_seconds(seconds)
    index = bisect.bisect_right(_THRESHOLDS, seconds) - 1
    return _LABELS[max(index, 0)]


def get_next_higher_expiration(seconds: float) -> str:
    """Return the label of the smallest bucket that is at least ``seconds`` long.

    Durations longer than a year give ``"never"``.

    Raises
    ------
    TypeError
        ``seconds`` is not a real number.
    ValueError
        ``seconds`` is negative, NaN or infinite.
    """
    seconds = _validate_seconds(seconds)
    return _LABELS[bisect.bisect_left(_THRESHOLDS, seconds)]


def expiration_to_seconds(label: typing.Union[str, Expiration]) -> float:
    """Duration of an expiration label in seconds, ``math.inf`` for ``"never"``."""
    label = str(label)
    try:
        return _SECONDS_BY_LABEL[label]
    except KeyError:
        raise ValueError("Unknown expiration %r" % label) from None
