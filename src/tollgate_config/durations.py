"""Parsing of human-readable expiration strings such as ``15m`` or ``7d``."""

import re
from datetime import timedelta

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$")

_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
}


def parse_duration(value: str | int) -> timedelta:
    """Convert an expiration setting into a ``timedelta``.

    Bare integers (or digit-only strings) are seconds. Otherwise the value
    is a positive integer followed by one unit: ``s``, ``m``, ``h``, ``d``
    or ``w``.

    Examples
    --------
    >>> parse_duration("15m")
    datetime.timedelta(seconds=900)
    >>> parse_duration("7d")
    datetime.timedelta(days=7)

    Raises
    ------
    ValueError
        If the value is not a recognised duration or is zero.
    """
    if isinstance(value, bool):
        msg = f"Invalid duration: {value!r}"
        raise ValueError(msg)

    if isinstance(value, int):
        amount, unit = value, ""
    else:
        match = _DURATION_PATTERN.match(value)
        if match is None:
            msg = f"Invalid duration: {value!r} (expected e.g. '900', '15m', '7d')"
            raise ValueError(msg)
        amount, unit = int(match.group(1)), match.group(2)

    if amount <= 0:
        msg = f"Duration must be positive: {value!r}"
        raise ValueError(msg)

    return timedelta(seconds=amount * _UNIT_SECONDS[unit])
