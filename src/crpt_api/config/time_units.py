from __future__ import annotations

_UNIT_SECONDS = {
    "second": 1.0,
    "minute": 60.0,
    "hour": 3600.0,
    "day": 86400.0,
}


def interval_from_unit(unit: str) -> float:
    """Return the length in seconds of one ``unit`` (second, minute, hour or day).

    Plural forms are accepted: ``interval_from_unit("MINUTES") == 60.0``.

    Raises:
        ValueError: If the unit is unknown.
    """
    key = unit.strip().lower()
    if key.endswith("s"):
        key = key[:-1]
    try:
        return _UNIT_SECONDS[key]
    except KeyError:
        raise ValueError(f"Unknown time unit: {unit!r} (expected one of {', '.join(_UNIT_SECONDS)})") from None
