from __future__ import annotations


STANDARD_SHUTTER_SPEEDS: tuple[tuple[float, str], ...] = (
    (1.0 / 8000.0, "1/8000"),
    (1.0 / 4000.0, "1/4000"),
    (1.0 / 2000.0, "1/2000"),
    (1.0 / 1000.0, "1/1000"),
    (1.0 / 500.0, "1/500"),
    (1.0 / 250.0, "1/250"),
    (1.0 / 125.0, "1/125"),
    (1.0 / 60.0, "1/60"),
    (1.0 / 30.0, "1/30"),
    (1.0 / 15.0, "1/15"),
    (1.0 / 8.0, "1/8"),
    (1.0 / 4.0, "1/4"),
    (1.0 / 2.0, "1/2"),
    (1.0, "1"),
    (2.0, "2"),
    (4.0, "4"),
    (8.0, "8"),
    (15.0, "15"),
    (30.0, "30"),
)

SHUTTER_LABELS = frozenset(label for _, label in STANDARD_SHUTTER_SPEEDS)

_SECONDS_BY_LABEL = {label: seconds for seconds, label in STANDARD_SHUTTER_SPEEDS}


def closest_shutter_speed(seconds: float) -> str:
    """Snap an exposure time to the nearest standard shutter speed label.

    Exact ties keep the earlier (shorter) table entry. NaN and infinite
    inputs never compare smaller than the first distance, so they come back
    as the first label.
    """

    closest_label = STANDARD_SHUTTER_SPEEDS[0][1]
    min_diff = abs(seconds - STANDARD_SHUTTER_SPEEDS[0][0])

    for standard_seconds, label in STANDARD_SHUTTER_SPEEDS:
        diff = abs(seconds - standard_seconds)
        if diff < min_diff:
            closest_label = label
            min_diff = diff

    return closest_label


def shutter_seconds_for_label(label: str) -> float:
    try:
        return _SECONDS_BY_LABEL[label]
    except KeyError:
        raise ValueError(f"not a standard shutter speed label: {label!r}") from None
