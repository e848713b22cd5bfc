from __future__ import annotations

import math
from typing import Any, Callable, Iterable, TypeVar

from .types import (
    NUMERIC_FIELD_TYPES,
    UNSIGNED_INTEGER_FIELD_TYPES,
    ExifTag,
    MetadataEntry,
    RawExposure,
)


T = TypeVar("T")


def _ratio_like_to_float(value: Any) -> float | None:
    if value is None or isinstance(value, (str, bytes)):
        return None

    if hasattr(value, "num") and hasattr(value, "den"):
        num = float(getattr(value, "num", 0))
        den = float(getattr(value, "den", 0) or 0)
        if den == 0.0:
            # Same outcome as IEEE division by zero.
            if num == 0.0 or math.isnan(num):
                return math.nan
            return math.copysign(math.inf, num)
        return num / den

    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _entry_to_float(entry: MetadataEntry) -> float | None:
    if entry.field_type not in NUMERIC_FIELD_TYPES or not entry.values:
        return None
    return _ratio_like_to_float(entry.values[0])


def _entry_to_iso(entry: MetadataEntry) -> int | None:
    if entry.field_type not in UNSIGNED_INTEGER_FIELD_TYPES or not entry.values:
        return None
    value = entry.values[0]
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return int(value)


def _first_decoded(
    entries: Iterable[MetadataEntry],
    tag: ExifTag,
    decode: Callable[[MetadataEntry], T | None],
) -> T | None:
    for entry in entries:
        if entry.tag != tag:
            continue
        value = decode(entry)
        if value is not None:
            return value
    return None


def extract_exposure(entries: Iterable[MetadataEntry]) -> RawExposure | None:
    """Pull aperture, exposure time and ISO out of one file's EXIF entries.

    Each field comes from the first entry carrying its tag that decodes;
    later duplicates are ignored. Values are passed through unvalidated, so
    a zero aperture or a non-finite exposure time is returned as-is.
    Returns None unless all three fields are present.
    """

    entries = list(entries)
    aperture = _first_decoded(entries, ExifTag.F_NUMBER, _entry_to_float)
    shutter = _first_decoded(entries, ExifTag.EXPOSURE_TIME, _entry_to_float)
    iso = _first_decoded(entries, ExifTag.ISO_SPEED_RATINGS, _entry_to_iso)

    if aperture is None or shutter is None or iso is None:
        return None
    return RawExposure(aperture=aperture, shutter_s=shutter, iso=iso)
