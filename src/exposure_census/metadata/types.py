from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Any


class FieldType(enum.IntEnum):
    """TIFF field types as numbered in the EXIF IFD entry header."""

    BYTE = 1
    ASCII = 2
    SHORT = 3
    LONG = 4
    RATIONAL = 5
    SBYTE = 6
    UNDEFINED = 7
    SSHORT = 8
    SLONG = 9
    SRATIONAL = 10
    FLOAT = 11
    DOUBLE = 12


NUMERIC_FIELD_TYPES = frozenset(ft for ft in FieldType if ft not in (FieldType.ASCII, FieldType.UNDEFINED))
UNSIGNED_INTEGER_FIELD_TYPES = frozenset((FieldType.SHORT, FieldType.LONG))


class ExifTag(enum.IntEnum):
    EXPOSURE_TIME = 0x829A
    F_NUMBER = 0x829D
    ISO_SPEED_RATINGS = 0x8827


@dataclass(frozen=True)
class MetadataEntry:
    tag: int
    field_type: FieldType
    values: tuple[Any, ...]
    ifd: str = ""


@dataclass(frozen=True)
class RawExposure:
    aperture: float
    shutter_s: float
    iso: int
