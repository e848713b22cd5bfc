from __future__ import annotations

from dataclasses import dataclass
import struct
from typing import Iterator

from .metadata.types import RawExposure
from .shutter import SHUTTER_LABELS, closest_shutter_speed, shutter_seconds_for_label


def float_to_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def bits_to_float(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits))[0]


@dataclass(frozen=True)
class GroupKey:
    """One aggregation bucket.

    The aperture is stored as its IEEE-754 bit pattern so that equality and
    hashing follow the exact bits: 0.0 and -0.0 are different keys, and a NaN
    aperture matches itself.
    """

    aperture_bits: int
    shutter_label: str
    iso: int

    def __post_init__(self) -> None:
        if self.shutter_label not in SHUTTER_LABELS:
            raise ValueError(f"shutter label must be a standard speed, got {self.shutter_label!r}")

    @classmethod
    def of(cls, aperture: float, shutter_label: str, iso: int) -> "GroupKey":
        return cls(aperture_bits=float_to_bits(float(aperture)), shutter_label=shutter_label, iso=int(iso))

    @classmethod
    def from_exposure(cls, exposure: RawExposure) -> "GroupKey":
        return cls.of(exposure.aperture, closest_shutter_speed(exposure.shutter_s), exposure.iso)

    @property
    def aperture(self) -> float:
        return bits_to_float(self.aperture_bits)

    @property
    def shutter_s(self) -> float:
        return shutter_seconds_for_label(self.shutter_label)

    def sort_key(self) -> tuple[float, float, int]:
        return (self.aperture, self.shutter_s, self.iso)


class GroupCounts:
    """Running count of files per exposure group for a single scan."""

    def __init__(self) -> None:
        self._counts: dict[GroupKey, int] = {}

    def record(self, key: GroupKey) -> int:
        count = self._counts.get(key, 0) + 1
        self._counts[key] = count
        return count

    def count(self, key: GroupKey) -> int:
        return self._counts.get(key, 0)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def items(self) -> list[tuple[GroupKey, int]]:
        return list(self._counts.items())

    def sorted_items(self) -> list[tuple[GroupKey, int]]:
        return sorted(self._counts.items(), key=lambda kv: kv[0].sort_key())

    def as_dict(self) -> dict[GroupKey, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[GroupKey]:
        return iter(self._counts)

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupCounts):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"GroupCounts(groups={len(self._counts)}, total={self.total})"
