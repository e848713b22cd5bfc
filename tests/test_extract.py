from __future__ import annotations

import math

from exposure_census.metadata import ExifTag, FieldType, MetadataEntry, RawExposure, extract_exposure
from exposure_census.metadata.extract import _ratio_like_to_float


class _Ratio:
    def __init__(self, num: int, den: int) -> None:
        self.num = num
        self.den = den


def _fnumber(num: int, den: int) -> MetadataEntry:
    return MetadataEntry(tag=ExifTag.F_NUMBER, field_type=FieldType.RATIONAL, values=(_Ratio(num, den),))


def _exposure(num: int, den: int) -> MetadataEntry:
    return MetadataEntry(tag=ExifTag.EXPOSURE_TIME, field_type=FieldType.RATIONAL, values=(_Ratio(num, den),))


def _iso(*values: int, field_type: FieldType = FieldType.SHORT) -> MetadataEntry:
    return MetadataEntry(tag=ExifTag.ISO_SPEED_RATINGS, field_type=field_type, values=values)


def test_ratio_like_to_float_ratio_object() -> None:
    assert _ratio_like_to_float(_Ratio(1, 50)) == 0.02


def test_ratio_like_to_float_plain_value() -> None:
    assert _ratio_like_to_float(4) == 4.0
    assert _ratio_like_to_float(2.5) == 2.5


def test_ratio_like_to_float_zero_denominator() -> None:
    assert _ratio_like_to_float(_Ratio(1, 0)) == math.inf
    assert _ratio_like_to_float(_Ratio(-1, 0)) == -math.inf
    assert math.isnan(_ratio_like_to_float(_Ratio(0, 0)))


def test_ratio_like_to_float_rejects_text() -> None:
    assert _ratio_like_to_float("f/2.8") is None
    assert _ratio_like_to_float(None) is None


def test_extract_all_three_fields() -> None:
    entries = [_fnumber(28, 10), _exposure(1, 125), _iso(400)]
    assert extract_exposure(entries) == RawExposure(aperture=2.8, shutter_s=0.008, iso=400)


def test_extract_ignores_entry_order_and_unrelated_tags() -> None:
    entries = [
        _iso(200),
        MetadataEntry(tag=0x010F, field_type=FieldType.ASCII, values=("Canon",)),
        _exposure(1, 2000),
        _fnumber(14, 10),
    ]
    assert extract_exposure(entries) == RawExposure(aperture=1.4, shutter_s=0.0005, iso=200)


def test_extract_missing_iso_yields_nothing() -> None:
    assert extract_exposure([_fnumber(28, 10), _exposure(1, 125)]) is None


def test_extract_missing_aperture_or_shutter_yields_nothing() -> None:
    assert extract_exposure([_exposure(1, 125), _iso(100)]) is None
    assert extract_exposure([_fnumber(28, 10), _iso(100)]) is None
    assert extract_exposure([]) is None


def test_extract_uses_first_of_duplicate_entries() -> None:
    entries = [_fnumber(28, 10), _fnumber(40, 10), _exposure(1, 60), _exposure(1, 30), _iso(800), _iso(100)]
    exposure = extract_exposure(entries)
    assert exposure is not None
    assert exposure.aperture == 2.8
    assert exposure.shutter_s == 1 / 60
    assert exposure.iso == 800


def test_extract_skips_undecodable_duplicate() -> None:
    entries = [
        MetadataEntry(tag=ExifTag.F_NUMBER, field_type=FieldType.ASCII, values=("2.8",)),
        _fnumber(56, 10),
        _exposure(1, 250),
        _iso(100),
    ]
    exposure = extract_exposure(entries)
    assert exposure is not None
    assert exposure.aperture == 5.6


def test_extract_takes_first_component_of_sequences() -> None:
    entries = [
        MetadataEntry(tag=ExifTag.F_NUMBER, field_type=FieldType.RATIONAL, values=(_Ratio(8, 1), _Ratio(11, 1))),
        _exposure(1, 250),
        _iso(100, 3200),
    ]
    exposure = extract_exposure(entries)
    assert exposure == RawExposure(aperture=8.0, shutter_s=0.004, iso=100)


def test_extract_iso_accepts_long_and_rejects_other_types() -> None:
    base = [_fnumber(4, 1), _exposure(1, 60)]
    assert extract_exposure(base + [_iso(102400, field_type=FieldType.LONG)]).iso == 102400
    assert extract_exposure(base + [_iso(100, field_type=FieldType.RATIONAL)]) is None
    assert extract_exposure(base + [_iso(field_type=FieldType.SHORT)]) is None


def test_extract_passes_through_out_of_range_values() -> None:
    entries = [_fnumber(0, 1), _exposure(1, 0), _iso(0)]
    exposure = extract_exposure(entries)
    assert exposure is not None
    assert exposure.aperture == 0.0
    assert exposure.shutter_s == math.inf
    assert exposure.iso == 0
