from __future__ import annotations

import math

from exposure_census.utils.formatting import format_aperture, shutter_seconds_to_fraction


def test_format_aperture_drops_trailing_zero() -> None:
    assert format_aperture(2.0) == "2"
    assert format_aperture(1.4) == "1.4"
    assert format_aperture(22.0) == "22"


def test_shutter_seconds_to_fraction_common_values() -> None:
    assert shutter_seconds_to_fraction(1 / 60) == "1/60"
    assert shutter_seconds_to_fraction(0.1) == "1/10"
    assert shutter_seconds_to_fraction(2.5) == "2.5"
    assert shutter_seconds_to_fraction(30.0) == "30"


def test_shutter_seconds_to_fraction_invalid_values() -> None:
    assert shutter_seconds_to_fraction(None) is None
    assert shutter_seconds_to_fraction(0.0) is None
    assert shutter_seconds_to_fraction(-1.0) is None
    assert shutter_seconds_to_fraction(math.inf) is None
    assert shutter_seconds_to_fraction(math.nan) is None
