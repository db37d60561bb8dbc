import pytest

from lbslocation.location import Location
from lbslocation.parcel import Parcel, ParcelError


def _sample():
    return Location(
        latitude=39.92879,
        longitude=116.3709,
        altitude=12.25,
        accuracy=1.5,
        speed=2.5,
        direction=90.0,
        time_stamp=1000,
        time_since_boot=2000,
    )


def test_defaults_are_zero():
    location = Location()
    assert (location.latitude, location.longitude, location.altitude) == (0.0, 0.0, 0.0)
    assert (location.time_stamp, location.time_since_boot) == (0, 0)


def test_marshalling_round_trip():
    parcel = Parcel()
    _sample().marshalling(parcel)
    reader = Parcel(parcel.data)
    assert Location.unmarshalling(reader) == _sample()
    assert reader.remaining() == 0


def test_unmarshalling_truncated_raises():
    parcel = Parcel()
    parcel.write_double(1.0)
    with pytest.raises(ParcelError):
        Location.unmarshalling(Parcel(parcel.data))


def test_unmarshalling_location_zero_tag_gives_empty_fix():
    parcel = Parcel()
    parcel.write_int32(0)
    assert Location.unmarshalling_location(Parcel(parcel.data)) == Location()


def test_unmarshalling_location_reads_extended_layout():
    parcel = Parcel()
    parcel.write_int32(1)
    parcel.write_string16("gps")
    parcel.write_int64(1000)
    parcel.write_int64(2000)
    parcel.write_double(0.5)
    parcel.write_int32(7)
    parcel.write_double(39.92879)
    parcel.write_double(116.3709)
    parcel.write_double(12.25)
    parcel.write_float(2.5)
    parcel.write_float(90.0)
    parcel.write_float(1.5)
    for _ in range(3):
        parcel.write_float(0.25)
    reader = Parcel(parcel.data)
    assert Location.unmarshalling_location(reader) == _sample()
    assert reader.remaining() == 0


def test_copy_is_independent():
    original = _sample()
    duplicate = original.copy()
    duplicate.latitude = 0.0
    assert original.latitude == 39.92879
    assert duplicate.longitude == original.longitude


def test_str_format():
    text = str(Location(latitude=1.5, time_stamp=7))
    assert text.startswith("latitude : 1.500000, longitude : 0.000000")
    assert text.endswith("timeStamp : 7, timeSinceBoot : 0")