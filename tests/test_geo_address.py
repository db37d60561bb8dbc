import pytest

from lbslocation.geo_address import GeoAddress
from lbslocation.parcel import Parcel, ParcelError


def _full_address():
    return GeoAddress(
        latitude=39.92879,
        longitude=116.3709,
        locale_language="zh",
        locale_country="CN",
        place_name="Main Square",
        country_code="CN",
        country_name="China",
        administrative_area="Area",
        sub_administrative_area="Sub area",
        locality="City",
        sub_locality="District",
        road_name="Road",
        sub_road_name="Lane",
        premises="Building",
        postal_code="100000",
        phone_number="n/a",
        address_url="example.com",
        descriptions={0: "first line", 1: "second line"},
        descriptions_size=2,
        has_latitude=True,
        has_longitude=True,
    )


def _round_trip(address):
    parcel = Parcel()
    address.marshalling(parcel)
    reader = Parcel(parcel.data)
    result = GeoAddress.unmarshalling(reader)
    return result, reader


def test_round_trip_full_address():
    original = _full_address()
    result, reader = _round_trip(original)
    assert result == original
    assert reader.remaining() == 0


def test_round_trip_default_address():
    result, reader = _round_trip(GeoAddress())
    assert result == GeoAddress()
    assert reader.remaining() == 0


def test_round_trip_without_coordinates_keeps_defaults():
    original = _full_address()
    original.has_latitude = False
    original.has_longitude = False
    result, _ = _round_trip(original)
    assert result.has_latitude is False
    assert result.latitude == GeoAddress().latitude
    assert result.coordinates() == (0.0, 0.0)


def test_descriptions_size_follows_largest_index():
    original = GeoAddress(descriptions={0: "a", 1: "b"})
    result, _ = _round_trip(original)
    assert result.descriptions == {0: "a", 1: "b"}
    assert result.descriptions_size == len(original.descriptions)
    assert result.get_description(1) == "b"


def test_get_description_edge_cases():
    address = GeoAddress(descriptions={0: "a"}, descriptions_size=1)
    assert address.get_description(0) == "a"
    assert address.get_description(-1) == ""
    assert address.get_description(3) == ""


def test_get_description_without_size_is_empty():
    address = GeoAddress(descriptions={0: "a"})
    assert address.get_description(0) == ""


def test_coordinates_follow_flags():
    address = GeoAddress(latitude=1.5, longitude=2.5, has_latitude=True)
    assert address.coordinates() == (1.5, 0.0)
    address.has_longitude = True
    assert address.coordinates() == (1.5, 2.5)


@pytest.mark.parametrize("size", [0, -1, 100])
def test_out_of_range_description_count_is_ignored(size):
    parcel = Parcel()
    parcel.write_string("en")
    parcel.write_string("US")
    parcel.write_int32(size)
    for name in ("place", "", "", "", "", "", "", "", "", "", ""):
        parcel.write_string(name)
    parcel.write_int32(0)
    parcel.write_int32(0)
    parcel.write_string("")
    parcel.write_string("")
    result = GeoAddress.unmarshalling(Parcel(parcel.data))
    assert result.descriptions == {}
    assert result.descriptions_size == 0
    assert result.place_name == "place"
    assert result.locale_country == "US"


def test_truncated_parcel_raises():
    parcel = Parcel()
    _full_address().marshalling(parcel)
    with pytest.raises(ParcelError):
        GeoAddress.unmarshalling(Parcel(parcel.data[:20]))