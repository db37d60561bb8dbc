"""A postal address with the coordinates it was resolved from or to."""

from dataclasses import dataclass, field

PARCEL_INT_SIZE = 64.0
MAX_PARCEL_SIZE = 100
MAX_RESULT = 10

_ADDRESS_FIELDS = (
    "place_name",
    "administrative_area",
    "sub_administrative_area",
    "locality",
    "sub_locality",
    "road_name",
    "sub_road_name",
    "premises",
    "postal_code",
    "country_code",
    "country_name",
)


@dataclass
class GeoAddress:
    """Result of a geocoding or reverse geocoding request."""

    latitude: float = 0.0
    longitude: float = 0.0
    locale_language: str = ""
    locale_country: str = ""
    place_name: str = ""
    country_code: str = ""
    country_name: str = ""
    administrative_area: str = ""
    sub_administrative_area: str = ""
    locality: str = ""
    sub_locality: str = ""
    road_name: str = ""
    sub_road_name: str = ""
    premises: str = ""
    postal_code: str = ""
    phone_number: str = ""
    address_url: str = ""
    descriptions: dict = field(default_factory=dict)
    descriptions_size: int = 0
    has_latitude: bool = False
    has_longitude: bool = False

    def get_description(self, index):
        """Description line at an index, or an empty string if there is none."""
        if index < 0 or self.descriptions_size <= 0:
            return ""
        return self.descriptions.get(index, "")

    def coordinates(self):
        """Latitude and longitude; a coordinate that is not set reads as 0.0."""
        latitude = self.latitude if self.has_latitude else 0.0
        longitude = self.longitude if self.has_longitude else 0.0
        return latitude, longitude

    def marshalling(self, parcel):
        """Write this address to a parcel."""
        parcel.write_string(self.locale_language)
        parcel.write_string(self.locale_country)
        parcel.write_int32(len(self.descriptions))
        for index, line in sorted(self.descriptions.items()):
            parcel.write_int32(index)
            parcel.write_string(line)
        for name in _ADDRESS_FIELDS:
            parcel.write_string(getattr(self, name))
        parcel.write_int32(1 if self.has_latitude else 0)
        if self.has_latitude:
            parcel.write_double(self.latitude)
        parcel.write_int32(1 if self.has_longitude else 0)
        if self.has_longitude:
            parcel.write_double(self.longitude)
        parcel.write_string(self.phone_number)
        parcel.write_string(self.address_url)

    @classmethod
    def unmarshalling(cls, parcel):
        """Read an address written by marshalling."""
        address = cls()
        address.locale_language = parcel.read_string()
        address.locale_country = parcel.read_string()
        size = parcel.read_int32()
        if 0 < size < MAX_PARCEL_SIZE:
            for _ in range(size):
                if parcel.remaining() <= 0:
                    break
                index = parcel.read_int32()
                line = parcel.read_string()
                address.descriptions.setdefault(index, line)
                address.descriptions_size = max(address.descriptions_size, index + 1)
        else:
            address.descriptions_size = 0
        for name in _ADDRESS_FIELDS:
            setattr(address, name, parcel.read_string())
        address.has_latitude = parcel.read_int32() != 0
        if address.has_latitude:
            address.latitude = parcel.read_double()
        address.has_longitude = parcel.read_int32() != 0
        if address.has_longitude:
            address.longitude = parcel.read_double()
        address.phone_number = parcel.read_string()
        address.address_url = parcel.read_string()
        return address