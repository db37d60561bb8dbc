"""A single position fix."""

from dataclasses import dataclass, replace


@dataclass
class Location:
    """Position, motion and timing of one fix."""

    latitude: float = 0.0
    longitude: float = 0.0
    altitude: float = 0.0
    accuracy: float = 0.0
    speed: float = 0.0
    direction: float = 0.0
    time_stamp: int = 0
    time_since_boot: int = 0

    def marshalling(self, parcel):
        """Write this fix to a parcel."""
        parcel.write_double(self.latitude)
        parcel.write_double(self.longitude)
        parcel.write_double(self.altitude)
        parcel.write_float(self.accuracy)
        parcel.write_float(self.speed)
        parcel.write_double(self.direction)
        parcel.write_int64(self.time_stamp)
        parcel.write_int64(self.time_since_boot)

    @classmethod
    def unmarshalling(cls, parcel):
        """Read a fix written by marshalling."""
        return cls(
            latitude=parcel.read_double(),
            longitude=parcel.read_double(),
            altitude=parcel.read_double(),
            accuracy=parcel.read_float(),
            speed=parcel.read_float(),
            direction=parcel.read_double(),
            time_stamp=parcel.read_int64(),
            time_since_boot=parcel.read_int64(),
        )

    @classmethod
    def unmarshalling_location(cls, parcel):
        """Read a fix in the provider's extended layout; a zero tag means no fix."""
        location = cls()
        if parcel.read_int32() == 0:
            return location
        parcel.read_string16()  # provider name
        location.time_stamp = parcel.read_int64()
        location.time_since_boot = parcel.read_int64()
        parcel.read_double()  # elapsed realtime uncertainty
        parcel.read_int32()  # fields mask
        location.latitude = parcel.read_double()
        location.longitude = parcel.read_double()
        location.altitude = parcel.read_double()
        location.speed = parcel.read_float()
        location.direction = parcel.read_float()
        location.accuracy = parcel.read_float()
        parcel.read_float()  # vertical accuracy
        parcel.read_float()  # speed accuracy
        parcel.read_float()  # bearing accuracy
        return location

    def copy(self):
        """Return an independent copy."""
        return replace(self)

    def __str__(self):
        return (
            f"latitude : {self.latitude:f}"
            f", longitude : {self.longitude:f}"
            f", altitude : {self.altitude:f}"
            f", accuracy : {self.accuracy:f}"
            f", speed : {self.speed:f}"
            f", direction : {self.direction:f}"
            f", timeStamp : {self.time_stamp}"
            f", timeSinceBoot : {self.time_since_boot}"
        )