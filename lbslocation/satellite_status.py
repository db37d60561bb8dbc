"""Per-satellite signal information from the GNSS receiver."""

from dataclasses import dataclass, field

from lbslocation.parcel import ParcelError


@dataclass
class SatelliteStatus:
    """Satellites in view with their signal details, stored column-wise."""

    satellites_number: int = 0
    satellite_ids: list = field(default_factory=list)
    carrier_to_noise_densitys: list = field(default_factory=list)
    altitudes: list = field(default_factory=list)
    azimuths: list = field(default_factory=list)
    carrier_frequencies: list = field(default_factory=list)

    def _columns(self):
        return (
            self.satellite_ids,
            self.carrier_to_noise_densitys,
            self.altitudes,
            self.azimuths,
            self.carrier_frequencies,
        )

    def add_satellite(self, satellite_id, carrier_to_noise_density, altitude, azimuth,
                      carrier_frequency):
        """Append one satellite and count it."""
        values = (satellite_id, carrier_to_noise_density, altitude, azimuth, carrier_frequency)
        for column, value in zip(self._columns(), values):
            column.append(value)
        self.satellites_number += 1

    def marshalling(self, parcel):
        """Write the count and every satellite's details to a parcel."""
        count = self.satellites_number
        if any(len(column) < count for column in self._columns()):
            raise ParcelError(f"fewer entries than the {count} satellites announced")
        parcel.write_int64(count)
        for row in zip(*(column[:max(count, 0)] for column in self._columns())):
            satellite_id, *measurements = row
            parcel.write_int64(satellite_id)
            for value in measurements:
                parcel.write_double(value)

    @classmethod
    def unmarshalling(cls, parcel):
        """Read a status written by marshalling."""
        status = cls(satellites_number=parcel.read_int64())
        for _ in range(status.satellites_number):
            status.satellite_ids.append(parcel.read_int64())
            status.carrier_to_noise_densitys.append(parcel.read_double())
            status.altitudes.append(parcel.read_double())
            status.azimuths.append(parcel.read_double())
            status.carrier_frequencies.append(parcel.read_double())
        return status

    def copy(self):
        """Return an independent copy."""
        return SatelliteStatus(
            self.satellites_number,
            list(self.satellite_ids),
            list(self.carrier_to_noise_densitys),
            list(self.altitudes),
            list(self.azimuths),
            list(self.carrier_frequencies),
        )