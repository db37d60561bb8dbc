"""Parameters of a location request."""

from dataclasses import dataclass, fields

from lbslocation.constants import Priority, Scenario


@dataclass
class RequestConfig:
    """How and how often locations are to be reported; zero means no limit."""

    scenario: int = Scenario.UNSET
    priority: int = Priority.UNSET
    time_interval: int = 0
    distance_interval: int = 0
    max_accuracy: float = 0.0
    fix_number: int = 0

    def set(self, other):
        """Take every setting from another request."""
        for item in fields(self):
            setattr(self, item.name, getattr(other, item.name))

    def is_same(self, other):
        """Whether two requests ask for the same kind of service."""
        if self.scenario != other.scenario:
            return False
        if self.scenario != Scenario.UNSET:
            return True
        return self.priority == other.priority

    def marshalling(self, parcel):
        """Write this request to a parcel."""
        parcel.write_int32(self.scenario)
        parcel.write_int32(self.priority)
        parcel.write_int32(self.time_interval)
        parcel.write_int32(self.distance_interval)
        parcel.write_float(self.max_accuracy)
        parcel.write_int32(self.fix_number)

    @classmethod
    def unmarshalling(cls, parcel):
        """Read a request written by marshalling."""
        return cls(
            scenario=parcel.read_int32(),
            priority=parcel.read_int32(),
            time_interval=parcel.read_int32(),
            distance_interval=parcel.read_int32(),
            max_accuracy=parcel.read_float(),
            fix_number=parcel.read_int32(),
        )

    def __str__(self):
        return (
            f"scenario : {int(self.scenario)}"
            f", location priority : {int(self.priority)}"
            f", timeInterval : {self.time_interval}"
            f", distanceInterval : {self.distance_interval}"
            f", maxAccuracy : {self.max_accuracy:f}"
            f", fixNumber : {self.fix_number}"
        )