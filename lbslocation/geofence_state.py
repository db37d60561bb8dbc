"""State kept for one registered geofence."""

from dataclasses import dataclass, field

from lbslocation.constants import GeoFence


@dataclass
class GeoFenceState:
    """A fence, the agent to notify when it is crossed, and its current state."""

    fence: GeoFence = field(default_factory=GeoFence)
    want_agent: object = None
    state: int = 0