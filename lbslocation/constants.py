"""Shared constants, enumerations and small request records for location services."""

from dataclasses import dataclass, field
from enum import IntEnum

ERROR_PERMISSION_NOT_GRANTED = 0x0100
ERROR_SWITCH_UNOPEN = 0x0101
SESSION_START = 0x0002
SESSION_STOP = 0x0003

DEFAULT_TIMEOUT_30S = 30000

STATE_OPEN = 1
STATE_CLOSE = 0
PER_USER_RANGE = 100000

UNKNOW_USER_ID = -1
SUBSCRIBE_TIME = 5
DEFAULT_TIME_INTERVAL = 30 * 60  # seconds between reports while an app is frozen
REQUESTS_NUM_MAX = 1
FEATURE_SWITCH_PROP = "ro.config.locator_background"
TIME_INTERVAL_PROP = "ro.config.locator_background.timeInterval"
PROC_NAME = "system"


class Scenario(IntEnum):
    """Usage scenario of a location request."""

    UNSET = 0x0300
    NAVIGATION = 0x0301
    TRAJECTORY_TRACKING = 0x0302
    CAR_HAILING = 0x0303
    DAILY_LIFE_SERVICE = 0x0304
    NO_POWER = 0x0305


class Priority(IntEnum):
    """Priority of a location request."""

    UNSET = 0x0200
    ACCURACY = 0x0201
    LOW_POWER = 0x0202
    FAST_FIRST_FIX = 0x0203


class PrivacyType(IntEnum):
    """Kinds of privacy statement a user can confirm."""

    OTHERS = 0
    STARTUP = 1
    CORE_LOCATION = 2


SCENE_UNSET = Scenario.UNSET
SCENE_NAVIGATION = Scenario.NAVIGATION
SCENE_TRAJECTORY_TRACKING = Scenario.TRAJECTORY_TRACKING
SCENE_CAR_HAILING = Scenario.CAR_HAILING
SCENE_DAILY_LIFE_SERVICE = Scenario.DAILY_LIFE_SERVICE
SCENE_NO_POWER = Scenario.NO_POWER

PRIORITY_UNSET = Priority.UNSET
PRIORITY_ACCURACY = Priority.ACCURACY
PRIORITY_LOW_POWER = Priority.LOW_POWER
PRIORITY_FAST_FIRST_FIX = Priority.FAST_FIRST_FIX

PRIVACY_TYPE_OTHERS = PrivacyType.OTHERS
PRIVACY_TYPE_STARTUP = PrivacyType.STARTUP
PRIVACY_TYPE_CORE_LOCATION = PrivacyType.CORE_LOCATION


@dataclass
class CachedGnssLocationsRequest:
    """Request to receive batched GNSS locations."""

    reporting_period_sec: int = 0
    wake_up_cache_queue_full: bool = False


@dataclass
class LocationCommand:
    """Extended command sent to the location service."""

    scenario: int = 0
    command: str = ""


@dataclass
class GeoFence:
    """Circular geographic fence."""

    latitude: float = 0.0
    longitude: float = 0.0
    radius: float = 0.0
    expiration: float = 0.0


@dataclass
class GeofenceRequest:
    """Request to watch a geofence."""

    priority: int = Priority.UNSET
    scenario: int = Scenario.UNSET
    geofence: GeoFence = field(default_factory=GeoFence)