import pytest

from lbslocation.constants import (
    PRIORITY_FAST_FIRST_FIX,
    SCENE_UNSET,
    CachedGnssLocationsRequest,
    GeoFence,
    GeofenceRequest,
    LocationCommand,
    Priority,
    PrivacyType,
    Scenario,
)


def test_scenario_lookup_by_value():
    assert Scenario(0x0301) is Scenario.NAVIGATION
    assert Scenario(0x0305) is Scenario.NO_POWER


def test_priority_lookup_by_value():
    assert Priority(0x0203) is Priority.FAST_FIRST_FIX
    assert PRIORITY_FAST_FIRST_FIX is Priority.FAST_FIRST_FIX


def test_unknown_scenario_raises():
    with pytest.raises(ValueError):
        Scenario(0x0399)


def test_privacy_types_are_ordered_and_contiguous():
    looked_up = [PrivacyType(value) for value in range(3)]
    assert looked_up == list(PrivacyType)


def test_aliases_match_enum_members():
    assert Scenario(0x0300) is SCENE_UNSET
    assert GeofenceRequest().scenario == SCENE_UNSET


def test_geofence_request_defaults_are_independent():
    first = GeofenceRequest()
    second = GeofenceRequest()
    first.geofence.radius = 10.0
    assert second.geofence.radius == 0.0
    assert first.priority == Priority.UNSET
    assert first.scenario == Scenario.UNSET


def test_records_compare_by_value():
    assert GeoFence(1.0, 2.0, 3.0, 4.0) == GeoFence(1.0, 2.0, 3.0, 4.0)
    assert LocationCommand(1, "cmd") == LocationCommand(scenario=1, command="cmd")
    assert CachedGnssLocationsRequest().wake_up_cache_queue_full is False