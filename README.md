# lbslocation

Building blocks for a location service, in pure Python with no dependencies.

## What is in it

- **`lbslocation.parcel`**: `Parcel` is a sequential typed byte buffer.
  - Fields are little-endian and padded to 4 bytes.
  - It writes and reads int32, int64, float, double, UTF-8 strings (`write_string`), UTF-16 strings (`write_string16`) and interface tokens.
  - `remaining()` gives the number of unread bytes.
  - A short or malformed read raises `ParcelError`, which is a `ValueError`.
- **Data types.** Each one writes itself with `marshalling(parcel)` and reads itself back with the class method `unmarshalling(parcel)`.
  - `lbslocation.location.Location` is a single fix.
    - `unmarshalling_location` reads the extended provider layout. In that layout a leading zero tag means there is no fix.
    - `copy()` returns an independent copy.
  - `lbslocation.request_config.RequestConfig` holds a request's settings: scenario, priority, intervals, accuracy and fix count.
    - `set(other)` copies every setting from another request.
    - `is_same(other)` compares two requests by scenario. When both scenarios are unset, it compares them by priority instead.
  - `lbslocation.satellite_status.SatelliteStatus` holds per-satellite signal data.
    - `add_satellite(...)` appends one satellite.
    - `marshalling` raises `ParcelError` if the columns hold fewer entries than `satellites_number`.
  - `lbslocation.geo_address.GeoAddress` is a postal address with optional coordinates.
    - `get_description(index)` returns a description line, or `""` when there is none.
    - `coordinates()` returns `(latitude, longitude)`. A coordinate that is not set reads as `0.0`.
- **`lbslocation.constants`** holds the shared constants and records.
  - Enums: `Scenario`, `Priority` and `PrivacyType`.
  - Switch states: `STATE_OPEN` and `STATE_CLOSE`.
  - Dataclasses: `CachedGnssLocationsRequest`, `LocationCommand`, `GeoFence` and `GeofenceRequest`.
- **`lbslocation.geofence_state.GeoFenceState`** pairs a `GeoFence` with the agent to notify, and holds a state field.
- **`lbslocation.config_manager.LocationConfigManager`** keeps the location switch state and the privacy confirmation states in one-line files.
  - Each file holds `0` or `1`, and there is one file per user.
  - The user is `calling_uid // 100000`.
  - Files live under `config_dir`, which defaults to `/data/vendor/gnss`.
  - A missing file is created holding `0`.
  - `set_location_switch_state` raises `ValueError` for any state other than `STATE_OPEN` or `STATE_CLOSE`.
  - Privacy calls with an unknown type return `False` or do nothing.
- **`lbslocation.dumper`** has five functions: `geocode_dump`, `gnss_dump`, `locator_dump`, `network_dump` and `passive_dump`.
  - Each takes `(basic_dump, args)`.
  - If the first argument is `-h`, it returns help text.
  - Otherwise it returns whatever the zero-argument `basic_dump()` returns.
- **`lbslocation.geo_convert_skeleton`** holds the request dispatch.
  - `GeoConvertServiceStub.on_remote_request(code, data, reply, calling_uid)` first checks that `calling_uid` is at most 1000. If not, it raises `RemoteRequestDenied`.
  - It then checks that `data` starts with the interface token `location.IGeoConvert`. If not, it raises `InvalidInterfaceToken`.
  - It then calls the handler for the `GeoConvertCode`. An unknown code raises `UnknownRequestCode`.
- **`lbslocation.geo_convert_service`** holds the concrete service.
  - `GeoConvertService` has `on_start()` and `on_stop()`.
  - Its state is a `ServiceRunningState`.
  - It accepts an optional `publish` callable, which is called on first start. If the callable returns false, starting fails.
  - `dump(args)` returns the geocode dump text.

## Example

```python
from lbslocation.location import Location
from lbslocation.parcel import Parcel

loc = Location(latitude=39.92879, longitude=116.3709)
parcel = Parcel()
loc.marshalling(parcel)

restored = Location.unmarshalling(Parcel(parcel.data))
assert restored.latitude == loc.latitude
```

Dispatching a request to the geocode service:

```python
from lbslocation.geo_convert_service import GeoConvertService
from lbslocation.geo_convert_skeleton import GeoConvertCode
from lbslocation.parcel import Parcel

service = GeoConvertService()
service.on_start()

request = Parcel()
request.write_interface_token("location.IGeoConvert")
reply = Parcel()
service.on_remote_request(GeoConvertCode.IS_AVAILABLE, request, reply, calling_uid=0)
assert (reply.read_int32(), reply.read_int32()) == (0, 1)
```

## What it does not do

- There is no geocoding backend. The geocode service answers every request with a reply header of `0`, followed by `1`, and it never returns addresses.
- There is no transport between processes. Requests are passed in as `Parcel` objects by the caller.
- There is no location provider, subscription handling or geofence monitoring. Those parts keep only the data records described above.
- The package has no command-line program.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```