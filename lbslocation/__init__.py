"""Location data types with parcel serialisation, per-user settings, dump helpers and a geocode service skeleton."""

__version__ = "0.1.0"