"""Request dispatch for the geocoding conversion service."""

import logging
from abc import ABC, abstractmethod
from enum import IntEnum

from lbslocation.parcel import ParcelError

logger = logging.getLogger(__name__)

DESCRIPTOR = "location.IGeoConvert"
SYSTEM_UID = 1000
REPLY_NO_EXCEPTION = 0


class GeoConvertCode(IntEnum):
    """Request codes understood by the geocoding service."""

    IS_AVAILABLE = 11
    GET_FROM_COORDINATE = 12
    GET_FROM_LOCATION_NAME_BY_BOUNDARY = 13


class RemoteRequestDenied(PermissionError):
    """Raised when the caller is not allowed to use the service."""


class InvalidInterfaceToken(ValueError):
    """Raised when a request does not carry this service's interface token."""


class UnknownRequestCode(LookupError):
    """Raised for a request code the service does not handle."""


class GeoConvertServiceStub(ABC):
    """Checks incoming requests and routes them to the matching handler."""

    descriptor = DESCRIPTOR

    def on_remote_request(self, code, data, reply, calling_uid):
        """Validate a request from calling_uid and run its handler."""
        logger.info("on_remote_request cmd = %s, uid = %s", code, calling_uid)
        if calling_uid > SYSTEM_UID:
            logger.error("this remote request is not allowed")
            raise RemoteRequestDenied(f"uid {calling_uid} may not call {self.descriptor}")
        try:
            token = data.read_interface_token()
        except ParcelError as exc:
            raise InvalidInterfaceToken("request carries no interface token") from exc
        if token != self.descriptor:
            logger.error("invalid token.")
            raise InvalidInterfaceToken(f"unexpected interface token {token!r}")

        handlers = {
            GeoConvertCode.IS_AVAILABLE: self.is_geo_convert_available,
            GeoConvertCode.GET_FROM_COORDINATE: self.get_address_by_coordinate,
            GeoConvertCode.GET_FROM_LOCATION_NAME_BY_BOUNDARY: self.get_address_by_location_name,
        }
        try:
            handler = handlers[GeoConvertCode(code)]
        except ValueError as exc:
            raise UnknownRequestCode(f"unknown request code {code}") from exc
        return handler(data, reply)

    @abstractmethod
    def is_geo_convert_available(self, data, reply):
        """Write whether geocoding is available to the reply."""

    @abstractmethod
    def get_address_by_coordinate(self, data, reply):
        """Write the addresses found for a coordinate to the reply."""

    @abstractmethod
    def get_address_by_location_name(self, data, reply):
        """Write the addresses found for a place name to the reply."""