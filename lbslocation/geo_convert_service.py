"""The geocoding conversion service."""

import logging
from enum import Enum

from lbslocation.dumper import geocode_dump
from lbslocation.geo_convert_skeleton import REPLY_NO_EXCEPTION, GeoConvertServiceStub

logger = logging.getLogger(__name__)


class ServiceRunningState(Enum):
    """Lifecycle state of a service."""

    STATE_NOT_START = 0
    STATE_RUNNING = 1


def _accept(service):
    return True


class GeoConvertService(GeoConvertServiceStub):
    """Service that answers geocoding requests; it has no backend and returns no addresses."""

    def __init__(self, publish=_accept):
        self._publish = publish
        self.registered = False
        self.state = ServiceRunningState.STATE_NOT_START

    def _init(self):
        if not self.registered:
            if not self._publish(self):
                logger.error("GeoConvertService init: publish failed")
                return False
            self.registered = True
        return True

    def on_start(self):
        """Publish the service and mark it running."""
        if self.state is ServiceRunningState.STATE_RUNNING:
            logger.info("GeoConvertService has already started.")
            return
        if not self._init():
            logger.error("failed to init GeoConvertService")
            self.on_stop()
            return
        self.state = ServiceRunningState.STATE_RUNNING
        logger.info("GeoConvertService started.")

    def on_stop(self):
        """Mark the service stopped and unpublished."""
        self.state = ServiceRunningState.STATE_NOT_START
        self.registered = False
        logger.info("GeoConvertService stopped.")

    @staticmethod
    def _write_default_reply(reply):
        reply.write_int32(REPLY_NO_EXCEPTION)
        reply.write_int32(1)

    def is_geo_convert_available(self, data, reply):
        """Reply with no exception and an available flag."""
        self._write_default_reply(reply)

    def get_address_by_coordinate(self, data, reply):
        """Reply with no exception header and no addresses."""
        self._write_default_reply(reply)

    def get_address_by_location_name(self, data, reply):
        """Reply with no exception header and no addresses."""
        logger.debug("get_address_by_location_name")
        self._write_default_reply(reply)

    @staticmethod
    def _basic_dump():
        return "GeoConvert enable status: true\n"

    def dump(self, args):
        """Diagnostic text for the given dump arguments."""
        return geocode_dump(self._basic_dump, args)