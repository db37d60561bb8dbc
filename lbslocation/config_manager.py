"""Persistent location switch and privacy confirmation settings."""

import logging
import os
import threading
from pathlib import Path

from lbslocation.constants import PER_USER_RANGE, STATE_CLOSE, STATE_OPEN, PrivacyType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = "/data/vendor/gnss"

_PRIVACY_PREFIXES = {
    PrivacyType.OTHERS: "others_",
    PrivacyType.STARTUP: "startup_",
    PrivacyType.CORE_LOCATION: "core_location_",
}


def _default_uid():
    return os.getuid() if hasattr(os, "getuid") else 0


class LocationConfigManager:
    """Reads and writes per-user setting files, one flag per file."""

    def __init__(self, config_dir=DEFAULT_CONFIG_DIR, calling_uid=None):
        self.config_dir = Path(config_dir)
        self.calling_uid = _default_uid() if calling_uid is None else calling_uid
        self._lock = threading.Lock()
        self._location_switch_state = STATE_CLOSE
        self._privacy_type_state = {kind: STATE_CLOSE for kind in PrivacyType}

    @property
    def _user_id(self):
        return int(self.calling_uid / PER_USER_RANGE)

    def init(self):
        """Create the location switch file, closed, if it does not exist."""
        logger.info("LocationConfigManager init")
        self._ensure_file(self.location_switch_config_path())

    def is_exist_file(self, filename):
        """Whether a file exists and can be opened for reading."""
        try:
            with open(filename, encoding="utf-8"):
                pass
        except OSError:
            return False
        return os.path.isfile(filename)

    def create_file(self, filename, filedata):
        """Write a file holding one line of data; False if it cannot be written."""
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                handle.write(f"{filedata}\n")
        except OSError as exc:
            logger.error("file open failed: %s", exc)
            return False
        return True

    def location_switch_config_path(self):
        """Path of the location switch file of the calling user."""
        return str(self.config_dir / f"location_switch_{self._user_id}.conf")

    def get_privacy_type_config_path(self, privacy_type):
        """Path of the file holding one kind of privacy confirmation."""
        try:
            prefix = _PRIVACY_PREFIXES.get(PrivacyType(privacy_type), "")
        except ValueError:
            prefix = ""
        return str(self.config_dir / f"location_pricacy_{prefix}{self._user_id}.conf")

    def _ensure_file(self, path):
        if not self.is_exist_file(path):
            self.create_file(path, "0")

    @staticmethod
    def _read_flag(path):
        with open(path, encoding="utf-8") as handle:
            line = handle.readline().rstrip("\n")
        if not line:
            return None
        if line[0] == "0":
            return STATE_CLOSE
        if line[0] == "1":
            return STATE_OPEN
        return None

    @staticmethod
    def _write_flag(path, enabled):
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("1\n" if enabled else "0\n")

    def get_location_switch_state(self):
        """Current location switch state, STATE_OPEN or STATE_CLOSE."""
        with self._lock:
            path = self.location_switch_config_path()
            self._ensure_file(path)
            flag = self._read_flag(path)
            if flag is not None:
                self._location_switch_state = flag
            return self._location_switch_state

    def set_location_switch_state(self, state):
        """Store the location switch state; only STATE_OPEN and STATE_CLOSE are valid."""
        with self._lock:
            path = self.location_switch_config_path()
            self._ensure_file(path)
            if state not in (STATE_CLOSE, STATE_OPEN):
                raise ValueError(f"invalid location switch state: {state}")
            self._write_flag(path, state == STATE_OPEN)
            self._location_switch_state = state

    def get_privacy_type_state(self, privacy_type):
        """Whether a kind of privacy statement is confirmed; False for unknown kinds."""
        if privacy_type not in set(PrivacyType):
            logger.info("get_privacy_type_state: invalid type %s", privacy_type)
            return False
        kind = PrivacyType(privacy_type)
        with self._lock:
            path = self.get_privacy_type_config_path(kind)
            self._ensure_file(path)
            flag = self._read_flag(path)
            if flag is not None:
                self._privacy_type_state[kind] = flag
            return self._privacy_type_state[kind] == STATE_OPEN

    def set_privacy_type_state(self, privacy_type, is_confirmed):
        """Store whether a kind of privacy statement is confirmed; unknown kinds are ignored."""
        if privacy_type not in set(PrivacyType):
            logger.info("set_privacy_type_state: invalid type %s", privacy_type)
            return
        kind = PrivacyType(privacy_type)
        with self._lock:
            path = self.get_privacy_type_config_path(kind)
            self._ensure_file(path)
            self._write_flag(path, is_confirmed)
            self._privacy_type_state[kind] = STATE_OPEN if is_confirmed else STATE_CLOSE