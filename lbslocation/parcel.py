"""A flat binary container with 4-byte aligned, little-endian fields."""

import struct

_ALIGNMENT = 4


class ParcelError(ValueError):
    """Raised when a parcel cannot be written or read."""


def _padding(size):
    return -size % _ALIGNMENT


class Parcel:
    """Sequential writer and reader of typed values."""

    def __init__(self, data=b""):
        self._buffer = bytearray(data)
        self._position = 0

    @property
    def data(self):
        """All bytes written so far."""
        return bytes(self._buffer)

    def __len__(self):
        return len(self._buffer)

    def remaining(self):
        """Number of bytes not yet read."""
        return len(self._buffer) - self._position

    def _append(self, raw):
        self._buffer.extend(raw)
        self._buffer.extend(b"\x00" * _padding(len(raw)))

    def _pack(self, fmt, value):
        try:
            self._append(struct.pack("<" + fmt, value))
        except struct.error as exc:
            raise ParcelError(f"cannot write {value!r}: {exc}") from exc

    def _take(self, size):
        if size > self.remaining():
            raise ParcelError(f"need {size} bytes, only {self.remaining()} left")
        start = self._position
        self._position = min(start + size + _padding(size), len(self._buffer))
        return bytes(self._buffer[start:start + size])

    def _unpack(self, fmt, size):
        return struct.unpack("<" + fmt, self._take(size))[0]

    def write_int32(self, value):
        self._pack("i", value)

    def write_int64(self, value):
        self._pack("q", value)

    def write_float(self, value):
        self._pack("f", value)

    def write_double(self, value):
        self._pack("d", value)

    def write_string(self, value):
        raw = value.encode("utf-8")
        self.write_int32(len(raw))
        self._append(raw + b"\x00")

    def write_string16(self, value):
        raw = value.encode("utf-16-le")
        self.write_int32(len(raw) // 2)
        self._append(raw + b"\x00\x00")

    def write_interface_token(self, descriptor):
        self.write_string16(descriptor)

    def read_int32(self):
        return self._unpack("i", 4)

    def read_int64(self):
        return self._unpack("q", 8)

    def read_float(self):
        return self._unpack("f", 4)

    def read_double(self):
        return self._unpack("d", 8)

    def read_string(self):
        length = self.read_int32()
        if length < 0:
            return ""
        raw = self._take(length + 1)
        if raw[-1] != 0:
            raise ParcelError("string is not terminated")
        try:
            return raw[:-1].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParcelError(f"invalid string data: {exc}") from exc

    def read_string16(self):
        length = self.read_int32()
        if length < 0:
            return ""
        raw = self._take((length + 1) * 2)
        if raw[-2:] != b"\x00\x00":
            raise ParcelError("string16 is not terminated")
        try:
            return raw[:-2].decode("utf-16-le")
        except UnicodeDecodeError as exc:
            raise ParcelError(f"invalid string16 data: {exc}") from exc

    def read_interface_token(self):
        return self.read_string16()