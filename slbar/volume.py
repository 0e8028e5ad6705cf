"""Mixer volume component using the OSS mixer interface."""

from __future__ import annotations

import fcntl
import os
import struct

from .util import warn_os

MIXER = "/dev/mixer"

_IOC_READ = 2
_INT = struct.Struct("i")

# Index of the master volume channel among the OSS device names.
_VOLUME_CHANNEL = 0


def _ior(kind: str, number: int, size: int) -> int:
    return (_IOC_READ << 30) | (size << 16) | (ord(kind) << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE, _INT.size)


def _mixer_read(channel: int) -> int:
    return _ior("M", channel, _INT.size)


def _read_int(fd: int, request: int) -> int:
    return _INT.unpack(fcntl.ioctl(fd, request, _INT.pack(0)))[0]


def vol_perc(card: str = MIXER) -> str | None:
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as exc:
        warn_os(f"open '{card}'", exc)
        return None

    try:
        try:
            devmask = _read_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as exc:
            warn_os("ioctl 'SOUND_MIXER_READ_DEVMASK'", exc)
            return None
        if not devmask & (1 << _VOLUME_CHANNEL):
            return None
        try:
            level = _read_int(fd, _mixer_read(_VOLUME_CHANNEL))
        except OSError as exc:
            warn_os(f"ioctl 'MIXER_READ({_VOLUME_CHANNEL})'", exc)
            return None
    finally:
        os.close(fd)

    return str(level & 0xFF)