"""Network components: interface addresses, traffic rates and wireless state."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct

import psutil

from .util import fmt_human, read_int, read_text, warn, warn_os

NET_ROOT = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"
INTERVAL_MS = 1000

# Largest link quality reported by /proc/net/wireless.
_MAX_LINK_QUALITY = 70

_IFNAMSIZ = 16
_IW_ESSID_MAX_SIZE = 32
_SIOCGIWESSID = 0x8B1B
_IWREQ_SIZE = 32

_COUNTER_WRAP = 1 << 64

_LINK_FIELDS = re.compile(r"\s*[+-]?\d+\s*([+-]?\d+)")


def _ip(interface: str, family: socket.AddressFamily) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn_os("getifaddrs", exc)
        return None
    for address in addresses.get(interface, ()):
        if address.family == family and address.address:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """Return the first IPv4 address of an interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """Return the first IPv6 address of an interface."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Turns a byte counter under sysfs into a rate between samples."""

    def __init__(
        self, counter: str, interval: int = INTERVAL_MS, root: str = NET_ROOT
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be a positive number of milliseconds")
        self.counter = counter
        self.interval = interval
        self.root = root
        self._bytes = 0

    def sample(self, interface: str) -> str | None:
        """Read the counter and return the rate per second since the last sample."""
        path = os.path.join(self.root, interface, "statistics", self.counter)
        value = read_int(path)
        if value is None:
            return None
        previous, self._bytes = self._bytes, value
        if previous == 0:
            return None
        delta = (value - previous) % _COUNTER_WRAP
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx_bytes")
_tx = NetSpeed("tx_bytes")


def netspeed_rx(interface: str) -> str | None:
    """Return the receive rate of an interface."""
    return _rx.sample(interface)


def netspeed_tx(interface: str) -> str | None:
    """Return the transmit rate of an interface."""
    return _tx.sample(interface)


def parse_wireless_link(text: str, interface: str) -> int | None:
    """Return the link quality of ``interface`` from a /proc/net/wireless listing.

    Only the first data line, after the two header lines, is examined.
    """
    lines = text.splitlines()
    if len(lines) < 3:
        return None
    line = lines[2]
    start = line.find(interface)
    if start < 0:
        return None
    match = _LINK_FIELDS.match(line, start + len(interface) + 2)
    if match is None:
        return None
    return int(match.group(1))


def _operstate_up(path: str) -> bool | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as exc:
        warn_os(f"fopen '{path}'", exc)
        return None
    return status == "up\n"


def wifi_perc(
    interface: str, root: str = NET_ROOT, wireless_path: str = PROC_WIRELESS
) -> str | None:
    """Return the wireless link quality of an interface in percent."""
    if not _operstate_up(os.path.join(root, interface, "operstate")):
        return None
    text = read_text(wireless_path)
    if text is None:
        return None
    quality = parse_wireless_link(text, interface)
    if quality is None:
        return None
    return str(int(quality / _MAX_LINK_QUALITY * 100))


def wifi_essid(interface: str) -> str | None:
    """Return the ESSID the interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("snprintf: Output truncated")
        return None

    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(_IWREQ_SIZE)
    struct.pack_into(
        f"{_IFNAMSIZ}sPH", request, 0, name, address, _IW_ESSID_MAX_SIZE + 1
    )

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn_os("socket 'AF_INET'", exc)
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            warn_os("ioctl 'SIOCGIWESSID'", exc)
            return None

    raw = essid.tobytes().split(b"\0", 1)[0]
    if not raw:
        return None
    return raw.decode("utf-8", errors="replace")