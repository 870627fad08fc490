"""Network interface discovery and binding sockets to a single interface."""

from __future__ import annotations

import socket
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import IntFlag
from pathlib import Path

_SYSFS_NET = Path("/sys/class/net")

# Kernel IFF_* bits as exposed in /sys/class/net/<name>/flags on Linux.
_IFF_UP = 0x1
_IFF_BROADCAST = 0x2
_IFF_LOOPBACK = 0x8
_IFF_POINTOPOINT = 0x10
_IFF_RUNNING = 0x40
_IFF_MULTICAST = 0x1000

# Socket option numbers that the socket module does not always expose.
_SO_BINDTODEVICE = 25
_IP_BOUND_IF = 25
_IP_RECVIF = 20

_BSD_PLATFORMS = ("freebsd", "openbsd", "netbsd", "aix")


class InterfaceFlags(IntFlag):
    """State and capability flags of a network interface."""

    NONE = 0
    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16
    RUNNING = 32


@dataclass(frozen=True)
class Interface:
    """A network interface of the host."""

    index: int
    name: str
    mtu: int = 0
    hardware_addr: bytes = b""
    flags: InterfaceFlags = field(default=InterfaceFlags.NONE)

    @property
    def is_loopback(self) -> bool:
        return bool(self.flags & InterfaceFlags.LOOPBACK)


InterfaceMatcher = Callable[[Interface], bool]
InterfaceGetter = Callable[[], Iterable[Interface]]


def _flags_from_kernel(raw: int) -> InterfaceFlags:
    mapping = (
        (_IFF_UP, InterfaceFlags.UP),
        (_IFF_BROADCAST, InterfaceFlags.BROADCAST),
        (_IFF_LOOPBACK, InterfaceFlags.LOOPBACK),
        (_IFF_POINTOPOINT, InterfaceFlags.POINT_TO_POINT),
        (_IFF_MULTICAST, InterfaceFlags.MULTICAST),
        (_IFF_RUNNING, InterfaceFlags.RUNNING),
    )
    flags = InterfaceFlags.NONE
    for bit, flag in mapping:
        if raw & bit:
            flags |= flag
    return flags


def _read_sysfs(name: str, attribute: str) -> str | None:
    try:
        return (_SYSFS_NET / name / attribute).read_text().strip()
    except OSError:
        return None


def _parse_hardware_addr(text: str | None) -> bytes:
    if not text:
        return b""
    try:
        return bytes(int(part, 16) for part in text.split(":"))
    except ValueError:
        return b""


def _describe(index: int, name: str) -> Interface:
    raw_flags = _read_sysfs(name, "flags")
    if raw_flags is not None:
        try:
            flags = _flags_from_kernel(int(raw_flags, 16))
        except ValueError:
            flags = InterfaceFlags.NONE
    elif name.startswith("lo"):
        # Without sysfs the name is the only hint available from the stdlib.
        flags = InterfaceFlags.UP | InterfaceFlags.LOOPBACK
    else:
        flags = InterfaceFlags.NONE
    mtu_text = _read_sysfs(name, "mtu")
    mtu = int(mtu_text) if mtu_text and mtu_text.isdigit() else 0
    return Interface(
        index=index,
        name=name,
        mtu=mtu,
        hardware_addr=_parse_hardware_addr(_read_sysfs(name, "address")),
        flags=flags,
    )


def list_interfaces() -> list[Interface]:
    """Return the network interfaces of the host, ordered by index."""
    return [_describe(index, name) for index, name in sorted(socket.if_nameindex())]


def get_interfaces_func(
    matcher: InterfaceMatcher, getter: InterfaceGetter | None = None
) -> list[Interface]:
    """Return the interfaces for which ``matcher`` is true.

    ``getter`` supplies the interfaces and defaults to list_interfaces; its
    errors propagate.
    """
    source = getter if getter is not None else list_interfaces
    return [iface for iface in source() if matcher(iface)]


def get_loopback_interfaces(getter: InterfaceGetter | None = None) -> list[Interface]:
    """Return the loopback interfaces."""
    return get_interfaces_func(lambda iface: iface.is_loopback, getter)


def get_non_loopback_interfaces(
    getter: InterfaceGetter | None = None,
) -> list[Interface]:
    """Return the interfaces that are not loopback."""
    return get_interfaces_func(lambda iface: not iface.is_loopback, getter)


def _apply(sock, level: int, option: int, value) -> None:
    if isinstance(sock, int):
        wrapper = socket.socket(fileno=sock)
        try:
            wrapper.setsockopt(level, option, value)
        finally:
            wrapper.detach()
    else:
        sock.setsockopt(level, option, value)


def bind_to_interface(sock, ifname: str) -> None:
    """Restrict a socket (object or file descriptor) to one network interface.

    Linux uses SO_BINDTODEVICE, macOS IP_BOUND_IF and the BSDs IP_RECVIF.
    Raises OSError when the interface is unknown or the platform has no such
    option.
    """
    platform = sys.platform
    if platform.startswith("linux"):
        option = getattr(socket, "SO_BINDTODEVICE", _SO_BINDTODEVICE)
        _apply(sock, socket.SOL_SOCKET, option, ifname.encode())
    elif platform == "darwin":
        index = socket.if_nametoindex(ifname)
        option = getattr(socket, "IP_BOUND_IF", _IP_BOUND_IF)
        _apply(sock, socket.IPPROTO_IP, option, index)
    elif platform.startswith(_BSD_PLATFORMS):
        index = socket.if_nametoindex(ifname)
        option = getattr(socket, "IP_RECVIF", _IP_RECVIF)
        _apply(sock, socket.IPPROTO_IP, option, index)
    else:
        raise OSError(f"binding to an interface is not supported on {platform}")