import socket
import sys
from unittest import mock

import pytest

from netdhcp.interfaces import (
    Interface,
    InterfaceFlags,
    bind_to_interface,
    get_interfaces_func,
    get_loopback_interfaces,
    get_non_loopback_interfaces,
)


def fake_iface(idx, name, loopback):
    flags = InterfaceFlags.LOOPBACK if loopback else InterfaceFlags.NONE
    return Interface(
        index=idx,
        name=name,
        mtu=1500,
        hardware_addr=bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01]),
        flags=flags,
    )


def fake_getter():
    return [
        fake_iface(0, "lo", True),
        fake_iface(1, "eth0", False),
        fake_iface(2, "eth1", False),
    ]


def failing_getter():
    raise OSError("expected error")


def test_get_loopback_interfaces():
    ifaces = get_loopback_interfaces(fake_getter)
    assert len(ifaces) == 1
    assert ifaces[0].name == "lo"


def test_get_loopback_interfaces_error():
    with pytest.raises(OSError, match="expected error"):
        get_loopback_interfaces(failing_getter)


def test_get_non_loopback_interfaces():
    ifaces = get_non_loopback_interfaces(fake_getter)
    assert len(ifaces) == 2
    assert [i.name for i in ifaces] == ["eth0", "eth1"]


def test_get_non_loopback_interfaces_error():
    with pytest.raises(OSError, match="expected error"):
        get_non_loopback_interfaces(failing_getter)


def test_get_interfaces_func_custom_matcher():
    ifaces = get_interfaces_func(lambda i: i.index >= 1, fake_getter)
    assert [i.index for i in ifaces] == [1, 2]


def test_partition_is_complete():
    loop = get_loopback_interfaces(fake_getter)
    other = get_non_loopback_interfaces(fake_getter)
    assert sorted(i.index for i in loop + other) == [0, 1, 2]


class RecordingSocket:
    def __init__(self):
        self.calls = []

    def setsockopt(self, level, option, value):
        self.calls.append((level, option, value))


def test_bind_linux():
    sock = RecordingSocket()
    with mock.patch.object(sys, "platform", "linux"):
        bind_to_interface(sock, "eth0")
    assert len(sock.calls) == 1
    level, _option, value = sock.calls[0]
    assert level == socket.SOL_SOCKET
    assert value == b"eth0"


def test_bind_darwin_uses_index():
    sock = RecordingSocket()
    with mock.patch.object(sys, "platform", "darwin"), mock.patch.object(
        socket, "if_nametoindex", return_value=7
    ):
        bind_to_interface(sock, "en0")
    assert sock.calls == [(socket.IPPROTO_IP, 25, 7)]


def test_bind_freebsd_uses_index():
    sock = RecordingSocket()
    with mock.patch.object(sys, "platform", "freebsd13"), mock.patch.object(
        socket, "if_nametoindex", return_value=3
    ):
        bind_to_interface(sock, "em0")
    assert sock.calls[0][2] == 3
    assert sock.calls[0][0] == socket.IPPROTO_IP


def test_bind_unknown_interface_on_darwin():
    sock = RecordingSocket()
    with mock.patch.object(sys, "platform", "darwin"), mock.patch.object(
        socket, "if_nametoindex", side_effect=OSError("no such interface")
    ):
        with pytest.raises(OSError, match="no such interface"):
            bind_to_interface(sock, "nope0")
    assert sock.calls == []


def test_bind_windows_fails():
    sock = RecordingSocket()
    with mock.patch.object(sys, "platform", "win32"):
        with pytest.raises(OSError, match="not supported"):
            bind_to_interface(sock, "eth0")
    assert sock.calls == []