"""Zero-touch provisioning helpers: circuit IDs and vendor data from DHCPv6 options."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Arista port and VLAN, e.g. "Ethernet13:2001".
_ARISTA_PV_PATTERN = re.compile(r"Ethernet(?P<port>[0-9]+):(?P<vlan>[0-9]+)")
# Arista slot, module and port, e.g. "Ethernet1/3/4".
_ARISTA_SMP_PATTERN = re.compile(
    r"Ethernet(?P<slot>[0-9]+)/(?P<module>[0-9]+)/(?P<port>[0-9]+)"
)
_CIRCUIT_PATTERNS = (_ARISTA_PV_PATTERN, _ARISTA_SMP_PATTERN)

_GROUP_TO_FIELD = {
    "slot": "slot",
    "module": "module",
    "port": "port",
    "subport": "sub_port",
    "vlan": "vlan",
}


class ZTPError(ValueError):
    """Raised when provisioning data cannot be extracted."""


class MalformedVendorOptionError(ZTPError):
    """Raised when a recognised vendor string lacks required fields."""

    def __init__(self, message: str = "malformed vendor option") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CircuitID:
    """The position of a network vendor interface."""

    slot: str = ""
    module: str = ""
    port: str = ""
    sub_port: str = ""
    vlan: str = ""

    def format_circuit_id(self) -> str:
        """Return the comma-separated form used in ZTP bootfile URLs."""
        return ",".join((self.slot, self.module, self.port, self.sub_port, self.vlan))


def _as_text(data: bytes | str) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", "surrogateescape")


def match_circuit_id(circuit_info: str) -> CircuitID:
    """Parse an interface description such as "Ethernet13:2001" into a CircuitID."""
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_info)
        if match:
            fields = {
                _GROUP_TO_FIELD[name]: value
                for name, value in match.groupdict().items()
                if value is not None
            }
            return CircuitID(**fields)
    raise ZTPError(f"no circuitId regex matches for {circuit_info}")


def parse_remote_id(
    remote_id: bytes | str | None, interface_id: bytes | str | None = None
) -> CircuitID:
    """Find a circuit ID in the Remote ID data, falling back to the Interface ID.

    Both arguments are the raw option payloads of the innermost relay message,
    or None when the option is absent.
    """
    for data in (remote_id, interface_id):
        if data is None:
            continue
        try:
            return match_circuit_id(_as_text(data))
        except ZTPError:
            continue
    raise ZTPError("failed to parse RemoteID and InterfaceID option data")


@dataclass(frozen=True)
class VendorData:
    """Vendor, model and serial number announced by a device."""

    vendor_name: str = ""
    model: str = ""
    serial: str = ""


def parse_vendor_data(values: Iterable[bytes | str] | None) -> VendorData:
    """Extract vendor data from Vendor Options (17) or Vendor Class (16) payloads.

    ``values`` holds the data strings of the option in use, or None when
    neither option is present. The first recognised vendor string wins.
    """
    if values is None:
        raise ZTPError("no vendor options or vendor class found")
    for value in values:
        text = _as_text(value)
        # Arista;DCS-0000;00.00;ZZZ00000000
        if text.startswith("Arista;"):
            parts = text.split(";")
            if len(parts) < 4:
                raise MalformedVendorOptionError()
            return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[3])
        # ZPESystems:NSC:000000000
        if text.startswith("ZPESystems:"):
            parts = text.split(":")
            if len(parts) < 3:
                raise MalformedVendorOptionError()
            return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[2])
    raise ZTPError("failed to parse vendor option data")