# netdhcp

Building blocks for working with DHCP, mostly DHCPv6, in pure Python with
no third-party dependencies.

## What is inside

- `netdhcp.dhcpv6_types`: the DHCPv6 `TransactionID` (three bytes, printed
  as `0x…` hex), and the `MessageType` and `OptionCode` enums, each of which
  prints its registered name. `message_type_name()` and `option_code_name()`
  name raw values and return `"unknown (N)"` for unassigned ones.
- `netdhcp.iana`: IANA registries for processor architectures (`Arch`, and
  `Archs`, a list that converts to and from the big-endian wire form),
  enterprise IDs (`EntID`), hardware types (`HWType`) and DHCPv6 status codes
  (`StatusCode`), with `arch_name()`, `ent_id_name()`, `hw_type_name()` and
  `status_code_name()` for raw values.
- `netdhcp.rfc1035label`: encoding and decoding of RFC 1035 domain-name label
  lists, following compression pointers when decoding (`Labels`,
  `labels_from_bytes`, `labels_to_bytes`). A `Labels` object parsed from bytes
  gives back its original encoding from `to_bytes()` until its names change.
- `netdhcp.interfaces`: `list_interfaces()` returns the host's interfaces as
  `Interface` records with `InterfaceFlags` (read from `/sys/class/net` where
  available); `get_interfaces_func()`, `get_loopback_interfaces()` and
  `get_non_loopback_interfaces()` filter them, and take an optional getter
  that supplies the interfaces. `bind_to_interface()` restricts a socket or
  file descriptor to one interface on Linux, macOS and the BSDs, and raises
  `OSError` elsewhere.
- `netdhcp.ztpv6`: zero-touch provisioning helpers. `match_circuit_id()` and
  `parse_remote_id()` read a `CircuitID` from Remote-ID or Interface-ID
  option payloads; `parse_vendor_data()` reads vendor, model and serial into
  a `VendorData` from vendor option or vendor class payloads.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Decode labels, including compressed ones:

```python
from netdhcp.rfc1035label import Labels

data = bytes([9]) + b"slackware" + bytes([2]) + b"it" + bytes([0])
labels = Labels.from_bytes(data)
print(labels.labels)          # ['slackware.it']
print(labels.to_bytes() == data)  # True
```

Architecture lists as used by the Client System Architecture option:

```python
from netdhcp.iana import Arch, Archs

archs = Archs.from_bytes(b"\x00\x07\x00\x0b")
print(archs)                  # EFI x86-64, EFI ARM64
print(Arch.EFI_X86_64 in archs)  # True
print(archs.to_bytes())       # b'\x00\x07\x00\x0b'
```

Circuit IDs and vendor data for zero-touch provisioning:

```python
from netdhcp.ztpv6 import match_circuit_id, parse_remote_id, parse_vendor_data

circuit = match_circuit_id("Ethernet1/3/4")
print(circuit.format_circuit_id())   # 1,3,4,,

circuit = parse_remote_id(None, b"Ethernet13:2001")
print(circuit.port, circuit.vlan)    # 13 2001

vendor = parse_vendor_data([b"ZPESystems:NSC:EXAMPLE0001"])
print(vendor.vendor_name, vendor.model, vendor.serial)
```

DHCPv6 names:

```python
from netdhcp.dhcpv6_types import MessageType, option_code_name

print(MessageType.SOLICIT)    # SOLICIT
print(option_code_name(59))   # Boot File URL
```

Interfaces:

```python
from netdhcp.interfaces import get_non_loopback_interfaces

for iface in get_non_loopback_interfaces():
    print(iface.index, iface.name, iface.hardware_addr.hex(":"))
```

## Errors

Problems are reported as exceptions: `LabelError` (a `ValueError`) for
malformed labels, `ZTPError` and `MalformedVendorOptionError` for
provisioning data that cannot be parsed, `ValueError` for bad architecture
lists and transaction IDs of the wrong length, and `OSError` from
`bind_to_interface()`.

## What it does not do

This package holds building blocks only. It does not build, encode or decode
whole DHCPv4 or DHCPv6 messages, has no DHCP client or server, sends and
receives no packets, and does not configure interfaces, addresses, routes or
resolvers. The ZTP helpers take option payloads that the caller has already
extracted from a message.