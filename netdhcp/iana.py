"""Numbers assigned by IANA that DHCP uses: architectures, enterprises,
hardware types and DHCPv6 status codes."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from enum import IntEnum

_UINT16_MAX = 0xFFFF


class _NamedCode(IntEnum):
    """An integer enum whose members carry a label and that accepts unassigned values."""

    def __new__(cls, value: int, label: str | None = None):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def _limit(cls) -> int | None:
        """Largest value the code may take, or None when it is unbounded."""
        return _UINT16_MAX

    @classmethod
    def _unknown_text(cls) -> str:
        return "unknown"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        limit = cls._limit()
        if limit is not None and not 0 <= value <= limit:
            return None
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj._name_ = f"UNASSIGNED_{value}"
        obj.label = None
        return obj

    def _describe(self) -> str:
        if self.label is None:
            return self._unknown_text()
        return self.label

    __format__ = object.__format__


class Arch(_NamedCode):
    """A client system architecture type (RFC 4578 and RFC 5970)."""

    INTEL_X86PC = 0, "Intel x86PC"
    NEC_PC98 = 1, "NEC/PC98"
    EFI_ITANIUM = 2, "EFI Itanium"
    DEC_ALPHA = 3, "DEC Alpha"
    ARC_X86 = 4, "Arc x86"
    INTEL_LEAN_CLIENT = 5, "Intel Lean Client"
    EFI_IA32 = 6, "EFI IA32"
    EFI_X86_64 = 7, "EFI x86-64"
    EFI_XSCALE = 8, "EFI Xscale"
    EFI_BC = 9, "EFI BC"
    EFI_ARM32 = 10, "EFI ARM32"
    EFI_ARM64 = 11, "EFI ARM64"
    PPC_OPEN_FIRMWARE = 12, "PowerPC Open Firmware"
    PPC_EPAPR = 13, "PowerPC ePAPR"
    PPC_OPAL = 14, "POWER OPAL v3"
    EFI_X86_HTTP = 15, "EFI x86 boot from HTTP"
    EFI_X86_64_HTTP = 16, "EFI x86-64 boot from HTTP"
    EFI_BC_HTTP = 17, "EFI BC boot from HTTP"
    EFI_ARM32_HTTP = 18, "EFI ARM32 boot from HTTP"
    EFI_ARM64_HTTP = 19, "EFI ARM64 boot from HTTP"
    INTEL_X86PC_HTTP = 20, "Intel x86PC boot from HTTP"
    UBOOT_ARM32 = 21, "U-Boot ARM32"
    UBOOT_ARM64 = 22, "U-Boot ARM64"
    UBOOT_ARM32_HTTP = 23, "U-boot ARM32 boot from HTTP"
    UBOOT_ARM64_HTTP = 24, "U-Boot ARM64 boot from HTTP"
    EFI_RISCV32 = 25, "EFI RISC-V 32-bit"
    EFI_RISCV32_HTTP = 26, "EFI RISC-V 32-bit boot from HTTP"
    EFI_RISCV64 = 27, "EFI RISC-V 64-bit"
    EFI_RISCV64_HTTP = 28, "EFI RISC-V 64-bit boot from HTTP"
    EFI_RISCV128 = 29, "EFI RISC-V 128-bit"
    EFI_RISCV128_HTTP = 30, "EFI RISC-V 128-bit boot from HTTP"
    S390_BASIC = 31, "s390 Basic"
    S390_EXTENDED = 32, "s390 Extended"
    EFI_MIPS32 = 33, "EFI MIPS32"
    EFI_MIPS64 = 34, "EFI MIPS64"
    EFI_SUNWAY32 = 35, "EFI Sunway 32-bit"
    EFI_SUNWAY64 = 36, "EFI Sunway 64-bit"

    def __str__(self) -> str:
        return self._describe()


class Archs(list):
    """A list of architecture types, as carried by the Client System Architecture option."""

    def __init__(self, archs: Iterable[int] = ()) -> None:
        super().__init__(Arch(a) for a in archs)

    def to_bytes(self) -> bytes:
        """Serialize as big-endian 16-bit values (RFC 4578 / RFC 5970)."""
        return struct.pack(f">{len(self)}H", *(int(a) for a in self))

    def __str__(self) -> str:
        return ", ".join(arch_name(a) for a in self)

    @classmethod
    def from_bytes(cls, data: bytes) -> Archs:
        """Parse a list of architecture types; the data must hold whole 16-bit values."""
        data = bytes(data)
        if not data:
            raise ValueError("must have at least one archtype if option is present")
        if len(data) % 2:
            raise ValueError(
                f"archtype data has {len(data)} bytes, which is not a multiple of 2"
            )
        return cls(value for (value,) in struct.iter_unpack(">H", data))


class EntID(_NamedCode):
    """An enterprise number assigned by IANA."""

    CISCO_SYSTEMS = 9, "Cisco Systems"

    @classmethod
    def _limit(cls) -> int | None:
        return None

    @classmethod
    def _unknown_text(cls) -> str:
        return "Unknown"

    def __str__(self) -> str:
        return self._describe()


class HWType(_NamedCode):
    """A hardware type (RFC 2132, IANA ARP parameters)."""

    ETHERNET = 1, "Ethernet"
    EXPERIMENTAL_ETHERNET = 2, "Experimental Ethernet"
    AMATEUR_RADIO_AX25 = 3, "Amateur Radio AX.25"
    PROTEON_TOKEN_RING = 4, "Proteon ProNET Token Ring"
    CHAOS = 5, "Chaos"
    IEEE802 = 6, "IEEE 802"
    ARCNET = 7, "ARCNET"
    HYPERCHANNEL = 8, "Hyperchannel"
    LANSTAR = 9, "Lanstar"
    AUTONET = 10, "Autonet Short Address"
    LOCAL_TALK = 11, "LocalTalk"
    LOCAL_NET = 12, "LocalNet"
    ULTRA_LINK = 13, "Ultra link"
    SMDS = 14, "SMDS"
    FRAME_RELAY = 15, "Frame Relay"
    ATM = 16, "ATM"
    HDLC = 17, "HDLC"
    FIBRE_CHANNEL = 18, "Fibre Channel"
    ATM2 = 19, "ATM 2"
    SERIAL_LINE = 20, "Serial Line"
    ATM3 = 21, "ATM 3"
    MIL_STD_188_220 = 22, "MIL-STD-188-220"
    METRICOM = 23, "Metricom"
    IEEE1394 = 24, "IEEE 1394.1995"
    MAPOS = 25, "MAPOS"
    TWINAXIAL = 26, "Twinaxial"
    EUI64 = 27, "EUI-64"
    HIPARP = 28, "HIPARP"
    ISO7816 = 29, "IP and ARP over ISO 7816-3"
    ARPSEC = 30, "ARPSec"
    IPSEC = 31, "IPsec tunnel"
    INFINIBAND = 32, "Infiniband"
    CAI = 33, "CAI, TIA-102 Project 125 Common Air Interface"
    WIEGAND_INTERFACE = 34, "Wiegand Interface"
    PURE_IP = 35, "Pure IP"

    def __str__(self) -> str:
        return self._describe()


class StatusCode(_NamedCode):
    """A DHCPv6 status code."""

    # RFC 3315
    SUCCESS = 0, "Success"
    UNSPEC_FAIL = 1, "UnspecFail"
    NO_ADDRS_AVAIL = 2, "NoAddrsAvail"
    NO_BINDING = 3, "NoBinding"
    NOT_ON_LINK = 4, "NotOnLink"
    USE_MULTICAST = 5, "UseMulticast"
    NO_PREFIX_AVAIL = 6, "NoPrefixAvail"
    # RFC 5007
    UNKNOWN_QUERY_TYPE = 7, "UnknownQueryType"
    MALFORMED_QUERY = 8, "MalformedQuery"
    NOT_CONFIGURED = 9, "NotConfigured"
    NOT_ALLOWED = 10, "NotAllowed"
    # RFC 5460
    QUERY_TERMINATED = 11, "QueryTerminated"
    # RFC 7653
    DATA_MISSING = 12, "DataMissing"
    CATCH_UP_COMPLETE = 13, "CatchUpComplete"
    NOT_SUPPORTED = 14, "NotSupported"
    TLS_CONNECTION_REFUSED = 15, "TLSConnectionRefused"
    # RFC 8156
    ADDRESS_IN_USE = 16, "AddressInUse"
    CONFIGURATION_CONFLICT = 17, "ConfigurationConflict"
    MISSING_BINDING_INFORMATION = 18, "MissingBindingInformation"
    OUTDATED_BINDING_INFORMATION = 19, "OutdatedBindingInformation"
    SERVER_SHUTTING_DOWN = 20, "ServerShuttingDown"
    DNS_UPDATE_NOT_SUPPORTED = 21, "DNSUpdateNotSupported"
    EXCESSIVE_TIME_SKEW = 22, "ExcessiveTimeSkew"

    @classmethod
    def _unknown_text(cls) -> str:
        return "Unknown"

    def __str__(self) -> str:
        return self._describe()


def _name(cls: type[_NamedCode], value: int) -> str:
    try:
        return str(cls(value))
    except ValueError:
        return cls._unknown_text()


def arch_name(value: int) -> str:
    """Return the mnemonic name of an architecture type, or "unknown"."""
    return _name(Arch, value)


def ent_id_name(value: int) -> str:
    """Return the vendor name of an enterprise number, or "Unknown"."""
    return _name(EntID, value)


def hw_type_name(value: int) -> str:
    """Return the name of a hardware type, or "unknown"."""
    return _name(HWType, value)


def status_code_name(value: int) -> str:
    """Return the name of a DHCPv6 status code, or "Unknown"."""
    return _name(StatusCode, value)