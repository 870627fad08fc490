import pytest

from netdhcp.iana import (
    Arch,
    Archs,
    EntID,
    HWType,
    StatusCode,
    arch_name,
    ent_id_name,
    hw_type_name,
    status_code_name,
)


def test_arch_names():
    assert str(Arch(7)) == "EFI x86-64"
    assert arch_name(23) == "U-boot ARM32 boot from HTTP"
    assert f"{Arch(14)}" == "POWER OPAL v3"


def test_arch_unknown():
    assert arch_name(0xFFFF) == "unknown"
    assert str(Arch(1000)) == "unknown"
    assert int(Arch(1000)) == 1000
    assert arch_name(-1) == "unknown"


def test_arch_out_of_range_raises():
    with pytest.raises(ValueError):
        Arch(0x10000)


def test_archs_to_bytes_is_big_endian():
    assert Archs([Arch.EFI_X86_64]).to_bytes() == b"\x00\x07"


def test_archs_round_trip():
    archs = Archs([Arch.EFI_X86_64, Arch.EFI_ARM64, Arch.INTEL_X86PC, 1000])
    parsed = Archs.from_bytes(archs.to_bytes())
    assert parsed == archs
    assert len(parsed.to_bytes()) == 2 * len(archs)
    assert all(isinstance(a, Arch) for a in parsed)


def test_archs_contains():
    archs = Archs([Arch.EFI_X86_64, Arch.EFI_ARM64])
    assert Arch.EFI_ARM64 in archs
    assert Arch.EFI_IA32 not in archs


def test_archs_str():
    archs = Archs([Arch.EFI_X86_64, Arch.EFI_ARM64])
    assert str(archs) == "EFI x86-64, EFI ARM64"
    assert str(Archs()) == ""


def test_archs_from_bytes_empty():
    with pytest.raises(ValueError):
        Archs.from_bytes(b"")


def test_archs_from_bytes_odd_length():
    with pytest.raises(ValueError):
        Archs.from_bytes(b"\x00\x07\x00")


def test_ent_id():
    assert str(EntID(9)) == "Cisco Systems"
    assert ent_id_name(9) == "Cisco Systems"
    assert ent_id_name(123456789) == "Unknown"


def test_hw_type():
    assert str(HWType(1)) == "Ethernet"
    assert hw_type_name(HWType.PURE_IP) == "Pure IP"
    assert hw_type_name(0) == "unknown"
    assert str(HWType(0)) == "unknown"


def test_status_code():
    assert str(StatusCode(2)) == "NoAddrsAvail"
    assert StatusCode(22) is StatusCode.EXCESSIVE_TIME_SKEW
    assert status_code_name(22) == "ExcessiveTimeSkew"
    assert status_code_name(999) == "Unknown"
    assert str(StatusCode(999)) == "Unknown"