"""DHCP building blocks: DHCPv6 and IANA registries, RFC 1035 labels, interface helpers and ZTP parsing."""

__version__ = "0.1.0"

__all__ = ["dhcpv6_types", "iana", "rfc1035label", "interfaces", "ztpv6"]