"""DHCPv6 transaction IDs, message types and option codes (RFC 3315 and later)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

TRANSACTION_ID_LENGTH = 3


@dataclass(frozen=True)
class TransactionID:
    """A DHCPv6 transaction ID: three opaque bytes (RFC 3315, Section 6)."""

    value: bytes = bytes(TRANSACTION_ID_LENGTH)

    def __post_init__(self) -> None:
        data = bytes(self.value)
        if len(data) != TRANSACTION_ID_LENGTH:
            raise ValueError(
                f"transaction ID must be {TRANSACTION_ID_LENGTH} bytes, got {len(data)}"
            )
        object.__setattr__(self, "value", data)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return f"0x{self.value.hex()}"


class _LabelledCode(IntEnum):
    """An integer enum whose members carry a human-readable label."""

    def __new__(cls, value: int, label: str | None = None):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    def _describe(self) -> str:
        if self.label is None:
            return f"unknown ({int(self)})"
        return self.label

    __format__ = object.__format__


class MessageType(_LabelledCode):
    """The kind of a DHCPv6 message (RFC 3315, Section 5.3)."""

    # NONE is used internally and is not part of the RFC.
    NONE = 0, None
    SOLICIT = 1, "SOLICIT"
    ADVERTISE = 2, "ADVERTISE"
    REQUEST = 3, "REQUEST"
    CONFIRM = 4, "CONFIRM"
    RENEW = 5, "RENEW"
    REBIND = 6, "REBIND"
    REPLY = 7, "REPLY"
    RELEASE = 8, "RELEASE"
    DECLINE = 9, "DECLINE"
    RECONFIGURE = 10, "RECONFIGURE"
    INFORMATION_REQUEST = 11, "INFORMATION-REQUEST"
    RELAY_FORWARD = 12, "RELAY-FORW"
    RELAY_REPLY = 13, "RELAY-REPL"
    LEASE_QUERY = 14, "LEASEQUERY"
    LEASE_QUERY_REPLY = 15, "LEASEQUERY-REPLY"
    LEASE_QUERY_DONE = 16, "LEASEQUERY-DONE"
    LEASE_QUERY_DATA = 17, "LEASEQUERY-DATA"
    DHCPV4_QUERY = 20, "DHCPv4-QUERY"
    DHCPV4_RESPONSE = 21, "DHCPv4-RESPONSE"

    def __str__(self) -> str:
        return self._describe()


class OptionCode(_LabelledCode):
    """The code of a DHCPv6 option."""

    CLIENT_ID = 1, "Client Identifier"
    SERVER_ID = 2, "Server Identifier"
    IANA = 3, "IA_NA"
    IATA = 4, "IA_TA"
    IAADDR = 5, "IA IP Address"
    ORO = 6, "Requested Options"
    PREFERENCE = 7, "Preference"
    ELAPSED_TIME = 8, "Elapsed Time"
    RELAY_MSG = 9, "Relay Message"
    AUTH = 11, "Auth"
    UNICAST = 12, "Unicast"
    STATUS_CODE = 13, "Status Code"
    RAPID_COMMIT = 14, "Rapid Commit"
    USER_CLASS = 15, "User Class"
    VENDOR_CLASS = 16, "Vendor Class"
    VENDOR_OPTS = 17, "Vendor Options"
    INTERFACE_ID = 18, "Interface ID"
    RECONF_MESSAGE = 19, "Reconfig Message"
    RECONF_ACCEPT = 20, "Reconfig Accept"
    SIP_SERVERS_DOMAIN_NAME_LIST = 21, "SIP Servers Domain Name List"
    SIP_SERVERS_IPV6_ADDRESS_LIST = 22, "SIP Servers IPv6 Address List"
    DNS_RECURSIVE_NAME_SERVER = 23, "DNS Recursive Name Server"
    DOMAIN_SEARCH_LIST = 24, "Domain Search List"
    IAPD = 25, "IA_PD"
    IAPREFIX = 26, "IA Prefix"
    NIS_SERVERS = 27, "NIS Servers"
    NISP_SERVERS = 28, "NISP Servers"
    NIS_DOMAIN_NAME = 29, "NIS Domain Name"
    NISP_DOMAIN_NAME = 30, "NISP Domain Name"
    SNTP_SERVER_LIST = 31, "SNTP Server List"
    INFORMATION_REFRESH_TIME = 32, "Information Refresh Time"
    BCMCS_CONTROLLER_DOMAIN_NAME_LIST = 33, "BCMCS Controller Domain Name List"
    BCMCS_CONTROLLER_IPV6_ADDRESS_LIST = 34, "BCMCS Controller IPv6 Address List"
    GEOCONF_CIVIC = 36, "Geoconf"
    REMOTE_ID = 37, "Remote ID"
    RELAY_AGENT_SUBSCRIBER_ID = 38, "Relay-Agent Subscriber ID"
    FQDN = 39, "FQDN"
    PANA_AUTHENTICATION_AGENT = 40, "PANA Authentication Agent"
    NEW_POSIX_TIMEZONE = 41, "New POSIX Timezone"
    NEW_TZDB_TIMEZONE = 42, "New TZDB Timezone"
    ECHO_REQUEST = 43, "Echo Request"
    LQ_QUERY = 44, "OPTION_LQ_QUERY"
    CLIENT_DATA = 45, "OPTION_CLIENT_DATA"
    CLT_TIME = 46, "OPTION_CLT_TIME"
    LQ_RELAY_DATA = 47, "OPTION_LQ_RELAY_DATA"
    LQ_CLIENT_LINK = 48, "OPTION_LQ_CLIENT_LINK"
    MIPV6_HOME_NETWORK_ID_FQDN = 49, "MIPv6 Home Network ID FQDN"
    MIPV6_VISITED_HOME_NETWORK_INFORMATION = 50, "MIPv6 Visited Home Network Information"
    LOST_SERVER = 51, "LoST Server"
    CAPWAP_ACCESS_CONTROLLER_ADDRESSES = 52, "CAPWAP Access Controller Addresses"
    RELAY_ID = 53, "RELAY_ID"
    IPV6_ADDRESS_MOS = 54, "OPTION-IPv6_Address-MoS"
    IPV6_FQDN_MOS = 55, "OPTION-IPv6-FQDN-MoS"
    NTP_SERVER = 56, "NTP Server"
    V6_ACCESS_DOMAIN = 57, "OPTION_V6_ACCESS_DOMAIN"
    SIP_UACS_LIST = 58, "OPTION_SIP_UA_CS_LIST"
    BOOTFILE_URL = 59, "Boot File URL"
    BOOTFILE_PARAM = 60, "Boot File Parameters"
    CLIENT_ARCH_TYPE = 61, "Client Architecture"
    NII = 62, "Network Interface ID"
    GEOLOCATION = 63, "OPTION_GEOLOCATION"
    AFTR_NAME = 64, "OPTION_AFTR_NAME"
    ERP_LOCAL_DOMAIN_NAME = 65, "OPTION_ERP_LOCAL_DOMAIN_NAME"
    RSOO = 66, "OPTION_RSOO"
    PD_EXCLUDE = 67, "OPTION_PD_EXCLUDE"
    VIRTUAL_SUBNET_SELECTION = 68, "Virtual Subnet Selection"
    MIPV6_IDENTIFIED_HOME_NETWORK_INFORMATION = 69, "MIPv6 Identified Home Network Information"
    MIPV6_UNRESTRICTED_HOME_NETWORK_INFORMATION = (
        70,
        "MIPv6 Unrestricted Home Network Information",
    )
    MIPV6_HOME_NETWORK_PREFIX = 71, "MIPv6 Home Network Prefix"
    MIPV6_HOME_AGENT_ADDRESS = 72, "MIPv6 Home Agent Address"
    MIPV6_HOME_AGENT_FQDN = 73, "MIPv6 Home Agent FQDN"
    RDNSS_SELECTION = 74, "RDNSS Selection"
    KRB_PRINCIPAL_NAME = 75, "Kerberos Principal Name"
    KRB_REALM_NAME = 76, "Kerberos Realm Name"
    KRB_DEFAULT_REALM_NAME = 77, "Kerberos Default Realm Name"
    KRB_KDC = 78, "Kerberos KDC"
    CLIENT_LINK_LAYER_ADDR = 79, "Client Link-Layer Address"
    LINK_ADDRESS = 80, "Link Address"
    RADIUS = 81, "OPTION_RADIUS"
    SOL_MAX_RT = 82, "Max Solicit Timeout Value"
    INF_MAX_RT = 83, "Max Information-Request Timeout Value"
    ADDR_SEL = 84, "Address Selection"
    ADDR_SEL_TABLE = 85, "Address Selection Policy Table"
    V6_PCP_SERVER = 86, "Port Control Protocol Server"
    DHCPV4_MSG = 87, "Encapsulated DHCPv4 Message"
    DHCP4O_DHCP6_SERVER = 88, "DHCPv4-over-DHCPv6 Server"
    S46_RULE = 89, "Softwire46 Rule"
    S46_BR = 90, "Softwire46 Border Relay"
    S46_DMR = 91, "Softwire46 Default Mapping Rule"
    S46_V4V6_BIND = 92, "Softwire46 IPv4/IPv6 Address Binding"
    S46_PORT_PARAMS = 93, "Softwire46 Port Parameters"
    S46_CONT_MAPE = 94, "Softwire46 MAP-E Container"
    S46_CONT_MAPT = 95, "Softwire46 MAP-T Container"
    S46_CONT_LW = 96, "Softwire46 Lightweight 4over6 Container"
    FOUR_RD = 97, "IPv4 Residual Deployment"
    FOUR_RD_MAP_RULE = 98, "IPv4 Residual Deployment Mapping Rule"
    FOUR_RD_NON_MAP_RULE = 99, "IPv4 Residual Deployment Non-Mapping Rule"
    LQ_BASE_TIME = 100, "Leasequery Server Base time"
    LQ_START_TIME = 101, "Leasequery Server Query Start Time"
    LQ_END_TIME = 102, "Leasequery Server Query End Time"
    CAPTIVE_PORTAL = 103, "Captive Portal URI"
    MPL_PARAMETERS = 104, "MPL Parameters"
    ANI_ACCESS_TECH_TYPE = 105, "Access-Network-Information Access-Technology-Type"
    ANI_NETWORK_NAME = 106, "Access-Network-Information Network-Name"
    ANI_ACCESS_POINT_NAME = 107, "Access-Network-Information Access-Point-Name"
    ANI_ACCESS_POINT_BSSID = 108, "Access-Network-Information Access-Point-BSSID"
    ANI_OPERATOR_ID = 109, "Access-Network-Information Operator-Identifier"
    ANI_OPERATOR_REALM = 110, "Access-Network-Information Operator-Realm"
    S46_PRIORITY = 111, "Softwire46 Priority"
    MUD_URL_V6 = 112, "Manufacturer Usage Description URL"
    V6_PREFIX64 = 113, "OPTION_V6_PREFIX64"
    FAILOVER_BINDING_STATUS = 114, "Failover Binding Status"
    FAILOVER_CONNECT_FLAGS = 115, "Failover Connection Flags"
    FAILOVER_DNS_REMOVAL_INFO = 116, "Failover DNS Removal Info"
    FAILOVER_DNS_HOST_NAME = 117, "Failover DNS Removal Host Name"
    FAILOVER_DNS_ZONE_NAME = 118, "Failover DNS Removal Zone Name"
    FAILOVER_DNS_FLAGS = 119, "Failover DNS Removal Flags"
    FAILOVER_EXPIRATION_TIME = 120, "Failover Maximum Expiration Time"
    FAILOVER_MAX_UNACKED_BNDUPD = 121, "Failover Maximum Unacked BNDUPD Messages"
    FAILOVER_MCLT = 122, "Failover Maximum Client Lead Time"
    FAILOVER_PARTNER_LIFETIME = 123, "Failover Partner Lifetime"
    FAILOVER_PARTNER_LIFETIME_SENT = 124, "Failover Received Partner Lifetime"
    FAILOVER_PARTNER_DOWN_TIME = 125, "Failover Last Partner Down Time"
    FAILOVER_PARTNER_RAW_CLT_TIME = 126, "Failover Last Client Time"
    FAILOVER_PROTOCOL_VERSION = 127, "Failover Protocol Version"
    FAILOVER_KEEPALIVE_TIME = 128, "Failover Keepalive Time"
    FAILOVER_RECONFIGURE_DATA = 129, "Failover Reconfigure Data"
    FAILOVER_RELATIONSHIP_NAME = 130, "Failover Relationship Name"
    FAILOVER_SERVER_FLAGS = 131, "Failover Server Flags"
    FAILOVER_SERVER_STATE = 132, "Failover Server State"
    FAILOVER_START_TIME_OF_STATE = 133, "Failover State Start Time"
    FAILOVER_STATE_EXPIRATION_TIME = 134, "Failover State Expiration Time"
    RELAY_PORT = 135, "Relay Source Port"
    V6_SZTP_REDIRECT = 136, "IPv6 Secure Zerotouch Provisioning Redirect"
    S46_BIND_IPV6_PREFIX = 137, "Softwire46 Source Binding Prefix Hint"
    IPV6_ADDRESS_ANDSF = (
        143,
        "IPv6 Access Network Discovery and Selection Function Address",
    )

    def __str__(self) -> str:
        return self._describe()


def message_type_name(value: int) -> str:
    """Return the name of a message type, or "unknown (N)" for unassigned values."""
    try:
        return str(MessageType(value))
    except ValueError:
        return f"unknown ({int(value)})"


def option_code_name(value: int) -> str:
    """Return the name of an option code, or "unknown (N)" for unassigned values."""
    try:
        return str(OptionCode(value))
    except ValueError:
        return f"unknown ({int(value)})"