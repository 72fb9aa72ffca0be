"""
Models for the DHCP server endpoints (``/api/v1/services/dhcpd/...``).
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..utils import nested_model, optional_int, true_if_present
from .base import PfSenseModel, api_field


@dataclass
class DHCPLease(PfSenseModel):
    """A single DHCP lease, dynamic or static."""

    ip: Optional[str] = None
    type: Optional[str] = None
    mac: Optional[str] = None
    if_: Optional[str] = api_field("if")
    starts: Optional[str] = None
    ends: Optional[str] = None
    hostname: Optional[str] = None
    descr: Optional[str] = None
    online: Optional[Any] = None  # "online"/"offline" or a bool, depending on version
    staticmap_array_index: Optional[int] = None
    state: Optional[str] = None


@dataclass
class DHCPStaticMapping(PfSenseModel):
    """
    A DHCP static reservation.

    ``id`` is the position of the mapping in the interface's list; it shifts
    when earlier mappings are removed, so look mappings up by MAC instead of
    holding on to the id.
    """

    id: Optional[int] = None
    mac: Optional[str] = None
    cid: Optional[str] = None
    ipaddr: Optional[str] = None
    hostname: Optional[str] = None
    descr: Optional[str] = None
    filename: Optional[str] = None
    rootpath: Optional[str] = None
    defaultleasetime: Optional[str] = None
    maxleasetime: Optional[str] = None
    gateway: Optional[str] = None
    domain: Optional[str] = None
    domainsearchlist: Optional[str] = None
    ddnsdomain: Optional[str] = None
    ddnsdomainprimary: Optional[str] = None
    ddnsdomainsecondary: Optional[str] = None
    ddnsdomainkeyname: Optional[str] = None
    ddnsdomainkeyalgorithm: Optional[str] = None
    ddnsdomainkey: Optional[str] = field(default=None, repr=False)
    dnsserver: List[str] = field(default_factory=list)
    tftp: Optional[str] = None
    ldap: Optional[str] = None
    nextserver: Optional[str] = None
    filename32: Optional[str] = None
    filename64: Optional[str] = None
    filename32arm: Optional[str] = None
    filename64arm: Optional[str] = None
    numberoptions: Optional[Any] = None
    arp_table_static_entry: bool = api_field(default=False, converter=true_if_present)


@dataclass
class DHCPStaticMappingRequest(PfSenseModel):
    """Payload used to create or update a static reservation."""

    arp_table_static_entry: bool = False
    cid: str = ""
    descr: str = ""
    dnsserver: List[str] = field(default_factory=list)
    domain: str = ""
    domainsearchlist: List[str] = field(default_factory=list)
    gateway: str = ""
    hostname: str = ""
    interface: str = ""
    ipaddr: str = ""
    mac: str = ""


@dataclass
class DHCPRange(PfSenseModel):
    from_: Optional[str] = api_field("from")
    to: Optional[str] = None


@dataclass
class DHCPServerConfiguration(PfSenseModel):
    """
    The dhcpd configuration for one interface.

    Flags such as ``enable`` and ``staticarp`` are reported by key presence
    and lease times may come back as numbers or numeric strings.
    """

    defaultleasetime: Optional[int] = api_field(converter=optional_int)
    denyunknown: bool = api_field(default=False, converter=true_if_present)
    dnsserver: List[str] = field(default_factory=list)
    domain: Optional[str] = None
    domainsearchlist: Optional[str] = None
    enable: bool = api_field(default=False, converter=true_if_present)
    gateway: Optional[str] = None
    ignorebootp: Optional[bool] = None
    interface: Optional[str] = None
    mac_allow: Optional[str] = None
    mac_deny: Optional[str] = None
    maxleasetime: Optional[int] = api_field(converter=optional_int)
    numberoptions: Optional[Any] = None
    range: Optional[DHCPRange] = api_field(converter=nested_model(DHCPRange))
    staticarp: bool = api_field(default=False, converter=true_if_present)


@dataclass
class DHCPServerConfigurationRequest(PfSenseModel):
    """Payload used to update the dhcpd configuration of ``interface``."""

    interface: str = ""
    enable: bool = False
    denyunknown: bool = False
    staticarp: bool = False
    defaultleasetime: Optional[int] = None
    maxleasetime: Optional[int] = None
    dnsserver: Optional[List[str]] = None
    domain: Optional[str] = None
    domainsearchlist: Optional[List[str]] = None
    gateway: Optional[str] = None
    ignorebootp: Optional[bool] = None
    mac_allow: Optional[List[str]] = None
    mac_deny: Optional[List[str]] = None
    numberoptions: Optional[List[Any]] = None
    range_from: Optional[str] = None
    range_to: Optional[str] = None
