"""
Models for the interface endpoints (``/api/v2/interface...``).

Each resource has a request model carrying the writable settings and a
response model that adds the appliance-assigned ``id``.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import PfSenseModel, api_field


@dataclass
class InterfaceRequest(PfSenseModel):
    """
    Settings of an assigned interface.

    Attributes left at None are not sent, so pfSense keeps (or defaults) them.
    """

    if_: str = api_field("if", default="")
    descr: str = ""
    typev4: str = ""
    ipaddr: str = ""
    subnet: int = 0
    ipaddrv6: str = ""
    subnetv6: int = 0
    prefix_6rd: str = ""
    gateway_6rd: str = ""
    prefix_6rd_v4plen: int = 0
    track6_interface: str = ""
    enable: Optional[bool] = None
    spoofmac: Optional[str] = None
    mtu: Optional[int] = None
    mss: Optional[int] = None
    media: Optional[str] = None
    mediaopt: Optional[str] = None
    blockpriv: Optional[bool] = None
    blockbogons: Optional[bool] = None
    gateway: Optional[str] = None
    alias_subnet: Optional[int] = None
    adv_dhcp_pt_timeout: Optional[int] = None
    adv_dhcp_pt_retry: Optional[int] = None
    adv_dhcp_pt_select_timeout: Optional[int] = None
    adv_dhcp_pt_reboot: Optional[int] = None
    adv_dhcp_pt_backoff_cutoff: Optional[int] = None
    adv_dhcp_pt_initial_interval: Optional[int] = None
    adv_dhcp_send_options: Optional[str] = None
    adv_dhcp_request_options: Optional[str] = None
    adv_dhcp_required_options: Optional[str] = None
    adv_dhcp_option_modifiers: Optional[str] = None
    adv_dhcp_config_file_override_path: Optional[str] = None
    typev6: Optional[str] = None
    gatewayv6: Optional[str] = None


@dataclass
class Interface(InterfaceRequest):
    """An assigned interface; ``id`` is the pfSense name (``wan``, ``lan``, ``opt1``...)."""

    id: Optional[str] = None


@dataclass
class VLANRequest(PfSenseModel):
    if_: str = api_field("if", default="")
    tag: int = 0
    vlanif: Optional[str] = None
    pcp: Optional[int] = None
    descr: Optional[str] = None


@dataclass
class VLAN(VLANRequest):
    id: Optional[int] = None


@dataclass
class InterfaceGroupRequest(PfSenseModel):
    ifname: str = ""
    members: List[str] = field(default_factory=list)
    descr: str = ""


@dataclass
class InterfaceGroup(InterfaceGroupRequest):
    id: Optional[int] = None


@dataclass
class InterfaceBridgeRequest(PfSenseModel):
    members: List[str] = field(default_factory=list)
    descr: str = ""
    bridgeif: str = ""


@dataclass
class InterfaceBridge(InterfaceBridgeRequest):
    id: Optional[str] = None
