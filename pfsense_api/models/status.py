from dataclasses import dataclass, field
from typing import List, Optional

from .base import PfSenseModel, api_field


@dataclass
class SystemStatus(PfSenseModel):
    """Hardware and resource usage summary from ``/api/v1/status/system``."""

    system_platform: Optional[str] = None
    system_serial: Optional[str] = None
    system_netgate_id: Optional[str] = None
    bios_vendor: Optional[str] = None
    bios_version: Optional[str] = None
    bios_date: Optional[str] = None
    cpu_model: Optional[str] = None
    kernel_pti: Optional[bool] = None
    mds_mitigation: Optional[str] = None
    temp_c: Optional[float] = None
    temp_f: Optional[float] = None
    load_avg: List[float] = field(default_factory=list)
    mbuf_usage: Optional[float] = None
    mem_usage: Optional[float] = None
    swap_usage: Optional[float] = None
    disk_usage: Optional[float] = None


@dataclass
class InterfaceStatus(PfSenseModel):
    """Link state and traffic counters for one interface."""

    name: Optional[str] = None
    descr: Optional[str] = None
    hwif: Optional[str] = None
    enable: Optional[bool] = None
    if_: Optional[str] = api_field("if")
    status: Optional[str] = None
    macaddr: Optional[str] = None
    mtu: Optional[int] = None
    ipaddr: Optional[str] = None
    subnet: Optional[str] = None
    linklocal: Optional[str] = None
    ipaddrv6: Optional[str] = None
    subnetv6: Optional[int] = None
    inerrs: Optional[int] = None
    outerrs: Optional[int] = None
    collisions: Optional[int] = None
    inbytespass: Optional[int] = None
    outbytespass: Optional[int] = None
    inpktspass: Optional[int] = None
    outpktspass: Optional[int] = None
    inbytesblock: Optional[int] = None
    outbytesblock: Optional[int] = None
    inpktsblock: Optional[int] = None
    outpktsblock: Optional[int] = None
    inbytes: Optional[int] = None
    outbytes: Optional[int] = None
    inpkts: Optional[int] = None
    outpkts: Optional[int] = None
    dhcplink: Optional[str] = None
    media: Optional[str] = None
    gateway: Optional[str] = None
    gatewayv6: Optional[str] = None


@dataclass
class GatewayStatus(PfSenseModel):
    """dpinger monitoring results for one gateway."""

    monitorip: Optional[str] = None
    srcip: Optional[str] = None
    name: Optional[str] = None
    delay: Optional[float] = None
    stddev: Optional[float] = None
    loss: Optional[float] = None
    status: Optional[str] = None
    substatus: Optional[str] = None
