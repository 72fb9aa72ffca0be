from dataclasses import dataclass
from typing import Any, Optional

from .base import PfSenseModel


@dataclass
class Gateway(PfSenseModel):
    """A routing gateway as listed by ``/api/v1/routing/gateway``."""

    dynamic: Optional[bool] = None
    ipprotocol: Optional[str] = None
    gateway: Optional[str] = None
    interface: Optional[str] = None
    friendlyiface: Optional[str] = None
    friendlyifdescr: Optional[str] = None
    name: Optional[str] = None
    attribute: Optional[Any] = None  # numeric index for static gateways, "system" for dynamic ones
    isdefaultgw: Optional[bool] = None
    monitor: Optional[str] = None
    descr: Optional[str] = None
    tiername: Optional[str] = None


@dataclass
class GatewayRequest(PfSenseModel):
    """
    Payload used to create or update a gateway.

    Latency and loss thresholds are in milliseconds and percent; the
    intervals are in milliseconds.
    """

    action_disable: bool = False
    alert_interval: int = 0
    apply: bool = False
    data_payload: int = 0
    descr: str = ""
    disabled: bool = False
    force_down: bool = False
    gateway: str = ""
    interface: str = ""
    interval: int = 0
    ipprotocol: str = ""
    latencyhigh: int = 0
    latencylow: int = 0
    loss_interval: int = 0
    losshigh: int = 0
    losslow: int = 0
    monitor: str = ""
    monitor_disable: bool = False
    name: str = ""
    time_period: int = 0
    weight: int = 0


@dataclass
class DefaultGatewayRequest(PfSenseModel):
    defaultgw4: str = ""
    defaultgw6: str = ""
    apply: bool = False
