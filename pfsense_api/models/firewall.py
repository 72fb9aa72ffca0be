"""
Models for the firewall endpoints (``/api/v1/firewall/...``).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..utils import nested_model
from .base import PfSenseModel, api_field


@dataclass
class FirewallAlias(PfSenseModel):
    """
    A firewall alias.

    ``address`` and ``detail`` are space separated strings on the wire; the
    n-th detail describes the n-th address.
    """

    name: Optional[str] = None
    type: Optional[str] = None
    address: Optional[str] = None
    descr: Optional[str] = None
    detail: Optional[str] = None


@dataclass
class FirewallAliasRequest(PfSenseModel):
    """Payload used to create or replace an alias."""

    address: List[str] = field(default_factory=list)
    descr: str = ""
    detail: List[str] = field(default_factory=list)
    name: str = ""
    type: str = ""


@dataclass
class FirewallRuleChange(PfSenseModel):
    """The ``created``/``updated`` stamp of a rule."""

    time: Optional[str] = None
    username: Optional[str] = None


@dataclass
class FirewallRule(PfSenseModel):
    """
    A firewall rule.

    ``tracker`` is the stable identifier used to update and delete the rule;
    ``id`` is just its current position.
    """

    id: Optional[str] = None
    tracker: Optional[str] = None
    type: Optional[str] = None
    interface: Optional[str] = None
    ipprotocol: Optional[str] = None
    tag: Optional[str] = None
    tagged: Optional[str] = None
    max: Optional[str] = None
    max_src_nodes: Optional[str] = api_field("max-src-nodes")
    max_src_conn: Optional[str] = api_field("max-src-conn")
    max_src_states: Optional[str] = api_field("max-src-states")
    statetimeout: Optional[str] = None
    statetype: Optional[str] = None
    os: Optional[str] = None
    source: Dict[str, str] = field(default_factory=dict)
    destination: Dict[str, str] = field(default_factory=dict)
    descr: Optional[str] = None
    updated: Optional[FirewallRuleChange] = api_field(
        converter=nested_model(FirewallRuleChange))
    created: Optional[FirewallRuleChange] = api_field(
        converter=nested_model(FirewallRuleChange))


@dataclass
class FirewallRuleRequest(PfSenseModel):
    """Payload used to create or replace a rule."""

    ackqueue: str = ""
    defaultqueue: str = ""
    descr: str = ""
    direction: str = ""
    disabled: bool = False
    dnpipe: str = ""
    dst: str = ""
    dstport: str = ""
    floating: bool = False
    gateway: str = ""
    icmptype: List[str] = field(default_factory=list)
    interface: List[str] = field(default_factory=list)
    ipprotocol: str = ""
    log: bool = False
    pdnpipe: str = ""
    protocol: str = ""
    quick: bool = False
    sched: str = ""
    src: str = ""
    srcport: str = ""
    statetype: str = ""
    tcpflags_any: bool = False
    tcpflags1: List[str] = field(default_factory=list)
    tcpflags2: List[str] = field(default_factory=list)
    top: bool = False
    type: str = ""
