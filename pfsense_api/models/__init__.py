"""
Data models for pfSense REST API requests and responses.

.. warning::
    The response dataclasses describe the fields commonly returned by the
    pfSense REST API package. The payloads vary between package releases and
    pfSense versions, so treat the models as a description of the usual
    shape rather than a strict schema:

    *   Fields missing from a response keep their default value (usually `None`).
    *   Fields a model does not define are captured in the `_extra_fields`
        dictionary of the instance and logged at DEBUG level.

    Several endpoints encode values loosely (numbers as strings, flags as the
    mere presence of a key, lists as comma separated strings). The models
    normalize these while they are built, so attributes carry Python types.

Request dataclasses (``*Request``) are serialized with ``to_dict()``;
attributes left at `None` are omitted from the payload.
"""

from .base import PfSenseModel, api_field
from .common import ApiResponse, ErrorDefinition
from .token import AccessToken
from .system import (
    APIConfiguration,
    APIConfigurationRequest,
    APIVersion,
    ArpEntry,
    CACertificate,
    CACertificateRequest,
    Certificate,
    CertificateAltName,
    CertificateCreateRequest,
    CertificateUpdateRequest,
    DNSConfiguration,
    EmailNotification,
    EmailNotificationRequest,
    Package,
    SystemHostname,
    Tunable,
    TunableRequest,
    Version,
    VersionUpgradeStatus,
)
from .status import GatewayStatus, InterfaceStatus, SystemStatus
from .dhcp import (
    DHCPLease,
    DHCPRange,
    DHCPServerConfiguration,
    DHCPServerConfigurationRequest,
    DHCPStaticMapping,
    DHCPStaticMappingRequest,
)
from .interface import (
    VLAN,
    Interface,
    InterfaceBridge,
    InterfaceBridgeRequest,
    InterfaceGroup,
    InterfaceGroupRequest,
    InterfaceRequest,
    VLANRequest,
)
from .routing import DefaultGatewayRequest, Gateway, GatewayRequest
from .firewall import (
    FirewallAlias,
    FirewallAliasRequest,
    FirewallRule,
    FirewallRuleChange,
    FirewallRuleRequest,
)
from .user import User, UserGroup, UserGroupRequest, UserRequest
from .unbound import UnboundHostOverride, UnboundHostOverrideAlias

__all__ = [
    "PfSenseModel",
    "api_field",
    "ApiResponse",
    "ErrorDefinition",
    "AccessToken",
    "APIConfiguration",
    "APIConfigurationRequest",
    "APIVersion",
    "ArpEntry",
    "CACertificate",
    "CACertificateRequest",
    "Certificate",
    "CertificateAltName",
    "CertificateCreateRequest",
    "CertificateUpdateRequest",
    "DNSConfiguration",
    "EmailNotification",
    "EmailNotificationRequest",
    "Package",
    "SystemHostname",
    "Tunable",
    "TunableRequest",
    "Version",
    "VersionUpgradeStatus",
    "SystemStatus",
    "InterfaceStatus",
    "GatewayStatus",
    "DHCPLease",
    "DHCPRange",
    "DHCPServerConfiguration",
    "DHCPServerConfigurationRequest",
    "DHCPStaticMapping",
    "DHCPStaticMappingRequest",
    "Interface",
    "InterfaceRequest",
    "VLAN",
    "VLANRequest",
    "InterfaceGroup",
    "InterfaceGroupRequest",
    "InterfaceBridge",
    "InterfaceBridgeRequest",
    "Gateway",
    "GatewayRequest",
    "DefaultGatewayRequest",
    "FirewallAlias",
    "FirewallAliasRequest",
    "FirewallRule",
    "FirewallRuleChange",
    "FirewallRuleRequest",
    "User",
    "UserRequest",
    "UserGroup",
    "UserGroupRequest",
    "UnboundHostOverride",
    "UnboundHostOverrideAlias",
]
