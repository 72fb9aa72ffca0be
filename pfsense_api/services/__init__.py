"""
API services, one per section of the pfSense REST API.

Services are created by :class:`~pfsense_api.api_client.PfSenseClient` and
exposed as its attributes (``client.firewall``, ``client.dhcp``...).
"""

from .base import BaseService
from .dhcp import DHCPService
from .firewall import FirewallService
from .interface import InterfaceService
from .routing import RoutingService
from .status import StatusService
from .system import SystemService
from .token import TokenService
from .unbound import UnboundService
from .user import UserService

__all__ = [
    "BaseService",
    "DHCPService",
    "FirewallService",
    "InterfaceService",
    "RoutingService",
    "StatusService",
    "SystemService",
    "TokenService",
    "UnboundService",
    "UserService",
]
