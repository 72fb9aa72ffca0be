"""
Python client for the pfSense REST API package.

This package wraps the REST API that the pfSense-pkg-API package adds to a
pfSense firewall: system settings, status, DHCP, interfaces, routing,
firewall aliases and rules, users and DNS resolver host overrides.
"""

from .api_client import PfSenseClient
from .config import AuthMode, PfSenseConfig
from .export import export_csv, export_json, to_dict_list
from .exceptions import (
    PfSenseError,
    PfSenseAuthenticationError,
    PfSenseAPIError,
    PfSenseNon2xxError,
    PfSenseDataError,
    PfSenseModelError,
    PfSenseObjectNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "PfSenseClient",
    "PfSenseConfig",
    "AuthMode",
    "export_csv",
    "export_json",
    "to_dict_list",
    "PfSenseError",
    "PfSenseAuthenticationError",
    "PfSenseAPIError",
    "PfSenseNon2xxError",
    "PfSenseDataError",
    "PfSenseModelError",
    "PfSenseObjectNotFoundError",
]
