"""
DHCP server endpoints (``/api/v1/services/dhcpd...``).
"""

from typing import List, Optional

from ..exceptions import PfSenseObjectNotFoundError
from ..logging import get_logger
from ..models.dhcp import (
    DHCPLease,
    DHCPServerConfiguration,
    DHCPServerConfigurationRequest,
    DHCPStaticMapping,
    DHCPStaticMappingRequest,
)
from ..utils import normalize_mac
from .base import BaseService

logger = get_logger(__name__)

LEASES_ENDPOINT = "api/v1/services/dhcpd/lease"
STATIC_MAPPING_ENDPOINT = "api/v1/services/dhcpd/static_mapping"
SERVER_ENDPOINT = "api/v1/services/dhcpd"


class DHCPService(BaseService):
    """DHCP leases, static mappings and per-interface server settings."""

    def list_leases(self) -> List[DHCPLease]:
        return self._list_models(LEASES_ENDPOINT, DHCPLease)

    def list_static_mappings(self, interface: str) -> List[DHCPStaticMapping]:
        """List the static mappings configured on ``interface`` (e.g. ``lan``)."""
        return self._list_models(
            STATIC_MAPPING_ENDPOINT, DHCPStaticMapping, params={"interface": interface})

    def create_static_mapping(
        self, request: DHCPStaticMappingRequest
    ) -> Optional[DHCPStaticMapping]:
        logger.info(f"Creating static mapping {request.mac} -> {request.ipaddr} on {request.interface}")
        return self._write_model(
            "POST", STATIC_MAPPING_ENDPOINT, DHCPStaticMapping, payload=self._payload(request))

    def _static_mapping_index(self, interface: str, mac: str) -> int:
        """
        Find the position of the mapping for ``mac`` on ``interface``.

        pfSense addresses static mappings by their index in the interface's
        list, so the list is fetched on every lookup. MAC addresses are
        compared case and separator insensitively.

        Raises:
            PfSenseObjectNotFoundError: If no mapping has that MAC address.
        """
        wanted = normalize_mac(mac)
        for index, mapping in enumerate(self.list_static_mappings(interface)):
            if mapping.mac and normalize_mac(mapping.mac) == wanted:
                return index

        error_msg = f"Unable to find static mapping on interface {interface} with mac {mac}"
        logger.warning(error_msg)
        raise PfSenseObjectNotFoundError(error_msg)

    def update_static_mapping(
        self, mac: str, request: DHCPStaticMappingRequest
    ) -> Optional[DHCPStaticMapping]:
        """
        Update the static mapping for ``mac`` on ``request.interface``.

        Args:
            mac: MAC address of the mapping to update. The new address, if it
                 changes, goes in ``request.mac``.
            request: The new mapping settings.

        Returns:
            The updated mapping.

        Raises:
            PfSenseObjectNotFoundError: If no mapping has that MAC address.
        """
        mapping_id = self._static_mapping_index(request.interface, mac)
        logger.info(f"Updating static mapping {mac} (id {mapping_id}) on {request.interface}")
        return self._write_model(
            "PUT", STATIC_MAPPING_ENDPOINT, DHCPStaticMapping,
            payload=self._payload(request, id=mapping_id))

    def delete_static_mapping(self, interface: str, mac: str):
        """
        Delete the static mapping for ``mac`` on ``interface``.

        Raises:
            PfSenseObjectNotFoundError: If no mapping has that MAC address.
        """
        mapping_id = self._static_mapping_index(interface, mac)
        logger.info(f"Deleting static mapping {mac} (id {mapping_id}) on {interface}")
        self.client.delete(
            STATIC_MAPPING_ENDPOINT, params={"interface": interface, "id": str(mapping_id)})

    def list_server_configurations(self) -> List[DHCPServerConfiguration]:
        return self._list_models(SERVER_ENDPOINT, DHCPServerConfiguration)

    def update_server_configuration(
        self, request: DHCPServerConfigurationRequest
    ) -> Optional[DHCPServerConfiguration]:
        """
        Update the DHCP server settings of ``request.interface``.

        The appliance does not echo the interface back, so it is copied from
        the request onto the returned configuration.
        """
        logger.info(f"Updating DHCP server configuration on {request.interface}")
        configuration = self._write_model(
            "PUT", SERVER_ENDPOINT, DHCPServerConfiguration, payload=self._payload(request))
        if configuration is not None:
            configuration.interface = request.interface
        return configuration
