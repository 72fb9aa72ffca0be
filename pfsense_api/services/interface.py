"""
Interface endpoints of the v2 API (``/api/v2/interface...``): assigned
interfaces, VLANs, interface groups and bridges.

Update calls use PATCH, so only the attributes sent are changed.
"""

from typing import List, Optional

from ..logging import get_logger
from ..models.interface import (
    VLAN,
    Interface,
    InterfaceBridge,
    InterfaceBridgeRequest,
    InterfaceGroup,
    InterfaceGroupRequest,
    InterfaceRequest,
    VLANRequest,
)
from .base import BaseService

logger = get_logger(__name__)

INTERFACE_ENDPOINT = "api/v2/interface"
INTERFACES_ENDPOINT = "api/v2/interfaces"
VLAN_ENDPOINT = "api/v2/interface/vlan"
VLANS_ENDPOINT = "api/v2/interface/vlans"
GROUP_ENDPOINT = "api/v2/interface/group"
GROUPS_ENDPOINT = "api/v2/interface/groups"
BRIDGE_ENDPOINT = "api/v2/interface/bridge"
BRIDGES_ENDPOINT = "api/v2/interface/bridges"
INTERFACE_APPLY_ENDPOINT = "api/v2/interface/apply"


class InterfaceService(BaseService):
    """Interface assignment and layer 2 configuration."""

    # --- Interfaces ---

    def list_interfaces(self) -> List[Interface]:
        return self._list_models(INTERFACES_ENDPOINT, Interface)

    def get_interface(self, interface_id: str) -> Optional[Interface]:
        """Fetch one interface by its pfSense name (``wan``, ``lan``, ``opt1``...)."""
        return self._get_model(INTERFACE_ENDPOINT, Interface, params={"if": interface_id})

    def create_interface(self, request: InterfaceRequest) -> Optional[Interface]:
        logger.info(f"Assigning interface {request.if_} ({request.descr})")
        return self._write_model(
            "POST", INTERFACE_ENDPOINT, Interface, payload=self._payload(request))

    def update_interface(self, interface_id: str, request: InterfaceRequest) -> Optional[Interface]:
        logger.info(f"Updating interface {interface_id}")
        return self._write_model(
            "PATCH", INTERFACE_ENDPOINT, Interface,
            payload=self._payload(request, id=interface_id))

    def delete_interface(self, interface_id: str):
        logger.info(f"Deleting interface {interface_id}")
        self.client.delete(INTERFACE_ENDPOINT, params={"if": interface_id})

    # --- VLANs ---

    def list_vlans(self) -> List[VLAN]:
        return self._list_models(VLANS_ENDPOINT, VLAN)

    def get_vlan(self, vlan_id: int) -> Optional[VLAN]:
        return self._get_model(VLAN_ENDPOINT, VLAN, params={"id": str(vlan_id)})

    def create_vlan(self, request: VLANRequest) -> Optional[VLAN]:
        logger.info(f"Creating VLAN {request.tag} on {request.if_}")
        return self._write_model("POST", VLAN_ENDPOINT, VLAN, payload=self._payload(request))

    def update_vlan(self, vlan_id: int, request: VLANRequest) -> Optional[VLAN]:
        logger.info(f"Updating VLAN {vlan_id}")
        return self._write_model(
            "PATCH", VLAN_ENDPOINT, VLAN, payload=self._payload(request, id=vlan_id))

    def delete_vlan(self, vlan_id: int):
        logger.info(f"Deleting VLAN {vlan_id}")
        self.client.delete(VLAN_ENDPOINT, params={"id": str(vlan_id)})

    # --- Interface groups ---

    def list_interface_groups(self) -> List[InterfaceGroup]:
        return self._list_models(GROUPS_ENDPOINT, InterfaceGroup)

    def replace_interface_groups(
        self, groups: List[InterfaceGroupRequest]
    ) -> List[InterfaceGroup]:
        """
        Replace every interface group with ``groups``.

        Groups that are not in the list are removed.

        Returns:
            List[InterfaceGroup]: The resulting groups.
        """
        logger.info(f"Replacing interface groups with {len(groups)} group(s)")
        response = self.client.put(
            GROUPS_ENDPOINT, json_payload=[group.to_dict() for group in groups])
        return InterfaceGroup.from_api_list(self._data(response))

    def get_interface_group(self, group_id: int) -> Optional[InterfaceGroup]:
        return self._get_model(GROUP_ENDPOINT, InterfaceGroup, params={"id": str(group_id)})

    def create_interface_group(self, request: InterfaceGroupRequest) -> Optional[InterfaceGroup]:
        logger.info(f"Creating interface group {request.ifname}")
        return self._write_model(
            "POST", GROUP_ENDPOINT, InterfaceGroup, payload=self._payload(request))

    def update_interface_group(
        self, group_id: int, request: InterfaceGroupRequest
    ) -> Optional[InterfaceGroup]:
        logger.info(f"Updating interface group {group_id}")
        return self._write_model(
            "PATCH", GROUP_ENDPOINT, InterfaceGroup, payload=self._payload(request, id=group_id))

    def delete_interface_group(self, group_id: int):
        logger.info(f"Deleting interface group {group_id}")
        self.client.delete(GROUP_ENDPOINT, params={"id": str(group_id)})

    # --- Bridges ---

    def list_interface_bridges(self) -> List[InterfaceBridge]:
        return self._list_models(BRIDGES_ENDPOINT, InterfaceBridge)

    def get_interface_bridge(self, bridge_id: str) -> Optional[InterfaceBridge]:
        return self._get_model(BRIDGE_ENDPOINT, InterfaceBridge, params={"id": bridge_id})

    def create_interface_bridge(
        self, request: InterfaceBridgeRequest
    ) -> Optional[InterfaceBridge]:
        logger.info(f"Creating bridge with members {request.members}")
        return self._write_model(
            "POST", BRIDGE_ENDPOINT, InterfaceBridge, payload=self._payload(request))

    def update_interface_bridge(
        self, bridge_id: str, request: InterfaceBridgeRequest
    ) -> Optional[InterfaceBridge]:
        logger.info(f"Updating bridge {bridge_id}")
        return self._write_model(
            "PATCH", BRIDGE_ENDPOINT, InterfaceBridge, payload=self._payload(request, id=bridge_id))

    def delete_interface_bridge(self, bridge_id: str):
        logger.info(f"Deleting bridge {bridge_id}")
        self.client.delete(BRIDGE_ENDPOINT, params={"id": bridge_id})

    def apply(self):
        """Apply pending interface changes."""
        self.client.post(INTERFACE_APPLY_ENDPOINT)
