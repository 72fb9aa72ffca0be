"""
Unbound DNS resolver host overrides (``/api/v1/services/unbound/host_override``).
"""

from typing import List, Optional

from ..exceptions import PfSenseObjectNotFoundError
from ..logging import get_logger
from ..models.unbound import UnboundHostOverride
from ..utils import format_query_bool
from .base import BaseService

logger = get_logger(__name__)

HOST_OVERRIDE_ENDPOINT = "api/v1/services/unbound/host_override"


class UnboundService(BaseService):
    """DNS resolver host overrides."""

    def list_host_overrides(self) -> List[UnboundHostOverride]:
        return self._list_models(HOST_OVERRIDE_ENDPOINT, UnboundHostOverride)

    def _host_override_index(self, host: str, domain: str) -> int:
        """
        Find the position of the override for ``host``.``domain``.

        Raises:
            PfSenseObjectNotFoundError: If there is no such override.
        """
        for index, override in enumerate(self.list_host_overrides()):
            if override.host == host and override.domain == domain:
                return index

        error_msg = f"Unable to find host override with host {host}, domain {domain}"
        logger.warning(error_msg)
        raise PfSenseObjectNotFoundError(error_msg)

    def create_host_override(
        self, override: UnboundHostOverride, apply: bool = False
    ) -> Optional[UnboundHostOverride]:
        logger.info(f"Creating host override {override.host}.{override.domain} -> {override.ip}")
        return self._write_model(
            "POST", HOST_OVERRIDE_ENDPOINT, UnboundHostOverride,
            payload=self._payload(override, apply=apply))

    def update_host_override(
        self, override: UnboundHostOverride, apply: bool = False
    ) -> Optional[UnboundHostOverride]:
        """
        Update the override with the same host and domain as ``override``.

        Raises:
            PfSenseObjectNotFoundError: If there is no such override.
        """
        override_id = self._host_override_index(override.host, override.domain)
        logger.info(f"Updating host override {override.host}.{override.domain} (id {override_id})")
        return self._write_model(
            "PUT", HOST_OVERRIDE_ENDPOINT, UnboundHostOverride,
            payload=self._payload(override, apply=apply, id=str(override_id)))

    def delete_host_override(self, host: str, domain: str, apply: bool = False):
        """
        Delete the override for ``host``.``domain``.

        Raises:
            PfSenseObjectNotFoundError: If there is no such override.
        """
        override_id = self._host_override_index(host, domain)
        logger.info(f"Deleting host override {host}.{domain} (id {override_id})")
        self.client.delete(
            HOST_OVERRIDE_ENDPOINT,
            params={"id": str(override_id), "apply": format_query_bool(apply)},
        )
