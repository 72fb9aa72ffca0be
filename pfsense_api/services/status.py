from typing import List, Optional

from ..exceptions import PfSenseDataError
from ..logging import get_logger
from ..models.status import GatewayStatus, InterfaceStatus, SystemStatus
from .base import BaseService

logger = get_logger(__name__)

SYSTEM_STATUS_ENDPOINT = "api/v1/status/system"
INTERFACE_STATUS_ENDPOINT = "api/v1/status/interface"
GATEWAY_STATUS_ENDPOINT = "api/v1/status/gateway"
FIREWALL_LOG_ENDPOINT = "api/v1/status/log/firewall"
SYSTEM_LOG_ENDPOINT = "api/v1/status/log/system"
DHCP_LOG_ENDPOINT = "api/v1/status/log/dhcp"


class StatusService(BaseService):
    """Read-only status and log endpoints."""

    def get_system_status(self) -> Optional[SystemStatus]:
        return self._get_model(SYSTEM_STATUS_ENDPOINT, SystemStatus)

    def list_interface_status(self) -> List[InterfaceStatus]:
        return self._list_models(INTERFACE_STATUS_ENDPOINT, InterfaceStatus)

    def list_gateway_status(self) -> List[GatewayStatus]:
        return self._list_models(GATEWAY_STATUS_ENDPOINT, GatewayStatus)

    def _log(self, endpoint: str) -> List[str]:
        data = self._data(self.client.get(endpoint))
        if data is None:
            return []
        if not isinstance(data, list):
            error_msg = f"Expected a list of log lines from {endpoint}, got {type(data).__name__}"
            logger.error(error_msg)
            raise PfSenseDataError(error_msg)
        return [str(line) for line in data]

    def firewall_log(self) -> List[str]:
        """Return the firewall (filter) log, one raw syslog line per entry."""
        return self._log(FIREWALL_LOG_ENDPOINT)

    def system_log(self) -> List[str]:
        return self._log(SYSTEM_LOG_ENDPOINT)

    def dhcp_log(self) -> List[str]:
        return self._log(DHCP_LOG_ENDPOINT)
