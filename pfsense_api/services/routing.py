from typing import List, Optional

from ..exceptions import PfSenseDataError
from ..logging import get_logger
from ..models.routing import DefaultGatewayRequest, Gateway, GatewayRequest
from .base import BaseService

logger = get_logger(__name__)

GATEWAY_ENDPOINT = "api/v1/routing/gateway"
DEFAULT_GATEWAY_ENDPOINT = "api/v1/routing/gateway/default"
ROUTING_APPLY_ENDPOINT = "api/v1/routing/apply"


class RoutingService(BaseService):
    """Gateway management."""

    def list_gateways(self) -> List[Gateway]:
        """
        List the configured gateways.

        pfSense returns the gateways as an object keyed by gateway name; the
        values are returned in the order the appliance sent them.

        Raises:
            PfSenseDataError: If ``data`` is not a JSON object.
        """
        data = self.client.get(GATEWAY_ENDPOINT).get("data")
        if data is None:
            return []
        if not isinstance(data, dict):
            error_msg = (
                f"Expected gateways keyed by name from {GATEWAY_ENDPOINT}, "
                f"got {type(data).__name__}"
            )
            logger.error(error_msg)
            raise PfSenseDataError(error_msg)
        return Gateway.from_api_list(list(data.values()))

    def create_gateway(self, request: GatewayRequest) -> Optional[Gateway]:
        logger.info(f"Creating gateway {request.name} ({request.gateway}) on {request.interface}")
        return self._write_model("POST", GATEWAY_ENDPOINT, Gateway, payload=self._payload(request))

    def update_gateway(self, request: GatewayRequest) -> Optional[Gateway]:
        logger.info(f"Updating gateway {request.name}")
        return self._write_model("PUT", GATEWAY_ENDPOINT, Gateway, payload=self._payload(request))

    def delete_gateway(self, gateway_id: int):
        logger.info(f"Deleting gateway {gateway_id}")
        self.client.delete(GATEWAY_ENDPOINT, params={"id": str(gateway_id)})

    def set_default_gateway(self, request: DefaultGatewayRequest):
        logger.info(
            f"Setting default gateways (IPv4: {request.defaultgw4}, IPv6: {request.defaultgw6})")
        self.client.put(DEFAULT_GATEWAY_ENDPOINT, json_payload=self._payload(request))

    def apply(self):
        """Apply pending routing changes."""
        self.client.post(ROUTING_APPLY_ENDPOINT)
