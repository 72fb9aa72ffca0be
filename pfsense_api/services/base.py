"""
Shared plumbing for the pfSense API services.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar

from ..exceptions import PfSenseDataError
from ..logging import get_logger
from ..models.base import PfSenseModel

if TYPE_CHECKING:
    from ..api_client import PfSenseClient

logger = get_logger(__name__)

M = TypeVar("M", bound=PfSenseModel)


class BaseService:
    """
    Base class for a group of related API endpoints.

    Services hold a reference to the client and send everything through
    :meth:`PfSenseClient.request`, so authentication, token renewal and error
    mapping apply uniformly.
    """

    def __init__(self, client: "PfSenseClient"):
        self.client = client

    @staticmethod
    def _data(response: Dict[str, Any]) -> Any:
        return response.get("data")

    @staticmethod
    def _data_object(response: Dict[str, Any], endpoint: str) -> Dict[str, Any]:
        """Return ``data`` as a JSON object, treating a missing value as empty."""
        data = response.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            error_msg = (
                f"Unexpected data format for {endpoint}: "
                f"expected a JSON object, got {type(data).__name__}"
            )
            logger.error(error_msg)
            raise PfSenseDataError(error_msg)
        return data

    @staticmethod
    def _payload(request: Optional[PfSenseModel] = None, **extra: Any) -> Dict[str, Any]:
        """Serialize a request model and merge the extra keys (``apply``, ``id``...) in."""
        payload = request.to_dict() if request is not None else {}
        payload.update(extra)
        return payload

    def _get_model(
        self, endpoint: str, model_class: Type[M], params: Optional[Dict[str, str]] = None
    ) -> Optional[M]:
        response = self.client.get(endpoint, params=params)
        return model_class.from_api(self._data(response))

    def _list_models(
        self, endpoint: str, model_class: Type[M], params: Optional[Dict[str, str]] = None
    ) -> List[M]:
        response = self.client.get(endpoint, params=params)
        return model_class.from_api_list(self._data(response))

    def _write_model(
        self,
        method: str,
        endpoint: str,
        model_class: Type[M],
        payload: Any = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Optional[M]:
        """Send a write request and build ``model_class`` from the returned ``data``."""
        response = self.client.request(method, endpoint, params=params, json_payload=payload)
        return model_class.from_api(self._data(response))
