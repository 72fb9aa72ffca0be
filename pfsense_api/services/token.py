from ..exceptions import PfSenseDataError
from ..logging import get_logger
from ..models.token import AccessToken
from .base import BaseService

logger = get_logger(__name__)

TOKEN_ENDPOINT = "api/v1/access_token"


class TokenService(BaseService):
    """Access token endpoint used by JWT authentication."""

    def create_access_token(self) -> str:
        """
        Request a new bearer token for the configured local user.

        The call is always made with HTTP basic auth.

        Returns:
            str: The bearer token.

        Raises:
            PfSenseAuthenticationError: If the username or password is missing.
            PfSenseAPIError: If the appliance rejects the request.
            PfSenseDataError: If the response does not carry a token.
        """
        response = self.client.post(TOKEN_ENDPOINT)
        access_token = AccessToken.from_api(self._data(response))
        if access_token is None or not access_token.token:
            error_msg = f"No access token in response from {TOKEN_ENDPOINT}"
            logger.error(error_msg)
            raise PfSenseDataError(error_msg)
        return access_token.token
