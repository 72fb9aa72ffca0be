import requests
import urllib3

from typing import Any, Dict, Optional, Tuple, Union

from .config import DEFAULT_TIMEOUT, AuthMode, PfSenseConfig
from .logging import get_logger, log_api_response, sanitize_headers
from .models.common import ApiResponse
from .services import (
    DHCPService,
    FirewallService,
    InterfaceService,
    RoutingService,
    StatusService,
    SystemService,
    TokenService,
    UnboundService,
    UserService,
)
from .services.system import API_ERROR_ENDPOINT
from .services.token import TOKEN_ENDPOINT
from .exceptions import (
    RESPONSE_CODE_ERRORS,
    PfSenseAPIError,
    PfSenseAuthenticationError,
    PfSenseDataError,
    PfSenseNon2xxError,
)

logger = get_logger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")

# Endpoints that must be called without credentials.
NO_AUTH_ENDPOINTS = frozenset({API_ERROR_ENDPOINT})

# Endpoints that always take the local user's credentials, whatever the auth mode.
LOCAL_AUTH_ENDPOINTS = frozenset({TOKEN_ENDPOINT})


class PfSenseClient:
    """
    Client for the pfSense REST API package.

    Requests are grouped into services that mirror the API sections::

        client = PfSenseClient.with_jwt_auth("https://192.168.1.1", "admin", "pfsense")
        for lease in client.dhcp.list_leases():
            print(lease.ip, lease.mac)

    Every service method funnels through :meth:`request`, which selects the
    credentials, sends the call, renews an expired bearer token once and maps
    error responses to the exceptions in :mod:`pfsense_api.exceptions`.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        auth_mode: Union[AuthMode, str] = AuthMode.NONE,
        username: Optional[str] = None,
        password: Optional[str] = None,
        jwt_token: Optional[str] = None,
        client_id: Optional[str] = None,
        client_token: Optional[str] = None,
        verify_ssl: Union[bool, str] = True,
        timeout: float = DEFAULT_TIMEOUT,
        config: Optional[PfSenseConfig] = None,
    ):
        """
        Initialize the pfSense client.

        No request is sent; with JWT authentication the bearer token is
        fetched on the first call that needs it.

        Args:
            host: Base URL of the appliance, e.g. ``https://192.168.1.1``.
            auth_mode: One of :class:`~pfsense_api.config.AuthMode` (or its value).
            username: Local user name for ``local`` and ``jwt`` modes.
            password: Local user password for ``local`` and ``jwt`` modes.
            jwt_token: Optional bearer token to start with in ``jwt`` mode.
            client_id: API client ID for ``token`` mode.
            client_token: API client token for ``token`` mode.
            verify_ssl: Whether to verify SSL certificates. Can be:
                       - True: Verify SSL certificates (default)
                       - False: Disable verification (common for appliances with
                         self-signed certificates)
                       - str: Path to a CA bundle file or directory
            timeout: Request timeout in seconds. Defaults to 5.
            config: A ready :class:`~pfsense_api.config.PfSenseConfig`. When given,
                    all other arguments are ignored.

        Raises:
            ValueError: If the configuration is invalid.
        """
        if config is None:
            config = PfSenseConfig(
                host=host,
                auth_mode=auth_mode,
                username=username,
                password=password,
                jwt_token=jwt_token,
                client_id=client_id,
                client_token=client_token,
                verify_ssl=verify_ssl,
                timeout=timeout,
            )
        self.config = config

        logger.debug(
            f"Initializing PfSenseClient with host: {config.host}, auth mode: {config.auth_mode.value}"
        )
        self.session = requests.Session()

        if not config.verify_ssl:
            logger.warning(
                "SSL certificate verification is disabled. This is not recommended for production use."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.token = TokenService(self)
        self.system = SystemService(self)
        self.status = StatusService(self)
        self.dhcp = DHCPService(self)
        self.interface = InterfaceService(self)
        self.routing = RoutingService(self)
        self.firewall = FirewallService(self)
        self.user = UserService(self)
        self.unbound = UnboundService(self)

    @classmethod
    def with_no_auth(cls, host: str, verify_ssl: Union[bool, str] = False,
                     timeout: float = DEFAULT_TIMEOUT) -> "PfSenseClient":
        """Create a client that sends no credentials."""
        return cls(host, auth_mode=AuthMode.NONE, verify_ssl=verify_ssl, timeout=timeout)

    @classmethod
    def with_local_auth(cls, host: str, username: str, password: str,
                        verify_ssl: Union[bool, str] = False,
                        timeout: float = DEFAULT_TIMEOUT) -> "PfSenseClient":
        """Create a client that authenticates every call with HTTP basic auth."""
        return cls(host, auth_mode=AuthMode.LOCAL, username=username, password=password,
                   verify_ssl=verify_ssl, timeout=timeout)

    @classmethod
    def with_jwt_auth(cls, host: str, username: str, password: str,
                      verify_ssl: Union[bool, str] = False,
                      timeout: float = DEFAULT_TIMEOUT) -> "PfSenseClient":
        """
        Create a client that authenticates with a bearer token.

        The token is requested from ``/api/v1/access_token`` with the local
        credentials on first use and renewed once whenever a call is rejected
        with 401.
        """
        return cls(host, auth_mode=AuthMode.JWT, username=username, password=password,
                   verify_ssl=verify_ssl, timeout=timeout)

    @classmethod
    def with_token_auth(cls, host: str, client_id: str, client_token: str,
                        verify_ssl: Union[bool, str] = False,
                        timeout: float = DEFAULT_TIMEOUT) -> "PfSenseClient":
        """Create a client that authenticates with an API client ID and token."""
        return cls(host, auth_mode=AuthMode.TOKEN, client_id=client_id,
                   client_token=client_token, verify_ssl=verify_ssl, timeout=timeout)

    def __enter__(self) -> "PfSenseClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    def get_token(self) -> str:
        """Return the cached bearer token, requesting a new one if none is cached."""
        if self.config.jwt_token:
            return self.config.jwt_token
        return self.generate_token()

    def generate_token(self) -> str:
        """
        Request a new bearer token and cache it, replacing any previous one.

        Raises:
            PfSenseAuthenticationError: If the local credentials are missing.
            PfSenseAPIError: If the appliance rejects the token request.
        """
        logger.debug(f"Requesting a new access token from {self.config.host}")
        token = self.token.create_access_token()
        self.config.jwt_token = token
        logger.info("Obtained a new access token.")
        return token

    def _build_url(self, endpoint: str) -> str:
        return f"{self.config.host}/{endpoint}"

    def _select_auth(
        self, endpoint: str, headers: Dict[str, str]
    ) -> Optional[Tuple[str, str]]:
        """
        Pick the credentials for ``endpoint``.

        Adds an ``Authorization`` header to ``headers`` for the token based
        modes and returns the basic auth tuple for local credentials.

        Raises:
            PfSenseAuthenticationError: If the endpoint needs local credentials
                                        that are not configured.
        """
        config = self.config
        if not config.auth_enabled or endpoint in NO_AUTH_ENDPOINTS:
            return None

        if endpoint in LOCAL_AUTH_ENDPOINTS:
            if not config.has_local_credentials:
                error_msg = f"Endpoint {endpoint} requires a username and password"
                logger.error(error_msg)
                raise PfSenseAuthenticationError(error_msg)
            return (config.username, config.password)

        if config.auth_mode is AuthMode.JWT:
            headers["Authorization"] = f"Bearer {self.get_token()}"
            return None
        if config.auth_mode is AuthMode.TOKEN:
            headers["Authorization"] = f"{config.client_id} {config.client_token}"
            return None
        return (config.username, config.password)

    def _send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        json_payload: Any = None,
    ) -> requests.Response:
        url = self._build_url(endpoint)
        headers = {"Accept": "application/json"}
        auth = self._select_auth(endpoint, headers)

        request_kwargs = {
            "headers": headers,
            "verify": self.config.verify_ssl,
            "timeout": self.config.timeout,
        }
        if auth is not None:
            request_kwargs["auth"] = auth
        if params:
            request_kwargs["params"] = params
        if json_payload is not None:
            request_kwargs["json"] = json_payload

        logger.debug(
            f"API {method} request to {url} (params: {params}, headers: {sanitize_headers(headers)})"
        )
        try:
            return self.session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {str(e)}"
            logger.error(error_msg)
            raise PfSenseAPIError(error_msg) from e

    def _invoke_api_call(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        json_payload: Any = None,
    ) -> requests.Response:
        """
        Send a request, renewing the bearer token once if it was rejected.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH or DELETE).
            endpoint: API path relative to the host, e.g. ``api/v1/firewall/rule``.
            params: Optional query parameters.
            json_payload: Optional JSON body (object or array).

        Returns:
            requests.Response: The final response, whatever its status.

        Raises:
            ValueError: If an unsupported HTTP method is given.
            PfSenseAPIError: If the request could not be sent.
            PfSenseAuthenticationError: If required credentials are missing.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        response = self._send(method, endpoint, params, json_payload)

        if (
            response.status_code == 401
            and self.config.auth_mode is AuthMode.JWT
            and endpoint not in NO_AUTH_ENDPOINTS
            and endpoint not in LOCAL_AUTH_ENDPOINTS
        ):
            logger.warning(
                f"Received 401 Unauthorized from {endpoint}. Renewing access token and retrying once..."
            )
            self.generate_token()
            response = self._send(method, endpoint, params, json_payload)
            if response.status_code == 401:
                logger.warning("Request still failed with 401 after renewing the access token.")

        return response

    def _process_api_response(
        self, response: requests.Response, endpoint: str
    ) -> Dict[str, Any]:
        """
        Turn a response into the decoded pfSense envelope.

        Args:
            response: Response from the API call
            endpoint: Endpoint that was called

        Returns:
            The response envelope; an empty dictionary for an empty body.

        Raises:
            PfSenseAPIError: A status specific subclass for non-2xx responses.
            PfSenseNon2xxError: For non-2xx responses without a pfSense envelope.
            PfSenseDataError: If a successful response is not a JSON object.
        """
        status_code = response.status_code
        if not 200 <= status_code < 300:
            raise self._build_error(response, endpoint)

        if not response.content:
            logger.debug(f"API call to {endpoint} returned an empty body (Status: {status_code})")
            return {}

        try:
            raw_data = response.json()
        except ValueError as e:
            error_msg = f"Failed to parse API response from {endpoint}: {e}"
            logger.error(error_msg)
            raise PfSenseDataError(error_msg) from e

        if not isinstance(raw_data, dict):
            error_msg = (
                f"Unexpected API response format for {endpoint}: "
                f"expected a JSON object, got {type(raw_data).__name__}"
            )
            logger.error(error_msg)
            raise PfSenseDataError(error_msg)

        log_api_response(logger, response.url or endpoint, raw_data, status_code)
        return raw_data

    def _build_error(self, response: requests.Response, endpoint: str) -> PfSenseAPIError:
        status_code = response.status_code
        try:
            raw_data = response.json()
        except ValueError:
            raw_data = None

        if not isinstance(raw_data, dict):
            error_msg = f"non 2xx response code received: {status_code}"
            logger.error(f"API call to {endpoint} failed: {error_msg}")
            return PfSenseNon2xxError(error_msg, status_code=status_code)

        envelope = ApiResponse.from_api(raw_data)
        error_class = RESPONSE_CODE_ERRORS.get(status_code, PfSenseAPIError)
        error_msg = f"{envelope.message or ''}, response code {status_code}"
        logger.error(f"API call to {endpoint} failed: {error_msg}")
        return error_class(
            error_msg,
            status_code=status_code,
            code=envelope.code,
            return_code=envelope.return_code,
            api_message=envelope.message,
        )

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, str]] = None,
        json_payload: Any = None,
    ) -> Dict[str, Any]:
        """
        Call an API endpoint and return the decoded response envelope.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH or DELETE).
            endpoint: API path relative to the host. A leading ``/`` is ignored.
            params: Optional query parameters (string values).
            json_payload: Optional JSON body.

        Returns:
            Dict[str, Any]: The envelope (``status``, ``code``, ``return``,
                            ``message`` and ``data``).

        Raises:
            PfSenseAPIError: If the request fails or the appliance answers with an error.
            PfSenseAuthenticationError: If required credentials are missing.
            PfSenseDataError: If the response cannot be parsed.
        """
        endpoint = endpoint.lstrip("/")
        response = self._invoke_api_call(method, endpoint, params, json_payload)
        return self._process_api_response(response, endpoint)

    def get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, params: Optional[Dict[str, str]] = None,
             json_payload: Any = None) -> Dict[str, Any]:
        return self.request("POST", endpoint, params=params, json_payload=json_payload)

    def put(self, endpoint: str, params: Optional[Dict[str, str]] = None,
            json_payload: Any = None) -> Dict[str, Any]:
        return self.request("PUT", endpoint, params=params, json_payload=json_payload)

    def patch(self, endpoint: str, params: Optional[Dict[str, str]] = None,
              json_payload: Any = None) -> Dict[str, Any]:
        return self.request("PATCH", endpoint, params=params, json_payload=json_payload)

    def delete(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return self.request("DELETE", endpoint, params=params)
