from typing import Dict, Optional, Type


class PfSenseError(Exception):
    """Base exception for pfSense API client errors."""

    pass


class PfSenseAuthenticationError(PfSenseError):
    """Raised when credentials are missing or a token cannot be obtained."""

    pass


class PfSenseAPIError(PfSenseError):
    """
    Raised when an API call to the pfSense appliance fails.

    Transport failures carry ``status_code=None``. Error responses carry the
    HTTP status and, when the body could be parsed, the ``code``,
    ``return_code`` and ``message`` fields of the pfSense response envelope.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
        return_code: Optional[int] = None,
        api_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.return_code = return_code
        self.api_message = api_message


class PfSenseBadRequestError(PfSenseAPIError):
    """HTTP 400."""


class PfSenseUnauthorizedError(PfSenseAPIError, PfSenseAuthenticationError):
    """HTTP 401."""


class PfSenseForbiddenError(PfSenseAPIError):
    """HTTP 403."""


class PfSenseNotFoundError(PfSenseAPIError):
    """HTTP 404."""


class PfSenseMethodNotAllowedError(PfSenseAPIError):
    """HTTP 405."""


class PfSenseNotAcceptableError(PfSenseAPIError):
    """HTTP 406."""


class PfSenseConflictError(PfSenseAPIError):
    """HTTP 409."""


class PfSenseUnsupportedMediaTypeError(PfSenseAPIError):
    """HTTP 415."""


class PfSenseUnprocessableEntityError(PfSenseAPIError):
    """HTTP 422."""


class PfSenseFailedDependencyError(PfSenseAPIError):
    """HTTP 424."""


class PfSenseInternalServerError(PfSenseAPIError):
    """HTTP 500."""


class PfSenseServiceUnavailableError(PfSenseAPIError):
    """HTTP 503."""


class PfSenseNon2xxError(PfSenseAPIError):
    """Raised for a non-2xx response whose body is not a pfSense error envelope."""


class PfSenseDataError(PfSenseError):
    """Raised when there is an error parsing data returned by pfSense."""

    pass


class PfSenseModelError(PfSenseError):
    """Raised when a model instance cannot be built from mapped API fields."""

    pass


class PfSenseObjectNotFoundError(PfSenseError):
    """Raised when a client-side lookup (e.g. a static mapping by MAC) finds nothing."""

    pass


RESPONSE_CODE_ERRORS: Dict[int, Type[PfSenseAPIError]] = {
    400: PfSenseBadRequestError,
    401: PfSenseUnauthorizedError,
    403: PfSenseForbiddenError,
    404: PfSenseNotFoundError,
    405: PfSenseMethodNotAllowedError,
    406: PfSenseNotAcceptableError,
    409: PfSenseConflictError,
    415: PfSenseUnsupportedMediaTypeError,
    422: PfSenseUnprocessableEntityError,
    424: PfSenseFailedDependencyError,
    500: PfSenseInternalServerError,
    503: PfSenseServiceUnavailableError,
}
