import logging
import json
from typing import Any, Dict, Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, returns the package root logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("pfsense_api")
    elif name.startswith("pfsense_api"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"pfsense_api.{name}")


SENSITIVE_HEADERS = ("authorization", "x-api-key")


def sanitize_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    """Return a copy of ``headers`` with credential-bearing values redacted."""
    if not headers:
        return {}
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


TRUNCATED = "... [truncated]"


def _shorten(value: Any, max_length: Optional[int]) -> str:
    """Render a JSON value for a log line, cut to ``max_length`` characters (None keeps it whole)."""
    if isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value)
        except (TypeError, ValueError):
            text = f"<{type(value).__name__}>"
    if max_length is not None and len(text) > max_length:
        text = text[:max_length] + TRUNCATED
    return text


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    obj_id: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log keys returned by pfSense that the model does not map.

    New pfSense REST package releases add keys regularly; listing them by
    name makes it easy to spot fields worth adding to a model.

    Args:
        logger: Logger to use
        obj_name: Name of the model type (e.g., 'FirewallRule', 'DHCPLease').
        obj_id: Identifier for the specific object (e.g., tracker, MAC address).
        extra_fields: Unmapped API keys and their raw values.
        max_length: Maximum length of each value in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    details = ", ".join(
        f"{key}={_shorten(value, max_length)}" for key, value in sorted(extra_fields.items())
    )
    logger.debug(
        f"{obj_name} {obj_id} has {len(extra_fields)} unmapped API key(s): {details}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Dict[str, Any],
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log a decoded pfSense response envelope at DEBUG.

    The envelope fields (``status``, ``code``, ``return``, ``message``) go on
    the first line and the ``data`` member follows, cut to ``max_length``
    characters unless ``truncate`` is False.

    Args:
        logger: Logger to use
        url: The API URL that was called.
        response_data: The response envelope as a dictionary.
        status_code: HTTP status code.
        truncate: Whether to truncate a large ``data`` member. Default is True.
        max_length: Maximum length of ``data`` in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    summary = ", ".join(
        f"{key}={response_data[key]!r}"
        for key in ("status", "code", "return", "message")
        if key in response_data
    )
    data = _shorten(response_data.get("data"), max_length if truncate else None)
    logger.debug(f"API Response from {url} (Status: {status_code}) [{summary}]\ndata: {data}")
