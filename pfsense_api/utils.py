"""
Utility functions for the pfSense API package.

Covers the translation between pfSense JSON objects and the dataclass models:
API key to attribute mapping, converters for the value quirks of the pfSense
API, and payload serialization.
"""

import dataclasses
import re
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from .logging import get_logger, log_extra_fields
from .exceptions import PfSenseDataError, PfSenseModelError

logger = get_logger(__name__)

T = TypeVar("T")

API_FIELD = "pfsense_api_field"
CONVERTER = "pfsense_converter"
SERIALIZER = "pfsense_serializer"
EXTRA_FIELDS = "_extra_fields"

_ID_ATTRIBUTES = ("id", "tracker", "refid", "name", "mac", "host", "tunable")
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def get_api_field_mapping(model_class: Type) -> Dict[str, str]:
    """
    Create a mapping between API field names and model attribute names.

    Examines dataclass fields with metadata to find mappings between
    API field names (like 'max-src-nodes' or 'if') and Python attribute
    names (like 'max_src_nodes' or 'if_').

    Args:
        model_class: The dataclass model to examine for field mappings

    Returns:
        Dictionary mapping pfSense API field names to Python model attribute names
    """
    if not dataclasses.is_dataclass(model_class):
        return {}

    field_mapping = {}

    for field in dataclasses.fields(model_class):
        if API_FIELD in field.metadata:
            field_mapping[field.metadata[API_FIELD]] = field.name

    return field_mapping


def map_api_data_to_model(
    data: Dict[str, Any], model_class: Type
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Maps API data to model fields, separating model fields from extra fields.

    This function handles:
    - Direct field matches
    - Fields renamed through ``pfsense_api_field`` metadata
    - Value conversion through ``pfsense_converter`` metadata
    - Extra fields preservation

    Args:
        data: Input dictionary from API response
        model_class: The dataclass model to map data to

    Returns:
        Tuple containing (model_fields, extra_fields) where:
            - model_fields: Dictionary of converted values keyed by attribute name
            - extra_fields: Dictionary of fields the model does not define

    Raises:
        PfSenseDataError: If a converter rejects a value.
    """
    model_attrs = {
        f.name: f
        for f in dataclasses.fields(model_class)
        if f.init and f.name != EXTRA_FIELDS
    }
    field_map = get_api_field_mapping(model_class)

    model_fields = {}
    extra_fields = {}

    for api_key, value in data.items():
        mapped_key = None

        if api_key in field_map:
            mapped_key = field_map[api_key]
        elif api_key in model_attrs and API_FIELD not in model_attrs[api_key].metadata:
            mapped_key = api_key

        if mapped_key is None:
            extra_fields[api_key] = value
            continue

        converter = model_attrs[mapped_key].metadata.get(CONVERTER)
        if converter is not None:
            try:
                value = converter(value)
            except (TypeError, ValueError) as e:
                error_msg = (
                    f"Invalid value for {model_class.__name__}.{mapped_key}: {value!r} ({e})")
                logger.error(error_msg)
                raise PfSenseDataError(error_msg) from e

        model_fields[mapped_key] = value

    return model_fields, extra_fields


def build_model(model_class: Type[T], data: Optional[Dict[str, Any]]) -> Optional[T]:
    """
    Build a single model instance from a pfSense JSON object.

    Args:
        model_class: The dataclass model to build
        data: The JSON object, or None

    Returns:
        The model instance with unknown keys stored in ``_extra_fields``,
        or None when ``data`` is None.

    Raises:
        PfSenseDataError: If ``data`` is not a JSON object or a value cannot be converted.
        PfSenseModelError: If the model cannot be instantiated from the mapped fields.
    """
    if data is None:
        return None
    if not isinstance(data, dict):
        error_msg = (
            f"Expected a JSON object for {model_class.__name__}, got {type(data).__name__}")
        logger.error(error_msg)
        raise PfSenseDataError(error_msg)

    model_fields, extra_fields = map_api_data_to_model(data, model_class)
    try:
        instance = model_class(**model_fields)
    except TypeError as e:
        error_msg = f"Error creating {model_class.__name__} from data: {data}. Error: {e}"
        logger.error(error_msg)
        raise PfSenseModelError(error_msg) from e

    if hasattr(instance, EXTRA_FIELDS):
        setattr(instance, EXTRA_FIELDS, extra_fields)
    if extra_fields:
        log_extra_fields(logger, model_class.__name__, _describe(instance), extra_fields)
    return instance


def build_model_list(model_class: Type[T], items: Optional[List[Any]]) -> List[T]:
    """
    Build a list of model instances from a JSON array.

    A null array yields an empty list.

    Raises:
        PfSenseDataError: If ``items`` is not a JSON array.
    """
    if items is None:
        return []
    if not isinstance(items, list):
        error_msg = (
            f"Expected a JSON array of {model_class.__name__}, got {type(items).__name__}")
        logger.error(error_msg)
        raise PfSenseDataError(error_msg)
    return [build_model(model_class, item) for item in items]


def model_to_payload(model: Any) -> Dict[str, Any]:
    """
    Serialize a dataclass model into a request payload.

    Attribute names are translated back to pfSense API field names and
    attributes left at None are omitted. Nested models and lists of models
    are serialized recursively. ``_extra_fields`` is never sent.

    Args:
        model: A dataclass instance

    Returns:
        The JSON-ready dictionary
    """
    payload = {}
    for field in dataclasses.fields(model):
        if field.name == EXTRA_FIELDS:
            continue

        value = getattr(model, field.name)
        if value is None:
            continue

        serializer = field.metadata.get(SERIALIZER)
        if serializer is not None:
            value = serializer(value)

        payload[field.metadata.get(API_FIELD, field.name)] = _serialize_value(value)
    return payload


def _serialize_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return model_to_payload(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize_value(item) for key, item in value.items()}
    return value


def _describe(instance: Any) -> str:
    for attr in _ID_ATTRIBUTES:
        value = getattr(instance, attr, None)
        if value not in (None, ""):
            return str(value)
    return "<unidentified>"


def json_int(value: Any) -> int:
    """
    Convert a JSON number or numeric string into an int.

    pfSense returns many integer settings as strings (``"7200"``).

    Only plain ASCII decimal strings with an optional sign are accepted, so
    Python-only spellings such as ``"1_000"`` are rejected.

    Raises:
        ValueError: If the value is neither an integer nor a numeric string.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _DECIMAL_INT.fullmatch(value.strip()):
        return int(value.strip())
    raise ValueError(f"expected an integer, got {value!r}")


def optional_int(value: Any) -> Optional[int]:
    """Like :func:`json_int`, but an empty string or null means "not set"."""
    if value is None or value == "":
        return None
    return json_int(value)


def true_if_present(value: Any) -> bool:
    """
    pfSense marks some flags as set by including the key, usually with an
    empty string as its value. Any value at all means True; an absent key
    keeps the model default.
    """
    return True


def string_array(value: Any) -> List[str]:
    """
    Split a pfSense comma separated list (``"10.0.0.1,10.0.0.2"``) into a list.

    An empty string becomes an empty list. A JSON array is returned as a list
    of strings.
    """
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str):
        return value.split(",")
    raise ValueError(f"expected a comma separated string, got {value!r}")


def nested_model(model_class: Type[T]) -> Callable[[Any], Optional[T]]:
    """Converter that builds a nested model from a JSON object."""

    def convert(value: Any) -> Optional[T]:
        return build_model(model_class, value)

    return convert


def nested_model_list(model_class: Type[T]) -> Callable[[Any], List[T]]:
    """Converter that builds a list of nested models from a JSON array."""

    def convert(value: Any) -> List[T]:
        return build_model_list(model_class, value)

    return convert


def normalize_mac(mac_address: str) -> str:
    """
    Normalize MAC address to lower case colon-separated format.

    Args:
        mac_address: MAC address string in any format (with or without separators).

    Returns:
        str: MAC address with colons between each pair of characters.
    """
    mac_clean = (
        mac_address.replace(":", "").replace("-", "").replace(".", "").lower()
    )

    return ":".join(mac_clean[i: i + 2] for i in range(0, len(mac_clean), 2))


def format_query_bool(value: bool) -> str:
    """Format a boolean the way pfSense expects it in a query string."""
    return "true" if value else "false"
