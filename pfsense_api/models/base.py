"""
Shared base for pfSense models.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from ..utils import (
    API_FIELD,
    CONVERTER,
    SERIALIZER,
    build_model,
    build_model_list,
    model_to_payload,
)

M = TypeVar("M", bound="PfSenseModel")


def api_field(
    name: Optional[str] = None,
    converter: Optional[Callable[[Any], Any]] = None,
    serializer: Optional[Callable[[Any], Any]] = None,
    **kwargs,
):
    """
    Declare a dataclass field with pfSense API metadata.

    Args:
        name: The API key when it differs from the attribute name (e.g. ``"if"``).
        converter: Applied to the raw JSON value when building the model.
        serializer: Applied to the attribute value when building a request payload.
        **kwargs: Passed through to :func:`dataclasses.field` (``default``,
                  ``default_factory``, ``repr``...). Defaults to ``default=None``.
    """
    metadata = {}
    if name is not None:
        metadata[API_FIELD] = name
    if converter is not None:
        metadata[CONVERTER] = converter
    if serializer is not None:
        metadata[SERIALIZER] = serializer
    if "default" not in kwargs and "default_factory" not in kwargs:
        kwargs["default"] = None
    return field(metadata=metadata, **kwargs)


@dataclass
class PfSenseModel:
    """
    Base class for every pfSense request and response model.

    Fields returned by the appliance that a model does not define are kept in
    ``_extra_fields``. All model fields have defaults, so a missing key simply
    leaves the default in place.
    """

    _extra_fields: Dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls: Type[M], data: Optional[Dict[str, Any]]) -> Optional[M]:
        """Build an instance from a pfSense JSON object (None stays None)."""
        return build_model(cls, data)

    @classmethod
    def from_api_list(cls: Type[M], items: Optional[List[Any]]) -> List[M]:
        """Build instances from a pfSense JSON array (null yields an empty list)."""
        return build_model_list(cls, items)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using pfSense API key names, omitting attributes set to None."""
        return model_to_payload(self)
