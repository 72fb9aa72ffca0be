"""
Models for Unbound DNS resolver host overrides.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils import build_model_list, string_array
from .base import PfSenseModel, api_field


@dataclass
class UnboundHostOverrideAlias(PfSenseModel):
    host: str = ""
    domain: str = ""
    description: str = ""


def _alias_list(value: Any) -> List[UnboundHostOverrideAlias]:
    # pfSense sends "" when an override has no aliases, otherwise {"item": [...]}
    if value is None or value == "":
        return []
    if not isinstance(value, dict):
        raise ValueError(f"expected an alias object, got {value!r}")
    return build_model_list(UnboundHostOverrideAlias, value.get("item"))


def _alias_payload(aliases: List[UnboundHostOverrideAlias]) -> Dict[str, Any]:
    return {"item": list(aliases)}


@dataclass
class UnboundHostOverride(PfSenseModel):
    """
    A resolver host override (``host.domain`` answered with ``ip``).

    An override is identified by its host and domain; the appliance only
    addresses it by list position.
    """

    host: str = ""
    domain: str = ""
    ip: List[str] = api_field(default_factory=list, converter=string_array)
    description: str = api_field("descr", default="")
    aliases: Optional[List[UnboundHostOverrideAlias]] = api_field(
        converter=_alias_list, serializer=_alias_payload)
