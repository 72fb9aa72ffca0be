from dataclasses import dataclass
from typing import Optional

from .base import PfSenseModel, api_field


@dataclass
class ApiResponse(PfSenseModel):
    """The envelope wrapped around every pfSense API response."""

    status: Optional[str] = None
    code: Optional[int] = None
    return_code: Optional[int] = api_field("return")
    message: Optional[str] = None


@dataclass
class ErrorDefinition(ApiResponse):
    """A single entry of the appliance's error catalogue (``/api/v1/system/api/error``)."""
