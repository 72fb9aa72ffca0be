from dataclasses import dataclass
from typing import Optional

from .base import PfSenseModel, api_field


@dataclass
class AccessToken(PfSenseModel):
    """A bearer token issued by ``/api/v1/access_token``."""

    token: Optional[str] = api_field(default=None, repr=False)
