from dataclasses import dataclass, field
from typing import List, Optional

from .base import PfSenseModel


@dataclass
class UserRequest(PfSenseModel):
    """
    Payload used to create or update a local user.

    ``expires``, ``authorizedkeys`` and ``ipsecpsk`` are only sent when set.
    """

    name: str = ""
    password: str = field(default="", repr=False)
    scope: str = ""
    priv: List[str] = field(default_factory=list)
    disabled: bool = False
    descr: str = ""
    expires: Optional[str] = None
    cert: List[str] = field(default_factory=list)
    authorizedkeys: Optional[str] = None
    ipsecpsk: Optional[str] = field(default=None, repr=False)


@dataclass
class User(UserRequest):
    id: Optional[int] = None
    uid: Optional[int] = None


@dataclass
class UserGroupRequest(PfSenseModel):
    name: str = ""
    scope: str = ""
    description: str = ""
    member: List[str] = field(default_factory=list)
    priv: List[str] = field(default_factory=list)


@dataclass
class UserGroup(UserGroupRequest):
    id: Optional[int] = None
    gid: Optional[int] = None
