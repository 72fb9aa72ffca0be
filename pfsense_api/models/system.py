"""
Models for the pfSense system endpoints (``/api/v1/system/...``).
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .base import PfSenseModel


@dataclass
class APIConfiguration(PfSenseModel):
    """
    The REST API package configuration as reported by the appliance.

    pfSense reports every value here as a string.
    """

    enable: Optional[str] = None
    persist: Optional[str] = None
    allowed_interfaces: Optional[str] = None
    authmode: Optional[str] = None
    content_type: Optional[str] = None
    jwt_exp: Optional[str] = None
    keyhash: Optional[str] = None
    keybytes: Optional[str] = None
    keys: Optional[str] = None
    access_list: Optional[str] = None


@dataclass
class APIConfigurationRequest(PfSenseModel):
    """Payload used to update the REST API package configuration."""

    access_list: List[str] = field(default_factory=list)
    allow_options: bool = False
    authmode: str = ""
    allowed_interfaces: List[str] = field(default_factory=list)
    custom_headers: List[Dict[str, str]] = field(default_factory=list)
    enable: bool = False
    enable_login_protection: bool = False
    log_successful_auth: bool = False
    hasync: bool = False
    hasync_hosts: List[str] = field(default_factory=list)
    hasync_password: str = field(default="", repr=False)
    hasync_username: str = ""
    jwt_exp: int = 0
    keybytes: int = 0
    keyhash: str = ""
    persist: bool = False
    readonly: bool = False


@dataclass
class APIVersion(PfSenseModel):
    current_version: Optional[str] = None
    latest_version: Optional[str] = None
    update_available: Optional[bool] = None


@dataclass
class ArpEntry(PfSenseModel):
    """A single entry of the ARP table."""

    ip: Optional[str] = None
    mac: Optional[str] = None
    interface: Optional[str] = None
    status: Optional[str] = None
    linktype: Optional[str] = None


@dataclass
class CACertificate(PfSenseModel):
    """A certificate authority installed on the system."""

    refid: Optional[str] = None
    descr: Optional[str] = None
    trust: Optional[str] = None
    randomserial: Optional[str] = None
    crt: Optional[str] = None
    prv: Optional[str] = field(default=None, repr=False)
    serial: Optional[str] = None


@dataclass
class CACertificateRequest(PfSenseModel):
    """
    Payload used to generate or import a certificate authority.

    ``method`` selects the operation: ``"existing"`` imports ``crt``/``prv``,
    ``"internal"`` generates a new CA from the ``dn_*`` fields, and
    ``"intermediate"`` signs one with ``caref``.
    """

    caref: str = ""
    crt: str = ""
    descr: str = ""
    digest_alg: str = ""
    dn_city: str = ""
    dn_commonname: str = ""
    dn_country: str = ""
    dn_organization: str = ""
    dn_organizationalunit: str = ""
    dn_state: str = ""
    ecname: str = ""
    keylen: int = 0
    keytype: str = ""
    lifetime: int = 0
    method: str = ""
    prv: str = field(default="", repr=False)
    randomserial: bool = False
    serial: int = 0
    trust: bool = False


@dataclass
class Certificate(PfSenseModel):
    """An SSL/TLS certificate installed on the system."""

    refid: Optional[str] = None
    descr: Optional[str] = None
    prv: Optional[str] = field(default=None, repr=False)
    crt: Optional[str] = None
    caref: Optional[str] = None


@dataclass
class CertificateAltName(PfSenseModel):
    """A subject alternative name; set exactly one of the fields."""

    dns: Optional[str] = None
    ip: Optional[str] = None
    uri: Optional[str] = None
    email: Optional[str] = None


@dataclass
class CertificateCreateRequest(PfSenseModel):
    """Payload used to generate or import a certificate."""

    active: bool = False
    altnames: List[CertificateAltName] = field(default_factory=list)
    caref: str = ""
    crt: str = ""
    descr: str = ""
    digest_alg: str = ""
    dn_city: str = ""
    dn_commonname: str = ""
    dn_country: str = ""
    dn_organization: str = ""
    dn_organizationalunit: str = ""
    dn_state: str = ""
    ecname: str = ""
    keylen: int = 0
    keytype: str = ""
    lifetime: int = 0
    method: str = ""
    prv: str = field(default="", repr=False)
    type: str = ""


@dataclass
class CertificateUpdateRequest(PfSenseModel):
    descr: str = ""
    prv: str = field(default="", repr=False)
    crt: str = ""
    active: bool = False


@dataclass
class DNSConfiguration(PfSenseModel):
    """System DNS settings. Used both as response and as update payload."""

    dnsserver: List[str] = field(default_factory=list)
    dnsallowoverride: bool = False
    dnslocalhost: bool = False


@dataclass
class SystemHostname(PfSenseModel):
    hostname: str = ""
    domain: str = ""


@dataclass
class EmailNotification(PfSenseModel):
    """SMTP notification settings as reported by the appliance (all strings)."""

    ipaddress: Optional[str] = None
    port: Optional[str] = None
    sslvalidate: Optional[str] = None
    timeout: Optional[str] = None
    notifyemailaddress: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    authentication_mechanism: Optional[str] = None
    fromaddress: Optional[str] = None
    disable: Optional[str] = None


@dataclass
class EmailNotificationRequest(PfSenseModel):
    authentication_mechanism: str = ""
    disabled: bool = False
    fromaddress: str = ""
    ipaddress: str = ""
    notifyemailaddress: str = ""
    password: str = field(default="", repr=False)
    port: int = 0
    ssl: bool = False
    sslvalidate: bool = False
    timeout: int = 0
    username: str = ""


@dataclass
class Package(PfSenseModel):
    name: Optional[str] = None
    version: Optional[str] = None
    installed_version: Optional[str] = None
    descr: Optional[str] = None
    installed: Optional[bool] = None
    update_available: Optional[bool] = None


@dataclass
class Tunable(PfSenseModel):
    """A sysctl tunable."""

    tunable: Optional[str] = None
    value: Optional[str] = None
    descr: Optional[str] = None
    modified: Optional[bool] = None


@dataclass
class TunableRequest(PfSenseModel):
    descr: str = ""
    tunable: str = ""
    value: str = ""


@dataclass
class Version(PfSenseModel):
    version: Optional[str] = None
    base: Optional[str] = None
    patch: Optional[str] = None
    buildtime: Optional[str] = None
    lastcommit: Optional[str] = None
    program: Optional[int] = None


@dataclass
class VersionUpgradeStatus(PfSenseModel):
    version: Optional[str] = None
    installed_version: Optional[str] = None
    pkg_version_compare: Optional[str] = None
