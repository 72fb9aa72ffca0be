"""
System endpoints (``/api/v1/system/...``): API package settings, ARP table,
certificates, DNS, hostname, notifications, packages, tunables and version.
"""

from typing import Dict, List, Optional

from ..logging import get_logger
from ..models.common import ErrorDefinition
from ..models.system import (
    APIConfiguration,
    APIConfigurationRequest,
    APIVersion,
    ArpEntry,
    CACertificate,
    CACertificateRequest,
    Certificate,
    CertificateCreateRequest,
    CertificateUpdateRequest,
    DNSConfiguration,
    EmailNotification,
    EmailNotificationRequest,
    Package,
    SystemHostname,
    Tunable,
    TunableRequest,
    Version,
    VersionUpgradeStatus,
)
from ..utils import format_query_bool
from .base import BaseService

logger = get_logger(__name__)

API_ENDPOINT = "api/v1/system/api"
API_VERSION_ENDPOINT = "api/v1/system/api/version"
API_ERROR_ENDPOINT = "api/v1/system/api/error"
ARP_ENDPOINT = "api/v1/system/arp"
CA_CERTIFICATE_ENDPOINT = "api/v1/system/ca"
CERTIFICATE_ENDPOINT = "api/v1/system/certificate"
DNS_ENDPOINT = "api/v1/system/dns"
DNS_SERVER_ENDPOINT = "api/v1/system/dns/server"
HALT_ENDPOINT = "api/v1/system/halt"
HOSTNAME_ENDPOINT = "api/v1/system/hostname"
REBOOT_ENDPOINT = "api/v1/system/reboot"
EMAIL_NOTIFICATION_ENDPOINT = "api/v1/system/notifications/email"
PACKAGE_ENDPOINT = "api/v1/system/package"
TUNABLE_ENDPOINT = "api/v1/system/tunable"
VERSION_ENDPOINT = "api/v1/system/version"
VERSION_UPGRADE_ENDPOINT = "api/v1/system/version/upgrade"


class SystemService(BaseService):
    """System configuration endpoints."""

    # --- API package ---

    def get_api_configuration(self) -> Optional[APIConfiguration]:
        return self._get_model(API_ENDPOINT, APIConfiguration)

    def update_api_configuration(self, configuration: APIConfigurationRequest):
        """Replace the REST API package settings."""
        logger.info("Updating API configuration")
        self.client.put(API_ENDPOINT, json_payload=self._payload(configuration))

    def get_api_version(self) -> Optional[APIVersion]:
        return self._get_model(API_VERSION_ENDPOINT, APIVersion)

    def get_error_definitions(self) -> Dict[str, ErrorDefinition]:
        """
        Fetch the catalogue of API return codes.

        This endpoint is always called without credentials.

        Returns:
            Dict[str, ErrorDefinition]: Error definitions keyed by return code.
        """
        data = self._data_object(self.client.get(API_ERROR_ENDPOINT), API_ERROR_ENDPOINT)
        return {code: ErrorDefinition.from_api(definition) for code, definition in data.items()}

    # --- ARP ---

    def list_arp_table(self) -> List[ArpEntry]:
        return self._list_models(ARP_ENDPOINT, ArpEntry)

    def delete_arp_entry(self, ip: str):
        logger.info(f"Deleting ARP entry {ip}")
        self.client.delete(ARP_ENDPOINT, params={"ip": ip})

    # --- Certificates ---

    def _certificate_list(self, endpoint: str, key: str, model_class):
        data = self._data_object(self.client.get(endpoint), endpoint)
        return model_class.from_api_list(data.get(key))

    def list_ca_certificates(self) -> List[CACertificate]:
        """
        List the certificate authorities.

        pfSense nests the list under ``data.ca``.
        """
        return self._certificate_list(CA_CERTIFICATE_ENDPOINT, "ca", CACertificate)

    def create_ca_certificate(self, request: CACertificateRequest) -> Optional[CACertificate]:
        logger.info(f"Creating CA certificate '{request.descr}'")
        return self._write_model(
            "POST", CA_CERTIFICATE_ENDPOINT, CACertificate, payload=self._payload(request))

    def delete_ca_certificate(self, refid: str):
        logger.info(f"Deleting CA certificate {refid}")
        self.client.delete(CA_CERTIFICATE_ENDPOINT, params={"refid": refid})

    def list_certificates(self) -> List[Certificate]:
        """
        List the certificates.

        pfSense nests the list under ``data.cert``.
        """
        return self._certificate_list(CERTIFICATE_ENDPOINT, "cert", Certificate)

    def create_certificate(self, request: CertificateCreateRequest) -> Optional[Certificate]:
        logger.info(f"Creating certificate '{request.descr}'")
        return self._write_model(
            "POST", CERTIFICATE_ENDPOINT, Certificate, payload=self._payload(request))

    def update_certificate(
        self, refid: str, request: CertificateUpdateRequest
    ) -> Optional[Certificate]:
        """
        Update the certificate identified by ``refid``.

        Args:
            refid: Reference ID of the certificate to update.
            request: New certificate settings.

        Returns:
            The updated certificate.
        """
        logger.info(f"Updating certificate {refid}")
        return self._write_model(
            "PUT", CERTIFICATE_ENDPOINT, Certificate,
            payload=self._payload(request, refid=refid))

    def delete_certificate(self, refid: str):
        logger.info(f"Deleting certificate {refid}")
        self.client.delete(CERTIFICATE_ENDPOINT, params={"refid": refid})

    # --- DNS ---

    def get_dns_configuration(self) -> Optional[DNSConfiguration]:
        return self._get_model(DNS_ENDPOINT, DNSConfiguration)

    def update_dns_configuration(self, configuration: DNSConfiguration):
        logger.info(f"Updating DNS configuration (servers: {configuration.dnsserver})")
        self.client.put(DNS_ENDPOINT, json_payload=self._payload(configuration))

    def add_dns_servers(self, servers: List[str]):
        """Append ``servers`` to the system DNS server list."""
        logger.info(f"Adding DNS servers {servers}")
        self.client.post(DNS_SERVER_ENDPOINT, json_payload={"dnsserver": list(servers)})

    def delete_dns_server(self, server: str):
        logger.info(f"Deleting DNS server {server}")
        self.client.delete(DNS_SERVER_ENDPOINT, params={"dnsserver": server})

    # --- Power and hostname ---

    def halt(self):
        """Shut the appliance down."""
        logger.warning(f"Halting {self.client.config.host}")
        self.client.post(HALT_ENDPOINT)

    def reboot(self):
        logger.warning(f"Rebooting {self.client.config.host}")
        self.client.post(REBOOT_ENDPOINT)

    def get_hostname(self) -> Optional[SystemHostname]:
        return self._get_model(HOSTNAME_ENDPOINT, SystemHostname)

    def update_hostname(self, hostname: SystemHostname):
        logger.info(f"Setting hostname to {hostname.hostname}.{hostname.domain}")
        self.client.put(HOSTNAME_ENDPOINT, json_payload=self._payload(hostname))

    # --- Notifications ---

    def get_email_notification(self) -> Optional[EmailNotification]:
        return self._get_model(EMAIL_NOTIFICATION_ENDPOINT, EmailNotification)

    def update_email_notification(self, request: EmailNotificationRequest):
        logger.info("Updating email notification settings")
        self.client.put(EMAIL_NOTIFICATION_ENDPOINT, json_payload=self._payload(request))

    # --- Packages ---

    def list_packages(self, all: bool = False) -> List[Package]:
        """
        List packages.

        Args:
            all: If True, list every package available from the repository
                 instead of only the installed ones.
        """
        return self._list_models(PACKAGE_ENDPOINT, Package, params={"all": format_query_bool(all)})

    def install_package(self, name: str):
        logger.info(f"Installing package {name}")
        self.client.post(PACKAGE_ENDPOINT, json_payload={"name": name})

    def uninstall_package(self, name: str):
        logger.info(f"Uninstalling package {name}")
        self.client.delete(PACKAGE_ENDPOINT, params={"name": name})

    # --- Tunables ---

    def list_tunables(self) -> List[Tunable]:
        return self._list_models(TUNABLE_ENDPOINT, Tunable)

    def create_tunable(self, request: TunableRequest) -> Optional[Tunable]:
        logger.info(f"Creating tunable {request.tunable}={request.value}")
        return self._write_model("POST", TUNABLE_ENDPOINT, Tunable, payload=self._payload(request))

    def update_tunable(self, tunable_id: str, request: TunableRequest) -> Optional[Tunable]:
        """Update the tunable with ID ``tunable_id`` (the tunable name)."""
        logger.info(f"Updating tunable {tunable_id}")
        return self._write_model(
            "PUT", TUNABLE_ENDPOINT, Tunable, payload=self._payload(request, id=str(tunable_id)))

    def delete_tunable(self, tunable_id: int):
        logger.info(f"Deleting tunable {tunable_id}")
        self.client.delete(TUNABLE_ENDPOINT, params={"id": str(tunable_id)})

    # --- Version ---

    def get_version(self) -> Optional[Version]:
        return self._get_model(VERSION_ENDPOINT, Version)

    def get_version_upgrade_status(self, use_cache: bool = True) -> Optional[VersionUpgradeStatus]:
        """
        Check for a pfSense upgrade.

        Args:
            use_cache: If False, the appliance queries the update servers
                       instead of answering from its cache (slow).
        """
        return self._get_model(
            VERSION_UPGRADE_ENDPOINT,
            VersionUpgradeStatus,
            params={"use_cache": format_query_bool(use_cache)},
        )
