"""
Tests for the DHCP server endpoints.
"""

import pytest

from pfsense_api.exceptions import PfSenseNotFoundError, PfSenseObjectNotFoundError
from pfsense_api.models import DHCPServerConfigurationRequest, DHCPStaticMappingRequest

from conftest import HOST, load_fixture, make_response, ok_envelope

STATIC_MAPPING_URL = f"{HOST}/api/v1/services/dhcpd/static_mapping"


class TestLeases:
    def test_list_leases(self, client, pfsense):
        pfsense.queue_fixture("dhcp_leases.json")

        leases = client.dhcp.list_leases()

        assert pfsense.last_call.url == f"{HOST}/api/v1/services/dhcpd/lease"
        assert len(leases) == 3
        assert leases[0].if_ == "lan"
        assert leases[1].staticmap_array_index == 0
        assert leases[2].state == "expired"

    def test_list_leases_error(self, client, pfsense):
        pfsense.queue(make_response(404, dict(load_fixture("error.json"), code=404)))

        with pytest.raises(PfSenseNotFoundError):
            client.dhcp.list_leases()


class TestStaticMappings:
    """Test static mappings, which pfSense addresses by list position."""

    def test_list_static_mappings(self, client, pfsense):
        pfsense.queue_fixture("dhcp_static_mappings.json")

        mappings = client.dhcp.list_static_mappings("lan")

        assert pfsense.last_call.params == {"interface": "lan"}
        assert [mapping.hostname for mapping in mappings] == ["nas", "pi"]

    def test_create_static_mapping(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"mac": "00:11:22:33:44:55", "ipaddr": "192.168.1.12"}))

        mapping = client.dhcp.create_static_mapping(DHCPStaticMappingRequest(
            interface="lan", mac="00:11:22:33:44:55", ipaddr="192.168.1.12"))

        call = pfsense.last_call
        assert call.method == "POST"
        assert call.url == STATIC_MAPPING_URL
        assert call.json["interface"] == "lan"
        assert call.json["arp_table_static_entry"] is False
        assert mapping.ipaddr == "192.168.1.12"

    def test_update_static_mapping_looks_up_index(self, client, pfsense):
        pfsense.queue_fixture("dhcp_static_mappings.json")
        pfsense.queue_json(ok_envelope({"mac": "b8:27:eb:11:22:33", "ipaddr": "192.168.1.30"}))

        mapping = client.dhcp.update_static_mapping(
            "b8:27:eb:11:22:33",
            DHCPStaticMappingRequest(interface="lan", mac="b8:27:eb:11:22:33", ipaddr="192.168.1.30"))

        lookup, update = pfsense.calls
        assert lookup.method == "GET"
        assert lookup.params == {"interface": "lan"}
        assert update.method == "PUT"
        assert update.json["id"] == 1
        assert update.json["ipaddr"] == "192.168.1.30"
        assert mapping.ipaddr == "192.168.1.30"

    def test_update_static_mapping_not_found(self, client, pfsense):
        pfsense.queue_fixture("dhcp_static_mappings.json")

        with pytest.raises(PfSenseObjectNotFoundError):
            client.dhcp.update_static_mapping(
                "de:ad:be:ef:00:01", DHCPStaticMappingRequest(interface="lan"))
        assert len(pfsense.calls) == 1

    def test_delete_static_mapping(self, client, pfsense):
        pfsense.queue_fixture("dhcp_static_mappings.json")

        client.dhcp.delete_static_mapping("lan", "00-11-32-AA-BB-CC")

        call = pfsense.last_call
        assert call.method == "DELETE"
        assert call.url == STATIC_MAPPING_URL
        assert call.params == {"interface": "lan", "id": "0"}

    def test_delete_static_mapping_not_found(self, client, pfsense):
        pfsense.queue_json(ok_envelope([]))

        with pytest.raises(PfSenseObjectNotFoundError):
            client.dhcp.delete_static_mapping("opt1", "00:11:32:aa:bb:cc")
        assert len(pfsense.calls) == 1


class TestServerConfiguration:
    def test_list_server_configurations(self, client, pfsense):
        pfsense.queue_fixture("dhcp_server_configurations.json")

        configurations = client.dhcp.list_server_configurations()

        assert pfsense.last_call.url == f"{HOST}/api/v1/services/dhcpd"
        assert [configuration.interface for configuration in configurations] == ["lan", "opt1"]

    def test_update_server_configuration_sets_interface(self, client, pfsense):
        pfsense.queue_json(ok_envelope({
            "enable": "", "range": {"from": "192.168.1.50", "to": "192.168.1.99"},
            "defaultleasetime": "3600"}))

        configuration = client.dhcp.update_server_configuration(DHCPServerConfigurationRequest(
            interface="lan", enable=True, range_from="192.168.1.50", range_to="192.168.1.99",
            defaultleasetime=3600))

        call = pfsense.last_call
        assert call.method == "PUT"
        assert call.json["range_from"] == "192.168.1.50"
        assert call.json["defaultleasetime"] == 3600
        assert "maxleasetime" not in call.json
        assert configuration.interface == "lan"
        assert configuration.enable is True
        assert configuration.defaultleasetime == 3600
