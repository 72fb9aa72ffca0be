"""
Tests for the Unbound host override endpoints.
"""

import pytest

from pfsense_api.exceptions import PfSenseObjectNotFoundError
from pfsense_api.models import UnboundHostOverride, UnboundHostOverrideAlias

from conftest import HOST

HOST_OVERRIDE_URL = f"{HOST}/api/v1/services/unbound/host_override"


class TestUnboundService:
    def test_list_host_overrides(self, client, pfsense):
        pfsense.queue_fixture("host_overrides.json")

        nas, www = client.unbound.list_host_overrides()

        assert nas.ip == ["192.168.1.10"]
        assert nas.aliases == []
        assert www.ip == ["192.168.1.20", "fd00::20"]
        assert [alias.host for alias in www.aliases] == ["blog", "shop"]

    def test_create_host_override(self, client, pfsense):
        client.unbound.create_host_override(
            UnboundHostOverride(host="printer", domain="home.arpa", ip=["192.168.1.40"]),
            apply=True)

        call = pfsense.last_call
        assert call.method == "POST"
        assert call.url == HOST_OVERRIDE_URL
        assert call.json == {
            "host": "printer", "domain": "home.arpa", "ip": ["192.168.1.40"], "descr": "",
            "apply": True}

    def test_update_host_override_by_position(self, client, pfsense):
        pfsense.queue_fixture("host_overrides.json")

        client.unbound.update_host_override(UnboundHostOverride(
            host="www", domain="example.com", ip=["192.168.1.21"],
            aliases=[UnboundHostOverrideAlias(host="blog", domain="example.com")]))

        lookup, update = pfsense.calls
        assert lookup.method == "GET"
        assert update.method == "PUT"
        assert update.json["id"] == "1"
        assert update.json["apply"] is False
        assert update.json["aliases"] == {
            "item": [{"host": "blog", "domain": "example.com", "description": ""}]}

    def test_update_missing_override(self, client, pfsense):
        pfsense.queue_fixture("host_overrides.json")

        with pytest.raises(PfSenseObjectNotFoundError):
            client.unbound.update_host_override(
                UnboundHostOverride(host="www", domain="example.org"))
        assert len(pfsense.calls) == 1

    def test_delete_host_override(self, client, pfsense):
        pfsense.queue_fixture("host_overrides.json")

        client.unbound.delete_host_override("nas", "home.arpa", apply=True)

        call = pfsense.last_call
        assert call.method == "DELETE"
        assert call.params == {"id": "0", "apply": "true"}

    def test_delete_missing_override(self, client, pfsense):
        pfsense.queue_fixture("host_overrides.json")

        with pytest.raises(PfSenseObjectNotFoundError):
            client.unbound.delete_host_override("ftp", "example.com")
        assert len(pfsense.calls) == 1
