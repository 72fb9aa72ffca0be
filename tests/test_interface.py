"""
Tests for the v2 interface endpoints.
"""

from pfsense_api.models import (
    InterfaceBridgeRequest,
    InterfaceGroupRequest,
    InterfaceRequest,
    VLANRequest,
)

from conftest import HOST, ok_envelope


class TestInterfaces:
    def test_list_interfaces(self, client, pfsense):
        pfsense.queue_fixture("interfaces.json")

        interfaces = client.interface.list_interfaces()

        assert pfsense.last_call.url == f"{HOST}/api/v2/interfaces"
        wan, lan = interfaces
        assert wan.id == "wan"
        assert wan.if_ == "igb0"
        assert wan.blockbogons is True
        assert lan.subnet == 24
        assert lan.track6_interface == "wan"

    def test_get_interface(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": "opt1", "if": "igb2", "descr": "DMZ"}))

        interface = client.interface.get_interface("opt1")

        assert pfsense.last_call.params == {"if": "opt1"}
        assert interface.descr == "DMZ"

    def test_create_interface_omits_unset_options(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": "opt1", "if": "igb2", "descr": "DMZ"}))

        interface = client.interface.create_interface(InterfaceRequest(
            if_="igb2", descr="DMZ", typev4="static", ipaddr="172.16.0.1", subnet=24,
            enable=True))

        payload = pfsense.last_call.json
        assert pfsense.last_call.method == "POST"
        assert payload["if"] == "igb2"
        assert payload["enable"] is True
        assert "if_" not in payload
        assert "mtu" not in payload
        assert "spoofmac" not in payload
        assert interface.id == "opt1"

    def test_update_interface_uses_patch(self, client, pfsense):
        client.interface.update_interface("opt1", InterfaceRequest(if_="igb2", mtu=9000))

        call = pfsense.last_call
        assert call.method == "PATCH"
        assert call.url == f"{HOST}/api/v2/interface"
        assert call.json["id"] == "opt1"
        assert call.json["mtu"] == 9000

    def test_delete_interface(self, client, pfsense):
        client.interface.delete_interface("opt1")

        assert pfsense.last_call.method == "DELETE"
        assert pfsense.last_call.params == {"if": "opt1"}

    def test_apply(self, client, pfsense):
        client.interface.apply()

        assert pfsense.last_call.method == "POST"
        assert pfsense.last_call.url == f"{HOST}/api/v2/interface/apply"


class TestVLANs:
    def test_list_vlans(self, client, pfsense):
        pfsense.queue_fixture("vlans.json")

        vlans = client.interface.list_vlans()

        assert [(vlan.id, vlan.tag) for vlan in vlans] == [(0, 10), (1, 20)]
        assert vlans[1].pcp == 3

    def test_create_vlan(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": 2, "if": "igb1", "tag": 30, "vlanif": "igb1.30"}))

        vlan = client.interface.create_vlan(VLANRequest(if_="igb1", tag=30, descr="Guests"))

        assert pfsense.last_call.json == {"if": "igb1", "tag": 30, "descr": "Guests"}
        assert vlan.vlanif == "igb1.30"

    def test_get_vlan(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": 1, "if": "igb1", "tag": 20}))

        vlan = client.interface.get_vlan(1)

        assert pfsense.last_call.url == f"{HOST}/api/v2/interface/vlan"
        assert pfsense.last_call.params == {"id": "1"}
        assert vlan.tag == 20

    def test_update_and_delete_vlan(self, client, pfsense):
        client.interface.update_vlan(2, VLANRequest(if_="igb1", tag=31))
        update = pfsense.last_call
        client.interface.delete_vlan(2)
        delete = pfsense.last_call

        assert update.method == "PATCH"
        assert update.json["id"] == 2
        assert delete.method == "DELETE"
        assert delete.params == {"id": "2"}


class TestInterfaceGroups:
    def test_list_interface_groups(self, client, pfsense):
        pfsense.queue_fixture("interface_groups.json")

        groups = client.interface.list_interface_groups()

        assert groups[0].ifname == "internal"
        assert groups[0].members == ["lan", "opt1"]

    def test_replace_interface_groups_sends_list(self, client, pfsense):
        pfsense.queue_fixture("interface_groups.json")

        groups = client.interface.replace_interface_groups([
            InterfaceGroupRequest(ifname="internal", members=["lan", "opt1"],
                                  descr="Internal networks"),
        ])

        call = pfsense.last_call
        assert call.method == "PUT"
        assert call.url == f"{HOST}/api/v2/interface/groups"
        assert call.json == [
            {"ifname": "internal", "members": ["lan", "opt1"], "descr": "Internal networks"}]
        assert groups[0].id == 0

    def test_create_interface_group(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": 1, "ifname": "dmz", "members": ["opt2"]}))

        group = client.interface.create_interface_group(
            InterfaceGroupRequest(ifname="dmz", members=["opt2"]))

        assert pfsense.last_call.url == f"{HOST}/api/v2/interface/group"
        assert group.id == 1

    def test_update_interface_group(self, client, pfsense):
        client.interface.update_interface_group(0, InterfaceGroupRequest(ifname="internal"))

        assert pfsense.last_call.method == "PATCH"
        assert pfsense.last_call.json["id"] == 0

    def test_get_and_delete_interface_group(self, client, pfsense):
        client.interface.get_interface_group(0)
        assert pfsense.last_call.params == {"id": "0"}

        client.interface.delete_interface_group(0)
        assert pfsense.last_call.method == "DELETE"


class TestBridges:
    def test_list_interface_bridges(self, client, pfsense):
        pfsense.queue_fixture("interface_bridges.json")

        bridges = client.interface.list_interface_bridges()

        assert bridges[0].id == "bridge0"
        assert bridges[0].members == ["lan", "opt3"]

    def test_get_and_create_bridge(self, client, pfsense):
        pfsense.queue_json(ok_envelope({"id": "bridge0", "members": ["lan"]}))
        pfsense.queue_json(ok_envelope({"id": "bridge1", "members": ["opt5"], "bridgeif": "bridge1"}))

        bridge = client.interface.get_interface_bridge("bridge0")
        assert pfsense.last_call.params == {"id": "bridge0"}
        assert bridge.members == ["lan"]

        created = client.interface.create_interface_bridge(
            InterfaceBridgeRequest(members=["opt5"], descr="Lab"))
        assert pfsense.last_call.method == "POST"
        assert pfsense.last_call.json == {"members": ["opt5"], "descr": "Lab", "bridgeif": ""}
        assert created.bridgeif == "bridge1"

    def test_update_bridge(self, client, pfsense):
        client.interface.update_interface_bridge(
            "bridge0", InterfaceBridgeRequest(members=["lan", "opt3", "opt4"]))

        call = pfsense.last_call
        assert call.method == "PATCH"
        assert call.json["id"] == "bridge0"
        assert call.json["members"] == ["lan", "opt3", "opt4"]

    def test_delete_bridge(self, client, pfsense):
        client.interface.delete_interface_bridge("bridge0")

        assert pfsense.last_call.url == f"{HOST}/api/v2/interface/bridge"
        assert pfsense.last_call.params == {"id": "bridge0"}
