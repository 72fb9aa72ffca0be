"""
Tests for the CSV and JSON export helpers.
"""

import csv
import json

from pfsense_api.export import export_csv, export_json, to_dict_list
from pfsense_api.models import DHCPLease, FirewallRule

from conftest import load_fixture


def _leases():
    return DHCPLease.from_api_list(load_fixture("dhcp_leases.json")["data"])


def _rules():
    return FirewallRule.from_api_list(load_fixture("firewall_rules.json")["data"])


class TestToDictList:
    def test_models_and_dicts(self):
        rows = to_dict_list([DHCPLease(ip="10.0.0.5", if_="lan"), {"ip": "10.0.0.6"}, 42])

        assert rows == [{"ip": "10.0.0.5", "if": "lan"}, {"ip": "10.0.0.6"}]


class TestExportCsv:
    def test_uses_api_key_names(self, tmp_path):
        path = tmp_path / "leases.csv"

        export_csv(_leases(), str(path))

        with open(path, newline="", encoding="utf-8") as csvfile:
            rows = list(csv.DictReader(csvfile))
        assert len(rows) == 3
        assert rows[0]["if"] == "lan"
        assert rows[1]["staticmap_array_index"] == "0"
        # null in the first lease, so the column comes from the second one
        assert rows[0]["staticmap_array_index"] == ""

    def test_selected_fields(self, tmp_path):
        path = tmp_path / "leases.csv"

        export_csv(_leases(), str(path), fields=["ip", "mac"])

        with open(path, newline="", encoding="utf-8") as csvfile:
            reader = csv.reader(csvfile)
            header = next(reader)
        assert header == ["ip", "mac"]

    def test_flatten_nested(self, tmp_path):
        path = tmp_path / "rules.csv"

        export_csv(_rules(), str(path), flatten_nested=True)

        with open(path, newline="", encoding="utf-8") as csvfile:
            rows = list(csv.DictReader(csvfile))
        assert rows[0]["source_network"] == "lan"
        assert rows[0]["created_username"].startswith("admin")
        assert rows[1]["destination_port"] == "web_ports"

    def test_empty_export(self, tmp_path):
        path = tmp_path / "empty.csv"

        export_csv([], str(path))

        assert path.read_text(encoding="utf-8") == ""


class TestExportJson:
    def test_export_json(self, tmp_path):
        path = tmp_path / "rules.json"

        export_json(_rules(), str(path))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["tracker"] == "1604428801"
        assert data[1]["max-src-nodes"] == "10"
        assert data[1]["created"] == {"time": "1700000000", "username": "api"}
        assert "_extra_fields" not in data[1]
