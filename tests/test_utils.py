"""
Tests for the model mapping helpers and the pfSense value converters.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from pfsense_api.exceptions import PfSenseDataError
from pfsense_api.models.base import PfSenseModel, api_field
from pfsense_api.utils import (
    build_model,
    build_model_list,
    format_query_bool,
    get_api_field_mapping,
    json_int,
    map_api_data_to_model,
    model_to_payload,
    nested_model,
    normalize_mac,
    optional_int,
    string_array,
    true_if_present,
)


@dataclass
class Child(PfSenseModel):
    name: Optional[str] = None


@dataclass
class Sample(PfSenseModel):
    if_: Optional[str] = api_field("if")
    max_src_nodes: Optional[str] = api_field("max-src-nodes")
    count: Optional[int] = api_field(converter=json_int)
    enabled: bool = api_field(default=False, converter=true_if_present)
    child: Optional[Child] = api_field(converter=nested_model(Child))
    tags: List[str] = field(default_factory=list)


class TestFieldMapping:
    """Test translation between API keys and attributes."""

    def test_get_api_field_mapping(self):
        assert get_api_field_mapping(Sample) == {"if": "if_", "max-src-nodes": "max_src_nodes"}

    def test_get_api_field_mapping_non_dataclass(self):
        assert get_api_field_mapping(dict) == {}

    def test_map_api_data_to_model(self):
        fields, extra = map_api_data_to_model(
            {"if": "igb0", "count": "3", "enabled": "", "unknown": 1}, Sample)
        assert fields == {"if_": "igb0", "count": 3, "enabled": True}
        assert extra == {"unknown": 1}

    def test_attribute_name_of_renamed_field_is_not_accepted(self):
        fields, extra = map_api_data_to_model({"if_": "igb0"}, Sample)
        assert fields == {}
        assert extra == {"if_": "igb0"}

    def test_build_model_keeps_extra_fields(self):
        sample = build_model(Sample, {"if": "igb1", "associated-rule-id": "nat_1"})
        assert sample.if_ == "igb1"
        assert sample.enabled is False
        assert sample._extra_fields == {"associated-rule-id": "nat_1"}

    def test_build_model_nested(self):
        sample = build_model(Sample, {"child": {"name": "x"}})
        assert sample.child == Child(name="x")

    def test_build_model_none(self):
        assert build_model(Sample, None) is None

    def test_build_model_rejects_non_object(self):
        with pytest.raises(PfSenseDataError):
            build_model(Sample, ["not", "an", "object"])

    def test_build_model_converter_failure(self):
        with pytest.raises(PfSenseDataError, match="Sample.count"):
            build_model(Sample, {"count": "many"})

    def test_build_model_list(self):
        samples = build_model_list(Sample, [{"if": "a"}, {"if": "b"}])
        assert [sample.if_ for sample in samples] == ["a", "b"]
        assert build_model_list(Sample, None) == []

    def test_build_model_list_rejects_object(self):
        with pytest.raises(PfSenseDataError):
            build_model_list(Sample, {"if": "a"})


class TestPayload:
    """Test request payload serialization."""

    def test_model_to_payload(self):
        sample = Sample(if_="igb0", count=0, child=Child(name="x"), tags=["a"])
        assert model_to_payload(sample) == {
            "if": "igb0",
            "count": 0,
            "enabled": False,
            "child": {"name": "x"},
            "tags": ["a"],
        }

    def test_extra_fields_are_not_sent(self):
        sample = build_model(Sample, {"if": "igb0", "surprise": True})
        assert "surprise" not in sample.to_dict()


class TestConverters:
    """Test converters for pfSense value quirks."""

    @pytest.mark.parametrize("value, expected", [
        (5, 5), ("5", 5), (" 42 ", 42), (3.0, 3), ("-7", -7), ("+8", 8)])
    def test_json_int(self, value, expected):
        assert json_int(value) == expected

    @pytest.mark.parametrize(
        "value", ["abc", "", None, True, 2.5, [1], "1_000", "\u0663", "0x10", "1e3", "+-5"])
    def test_json_int_rejects(self, value):
        with pytest.raises(ValueError):
            json_int(value)

    @pytest.mark.parametrize("value, expected", [("", None), (None, None), ("7200", 7200), (60, 60)])
    def test_optional_int(self, value, expected):
        assert optional_int(value) == expected

    def test_optional_int_rejects_garbage(self):
        with pytest.raises(ValueError):
            optional_int("soon")

    @pytest.mark.parametrize("value", ["", "yes", None, False, 0])
    def test_true_if_present(self, value):
        assert true_if_present(value) is True

    @pytest.mark.parametrize("value, expected", [
        ("", []),
        (None, []),
        ("10.0.0.1", ["10.0.0.1"]),
        ("10.0.0.1,10.0.0.2", ["10.0.0.1", "10.0.0.2"]),
        (["a", 1], ["a", "1"]),
    ])
    def test_string_array(self, value, expected):
        assert string_array(value) == expected

    def test_string_array_rejects_object(self):
        with pytest.raises(ValueError):
            string_array({"a": 1})

    @pytest.mark.parametrize("mac", ["00:11:32:AA:BB:CC", "00-11-32-aa-bb-cc", "0011.32aa.bbcc", "001132aabbcc"])
    def test_normalize_mac(self, mac):
        assert normalize_mac(mac) == "00:11:32:aa:bb:cc"

    def test_format_query_bool(self):
        assert format_query_bool(True) == "true"
        assert format_query_bool(False) == "false"
