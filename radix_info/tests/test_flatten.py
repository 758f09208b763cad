"""
Tests for JSON flattening and denylist filtering
"""

import pytest

from radix_info.flatten import filter_keys, flatten_json, load_json
from radix_info.models import INFO_DENYLIST
from radix_info.exceptions import FlattenError, MalformedInputError, NameCollisionError


class TestLoadJson:
    def test_valid_payload(self):
        assert load_json(b'{"a": [1, 2]}') == {"a": [1, 2]}

    def test_invalid_payload(self):
        with pytest.raises(MalformedInputError) as exc_info:
            load_json(b'<html>502 Bad Gateway</html>', "http://node/system/info")
        assert exc_info.value.source == "http://node/system/info"

    def test_empty_payload(self):
        with pytest.raises(MalformedInputError):
            load_json(b'')

    def test_non_standard_constants_rejected(self):
        for payload in (b'{"stake": NaN}', b'{"stake": Infinity}', b'[-Infinity]'):
            with pytest.raises(MalformedInputError):
                load_json(payload)


class TestFlattenJson:
    def test_top_level_keys_join_prefix_directly(self):
        flat = flatten_json({"info": 1, "agent": 2}, "radix_")
        assert flat == {"radix_info": 1, "radix_agent": 2}

    def test_nested_keys_joined_with_underscore(self):
        document = {"info": {"epochManager": {"currentView": {"epoch": 42, "view": 7}}}}
        flat = flatten_json(document, "radix_")
        assert flat == {
            "radix_info_epochManager_currentView_epoch": 42,
            "radix_info_epochManager_currentView_view": 7,
        }

    def test_arrays_use_index(self):
        flat = flatten_json({"peers": [{"port": 30000}, {"port": 30001}]}, "radix_")
        assert flat == {"radix_peers_0_port": 30000, "radix_peers_1_port": 30001}

    def test_top_level_array(self):
        assert flatten_json([5, "x"], "p_") == {"p_0": 5, "p_1": "x"}

    def test_empty_containers_produce_nothing(self):
        assert flatten_json({"a": {}, "b": [], "c": 1}) == {"c": 1}

    def test_leaf_values_kept_as_is(self):
        flat = flatten_json({"s": "text", "b": True, "n": None, "f": 1.5})
        assert flat == {"s": "text", "b": True, "n": None, "f": 1.5}

    def test_one_entry_per_leaf(self):
        document = {
            "a": {"b": 1, "c": [1, 2, {"d": "x"}]},
            "e": None,
            "f": {"g": {"h": False}},
        }
        flat = flatten_json(document, "radix_")
        assert len(flat) == 6
        assert len(set(flat)) == len(flat)

    def test_joined_name_collision(self):
        with pytest.raises(NameCollisionError) as exc_info:
            flatten_json({"info": {"a_b": 1, "a": {"b": 2}}}, "radix_")
        assert exc_info.value.name == "radix_info_a_b"

    def test_scalar_root_rejected(self):
        with pytest.raises(FlattenError):
            flatten_json(42, "radix_")

    def test_does_not_mutate_input(self):
        document = {"a": {"b": 1}}
        flatten_json(document, "radix_")
        assert document == {"a": {"b": 1}}


class TestFilterKeys:
    def test_removes_denylisted(self):
        flat = {
            "radix_agent_version": 10000,
            "radix_info_configuration_pacemakerRate": 2.0,
            "radix_info_counters_ledger_state_version": 1234,
        }
        assert filter_keys(flat, INFO_DENYLIST) == {"radix_info_counters_ledger_state_version": 1234}

    def test_absent_denylisted_names_are_ignored(self):
        flat = {"radix_info_x": 1}
        assert filter_keys(flat, INFO_DENYLIST) == {"radix_info_x": 1}

    def test_every_denylisted_name_absent_after_filter(self):
        flat = {name: 1 for name in INFO_DENYLIST}
        flat["radix_keep"] = 2
        filtered = filter_keys(flat, INFO_DENYLIST)
        assert all(name not in filtered for name in INFO_DENYLIST)
        assert filtered == {"radix_keep": 2}

    def test_input_not_mutated(self):
        flat = {"radix_agent_version": 1}
        filter_keys(flat, INFO_DENYLIST)
        assert flat == {"radix_agent_version": 1}
