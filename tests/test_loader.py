"""Tests for utils/loader.py"""

import json

import pytest

from utils.loader import path_to_plan, plan_to_nodes


class TestPlanToNodes:
    def test_links_successors(self):
        data = {
            "nodes": [
                {"id": "1", "name": "HashJoin", "next": ["2", "3"]},
                {"id": "2", "name": "Scan"},
                {"id": "3", "name": "Filter"},
            ]
        }
        join, scan, filter_ = plan_to_nodes(data)
        assert join.name == "HashJoin"
        assert join.next_nodes == [scan, filter_]
        assert scan.next_nodes == []

    def test_defaults(self):
        (node,) = plan_to_nodes({"nodes": [{"id": 7}]})
        assert node.node_id == "7"
        assert node.name == "7"
        assert node.payload == {"id": 7}

    def test_explicit_payload(self):
        (node,) = plan_to_nodes({"nodes": [{"id": "1", "payload": {"rows": 10}}]})
        assert node.payload == {"rows": 10}

    def test_unknown_successor(self):
        with pytest.raises(ValueError, match="unknown node"):
            plan_to_nodes({"nodes": [{"id": "1", "next": ["2"]}]})

    def test_duplicate_id(self):
        with pytest.raises(ValueError, match="duplicate"):
            plan_to_nodes({"nodes": [{"id": "1"}, {"id": "1"}]})

    def test_missing_id(self):
        with pytest.raises(ValueError, match="without an 'id'"):
            plan_to_nodes({"nodes": [{"name": "Scan"}]})

    def test_entry_not_an_object(self):
        with pytest.raises(ValueError, match="not an object"):
            plan_to_nodes({"nodes": ["valid"]})

    def test_next_not_a_list(self):
        with pytest.raises(ValueError, match="is not a list"):
            plan_to_nodes({"nodes": [{"id": "1", "next": None}]})

    def test_next_string_rejected(self):
        """A bare id string is not a successor list."""
        with pytest.raises(ValueError, match="is not a list"):
            plan_to_nodes({"nodes": [{"id": "1", "next": "1"}]})


class TestPathToPlan:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"nodes": [{"id": "1"}]}))
        assert path_to_plan(str(path)) == {"nodes": [{"id": "1"}]}

    def test_rejects_missing_nodes(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ValueError, match="'nodes'"):
            path_to_plan(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            path_to_plan(str(tmp_path / "absent.json"))
