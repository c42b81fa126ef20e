"""Tests for the three layout parsers and spec ids."""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from loaders.sheet_parsers import (
    cell_at,
    parse_torque_matrix,
    parse_assembly_sequence,
    parse_shock_oil_table,
    parse_rows,
)
from loaders.spec_ids import to_slug, hash_text, safe_slug, build_spec_id
from services.spec_catalog import merge_specs


def strip_ids(records):
    return [{k: v for k, v in r.items() if k != 'id'} for r in records]


class TestCellAt:
    """Test bounds-checked row access."""

    def test_in_range(self):
        assert cell_at(["a", "b"], 1) == "b"

    def test_out_of_range_is_empty(self):
        assert cell_at(["a"], 3) == ""
        assert cell_at([], 0) == ""
        assert cell_at(None, 0) == ""

    def test_none_cell_is_empty(self):
        assert cell_at([None], 0) == ""


class TestSpecIds:
    """Test deterministic id generation."""

    def test_slug(self):
        assert to_slug("Head Bolt (M8)") == "head-bolt-m8"
        assert to_slug("--front--") == "front"

    def test_hash_text_known_values(self):
        assert hash_text("") == "45h"
        assert hash_text("a") == "3t1g"

    def test_safe_slug_falls_back_to_hash(self):
        slug = safe_slug("헤드볼트")
        assert slug.startswith("k")
        assert slug == safe_slug("헤드볼트")
        assert slug != safe_slug("크랭크볼트")

    def test_build_spec_id(self):
        assert build_spec_id("350D", "torque", "head-bolt") == "spec-350d-torque-head-bolt"


class TestTorqueMatrix:
    """Test the wide torque matrix parser."""

    def test_header_row_and_one_model(self):
        rows = [
            ["model", "front-torque", "oil-capacity"],
            ["350D", "23 N·m", "1.6L"],
        ]
        records = parse_torque_matrix(rows)
        assert strip_ids(records) == [
            {'model': '350D', 'category': 'torque', 'item': 'front-torque', 'value': '23 N·m'},
            {'model': '350D', 'category': 'oil', 'item': 'oil-capacity', 'value': '1.6L'},
        ]
        assert records[0]['id'] == "spec-350d-torque-front-torque"

    def test_skips_unclassified_and_empty(self):
        rows = [
            ["모델", "헤드볼트 토크", "비고", "엔진오일"],
            ["ZT350D", "", "note", 1.6],
            ["not a model", "10", "", "1L"],
            ["ZT368G", 18],
        ]
        records = parse_torque_matrix(rows)
        assert strip_ids(records) == [
            {'model': '350D', 'category': 'oil', 'item': '엔진오일', 'value': '1.6'},
            {'model': '368G', 'category': 'torque', 'item': '헤드볼트 토크', 'value': '18'},
        ]

    def test_collects_models_without_values(self):
        seen = set()
        parse_torque_matrix([["model", "torque"], ["ZT125M", ""]], seen)
        assert seen == {"125M"}

    def test_header_only(self):
        assert parse_torque_matrix([["model", "torque"]]) == []
        assert parse_torque_matrix([]) == []


class TestAssemblySequence:
    """Test the assembly sequence parser."""

    def test_single_row(self):
        rows = [
            ["ZT368G"],
            ["", "head-bolt", "", "18 N·m"],
        ]
        assert strip_ids(parse_assembly_sequence(rows)) == [
            {'model': '368G', 'category': 'torque', 'item': 'head-bolt', 'value': '18 N·m'},
        ]

    def test_item_fallback_and_skips(self):
        rows = [
            ["ZT 350D 조립 순서"],
            ["크랭크케이스 볼트", "", "", "12 N·m"],
            ["", "", "", "10 N·m"],
            ["", "cam cap", "", ""],
            ["", "cam cap"],
        ]
        records = parse_assembly_sequence(rows)
        assert strip_ids(records) == [
            {'model': '350D', 'category': 'torque', 'item': '크랭크케이스 볼트', 'value': '12 N·m'},
        ]
        assert records[0]['id'].startswith("spec-350d-torque-k")

    def test_invalid_model_yields_nothing(self):
        seen = set()
        assert parse_assembly_sequence([["순서"], ["", "a", "", "1"]], seen) == []
        assert seen == set()


class TestShockOilTable:
    """Test the paired shock oil parser."""

    def test_pairs_per_side(self):
        rows = [
            ["", "front", "", "rear", ""],
            ["", "ZT350D", "420cc", "350D", "380cc"],
            ["", "368G", "400cc"],
        ]
        assert strip_ids(parse_shock_oil_table(rows)) == [
            {'model': '350D', 'category': 'oil', 'item': 'front 오일 용량', 'value': '420cc'},
            {'model': '350D', 'category': 'oil', 'item': 'rear 오일 용량', 'value': '380cc'},
            {'model': '368G', 'category': 'oil', 'item': 'front 오일 용량', 'value': '400cc'},
        ]

    def test_missing_side_header_uses_generic_label(self):
        rows = [
            ["", ""],
            ["", "350D", "420cc"],
        ]
        records = parse_shock_oil_table(rows)
        assert [r['item'] for r in records] == ["쇼바 오일 용량"]

    def test_side_header_whitespace_collapsed(self):
        rows = [["", " front \n fork "], ["", "350D", "420cc"]]
        assert parse_shock_oil_table(rows)[0]['item'] == "front fork 오일 용량"

    def test_skips_bad_pairs(self):
        rows = [
            ["", "front", "", "rear", ""],
            ["", "AB12", "420cc", "350D", ""],
        ]
        assert parse_shock_oil_table(rows) == []

    def test_korean_side_matches_existing_catalog_row(self):
        existing = [{
            'id': build_spec_id('350D', 'oil', '앞 오일 용량'),
            'model': '350D',
            'category': 'oil',
            'item': '앞 오일 용량',
            'value': '400cc',
        }]
        candidates = parse_shock_oil_table([[None, "앞", None], [None, "ZT350D", "420cc"]])

        merged = merge_specs(existing, candidates)

        assert len(merged) == 1
        assert merged[0]['id'] == existing[0]['id']
        assert merged[0]['value'] == '420cc'


class TestParseRows:

    def test_dispatch(self):
        assert parse_rows("assembly_sequence", [["ZT368G"], ["", "x", "", "1"]])[0]['model'] == "368G"

    def test_unknown_layout(self):
        with pytest.raises(ValueError):
            parse_rows("pivot", [])
