"""Tests for the JSON catalog/registry files."""

import json
import pytest
import sys
import os
from unittest.mock import patch

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from services.catalog_store import (
    read_json_array,
    write_json_array,
    CatalogReadError,
    LocalWriteError,
)


class TestReadJsonArray:

    def test_missing_file_is_empty(self, tmp_path):
        assert read_json_array(str(tmp_path / "nope.json")) == []

    def test_strips_bom(self, tmp_path):
        path = tmp_path / "specs.json"
        path.write_bytes(b'\xef\xbb\xbf' + json.dumps([{'id': 'a'}]).encode('utf-8'))
        assert read_json_array(str(path)) == [{'id': 'a'}]

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "specs.json"
        path.write_text("[{", encoding='utf-8')
        with pytest.raises(CatalogReadError):
            read_json_array(str(path))

    def test_non_array_raises(self, tmp_path):
        path = tmp_path / "specs.json"
        path.write_text('{"specs": []}', encoding='utf-8')
        with pytest.raises(CatalogReadError):
            read_json_array(str(path))


class TestWriteJsonArray:

    def test_two_space_indent_and_utf8(self, tmp_path):
        path = tmp_path / "nested" / "specs.json"
        write_json_array(str(path), [{'item': '헤드볼트', 'value': '23 N·m'}])
        text = path.read_text(encoding='utf-8')
        assert text == '[\n  {\n    "item": "헤드볼트",\n    "value": "23 N·m"\n  }\n]'

    def test_round_trip(self, tmp_path):
        path = str(tmp_path / "specs.json")
        data = [{'id': 'spec-350d-oil-engine-oil', 'note': None}]
        write_json_array(path, data)
        assert read_json_array(path) == data

    def test_failed_write_keeps_previous_file(self, tmp_path):
        path = tmp_path / "specs.json"
        write_json_array(str(path), [{'id': 'old'}])

        with patch('services.catalog_store.os.replace', side_effect=OSError("disk full")):
            with pytest.raises(LocalWriteError):
                write_json_array(str(path), [{'id': 'new'}])

        assert read_json_array(str(path)) == [{'id': 'old'}]
        assert [p.name for p in tmp_path.iterdir()] == ["specs.json"]

    def test_unserializable_raises(self, tmp_path):
        with pytest.raises(LocalWriteError):
            write_json_array(str(tmp_path / "specs.json"), [object()])
