"""Tests for the model registry updater."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from services.model_registry import add_models


class TestAddModels:
    """Test add_models function."""

    def test_new_tokens_added_and_sorted(self):
        registry = [{'id': '368G', 'name': 'ZONTES 368G'}]
        updated, added = add_models(registry, ['350D', '125M'])
        assert added == ['350D', '125M']
        assert [m['id'] for m in updated] == ['125M', '350D', '368G']
        assert updated[0] == {'id': '125M', 'name': 'ZONTES 125M'}

    def test_existing_entries_untouched(self):
        registry = [{'id': '350D', 'name': 'ZONTES 350D-GK', 'parts_engine_url': 'https://example.com/e'}]
        updated, added = add_models(registry, ['350D'])
        assert added == []
        assert updated == registry

    def test_duplicate_tokens_added_once(self):
        updated, added = add_models([], ['350D', '350D'])
        assert added == ['350D']
        assert len(updated) == 1

    def test_custom_brand(self):
        updated, _ = add_models([], ['350D'], brand='ZT')
        assert updated[0]['name'] == 'ZT 350D'

