"""
Excel spec loaders for vehicle torque / oil / consumable values.

This package turns the operator's spreadsheets into candidate spec records.
It knows three sheet layouts; which layout a sheet has is configured, never
guessed.

Architecture:
    Excel → excel_loader → sheet_parsers → (model_tokens, categories, spec_ids)

Modules:
    config: Configuration constants and input bindings
    model_tokens: Cell text and model token normalization
    categories: Column header → spec category
    spec_ids: Deterministic spec ids
    sheet_parsers: The three layout parsers
    excel_loader: Workbook reading and orchestration
"""

from .model_tokens import cell_text, normalize_model_token
from .categories import classify_header
from .spec_ids import build_spec_id, make_spec_record
from .sheet_parsers import (
    cell_at,
    parse_torque_matrix,
    parse_assembly_sequence,
    parse_shock_oil_table,
    parse_rows,
)
from .excel_loader import (
    SheetBinding,
    WorkbookReadError,
    read_workbooks,
    parse_sheets,
    load_candidates,
)

__all__ = [
    'cell_text', 'normalize_model_token', 'classify_header',
    'build_spec_id', 'make_spec_record',
    'cell_at', 'parse_torque_matrix', 'parse_assembly_sequence',
    'parse_shock_oil_table', 'parse_rows',
    'SheetBinding', 'WorkbookReadError', 'read_workbooks', 'parse_sheets',
    'load_candidates',
]
