"""
Layout parsers for the three known spec sheet shapes.

Each parser takes the rows of one sheet (a list of row lists, as read by
excel_loader.read_sheet_rows) and returns candidate spec records. Real
sheets are noisy, so nothing here raises on bad input: rows without a
usable model label, columns that do not classify and rows missing a
required cell are skipped.

Layouts:
    Wide torque matrix:
        Row 0:   [model | 헤드볼트 토크 | 엔진오일 | ...]
        Row 1+:  [ZT350D | 23 N·m      | 1.6L     | ...]

    Assembly sequence list (one model per sheet):
        Row 0:   [ZT368G]
        Row 1+:  [step | item | ... | value]

    Paired shock oil table:
        Row 0:   [     | 앞    |       | 뒤    |       ]
        Row 1+:  [     | 350D  | 420cc | 350D  | 380cc ]

Every parser accepts an optional seen_models set which collects every model
token encountered, including models whose rows produced no records.
"""

import re

from .config import (
    ASSEMBLY_ITEM_COLUMN,
    ASSEMBLY_ITEM_FALLBACK_COLUMN,
    ASSEMBLY_VALUE_COLUMN,
    SHOCK_OIL_ITEM_SUFFIX,
    SHOCK_OIL_DEFAULT_ITEM,
    LAYOUT_TORQUE_MATRIX,
    LAYOUT_ASSEMBLY_SEQUENCE,
    LAYOUT_SHOCK_OIL,
)
from .model_tokens import cell_text, normalize_model_token
from .categories import classify_header
from .spec_ids import make_spec_record

WHITESPACE_RUN = re.compile(r'\s+')


def cell_at(row, index):
    """
    Bounds-checked cell access; missing trailing cells read as ''.

    Examples:
        >>> cell_at(['350D', '23'], 1)
        '23'
        >>> cell_at(['350D'], 5)
        ''
    """
    if row is None or index < 0 or index >= len(row):
        return ""
    value = row[index]
    return "" if value is None else value


def _note_model(seen_models, model):
    if seen_models is not None:
        seen_models.add(model)


def parse_torque_matrix(rows, seen_models=None):
    """
    Parse a wide matrix: headers in row 0, model label in column 0.

    Emits one record per non-empty cell whose header classifies to a
    category; the item label is the header text itself.
    """
    if len(rows) < 2:
        return []

    header = [cell_text(cell) for cell in rows[0]]
    categories = [classify_header(label) for label in header]
    records = []

    for row in rows[1:]:
        model = normalize_model_token(cell_at(row, 0))
        if not model:
            continue
        _note_model(seen_models, model)

        for col in range(1, len(header)):
            label = header[col]
            category = categories[col]
            if not label or not category:
                continue
            value = cell_text(cell_at(row, col))
            if not value:
                continue
            records.append(make_spec_record(model, category, label, value))

    return records


def parse_assembly_sequence(rows, seen_models=None):
    """
    Parse an assembly sequence sheet for the single model in cell A1.

    Every following row contributes a torque record when both an item name
    and a value are present.
    """
    if len(rows) < 2:
        return []

    model = normalize_model_token(cell_at(rows[0], 0))
    if not model:
        return []
    _note_model(seen_models, model)

    records = []
    for row in rows[1:]:
        item = (cell_text(cell_at(row, ASSEMBLY_ITEM_COLUMN))
                or cell_text(cell_at(row, ASSEMBLY_ITEM_FALLBACK_COLUMN)))
        value = cell_text(cell_at(row, ASSEMBLY_VALUE_COLUMN))
        if not item or not value:
            continue
        records.append(make_spec_record(model, 'torque', item, value))

    return records


def shock_oil_item(side):
    """'앞' -> '앞 오일 용량'; blank side -> the generic label."""
    side = WHITESPACE_RUN.sub(' ', cell_text(side)).strip()
    if not side:
        return SHOCK_OIL_DEFAULT_ITEM
    return f"{side} {SHOCK_OIL_ITEM_SUFFIX}"


def parse_shock_oil_table(rows, seen_models=None):
    """
    Parse a paired table: (model, value) column pairs starting at column 1.

    The side label for a pair sits in the header row above its model column.
    """
    if len(rows) < 2:
        return []

    header = rows[0]
    records = []

    for row in rows[1:]:
        for col in range(1, len(header), 2):
            model_label = cell_text(cell_at(row, col))
            value = cell_text(cell_at(row, col + 1))
            if not model_label or not value:
                continue
            model = normalize_model_token(model_label)
            if not model:
                continue
            _note_model(seen_models, model)
            item = shock_oil_item(cell_at(header, col))
            records.append(make_spec_record(model, 'oil', item, value))

    return records


PARSERS = {
    LAYOUT_TORQUE_MATRIX: parse_torque_matrix,
    LAYOUT_ASSEMBLY_SEQUENCE: parse_assembly_sequence,
    LAYOUT_SHOCK_OIL: parse_shock_oil_table,
}


def parse_rows(layout, rows, seen_models=None):
    """Dispatch to the parser bound to a layout name."""
    try:
        parser = PARSERS[layout]
    except KeyError:
        raise ValueError(f"Unknown layout: {layout}") from None
    return parser(rows, seen_models)
