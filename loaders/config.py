"""
Configuration constants for the vehicle spec import.

This module centralizes everything the parsers match against (brand prefix,
header keywords, column offsets) and the default input bindings, making it
easy to adjust for a new workbook without touching the parsing logic.
"""

import os

# Brand handling for model labels ("ZT350D" -> "350D")
BRAND_PREFIX = "ZT"
BRAND_NAME = "ZONTES"

# Spec categories (clearance is kept for records imported by hand)
CATEGORIES = ('torque', 'oil', 'clearance', 'consumable')

# Header keywords, compared against the header with case, spaces,
# underscores and hyphens removed. Checked in this order: consumable,
# torque, oil. "브레이크오일" contains "오일", so consumable must come first.
CONSUMABLE_KEYWORDS = ('브레이크오일', '연료탱크', 'brakefluid', 'brakeoil', 'fueltank')
TORQUE_KEYWORDS = ('토크', 'torque')
OIL_KEYWORDS = ('오일', '냉각수', 'oil', 'coolant')

# Layout names
LAYOUT_TORQUE_MATRIX = 'torque_matrix'
LAYOUT_ASSEMBLY_SEQUENCE = 'assembly_sequence'
LAYOUT_SHOCK_OIL = 'shock_oil'
LAYOUTS = (LAYOUT_TORQUE_MATRIX, LAYOUT_ASSEMBLY_SEQUENCE, LAYOUT_SHOCK_OIL)

# Assembly sequence sheets: item in column B (fallback A), value in column D
ASSEMBLY_ITEM_COLUMN = 1
ASSEMBLY_ITEM_FALLBACK_COLUMN = 0
ASSEMBLY_VALUE_COLUMN = 3

# Shock oil sheets: item label built from the side header ("앞" -> "앞 오일 용량"),
# matching the labels already stored in the catalog
SHOCK_OIL_ITEM_SUFFIX = '오일 용량'
SHOCK_OIL_DEFAULT_ITEM = '쇼바 오일 용량'

# Local catalog files
DATA_DIR = os.environ.get('SPECS_DATA_DIR', 'data')
SPECS_PATH = os.path.join(DATA_DIR, 'specs.json')
MODELS_PATH = os.path.join(DATA_DIR, 'models.json')

# Remote store (SQLAlchemy URL); sync is skipped when unset
DATABASE_URL = os.environ.get('SPECS_DATABASE_URL')

# Workbooks and the layout each sheet is bound to: (path, layout, sheet_index)
TORQUE_WORKBOOKS = [
    'D:\\롤링업무\\ZT\\제원, 토르크.xlsx',
    'D:\\롤링업무\\ZT\\ZT 토르크.xlsx',
]
SHOCK_OIL_WORKBOOK = 'D:\\롤링업무\\ZT\\ZONTES 쇼바오일 용량(25.12.19).xlsx'

INPUT_BINDINGS = [
    binding
    for path in TORQUE_WORKBOOKS
    for binding in (
        (path, LAYOUT_TORQUE_MATRIX, 0),
        (path, LAYOUT_ASSEMBLY_SEQUENCE, 1),
    )
] + [
    (SHOCK_OIL_WORKBOOK, LAYOUT_SHOCK_OIL, 0),
]
