"""
Workbook reading and candidate extraction.

This module coordinates the spreadsheet half of the import:
    1. Open every bound workbook (any failure here is fatal)
    2. Read the bound sheet as plain rows
    3. Run the layout parser bound to that sheet
    4. Return (candidates, observed model tokens)

Reading and parsing are separate steps so a broken workbook aborts the run
before anything is parsed or written.

Functions:
    read_workbooks: Read every bound sheet into rows
    load_candidates: Read + parse all bindings
"""

import warnings
from collections import namedtuple

import pandas as pd

from .config import INPUT_BINDINGS, LAYOUTS
from .sheet_parsers import parse_rows

# Suppress openpyxl warnings about styles/formatting (we only read data values)
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')

SheetBinding = namedtuple('SheetBinding', ['path', 'layout', 'sheet_index'])
SheetRows = namedtuple('SheetRows', ['binding', 'sheet_name', 'rows'])


class WorkbookReadError(Exception):
    """A bound workbook could not be opened or read."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read workbook '{path}': {cause}")


def as_binding(entry):
    """Accept SheetBinding or a (path, layout[, sheet_index]) tuple."""
    if isinstance(entry, SheetBinding):
        binding = entry
    elif len(entry) == 2:
        binding = SheetBinding(entry[0], entry[1], 0)
    else:
        binding = SheetBinding(*entry)
    if binding.layout not in LAYOUTS:
        raise ValueError(f"Unknown layout '{binding.layout}' for {binding.path}")
    if binding.sheet_index < 0:
        raise ValueError(f"Negative sheet index {binding.sheet_index} for {binding.path}")
    return binding


def frame_to_rows(frame):
    """Convert a header-less DataFrame into a list of row lists ('' for blanks)."""
    frame = frame.astype(object).where(pd.notna(frame), "")
    return frame.values.tolist()


def read_sheet_rows(excel_file, sheet_index):
    """
    Read one sheet of an open pd.ExcelFile as rows.

    Returns:
        tuple: (sheet_name, rows) or (None, None) if the sheet does not exist
    """
    sheet_names = excel_file.sheet_names
    if sheet_index >= len(sheet_names):
        return None, None
    sheet_name = sheet_names[sheet_index]
    frame = excel_file.parse(sheet_name, header=None, dtype=object, keep_default_na=False)
    return sheet_name, frame_to_rows(frame)


def read_workbooks(bindings=None):
    """
    Read every bound sheet.

    Workbooks shared by several bindings are opened once. Missing sheets are
    skipped with a warning; anything else that goes wrong is raised as
    WorkbookReadError.

    Returns:
        list[SheetRows]
    """
    bindings = [as_binding(b) for b in (bindings if bindings is not None else INPUT_BINDINGS)]
    open_files = {}
    sheets = []

    try:
        for binding in bindings:
            try:
                if binding.path not in open_files:
                    print(f"Loading Excel file: {binding.path}...")
                    open_files[binding.path] = pd.ExcelFile(binding.path, engine='openpyxl')
                sheet_name, rows = read_sheet_rows(open_files[binding.path], binding.sheet_index)
            except Exception as e:
                raise WorkbookReadError(binding.path, e) from e

            if sheet_name is None:
                print(f"  Warning: Sheet #{binding.sheet_index} not found in '{binding.path}', skipping")
                continue
            sheets.append(SheetRows(binding, sheet_name, rows))
    finally:
        for excel_file in open_files.values():
            excel_file.close()

    return sheets


def parse_sheets(sheets):
    """
    Run the bound layout parser over every sheet.

    Returns:
        tuple: (candidates, models)
            candidates: list of spec record dicts, in sheet order
            models: sorted list of distinct model tokens seen in any sheet
    """
    candidates = []
    models = set()

    for sheet in sheets:
        print(f"Processing sheet: {sheet.sheet_name} ({sheet.binding.layout})")
        records = parse_rows(sheet.binding.layout, sheet.rows, models)
        candidates.extend(records)
        print(f"  Loaded {len(records)} candidates from '{sheet.sheet_name}'")

    return candidates, sorted(models)


def load_candidates(bindings=None):
    """Read and parse all bindings; see read_workbooks and parse_sheets."""
    return parse_sheets(read_workbooks(bindings))
