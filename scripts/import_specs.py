"""
Import vehicle specs from the operator's workbooks.

    python scripts/import_specs.py
    python scripts/import_specs.py --input torque_matrix=specs.xlsx \
        --input assembly_sequence=specs.xlsx#1 --no-sync

Exit codes: 0 success, 1 a fatal stage failed, 2 the remote sync failed
(local files are already written; re-run scripts/sync_remote.py).
"""

import argparse
import os
import sys

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loaders.config import SPECS_PATH, MODELS_PATH, DATABASE_URL, LAYOUTS
from loaders.excel_loader import SheetBinding
from models import get_engine
from services import run_import, ImportPipelineError

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_REMOTE_FAILED = 2


def parse_binding(text):
    """'LAYOUT=PATH[#SHEET]' -> SheetBinding."""
    layout, sep, target = text.partition('=')
    if not sep or not target:
        raise argparse.ArgumentTypeError(f"expected LAYOUT=PATH[#SHEET], got '{text}'")
    if layout not in LAYOUTS:
        raise argparse.ArgumentTypeError(f"unknown layout '{layout}' (choose from {', '.join(LAYOUTS)})")
    path, _, sheet = target.rpartition('#') if '#' in target else (target, '', '0')
    try:
        sheet_index = int(sheet)
    except ValueError:
        raise argparse.ArgumentTypeError(f"sheet index must be a number, got '{sheet}'") from None
    if sheet_index < 0:
        raise argparse.ArgumentTypeError(f"sheet index must not be negative, got {sheet_index}")
    return SheetBinding(path, layout, sheet_index)


def build_parser():
    ap = argparse.ArgumentParser(description="Import torque/oil/consumable specs from Excel")
    ap.add_argument("--input", dest="bindings", action="append", type=parse_binding,
                    help="LAYOUT=PATH[#SHEET]; repeatable, replaces the configured inputs")
    ap.add_argument("--specs", default=SPECS_PATH, help="Spec catalog JSON file")
    ap.add_argument("--models", default=MODELS_PATH, help="Model registry JSON file")
    ap.add_argument("--database-url", default=DATABASE_URL,
                    help="SQLAlchemy URL of the remote store (default: $SPECS_DATABASE_URL)")
    ap.add_argument("--no-sync", action="store_true", help="Skip the remote sync")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    engine = None
    if args.database_url and not args.no_sync:
        engine = get_engine(args.database_url)

    try:
        result = run_import(
            bindings=args.bindings,
            specs_path=args.specs,
            models_path=args.models,
            engine=engine,
        )
    except ImportPipelineError as e:
        print(f"spec import failed at {e.stage.value}: {e.cause}", file=sys.stderr)
        return EXIT_FAILED
    finally:
        if engine is not None:
            engine.dispose()

    if result.remote_errors:
        print("remote sync failed; local files are ahead of the remote store", file=sys.stderr)
        return EXIT_REMOTE_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
