"""
Re-push the local catalog and model registry to the remote store.

Use after an import whose remote sync failed; nothing is parsed or written
locally.
"""

import argparse
import os
import sys

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loaders.config import SPECS_PATH, MODELS_PATH, DATABASE_URL
from models import get_engine
from services import run_sync, ImportPipelineError


def main(argv=None):
    ap = argparse.ArgumentParser(description="Upsert local specs/models into the remote store")
    ap.add_argument("--specs", default=SPECS_PATH, help="Spec catalog JSON file")
    ap.add_argument("--models", default=MODELS_PATH, help="Model registry JSON file")
    ap.add_argument("--database-url", default=DATABASE_URL,
                    help="SQLAlchemy URL of the remote store (default: $SPECS_DATABASE_URL)")
    args = ap.parse_args(argv)

    if not args.database_url:
        print("SPECS_DATABASE_URL or --database-url is required.", file=sys.stderr)
        return 1

    engine = get_engine(args.database_url)
    try:
        counts, errors = run_sync(engine, specs_path=args.specs, models_path=args.models)
    except ImportPipelineError as e:
        print(f"sync failed at {e.stage.value}: {e.cause}", file=sys.stderr)
        return 1
    finally:
        engine.dispose()

    if errors:
        return 2
    print(f"done: {sum(counts.values())} rows upserted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
