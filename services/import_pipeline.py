"""
Spec import pipeline.

One-shot batch run:

    READING_INPUTS → PARSING → MERGING → WRITING_LOCAL_CATALOG
        → SYNCING_REMOTE (only with a remote engine) → DONE

READING_INPUTS and WRITING_LOCAL_CATALOG are the only stages that can fail
the run. Everything is read before anything is written, so a failure while
reading leaves the catalog file as it was. Parsing problems are absorbed by
the parsers row by row. A remote sync failure is recorded on the result but
does not undo the local write.

The registry is written before the catalog. If the catalog write then fails,
the registry only holds extra model entries and the next run still adds
every spec; the reverse order could leave specs for models the registry
never learned about.

The pipeline assumes a single writer: nothing locks the catalog file, and of
two concurrent runs the last one to write wins.
"""

from enum import Enum

from loaders.config import INPUT_BINDINGS, SPECS_PATH, MODELS_PATH
from loaders.excel_loader import read_workbooks, parse_sheets, WorkbookReadError
from .catalog_store import (
    load_catalog,
    load_registry,
    save_catalog,
    save_registry,
    CatalogReadError,
    LocalWriteError,
)
from .spec_catalog import merge_specs
from .model_registry import add_models
from .remote_sync import sync_remote


class PipelineStage(Enum):
    READING_INPUTS = 'reading_inputs'
    PARSING = 'parsing'
    MERGING = 'merging'
    WRITING_LOCAL_CATALOG = 'writing_local_catalog'
    SYNCING_REMOTE = 'syncing_remote'
    DONE = 'done'
    FAILED = 'failed'


class ImportPipelineError(Exception):
    """A fatal stage failed; carries the stage and the underlying error."""

    def __init__(self, stage, cause):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Import failed during {stage.value}: {cause}")


class ImportResult:
    def __init__(self):
        self.stage = PipelineStage.READING_INPUTS
        self.candidates = 0
        self.spec_count = 0
        self.added_specs = 0
        self.added_models = []
        self.synced = {}
        self.remote_errors = []

    @property
    def ok(self):
        return self.stage is PipelineStage.DONE and not self.remote_errors

    def __repr__(self):
        return (f"<ImportResult stage={self.stage.value} specs={self.spec_count} "
                f"candidates={self.candidates} remote_errors={len(self.remote_errors)}>")


def run_import(bindings=None, specs_path=SPECS_PATH, models_path=MODELS_PATH, engine=None):
    """
    Run the full import.

    Args:
        bindings: Sheet bindings (path, layout, sheet_index); defaults to config
        specs_path: Local catalog file
        models_path: Local model registry file
        engine: SQLAlchemy engine of the remote store, or None to skip sync

    Returns:
        ImportResult

    Raises:
        ImportPipelineError: when reading inputs or writing local files fails
    """
    result = ImportResult()
    bindings = INPUT_BINDINGS if bindings is None else bindings

    try:
        catalog = load_catalog(specs_path)
        registry = load_registry(models_path)
        sheets = read_workbooks(bindings)
    except (CatalogReadError, WorkbookReadError, ValueError) as e:
        result.stage = PipelineStage.FAILED
        raise ImportPipelineError(PipelineStage.READING_INPUTS, e) from e

    result.stage = PipelineStage.PARSING
    candidates, tokens = parse_sheets(sheets)
    result.candidates = len(candidates)

    result.stage = PipelineStage.MERGING
    merged = merge_specs(catalog, candidates)
    result.spec_count = len(merged)
    result.added_specs = len(merged) - len(catalog)
    registry, result.added_models = add_models(registry, tokens)

    result.stage = PipelineStage.WRITING_LOCAL_CATALOG
    try:
        if result.added_models:
            save_registry(models_path, registry)
        save_catalog(specs_path, merged)
    except LocalWriteError as e:
        result.stage = PipelineStage.FAILED
        raise ImportPipelineError(PipelineStage.WRITING_LOCAL_CATALOG, e) from e
    print(f"specs updated: {result.spec_count}")
    if result.added_models:
        print(f"models added: {', '.join(result.added_models)}")

    if engine is not None:
        result.stage = PipelineStage.SYNCING_REMOTE
        result.synced, result.remote_errors = sync_remote(engine, merged, registry)

    result.stage = PipelineStage.DONE
    return result


def run_sync(engine, specs_path=SPECS_PATH, models_path=MODELS_PATH):
    """
    Push the current local files to the remote store without importing.

    Returns:
        tuple: (counts, errors) as returned by sync_remote
    """
    try:
        catalog = load_catalog(specs_path)
        registry = load_registry(models_path)
    except CatalogReadError as e:
        raise ImportPipelineError(PipelineStage.READING_INPUTS, e) from e
    return sync_remote(engine, catalog, registry)
