from .catalog_store import CatalogReadError, LocalWriteError
from .spec_catalog import spec_key, merge_specs, filter_specs
from .model_registry import add_models
from .remote_sync import RemoteSyncError, upsert, sync_remote
from .import_pipeline import PipelineStage, ImportPipelineError, ImportResult, run_import, run_sync
from .spec_service import SpecService

__all__ = [
    'CatalogReadError', 'LocalWriteError',
    'spec_key', 'merge_specs', 'filter_specs',
    'add_models',
    'RemoteSyncError', 'upsert', 'sync_remote',
    'PipelineStage', 'ImportPipelineError', 'ImportResult', 'run_import', 'run_sync',
    'SpecService',
]
