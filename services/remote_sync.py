"""
Remote store synchronization.

Pushes the full local catalog and model registry to the remote database
with one bulk upsert per table, keyed by primary id. Rows with an existing
id are overwritten, new ids are inserted, nothing is deleted.

The local files stay the source of truth: a failed upsert is reported, never
retried or rolled back. Re-running the sync (scripts/sync_remote.py) brings
the remote side back in line.
"""

import sys
from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError

from models import Spec, VehicleModel

DIALECT_INSERTS = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


class RemoteSyncError(Exception):
    """The bulk upsert for a table failed."""

    def __init__(self, table, cause):
        self.table = table
        self.cause = cause
        super().__init__(f"{table} upsert failed: {cause}")


def upsert(engine, table, rows, conflict_key='id'):
    """
    Insert-or-update rows into a table in a single executemany call.

    Args:
        engine: SQLAlchemy engine of the remote store
        table: sqlalchemy Table (or declarative class)
        rows: List of dicts, all with the same keys
        conflict_key: Column that identifies a row

    Returns:
        int: Number of rows sent
    """
    table = getattr(table, '__table__', table)
    if not rows:
        return 0

    insert = DIALECT_INSERTS.get(engine.dialect.name)
    if insert is None:
        raise RemoteSyncError(table.name, f"dialect '{engine.dialect.name}' has no upsert support")

    stmt = insert(table)
    update_columns = {
        name: stmt.excluded[name]
        for name in rows[0]
        if name != conflict_key
    }
    stmt = stmt.on_conflict_do_update(index_elements=[conflict_key], set_=update_columns)

    try:
        with engine.begin() as conn:
            conn.execute(stmt, rows)
    except SQLAlchemyError as e:
        raise RemoteSyncError(table.name, e) from e
    return len(rows)


def spec_rows(catalog, now=None):
    """
    Remote payload for the specs table, one row per id.

    Different items can slug to the same id ("헤드볼트 토크 (N·m)" and
    "크랭크 토크 (N·m)" both give spec-350d-torque-n-m). A single upsert
    statement cannot touch the same key twice, so the last record wins and
    the collision is reported.
    """
    now = now or datetime.now(timezone.utc)
    rows = {}
    for record in catalog:
        spec_id = record['id']
        previous = rows.get(spec_id)
        if previous is not None:
            print(f"Warning: spec id {spec_id} shared by '{previous['item']}' and "
                  f"'{record['item']}'; keeping the last", file=sys.stderr)
        rows[spec_id] = {
            'id': spec_id,
            'model': record['model'],
            'category': record['category'],
            'item': record['item'],
            'value': record['value'],
            'note': record.get('note'),
            'updated_at': now,
        }
    return list(rows.values())


def model_rows(registry, now=None):
    """Remote payload for the models table; entries without id or name are dropped."""
    now = now or datetime.now(timezone.utc)
    rows = []
    for entry in registry:
        row = {
            'id': str(entry.get('id') or '').strip().upper(),
            'name': str(entry.get('name') or '').strip(),
            'parts_engine_url': entry.get('parts_engine_url'),
            'parts_chassis_url': entry.get('parts_chassis_url'),
            'updated_at': now,
        }
        if row['id'] and row['name']:
            rows.append(row)
    return rows


def sync_remote(engine, catalog, registry):
    """
    Upsert specs, then models.

    Both tables are attempted even if the first fails.

    Returns:
        tuple: (counts, errors)
            counts: {'specs': n, 'models': n} for the tables that succeeded
            errors: list of RemoteSyncError
    """
    now = datetime.now(timezone.utc)
    counts = {}
    errors = []

    for name, table, rows in (
        ('specs', Spec, spec_rows(catalog, now)),
        ('models', VehicleModel, model_rows(registry, now)),
    ):
        try:
            counts[name] = upsert(engine, table, rows)
            print(f"{name} upserted: {counts[name]}")
        except RemoteSyncError as e:
            print(f"{name} upsert failed: {e.cause}", file=sys.stderr)
            errors.append(e)

    return counts, errors
