"""
Local JSON catalog and model registry files.

Thin read/write wrappers; all merge logic lives elsewhere so it can be
tested without touching the filesystem.

File format: UTF-8 JSON array, pretty-printed with 2-space indentation.
Readers strip a leading byte-order mark (files edited on Windows have one).
"""

import json
import os
import tempfile

BOM = '\ufeff'


class CatalogReadError(Exception):
    """An existing catalog/registry file could not be read as a JSON array."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read '{path}': {cause}")


class LocalWriteError(Exception):
    """Writing the catalog/registry file failed."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write '{path}': {cause}")


def read_json_array(path):
    """
    Read a JSON array file.

    A missing file is an empty list. A file that exists but does not hold a
    JSON array raises CatalogReadError rather than being treated as empty,
    so a corrupt catalog is never overwritten by a fresh one.
    """
    if not os.path.exists(path):
        return []
    try:
        with open(path, encoding='utf-8') as f:
            raw = f.read()
        if raw.startswith(BOM):
            raw = raw[len(BOM):]
        data = json.loads(raw)
    except (OSError, ValueError) as e:
        raise CatalogReadError(path, e) from e
    if not isinstance(data, list):
        raise CatalogReadError(path, f"expected a JSON array, got {type(data).__name__}")
    return data


def write_json_array(path, data):
    """
    Write a JSON array with 2-space indentation.

    The file is written next to the target and moved into place, so a failed
    write leaves the previous file as it was.
    """
    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix='.tmp-', suffix='.json', dir=directory)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise LocalWriteError(path, e) from e


def load_catalog(path):
    return read_json_array(path)


def save_catalog(path, catalog):
    write_json_array(path, catalog)


def load_registry(path):
    return read_json_array(path)


def save_registry(path, registry):
    write_json_array(path, registry)
