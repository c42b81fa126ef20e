"""
Spec catalog merging and filtering.

The catalog is an ordered list of spec record dicts. A record is identified
by the case-insensitive (model, category, item) triple, not by its id.

Functions:
    spec_key: Composite key of a record
    merge_specs: Merge candidate records into a catalog (pure)
    filter_specs: Records matching a model and/or category, in catalog order
"""


def _fold(value):
    return str(value if value is not None else '').lower()


def spec_key(record):
    """
    Composite key used for deduplication.

    A tuple rather than a joined string, so an item containing '|' cannot
    collide with a different (model, category, item) combination.

    Examples:
        >>> spec_key({'model': '350D', 'category': 'torque', 'item': 'Head Bolt'})
        ('350d', 'torque', 'head bolt')
    """
    return (_fold(record.get('model')), _fold(record.get('category')), _fold(record.get('item')))


def merge_specs(catalog, candidates):
    """
    Merge candidate records into the catalog.

    - A candidate whose key already exists overwrites that record in place:
      the record keeps its position, candidate fields win, and fields only
      the old record has (such as 'note') are kept.
    - A candidate with a new key is appended.
    - When several candidates share a key, the last one wins.

    Nothing is ever removed. The input catalog and its records are not
    modified.

    Args:
        catalog: Existing list of spec records
        candidates: Iterable of candidate spec records

    Returns:
        list: The merged catalog
    """
    merged = [dict(record) for record in catalog]
    positions = {}
    for idx, record in enumerate(merged):
        positions.setdefault(spec_key(record), idx)

    for candidate in candidates:
        key = spec_key(candidate)
        idx = positions.get(key)
        if idx is None:
            positions[key] = len(merged)
            merged.append(dict(candidate))
        else:
            merged[idx] = {**merged[idx], **candidate}

    return merged


def filter_specs(catalog, model=None, category=None):
    """
    Return records for a model and/or category, preserving catalog order.

    A falsy filter matches everything. Model tokens are compared
    case-insensitively, as are categories.
    """
    model = _fold(model) if model else None
    category = _fold(category) if category else None
    return [
        record for record in catalog
        if (model is None or _fold(record.get('model')) == model)
        and (category is None or _fold(record.get('category')) == category)
    ]
