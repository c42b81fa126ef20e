"""
Model registry maintenance.

The registry is a list of {'id': token, 'name': display name} kept sorted by
id. New model tokens found during an import are appended with a default
display name; existing entries (and any extra fields on them, like parts
catalog URLs) are never touched.
"""

from loaders.config import BRAND_NAME

def add_models(registry, tokens, brand=BRAND_NAME):
    """
    Add registry entries for tokens not already present.

    Args:
        registry: Existing list of model records
        tokens: Iterable of model tokens seen during parsing
        brand: Display name prefix for new entries

    Returns:
        tuple: (registry, added)
            registry: New list, sorted by id if anything was added,
                      otherwise the records in their original order
            added: List of tokens that were added
    """
    updated = [dict(entry) for entry in registry]
    known = {entry.get('id') for entry in updated}
    added = []

    for token in tokens:
        if not token or token in known:
            continue
        updated.append({'id': token, 'name': f"{brand} {token}"})
        known.add(token)
        added.append(token)

    if added:
        updated.sort(key=lambda entry: str(entry.get('id', '')))
    return updated, added

