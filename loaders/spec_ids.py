"""
Deterministic spec ids and candidate record construction.

Ids look like 'spec-350d-torque-head-bolt'. Item labels that slug to
nothing (Korean labels, symbols only) fall back to a short hash so the id
stays stable across runs and matches ids already present in the catalog.
"""

import re

NON_SLUG_CHARS = re.compile(r'[^a-z0-9]+')
BASE36_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_slug(value):
    """
    Examples:
        >>> to_slug('Head Bolt (M8)')
        'head-bolt-m8'
        >>> to_slug('헤드볼트')
        ''
    """
    return NON_SLUG_CHARS.sub('-', str(value).lower()).strip('-')


def _to_base36(number):
    if number == 0:
        return '0'
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(BASE36_DIGITS[rem])
    return ''.join(reversed(digits))


def hash_text(value):
    """
    32-bit djb2-xor hash of the text, rendered in base 36.

    Works on UTF-16 code units and wraps at 32 bits after every step so
    the result matches ids generated by the earlier import tooling.
    """
    text = '' if value is None else str(value)
    encoded = text.encode('utf-16-le', 'surrogatepass')
    h = 5381
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = ((h * 33) & 0xFFFFFFFF) ^ unit
    return _to_base36(h & 0xFFFFFFFF)


def safe_slug(value):
    slug = to_slug('' if value is None else value)
    if slug:
        return slug
    return f"k{hash_text(value)}"


def build_spec_id(model, category, item):
    return f"spec-{to_slug(model)}-{to_slug(category)}-{safe_slug(item)}"


def make_spec_record(model, category, item, value):
    """
    Build a candidate spec record.

    Args:
        model: Canonical model token ('350D')
        category: One of the spec categories
        item: Item label as it appears in the sheet
        value: Value text, unit included ('23 N·m')

    Returns:
        dict: {'id', 'model', 'category', 'item', 'value'}
    """
    return {
        'id': build_spec_id(model, category, item),
        'model': model,
        'category': category,
        'item': item,
        'value': value,
    }
