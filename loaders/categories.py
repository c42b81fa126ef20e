"""
Column header classification.

Maps a header like "헤드볼트 토크" or "engine-oil-capacity" to one of the
spec categories. Rules are evaluated in a fixed order because the labels
overlap: a brake oil column is a consumable even though it mentions oil.
"""

import re

from .config import CONSUMABLE_KEYWORDS, TORQUE_KEYWORDS, OIL_KEYWORDS

HEADER_NOISE = re.compile(r'[\s_\-]+')

CATEGORY_RULES = (
    ('consumable', CONSUMABLE_KEYWORDS),
    ('torque', TORQUE_KEYWORDS),
    ('oil', OIL_KEYWORDS),
)


def normalize_header(header):
    """Lowercase a header and drop spaces, underscores and hyphens."""
    return HEADER_NOISE.sub('', str(header or '').lower())


def classify_header(header):
    """
    Return the spec category for a column header, or None to ignore it.

    Examples:
        >>> classify_header('brake-fluid-capacity')
        'consumable'
        >>> classify_header('Head Bolt Torque')
        'torque'
        >>> classify_header('remarks') is None
        True
    """
    text = normalize_header(header)
    if not text:
        return None
    for category, keywords in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return category
    return None
