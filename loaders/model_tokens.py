"""
Cell text and model token normalization.

Spreadsheet cells arrive as str, int, float, datetime or None depending on
how the operator typed them. Everything the parsers compare or store goes
through cell_text() first so that 23 and 23.0 both read as "23".

Functions:
    cell_text: Render any cell value as trimmed text
    normalize_model_token: Canonicalize a model label ("ZT-350D" -> "350D")
"""

import math
import re

from .config import BRAND_PREFIX

NON_TOKEN_CHARS = re.compile(r'[^0-9A-Z]')
LEADING_DIGITS = re.compile(r'^\d{3}')


def cell_text(value):
    """
    Render a cell value as trimmed text.

    Examples:
        >>> cell_text(None)
        ''
        >>> cell_text(23.0)
        '23'
        >>> cell_text('  1.6L ')
        '1.6L'
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def normalize_model_token(raw):
    """
    Canonicalize a raw model label into the model token.

    Uppercases, strips everything outside [0-9A-Z], drops the brand prefix
    and requires the rest to start with three digits. Returns None for
    anything that is not a model label; never raises.

    Examples:
        >>> normalize_model_token(' ZT-350D ')
        '350D'
        >>> normalize_model_token('zt368g')
        '368G'
        >>> normalize_model_token('AB12') is None
        True
    """
    token = NON_TOKEN_CHARS.sub('', cell_text(raw).upper())
    if token.startswith(BRAND_PREFIX):
        token = token[len(BRAND_PREFIX):]
    if not LEADING_DIGITS.match(token):
        return None
    return token
