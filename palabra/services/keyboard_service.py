"""
Keyboard Service

On-screen keyboard layout, the long-press accent table and key lookups
against the disabled key set.
"""

import re
import unicodedata
from typing import AbstractSet, Dict, List, Optional

from .scoring import key_for_letter

KEY_ROWS: List[List[str]] = [
    list('QWERTYUIOP'),
    list('ASDFGHJKLÑ'),
    list('ZXCVBNM'),
]

DELETE_KEY = 'DELETE'
ENTER_KEY = 'ENTER'
SPECIAL_KEYS = (DELETE_KEY, ENTER_KEY)

# Long-press popup contents per base key
ACCENT_VARIANTS: Dict[str, List[str]] = {
    'A': ['Á'],
    'E': ['É'],
    'I': ['Í'],
    'O': ['Ó'],
    'U': ['Ú'],
}

LETTER_PATTERN = re.compile(r'^[A-ZÑÁÉÍÓÚ]$')


def normalize_key(key) -> Optional[str]:
    """
    Normalises a raw key name from a client.

    Returns:
        The uppercase key, or None when it is not a letter or special key
    """
    if not key or not isinstance(key, str):
        return None
    normalized = unicodedata.normalize('NFC', key.strip()).upper()
    if normalized in SPECIAL_KEYS or LETTER_PATTERN.match(normalized):
        return normalized
    return None


def is_key_disabled(key: str, disabled: AbstractSet[str]) -> bool:
    """Accented variants follow their base key."""
    if key in SPECIAL_KEYS:
        return False
    return key_for_letter(key) in disabled


def get_variants(key: str, disabled: AbstractSet[str]) -> Dict:
    """
    Resolves a long press on a key.

    Returns:
        dict with 'popup' (whether to show the accent popup) and 'keys'
        (the popup keys, or the key itself when it is pressed directly)
    """
    normalized = normalize_key(key)
    if normalized is None or normalized in SPECIAL_KEYS or is_key_disabled(normalized, disabled):
        return {'popup': False, 'keys': []}

    variants = ACCENT_VARIANTS.get(normalized)
    if variants:
        return {
            'popup': True,
            'keys': [v for v in variants if not is_key_disabled(v, disabled)]
        }
    return {'popup': False, 'keys': [normalized]}


def get_layout(disabled: AbstractSet[str]) -> Dict:
    """Returns the keyboard rows with a disabled flag per key."""
    rows = [
        [{'key': key, 'disabled': is_key_disabled(key, disabled)} for key in row]
        for row in KEY_ROWS
    ]
    return {
        'rows': rows,
        'special': [{'key': key, 'disabled': False} for key in SPECIAL_KEYS],
        'variants': {key: list(values) for key, values in ACCENT_VARIANTS.items()},
        'disabled_keys': sorted(disabled)
    }
