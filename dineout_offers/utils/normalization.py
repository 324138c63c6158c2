"""
Centralized normalization utilities for the Dineout Offer Finder.

Everything here is total: any input, including None, yields a string.
"""

import re
import unicodedata
from typing import List, Optional, Tuple

_NON_WORD = re.compile(r'[^\w\s]')
_WHITESPACE = re.compile(r'\s+')

# Ordered (pattern, replacement) pairs applied to display names only.
BRAND_REPLACEMENTS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r'\bMakemytrip\b', re.IGNORECASE), 'MakeMyTrip'),
    (re.compile(r'\bIcici\b', re.IGNORECASE), 'ICICI'),
    (re.compile(r'\bHdfc\b', re.IGNORECASE), 'HDFC'),
    (re.compile(r'\bSbi\b', re.IGNORECASE), 'SBI'),
    (re.compile(r'\bIdfc\b', re.IGNORECASE), 'IDFC'),
    (re.compile(r'\bPnb\b', re.IGNORECASE), 'PNB'),
    (re.compile(r'\bRbl\b', re.IGNORECASE), 'RBL'),
    (re.compile(r'\bYes\b', re.IGNORECASE), 'YES'),
]


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch))


def _fold(text: str) -> str:
    norm = _strip_marks(text.lower()).lower()
    norm = _NON_WORD.sub(' ', norm)
    return _WHITESPACE.sub(' ', norm).strip()


def normalize(value: Optional[str]) -> str:
    """
    Canonical comparison key for card names and offer text.

    Transformation pipeline:
    1. Force lowercase
    2. Compatibility-decompose and drop combining marks (diacritics)
    3. Replace every non-word, non-space character with a space
    4. Collapse whitespace and trim

    Examples:
        >>> normalize("  HDFC  Regalia-Gold ")
        'hdfc regalia gold'
        >>> normalize("Café Card")
        'cafe card'
    """
    if not value:
        return ""

    key = _fold(str(value))
    # Compatibility forms (e.g. unit symbols) can decompose into new
    # upper-case letters, so fold until stable.
    folded = _fold(key)
    while folded != key:
        key, folded = folded, _fold(folded)
    return key


def canonicalize_brand(text: Optional[str]) -> str:
    """Applies the known bank/brand abbreviation fixes to a display string."""
    result = str(text or "")
    for pattern, replacement in BRAND_REPLACEMENTS:
        result = pattern.sub(replacement, result)
    return result


def normalize_url(url: Optional[str]) -> str:
    """
    Reduces a URL to a scheme-less comparison form.

    'https://www.Example.com/offer/' -> 'example.com/offer'
    """
    if not url:
        return ""

    norm = str(url).strip().lower()
    norm = re.sub(r'^https?://', '', norm)
    norm = re.sub(r'^www\.', '', norm)
    if norm.endswith('/'):
        norm = norm[:-1]
    return norm


def collation_key(text: Optional[str]) -> Tuple[str, str, str]:
    """
    Sort key approximating a locale-aware comparison.

    Accents and case are ignored first, then case differences break ties,
    then the raw string keeps the order total.
    """
    raw = str(text or "")
    base = _strip_marks(raw)
    return (base.casefold(), base, raw)
