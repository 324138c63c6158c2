"""
Card-name parsing for eligibility cells.

Offer sheets list cards as free text, e.g.
    "HDFC Regalia (Visa), Hdfc Millennia,\nSBI Card (RuPay)"
Each entry is a base card name with an optional trailing parenthetical
variant (usually the card network).
"""

import re
from typing import List, Optional

from dineout_offers.utils.normalization import canonicalize_brand, normalize

_TRAILING_GROUP = re.compile(r'\s*\([^)]*\)\s*$')
_TRAILING_VARIANT = re.compile(r'\(([^)]+)\)\s*$')


def base_name(raw: Optional[str]) -> str:
    """Drops a trailing "(...)" group; otherwise returns the trimmed input."""
    if not raw:
        return ""
    return _TRAILING_GROUP.sub('', str(raw)).strip()


def variant(raw: Optional[str]) -> str:
    """
    Contents of the trailing parenthetical group, or "".

    Only the last group at the end of the string counts:
        "SBI Card (RuPay)"        -> "RuPay"
        "Axis (Magnus) Burgundy"  -> ""
    """
    if not raw:
        return ""
    match = _TRAILING_VARIANT.search(str(raw))
    return match.group(1).strip() if match else ""


def split_list(cell: Optional[str]) -> List[str]:
    """Splits a comma-separated cell into trimmed, non-empty entries."""
    if not cell:
        return []
    text = str(cell).replace('\r\n', ' ').replace('\n', ' ')
    return [entry.strip() for entry in text.split(',') if entry.strip()]


def display_name(raw: Optional[str]) -> str:
    """Base name with brand abbreviations fixed, as shown to the user."""
    return canonicalize_brand(base_name(raw))


def entry_key(raw: Optional[str]) -> str:
    """Normalized identity key of a raw eligibility entry."""
    return normalize(display_name(raw))
