"""
Alias-based column lookup.

Offer sheets are hand-authored, so one logical field appears under several
column names. Each logical field maps to an ordered alias list; the first
alias that is present with a non-blank value wins.
"""

from typing import Dict, Iterable, Mapping, Optional, Sequence

FIELD_ALIASES: Dict[str, Sequence[str]] = {
    'credit': ("Eligible Credit Cards", "Eligible Cards"),
    'debit': ("Eligible Debit Cards", "Applicable Debit Cards"),
    'title': ("Offer Title", "Title"),
    'image': ("Image", "Credit Card Image", "Offer Image", "image", "Image URL"),
    'link': ("Link", "Offer Link"),
    'description': ("Description", "Details", "Offer Description", "Flight Benefit"),
    'website': ("Website",),
    # permanent.csv
    'permanent_card': ("Eligible Credit Cards",),
    'permanent_benefit': ("Offer", "Benefit", "Grocery Benefits", "Hotel Benefit", "Movie Benefit"),
}


def _header_key(name: str) -> str:
    return " ".join(str(name).split()).casefold()


def _lookup(row: Mapping[str, str], column: str) -> Optional[str]:
    if column in row:
        return row[column]
    wanted = _header_key(column)
    for key, value in row.items():
        if _header_key(key) == wanted:
            return value
    return None


def first_present(row: Optional[Mapping[str, str]], aliases: Iterable[str]) -> Optional[str]:
    """
    Returns the first non-blank value among `aliases`, or None.

    Lookup is exact first, then case- and whitespace-insensitive on the
    header, so "eligible credit cards " still resolves.
    """
    if not row:
        return None
    for column in aliases:
        value = _lookup(row, column)
        if value is None:
            continue
        text = str(value)
        if text.strip():
            return text
    return None


def get_field(row: Optional[Mapping[str, str]], field: str) -> Optional[str]:
    """first_present() over the standard aliases of a logical field."""
    return first_present(row, FIELD_ALIASES[field])
