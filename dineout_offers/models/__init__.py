"""
Data models for card lookup and offer reconciliation.
"""

from .offer import (
    RawRow, CardKind, SiteTag, CardIdentity, Catalogs, OfferRecord, MatchedOffer,
    SuggestionGroup, SuggestionResult, OfferView, OfferGroup, LookupResult, TableSnapshot,
)

__all__ = [
    "RawRow", "CardKind", "SiteTag", "CardIdentity", "Catalogs", "OfferRecord", "MatchedOffer",
    "SuggestionGroup", "SuggestionResult", "OfferView", "OfferGroup", "LookupResult", "TableSnapshot",
]
