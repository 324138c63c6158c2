from .suggestion_ranker import (
    RankerOptions, SuggestionRanker, suggest, has_debit_intent, has_select_intent, partition_select,
)
from .lookup_engine import OfferLookupEngine

__all__ = [
    "RankerOptions", "SuggestionRanker", "suggest", "has_debit_intent", "has_select_intent",
    "partition_select", "OfferLookupEngine",
]
