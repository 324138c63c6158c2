"""
Cross-source offer deduplication.

The same promotion is often copied into several sheets (a bank's permanent
benefit also listed on Swiggy, say). Offers are fingerprinted on their
effective title, description, image and link; the first source in priority
order keeps the offer and later copies are dropped.
"""

from typing import Iterable, List, Optional, Sequence, Set

from dineout_offers.models import MatchedOffer, RawRow
from dineout_offers.parsers import get_field
from dineout_offers.utils.logging_config import logger
from dineout_offers.utils.normalization import normalize, normalize_url

FINGERPRINT_SEPARATOR = "||"


def fingerprint(row: RawRow) -> str:
    """
    Dedup key of an offer row.

    title (or Website) || description || image URL || link URL, with text
    run through normalize() and URLs through normalize_url().
    """
    title = get_field(row, 'title') or get_field(row, 'website') or ""
    parts = [
        normalize(title),
        normalize(get_field(row, 'description') or ""),
        normalize_url(get_field(row, 'image') or ""),
        normalize_url(get_field(row, 'link') or ""),
    ]
    return FINGERPRINT_SEPARATOR.join(parts)


def dedup(matched: Iterable[MatchedOffer], seen: Optional[Set[str]] = None) -> List[MatchedOffer]:
    """
    Keeps the first offer per fingerprint.

    Args:
        matched: Offers already in priority order.
        seen: Shared fingerprint set; pass the same set across sources so a
            lower-priority source loses to an earlier one. Updated in place.

    Returns:
        The surviving offers, order preserved.
    """
    if seen is None:
        seen = set()

    kept = []
    for offer in matched:
        key = fingerprint(offer.offer.row)
        if key in seen:
            logger.debug(f"Dropping duplicate {offer.site.value} offer: {key[:80]}")
            continue
        seen.add(key)
        kept.append(offer)
    return kept


class OfferDeduplicator:
    """Applies dedup() across per-site match lists in priority order."""

    def dedup_sources(self, per_source: Sequence[Sequence[MatchedOffer]]) -> List[List[MatchedOffer]]:
        seen: Set[str] = set()
        result = [dedup(offers, seen) for offers in per_source]

        before = sum(len(offers) for offers in per_source)
        after = sum(len(offers) for offers in result)
        if before != after:
            logger.info(f"Removed {before - after} cross-source duplicate offers")
        return result
