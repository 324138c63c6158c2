"""
Offer matching: which rows of an offer table name the selected card.
"""

from typing import Iterable, List, Mapping, Optional, Sequence

from dineout_offers.models import CardIdentity, CardKind, MatchedOffer, OfferRecord, RawRow, SiteTag
from dineout_offers.offers.sites import get_profile
from dineout_offers.parsers import entry_key, get_field, split_list, variant
from dineout_offers.utils.logging_config import logger


def eligible_entries(site: SiteTag, row: RawRow, kind: CardKind) -> List[str]:
    """
    Raw eligible-card entries of a row for the given card kind.

    Permanent rows carry a single card name rather than a list, and only
    ever describe credit cards.
    """
    if get_profile(site).credit_only:
        if kind != CardKind.CREDIT:
            return []
        name = get_field(row, 'permanent_card')
        return [name.strip()] if name and name.strip() else []

    field = 'debit' if kind == CardKind.DEBIT else 'credit'
    return split_list(get_field(row, field))


def build_records(site: SiteTag, rows: Iterable[RawRow], kind: CardKind) -> List[OfferRecord]:
    """Tags raw rows of one table as OfferRecords for a card kind."""
    return [
        OfferRecord(site=site, row=row, eligible=tuple(eligible_entries(site, row, kind)))
        for row in rows
    ]


def match_record(card: CardIdentity, record: OfferRecord) -> Optional[MatchedOffer]:
    """
    Returns a MatchedOffer for the first eligible entry naming `card`.

    Entries after the first match are not inspected, so the variant always
    comes from that one triggering entry.
    """
    if get_profile(record.site).credit_only and card.kind != CardKind.CREDIT:
        return None

    for raw in record.eligible:
        if entry_key(raw) == card.normalized_key:
            return MatchedOffer(offer=record, site=record.site, matched_variant=variant(raw))
    return None


def match_offers(card: CardIdentity, records: Sequence[OfferRecord]) -> List[MatchedOffer]:
    """Every record whose eligible list contains `card`, in table order."""
    if not card.normalized_key:
        return []

    matched = []
    for record in records:
        hit = match_record(card, record)
        if hit is not None:
            matched.append(hit)
    return matched


class OfferMatcher:
    """Matches a card against each site's rows, keyed by site."""

    def __init__(self, rows_by_site: Mapping[SiteTag, Sequence[RawRow]]):
        self.rows_by_site = rows_by_site

    def match_site(self, card: CardIdentity, site: SiteTag) -> List[MatchedOffer]:
        rows = self.rows_by_site.get(site, ())
        records = build_records(site, rows, card.kind)
        matched = match_offers(card, records)
        logger.debug(f"Matched {len(matched)}/{len(records)} {site.value} rows for '{card.display_name}'")
        return matched

    def match_all(self, card: CardIdentity, sites: Sequence[SiteTag]) -> List[List[MatchedOffer]]:
        """Per-site matches in the order of `sites`."""
        return [self.match_site(card, site) for site in sites]
