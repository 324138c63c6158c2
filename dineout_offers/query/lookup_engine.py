"""
Orchestrator for the Dineout Offer Finder.
"""

from typing import List, Optional

from dineout_offers.catalog import CatalogBuilder
from dineout_offers.models import (
    CardIdentity, CardKind, Catalogs, LookupResult, OfferGroup, SuggestionResult, TableSnapshot,
)
from dineout_offers.offers import PRIORITY_ORDER, OfferDeduplicator, OfferMatcher, get_profile, present
from dineout_offers.parsers import display_name
from dineout_offers.query.suggestion_ranker import RankerOptions, SuggestionRanker
from dineout_offers.utils.logging_config import logger
from dineout_offers.utils.normalization import normalize


class OfferLookupEngine:
    """
    Runs the lookup pipeline over one immutable TableSnapshot.

    Responsibilities:
    1. Catalogs: built once per snapshot via CatalogBuilder.
    2. Suggestions: SuggestionRanker over the selectable catalogs.
    3. Offers: OfferMatcher per site, cross-source dedup, presentation.

    A new snapshot means a new engine; nothing here is patched in place.
    Pass a shared CatalogBuilder to reuse catalogs across engines built
    for the same snapshot version.
    """

    def __init__(
        self,
        snapshot: TableSnapshot,
        options: Optional[RankerOptions] = None,
        catalog_builder: Optional[CatalogBuilder] = None,
    ):
        self.snapshot = snapshot
        self.catalog_builder = catalog_builder or CatalogBuilder()
        self.ranker = SuggestionRanker(options)
        self.matcher = OfferMatcher(snapshot.offers)
        self.deduplicator = OfferDeduplicator()
        self.catalogs: Catalogs = self.catalog_builder.build(snapshot)
        logger.info(f"OfferLookupEngine ready for snapshot {snapshot.version}")

    def suggest(self, query: str) -> SuggestionResult:
        return self.ranker.suggest(query, self.catalogs)

    def select(self, name: str, kind: CardKind) -> CardIdentity:
        """
        Identity for a picked dropdown entry or a clicked strip chip.

        Raw names are reduced the same way catalog entries are, so
        "Hdfc Regalia (Visa)" selects "HDFC Regalia".
        """
        return CardIdentity.from_display(display_name(name), kind)

    def lookup(self, card: CardIdentity) -> LookupResult:
        """
        Deduplicated offers for `card`, grouped per site in priority order.

        An unresolved (synthesized) card yields an empty result, which the UI
        reports as "no offer available for this card".
        """
        if not card.resolved or not normalize(card.display_name):
            logger.info(f"Lookup for unresolved card '{card.display_name}': no offers")
            return LookupResult(card=card)

        per_site = self.matcher.match_all(card, PRIORITY_ORDER)
        per_site = self.deduplicator.dedup_sources(per_site)

        groups: List[OfferGroup] = []
        for site, matched in zip(PRIORITY_ORDER, per_site):
            if not matched:
                continue
            groups.append(OfferGroup(
                site=site,
                heading=get_profile(site).heading,
                offers=[present(offer) for offer in matched],
            ))

        result = LookupResult(card=card, groups=groups)
        logger.info(f"Found {result.offer_count} offers for '{card.display_name}' ({card.kind.value})")
        return result
