"""
Catalog Builder - turns raw card tables into deduplicated card catalogs.

Two independent outputs are built from one TableSnapshot:
- the selectable catalog, from the reference card list (allCards.csv)
- the "cards which have offers" strip, from the offer tables only
Both are keyed by normalized card name; the first display form seen for a
key is the one kept.
"""

from typing import Dict, Iterable, Optional, Tuple

from dineout_offers.models import CardIdentity, CardKind, Catalogs, RawRow, TableSnapshot
from dineout_offers.offers.sites import PRIORITY_ORDER, get_profile
from dineout_offers.parsers import display_name, get_field, split_list
from dineout_offers.utils.logging_config import logger
from dineout_offers.utils.normalization import collation_key, normalize


class CardCollector:
    """Per-kind first-seen-wins map from normalized key to display name."""

    def __init__(self):
        self._names: Dict[CardKind, Dict[str, str]] = {CardKind.CREDIT: {}, CardKind.DEBIT: {}}

    def add(self, raw: Optional[str], kind: CardKind) -> None:
        display = display_name(raw)
        key = normalize(display)
        if key and key not in self._names[kind]:
            self._names[kind][key] = display

    def add_cell(self, cell: Optional[str], kind: CardKind) -> None:
        for raw in split_list(cell):
            self.add(raw, kind)

    def add_rows(self, rows: Iterable[RawRow]) -> None:
        """Harvests both eligibility columns of each row."""
        for row in rows:
            self.add_cell(get_field(row, 'credit'), CardKind.CREDIT)
            self.add_cell(get_field(row, 'debit'), CardKind.DEBIT)

    def identities(self, kind: CardKind) -> Tuple[CardIdentity, ...]:
        names = sorted(self._names[kind].values(), key=collation_key)
        return tuple(CardIdentity.from_display(name, kind) for name in names)


class CatalogBuilder:
    """
    Rebuilds catalogs from a snapshot.

    Holds no state besides the last result; every build is a full
    recomputation, so a partially loaded snapshot simply yields smaller
    catalogs and a later, fuller snapshot yields the complete ones.
    """

    def __init__(self):
        self.last_catalogs: Catalogs = Catalogs()
        self._last_version: Optional[str] = None

    def build(self, snapshot: TableSnapshot) -> Catalogs:
        """
        Build both catalog families for `snapshot`.

        Args:
            snapshot: All currently loaded tables.

        Returns:
            Catalogs with sorted credit/debit tuples for the dropdown and the
            offer strip.
        """
        version = snapshot.version
        if version == self._last_version:
            return self.last_catalogs

        primary = CardCollector()
        primary.add_rows(snapshot.reference)

        # List sites are read before permanent.csv, so their spelling of a
        # card is the one shown in the strip.
        strip = CardCollector()
        list_sites = [site for site in PRIORITY_ORDER if not get_profile(site).credit_only]
        permanent_sites = [site for site in PRIORITY_ORDER if get_profile(site).credit_only]
        for site in list_sites:
            strip.add_rows(snapshot.rows_for(site))
        for site in permanent_sites:
            # one credit card per row
            for row in snapshot.rows_for(site):
                strip.add(get_field(row, 'permanent_card'), CardKind.CREDIT)

        catalogs = Catalogs(
            credit=primary.identities(CardKind.CREDIT),
            debit=primary.identities(CardKind.DEBIT),
            offer_credit=strip.identities(CardKind.CREDIT),
            offer_debit=strip.identities(CardKind.DEBIT),
        )

        logger.info(
            f"Built catalogs (snapshot {version}): {len(catalogs.credit)} credit, "
            f"{len(catalogs.debit)} debit; strip {len(catalogs.offer_credit)} credit, "
            f"{len(catalogs.offer_debit)} debit"
        )

        self.last_catalogs = catalogs
        self._last_version = version
        return catalogs


def build_catalogs(snapshot: TableSnapshot) -> Catalogs:
    """Convenience function for a one-off build."""
    return CatalogBuilder().build(snapshot)
