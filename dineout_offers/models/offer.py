"""
Data models for card lookup and offer reconciliation.

This module defines the core data structures used throughout the system,
ensuring type safety and validation via Pydantic. Every model that crosses
the engine boundary is frozen: the presentation layer recomputes, it never
patches.
"""

import hashlib
import json
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dineout_offers.utils.normalization import normalize

RawRow = Dict[str, str]


class CardKind(str, Enum):
    """Which eligibility column family a card is matched against."""
    CREDIT = "credit"
    DEBIT = "debit"


class SiteTag(str, Enum):
    """One tag per offer table."""
    PERMANENT = "permanent"
    SWIGGY = "swiggy"
    ZOMATO = "zomato"
    EAZYDINER = "eazydiner"


class CardIdentity(BaseModel):
    """
    A canonical card. Two raw strings that differ only in casing,
    punctuation or diacritics share one normalized_key and are the same card.
    """
    model_config = ConfigDict(frozen=True)

    kind: CardKind
    display_name: str
    normalized_key: str
    resolved: bool = True

    @classmethod
    def from_display(cls, display_name: str, kind: CardKind, resolved: bool = True) -> "CardIdentity":
        """Builds an identity whose key is derived from the display form."""
        return cls(
            kind=kind,
            display_name=display_name,
            normalized_key=normalize(display_name),
            resolved=resolved,
        )

    @field_validator('normalized_key')
    @classmethod
    def validate_key_is_normalized(cls, v):
        """The key must already be in normalized form."""
        if normalize(v) != v:
            raise ValueError(f'normalized_key is not normalized: {v!r}')
        return v


class Catalogs(BaseModel):
    """
    Output of one catalog rebuild.

    `credit`/`debit` feed the searchable dropdown (reference table only);
    `offer_credit`/`offer_debit` feed the "cards which have offers" strip.
    """
    model_config = ConfigDict(frozen=True)

    credit: Tuple[CardIdentity, ...] = ()
    debit: Tuple[CardIdentity, ...] = ()
    offer_credit: Tuple[CardIdentity, ...] = ()
    offer_debit: Tuple[CardIdentity, ...] = ()

    def for_kind(self, kind: CardKind) -> Tuple[CardIdentity, ...]:
        return self.credit if kind == CardKind.CREDIT else self.debit

    @property
    def is_empty(self) -> bool:
        return not self.credit and not self.debit


class OfferRecord(BaseModel):
    """A raw offer row tagged with its site and its eligible-card entries."""
    model_config = ConfigDict(frozen=True)

    site: SiteTag
    row: RawRow
    eligible: Tuple[str, ...] = ()


class MatchedOffer(BaseModel):
    """An offer whose eligible list named the selected card."""
    model_config = ConfigDict(frozen=True)

    offer: OfferRecord
    site: SiteTag
    matched_variant: str = ""


class SuggestionGroup(BaseModel):
    """One labelled section of the dropdown."""
    kind: CardKind
    label: str
    entries: List[CardIdentity] = Field(default_factory=list)


class SuggestionResult(BaseModel):
    """
    Ranked dropdown content for one query.

    An empty `groups` list with `no_match=False` means "no query";
    `no_match=True` means the query matched nothing in either catalog.
    """
    query: str
    groups: List[SuggestionGroup] = Field(default_factory=list)
    debit_first: bool = False
    select_intent: bool = False
    no_match: bool = False
    synthesized: Optional[CardIdentity] = None

    def flatten(self) -> List[CardIdentity]:
        """Entries in presentation order, headings dropped."""
        return [entry for group in self.groups for entry in group.entries]


class OfferView(BaseModel):
    """
    Render-ready offer. Fields missing from the source row stay None;
    display defaults are the UI's concern.
    """
    site: SiteTag
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    link: Optional[str] = None
    variant_note: Optional[str] = None
    coupon_code: Optional[str] = None
    benefit: Optional[str] = None
    is_permanent: bool = False


class OfferGroup(BaseModel):
    """All deduplicated offers of one site, in source order."""
    site: SiteTag
    heading: str
    offers: List[OfferView] = Field(default_factory=list)


class LookupResult(BaseModel):
    """Offers for a selected card, grouped by site in render order."""
    card: CardIdentity
    groups: List[OfferGroup] = Field(default_factory=list)

    @property
    def has_offers(self) -> bool:
        return any(group.offers for group in self.groups)

    @property
    def offer_count(self) -> int:
        return sum(len(group.offers) for group in self.groups)


class TableSnapshot(BaseModel):
    """
    Immutable bundle of every currently loaded table.

    A table that failed to load, or has not loaded yet, is simply empty;
    `load_errors` records why, keyed by site.
    """
    model_config = ConfigDict(frozen=True)

    reference: Tuple[RawRow, ...] = ()
    offers: Dict[SiteTag, Tuple[RawRow, ...]] = Field(default_factory=dict)
    load_errors: Dict[SiteTag, str] = Field(default_factory=dict)

    def rows_for(self, site: SiteTag) -> Tuple[RawRow, ...]:
        return self.offers.get(site, ())

    @property
    def version(self) -> str:
        """Content digest; equal snapshots share a version."""
        payload = {
            'reference': list(self.reference),
            'offers': {site.value: list(rows) for site, rows in sorted(self.offers.items(), key=lambda kv: kv[0].value)},
        }
        encoded = json.dumps(payload, sort_keys=True, ensure_ascii=False).encode('utf-8')
        return hashlib.sha256(encoded).hexdigest()[:16]
