from .sites import SiteProfile, SITE_PROFILES, PRIORITY_ORDER, REFERENCE_FILENAME, get_profile
from .offer_matcher import OfferMatcher, build_records, eligible_entries, match_offers, match_record
from .deduplicator import OfferDeduplicator, dedup, fingerprint
from .presenter import present, resolve_image, is_usable_image

__all__ = [
    "SiteProfile", "SITE_PROFILES", "PRIORITY_ORDER", "REFERENCE_FILENAME", "get_profile",
    "OfferMatcher", "build_records", "eligible_entries", "match_offers", "match_record",
    "OfferDeduplicator", "dedup", "fingerprint",
    "present", "resolve_image", "is_usable_image",
]
