"""
Turns matched offer rows into render-ready OfferViews.
"""

from typing import Optional, Sequence

from dineout_offers.models import MatchedOffer, OfferView, RawRow
from dineout_offers.offers.sites import SiteProfile, get_profile
from dineout_offers.parsers import first_present, get_field

_UNUSABLE_IMAGE_VALUES = {'na', 'n/a', 'null', 'undefined', '-', 'image unavailable'}


def _preferred(row: RawRow, columns: Sequence[str], fallback: Optional[str]) -> Optional[str]:
    if columns:
        value = first_present(row, columns)
        if value is not None:
            return value
    return fallback


def is_usable_image(value: Optional[str]) -> bool:
    """False for blanks and placeholder strings sheets use for 'no image'."""
    if not value:
        return False
    text = str(value).strip()
    return bool(text) and text.lower() not in _UNUSABLE_IMAGE_VALUES


def resolve_image(profile: SiteProfile, candidate: Optional[str]):
    """
    Image to display for an offer.

    Returns (src, using_fallback). Sites with a logo fall back to it when the
    sheet's image is unusable.
    """
    if not is_usable_image(candidate) and profile.fallback_image:
        return profile.fallback_image, True
    return candidate, False


def present(matched: MatchedOffer) -> OfferView:
    """Builds the view of one matched offer using its site's column quirks."""
    row = matched.offer.row
    profile = get_profile(matched.site)

    title = get_field(row, 'title') or get_field(row, 'website')
    description = get_field(row, 'description')
    image = get_field(row, 'image')
    link = get_field(row, 'link')

    title = _preferred(row, profile.title_columns, title)
    description = _preferred(row, profile.description_columns, description)
    image = _preferred(row, profile.image_columns, image)
    link = _preferred(row, profile.link_columns, link)

    coupon_code = first_present(row, profile.coupon_columns) if profile.coupon_columns else None
    benefit = get_field(row, 'permanent_benefit') if profile.credit_only else None

    variant_note = None
    if profile.show_variant_note and matched.matched_variant.strip():
        variant_note = matched.matched_variant.strip()

    return OfferView(
        site=matched.site,
        title=title,
        description=description,
        image_url=image,
        link=link,
        variant_note=variant_note,
        coupon_code=coupon_code,
        benefit=benefit,
        is_permanent=profile.credit_only,
    )
