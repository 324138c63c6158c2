"""
Offer card components for the Dineout Offer Finder.
"""

import html
from typing import List

import streamlit as st

from dineout_offers.models import OfferGroup, OfferView, SiteTag
from dineout_offers.offers import get_profile, resolve_image

DEFAULT_TITLE = "Offer"
INBUILT_NOTE = "This is a inbuilt feature of this credit card"


def _title_for(offer: OfferView) -> str:
    if offer.title:
        return offer.title
    return f"{get_profile(offer.site).label} Offer" if offer.site == SiteTag.ZOMATO else DEFAULT_TITLE


def render_offer_card(offer: OfferView):
    """Renders a single offer with image fallback, notes and actions."""
    profile = get_profile(offer.site)
    image_src, using_fallback = resolve_image(profile, offer.image_url)
    title = _title_for(offer)

    with st.container(border=True):
        if image_src:
            st.image(image_src, caption="Site logo" if using_fallback else None)

        st.markdown(f"**{html.escape(title)}**")

        if offer.is_permanent:
            if offer.benefit:
                st.write(offer.benefit)
            st.markdown(f"*{INBUILT_NOTE}*")
        elif offer.description:
            st.write(offer.description)

        if offer.coupon_code:
            st.caption("Coupon code")
            st.code(offer.coupon_code, language=None)

        if offer.variant_note:
            st.markdown(
                f"**Note:** This benefit is applicable only on *{html.escape(offer.variant_note)}* variant"
            )

        if offer.link:
            st.link_button("View Offer", offer.link, use_container_width=True)


def render_offer_group(group: OfferGroup, columns: int = 3):
    """Renders one site's section as a grid of cards."""
    st.markdown(f"<h3 style='text-align:center'>{html.escape(group.heading)}</h3>", unsafe_allow_html=True)
    cols = st.columns(columns)
    for i, offer in enumerate(group.offers):
        with cols[i % columns]:
            render_offer_card(offer)


def render_offer_groups(groups: List[OfferGroup]):
    for group in groups:
        render_offer_group(group)
        st.markdown("---")
