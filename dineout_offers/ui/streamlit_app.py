"""
Streamlit UI for the Dineout Offer Finder.
"""

import os
import sys

import streamlit as st

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from dineout_offers.catalog import CatalogBuilder
from dineout_offers.config import Settings
from dineout_offers.loaders import load_snapshot
from dineout_offers.models import CardIdentity, CardKind, TableSnapshot
from dineout_offers.offers import get_profile
from dineout_offers.query import OfferLookupEngine, RankerOptions
from dineout_offers.ui.components.offer_cards import render_offer_groups
from dineout_offers.ui.components.visuals import render_offer_distribution
from dineout_offers.utils.logging_config import logger, setup_logging

# Initialize logging for the UI
setup_logging("dineout_offers")

NO_MATCH_MESSAGE = "No matching cards found. Please try a different name."
NO_OFFERS_MESSAGE = "No offer available for this card"

DISCLAIMER = (
    "All offers, coupons, and discounts listed on our platform are provided for informational purposes only. "
    "We do not guarantee the accuracy, availability, or validity of any offer. Users are advised to verify the "
    "terms and conditions with the respective merchants before making any purchase. We are not responsible for any "
    "discrepancies, expired offers, or losses arising from the use of these coupons."
)


@st.cache_data(show_spinner=False)
def get_snapshot(data_dir: str) -> TableSnapshot:
    """Load (and cache) every CSV table as one snapshot."""
    return load_snapshot(data_dir)


@st.cache_resource(show_spinner=False)
def get_catalog_builder() -> CatalogBuilder:
    """Process-wide builder; catalogs are rebuilt only for a new snapshot version."""
    return CatalogBuilder()


@st.cache_resource(show_spinner=False)
def get_engine(version: str, options_key: str, _snapshot: TableSnapshot, _options: RankerOptions) -> OfferLookupEngine:
    """One engine per snapshot version and ranker options."""
    return OfferLookupEngine(_snapshot, _options, catalog_builder=get_catalog_builder())


def apply_custom_styles():
    """Apply custom CSS to the Streamlit app."""
    st.markdown("""
        <style>
            @import url('https://fonts.googleapis.com/css2?family=Libre+Baskerville:wght@400;700&display=swap');

            .main {
                font-family: 'Libre Baskerville', serif;
            }

            /* Cards-with-offers strip */
            .strip-title {
                font-weight: 700;
                font-size: 16px;
                color: #1F2D45;
                text-align: center;
                margin-bottom: 10px;
            }
            .strip-error {
                color: #b00020;
                text-align: center;
                font-size: 13px;
            }

            /* Messages */
            .no-match {
                color: #d32f2f;
                text-align: center;
                margin-top: 8px;
            }

            #MainMenu {visibility: hidden;}
            footer {visibility: hidden;}
        </style>
    """, unsafe_allow_html=True)


def setup_page_config():
    """Setup Streamlit page configuration."""
    st.set_page_config(
        page_title="Dineout Offers",
        page_icon="🍽️",
        layout="wide",
        initial_sidebar_state="collapsed"
    )
    apply_custom_styles()


def init_session_state():
    """Initialize session state variables."""
    if 'settings' not in st.session_state:
        st.session_state.settings = Settings.from_env()
        logger.setLevel(st.session_state.settings.log_level)
    if 'selected_card' not in st.session_state:
        st.session_state.selected_card = None
    if 'search_query' not in st.session_state:
        st.session_state.search_query = ""

    settings = st.session_state.settings
    snapshot = get_snapshot(str(settings.data_dir))
    st.session_state.snapshot = snapshot
    options = settings.ranker_options()
    st.session_state.engine = get_engine(snapshot.version, options.model_dump_json(), snapshot, options)


def select_card(card: CardIdentity):
    """Callback for dropdown picks and chip clicks."""
    st.session_state.selected_card = card
    st.session_state.search_query = card.display_name


def on_query_change():
    """A new query clears the previous selection."""
    st.session_state.selected_card = None


def render_sidebar():
    """Render data-source status."""
    snapshot: TableSnapshot = st.session_state.snapshot
    engine: OfferLookupEngine = st.session_state.engine

    st.sidebar.title("🍽️ Dineout Offers")
    st.sidebar.subheader("Data Sources")
    st.sidebar.metric("Known credit cards", len(engine.catalogs.credit))
    st.sidebar.metric("Known debit cards", len(engine.catalogs.debit))

    for tag, rows in snapshot.offers.items():
        label = get_profile(tag).label
        error = snapshot.load_errors.get(tag)
        if error:
            st.sidebar.error(f"{label}: {error}")
        else:
            st.sidebar.success(f"{label}: {len(rows)} offers")

    st.sidebar.divider()
    if st.sidebar.button("🔄 Reload CSVs"):
        get_snapshot.clear()
        st.rerun()


def render_chip_row(title: str, cards, kind: CardKind):
    """One strip of clickable card chips."""
    st.markdown(f"**{title}**")
    cols = st.columns(4)
    for i, card in enumerate(cards):
        cols[i % 4].button(
            card.display_name,
            key=f"chip_{kind.value}_{i}",
            on_click=select_card,
            args=(card,),
            use_container_width=True,
        )


def render_offer_strip():
    """Cards which currently carry at least one offer."""
    engine: OfferLookupEngine = st.session_state.engine
    snapshot: TableSnapshot = st.session_state.snapshot
    catalogs = engine.catalogs

    missing = [get_profile(tag).filename for tag in snapshot.load_errors if not get_profile(tag).credit_only]
    if not (catalogs.offer_credit or catalogs.offer_debit or missing):
        return

    with st.expander("Credit And Debit Cards Which Have Offers", expanded=False):
        if not catalogs.offer_debit and missing:
            st.markdown(
                f"<div class='strip-error'>Debit-card chips are empty because one or more offer CSVs "
                f"were not found: {', '.join(missing)}.</div>",
                unsafe_allow_html=True,
            )
        if catalogs.offer_credit:
            render_chip_row("Credit Cards:", catalogs.offer_credit, CardKind.CREDIT)
        if catalogs.offer_debit:
            render_chip_row("Debit Cards:", catalogs.offer_debit, CardKind.DEBIT)


def render_search():
    """Search box with grouped suggestions."""
    engine: OfferLookupEngine = st.session_state.engine

    query = st.text_input(
        "Card",
        placeholder="Type a Credit or Debit Card....",
        label_visibility="collapsed",
        key="search_query",
        on_change=on_query_change,
    )

    if st.session_state.selected_card is not None:
        return

    result = engine.suggest(query)
    if result.no_match:
        st.markdown(f"<p class='no-match'>{NO_MATCH_MESSAGE}</p>", unsafe_allow_html=True)
        if result.synthesized is not None:
            st.session_state.selected_card = result.synthesized
        return

    for group in result.groups:
        st.markdown(f"**{group.label}**")
        for i, entry in enumerate(group.entries):
            st.button(
                entry.display_name,
                key=f"suggest_{group.kind.value}_{i}",
                on_click=select_card,
                args=(entry,),
            )


def render_offers():
    """Offer sections for the selected card."""
    card = st.session_state.selected_card
    if card is None:
        return

    engine: OfferLookupEngine = st.session_state.engine
    with st.spinner("Finding offers..."):
        result = engine.lookup(card)

    if not result.has_offers:
        st.markdown(f"<p class='no-match'>{NO_OFFERS_MESSAGE}</p>", unsafe_allow_html=True)
        return

    render_offer_distribution(result, key_prefix=card.normalized_key.replace(' ', '_'))
    render_offer_groups(result.groups)


def render_header():
    """Render the main header."""
    st.title("🍽️ Dining Offers For Your Card")
    st.caption("Swiggy, Zomato and EazyDiner offers, plus inbuilt card benefits")


def main():
    """Main application entry point."""
    setup_page_config()
    init_session_state()
    render_header()
    render_sidebar()
    render_offer_strip()
    render_search()
    render_offers()

    st.markdown("---")
    st.markdown("### Disclaimer")
    st.caption(DISCLAIMER)


if __name__ == "__main__":
    main()
