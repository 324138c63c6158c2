"""
Visualization components for lookup results.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from dineout_offers.models import LookupResult
from dineout_offers.offers import get_profile


def offer_counts_frame(result: LookupResult) -> pd.DataFrame:
    """One row per site that has offers: Site, Offers."""
    return pd.DataFrame(
        [
            {'Site': get_profile(group.site).label, 'Offers': len(group.offers)}
            for group in result.groups if group.offers
        ],
        columns=['Site', 'Offers'],
    )


def render_offer_distribution(result: LookupResult, key_prefix: str = "default"):
    """Bar chart of offers per platform for the selected card."""
    df = offer_counts_frame(result)
    if df.empty:
        return

    fig = px.bar(
        df, x='Site', y='Offers',
        title=f"Offers for {result.card.display_name}",
        template="plotly_white",
        color_discrete_sequence=['#1e7145']
    )
    fig.update_layout(plot_bgcolor='rgba(0,0,0,0)', paper_bgcolor='rgba(0,0,0,0)', height=280)
    st.plotly_chart(fig, key=f"{key_prefix}_offer_bar")
