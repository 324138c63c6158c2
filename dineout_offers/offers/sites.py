"""
Registry of offer sources.

Each site's column quirks live here as data, not as special cases in the
matcher or presenter. Registry order is the priority order used for
cross-source deduplication and the order sections are rendered in.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from dineout_offers.models import SiteTag


class SiteProfile(BaseModel):
    """Static description of one offer table."""
    model_config = ConfigDict(frozen=True)

    tag: SiteTag
    label: str
    heading: str
    filename: str
    show_variant_note: bool = True
    credit_only: bool = False
    fallback_image: Optional[str] = None

    # Preferred columns, read before the generic aliases
    title_columns: Tuple[str, ...] = ()
    description_columns: Tuple[str, ...] = ()
    image_columns: Tuple[str, ...] = ()
    link_columns: Tuple[str, ...] = ()
    coupon_columns: Tuple[str, ...] = ()


SITE_PROFILES: List[SiteProfile] = [
    SiteProfile(
        tag=SiteTag.PERMANENT,
        label="Permanent",
        heading="Permanent Offers",
        filename="permanent.csv",
        credit_only=True,
    ),
    SiteProfile(
        tag=SiteTag.SWIGGY,
        label="Swiggy",
        heading="Offers On Swiggy",
        filename="Swiggy.csv",
        fallback_image="https://restaurantindia.s3.ap-south-1.amazonaws.com/s3fs-public/2020-02/Swiggy.jpg",
        title_columns=("Offer",),
        description_columns=("Offer Description", "Description"),
        image_columns=("Images", "Image"),
        link_columns=("Link",),
    ),
    SiteProfile(
        tag=SiteTag.ZOMATO,
        label="Zomato",
        heading="Offers On Zomato",
        filename="Zomato.csv",
        fallback_image=(
            "https://c.ndtvimg.com/2024-06/mr51ho8o_zomato-logo-stock-image_625x300_03_June_24.jpg"
            "?im=FeatureCrop,algorithm=dnn,width=545,height=307"
        ),
        description_columns=("Description",),
        coupon_columns=("Coupon Code",),
    ),
    SiteProfile(
        tag=SiteTag.EAZYDINER,
        label="EazyDiner",
        heading="Offers On EazyDiner",
        filename="Eazydiner.csv",
        fallback_image="https://pbs.twimg.com/profile_images/1559453938390294530/zvZbaruY_400x400.jpg",
        title_columns=("Offer",),
        description_columns=("Offer Description", "Description"),
        image_columns=("Images", "Image"),
        link_columns=("Link",),
    ),
]

PROFILES_BY_TAG: Dict[SiteTag, SiteProfile] = {profile.tag: profile for profile in SITE_PROFILES}

PRIORITY_ORDER: List[SiteTag] = [profile.tag for profile in SITE_PROFILES]

REFERENCE_FILENAME = "allCards.csv"


def get_profile(site: SiteTag) -> SiteProfile:
    return PROFILES_BY_TAG[site]
