from dineout_offers.models import MatchedOffer, OfferRecord, SiteTag
from dineout_offers.offers import OfferDeduplicator, dedup, fingerprint


def matched(site, row):
    return MatchedOffer(offer=OfferRecord(site=site, row=row), site=site)


SWIGGY_ROW = {
    "Title": "Flat 15% off",
    "Description": "Up to Rs 150",
    "Image": "https://cdn.example.com/a.png",
    "Link": "https://www.swiggy.com/offers/hdfc/",
}


class TestFingerprint:
    def test_url_scheme_www_and_trailing_slash_are_ignored(self):
        copy = dict(SWIGGY_ROW, Image="http://cdn.example.com/a.png", Link="http://swiggy.com/offers/hdfc")
        assert fingerprint(copy) == fingerprint(SWIGGY_ROW)

    def test_text_is_normalized(self):
        copy = dict(SWIGGY_ROW, Title="  FLAT 15%  off!")
        assert fingerprint(copy) == fingerprint(SWIGGY_ROW)

    def test_website_stands_in_for_missing_title(self):
        a = {"Website": "Swiggy", "Description": "x"}
        b = {"Title": "Swiggy", "Description": "x"}
        assert fingerprint(a) == fingerprint(b)

    def test_different_description_is_a_different_offer(self):
        other = dict(SWIGGY_ROW, Description="Up to Rs 200")
        assert fingerprint(other) != fingerprint(SWIGGY_ROW)


def test_dedup_keeps_first_occurrence_within_a_source():
    offers = [matched(SiteTag.SWIGGY, SWIGGY_ROW), matched(SiteTag.SWIGGY, dict(SWIGGY_ROW))]
    assert len(dedup(offers)) == 1


def test_dedup_is_idempotent():
    offers = [
        matched(SiteTag.SWIGGY, SWIGGY_ROW),
        matched(SiteTag.SWIGGY, dict(SWIGGY_ROW, Title="Other")),
        matched(SiteTag.SWIGGY, SWIGGY_ROW),
    ]
    once = dedup(offers)
    assert dedup(once) == once
    assert len(once) == 2


def test_higher_priority_source_wins_across_sources():
    permanent = [matched(SiteTag.PERMANENT, SWIGGY_ROW)]
    swiggy = [
        matched(SiteTag.SWIGGY, dict(SWIGGY_ROW, Link="http://swiggy.com/offers/hdfc")),
        matched(SiteTag.SWIGGY, dict(SWIGGY_ROW, Title="Unique")),
    ]
    eazydiner = [matched(SiteTag.EAZYDINER, SWIGGY_ROW)]

    result = OfferDeduplicator().dedup_sources([permanent, swiggy, eazydiner])

    assert [len(offers) for offers in result] == [1, 1, 0]
    assert result[0][0].site == SiteTag.PERMANENT
    assert result[1][0].offer.row["Title"] == "Unique"


def test_shared_seen_set_is_updated():
    seen = set()
    dedup([matched(SiteTag.SWIGGY, SWIGGY_ROW)], seen)
    assert fingerprint(SWIGGY_ROW) in seen
    assert dedup([matched(SiteTag.ZOMATO, SWIGGY_ROW)], seen) == []
