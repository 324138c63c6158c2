from dineout_offers.models import CardIdentity, CardKind, SiteTag
from dineout_offers.offers import OfferMatcher, build_records, eligible_entries, match_offers, match_record


def credit(name):
    return CardIdentity.from_display(name, CardKind.CREDIT)


def debit(name):
    return CardIdentity.from_display(name, CardKind.DEBIT)


SWIGGY_ROWS = (
    {"Offer": "A", "Eligible Credit Cards": "HDFC Regalia (Visa), HDFC Regalia (Mastercard)", "Eligible Debit Cards": ""},
    {"Offer": "B", "Eligible Credit Cards": "SBI Card (RuPay), HDFC Millennia", "Eligible Debit Cards": "SBI Platinum Debit Card"},
    {"Offer": "C", "Eligible Credit Cards": "hdfc-regalia", "Eligible Debit Cards": "HDFC Millennia Debit Card"},
)


class TestEligibleEntries:
    def test_list_sites_split_by_kind(self):
        row = SWIGGY_ROWS[1]
        assert eligible_entries(SiteTag.SWIGGY, row, CardKind.CREDIT) == ["SBI Card (RuPay)", "HDFC Millennia"]
        assert eligible_entries(SiteTag.SWIGGY, row, CardKind.DEBIT) == ["SBI Platinum Debit Card"]

    def test_zomato_column_aliases(self):
        row = {"Eligible Cards": "ICICI Amazon Pay", "Applicable Debit Cards": "ICICI Coral Debit Card"}
        assert eligible_entries(SiteTag.ZOMATO, row, CardKind.CREDIT) == ["ICICI Amazon Pay"]
        assert eligible_entries(SiteTag.ZOMATO, row, CardKind.DEBIT) == ["ICICI Coral Debit Card"]

    def test_permanent_row_names_a_single_credit_card(self):
        row = {"Eligible Credit Cards": "Axis Magnus, Burgundy", "Offer": "25% off"}
        assert eligible_entries(SiteTag.PERMANENT, row, CardKind.CREDIT) == ["Axis Magnus, Burgundy"]
        assert eligible_entries(SiteTag.PERMANENT, row, CardKind.DEBIT) == []
        assert eligible_entries(SiteTag.PERMANENT, {"Offer": "x"}, CardKind.CREDIT) == []


def test_variant_comes_from_first_matching_entry():
    records = build_records(SiteTag.SWIGGY, SWIGGY_ROWS, CardKind.CREDIT)
    matched = match_offers(credit("HDFC Regalia"), records)

    assert [m.offer.row["Offer"] for m in matched] == ["A", "C"]
    assert matched[0].matched_variant == "Visa"
    assert matched[1].matched_variant == ""
    assert all(m.site == SiteTag.SWIGGY for m in matched)


def test_matching_ignores_case_and_punctuation():
    records = build_records(SiteTag.SWIGGY, SWIGGY_ROWS, CardKind.CREDIT)
    matched = match_offers(credit("SBI Card"), records)
    assert len(matched) == 1
    assert matched[0].matched_variant == "RuPay"


def test_debit_card_only_matches_debit_lists():
    records = build_records(SiteTag.SWIGGY, SWIGGY_ROWS, CardKind.DEBIT)
    matched = match_offers(debit("HDFC Millennia Debit Card"), records)
    assert [m.offer.row["Offer"] for m in matched] == ["C"]

    # HDFC Millennia is a credit entry; it must not match debit lists
    assert match_offers(debit("HDFC Millennia"), records) == []


def test_permanent_rejects_debit_cards():
    row = {"Eligible Credit Cards": "HDFC Diners Club Black", "Offer": "Swiggy One"}
    record = build_records(SiteTag.PERMANENT, [row], CardKind.CREDIT)[0]
    assert match_record(debit("HDFC Diners Club Black"), record) is None
    assert match_record(credit("HDFC Diners Club Black"), record) is not None


def test_permanent_variant_is_reported():
    row = {"Eligible Credit Cards": "SBI Card ELITE (Visa)", "Offer": "Movie tickets"}
    records = build_records(SiteTag.PERMANENT, [row], CardKind.CREDIT)
    matched = match_offers(credit("SBI Card ELITE"), records)
    assert matched[0].matched_variant == "Visa"


def test_empty_key_matches_nothing():
    card = CardIdentity(kind=CardKind.CREDIT, display_name="!!", normalized_key="")
    records = build_records(SiteTag.SWIGGY, [{"Eligible Credit Cards": "!!"}], CardKind.CREDIT)
    assert match_offers(card, records) == []


class TestOfferMatcher:
    def test_match_all_keeps_site_order_and_tolerates_missing_sites(self):
        matcher = OfferMatcher({
            SiteTag.SWIGGY: SWIGGY_ROWS,
            SiteTag.ZOMATO: ({"Eligible Cards": "Hdfc Regalia (Mastercard)"},),
        })
        per_site = matcher.match_all(
            credit("HDFC Regalia"), [SiteTag.PERMANENT, SiteTag.SWIGGY, SiteTag.ZOMATO, SiteTag.EAZYDINER],
        )
        assert [len(matches) for matches in per_site] == [0, 2, 1, 0]
        assert per_site[2][0].matched_variant == "Mastercard"
