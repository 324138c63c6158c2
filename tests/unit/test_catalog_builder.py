from dineout_offers.catalog import CatalogBuilder, build_catalogs
from dineout_offers.models import CardKind, SiteTag, TableSnapshot


def names(entries):
    return [entry.display_name for entry in entries]


def test_variants_collapse_to_one_base_card():
    snapshot = TableSnapshot(reference=(
        {"Eligible Credit Cards": "HDFC Regalia"},
        {"Eligible Credit Cards": "HDFC Regalia (Visa), HDFC Regalia (Mastercard)"},
    ))
    catalogs = build_catalogs(snapshot)
    assert names(catalogs.credit) == ["HDFC Regalia"]
    assert catalogs.credit[0].normalized_key == "hdfc regalia"
    assert catalogs.credit[0].kind == CardKind.CREDIT


def test_first_seen_display_form_wins():
    snapshot = TableSnapshot(reference=(
        {"Eligible Credit Cards": "Axis magnus"},
        {"Eligible Credit Cards": "AXIS MAGNUS, axis-magnus"},
    ))
    assert names(build_catalogs(snapshot).credit) == ["Axis magnus"]


def test_brand_abbreviations_are_canonicalized_for_display():
    snapshot = TableSnapshot(reference=({"Eligible Credit Cards": "Hdfc Millennia, Icici Sapphiro"},))
    assert names(build_catalogs(snapshot).credit) == ["HDFC Millennia", "ICICI Sapphiro"]


def test_sorted_and_split_by_kind_with_column_aliases():
    snapshot = TableSnapshot(reference=(
        {"Eligible Cards": "SBI SimplyCLICK, axis Magnus", "Applicable Debit Cards": "SBI Platinum Debit Card"},
        {"Eligible Credit Cards": "Bank of Baroda Eterna", "Eligible Debit Cards": "Axis Priority Debit Card"},
    ))
    catalogs = build_catalogs(snapshot)
    assert names(catalogs.credit) == ["axis Magnus", "Bank of Baroda Eterna", "SBI SimplyCLICK"]
    assert names(catalogs.debit) == ["Axis Priority Debit Card", "SBI Platinum Debit Card"]
    assert all(entry.kind == CardKind.DEBIT for entry in catalogs.debit)


def test_selectable_catalog_ignores_offer_tables():
    snapshot = TableSnapshot(
        reference=({"Eligible Credit Cards": "HDFC Regalia"},),
        offers={SiteTag.SWIGGY: ({"Eligible Credit Cards": "SBI Card (RuPay)"},)},
    )
    catalogs = build_catalogs(snapshot)
    assert names(catalogs.credit) == ["HDFC Regalia"]
    assert names(catalogs.offer_credit) == ["SBI Card"]


def test_offer_strip_excludes_reference_and_reads_permanent_as_credit_only():
    snapshot = TableSnapshot(
        reference=({"Eligible Credit Cards": "Only In Reference"},),
        offers={
            SiteTag.PERMANENT: ({"Eligible Credit Cards": "SBI Card ELITE", "Eligible Debit Cards": "Ignored Debit"},),
            SiteTag.ZOMATO: ({"Eligible Cards": "HDFC Diners Club Black", "Applicable Debit Cards": "ICICI Coral Debit Card"},),
        },
    )
    catalogs = build_catalogs(snapshot)
    assert names(catalogs.offer_credit) == ["HDFC Diners Club Black", "SBI Card ELITE"]
    assert names(catalogs.offer_debit) == ["ICICI Coral Debit Card"]


def test_offer_strip_prefers_list_site_spelling_over_permanent():
    snapshot = TableSnapshot(offers={
        SiteTag.PERMANENT: ({"Eligible Credit Cards": "AXIS MAGNUS"},),
        SiteTag.EAZYDINER: ({"Eligible Credit Cards": "Axis Magnus (Visa)"},),
    })
    assert names(build_catalogs(snapshot).offer_credit) == ["Axis Magnus"]


def test_partially_loaded_snapshot():
    empty = build_catalogs(TableSnapshot())
    assert empty.is_empty
    assert empty.offer_credit == ()

    fuller = build_catalogs(TableSnapshot(reference=({"Eligible Credit Cards": "HDFC Regalia"},)))
    assert not fuller.is_empty


def test_builder_reuses_result_for_identical_snapshot():
    builder = CatalogBuilder()
    first = builder.build(TableSnapshot(reference=({"Eligible Credit Cards": "HDFC Regalia"},)))
    second = builder.build(TableSnapshot(reference=({"Eligible Credit Cards": "HDFC Regalia"},)))
    assert second is first

    third = builder.build(TableSnapshot(reference=({"Eligible Credit Cards": "SBI Card"},)))
    assert names(third.credit) == ["SBI Card"]
    assert builder.last_catalogs is third
