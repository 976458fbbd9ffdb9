from crest.analysis.placeholders import suggest, suggest_construction_cost, suggest_gross_revenue
from crest.domain.deal import Deal


def test_multifamily_revenue_scales_with_units():
    assert suggest_gross_revenue(Deal(property_type="multifamily", units=80)) == 12_000 * 80
    assert suggest_gross_revenue(Deal(property_type="multifamily")) == 12_000 * 50


def test_carwash_revenue_scales_with_size():
    assert suggest_gross_revenue(Deal(property_type="carwash", building_size=4800)) == 150_000 * 4800


def test_other_types_use_benchmark():
    assert suggest_gross_revenue(Deal(property_type="office", building_size=25_000)) == 28
    assert suggest_gross_revenue(Deal(property_type="hotel")) == 0


def test_construction_cost_per_square_foot():
    assert suggest_construction_cost(Deal(property_type="carwash", construction_type="groundUp", building_size=4800)) == 250 * 4800
    assert suggest_construction_cost(Deal(property_type="retail", construction_type="ti")) == 65 * 5000


def test_acquisition_falls_back_to_flat_rate():
    assert suggest_construction_cost(Deal(property_type="office", construction_type="acquisition", building_size=1000)) == 150 * 1000


def test_suggest_keys():
    assert set(suggest(Deal())) == {"grossRevenue", "constructionCost"}
