from bargains.schemas.filters import SortKey
from bargains.services.sorting import sort_products


def _ids(products):
    return [p.id for p in products]


def test_price_low_is_stable(product_factory):
    products = [
        product_factory(id="a", price=10.0),
        product_factory(id="b", price=5.0),
        product_factory(id="c", price=5.0),
    ]
    result = sort_products(products, SortKey.PRICE_LOW)

    assert [p.price for p in result] == [5.0, 5.0, 10.0]
    assert _ids(result) == ["b", "c", "a"]


def test_price_high(sample_products):
    result = sort_products(sample_products, SortKey.PRICE_HIGH)

    assert _ids(result) == ["5", "2", "3", "1", "4", "6"]


def test_discount_treats_missing_as_zero(sample_products):
    result = sort_products(sample_products, SortKey.DISCOUNT)

    assert _ids(result) == ["2", "5", "1", "3", "4", "6"]


def test_savings_includes_undiscounted_and_keeps_negatives(sample_products):
    result = sort_products(sample_products, SortKey.SAVINGS)

    # 5.0, 3.0, 1.0, then the zero-savings items in order, then the -0.5 yoghurt
    assert _ids(result) == ["5", "2", "1", "3", "6", "4"]


def test_name_ignores_case_and_accents(product_factory):
    products = [
        product_factory(id="1", name="banana"),
        product_factory(id="2", name="Éclair"),
        product_factory(id="3", name="apple"),
        product_factory(id="4", name="Cherry"),
    ]
    result = sort_products(products, SortKey.NAME)

    assert _ids(result) == ["3", "1", "4", "2"]


def test_accepts_plain_string_key(sample_products):
    assert _ids(sort_products(sample_products, "price-low"))[0] == "6"


def test_returns_new_list(sample_products):
    before = list(sample_products)
    result = sort_products(sample_products, SortKey.PRICE_LOW)

    assert result is not sample_products
    assert sample_products == before
