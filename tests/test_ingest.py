import logging

from bargains.services.ingest import load_products, parse_products
from bargains.viewmodels.browse_vm import BrowseViewModel

HEADER = (
    "Category,ID,Name,Price,Original Price,Discount %,Currency,Display Price,"
    "Store ID,Store Name,Item MSID,Stock Level,Limit,Image URL\n"
)


def test_parses_full_row():
    text = HEADER + "dairy,101,Milk 2L,4.50,5.50,18,NZD,$4.50,s1,Ponsonby,m1,high,4,http://img/1.png\n"
    [product] = parse_products(text)

    assert product.category == "dairy"
    assert product.id == "101"
    assert product.price == 4.5
    assert product.original_price == 5.5
    assert product.discount == 18
    assert product.display_price == "$4.50"
    assert product.store_name == "Ponsonby"
    assert product.limit == "4"
    assert product.image_url == "http://img/1.png"


def test_unparsable_numbers_default():
    text = HEADER + "meat,7,Steak,n/a,abc,,,,,,,,,\n"
    [product] = parse_products(text)

    assert product.price == 0.0
    assert product.original_price is None
    assert product.discount is None
    assert product.currency == "NZD"
    assert product.limit == ""


def test_leading_number_prefix_is_used():
    text = HEADER + "meat,7,Steak,12.5 ea,20kg,33.9%,AUD,,,,,,,\n"
    [product] = parse_products(text)

    assert product.price == 12.5
    assert product.original_price == 20.0
    assert product.discount == 33
    assert product.currency == "AUD"


def test_blank_lines_and_missing_columns():
    text = "Category,Name,Price\n\nbakery,Bread,3\n,,\n"
    products = parse_products(text)

    assert len(products) == 1
    assert products[0].name == "Bread"
    assert products[0].id == ""
    assert products[0].store_id == ""


def test_empty_text_gives_empty_catalog():
    assert parse_products("") == []
    assert parse_products(HEADER) == []


def test_load_missing_file_logs_and_returns_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert load_products(tmp_path / "nope.csv") == []
    assert "not found" in caplog.text


def test_load_file_with_bom(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(HEADER + "bakery,1,Bread,3,,,,,,,,,,\n", encoding="utf-8-sig")

    [product] = load_products(path)
    assert product.category == "bakery"


def test_load_undecodable_file_returns_empty(tmp_path):
    path = tmp_path / "products.csv"
    path.write_bytes(b"\xff\xfe\xfa garbage \x80")

    assert load_products(path) == []


def test_overflowing_numbers_default():
    text = HEADER + "meat,7,Steak,1e999,-2e400,,,,,,,,,\n"
    [product] = parse_products(text)

    assert product.price == 0.0
    assert product.original_price is None


def test_overflowing_price_does_not_break_catalog_setup():
    products = parse_products(HEADER + "meat,7,Steak,1e999,,,,,,,,,,\nmeat,8,Lamb,12.4,,,,,,,,,,\n")
    vm = BrowseViewModel.load(products)

    assert vm.max_price == 12.4
    assert vm.spec.price_range == (0.0, 13.0)


def test_missing_currency_uses_configured_default(monkeypatch):
    monkeypatch.setattr("bargains.services.ingest.settings.default_currency", "AUD")
    [product] = parse_products(HEADER + "bakery,1,Bread,3,,,,,,,,,,\n")

    assert product.currency == "AUD"
