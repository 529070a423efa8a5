import csv
import io
import logging
import math
import re
from pathlib import Path

from bargains.config import settings
from bargains.schemas.product import Product

logger = logging.getLogger(__name__)

# CSV header -> Product field
COLUMN_MAP: dict[str, str] = {
    "Category": "category",
    "ID": "id",
    "Name": "name",
    "Price": "price",
    "Original Price": "original_price",
    "Discount %": "discount",
    "Currency": "currency",
    "Display Price": "display_price",
    "Store ID": "store_id",
    "Store Name": "store_name",
    "Item MSID": "item_msid",
    "Stock Level": "stock_level",
    "Limit": "limit",
    "Image URL": "image_url",
}

# leading numeric prefix, so "12.50 ea" reads as 12.5 and "25%" as 25
_FLOAT_PREFIX = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[-+]?\d+")


def _parse_float(val: str | None) -> float | None:
    if not val:
        return None
    match = _FLOAT_PREFIX.match(val)
    if not match:
        return None
    value = float(match.group())
    # "1e999" overflows to inf; treat it like any other unparsable cell
    if not math.isfinite(value):
        return None
    return value


def _parse_int(val: str | None) -> int | None:
    if not val:
        return None
    match = _INT_PREFIX.match(val)
    if not match:
        return None
    return int(match.group())


def row_to_product(row: dict[str, str | None]) -> Product:
    """Convert one CSV row to a Product, defaulting anything unparsable."""
    fields = {field: (row.get(header) or "") for header, field in COLUMN_MAP.items()}
    return Product(
        category=fields["category"],
        id=fields["id"],
        name=fields["name"],
        price=_parse_float(fields["price"]) or 0.0,
        original_price=_parse_float(fields["original_price"]),
        discount=_parse_int(fields["discount"]),
        currency=fields["currency"] or settings.default_currency,
        display_price=fields["display_price"],
        store_id=fields["store_id"],
        store_name=fields["store_name"],
        item_msid=fields["item_msid"],
        stock_level=fields["stock_level"],
        limit=fields["limit"],
        image_url=fields["image_url"],
    )


def parse_products(text: str) -> list[Product]:
    reader = csv.DictReader(io.StringIO(text))
    products = []
    for row in reader:
        # skip blank lines, including ones made only of delimiters
        if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
            continue
        products.append(row_to_product(row))
    return products


def load_products(path: Path | str) -> list[Product]:
    """Load the product CSV. Any read or parse failure yields an empty catalog."""
    path = Path(path)
    if not path.exists():
        logger.warning("Products file %s not found, starting with an empty catalog", path)
        return []
    try:
        text = path.read_text(encoding="utf-8-sig")
        products = parse_products(text)
    except (OSError, UnicodeDecodeError, csv.Error):
        logger.exception("Could not load products from %s", path)
        return []
    logger.info("Loaded %d products from %s", len(products), path)
    return products
