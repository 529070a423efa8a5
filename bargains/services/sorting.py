import unicodedata
from collections.abc import Callable, Iterable

from bargains.schemas.filters import SortKey
from bargains.schemas.product import Product
from bargains.services.formatting import calculate_savings


def _name_key(product: Product) -> str:
    # case- and accent-insensitive, close to a locale collation for Latin names
    decomposed = unicodedata.normalize("NFKD", product.name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


# sort key -> (key function, descending)
_ORDERINGS: dict[SortKey, tuple[Callable[[Product], object], bool]] = {
    SortKey.DISCOUNT: (lambda p: p.discount or 0, True),
    SortKey.SAVINGS: (lambda p: calculate_savings(p.original_price, p.price), True),
    SortKey.PRICE_LOW: (lambda p: p.price, False),
    SortKey.PRICE_HIGH: (lambda p: p.price, True),
    SortKey.NAME: (_name_key, False),
}


def sort_products(products: Iterable[Product], sort_key: SortKey) -> list[Product]:
    """Return a new list ordered by ``sort_key``. Equal items keep their order."""
    key, descending = _ORDERINGS[SortKey(sort_key)]
    return sorted(products, key=key, reverse=descending)
