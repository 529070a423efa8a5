"""Filter-then-sort pipeline over the full catalog plus the values derived from it."""

import math
from collections.abc import Sequence

from bargains.schemas.filters import FilterSpec, SortKey
from bargains.schemas.product import Product
from bargains.services.filtering import matches
from bargains.services.sorting import sort_products


def run(products: Sequence[Product], spec: FilterSpec) -> list[Product]:
    """Filter ``products`` by ``spec`` in a single pass and sort the survivors."""
    return sort_products((p for p in products if matches(p, spec)), spec.sort_key)


def distinct_categories(products: Sequence[Product]) -> list[str]:
    return sorted({p.category for p in products})


def max_price(products: Sequence[Product]) -> float:
    return max((p.price for p in products), default=0.0)


def default_filter_spec(products: Sequence[Product] | None = None) -> FilterSpec:
    """Default spec; once the catalog is known the price ceiling covers it."""
    if products is None:
        return FilterSpec()
    return FilterSpec(price_range=(0.0, float(math.ceil(max_price(products)))))


def active_filter_count(spec: FilterSpec, catalog_max_price: float) -> int:
    """Number of criteria that differ from the defaults, for the filter badge.

    Every selected category counts on its own.
    """
    count = len(spec.categories)
    if spec.search_query:
        count += 1
    if spec.min_discount > 0:
        count += 1
    if spec.has_limit is not None:
        count += 1
    low, high = spec.price_range
    if low > 0 or high < catalog_max_price:
        count += 1
    if spec.sort_key != SortKey.DISCOUNT:
        count += 1
    return count
