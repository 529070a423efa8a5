from bargains.schemas.filters import FilterSpec
from bargains.schemas.product import Product


def matches(product: Product, spec: FilterSpec) -> bool:
    """True if ``product`` passes every criterion set in ``spec``.

    Unset criteria (no categories, zero min discount, empty query, has_limit
    None) always pass. The price range is always checked.
    """
    if spec.categories and product.category not in spec.categories:
        return False

    low, high = spec.price_range
    if not low <= product.price <= high:
        return False

    if spec.min_discount > 0 and (product.discount or 0) < spec.min_discount:
        return False

    if spec.search_query:
        query = spec.search_query.lower()
        if query not in product.name.lower() and query not in product.category.lower():
            return False

    if spec.has_limit is not None and spec.has_limit != (product.limit != ""):
        return False

    return True
