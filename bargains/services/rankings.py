from collections.abc import Sequence

from bargains.schemas.product import Product


def top_deals(products: Sequence[Product], n: int = 12) -> list[Product]:
    """The ``n`` products with the highest discount; ties keep catalog order."""
    if n <= 0:
        return []
    discounted = [p for p in products if p.discount is not None]
    discounted.sort(key=lambda p: p.discount, reverse=True)
    return discounted[:n]


def biggest_savings(products: Sequence[Product], n: int = 12) -> list[Product]:
    """The ``n`` products saving the most against their original price.

    Savings are not clamped: a product priced above its original price ranks
    below every genuine saving.
    """
    if n <= 0:
        return []
    priced = [p for p in products if p.original_price is not None]
    priced.sort(key=lambda p: p.original_price - p.price, reverse=True)
    return priced[:n]
