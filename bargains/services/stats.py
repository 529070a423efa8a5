from collections.abc import Sequence

from bargains.schemas.product import CatalogSummary, CategoryStats, Product


def compute_category_stats(products: Sequence[Product]) -> list[CategoryStats]:
    """Per-category price and discount statistics, largest categories first.

    Categories are grouped on the exact string, so inconsistent spellings in
    the source data stay separate.
    """
    groups: dict[str, list[Product]] = {}
    for product in products:
        groups.setdefault(product.category, []).append(product)

    stats = []
    for name, members in groups.items():
        prices = [p.price for p in members]
        discounts = [p.discount for p in members if p.discount is not None]
        stats.append(CategoryStats(
            name=name,
            product_count=len(members),
            avg_price=sum(prices) / len(prices),
            avg_discount=sum(discounts) / len(discounts) if discounts else 0.0,
            min_price=min(prices),
            max_price=max(prices),
        ))

    # sorted() is stable, so equal counts keep first-seen order
    return sorted(stats, key=lambda s: s.product_count, reverse=True)


def compute_summary(products: Sequence[Product]) -> CatalogSummary:
    on_sale = [p.discount for p in products if p.discount]
    total_savings = sum(p.original_price - p.price for p in products if p.original_price)
    return CatalogSummary(
        total_products=len(products),
        products_on_sale=len(on_sale),
        average_discount=sum(on_sale) / len(on_sale) if on_sale else 0.0,
        total_savings=total_savings,
    )
