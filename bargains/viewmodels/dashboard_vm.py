from dataclasses import dataclass, field

from bargains.schemas.product import CatalogSummary, CategoryStats, Product
from bargains.services.rankings import biggest_savings, top_deals
from bargains.services.stats import compute_category_stats, compute_summary


@dataclass
class DashboardViewModel:
    summary: CatalogSummary = field(default_factory=CatalogSummary)
    category_stats: list[CategoryStats] = field(default_factory=list)
    top_deals: list[Product] = field(default_factory=list)
    biggest_savings: list[Product] = field(default_factory=list)

    @classmethod
    def load(cls, products: list[Product], top_n: int = 12) -> "DashboardViewModel":
        # whole catalog, independent of any active filters
        return cls(
            summary=compute_summary(products),
            category_stats=compute_category_stats(products),
            top_deals=top_deals(products, top_n),
            biggest_savings=biggest_savings(products, top_n),
        )
