from pydantic import BaseModel

from bargains.schemas.filters import FilterSpec
from bargains.schemas.product import CatalogSummary, CategoryStats, Product


class BrowseOut(BaseModel):
    products: list[Product]
    shown: int
    total_results: int
    has_more: bool
    categories: list[str]
    max_price: float
    filters: FilterSpec
    active_filter_count: int


class DashboardOut(BaseModel):
    summary: CatalogSummary
    category_stats: list[CategoryStats]
    top_deals: list[Product]
    biggest_savings: list[Product]

    model_config = {"from_attributes": True}
