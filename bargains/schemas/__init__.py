from bargains.schemas.filters import FilterSpec, FilterUpdate, SortKey
from bargains.schemas.product import CatalogSummary, CategoryStats, Product

__all__ = ["CatalogSummary", "CategoryStats", "FilterSpec", "FilterUpdate", "Product", "SortKey"]
