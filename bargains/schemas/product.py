from pydantic import BaseModel, Field, computed_field

from bargains.config import settings
from bargains.services.formatting import calculate_savings, format_currency, format_discount


class Product(BaseModel):
    category: str = ""
    id: str = ""
    name: str = ""
    price: float = 0.0
    original_price: float | None = None
    discount: int | None = None  # whole percent, as supplied
    currency: str = Field(default_factory=lambda: settings.default_currency)
    display_price: str = ""
    store_id: str = ""
    store_name: str = ""
    item_msid: str = ""
    stock_level: str = ""
    limit: str = ""  # "" means no purchase cap
    image_url: str = ""

    model_config = {"frozen": True}

    # card labels, serialized alongside the raw fields
    @computed_field
    @property
    def savings(self) -> float:
        return calculate_savings(self.original_price, self.price)

    @computed_field
    @property
    def price_label(self) -> str:
        return format_currency(self.price, self.currency)

    @computed_field
    @property
    def savings_label(self) -> str:
        return format_currency(self.savings, self.currency) if self.savings else ""

    @computed_field
    @property
    def discount_label(self) -> str:
        return format_discount(self.discount)


class CategoryStats(BaseModel):
    name: str
    product_count: int
    avg_price: float
    avg_discount: float = 0.0
    min_price: float
    max_price: float


class CatalogSummary(BaseModel):
    total_products: int = 0
    products_on_sale: int = 0
    average_discount: float = 0.0
    total_savings: float = 0.0
