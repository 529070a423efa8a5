from enum import StrEnum

from pydantic import BaseModel, Field, field_serializer, model_validator

from bargains.config import settings


class SortKey(StrEnum):
    DISCOUNT = "discount"
    SAVINGS = "savings"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"


class FilterSpec(BaseModel):
    """Complete set of filter and sort criteria for one browsing session.

    Instances are frozen; every change produces a new spec.
    """

    categories: frozenset[str] = frozenset()
    # placeholder until the catalog max price is known
    price_range: tuple[float, float] = Field(default_factory=lambda: (0.0, settings.default_price_ceiling))
    min_discount: int = Field(default=0, ge=0)
    search_query: str = ""
    sort_key: SortKey = SortKey.DISCOUNT
    has_limit: bool | None = None

    model_config = {"frozen": True}

    @field_serializer("categories")
    def _sorted_categories(self, categories: frozenset[str]) -> list[str]:
        return sorted(categories)

    def updated(self, **changes) -> "FilterSpec":
        """Return a new, validated spec with ``changes`` applied."""
        data = self.model_dump()
        data.update(changes)
        return FilterSpec.model_validate(data)


class FilterUpdate(BaseModel):
    categories: list[str] | None = None
    price_range: tuple[float, float] | None = None
    min_discount: int | None = Field(default=None, ge=0)
    search_query: str | None = None
    sort_key: SortKey | None = None
    has_limit: bool | None = None

    @model_validator(mode="after")
    def _check_price_range(self) -> "FilterUpdate":
        if self.price_range is not None and self.price_range[0] > self.price_range[1]:
            raise ValueError("price_range lower bound exceeds upper bound")
        return self

    def apply(self, spec: FilterSpec) -> FilterSpec:
        # has_limit is the only field where an explicit None means "no restriction"
        changes = {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key == "has_limit"
        }
        return spec.updated(**changes)
