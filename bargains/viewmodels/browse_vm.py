import logging
from dataclasses import dataclass, field

from bargains.schemas.filters import FilterSpec, FilterUpdate
from bargains.schemas.product import Product
from bargains.services import pipeline
from bargains.services.pagination import PaginationController

logger = logging.getLogger(__name__)


@dataclass
class BrowseViewModel:
    """One browsing session: the catalog, the live filter spec and pagination.

    The spec is only ever replaced, never mutated, and every replacement
    re-runs the pipeline and resets pagination.
    """

    products: list[Product] = field(default_factory=list)
    spec: FilterSpec = field(default_factory=pipeline.default_filter_spec)
    pagination: PaginationController = field(default_factory=PaginationController)
    results: list[Product] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    max_price: float = 0.0

    @classmethod
    def load(cls, products: list[Product], page_size: int = 30) -> "BrowseViewModel":
        vm = cls(pagination=PaginationController(page_size))
        vm.replace_dataset(products)
        return vm

    @property
    def visible(self) -> list[Product]:
        return self.pagination.visible_slice(self.results)

    @property
    def has_more(self) -> bool:
        return self.pagination.has_more(self.results)

    @property
    def total_results(self) -> int:
        return len(self.results)

    @property
    def active_filter_count(self) -> int:
        return pipeline.active_filter_count(self.spec, self.max_price)

    def replace_filters(self, spec: FilterSpec) -> None:
        self.spec = spec
        self.results = pipeline.run(self.products, spec)
        self.pagination.reset()
        logger.debug("Filters replaced, %d of %d products match", len(self.results), len(self.products))

    def apply_filters(self, update: FilterUpdate) -> None:
        self.replace_filters(update.apply(self.spec))

    def clear_filters(self) -> None:
        self.replace_filters(pipeline.default_filter_spec(self.products))

    def request_advance(self) -> bool:
        return self.pagination.advance(self.results)

    def replace_dataset(self, products: list[Product]) -> None:
        """Swap the catalog, refit the price ceiling and start from page one."""
        self.products = list(products)
        self.categories = pipeline.distinct_categories(self.products)
        self.max_price = pipeline.max_price(self.products)
        ceiling = pipeline.default_filter_spec(self.products).price_range
        self.replace_filters(self.spec.updated(price_range=ceiling))
