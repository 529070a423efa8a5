import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bargains.config import settings
from bargains.routers import browse, dashboard
from bargains.schemas.product import Product
from bargains.services.ingest import load_products
from bargains.viewmodels.browse_vm import BrowseViewModel

logger = logging.getLogger(__name__)


def create_app(products: list[Product] | None = None) -> FastAPI:
    """Build the app. Without ``products`` the catalog CSV is loaded on startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        catalog = products if products is not None else load_products(settings.products_csv)
        app.state.products = catalog
        app.state.browse = BrowseViewModel.load(catalog, page_size=settings.page_size)
        logger.info("Catalog ready: %d products, %d categories", len(catalog), len(app.state.browse.categories))

        yield

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    # routers
    app.include_router(browse.router)
    app.include_router(dashboard.router)
    return app


app = create_app()
