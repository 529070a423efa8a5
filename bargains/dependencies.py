from fastapi import Request

from bargains.schemas.product import Product
from bargains.viewmodels.browse_vm import BrowseViewModel


def get_products(request: Request) -> list[Product]:
    return request.app.state.products


def get_browse(request: Request) -> BrowseViewModel:
    # single logical writer: one browsing session per app instance
    return request.app.state.browse
