from fastapi import APIRouter, Depends

from bargains.config import settings
from bargains.dependencies import get_products
from bargains.schemas.product import Product
from bargains.schemas.views import DashboardOut
from bargains.services.category_labels import CategoryLabel, category_label
from bargains.viewmodels.dashboard_vm import DashboardViewModel

router = APIRouter()


@router.get("/dashboard", response_model=DashboardOut)
async def dashboard(products: list[Product] = Depends(get_products)):
    vm = DashboardViewModel.load(products, top_n=settings.top_n)
    return DashboardOut.model_validate(vm)


@router.get("/categories/{name}/label", response_model=CategoryLabel)
async def label(name: str):
    return category_label(name)


@router.get("/health")
async def health(products: list[Product] = Depends(get_products)):
    return {"status": "ok", "products": len(products)}
