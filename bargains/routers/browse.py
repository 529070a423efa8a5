from fastapi import APIRouter, Depends

from bargains.dependencies import get_browse
from bargains.schemas.filters import FilterUpdate
from bargains.schemas.views import BrowseOut
from bargains.viewmodels.browse_vm import BrowseViewModel

router = APIRouter(prefix="/browse")


def _browse_out(vm: BrowseViewModel) -> BrowseOut:
    visible = vm.visible
    return BrowseOut(
        products=visible,
        shown=len(visible),
        total_results=vm.total_results,
        has_more=vm.has_more,
        categories=vm.categories,
        max_price=vm.max_price,
        filters=vm.spec,
        active_filter_count=vm.active_filter_count,
    )


@router.get("", response_model=BrowseOut)
async def browse(vm: BrowseViewModel = Depends(get_browse)):
    return _browse_out(vm)


@router.post("/filters", response_model=BrowseOut)
async def apply_filters(update: FilterUpdate, vm: BrowseViewModel = Depends(get_browse)):
    vm.apply_filters(update)
    return _browse_out(vm)


@router.post("/filters/clear", response_model=BrowseOut)
async def clear_filters(vm: BrowseViewModel = Depends(get_browse)):
    vm.clear_filters()
    return _browse_out(vm)


@router.post("/more", response_model=BrowseOut)
async def load_more(vm: BrowseViewModel = Depends(get_browse)):
    """Edge-triggered page advance, fired by the client's scroll sentinel."""
    vm.request_advance()
    return _browse_out(vm)
