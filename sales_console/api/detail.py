from fastapi import APIRouter, Depends

from sales_console.api.deps import get_console
from sales_console.controllers.detail import DetailState, SalespersonDetailController
from sales_console.core.navigation import RouteSnapshot
from sales_console.core.state import ConsoleState

router = APIRouter()

@router.get("/salesperson/{salesperson_id}")
async def salesperson_detail(salesperson_id: str, console: ConsoleState = Depends(get_console)):
    # The id is handed to the lookup exactly as it appears in the path
    route = RouteSnapshot(path=f"salesperson/{salesperson_id}", params={"id": salesperson_id})
    controller = SalespersonDetailController(console.gateway, route)
    await controller.loaded
    return {
        "state": controller.state.value,
        "salesperson": controller.salesperson.view() if controller.state is DetailState.RESOLVED else None,
        "failure": controller.failure.model_dump(by_alias=True),
        "message": controller.fallback_message(),
    }
