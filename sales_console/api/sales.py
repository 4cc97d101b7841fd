from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, Iterable
import logging

from sales_console.api.deps import get_console
from sales_console.core.state import ConsoleState
from sales_console.schemas.records import Sale

router = APIRouter()
logger = logging.getLogger(__name__)

def listing(sales: Iterable[Sale]) -> Dict[str, Any]:
    return {"sales": [sale.view() for sale in sales]}

@router.get("/sales")
async def list_sales(console: ConsoleState = Depends(get_console)):
    await console.sales.refresh()
    return listing(console.sales.records)

@router.post("/sales")
async def create_sale(draft: Sale = Body(...), console: ConsoleState = Depends(get_console)):
    # Server assigns the id
    await console.sales.create(draft.model_copy(update={"id": 0}))
    return listing(console.sales.records)

@router.put("/sales/{sale_id}")
async def update_sale(sale_id: int, draft: Sale = Body(...), console: ConsoleState = Depends(get_console)):
    await console.sales.update(sale_id, draft.model_copy(update={"id": sale_id}))
    return listing(console.sales.records)

@router.delete("/sales/{sale_id}")
async def delete_sale(sale_id: int, console: ConsoleState = Depends(get_console)):
    await console.sales.delete(sale_id)
    return listing(console.sales.records)

# -------- local-only mock list --------

@router.get("/sales/mock")
async def list_mock_sales(console: ConsoleState = Depends(get_console)):
    return listing(console.mock_sales.records)

@router.post("/sales/mock")
async def add_mock_sale(sale: Sale = Body(...), console: ConsoleState = Depends(get_console)):
    console.mock_sales.add(sale)
    return listing(console.mock_sales.records)
