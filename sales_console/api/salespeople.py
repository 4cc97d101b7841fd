from fastapi import APIRouter, Depends, HTTPException
from typing import Any, Dict, Iterable, List
import logging

from sales_console.api.deps import get_console
from sales_console.core.state import ConsoleState
from sales_console.core.stream import Subscription
from sales_console.schemas.records import Salesperson
from sales_console.views.rows import SalespersonRow

router = APIRouter()
logger = logging.getLogger(__name__)

def render_rows(console: ConsoleState, salespeople: Iterable[Salesperson], lower_first: bool) -> List[Dict[str, Any]]:
    rows = []
    for salesperson in salespeople:
        with SalespersonRow(salesperson, console.channel) as row:
            rows.append(row.view(lower_first))
    return rows

def listing(console: ConsoleState, salespeople: Iterable[Salesperson], lower_first: bool = False) -> Dict[str, Any]:
    return {
        "favorite": console.favorite.current,
        "salespeople": render_rows(console, salespeople, lower_first),
    }

@router.get("/salespeople")
async def list_salespeople(lower_first: bool = False, console: ConsoleState = Depends(get_console)):
    await console.salespeople.refresh()
    return listing(console, console.salespeople.records, lower_first)

@router.delete("/salespeople/{salesperson_id}")
async def delete_salesperson(salesperson_id: int, console: ConsoleState = Depends(get_console)):
    salesperson = next((s for s in console.salespeople.records if s.id == salesperson_id), Salesperson(id=salesperson_id))
    pending: List[Subscription] = []
    with SalespersonRow(salesperson, console.channel) as row:
        row.delete_requested.connect(lambda sid: pending.append(console.salespeople.delete(sid)))
        row.request_delete()
    for subscription in pending:
        await subscription
    return listing(console, console.salespeople.records)

@router.post("/salespeople/{salesperson_id}/favorite")
async def favorite_salesperson(salesperson_id: int, console: ConsoleState = Depends(get_console)):
    salesperson = next((s for s in console.salespeople.records if s.id == salesperson_id), None)
    if salesperson is None:
        salesperson = console.mock_salespeople.find(salesperson_id)
    if salesperson is None:
        raise HTTPException(status_code=404, detail=f"Salesperson {salesperson_id} is not listed")

    with SalespersonRow(salesperson, console.channel) as row:
        row.select_favorite()
    return {"favorite": console.favorite.current}

# -------- local-only mock roster --------

@router.get("/salespeople/mock")
async def list_mock_salespeople(lower_first: bool = False, console: ConsoleState = Depends(get_console)):
    return listing(console, console.mock_salespeople.records, lower_first)

@router.delete("/salespeople/mock/{salesperson_id}")
async def delete_mock_salesperson(salesperson_id: int, console: ConsoleState = Depends(get_console)):
    roster = console.mock_salespeople
    salesperson = roster.find(salesperson_id)
    if salesperson is not None:
        with SalespersonRow(salesperson, console.channel) as row:
            row.delete_requested.connect(roster.delete)
            row.request_delete()
    return listing(console, roster.records)

@router.post("/salespeople/mock/{salesperson_id}/raise")
async def raise_mock_salary(salesperson_id: int, console: ConsoleState = Depends(get_console)):
    roster = console.mock_salespeople
    salesperson = roster.find(salesperson_id)
    if salesperson is not None:
        with SalespersonRow(salesperson, console.channel) as row:
            row.raise_requested.connect(roster.raise_salary)
            row.request_raise()
    return listing(console, roster.records)
