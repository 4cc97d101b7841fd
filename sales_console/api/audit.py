from fastapi import APIRouter, Depends
from typing import Optional

from sales_console.api.deps import get_console
from sales_console.core.state import ConsoleState
from sales_console.schemas.audit import AuditStatus

router = APIRouter()

@router.get("/audit/gateway-calls")
async def gateway_calls(
    method: Optional[str] = None,
    path: Optional[str] = None,
    status: Optional[AuditStatus] = None,
    console: ConsoleState = Depends(get_console),
):
    entries = console.audit.query(method=method, path_prefix=path, status=status)
    return [entry.model_dump(mode="json") for entry in entries]

@router.get("/audit/gateway-calls/unreachable")
async def unreachable_calls(console: ConsoleState = Depends(get_console)):
    return [entry.model_dump(mode="json") for entry in console.audit.transport_failures()]
