from fastapi import APIRouter, Depends
from typing import Optional

from sales_console.api.deps import get_console
from sales_console.core.state import ConsoleState

router = APIRouter()

@router.get("/favorite")
async def current_favorite(lower_first: Optional[bool] = None, console: ConsoleState = Depends(get_console)):
    display = console.favorite
    return {
        "favorite": display.current,
        "styled": display.current if lower_first is None else display.styled(lower_first),
    }
