from fastapi import Request
from sales_console.core.state import ConsoleState

def get_console(request: Request) -> ConsoleState:
    return request.app.state.console
