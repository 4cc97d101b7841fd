from typing import Optional

import httpx
from fastapi import FastAPI

from sales_console.api import audit, detail, favorite, health, sales, salespeople
from sales_console.core.auth import CredentialSource
from sales_console.core.config import settings
from sales_console.core.logs import configure_logging
from sales_console.core.state import ConsoleState

def create_app(
    transport: Optional[httpx.AsyncBaseTransport] = None,
    credentials: Optional[CredentialSource] = None,
) -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME)

    app.include_router(health.router)
    app.include_router(salespeople.router)
    app.include_router(sales.router)
    app.include_router(detail.router)
    app.include_router(favorite.router)
    app.include_router(audit.router)

    @app.on_event("startup")
    async def startup_event():
        configure_logging()
        app.state.console = ConsoleState(settings, transport=transport, credentials=credentials)

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.console.aclose()

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=4200)
