from typing import Optional
import logging

import httpx

from sales_console.controllers.listing import SalesController, SalespeopleController
from sales_console.controllers.mock import MockSalesRoster, MockSalespeopleRoster
from sales_console.core.audit import InMemoryAuditRepository
from sales_console.core.auth import CredentialSource, SettingsCredentialSource, SourcedBasicAuth
from sales_console.core.broadcast import BroadcastChannel
from sales_console.core.config import Settings
from sales_console.core.gateway import RecordGateway
from sales_console.views.rows import FavoriteDisplay

logger = logging.getLogger(__name__)


class ConsoleState:
    """
    Everything that lives for the whole console process: the HTTP client, the
    favorite channel, and the list controllers. Built on startup, closed on
    shutdown.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        credentials: Optional[CredentialSource] = None,
    ):
        self.channel = BroadcastChannel()
        self.audit = InMemoryAuditRepository()
        self.client = httpx.AsyncClient(
            base_url=settings.API_BASE_URL,
            timeout=settings.REQUEST_TIMEOUT,
            auth=SourcedBasicAuth(credentials or SettingsCredentialSource(settings)),
            transport=transport,
        )
        self.gateway = RecordGateway(self.client, self.audit)

        self.sales = SalesController(self.gateway)
        self.salespeople = SalespeopleController(self.gateway)
        self.mock_sales = MockSalesRoster()
        self.mock_salespeople = MockSalespeopleRoster()

        self.favorite = FavoriteDisplay(self.channel).open()
        logger.info(f"Console ready against {settings.API_BASE_URL}")

    async def aclose(self):
        self.favorite.close()
        await self.client.aclose()
