from enum import Enum
import logging

from pydantic import ValidationError

from sales_console.core.gateway import RecordGateway
from sales_console.core.navigation import RouteSnapshot
from sales_console.schemas.envelope import ResponseEnvelope
from sales_console.schemas.failure import FetchFailure
from sales_console.schemas.records import Salesperson

logger = logging.getLogger(__name__)


class DetailState(str, Enum):
    LOADING = "LOADING"
    RESOLVED = "RESOLVED"
    FAILED = "FAILED"


class SalespersonDetailController:
    """
    Looks up one salesperson by the id in the current route.

    The lookup starts on construction (an event loop must be running) and
    ends in RESOLVED or FAILED. There is no retry: a new lookup needs a new
    controller. Until then `salesperson` and `failure` hold blank values.
    """

    def __init__(self, gateway: RecordGateway, route: RouteSnapshot):
        self.salesperson: Salesperson = Salesperson.blank()
        self.failure = FetchFailure()
        self.state = DetailState.LOADING
        self.requested_id = route.param("id")

        self.loaded = gateway.get_salesperson(self.requested_id).subscribe(
            on_next=self._resolved,
            on_error=self._failed,
            on_complete=self._settled,
        )

    def _resolved(self, envelope: ResponseEnvelope):
        if not envelope.body:
            self._capture(str(envelope.status_code))
            return
        try:
            self.salesperson = Salesperson.from_wire(envelope.body)
        except ValidationError:
            self._capture(str(envelope.status_code))
            return
        self.state = DetailState.RESOLVED

    def _failed(self, error: Exception):
        self._capture(str(getattr(error, "status_code", 0)))

    def _capture(self, status: str):
        self.failure = FetchFailure(failed_id=self.requested_id, failed_status=status)
        self.state = DetailState.FAILED
        logger.warning(f"Salesperson lookup failed: id={self.failure.failed_id} status={self.failure.failed_status}")

    def _settled(self):
        logger.debug(f"Salesperson lookup settled for id={self.requested_id!r} ({self.state.value})")

    def fallback_message(self) -> str:
        if self.state is not DetailState.FAILED:
            return ""
        return f"Could not load salesperson {self.failure.failed_id} (status {self.failure.failed_status})."
