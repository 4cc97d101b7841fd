from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, Type, TypeVar
import logging

from pydantic import ValidationError

from sales_console.core.gateway import GatewayError, RecordGateway, RecordId
from sales_console.core.stream import Single, Subscription
from sales_console.schemas.envelope import ResponseEnvelope
from sales_console.schemas.records import Record, Sale, Salesperson

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class ListController(ABC, Generic[R]):
    """
    Owns the in-memory list for one resource type.

    The list is only ever replaced wholesale by refresh(). Every mutation goes
    to the gateway and is followed by an unconditional refresh, whatever the
    mutation's outcome; nothing is updated locally. Order is the server's.
    """

    record_type: Type[R]
    resource: str = "record"

    def __init__(self, gateway: RecordGateway):
        self._gateway = gateway
        self._records: List[R] = []
        self._ticket = 0
        self.last_error: Optional[Exception] = None

    @property
    def records(self) -> Tuple[R, ...]:
        return tuple(self._records)

    @abstractmethod
    def _list_call(self) -> Single[ResponseEnvelope]:
        pass

    def refresh(self) -> Subscription:
        # Only the newest refresh may write; older ones still in flight are ignored
        self._ticket += 1
        ticket = self._ticket
        return self._list_call().subscribe(
            on_next=lambda envelope: self._apply(ticket, envelope),
            on_error=lambda error: self._refresh_failed(ticket, error),
        )

    def _apply(self, ticket: int, envelope: ResponseEnvelope):
        if ticket != self._ticket:
            logger.debug(f"Discarding superseded {self.resource} refresh #{ticket} (latest #{self._ticket})")
            return
        if envelope.body is None:
            return
        try:
            fresh = [self.record_type.from_wire(item) for item in envelope.body]
        except (ValidationError, TypeError) as e:
            self._refresh_failed(ticket, e)
            return
        self._records = fresh
        self.last_error = None
        logger.info(f"Loaded {len(fresh)} {self.resource} record(s)")

    def _refresh_failed(self, ticket: int, error: Exception):
        if ticket != self._ticket:
            return
        # List stays as it was; the view is not told
        self.last_error = error
        logger.warning(f"{self.resource} refresh failed, keeping {len(self._records)} stale record(s): {error}")

    def _mutate(self, call: Single[ResponseEnvelope], action: str) -> Subscription:
        async def mutate_then_refresh():
            try:
                await call
            except GatewayError as e:
                logger.warning(f"{action} failed: {e}")
            else:
                logger.info(f"{action} succeeded")
            finally:
                await self.refresh()
        return Single(mutate_then_refresh, description=action).subscribe()


class SalesController(ListController[Sale]):
    record_type = Sale
    resource = "sale"

    def _list_call(self) -> Single[ResponseEnvelope]:
        return self._gateway.list_sales()

    def create(self, draft: Sale) -> Subscription:
        return self._mutate(self._gateway.create_sale(draft), "create sale")

    def update(self, sale_id: RecordId, draft: Sale) -> Subscription:
        return self._mutate(self._gateway.update_sale(sale_id, draft), f"update sale {sale_id}")

    def delete(self, sale_id: RecordId) -> Subscription:
        return self._mutate(self._gateway.delete_sale(sale_id), f"delete sale {sale_id}")


class SalespeopleController(ListController[Salesperson]):
    record_type = Salesperson
    resource = "salesperson"

    def _list_call(self) -> Single[ResponseEnvelope]:
        return self._gateway.list_salespeople()

    def delete(self, salesperson_id: RecordId) -> Subscription:
        logger.info(f"Deleting salesperson with ID: {salesperson_id}")
        return self._mutate(self._gateway.delete_salesperson(salesperson_id), f"delete salesperson {salesperson_id}")
