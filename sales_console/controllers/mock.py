from typing import Generic, Iterable, List, Optional, Tuple, TypeVar
import logging
import math

from sales_console.db.memory import mock_sales, mock_salespeople
from sales_console.schemas.records import Record, Sale, Salesperson

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

RAISE_FACTOR = 1.10


class MockRoster(Generic[R]):
    """
    Local-only list used for demonstration. Mutated in place, never sent to
    the record service; kept apart from the server-backed controllers.
    """

    def __init__(self, seed: Iterable[R]):
        self._records: List[R] = list(seed)

    @property
    def records(self) -> Tuple[R, ...]:
        return tuple(self._records)

    def find(self, record_id: int) -> Optional[R]:
        return next((r for r in self._records if r.id == record_id), None)

    def delete(self, record_id: int) -> bool:
        """Remove the first record with this id. Unknown ids are a no-op."""
        logger.info(f"Deleting mock record with ID: {record_id}")
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                return True
        return False


class MockSalespeopleRoster(MockRoster[Salesperson]):
    def __init__(self, seed: Optional[Iterable[Salesperson]] = None):
        super().__init__(mock_salespeople() if seed is None else seed)

    def raise_salary(self, salesperson_id: int) -> Optional[Salesperson]:
        """Give a 10% raise, truncated to a whole amount. Unknown ids are a no-op."""
        logger.info(f"Raising salary for salesperson with ID: {salesperson_id}")
        salesperson = self.find(salesperson_id)
        if salesperson is not None:
            # Whole amount, stored as the float the field declares
            salesperson.salary = float(math.floor(salesperson.salary * RAISE_FACTOR))
        return salesperson


class MockSalesRoster(MockRoster[Sale]):
    def __init__(self, seed: Optional[Iterable[Sale]] = None):
        super().__init__(mock_sales() if seed is None else seed)

    def add(self, sale: Sale) -> Sale:
        self._records.append(sale)
        return sale
