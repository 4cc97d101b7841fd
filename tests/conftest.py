import asyncio
import json
from collections import Counter
from typing import Any, Dict, List, Optional

import httpx
import pytest

from sales_console.core.gateway import RecordGateway


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeRecordService:
    """
    In-memory stand-in for the remote record service, served through
    httpx.MockTransport. Stores snake_case objects like the real one.
    """

    def __init__(self):
        self.sales: List[Dict[str, Any]] = []
        self.salespeople: List[Dict[str, Any]] = []
        self.calls: Counter = Counter()
        self.requests: List[httpx.Request] = []
        self.fail: Dict[str, int] = {}        # "METHOD /path" -> status to return
        self.delays: List[Any] = []           # GET /salesperson delays (seconds or (seconds, status)), consumed in order
        self._next_sale_id = 100

    async def handler(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        key = f"{method} {path}"
        self.calls[key] += 1
        self.requests.append(request)

        if method == "GET" and path == "/salesperson" and self.delays:
            # Snapshot before sleeping: the response reflects state at arrival
            body = [dict(s) for s in self.salespeople]
            delay = self.delays.pop(0)
            status = 200
            if isinstance(delay, tuple):
                delay, status = delay
            await asyncio.sleep(delay)
            return httpx.Response(status, json=body) if status < 400 else httpx.Response(status)

        if key in self.fail:
            return httpx.Response(self.fail[key])

        parts = path.strip("/").split("/")
        resource = parts[0]
        record_id = parts[1] if len(parts) > 1 else None
        store = self.sales if resource == "sale" else self.salespeople if resource == "salesperson" else None
        if store is None:
            return httpx.Response(404)

        if method == "GET" and record_id is None:
            return httpx.Response(200, json=store)
        if method == "GET":
            found = self._find(store, record_id)
            return httpx.Response(200, json=found) if found else httpx.Response(404)
        if method == "POST":
            data = json.loads(request.content)
            data["id"] = self._next_sale_id
            self._next_sale_id += 1
            store.append(data)
            return httpx.Response(201, json=data)
        if method == "PUT":
            found = self._find(store, record_id)
            if not found:
                return httpx.Response(404)
            found.update(json.loads(request.content))
            return httpx.Response(200, json=found)
        if method == "DELETE":
            found = self._find(store, record_id)
            if not found:
                return httpx.Response(404)
            store.remove(found)
            return httpx.Response(204)
        return httpx.Response(405)

    @staticmethod
    def _find(store: List[Dict[str, Any]], record_id: Optional[str]) -> Optional[Dict[str, Any]]:
        return next((r for r in store if str(r["id"]) == record_id), None)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def count(self, method: str, path: str) -> int:
        return self.calls[f"{method} {path}"]


@pytest.fixture
def service():
    svc = FakeRecordService()
    svc.salespeople = [
        {"id": 1, "first_name": "Jo", "last_name": "Ng", "department": "Sales", "hire_date": "2020-01-01", "salary": 50000},
        {"id": 2, "first_name": "Ann", "last_name": "Lee", "department": "Support", "hire_date": "2019-05-12", "salary": 55000},
    ]
    svc.sales = [
        {"id": 1, "customer_first_name": "Alice", "customer_last_name": "Brown", "date": "2023-10-01", "total": 1000.5, "salesperson_id": 1},
        {"id": 2, "customer_first_name": "Bob", "customer_last_name": "Cole", "date": "2023-10-05", "total": 250.0, "salesperson_id": 2},
    ]
    return svc


@pytest.fixture
async def gateway(service):
    async with httpx.AsyncClient(base_url="http://records.test", transport=service.transport()) as client:
        yield RecordGateway(client)
