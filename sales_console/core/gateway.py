from typing import Any, Dict, Optional, Union
import logging

import httpx

from sales_console.core.audit import AuditRepository, InMemoryAuditRepository
from sales_console.core.stream import Single
from sales_console.schemas.audit import AuditStatus, GatewayCallRecord
from sales_console.schemas.envelope import ResponseEnvelope
from sales_console.schemas.records import Sale

logger = logging.getLogger(__name__)

RecordId = Union[int, str]


class GatewayError(Exception):
    """
    A record-service call that did not succeed.

    status_code is the HTTP status, or 0 when no response was received
    (connection refused, timeout, ...).
    """

    def __init__(self, status_code: int, method: str, url: str, reason: str = ""):
        self.status_code = status_code
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed with status {status_code}" + (f": {reason}" if reason else ""))


class RecordGateway:
    """
    Stateless facade over the remote record-keeping service.

    Each method returns a lazy Single[ResponseEnvelope]: one HTTP round trip
    per subscription, no retry, no caching. Failures surface as GatewayError
    and are left to the caller.
    """

    def __init__(self, client: httpx.AsyncClient, audit: Optional[AuditRepository] = None):
        self._client = client
        self._audit = audit if audit is not None else InMemoryAuditRepository()

    @property
    def audit(self) -> AuditRepository:
        return self._audit

    # -------- sales --------

    def list_sales(self) -> Single[ResponseEnvelope]:
        return self._call("GET", "/sale")

    def create_sale(self, sale: Sale) -> Single[ResponseEnvelope]:
        return self._call("POST", "/sale", payload=sale.to_wire())

    def update_sale(self, sale_id: RecordId, sale: Sale) -> Single[ResponseEnvelope]:
        return self._call("PUT", f"/sale/{sale_id}", payload=sale.to_wire())

    def delete_sale(self, sale_id: RecordId) -> Single[ResponseEnvelope]:
        return self._call("DELETE", f"/sale/{sale_id}")

    # -------- salespeople --------

    def list_salespeople(self) -> Single[ResponseEnvelope]:
        return self._call("GET", "/salesperson")

    def get_salesperson(self, salesperson_id: RecordId) -> Single[ResponseEnvelope]:
        # ids from the route are passed through verbatim, even non-numeric ones
        return self._call("GET", f"/salesperson/{salesperson_id}")

    def delete_salesperson(self, salesperson_id: RecordId) -> Single[ResponseEnvelope]:
        return self._call("DELETE", f"/salesperson/{salesperson_id}")

    # -------- plumbing --------

    def _call(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Single[ResponseEnvelope]:
        async def send() -> ResponseEnvelope:
            return await self._send(method, path, payload)
        return Single(send, description=f"{method} {path}")

    async def _send(self, method: str, path: str, payload: Optional[Dict[str, Any]]) -> ResponseEnvelope:
        logger.debug(f"-> {method} {path}")
        try:
            response = await self._client.request(method, path, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # No response: the request could not be built or never completed
            self._record(method, path, None)
            logger.warning(f"{method} {path} transport failure: {e}")
            raise GatewayError(0, method, path, reason=str(e)) from e

        self._record(method, path, response.status_code)
        if not response.is_success:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise GatewayError(response.status_code, method, path, reason=response.reason_phrase)

        try:
            body = response.json() if response.content else None
        except ValueError as e:
            logger.warning(f"{method} {path} returned an undecodable body")
            raise GatewayError(response.status_code, method, path, reason="invalid JSON body") from e
        logger.info(f"{method} {path} -> {response.status_code}")
        return ResponseEnvelope(method=method, url=str(response.url), status_code=response.status_code, body=body)

    def _record(self, method: str, path: str, status_code: Optional[int]):
        status = AuditStatus.SUCCESS if status_code is not None and 200 <= status_code < 300 else AuditStatus.FAILURE
        try:
            self._audit.save(GatewayCallRecord(method=method, path=path, status_code=status_code, status=status))
        except Exception as e:
            logger.error(f"Audit Logging Failed: {e}")
