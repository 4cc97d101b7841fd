from abc import ABC, abstractmethod
from typing import List, Optional
from sales_console.schemas.audit import AuditStatus, GatewayCallRecord
import logging

logger = logging.getLogger(__name__)

class AuditRepository(ABC):
    """Trail of record-service round trips, oldest first."""

    @abstractmethod
    def save(self, entry: GatewayCallRecord):
        pass

    @abstractmethod
    def get_all(self) -> List[GatewayCallRecord]:
        pass

    def query(
        self,
        method: Optional[str] = None,
        path_prefix: Optional[str] = None,
        status: Optional[AuditStatus] = None,
    ) -> List[GatewayCallRecord]:
        """Calls matching every given filter; a path prefix of "/sale" also matches "/sale/7"."""
        matches = []
        for entry in self.get_all():
            if method is not None and entry.method != method.upper():
                continue
            if path_prefix is not None and not _under(entry.path, path_prefix):
                continue
            if status is not None and entry.status != status:
                continue
            matches.append(entry)
        return matches

    def transport_failures(self) -> List[GatewayCallRecord]:
        # Calls that never got a response have no status code
        return [entry for entry in self.get_all() if entry.status_code is None]

def _under(path: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")

class InMemoryAuditRepository(AuditRepository):
    def __init__(self):
        self._storage: List[GatewayCallRecord] = []

    def save(self, entry: GatewayCallRecord):
        # Append-only
        self._storage.append(entry)
        if entry.status == AuditStatus.FAILURE:
            logger.debug(f"Gateway call failed: {entry.method} {entry.path} ({entry.status_code})")
        else:
            logger.debug(f"Gateway call audited: {entry.model_dump_json()}")

    def get_all(self) -> List[GatewayCallRecord]:
        return list(self._storage)
