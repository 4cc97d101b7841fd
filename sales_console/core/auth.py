from abc import ABC, abstractmethod
from typing import Generator, Optional, Tuple
import logging

import httpx

from sales_console.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

Credential = Tuple[str, str]

class CredentialSource(ABC):
    """Supplies the record-service credential each time a request is built."""

    @abstractmethod
    def resolve(self) -> Optional[Credential]:
        pass

class SettingsCredentialSource(CredentialSource):
    """Reads API_USERNAME / API_PASSWORD from settings on every request."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings

    def resolve(self) -> Optional[Credential]:
        username = self._settings.API_USERNAME
        password = self._settings.API_PASSWORD
        if not username or password is None:
            return None
        return username, password

class StaticCredentialSource(CredentialSource):
    def __init__(self, username: str, password: str):
        self._credential = (username, password)

    def resolve(self) -> Optional[Credential]:
        return self._credential

class SourcedBasicAuth(httpx.Auth):
    """Attach a Basic Authorization header resolved from a CredentialSource."""

    def __init__(self, source: CredentialSource):
        self._source = source
        self._warned = False

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        credential = self._source.resolve()
        if credential is None:
            if not self._warned:
                logger.warning("No record-service credential configured; sending unauthenticated requests")
                self._warned = True
            yield request
            return
        username, password = credential
        yield from httpx.BasicAuth(username, password).auth_flow(request)
