from pydantic import BaseModel
from typing import Any, Optional

class ResponseEnvelope(BaseModel):
    """Status-coded response from the record service."""
    method: str
    url: str
    status_code: int
    body: Optional[Any] = None
