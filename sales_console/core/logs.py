import logging
from typing import Optional
from sales_console.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(level: Optional[str] = None):
    """Configure root logging for the console process from LOG_LEVEL."""
    resolved = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("sales_console").setLevel(resolved)
    # httpx logs every request at INFO; the gateway logs its own calls.
    logging.getLogger("httpx").setLevel(logging.WARNING)
