from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Sales Console"

    # Remote record-keeping service
    API_BASE_URL: str = "http://localhost:8080"
    REQUEST_TIMEOUT: float = 10.0

    # Basic-auth credential for the record service, supplied by the environment.
    # Left unset, requests go out without an Authorization header.
    API_USERNAME: Optional[str] = None
    API_PASSWORD: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True

settings = Settings()
