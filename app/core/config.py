import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Manages all application settings. Loads variables from environment and a .env file.
    """

    # --- Application Metadata ---
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "hml")
    DEBUG: bool = bool(os.getenv("DEBUG", False))
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "CEP Race API")
    VERSION: str = os.getenv("VERSION", "v1")
    API_V1_STR: str = f"/api/{VERSION}"

    # --- HTTP client pool ---
    # Prefer True in production for certificate validation
    HTTPX_VERIFY_SSL: bool = bool(os.getenv("HTTPX_VERIFY_SSL", True))
    HTTPX_MAX_KEEPALIVE: int = int(os.getenv("HTTPX_MAX_KEEPALIVE", 20))
    HTTPX_MAX_CONNECTIONS: int = int(os.getenv("HTTPX_MAX_CONNECTIONS", 100))
    HTTPX_KEEPALIVE_EXPIRY: int = int(os.getenv("HTTPX_KEEPALIVE_EXPIRY", 60))
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", 5))

    # --- CEP lookup ---
    # Shared deadline for the whole race, in seconds
    CEP_LOOKUP_TIMEOUT: float = float(os.getenv("CEP_LOOKUP_TIMEOUT", 1.0))
    DEFAULT_CEP: str = os.getenv("DEFAULT_CEP", "70150900")
    BRASILAPI_URL_TEMPLATE: str = os.getenv(
        "BRASILAPI_URL_TEMPLATE", "https://brasilapi.com.br/api/cep/v1/{cep}"
    )
    VIACEP_URL_TEMPLATE: str = os.getenv(
        "VIACEP_URL_TEMPLATE", "http://viacep.com.br/ws/{cep}/json/"
    )

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"

settings = Settings()
