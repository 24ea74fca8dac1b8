from .http_client_manager import HTTPClientManager, get_http_client_manager
from .cep_providers import CEPProvider, BrasilAPIProvider, ViaCEPProvider, get_default_providers
from .cep_service import CEPService, get_cep_service, get_faster_api_result

__all__ = [
    "HTTPClientManager",
    "get_http_client_manager",
    "CEPProvider",
    "BrasilAPIProvider",
    "ViaCEPProvider",
    "get_default_providers",
    "CEPService",
    "get_cep_service",
    "get_faster_api_result",
]
