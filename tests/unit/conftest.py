# tests/unit/conftest.py
"""Shared fixtures for the CEP lookup tests.

Every HTTP call goes through httpx.MockTransport; nothing leaves the process.
"""

import asyncio

import httpx
import pytest

from app.core.services import BrasilAPIProvider, ViaCEPProvider

BRASILAPI_HOST = "brasilapi.test"
VIACEP_HOST = "viacep.test"

BRASILAPI_PAYLOAD = {
    "cep": "70150900",
    "state": "DF",
    "city": "Brasília",
    "neighborhood": "Zona Cívico-Administrativa",
    "street": "Praça dos Três Poderes",
    "service": "open-cep",
}

VIACEP_PAYLOAD = {
    "cep": "70150900",
    "logradouro": "Praça dos Três Poderes",
    "complemento": "",
    "bairro": "Zona Cívico-Administrativa",
    "localidade": "Brasília",
    "uf": "DF",
    "ibge": "5300108",
    "gia": "",
    "ddd": "61",
    "siafi": "9701",
}


def make_route(status_code=200, payload=None, delay=0.0, error=None):
    """Describes how one fake provider host answers."""
    return {"status_code": status_code, "payload": payload, "delay": delay, "error": error}


@pytest.fixture
def providers():
    return [
        BrasilAPIProvider(f"https://{BRASILAPI_HOST}/api/cep/v1/{{cep}}"),
        ViaCEPProvider(f"http://{VIACEP_HOST}/ws/{{cep}}/json/"),
    ]


@pytest.fixture
def mock_client_factory():
    """Builds an AsyncClient whose responses are scripted per host."""
    calls = []

    def _factory(routes):
        async def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.host)
            route = routes[request.url.host]
            if route["delay"]:
                await asyncio.sleep(route["delay"])
            if route["error"] is not None:
                raise route["error"]
            if isinstance(route["payload"], (bytes, str)):
                return httpx.Response(route["status_code"], content=route["payload"])
            return httpx.Response(route["status_code"], json=route["payload"])

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    _factory.calls = calls
    return _factory


@pytest.fixture
def route():
    return make_route


@pytest.fixture
def brasilapi_payload():
    return dict(BRASILAPI_PAYLOAD)


@pytest.fixture
def viacep_payload():
    return dict(VIACEP_PAYLOAD)


@pytest.fixture
def hosts():
    return BRASILAPI_HOST, VIACEP_HOST
