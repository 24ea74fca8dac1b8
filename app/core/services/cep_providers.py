import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, List

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.schemas import Address, BrasilAPIResponse, RaceResult, ViaCEPResponse

logger = logging.getLogger(__name__)


class CEPProvider(ABC):
    """Base interface for an external CEP lookup service."""

    def __init__(self, url_template: str):
        self.url_template = url_template

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier reported to the caller"""
        pass

    @abstractmethod
    def parse_response(self, payload: Any) -> Address:
        """Converts the provider's raw JSON payload to an Address"""
        pass

    def build_url(self, cep: str) -> str:
        return self.url_template.format(cep=cep)

    async def fetch(
        self, client: httpx.AsyncClient, cep: str, results: asyncio.Queue
    ) -> None:
        """
        Performs one GET and, on success, puts a RaceResult on `results`.

        Failures produce no result at all: they are logged and dropped so the
        orchestrator only ever sees successes.
        """
        url = self.build_url(cep)

        try:
            response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"{self.name}: request to {url} failed: {e!r}")
            return

        logger.debug(f"{self.name}: API Response Status: {response.status_code}")
        if response.status_code != 200:
            return

        try:
            address = self.parse_response(response.json())
        except (ValueError, ValidationError) as e:
            logger.debug(f"{self.name}: unexpected payload: {e}")
            return

        try:
            results.put_nowait(RaceResult(provider=self.name, address=address))
        except asyncio.QueueFull:
            logger.debug(f"{self.name}: result dropped, race already decided")


class BrasilAPIProvider(CEPProvider):

    def __init__(self, url_template: str = settings.BRASILAPI_URL_TEMPLATE):
        super().__init__(url_template)

    @property
    def name(self) -> str:
        return "BrasilAPI"

    def parse_response(self, payload: Any) -> Address:
        return BrasilAPIResponse.model_validate(payload).to_address()


class ViaCEPProvider(CEPProvider):

    def __init__(self, url_template: str = settings.VIACEP_URL_TEMPLATE):
        super().__init__(url_template)

    @property
    def name(self) -> str:
        return "ViaCEP"

    def parse_response(self, payload: Any) -> Address:
        # ViaCEP answers unknown CEPs with 200 and {"erro": true}
        if isinstance(payload, dict) and payload.get("erro"):
            raise ValueError("CEP não encontrado")
        return ViaCEPResponse.model_validate(payload).to_address()


def get_default_providers() -> List[CEPProvider]:
    return [
        BrasilAPIProvider(settings.BRASILAPI_URL_TEMPLATE),
        ViaCEPProvider(settings.VIACEP_URL_TEMPLATE),
    ]
