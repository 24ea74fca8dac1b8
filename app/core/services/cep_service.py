import asyncio
import logging
from typing import List, Optional

import httpx

from app.core.config import settings
from app.core.models.exceptions import CEPTimeoutError
from app.core.schemas import RaceResult
from app.core.services.cep_providers import CEPProvider, get_default_providers
from app.core.services.http_client_manager import get_http_client_manager

logger = logging.getLogger(__name__)


async def get_faster_api_result(
        cep: str,
        timeout: float,
        providers: Optional[List[CEPProvider]] = None,
        client: Optional[httpx.AsyncClient] = None,
) -> RaceResult:
    """
    Queries every provider concurrently and returns the first success.

    All providers share one deadline of `timeout` seconds. Provider failures
    are never reported individually: if nothing succeeds in time the call
    raises CEPTimeoutError, whatever the reason.
    """
    if providers is None:
        providers = get_default_providers()

    if client is None:
        async with httpx.AsyncClient() as own_client:
            return await _race(cep, timeout, providers, own_client)
    return await _race(cep, timeout, providers, client)


async def _race(
        cep: str,
        timeout: float,
        providers: List[CEPProvider],
        client: httpx.AsyncClient,
) -> RaceResult:
    if timeout <= 0:
        raise CEPTimeoutError()

    # One slot per provider so a late success never blocks
    results: asyncio.Queue = asyncio.Queue(maxsize=max(len(providers), 1))

    tasks = [
        asyncio.create_task(provider.fetch(client, cep, results), name=provider.name)
        for provider in providers
    ]

    try:
        result = await asyncio.wait_for(results.get(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"No CEP provider answered {cep} within {timeout}s")
        raise CEPTimeoutError() from None
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    logger.info(f"CEP {cep} resolved by {result.provider}")
    return result


class CEPService:
    """CEP lookups bound to the shared HTTP client and configured deadline."""

    def __init__(self, providers: Optional[List[CEPProvider]] = None):
        self.providers = providers if providers is not None else get_default_providers()

    async def get_address(self, cep: str, timeout: Optional[float] = None) -> RaceResult:
        if timeout is None:
            timeout = settings.CEP_LOOKUP_TIMEOUT
        client = get_http_client_manager().get_client()
        return await get_faster_api_result(cep, timeout, self.providers, client)


def get_cep_service() -> CEPService:
    return CEPService()
