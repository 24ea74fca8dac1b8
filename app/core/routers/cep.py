from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.models.exceptions import CEPTimeoutError
from app.core.schemas import ApiResponse
from app.core.services import CEPService, get_cep_service

prefix = "/cep"
router = APIRouter(prefix=prefix)


@router.get("/{cep}", response_model=ApiResponse)
async def get_cep_address(
        cep: str,
        service: Annotated[CEPService, Depends(get_cep_service)],
        timeout: Annotated[Optional[float], Query(ge=0)] = None,
):
    """Resolves a CEP using whichever provider answers first."""
    try:
        result = await service.get_address(cep, timeout=timeout)
        return ApiResponse(
            status_code=status.HTTP_200_OK,
            data=result.model_dump()
        )
    except CEPTimeoutError as e:
        return ApiResponse(
            status_code=e.status_code,
            error=e.message
        )
