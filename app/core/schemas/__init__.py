from app.core.schemas.base import BaseSchema
from app.core.schemas.api_response import ApiResponse
from app.core.schemas.cep import (
    Address,
    BrasilAPIResponse,
    RaceResult,
    ViaCEPResponse,
)
