from __future__ import annotations

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from starlette import status

from app.core.config import Settings
from app.core.dependencies import get_app_settings
from app.core.responses import DecimalJSONResponse
from app.models.conversion import ConversionResponse
from app.services.conversion import (
    ConversionHandler,
    ConversionSuccess,
    ValidationFailure,
)
from app.services.rates.resolver import build_rate_resolver

"""Currency converter router.

Endpoint:
    - GET /api/CurrencyConverter/convert?sourceCurrency=&targetCurrency=&amount=

Outcome mapping: success -> 200 JSON with exact decimal numbers, validation
failure -> 400 text, internal failure -> 500 text.
"""

router = APIRouter(prefix="/api/CurrencyConverter", tags=["converter"])


def get_conversion_handler(
    settings: Settings = Depends(get_app_settings),
) -> ConversionHandler:
    return ConversionHandler(build_rate_resolver(settings))


@router.get(
    "/convert",
    response_model=ConversionResponse,
    response_class=DecimalJSONResponse,
    summary="Convert an amount between two currencies",
    responses={
        400: {"description": "Invalid input parameters."},
        500: {"description": "Internal Server Error"},
    },
)
def convert_currency(
    source_currency: Optional[str] = Query(None, alias="sourceCurrency"),
    target_currency: Optional[str] = Query(None, alias="targetCurrency"),
    amount: Optional[Decimal] = Query(None),
    handler: ConversionHandler = Depends(get_conversion_handler),
):
    outcome = handler.convert(source_currency, target_currency, amount)
    if isinstance(outcome, ConversionSuccess):
        body = ConversionResponse.from_result(outcome.result)
        # Python-mode dump keeps Decimal; the response renders it as a JSON number
        return DecimalJSONResponse(body.model_dump(by_alias=True))
    if isinstance(outcome, ValidationFailure):
        return PlainTextResponse(outcome.message, status_code=status.HTTP_400_BAD_REQUEST)
    return PlainTextResponse(
        outcome.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
