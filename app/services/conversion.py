from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, getcontext
from typing import Optional, Protocol, Union

from app.core.errors import INTERNAL_ERROR_MESSAGE, INVALID_INPUT_MESSAGE

"""Currency conversion handler.

Responsibilities:
    - Validate the inbound pair and amount before any rate lookup.
    - Resolve the rate via an injected resolver (config overrides, then file).
    - Multiply in Decimal so monetary values carry no float drift.
    - Return an explicit outcome; the router maps each variant to a status code.

Unexpected failures never escape convert(); they are logged with traceback and
returned as InternalFailure.
"""

logger = logging.getLogger("app.conversion")


class SupportsRateResolution(Protocol):
    def resolve_rate(self, source_currency: str, target_currency: str) -> Decimal: ...


@dataclass(frozen=True)
class ConversionRequest:
    source_currency: str
    target_currency: str
    amount: Decimal


@dataclass(frozen=True)
class ConversionResult:
    exchange_rate: Decimal
    converted_amount: Decimal


@dataclass(frozen=True)
class ConversionSuccess:
    result: ConversionResult


@dataclass(frozen=True)
class ValidationFailure:
    message: str = INVALID_INPUT_MESSAGE


@dataclass(frozen=True)
class InternalFailure:
    message: str = INTERNAL_ERROR_MESSAGE


ConversionOutcome = Union[ConversionSuccess, ValidationFailure, InternalFailure]


def build_request(
    source_currency: Optional[str],
    target_currency: Optional[str],
    amount: Optional[Decimal],
) -> Optional[ConversionRequest]:
    """Return a ConversionRequest, or None if any parameter is invalid."""
    if not source_currency or not source_currency.strip():
        return None
    if not target_currency or not target_currency.strip():
        return None
    if amount is None or not amount.is_finite() or amount <= 0:
        return None
    # Beyond Emax the product overflows the decimal context
    if amount.adjusted() > getcontext().Emax:
        return None
    return ConversionRequest(
        source_currency=source_currency.strip(),
        target_currency=target_currency.strip(),
        amount=amount,
    )


class ConversionHandler:
    def __init__(self, resolver: SupportsRateResolution):
        self._resolver = resolver

    def convert(
        self,
        source_currency: Optional[str],
        target_currency: Optional[str],
        amount: Optional[Decimal],
    ) -> ConversionOutcome:
        request = build_request(source_currency, target_currency, amount)
        if request is None:
            logger.error(
                INVALID_INPUT_MESSAGE,
                extra={
                    "source_currency": source_currency,
                    "target_currency": target_currency,
                    "amount": amount,
                },
            )
            return ValidationFailure()

        try:
            rate = self._resolver.resolve_rate(
                request.source_currency, request.target_currency
            )
            converted = request.amount * rate
        except Exception as e:
            logger.exception("Error during currency conversion: %s", e)
            return InternalFailure()

        logger.info(
            "Conversion from %s to %s successful. Amount: %s, Exchange Rate: %s, Converted Amount: %s",
            request.source_currency,
            request.target_currency,
            request.amount,
            rate,
            converted,
        )
        return ConversionSuccess(
            ConversionResult(exchange_rate=rate, converted_amount=converted)
        )
