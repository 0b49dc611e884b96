from __future__ import annotations

"""Effective rate resolution.

Configuration wins over the rate file. A pair found in neither resolves to
zero rather than an error, so an unknown pair converts to 0.
"""
import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from .base import RateSource, exchange_rate_key
from .sources import ConfigRateSource, FileRateSource
from .store import RateStore

if TYPE_CHECKING:  # pragma: no cover
    from app.core.config import Settings

RATE_NOT_FOUND = Decimal("0")

logger = logging.getLogger("app.rates.resolver")


class RateResolver:
    def __init__(self, config_source: RateSource, fallback_source: RateSource):
        self._config_source = config_source
        self._fallback_source = fallback_source

    def _default_rate(self, key: str) -> Decimal:
        rate = self._fallback_source.lookup(key)
        if rate is None:
            logger.error(
                "Exchange rate for %s not found in the file.", key, extra={"rate_key": key}
            )
            return RATE_NOT_FOUND
        return rate

    def resolve_rate(self, source_currency: str, target_currency: str) -> Decimal:
        key = exchange_rate_key(source_currency, target_currency)
        rate = self._config_source.lookup(key)
        if rate is None:
            rate = self._default_rate(key)
        logger.info(
            "Exchange Rate for %s to %s: %s",
            source_currency,
            target_currency,
            rate,
            extra={
                "source_currency": source_currency,
                "target_currency": target_currency,
                "rate": rate,
            },
        )
        return rate


def build_rate_resolver(settings: "Settings") -> RateResolver:
    """Compose configuration overrides with the on-disk table for settings."""
    return RateResolver(
        config_source=ConfigRateSource(settings.rate_overrides),
        fallback_source=FileRateSource(RateStore(settings.rates_file)),
    )
