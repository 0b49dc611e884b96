from __future__ import annotations

"""Concrete rate sources.

ConfigRateSource answers from settings (rate_overrides); FileRateSource answers
from the on-disk table via RateStore.
"""
from decimal import Decimal
from typing import Mapping, Optional

from .base import RateSource
from .store import RateStore


class ConfigRateSource(RateSource):
    name = "config"

    def __init__(self, overrides: Mapping[str, Decimal]):
        self._overrides = dict(overrides)

    def lookup(self, key: str) -> Optional[Decimal]:
        return self._overrides.get(key)


class FileRateSource(RateSource):
    name = "file"

    def __init__(self, store: RateStore):
        self._store = store

    def lookup(self, key: str) -> Optional[Decimal]:
        table = self._store.load_rates()
        if table is None:
            return None
        return table.get(key)
