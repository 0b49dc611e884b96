from __future__ import annotations

"""Rate source abstraction.

Every place a rate can come from (configuration, the on-disk table) answers
the same question: what is the rate stored under this key, if any.
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

KEY_INFIX = "TO"


def exchange_rate_key(source_currency: str, target_currency: str) -> str:
    """Return the lookup key for a directional pair, e.g. ``USD_TO_EUR``."""
    return f"{source_currency.strip().upper()}_{KEY_INFIX}_{target_currency.strip().upper()}"


class RateSource(ABC):
    name: str = "unknown"

    @abstractmethod
    def lookup(self, key: str) -> Optional[Decimal]:
        """Return the rate stored under key, or None when absent."""
        raise NotImplementedError
