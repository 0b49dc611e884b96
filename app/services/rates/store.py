from __future__ import annotations

"""On-disk default rate table.

The table is a flat JSON object keyed by exchange rate key:

    {"USD_TO_EUR": 0.92, "EUR_TO_USD": 1.09}

It is read and parsed on every call. Nothing is cached, so edits to the file
apply to the next request without a restart.
"""
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, Optional

DEFAULT_RATES_FILENAME = "exchangeRates.json"

logger = logging.getLogger("app.rates.store")


class RateFileFormatError(ValueError):
    pass


def _parse_rate_table(raw: str) -> Dict[str, Decimal]:
    data = json.loads(raw, parse_float=Decimal, parse_int=Decimal)
    if not isinstance(data, dict):
        raise RateFileFormatError("rate table must be a JSON object")
    table: Dict[str, Decimal] = {}
    for key, value in data.items():
        # bool is a JSON literal, not a number; reject it along with strings/null
        if not isinstance(value, Decimal):
            raise RateFileFormatError(f"rate for '{key}' is not a number")
        table[key] = value
    return table


class RateStore:
    def __init__(self, path: Path | str = DEFAULT_RATES_FILENAME):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load_rates(self) -> Optional[Dict[str, Decimal]]:
        """Read the rate table.

        Returns None when the file is missing or malformed; both mean "no
        defaults available". Other I/O errors propagate.
        """
        if not self._path.exists():
            logger.debug("rate file not found", extra={"path": str(self._path)})
            return None
        try:
            raw = self._path.read_text(encoding="utf-8")
            return _parse_rate_table(raw)
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and RateFileFormatError are ValueErrors
            logger.error(
                "Error reading exchange rates from file: %s",
                e,
                extra={"path": str(self._path)},
            )
            return None
