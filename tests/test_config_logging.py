import json
import logging
from decimal import Decimal
from pathlib import Path

import pytest

from app.core.config import Settings
from app.core.logging import JsonFormatter, RequestIdFilter, request_id_ctx
from app.core.responses import DecimalJSONResponse


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.rates_file == Path("exchangeRates.json")
    assert settings.rate_overrides == {}


def test_overrides_from_environment(monkeypatch):
    monkeypatch.setenv("RATE_OVERRIDES", '{"usd_to_eur": 0.95}')
    settings = Settings(_env_file=None)
    settings.init_post_load()
    assert settings.rate_overrides == {"USD_TO_EUR": Decimal("0.95")}


def test_negative_override_rejected():
    settings = Settings(_env_file=None, rate_overrides={"USD_TO_EUR": "-1"})
    with pytest.raises(ValueError):
        settings.init_post_load()


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "rate %s", ("0.9",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    record = _record(rate=Decimal("0.90"), source_currency="USD")
    RequestIdFilter().filter(record)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "rate 0.9"
    assert payload["rate"] == "0.90"
    assert payload["source_currency"] == "USD"
    assert payload["request_id"] == "-"


def test_request_id_filter_uses_context():
    token = request_id_ctx.set("rid-1")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx.reset(token)
    assert json.loads(JsonFormatter().format(record))["request_id"] == "rid-1"


def test_decimal_response_renders_exact_numbers():
    resp = DecimalJSONResponse({"rate": Decimal("0.90"), "amount": Decimal("1E+400")})
    assert resp.body == b'{"rate":0.90,"amount":1E+400}'
