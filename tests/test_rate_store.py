import logging
from decimal import Decimal

import pytest

from app.services.rates.store import RateStore
from tests.conftest import write_rates


def test_missing_file_returns_none(rates_file):
    assert RateStore(rates_file).load_rates() is None


def test_loads_rates_as_decimal(rates_file):
    write_rates(rates_file, '{"USD_TO_EUR": 0.90, "EUR_TO_USD": 1.1}')
    table = RateStore(rates_file).load_rates()
    assert table == {"USD_TO_EUR": Decimal("0.90"), "EUR_TO_USD": Decimal("1.1")}
    assert all(isinstance(v, Decimal) for v in table.values())


def test_integer_rates_are_decimal(rates_file):
    write_rates(rates_file, '{"USD_TO_JPY": 150}')
    assert RateStore(rates_file).load_rates() == {"USD_TO_JPY": Decimal("150")}


def test_empty_object_is_empty_table(rates_file):
    write_rates(rates_file, "{}")
    assert RateStore(rates_file).load_rates() == {}


def test_duplicate_keys_last_wins(rates_file):
    write_rates(rates_file, '{"USD_TO_EUR": 0.5, "USD_TO_EUR": 0.9}')
    assert RateStore(rates_file).load_rates() == {"USD_TO_EUR": Decimal("0.9")}


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "",
        '["USD_TO_EUR", 0.9]',
        '{"USD_TO_EUR": "0.9"}',
        '{"USD_TO_EUR": null}',
        '{"USD_TO_EUR": true}',
    ],
)
def test_malformed_file_returns_none_and_logs(rates_file, caplog, content):
    write_rates(rates_file, content)
    caplog.set_level(logging.ERROR, logger="app.rates.store")
    assert RateStore(rates_file).load_rates() is None
    assert any(
        "Error reading exchange rates from file" in r.getMessage() for r in caplog.records
    )


def test_file_is_reread_on_every_call(rates_file):
    store = RateStore(rates_file)
    write_rates(rates_file, {"USD_TO_EUR": 0.9})
    assert store.load_rates() == {"USD_TO_EUR": Decimal("0.9")}
    write_rates(rates_file, {"USD_TO_EUR": 0.8})
    assert store.load_rates() == {"USD_TO_EUR": Decimal("0.8")}


def test_directory_path_propagates_os_error(tmp_path):
    with pytest.raises(OSError):
        RateStore(tmp_path).load_rates()
