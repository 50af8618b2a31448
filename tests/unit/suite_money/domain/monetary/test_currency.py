from __future__ import annotations

import pytest

from suite_money.domain.monetary.currency import CHF, EUR, GBP, JPY, USD, Currency
from suite_money.domain.monetary.currency_properties import RoundingStandard, TableCurrencyProperties
from suite_money.domain.monetary.currency_registry import CurrencyRegistry
from suite_money.errors import InvalidCurrency


def test_code_is_normalized() -> None:
    assert Currency("chf").code == "CHF"
    assert Currency(" usd ") == USD
    assert Currency.from_str("eur") == EUR


@pytest.mark.parametrize("code", ["XYZ", "US", "", "ETHER"])
def test_unknown_code_raises(code: str) -> None:
    with pytest.raises(InvalidCurrency):
        Currency(code)


def test_non_string_code_raises() -> None:
    with pytest.raises(TypeError):
        Currency(756)  # type: ignore[arg-type]


def test_predefined_currencies() -> None:
    assert [currency.code for currency in (USD, EUR, GBP, CHF, JPY)] == ["USD", "EUR", "GBP", "CHF", "JPY"]
    assert all(currency.is_official() for currency in (USD, EUR, GBP, CHF, JPY))


def test_equality_and_hash_by_code() -> None:
    assert Currency("CHF") == CHF
    assert Currency("CHF") != EUR
    assert CHF != "CHF"
    assert hash(Currency("chf")) == hash(CHF)
    assert len({Currency("CHF"), CHF, EUR}) == 2


def test_str_and_repr() -> None:
    assert str(CHF) == "CHF"
    assert repr(CHF) == "Currency('CHF')"


def test_unofficial_currency_needs_registration() -> None:
    registry = CurrencyRegistry()
    with pytest.raises(InvalidCurrency):
        Currency("ETH", registry)

    registry.register_unofficial("ETH")
    eth = Currency("eth", registry)
    assert eth.code == "ETH"
    assert not eth.is_official(registry)

    eth.validate(registry)
    with pytest.raises(InvalidCurrency):
        eth.validate(CurrencyRegistry())


def test_scale() -> None:
    assert CHF.scale() == 2
    assert JPY.scale() == 0
    assert Currency("KWD").scale() == 3


def test_scale_with_custom_provider() -> None:
    registry = CurrencyRegistry()
    registry.register_unofficial("BTC")
    btc = Currency("BTC", registry)

    assert btc.scale(TableCurrencyProperties(extra_scales={"BTC": 8})) == 8
    with pytest.raises(InvalidCurrency):
        btc.scale()


def test_round_unit() -> None:
    assert str(CHF.round_unit()) == "0.01"
    assert str(CHF.round_unit(RoundingStandard.CASH)) == "0.05"
    assert str(Currency("DKK").round_unit(RoundingStandard.CASH)) == "0.50"
    assert str(JPY.round_unit()) == "1.0"
    assert str(EUR.round_unit(RoundingStandard.ACCOUNTING)) == "0.01"


def test_json() -> None:
    assert CHF.to_json() == '"CHF"'
    assert Currency.from_json('"chf"') == CHF
    assert Currency.from_json(b'"JPY"') == JPY


@pytest.mark.parametrize("data", ["42", "CHF", '{"code": "CHF"}', '"XYZ"'])
def test_from_json_rejects_invalid_data(data: str) -> None:
    with pytest.raises(InvalidCurrency):
        Currency.from_json(data)
