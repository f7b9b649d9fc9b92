import logging

import pytest

from gig_advisor.application.services.reference_data_resolver import (
    DEFAULT_REFERENCE_RULES,
    ReferenceDataResolver,
)
from gig_advisor.domain.entities.reference_rule import ReferenceRule


def test_stock_query_gets_market_status():
    data = ReferenceDataResolver().resolve("How are my stocks doing?")

    assert data == {"marketStatus": "Open", "sampleStockPrice": "$150"}


def test_unmatched_query_gets_no_data():
    assert ReferenceDataResolver().resolve("hello") is None


def test_tax_rule_wins_over_market_rule():
    data = ReferenceDataResolver().resolve("Do I pay TAX on stock market gains?")

    assert data == {"federalTaxRate": "22%", "stateTaxRate": "5%"}


def test_currency_rule():
    data = ReferenceDataResolver().resolve("What's the exchange rate for euros?")

    assert data["usdToEur"] == "0.85"
    assert data["lastUpdated"] == "2025-03-22"


def test_returned_record_is_a_copy():
    resolver = ReferenceDataResolver()
    resolver.resolve("stock tips")["marketStatus"] = "Closed"

    assert resolver.resolve("stock tips")["marketStatus"] == "Open"
    assert DEFAULT_REFERENCE_RULES[1].payload["marketStatus"] == "Open"


def test_rule_payloads_are_read_only():
    source = {"btcUsd": "1"}
    rule = ReferenceRule(topic="crypto", terms=("bitcoin",), payload=source)
    source["btcUsd"] = "2"

    with pytest.raises(TypeError):
        DEFAULT_REFERENCE_RULES[0].payload["federalTaxRate"] = "0%"
    assert rule.payload["btcUsd"] == "1"
    assert type(ReferenceDataResolver(rules=(rule,)).resolve("bitcoin")) is dict


def test_custom_rule_table():
    resolver = ReferenceDataResolver(
        rules=(ReferenceRule(topic="crypto", terms=("bitcoin",), payload={"btcUsd": "1"}),)
    )

    assert resolver.resolve("Is bitcoin taxed?") == {"btcUsd": "1"}
    assert resolver.resolve("stocks") is None


def test_internal_error_degrades_to_no_data(caplog):
    with caplog.at_level(logging.ERROR):
        assert ReferenceDataResolver().resolve(None) is None
    assert "Error resolving reference data" in caplog.text
