"""
Tests for money conversion and display formatting
"""
from decimal import Decimal

from savings_tracker.utils.money import format_currency, to_money


def test_to_money_rounds_to_cents():
    assert to_money(0.1 + 0.2) == Decimal("0.30")
    assert to_money("10.005") == Decimal("10.01")
    assert to_money(Decimal("7")) == Decimal("7.00")


def test_default_currency_is_rupiah():
    assert format_currency(1500000) == "Rp 1.500.000"


def test_dollar_format():
    assert format_currency(Decimal("1200.5"), "USD") == "$1,200.50"


def test_negative_amount():
    assert format_currency(-5000, "IDR") == "-Rp 5.000"


def test_unknown_currency_uses_code():
    assert format_currency(1234.5, "chf") == "CHF 1,234.50"


def test_exact_keeps_cents_for_zero_decimal_currency():
    assert format_currency(Decimal("0.40"), "IDR", exact=True) == "Rp 0,40"
    assert format_currency(Decimal("1500000"), "IDR", exact=True) == "Rp 1.500.000"
    assert format_currency(Decimal("0.40"), "IDR") == "Rp 0"
