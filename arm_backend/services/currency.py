# arm_backend/services/currency.py
"""
Fixed currency tables used for donation totals.

Rates are relative to EUR (1 EUR = 655.957 XOF, the CFA franc peg).
Amounts are displayed the French way: "12,50 €", "6 560 FCFA".
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from arm_backend.core.enums import Currency
from arm_backend.core.exceptions import ValidationError
from arm_backend.core.utils import to_decimal

BASE_CURRENCY = Currency.EUR

EXCHANGE_RATES: Dict[str, Decimal] = {
    Currency.EUR.value: Decimal("1"),
    Currency.XOF.value: Decimal("655.957"),
    Currency.USD.value: Decimal("1.08"),
    Currency.GBP.value: Decimal("0.85"),
}

CURRENCY_SYMBOLS: Dict[str, str] = {
    Currency.XOF.value: "FCFA",
    Currency.EUR.value: "€",
    Currency.USD.value: "$",
    Currency.GBP.value: "£",
}

# English name, used when a language has no localized one
CURRENCY_DEFAULT_NAMES: Dict[str, str] = {
    Currency.XOF.value: "CFA Franc",
    Currency.EUR.value: "Euro",
    Currency.USD.value: "US Dollar",
    Currency.GBP.value: "British Pound",
}

CURRENCY_NAMES: Dict[str, Dict[str, str]] = {
    Currency.XOF.value: {
        "fr": "Franc CFA",
        "en": "CFA Franc",
        "bm": "Faransi CFA",
        "es": "Franco CFA",
        "ar": "فرنك أفريقي",
    },
    Currency.EUR.value: {
        "fr": "Euro",
        "en": "Euro",
        "bm": "Ero",
        "es": "Euro",
        "ar": "يورو",
    },
    Currency.USD.value: {
        "fr": "Dollar US",
        "en": "US Dollar",
        "bm": "Dolar Ameriki",
        "es": "Dólar Estadounidense",
        "ar": "دولار أمريكي",
    },
    Currency.GBP.value: {
        "fr": "Livre Sterling",
        "en": "British Pound",
        "bm": "Livri Angilɛ",
        "es": "Libra Esterlina",
        "ar": "جنيه إسترليني",
    },
}

# fr-FR digit grouping (narrow no-break space)
THOUSANDS_SEPARATOR = "\u202f"

TWO_PLACES = Decimal("0.01")


def parse_currency(code: str) -> Currency:
    try:
        return Currency(str(code).upper())
    except ValueError:
        raise ValidationError(f"Unsupported currency: {code}")


def convert(amount: Any, from_currency: str, to_currency: str) -> Decimal:
    """Convert through EUR. Result is rounded to cents."""
    source = parse_currency(from_currency).value
    target = parse_currency(to_currency).value
    value = to_decimal(amount)
    if source == target:
        return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    in_base = value / EXCHANGE_RATES[source]
    return (in_base * EXCHANGE_RATES[target]).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_base_currency(amount: Any, currency: str) -> Decimal:
    return convert(amount, currency, BASE_CURRENCY.value)


def total_in_base_currency(rows) -> Decimal:
    """Sum of row.amount over rows recorded in mixed currencies, in EUR."""
    return sum((to_base_currency(row.amount, row.currency) for row in rows), Decimal("0"))


def format_amount(amount: Any, currency: str) -> str:
    """Human readable amount: '6 560 FCFA' (no decimals), '12,50 €'."""
    code = parse_currency(currency).value
    symbol = CURRENCY_SYMBOLS[code]
    if code == Currency.XOF.value:
        units = to_decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        grouped = f"{units:,.0f}".replace(",", THOUSANDS_SEPARATOR)
        return f"{grouped} {symbol}"
    value = to_decimal(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return f"{value:.2f}".replace(".", ",") + f" {symbol}"


def currency_name(currency: str, language: str) -> str:
    code = parse_currency(currency).value
    return CURRENCY_NAMES[code].get(language) or CURRENCY_DEFAULT_NAMES[code]


def list_currencies(language: str = "en") -> List[Dict[str, Any]]:
    return [
        {
            "code": code.value,
            "symbol": CURRENCY_SYMBOLS[code.value],
            "name": CURRENCY_DEFAULT_NAMES[code.value],
            "rate": EXCHANGE_RATES[code.value],
            "names": CURRENCY_NAMES[code.value],
            "local_name": currency_name(code.value, language),
        }
        for code in Currency
    ]
