"""Display formatting for money, dates and durations.

Money is always rounded half up through ``Money.round`` before Babel
renders it, so the locale layer only ever sees a value that already has
the exact number of fraction digits it will print.
"""

from __future__ import annotations

import re
from datetime import date

from babel import Locale, UnknownLocaleError
from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal

from order_builder.domain.exceptions import ValidationError
from order_builder.domain.model.value_objects import Money, MoneyLike

DEFAULT_CURRENCY = "USD"
DEFAULT_LOCALE = "en_US"
DEFAULT_DATE_FORMAT = "MMM dd, yyyy"

_FRACTION_DIGITS = re.compile(r"0\.0+")
_NOT_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def _locale(tag: str) -> Locale:
    # Accept BCP 47 style tags ("en-US") as well as Babel's "en_US".
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValidationError(f"Unknown locale: '{tag}'") from exc


def _currency_pattern(locale: Locale, precision: int) -> str:
    """The locale's standard currency pattern with *precision* fraction digits."""
    pattern = locale.currency_formats["standard"].pattern
    fraction = "0." + "0" * precision if precision > 0 else "0"
    return _FRACTION_DIGITS.sub(fraction, pattern)


def format_money(
    value: MoneyLike,
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
    precision: int = 2,
) -> str:
    """Render *value* as a currency string, e.g. ``"$1,234.56"``.

    ``format_money(Money.of("1234.56"), "EUR", "de_DE")`` gives
    ``"1.234,56\\xa0€"``.
    """
    rounded = Money.of(value).round(precision).amount
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    loc = _locale(locale)
    return babel_format_currency(
        rounded,
        currency,
        format=_currency_pattern(loc, precision),
        locale=loc,
        currency_digits=False,
    )


def format_currency(amount: MoneyLike) -> str:
    return format_money(amount, DEFAULT_CURRENCY, DEFAULT_LOCALE)


def format_currency_precise(
    amount: MoneyLike,
    precision: int = 2,
    currency: str = DEFAULT_CURRENCY,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Like ``format_currency`` but with *precision* fraction digits."""
    return format_money(amount, currency, locale, precision=precision)


def format_per_unit(price: MoneyLike, unit: str = "unit") -> str:
    return f"{format_currency_precise(price, 3)} per {unit}"


def format_currency_input(amount: MoneyLike) -> str:
    """Two-decimal string without a currency symbol, for editable fields."""
    return Money.of(amount).to_fixed(2)


def parse_currency_input(raw: str) -> Money:
    """Lenient parse of user-typed money (``"$1,234.50"`` -> 1234.50).

    Symbols and separators are stripped; anything left that is not a
    number becomes zero.  Use ``Money.of`` where bad input must be
    rejected instead.
    """
    match = _LEADING_NUMBER.match(_NOT_NUMERIC.sub("", raw or ""))
    if match is None:
        return Money.zero()
    return Money.of(match.group())


def format_quantity(quantity: int, locale: str = DEFAULT_LOCALE) -> str:
    return format_decimal(quantity, locale=_locale(locale))


def format_percentage(value: MoneyLike, precision: int = 1) -> str:
    return f"{Money.of(value).to_fixed(precision)}%"


# --- Dates and durations ------------------------------------------------------


def format_date(
    value: date | None,
    pattern: str = DEFAULT_DATE_FORMAT,
    locale: str = DEFAULT_LOCALE,
) -> str:
    if value is None:
        return ""
    return babel_format_date(value, format=pattern, locale=_locale(locale))


def format_date_input(value: date | None) -> str:
    if value is None:
        return ""
    return value.isoformat()


def format_date_range(start: date | None, end: date | None) -> str:
    if start is None or end is None:
        return ""
    return f"{format_date(start)} - {format_date(end)}"


def _plural(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"


def format_duration(months: int) -> str:
    """Human duration, e.g. ``14`` -> ``"1 year, 2 months"``."""
    if months < 12:
        return _plural(months, "month")

    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remaining, 'month')}"


# --- Text ---------------------------------------------------------------------


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_customer_name(name: str | None) -> str:
    return (name or "").strip()
