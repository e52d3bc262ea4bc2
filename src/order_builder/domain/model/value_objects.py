"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, DivisionByZero, InvalidOperation, Overflow
from typing import Iterable, Union

from order_builder.domain.exceptions import (
    InvalidAmountError,
    MoneyArithmeticError,
    ValidationError,
)

# Every Money operation runs in this context, never the thread's global one.
# 34 significant digits leaves ample guard digits below the cent for
# realistic order totals.
MONEY_CONTEXT = Context(
    prec=34,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

MoneyLike = Union["Money", Decimal, str, int, float]


@dataclass(frozen=True)
class Money:
    """An exact decimal amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Every operation returns a new
    instance; the amount is never mutated.

    Operands may be another ``Money``, a ``Decimal``, a numeric string or a
    native number.  Floats go through ``str()`` first so ``0.1`` means the
    decimal ``0.1``, not its binary approximation.

    Two instances are equal when their amounts are numerically equal, so
    ``Money.of("1.50") == Money.of("1.5")``.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmountError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Money amount must be finite, got {self.amount}")

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: MoneyLike) -> Money:
        return Money(MONEY_CONTEXT.add(self.amount, _to_decimal(other)))

    def subtract(self, other: MoneyLike) -> Money:
        return Money(MONEY_CONTEXT.subtract(self.amount, _to_decimal(other)))

    def multiply(self, other: MoneyLike) -> Money:
        return Money(MONEY_CONTEXT.multiply(self.amount, _to_decimal(other)))

    def divide(self, other: MoneyLike) -> Money:
        """Divide with 34 significant digits.

        ``Money.of("123.45").divide(4)`` is exactly ``30.8625``; rounding is
        left to the caller.
        """
        divisor = _to_decimal(other)
        if divisor.is_zero():
            raise MoneyArithmeticError(f"Cannot divide {self} by zero")
        try:
            return Money(MONEY_CONTEXT.divide(self.amount, divisor))
        except (DivisionByZero, InvalidOperation, Overflow) as exc:
            raise MoneyArithmeticError(f"Cannot divide {self} by {divisor}") from exc

    def abs(self) -> Money:
        return Money(self.amount.copy_abs())

    def negate(self) -> Money:
        return Money(self.amount.copy_negate())

    def round(self, places: int = 2) -> Money:
        """Round half up (ties away from zero) to *places* decimal places."""
        if isinstance(places, bool) or not isinstance(places, int) or places < 0:
            raise ValueError(f"Decimal places must be a non-negative integer, got {places!r}")
        exponent = Decimal(1).scaleb(-places)
        # The result may need more digits than MONEY_CONTEXT carries.
        context = MONEY_CONTEXT.copy()
        context.prec = max(MONEY_CONTEXT.prec, self.amount.adjusted() + places + 2)
        return Money(self.amount.quantize(exponent, rounding=ROUND_HALF_UP, context=context))

    # --- Comparison -----------------------------------------------------------

    def equals(self, other: MoneyLike) -> bool:
        return self.amount == _to_decimal(other)

    def less_than(self, other: MoneyLike) -> bool:
        return self.amount < _to_decimal(other)

    def less_than_or_equal_to(self, other: MoneyLike) -> bool:
        return self.amount <= _to_decimal(other)

    def greater_than(self, other: MoneyLike) -> bool:
        return self.amount > _to_decimal(other)

    def greater_than_or_equal_to(self, other: MoneyLike) -> bool:
        return self.amount >= _to_decimal(other)

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_negative(self) -> bool:
        return self.amount < 0

    # --- Operator forms -------------------------------------------------------

    def __add__(self, other: MoneyLike) -> Money:
        return self.add(other)

    def __sub__(self, other: MoneyLike) -> Money:
        return self.subtract(other)

    def __mul__(self, other: MoneyLike) -> Money:
        return self.multiply(other)

    def __truediv__(self, other: MoneyLike) -> Money:
        return self.divide(other)

    def __neg__(self) -> Money:
        return self.negate()

    def __abs__(self) -> Money:
        return self.abs()

    def __round__(self, ndigits: int | None = None):
        if ndigits is None:
            return int(self.round(0).amount)
        return self.round(ndigits)

    def __lt__(self, other: MoneyLike) -> bool:
        return self.less_than(other)

    def __le__(self, other: MoneyLike) -> bool:
        return self.less_than_or_equal_to(other)

    def __gt__(self, other: MoneyLike) -> bool:
        return self.greater_than(other)

    def __ge__(self, other: MoneyLike) -> bool:
        return self.greater_than_or_equal_to(other)

    # --- Conversion -----------------------------------------------------------

    def to_number(self) -> float:
        """Native float for display interop only; never compute with it."""
        return float(self.amount)

    def __float__(self) -> float:
        return self.to_number()

    def to_fixed(self, places: int = 2) -> str:
        """Fixed-point string rounded half up, e.g. ``"0.30"``."""
        rounded = self.round(places).amount
        if rounded.is_zero():
            rounded = rounded.copy_abs()
        return f"{rounded:f}"

    def to_string(self) -> str:
        """Minimal representation: no exponent, no trailing zeros."""
        normalized = self.amount.normalize(MONEY_CONTEXT)
        if normalized.is_zero():
            return "0"
        return f"{normalized:f}"

    def __str__(self) -> str:
        return self.to_string()

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(value: MoneyLike) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(value, Money):
            return value
        return Money(_to_decimal(value))

    @staticmethod
    def sum(values: Iterable[MoneyLike]) -> Money:
        total = Money.zero()
        for value in values:
            total = total.add(value)
        return total

    @staticmethod
    def max(*values: MoneyLike) -> Money:
        """Largest of *values*; zero when called without arguments."""
        if not values:
            return Money.zero()
        candidates = [Money.of(v) for v in values]
        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate.greater_than(best):
                best = candidate
        return best

    @staticmethod
    def min(*values: MoneyLike) -> Money:
        """Smallest of *values*; zero when called without arguments."""
        if not values:
            return Money.zero()
        candidates = [Money.of(v) for v in values]
        best = candidates[0]
        for candidate in candidates[1:]:
            if candidate.less_than(best):
                best = candidate
        return best


def _to_decimal(value: MoneyLike) -> Decimal:
    """Normalize any accepted operand shape into a finite Decimal."""
    if isinstance(value, Money):
        return value.amount
    # bool is an int subclass; True is not an amount.
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid money amount: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Invalid money amount: {value!r}") from exc
    else:
        raise InvalidAmountError(
            f"Invalid money amount type: {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidAmountError(f"Invalid money amount: {value!r}")
    return result


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer quantity.

    Zero is allowed: an add-on sits in the order at quantity 0 until the
    customer asks for some.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError("Quantity cannot be negative")

    def __str__(self) -> str:
        return str(self.value)
