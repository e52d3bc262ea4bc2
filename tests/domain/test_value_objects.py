"""Unit tests for domain value objects."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from order_builder.domain.exceptions import (
    InvalidAmountError,
    MoneyArithmeticError,
    ValidationError,
)
from order_builder.domain.model.value_objects import Money, Quantity


# ── Money: construction ──────────────────────────────────────────────────────


class TestMoneyConstruction:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("10.99").to_number() == 10.99

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_from_float_uses_its_short_repr(self):
        assert Money.of(0.1).amount == Decimal("0.1")
        assert Money.of(15.50).to_number() == 15.5

    def test_of_returns_same_instance_for_money(self):
        m = Money.of("3")
        assert Money.of(m) is m

    def test_string_keeps_every_digit(self):
        assert Money.of("10.999").amount == Decimal("10.999")

    def test_zero(self):
        assert Money.zero().to_number() == 0
        assert Money.zero().is_zero()

    def test_malformed_string_rejected(self):
        with pytest.raises(InvalidAmountError, match="Invalid money amount"):
            Money.of("abc")

    def test_empty_string_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of("")

    def test_non_finite_rejected(self):
        for value in ("NaN", "Infinity", "-Infinity", float("nan"), float("inf")):
            with pytest.raises(InvalidAmountError):
                Money.of(value)

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidAmountError, match="type"):
            Money.of(None)

    def test_bool_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of(True)

    def test_parse_failure_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Money.of("12,50")

    def test_raw_float_amount_rejected(self):
        with pytest.raises(InvalidAmountError, match="must be a Decimal"):
            Money(0.5)

    def test_immutable(self):
        m = Money.of("1")
        with pytest.raises(FrozenInstanceError):
            m.amount = Decimal("2")


# ── Money: arithmetic ────────────────────────────────────────────────────────


class TestMoneyArithmetic:

    def test_no_binary_float_error_in_addition(self):
        result = Money.of(0.1).add(0.2)
        assert result.to_fixed(2) == "0.30"
        assert result.equals("0.3")

    def test_addition(self):
        assert Money.of(10.50).add(Money.of(5.25)).to_number() == 15.75
        assert Money.of(0.6).add(0.3).to_fixed(2) == "0.90"

    def test_subtraction(self):
        assert Money.of(10.50).subtract(3.25).to_number() == 7.25

    def test_multiplication(self):
        assert Money.of(9.99).multiply(3).to_fixed(2) == "29.97"

    def test_division(self):
        assert Money.of(100).divide(3).to_fixed(2) == "33.33"

    def test_operator_forms(self):
        assert Money.of("1") + "2" == Money.of("3")
        assert Money.of("5") - 2 == Money.of("3")
        assert Money.of("1.5") * 2 == Money.of("3")
        assert Money.of("9") / 3 == Money.of("3")
        assert -Money.of("2") == Money.of("-2")
        assert abs(Money.of("-2")) == Money.of("2")

    def test_operations_return_new_instances(self):
        original = Money.of("10")
        original.add(5)
        original.round(0)
        assert original == Money.of("10")

    def test_division_by_zero_fails_explicitly(self):
        with pytest.raises(MoneyArithmeticError, match="by zero"):
            Money.of("10").divide(0)

    def test_zero_divided_by_zero_fails(self):
        with pytest.raises(MoneyArithmeticError):
            Money.zero().divide("0.00")

    def test_division_error_is_an_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            Money.of("1") / Money.zero()

    def test_zero_identity(self):
        zero = Money.zero()
        assert zero.add(10).to_number() == 10
        assert zero.multiply(1000).to_number() == 0

    def test_negative_values(self):
        negative = Money.of(-10.50)
        assert negative.is_negative()
        assert negative.abs().to_number() == 10.50
        assert negative.add(5).to_number() == -5.50

    def test_large_numbers(self):
        assert Money.of(999999999.99).add(0.01).to_fixed(2) == "1000000000.00"

    def test_very_small_numbers(self):
        assert Money.of(0.001).multiply(1000).to_number() == 1

    def test_invalid_operand_rejected(self):
        with pytest.raises(InvalidAmountError):
            Money.of("1").add("one")


# ── Money: comparison ────────────────────────────────────────────────────────


class TestMoneyComparison:

    def test_compare_money_instances(self):
        a = Money.of(10.50)
        b = Money.of(10.50)
        c = Money.of(11.00)

        assert a.equals(b)
        assert not a.equals(c)
        assert a.less_than(c)
        assert c.greater_than(a)
        assert a.less_than_or_equal_to(b)
        assert a.greater_than_or_equal_to(b)

    def test_compare_with_native_numbers_and_strings(self):
        a = Money.of(10.50)
        assert a.equals(10.50)
        assert a.equals("10.5")
        assert a.greater_than(10)
        assert a.less_than("11")

    def test_equality_ignores_trailing_zeros(self):
        assert Money.of("1.50") == Money.of("1.5")
        assert hash(Money.of("1.50")) == hash(Money.of("1.5"))

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10.00")
        assert Money.of("10") <= Money.of("10")


# ── Money: rounding and formatting ───────────────────────────────────────────


class TestMoneyRounding:

    def test_round_to_places(self):
        assert Money.of(10.999).round(2).to_fixed(2) == "11.00"
        assert Money.of(10.994).round(2).to_fixed(2) == "10.99"

    def test_round_half_up_not_half_even(self):
        assert Money.of("2.345").round(2).to_fixed(2) == "2.35"
        assert Money.of("0.125").round(2).to_fixed(2) == "0.13"

    def test_ties_round_away_from_zero_for_negatives(self):
        assert Money.of("-2.345").round(2).to_fixed(2) == "-2.35"

    def test_round_defaults_to_cents(self):
        assert Money.of("1.005").round() == Money.of("1.01")

    def test_builtin_round(self):
        assert round(Money.of("1.235"), 2) == Money.of("1.24")
        assert round(Money.of("2.5")) == 3

    def test_rounding_is_idempotent(self):
        for raw in ("0.005", "123.4449", "-7.125", "30.8625", "1e3"):
            once = Money.of(raw).round(2)
            assert once.round(2) == once

    def test_negative_places_rejected(self):
        with pytest.raises(ValueError):
            Money.of("1").round(-1)

    def test_to_fixed(self):
        assert Money.of(10.5).to_fixed(2) == "10.50"
        assert Money.of(10.5).to_fixed(0) == "11"

    def test_round_beyond_working_precision(self):
        third = Money.of("1").divide(3)
        assert third.round(40).amount == Decimal("0." + "3" * 34 + "0" * 6)

    def test_to_fixed_of_a_long_amount(self):
        amount = Money.of("12345678901234567890123456789012")
        assert amount.to_fixed(4) == "12345678901234567890123456789012.0000"

    def test_to_fixed_never_shows_negative_zero(self):
        assert Money.of("-0.001").to_fixed(2) == "0.00"

    def test_to_string_is_minimal(self):
        assert Money.of(10.50).to_string() == "10.5"
        assert str(Money.of("10.500")) == "10.5"
        assert str(Money.of("100")) == "100"
        assert str(Money.of("1E+3")) == "1000"
        assert str(Money.of("0.00")) == "0"

    def test_to_number(self):
        assert float(Money.of("0.25")) == 0.25


# ── Money: aggregates ────────────────────────────────────────────────────────


class TestMoneyAggregates:

    def test_sum(self):
        values = [Money.of(10), Money.of(20.50), Money.of(5.25)]
        assert Money.sum(values).to_fixed(2) == "35.75"

    def test_sum_accepts_mixed_operands(self):
        assert Money.sum(["0.1", 0.2, Decimal("0.3")]) == Money.of("0.6")

    def test_max(self):
        assert Money.max(Money.of(10), Money.of(20.50), Money.of(5.25)).to_number() == 20.50

    def test_min(self):
        assert Money.min(Money.of(10), Money.of(20.50), Money.of(5.25)).to_number() == 5.25

    def test_empty_aggregates_are_zero(self):
        assert Money.sum([]) == Money.zero()
        assert Money.max() == Money.zero()
        assert Money.min() == Money.zero()


# ── Money: real-world scenarios ──────────────────────────────────────────────


class TestMoneyScenarios:

    def test_order_total(self):
        total = Money.of(29.99).add(Money.of(9.99).multiply(2)).add(Money.of(4.99))
        assert total.to_fixed(2) == "54.96"

    def test_tax(self):
        subtotal = Money.of(100)
        tax = subtotal.multiply(Money.of("8.25").divide(100))
        assert tax.to_fixed(2) == "8.25"
        assert subtotal.add(tax).to_fixed(2) == "108.25"

    def test_discount(self):
        original = Money.of(99.99)
        discount = original.multiply(Money.of(15).divide(100))
        assert discount.to_fixed(2) == "15.00"
        assert original.subtract(discount).to_fixed(2) == "84.99"

    def test_bill_split_round_trips_exactly(self):
        bill = Money.of("123.45")
        share = bill.divide(4)

        assert share.amount == Decimal("30.8625")
        assert share.to_fixed(2) == "30.86"
        assert share.multiply(4) == bill
        assert Money.sum([share] * 4) == bill

    def test_even_split(self):
        share = Money.of(120).divide(4)
        assert share.to_fixed(2) == "30.00"
        assert share.multiply(4).to_fixed(2) == "120.00"

    def test_divide_then_multiply_for_terminating_quotients(self):
        for raw in ("0.01", "99.99", "123.45", "1000000.07"):
            for n in (1, 2, 4, 5, 8, 16, 25, 40):
                assert Money.of(raw).divide(n).multiply(n) == Money.of(raw)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
