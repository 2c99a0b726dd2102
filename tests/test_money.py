# =============================================================================
# tests/test_money.py - Decimal Arithmetic Tests
# =============================================================================

from decimal import Decimal, ROUND_HALF_UP

import pytest

from lib.money import quantize, scale, to_decimal


class TestToDecimal:
    """Conversions never pick up binary floating point noise."""

    def test_float_uses_shortest_repr(self):
        assert to_decimal(10.10) == Decimal("10.1")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string_and_int(self):
        assert to_decimal("10.10") == Decimal("10.10")
        assert to_decimal(" 3 ") == Decimal("3")
        assert to_decimal(7) == Decimal("7")

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", True, None])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            to_decimal(value)


class TestScale:
    def test_markup_is_exact(self):
        """10.10 x 1.1 is 11.11, not 11.110000000000001."""
        result = scale(10.10, Decimal("1.1"))

        assert result == Decimal("11.11")
        assert str(result) == "11.11"
        assert 10.10 * 1.1 != 11.11  # the float version drifts

    def test_rounds_half_up(self):
        assert scale("0.125", 1) == Decimal("0.13")
        assert scale("2.675", 1) == Decimal("2.68")

    def test_repeated_markup_does_not_drift(self):
        value = Decimal("10.10")
        for _ in range(10):
            value = scale(value, "1.1")

        reference = Decimal("10.10")
        for _ in range(10):
            reference = (reference * Decimal("1.1")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        assert value == reference


class TestQuantize:
    def test_default_places(self):
        assert str(quantize(Decimal("10.1"))) == "10.10"

    def test_explicit_places(self):
        assert str(quantize(Decimal("1.23456"), places=3)) == "1.235"

    def test_too_many_digits(self):
        with pytest.raises(ValueError):
            quantize(Decimal("1e30"))
