import pytest

from budget_verifier.utils.money import format_amount, parse_cents


class TestParseCents:
    """Test suite for currency text to cents conversion"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12.34", 1234),
            ("-45.67", -4567),
            ("1,234.56", 123456),
            ("-1,200.00", -120000),
            ("7", 700),
            ("$19.99", 1999),
            ("-$19.99", -1999),
            (" 0.10 ", 10),
        ],
    )
    def test_valid_amounts(self, text, expected):
        assert parse_cents(text) == expected

    def test_values_that_drift_as_floats_are_exact(self):
        # 0.29 * 100 is 28.999999999999996 as a float
        assert parse_cents("0.29") == 29
        assert parse_cents("1.15") == 115
        assert parse_cents("4.35") == 435

    def test_half_cents_round_away_from_zero(self):
        assert parse_cents("0.145") == 15
        assert parse_cents("-0.145") == -15

    @pytest.mark.parametrize("text", ["", "abc", "12.3.4", "NaN", "Infinity", "-"])
    def test_invalid_amounts(self, text):
        with pytest.raises(ValueError):
            parse_cents(text)


class TestFormatAmount:
    """Test suite for cents to text rendering"""

    @pytest.mark.parametrize(
        "cents,expected",
        [(0, "0.00"), (5, "0.05"), (-5, "-0.05"), (123456, "1234.56"), (-120000, "-1200.00")],
    )
    def test_format(self, cents, expected):
        assert format_amount(cents) == expected
