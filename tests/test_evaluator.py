"""
Tests for expression evaluation and result formatting.
"""

import pytest
from evaluator import (
    DivisionByZero,
    InvalidExpression,
    canonicalize,
    compute,
    evaluate,
    format_result,
    tokenize,
)


class TestEvaluate:
    """Display strings returned by evaluate()."""

    def test_divide_evenly_has_no_trailing_zero(self):
        assert evaluate("6 / 3") == "2"

    def test_one_third_has_twelve_significant_digits(self):
        assert evaluate("1 / 3") == "0.333333333333"

    def test_multiplication_before_addition(self):
        assert evaluate("10 + 5 * 2") == "20"

    def test_left_to_right_subtraction(self):
        assert evaluate("10 - 4 - 3") == "3"

    def test_left_to_right_division(self):
        assert evaluate("100 / 10 / 5") == "2"

    def test_display_glyphs(self):
        assert evaluate("7 × 3 ÷ 2") == "10.5"

    def test_integer_division_is_not_truncated(self):
        assert evaluate("7 ÷ 2") == "3.5"

    def test_decimal_operands(self):
        assert evaluate("0.1 + 0.2") == "0.3"

    def test_surrounding_whitespace(self):
        assert evaluate("  12 + 3.5  ") == "15.5"

    def test_leading_minus(self):
        assert evaluate(" - 5 + 2") == "-3"

    def test_negative_zero(self):
        assert evaluate("0 * -1") == "0"

    def test_single_number(self):
        assert evaluate("42") == "42"

    def test_trailing_decimal_point(self):
        assert evaluate("5. + 1") == "6"

    @pytest.mark.parametrize("expression", [
        "6 / 0",
        "0 / 0",
        "1 + 2 / 0",
        "6 / 0 * 3",
        "5 / 0.0",
    ])
    def test_division_by_zero_is_error(self, expression):
        assert evaluate(expression) == "Error"

    @pytest.mark.parametrize("expression", [
        "abc",
        "5 +",
        "",
        "   ",
        ".",
        "1.2.3",
        "5 * / 2",
        "2 3",
        "(1 + 2)",
        "2 ^ 3",
        "1e5",
        "٣ + 1",
        "６ / ３",
    ])
    def test_invalid_expression_is_error(self, expression):
        assert evaluate(expression) == "Error"

    def test_overflow_is_error(self):
        assert evaluate("9" * 400 + " * 10") == "Error"


class TestCompute:
    """compute() raises typed errors."""

    def test_returns_float(self):
        assert compute("7 / 2") == 3.5

    def test_division_fast_path_zero(self):
        with pytest.raises(DivisionByZero):
            compute("6 / 0")

    def test_division_in_longer_expression(self):
        with pytest.raises(DivisionByZero):
            compute("1 + 2 / 0")

    def test_bad_character(self):
        with pytest.raises(InvalidExpression):
            compute("5 + x")

    def test_trailing_operator(self):
        with pytest.raises(InvalidExpression):
            compute("5 + ")

    def test_empty(self):
        with pytest.raises(InvalidExpression):
            compute("")


class TestTokenize:

    def test_canonicalize(self):
        assert canonicalize(" 8 ÷ 2 × 3 ") == "8 / 2 * 3"

    def test_tokens(self):
        tokens = tokenize("12 + 3.5")
        assert [t.text for t in tokens] == ["12", "+", "3.5"]
        assert [t.kind for t in tokens] == ["number", "operator", "number"]

    def test_rejects_glyphs_before_canonicalizing(self):
        with pytest.raises(InvalidExpression):
            tokenize("3 × 2")


class TestFormatResult:

    def test_whole_number(self):
        assert format_result(5.0) == "5"

    def test_rounds_to_twelve_digits(self):
        assert format_result(2 / 3) == "0.666666666667"

    def test_large_value_within_precision(self):
        assert format_result(123456789012.0) == "123456789012"

    def test_infinity_rejected(self):
        with pytest.raises(InvalidExpression):
            format_result(float("inf"))


class TestAsciiDigitsOnly:

    @pytest.mark.parametrize("expression", ["٣ + 1", "６ / ３", "1 + ²"])
    def test_non_ascii_digits_rejected(self, expression):
        with pytest.raises(InvalidExpression):
            tokenize(expression)
