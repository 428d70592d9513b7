"""
Expression Evaluator for SimpleCalc
Parses a finished expression and formats the result for display
"""
import logging
import math
import re
from collections import namedtuple

import config

logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class InvalidExpression(CalculatorError):
    """Raised when an expression cannot be parsed or has no numeric value."""
    pass


class DivisionByZero(CalculatorError):
    """Raised when a divisor evaluates to zero."""
    pass


Token = namedtuple("Token", ["kind", "text"])

NUMBER = "number"
OPERATOR = "operator"

_NUMBER_RE = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")


def canonicalize(expression: str) -> str:
    """Replace display glyphs with arithmetic operators and trim whitespace"""
    formatted = expression or ""
    for glyph, op in config.OPERATOR_GLYPHS.items():
        formatted = formatted.replace(glyph, op)
    return formatted.strip()


def tokenize(expression: str) -> list:
    """Split a canonical expression into number and operator tokens.

    Raises InvalidExpression on any character other than digits, ".",
    the four arithmetic operators and spaces.
    """
    tokens = []
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        if char == " ":
            pos += 1
            continue
        if char in config.ARITHMETIC_OPERATORS:
            tokens.append(Token(OPERATOR, char))
            pos += 1
            continue
        match = _NUMBER_RE.match(expression, pos)
        if match is None:
            raise InvalidExpression(f"Invalid character {char!r} at position {pos}")
        tokens.append(Token(NUMBER, match.group()))
        pos = match.end()
    return tokens


def _divide(numerator, denominator):
    if denominator == 0:
        raise DivisionByZero("Cannot divide by zero")
    return numerator / denominator


_BINARY_OPS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}


class _Parser:
    """Recursive-descent parser for + - * / with the usual precedence.

    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := ("+" | "-") factor | NUMBER
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def parse(self):
        value = self._expression()
        if self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            raise InvalidExpression(f"Unexpected {token.kind} {token.text!r}")
        return value

    def _peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _take_operator(self, ops):
        token = self._peek()
        if token is not None and token.kind == OPERATOR and token.text in ops:
            self.pos += 1
            return token.text
        return None

    def _expression(self):
        value = self._term()
        op = self._take_operator("+-")
        while op is not None:
            value = _BINARY_OPS[op](value, self._term())
            op = self._take_operator("+-")
        return value

    def _term(self):
        value = self._factor()
        op = self._take_operator("*/")
        while op is not None:
            value = _BINARY_OPS[op](value, self._factor())
            op = self._take_operator("*/")
        return value

    def _factor(self):
        sign = self._take_operator("+-")
        if sign is not None:
            value = self._factor()
            return -value if sign == "-" else value
        token = self._peek()
        if token is None:
            raise InvalidExpression("Expression ends with an operator")
        if token.kind != NUMBER:
            raise InvalidExpression(f"Expected a number, got {token.text!r}")
        self.pos += 1
        # Every operand is a float so "7 / 2" never truncates
        return float(token.text)


def _divide_fast_path(expression):
    """Divide directly when the expression is exactly two operands around "/".

    Returns None when the expression has any other shape.
    """
    operands = [part.strip() for part in expression.split("/")]
    if len(operands) != 2:
        return None
    try:
        numerator = float(operands[0])
        denominator = float(operands[1])
    except ValueError:
        return None
    quotient = _divide(numerator, denominator)
    logger.debug("Manual division result: %r", quotient)
    return quotient


def compute(expression: str) -> float:
    """Evaluate an expression to a float.

    Raises InvalidExpression or DivisionByZero; use evaluate() for the
    display-ready, never-raising form.
    """
    formatted = canonicalize(expression)
    logger.debug("Formatted expression: %r", formatted)

    tokens = tokenize(formatted)
    if not tokens:
        raise InvalidExpression("Expression is empty")

    if "/" in formatted:
        quotient = _divide_fast_path(formatted)
        if quotient is not None:
            return quotient

    return _Parser(tokens).parse()


def format_result(value: float) -> str:
    """Format a result with up to 12 significant digits and no trailing zeros"""
    if not math.isfinite(value):
        raise InvalidExpression(f"Result is not a finite number: {value!r}")
    if value == 0:
        # Drop the sign of negative zero
        value = 0.0
    return "%.*g" % (config.SIGNIFICANT_DIGITS, value)


def evaluate(expression: str) -> str:
    """Evaluate an expression and return the display string.

    Never raises: any failure comes back as config.ERROR_SENTINEL.
    """
    try:
        result = format_result(compute(expression))
    except CalculatorError as e:
        logger.info("Could not evaluate %r: %s", expression, e)
        return config.ERROR_SENTINEL
    logger.debug("Result: %s", result)
    return result
