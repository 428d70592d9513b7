"""
Keypad Session for SimpleCalc
Maps calculator button presses to engine calls and tracks what is displayed
"""
import logging
from enum import Enum

import config
from calculator import Calculator
from evaluator import format_result

logger = logging.getLogger(__name__)

DIGIT = "digit"
OPERATOR = "operator"
FUNCTION = "function"


class CalculatorButton(Enum):
    """Every key on the calculator, valued by its label"""
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DECIMAL = "."
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    EQUALS = "="
    CLEAR = "AC"
    PERCENT = "%"
    TOGGLE_SIGN = "+/-"

    @property
    def kind(self):
        if self.value in config.DISPLAY_OPERATORS or self is CalculatorButton.EQUALS:
            return OPERATOR
        if self in (CalculatorButton.CLEAR, CalculatorButton.PERCENT, CalculatorButton.TOGGLE_SIGN):
            return FUNCTION
        return DIGIT


B = CalculatorButton

KEYPAD_LAYOUT = [
    [B.CLEAR, B.TOGGLE_SIGN, B.PERCENT, B.DIVIDE],
    [B.SEVEN, B.EIGHT, B.NINE, B.MULTIPLY],
    [B.FOUR, B.FIVE, B.SIX, B.SUBTRACT],
    [B.ONE, B.TWO, B.THREE, B.ADD],
    [B.ZERO, B.DECIMAL, B.EQUALS],
]


def plain_decimal(number):
    """Rewrite an exponent-form result as a plain decimal the tokenizer accepts"""
    if "e" not in number:
        return number
    plain = f"{float(number):.{config.SIGNIFICANT_DIGITS}f}".rstrip("0").rstrip(".")
    return "0" if plain == "-0" else plain


class KeypadSession:
    def __init__(self, calculator=None):
        self.calculator = calculator or Calculator()
        self.display = config.EMPTY_DISPLAY
        self.is_new_calculation = True
        self.last_expression = ""
        self.last_result = ""

    def press(self, key):
        """Handle a button press and return the new display text"""
        try:
            button = CalculatorButton(key)
        except ValueError:
            raise ValueError(f"Unknown key: {key!r}") from None

        if button is B.EQUALS:
            self._equals()
        elif button is B.CLEAR:
            self.clear()
        elif button is B.TOGGLE_SIGN:
            self._edit_last_number(self._toggle_sign)
        elif button is B.PERCENT:
            self._edit_last_number(self._percent)
        elif button.kind == OPERATOR:
            self._continue_from_result()
            self._show(self.calculator.append_operator(button.value))
        else:
            if self.is_new_calculation:
                # A new number replaces whatever result is shown
                self.calculator.clear()
                self.is_new_calculation = False
            self._show(self.calculator.append(button.value))
        return self.display

    def clear(self):
        """Reset to a fresh calculation"""
        self.calculator.clear()
        self.display = config.EMPTY_DISPLAY
        self.is_new_calculation = True
        return self.display

    def _equals(self):
        expression = self.calculator.get_expression()
        if not expression.strip():
            return
        result = self.calculator.evaluate()
        logger.debug("%s = %s", expression.strip(), result)
        self.last_expression = expression.strip()
        self.last_result = result
        self.display = result
        self.is_new_calculation = True

    def _continue_from_result(self):
        """Seed the buffer with the shown result when starting a new calculation"""
        if not self.is_new_calculation:
            return
        if self.display in (config.EMPTY_DISPLAY, config.ERROR_SENTINEL):
            self.calculator.clear()
        else:
            self.calculator.set_expression(plain_decimal(self.display))
        self.is_new_calculation = False

    def _edit_last_number(self, edit):
        self._continue_from_result()
        tokens = self.calculator.get_expression().split(" ")
        last = tokens[-1]
        if not any(char.isdigit() for char in last):
            return
        tokens[-1] = edit(last)
        self.calculator.set_expression(" ".join(tokens))
        self._show(self.calculator.get_expression())

    @staticmethod
    def _toggle_sign(number):
        if number.startswith("-"):
            return number[1:]
        return "-" + number

    @staticmethod
    def _percent(number):
        try:
            value = float(number)
        except ValueError:
            return number
        return plain_decimal(format_result(value / 100))

    def _show(self, expression):
        self.display = expression if expression else config.EMPTY_DISPLAY

    def format_last_calculation(self):
        """Format the last calculation for display"""
        if not self.last_expression:
            return ""
        return f"{self.last_expression} = {self.last_result}"

    def state(self):
        return {
            'display': self.display,
            'expression': self.calculator.get_expression(),
            'is_new_calculation': self.is_new_calculation,
            'last_expression': self.last_expression,
            'last_result': self.last_result,
        }
