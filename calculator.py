"""
Calculator Engine for SimpleCalc
Builds the expression buffer from key presses and hands it to the evaluator
"""
import config
from evaluator import evaluate as evaluate_expression


def append(expression, token):
    """Return the buffer with a digit, decimal point or raw value appended"""
    if token == config.DECIMAL_POINT:
        # One decimal point per number token
        last_token = expression.split(" ")[-1]
        if expression.endswith(config.DECIMAL_POINT) or config.DECIMAL_POINT in last_token:
            return expression
    return expression + token


def append_operator(expression, op):
    """Return the buffer with a binary operator appended.

    A trailing operator already in the buffer is replaced, so the last
    operator pressed wins.
    """
    stripped = expression.rstrip(" ")
    if stripped and stripped[-1] in config.OPERATOR_CHARS:
        expression = stripped[:-1].rstrip(" ")
    return f"{expression} {op} "


class Calculator:
    def __init__(self):
        self.current_expression = ""
        self.last_result = None

    def append(self, token):
        """Add a digit or decimal point to current expression"""
        self.current_expression = append(self.current_expression, str(token))
        return self.current_expression

    def append_operator(self, op):
        """Add an operator to the expression"""
        self.current_expression = append_operator(self.current_expression, op)
        return self.current_expression

    def clear(self):
        """Clear current expression"""
        self.current_expression = ""
        return self.current_expression

    def evaluate(self):
        """Evaluate the current expression and start a fresh one"""
        result = evaluate_expression(self.current_expression)
        self.last_result = result
        self.current_expression = ""
        return result

    def get_expression(self):
        """Get current expression"""
        return self.current_expression

    def set_expression(self, expression):
        """Set current expression"""
        self.current_expression = expression
