"""
SimpleCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "SimpleCalc"
VERSION = "1.0.0"

# Engine Settings
ERROR_SENTINEL = "Error"
SIGNIFICANT_DIGITS = 12
DECIMAL_POINT = "."

# Display glyph -> arithmetic operator
OPERATOR_GLYPHS = {
    "×": "*",
    "÷": "/",
}
DISPLAY_OPERATORS = ("+", "-", "×", "÷")
ARITHMETIC_OPERATORS = ("+", "-", "*", "/")
# Any character that can end the buffer as an operator
OPERATOR_CHARS = "+-×÷*/"

# Display shown for a fresh calculation
EMPTY_DISPLAY = "0"

# Web API settings
WEB_HOST = os.environ.get("SIMPLECALC_HOST", "0.0.0.0")
WEB_PORT = int(os.environ.get("SIMPLECALC_PORT", "8888"))

# Logging
LOG_LEVEL = os.environ.get("SIMPLECALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
