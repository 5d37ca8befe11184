import math
import re
from decimal import Decimal

# Longest numeric prefix: optional sign, then Infinity or a decimal literal
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_number(text: str) -> float:
    """
    Parse the leading numeric prefix of text.

    "10abc" -> 10.0, "  -2.5e3x" -> -2500.0, "abc" -> nan
    """
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if not match:
        return math.nan

    literal = match.group(0)
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def format_number(value: float) -> str:
    """Render a number for display: 15.0 -> "15", 1e21 -> "1e+21", 1e-7 -> "1e-7"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(float(value))
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        return format(Decimal(text), "f")
    sign = "+" if exponent > 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"
