"""
Arithmetic engine: the four binary operations and operator validation
"""

import logging
from typing import Callable, Dict

from calculator.models import CalculationOutcome, CalculationRecord

logger = logging.getLogger(__name__)


class DivisionByZero(ArithmeticError):
    """Raised when the divisor is exactly zero"""

    def __init__(self, message: str = "Cannot divide by zero!"):
        super().__init__(message)
        self.message = message


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero()
    return a / b


OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}


def is_valid_operator(symbol: str) -> bool:
    """Exact match against +, -, * and /; no whitespace or aliases"""
    return symbol in OPERATIONS


def evaluate(a: float, b: float, operator: str) -> CalculationOutcome:
    """
    Apply operator to a and b.

    Args:
        a: First operand
        b: Second operand
        operator: One of +, -, *, /

    Returns:
        CalculationOutcome holding the record, or the error message when the
        divisor is zero

    Raises:
        ValueError: If operator is not a supported symbol
    """
    if not is_valid_operator(operator):
        raise ValueError("Invalid operation")

    try:
        result = OPERATIONS[operator](a, b)
    except DivisionByZero as e:
        logger.warning(f"Rejected calculation {a} {operator} {b}: {e.message}")
        return CalculationOutcome(error=e.message)

    record = CalculationRecord(operand1=a, operand2=b, operator=operator, result=result)
    logger.info(f"Calculated {record.display()}")
    return CalculationOutcome(record=record)
