from pydantic import BaseModel, ConfigDict
from typing import Optional, List, Literal

from calculator.utils.number_utils import format_number

Operator = Literal["+", "-", "*", "/"]

class CalculationRecord(BaseModel):
    # Infinity and NaN survive JSON as "Infinity" / "NaN" instead of null
    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    operand1: float
    operand2: float
    operator: Operator
    result: float

    def display(self) -> str:
        return (
            f"{format_number(self.operand1)} {self.operator} "
            f"{format_number(self.operand2)} = {format_number(self.result)}"
        )

class CalculationOutcome(BaseModel):
    """Either a completed record or the error message of a failed calculation"""
    record: Optional[CalculationRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

class CalculateRequest(BaseModel):
    # Raw field text; parsed server side so "10abc" behaves like the form does
    num1: str
    num2: str
    operation: Operator

class HistoryResponse(BaseModel):
    entries: List[str]
    lines: List[str]
    count: int

class CalculateResponse(BaseModel):
    success: bool
    message: str
    record: Optional[CalculationRecord] = None
    history: HistoryResponse
