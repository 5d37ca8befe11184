"""
Web form handler

Each compute event reads both operand fields and the operator at once. A
non-numeric operand aborts that attempt with an inline error instead of
re-prompting.
"""

import logging
import math
from typing import List, Optional

from calculator.core.engine import evaluate
from calculator.core.session import CalculationSession
from calculator.models import CalculateResponse, HistoryResponse
from calculator.utils.number_utils import parse_number

logger = logging.getLogger(__name__)

INVALID_NUMBERS_MESSAGE = "Error: Please enter valid numbers"
RESULT_PLACEHOLDER = "Result will appear here"

class FormHandler:
    def __init__(self, session: Optional[CalculationSession] = None):
        self.session = session if session is not None else CalculationSession()
        self.result_text = RESULT_PLACEHOLDER
        self.result_is_error = False
        self.history_lines: List[str] = []

        # Re-render the history region whenever the session changes
        self.session.subscribe(self._render_history)
        self._render_history(self.session)

    def _render_history(self, session: CalculationSession):
        self.history_lines = session.render()

    def history(self) -> HistoryResponse:
        return HistoryResponse(
            entries=self.session.entries(),
            lines=list(self.history_lines),
            count=len(self.session),
        )

    def _show(self, text: str, is_error: bool):
        self.result_text = text
        self.result_is_error = is_error

    def handle_calculate(self, num1: str, num2: str, operation: str) -> CalculateResponse:
        """
        Compute one calculation from raw form values.

        Args:
            num1: Text of the first operand field
            num2: Text of the second operand field
            operation: Selected operator symbol

        Returns:
            CalculateResponse with the result or error text and the current history
        """
        a = parse_number(num1)
        b = parse_number(num2)

        if math.isnan(a) or math.isnan(b):
            logger.warning(f"Rejected form input: num1={num1!r}, num2={num2!r}")
            self._show(INVALID_NUMBERS_MESSAGE, True)
            return CalculateResponse(success=False, message=self.result_text, history=self.history())

        outcome = evaluate(a, b, operation)
        if not outcome.ok:
            self._show(f"Error: {outcome.error}", True)
            return CalculateResponse(success=False, message=self.result_text, history=self.history())

        self._show(outcome.record.display(), False)
        self.session.append(outcome.record)
        return CalculateResponse(
            success=True,
            message=self.result_text,
            record=outcome.record,
            history=self.history(),
        )

    def handle_clear(self):
        """Reset the result region; the operand fields are cleared client side"""
        self._show(RESULT_PLACEHOLDER, False)

    def handle_clear_history(self) -> HistoryResponse:
        self.session.clear()
        return self.history()
