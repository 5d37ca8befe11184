"""
Terminal prompt loop

Drives one calculation at a time through the states

    AWAIT_OPERAND1 -> AWAIT_OPERAND2 -> AWAIT_OPERATOR -> COMPUTE -> DISPLAY
        -> AWAIT_CONTINUATION -> (AWAIT_OPERAND1 | TERMINATED)

Input and output are injected so the loop can run against scripted answers.
"""

import logging
import math
from enum import Enum
from typing import Callable, Optional

from calculator.configs import TerminalConfig
from calculator.core.engine import evaluate, is_valid_operator
from calculator.core.session import CalculationSession
from calculator.models import CalculationOutcome
from calculator.utils.number_utils import parse_number

logger = logging.getLogger(__name__)

INVALID_NUMBER_MESSAGE = "Error: That is not a valid number. Please try again."
INVALID_OPERATOR_MESSAGE = "Error: Invalid operation! Valid options are: +, -, *, /"
HISTORY_HEADER = "=== Calculation History ==="
HISTORY_CLEARED_MESSAGE = "History cleared!"


class LoopState(Enum):
    AWAIT_OPERAND1 = "await_operand1"
    AWAIT_OPERAND2 = "await_operand2"
    AWAIT_OPERATOR = "await_operator"
    COMPUTE = "compute"
    DISPLAY = "display"
    AWAIT_CONTINUATION = "await_continuation"
    TERMINATED = "terminated"


class InputLoop:
    """Sequential prompt loop sharing one CalculationSession"""

    def __init__(
        self,
        session: Optional[CalculationSession] = None,
        ask: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        config: Optional[TerminalConfig] = None,
    ):
        self.session = session if session is not None else CalculationSession()
        self.ask = ask or input
        self.write = write or print
        self.config = config or TerminalConfig()

        self.state = LoopState.AWAIT_OPERAND1
        self.operand1: Optional[float] = None
        self.operand2: Optional[float] = None
        self.operator: Optional[str] = None
        self.outcome: Optional[CalculationOutcome] = None

        self._handlers = {
            LoopState.AWAIT_OPERAND1: self._await_operand1,
            LoopState.AWAIT_OPERAND2: self._await_operand2,
            LoopState.AWAIT_OPERATOR: self._await_operator,
            LoopState.COMPUTE: self._compute,
            LoopState.DISPLAY: self._display,
            LoopState.AWAIT_CONTINUATION: self._await_continuation,
        }

    def run(self):
        """
        Run until a quit token is entered or input is interrupted.

        Ctrl+C and end of input abandon the pending prompt, including any
        half-entered calculation, and end the loop cleanly.
        """
        self.write(self.config.banner)
        self.write("")

        try:
            while self.state is not LoopState.TERMINATED:
                self.step()
        except (KeyboardInterrupt, EOFError):
            logger.info("Input interrupted, leaving calculator")
            self.state = LoopState.TERMINATED
            self.write("")
            self.write("")
            self.write(self.config.farewell)

    def step(self) -> LoopState:
        """Execute the current state and return the state it moved to"""
        if self.state is LoopState.TERMINATED:
            return self.state
        self.state = self._handlers[self.state]()
        return self.state

    def _read_number(self, prompt: str) -> Optional[float]:
        value = parse_number(self.ask(prompt))
        if math.isnan(value):
            logger.debug("Rejected operand input")
            self.write(INVALID_NUMBER_MESSAGE)
            self.write("")
            return None
        return value

    def _await_operand1(self) -> LoopState:
        self.operand1 = self._read_number(self.config.first_number_prompt)
        if self.operand1 is None:
            return LoopState.AWAIT_OPERAND1
        return LoopState.AWAIT_OPERAND2

    def _await_operand2(self) -> LoopState:
        self.operand2 = self._read_number(self.config.second_number_prompt)
        if self.operand2 is None:
            return LoopState.AWAIT_OPERAND2
        return LoopState.AWAIT_OPERATOR

    def _await_operator(self) -> LoopState:
        symbol = self.ask(self.config.operator_prompt)
        if not is_valid_operator(symbol):
            logger.debug(f"Rejected operator input: {symbol!r}")
            self.write(INVALID_OPERATOR_MESSAGE)
            self.write("")
            return LoopState.AWAIT_OPERATOR
        self.operator = symbol
        return LoopState.COMPUTE

    def _compute(self) -> LoopState:
        self.outcome = evaluate(self.operand1, self.operand2, self.operator)
        if self.outcome.ok:
            self.session.append(self.outcome.record)
        return LoopState.DISPLAY

    def _display(self) -> LoopState:
        self.write("")
        if self.outcome.ok:
            self.write(f"Result: {self.outcome.record.display()}")
        else:
            self.write(f"Error: {self.outcome.error}")
        self.write("")
        return LoopState.AWAIT_CONTINUATION

    def _await_continuation(self) -> LoopState:
        token = self.ask(self.config.continue_prompt).strip().lower()

        if token == "history":
            self.show_history()
        elif token == "clear":
            self.session.clear()
            self.write("")
            self.write(HISTORY_CLEARED_MESSAGE)
            self.write("")
        elif token in self.config.quit_tokens:
            self.write("")
            self.write(self.config.farewell)
            return LoopState.TERMINATED
        else:
            self.write("")

        self.operand1 = self.operand2 = self.operator = None
        self.outcome = None
        return LoopState.AWAIT_OPERAND1

    def show_history(self):
        self.write("")
        if self.session.is_empty:
            self.write(self.session.render()[0])
        else:
            self.write(HISTORY_HEADER)
            for line in self.session.render():
                self.write(line)
        self.write("")