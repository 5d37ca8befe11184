"""
Tests for the terminal prompt loop, driven by scripted answers
"""

import unittest

from calculator.configs import TerminalConfig
from calculator.core.session import CalculationSession, EMPTY_HISTORY_MESSAGE
from calculator.services.input_loop import (
    HISTORY_CLEARED_MESSAGE,
    HISTORY_HEADER,
    INVALID_NUMBER_MESSAGE,
    INVALID_OPERATOR_MESSAGE,
    InputLoop,
    LoopState,
)

class ScriptedTerminal:
    """Feeds answers to prompts; raises EOFError once they run out"""

    def __init__(self, answers, interrupt=False):
        self.answers = list(answers)
        self.interrupt = interrupt
        self.prompts = []
        self.output = []

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise KeyboardInterrupt() if self.interrupt else EOFError()
        return self.answers.pop(0)

    def write(self, text=""):
        self.output.append(text)

def run_loop(answers, interrupt=False):
    terminal = ScriptedTerminal(answers, interrupt)
    session = CalculationSession()
    loop = InputLoop(session, ask=terminal.ask, write=terminal.write)
    loop.run()
    return loop, session, terminal

class TestInputLoop(unittest.TestCase):

    def test_addition_scenario(self):
        loop, session, terminal = run_loop(["10", "5", "+", "q"])

        self.assertIn("Result: 10 + 5 = 15", terminal.output)
        self.assertEqual(session.render(), ["1. 10 + 5 = 15"])
        self.assertEqual(loop.state, LoopState.TERMINATED)
        self.assertEqual(terminal.output[-1], "Goodbye!")

    def test_prompt_order(self):
        config = TerminalConfig()
        _, _, terminal = run_loop(["1", "2", "-", "quit"])

        self.assertEqual(terminal.prompts, [
            config.first_number_prompt,
            config.second_number_prompt,
            config.operator_prompt,
            config.continue_prompt,
        ])

    def test_division_by_zero_leaves_history_unchanged(self):
        _, session, terminal = run_loop(["8", "0", "/", "no"])

        self.assertIn("Error: Cannot divide by zero!", terminal.output)
        self.assertEqual(len(session), 0)

    def test_invalid_operand_reprompts(self):
        config = TerminalConfig()
        _, session, terminal = run_loop(["abc", "10abc", "", "5", "+", "q"])

        self.assertEqual(terminal.output.count(INVALID_NUMBER_MESSAGE), 2)
        self.assertEqual(terminal.prompts.count(config.first_number_prompt), 2)
        self.assertEqual(terminal.prompts.count(config.second_number_prompt), 2)
        self.assertIn("Result: 10 + 5 = 15", terminal.output)
        self.assertEqual(len(session), 1)

    def test_invalid_operator_reprompts(self):
        config = TerminalConfig()
        _, session, terminal = run_loop(["6", "3", "x", " /", "÷", "/", "q"])

        self.assertEqual(terminal.output.count(INVALID_OPERATOR_MESSAGE), 3)
        self.assertEqual(terminal.prompts.count(config.operator_prompt), 4)
        self.assertIn("Result: 6 / 3 = 2", terminal.output)
        self.assertEqual(len(session), 1)

    def test_history_after_two_calculations(self):
        _, session, terminal = run_loop(["1", "2", "+", "", "3", "4", "*", "history"])

        header = terminal.output.index(HISTORY_HEADER)
        self.assertEqual(terminal.output[header + 1:header + 3], ["1. 1 + 2 = 3", "2. 3 * 4 = 12"])
        # Back at the first prompt, no third calculation was made
        self.assertEqual(len(session), 2)
        self.assertEqual(terminal.output.count("Result: 1 + 2 = 3"), 1)

    def test_clear_then_history_shows_sentinel(self):
        _, session, terminal = run_loop(["1", "1", "+", "clear", "4", "0", "/", "history"])

        self.assertIn(HISTORY_CLEARED_MESSAGE, terminal.output)
        self.assertIn(EMPTY_HISTORY_MESSAGE, terminal.output)
        self.assertNotIn(HISTORY_HEADER, terminal.output)
        self.assertEqual(len(session), 0)

    def test_continuation_tokens_are_case_insensitive(self):
        loop, session, terminal = run_loop(["2", "2", "*", "  HISTORY ", "1", "1", "-", " QuIt "])

        self.assertIn("1. 2 * 2 = 4", terminal.output)
        self.assertEqual(len(session), 2)
        self.assertEqual(loop.state, LoopState.TERMINATED)

    def test_unknown_token_continues(self):
        _, session, terminal = run_loop(["1", "1", "+", "maybe", "2", "2", "+", "q"])

        self.assertEqual(len(session), 2)
        self.assertEqual(terminal.output[-1], "Goodbye!")

    def test_interrupt_abandons_pending_calculation(self):
        loop, session, terminal = run_loop(["7", "3"], interrupt=True)

        self.assertEqual(loop.state, LoopState.TERMINATED)
        self.assertEqual(len(session), 0)
        self.assertEqual(terminal.output[-1], "Goodbye!")

    def test_end_of_input_terminates(self):
        loop, session, terminal = run_loop(["9", "3", "/"])

        self.assertIn("Result: 9 / 3 = 3", terminal.output)
        self.assertEqual(loop.state, LoopState.TERMINATED)
        self.assertEqual(len(session), 1)

    def test_step_transitions(self):
        terminal = ScriptedTerminal(["4", "oops", "2", "-", ""])
        loop = InputLoop(ask=terminal.ask, write=terminal.write)

        self.assertEqual(loop.step(), LoopState.AWAIT_OPERAND2)
        self.assertEqual(loop.step(), LoopState.AWAIT_OPERAND2)
        self.assertEqual(loop.step(), LoopState.AWAIT_OPERATOR)
        self.assertEqual(loop.step(), LoopState.COMPUTE)
        self.assertEqual(loop.step(), LoopState.DISPLAY)
        self.assertEqual(loop.step(), LoopState.AWAIT_CONTINUATION)
        self.assertEqual(loop.step(), LoopState.AWAIT_OPERAND1)
        self.assertEqual(loop.session.render(), ["1. 4 - 2 = 2"])

if __name__ == "__main__":
    unittest.main(verbosity=2)
