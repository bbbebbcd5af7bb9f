from __future__ import annotations

import logging

from monkey.ast.nodes import Program
from monkey.evaluation.evaluator import evaluate
from monkey.reader.parser import parse
from monkey.types.environment import Environment
from monkey.types.macro_environment import MacroEnvironment
from monkey.types.objects import Object

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Monkey source one unit at a time.
    Keeps an Environment and a MacroEnvironment across calls, so bindings and
    macros defined by one call are visible to the next.
    """

    def __init__(self):
        self.env: Environment = Environment()
        self.macros: MacroEnvironment = MacroEnvironment(evaluate)

    def parse(self, code: str) -> Program:
        """Parse `code`, raising MonkeySyntaxError with every diagnostic on failure."""
        program = parse(code).raise_for_errors()
        logger.debug("parsed %d statements", len(program.statements))
        return program

    def expand(self, code: str) -> Program:
        """Parse, register macro definitions and expand macro calls, without evaluating."""
        program = self.parse(code)
        program = self.macros.define_macros(program, self.env)
        expanded = self.macros.expand_macros(program)
        logger.debug("expanded program: %s", expanded)
        return expanded

    def eval(self, code: str) -> Object:
        """Feed code to the interpreter and return the value of its last statement."""
        program = self.expand(code)
        result = evaluate(program, self.env)
        logger.debug("evaluated to %s", result.inspect())
        return result
