from __future__ import annotations

import logging
from typing import Optional

from monkey import EvaluatorFn, Node
from monkey.ast.modify import modify
from monkey.ast.nodes import CallExpression, Identifier, LetStatement, MacroLiteral, Program, Statement
from monkey.errors import MonkeyArityError, MonkeyMacroContractError
from monkey.types.environment import Environment
from monkey.types.function import Macro
from monkey.types.objects import Quote, ReturnValue

logger = logging.getLogger(__name__)


# Canonical macro expansion: run the macro body against quoted, unevaluated
# arguments and splice the returned syntax in place of the call.

class MacroEnvironment:
    """
    Macro table mapping macro names to Macro transformers.

    Features:
    - Definition pass over the top level of a program
    - Bottom-up expansion reaching every child slot of every node kind
    - Closure environment evaluation of macro bodies
    """

    def __init__(self, evaluator: Optional[EvaluatorFn] = None):
        self.macros: dict[str, Macro] = {}
        if evaluator is None:
            # lazy import to avoid a cycle with the evaluator package
            from monkey.evaluation.evaluator import evaluate
            evaluator = evaluate
        self.evaluator: EvaluatorFn = evaluator

    def define_macro(self, name: str, macro: Macro) -> None:
        self.macros[name] = macro

    def is_macro(self, name: str) -> bool:
        return name in self.macros

    def get(self, name: str) -> Optional[Macro]:
        return self.macros.get(name)

    # Definition pass
    @staticmethod
    def is_macro_definition(stmt: Statement) -> bool:
        return isinstance(stmt, LetStatement) and isinstance(stmt.value, MacroLiteral)

    def define_macros(self, program: Program, env: Environment) -> Program:
        """Register top-level `let name = macro(...) {...};` statements.

        Returns a new Program without those statements. Macro literals nested
        anywhere below the top level are left alone.
        """
        kept: list[Statement] = []
        for stmt in program.statements:
            if self.is_macro_definition(stmt):
                literal = stmt.value
                self.define_macro(stmt.name.value, Macro(literal.parameters, literal.body, env))
                logger.debug("defined macro %s", stmt.name.value)
            else:
                kept.append(stmt)
        return Program(tuple(kept))

    # Expansion
    def _macro_for_call(self, node: Node) -> Optional[Macro]:
        if not isinstance(node, CallExpression):
            return None
        if not isinstance(node.function, Identifier):
            return None
        return self.macros.get(node.function.value)

    def _run_transformer(self, call: CallExpression, macro: Macro) -> Node:
        """
        Canonical macro invocation:
        - Bind raw, unevaluated args, each wrapped in a Quote, to the macro's
          parameters in a child of its defining environment.
        - Evaluate the body once to produce the expansion.
        - The result must be a Quote; its node replaces the call.
        """
        if len(call.arguments) != len(macro.parameters):
            raise MonkeyArityError(
                f"wrong number of arguments to macro {call.function}, "
                f"expected {len(macro.parameters)}, but got {len(call.arguments)}"
            )
        call_env = Environment(outer=macro.env)
        for param, arg in zip(macro.parameters, call.arguments):
            call_env.define(param.value, Quote(arg))

        expansion = self.evaluator(macro.body, call_env)
        if isinstance(expansion, ReturnValue):
            expansion = expansion.value
        if not isinstance(expansion, Quote):
            raise MonkeyMacroContractError(
                f"macro {call.function} must return a QUOTE, got {expansion.type()}"
            )
        logger.debug("expanded %s into %s", call, expansion.node)
        return expansion.node

    def expand_1(self, node: Node) -> Node:
        """Expand `node` if it is a call to a known macro, else return it unchanged."""
        macro = self._macro_for_call(node)
        if macro is None:
            return node
        return self._run_transformer(node, macro)

    def expand_macros(self, program: Node) -> Node:
        """Rewrite every macro call in `program`, innermost first."""
        return modify(program, self.expand_1)


def define_macros(program: Program, env: Environment, macros: MacroEnvironment) -> Program:
    return macros.define_macros(program, env)


def expand_macros(program: Node, macros: MacroEnvironment) -> Node:
    return macros.expand_macros(program)
