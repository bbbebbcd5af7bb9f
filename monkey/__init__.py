# Core type aliases for Monkey's data model.
# Source text is turned into immutable AST nodes (monkey.ast) which the evaluator
# interprets into runtime objects (monkey.types.objects).
#
# Naming guidance:
# - Node:        Use in reader/parser/macro code to denote syntax (code-as-data).
# - MonkeyValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
MonkeyValue = Any
# AST node alias
Node = Any

# Evaluator function type: used by special forms and the macro expander
EvaluatorFn = Callable[..., MonkeyValue]
