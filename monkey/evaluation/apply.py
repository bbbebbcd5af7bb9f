"""Application engine for Monkey.

This module centralizes call semantics for the evaluator:
- User functions get a fresh child of their closure environment with each
  parameter bound to its argument; a ReturnValue coming out of the body is
  unwrapped here, at the call boundary.
- Builtins are invoked with the evaluated arguments.
- Anything else is not callable.
"""

from __future__ import annotations

from monkey import EvaluatorFn
from monkey.errors import MonkeyTypeError
from monkey.types.function import Builtin, Function, Macro
from monkey.types.objects import Object, ReturnValue


def unwrap_return_value(obj: Object) -> Object:
    if isinstance(obj, ReturnValue):
        return obj.value
    return obj


def apply_function(fn: Function, args: list[Object], evaluate_fn: EvaluatorFn) -> Object:
    """Apply a user-defined Function.

    Raises MonkeyArityError when the argument count does not match.
    """
    new_env = fn.extend_env(args)
    result = evaluate_fn(fn.body, new_env)
    return unwrap_return_value(result)


def apply(head: Object, args: list[Object], evaluate_fn: EvaluatorFn) -> Object:
    """Apply either a Function or a Builtin; raise a type error otherwise."""
    if isinstance(head, Macro):
        # macros only run during expansion
        raise MonkeyTypeError(f"{head.type()} is not callable")
    if isinstance(head, Function):
        return apply_function(head, args, evaluate_fn)
    if isinstance(head, Builtin):
        return head(*args)
    raise MonkeyTypeError(f"{head.type()} is not callable")
