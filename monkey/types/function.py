"""Callable values: user functions, builtins and macros."""

from __future__ import annotations

from typing import Callable

from monkey.ast.nodes import BlockStatement, Identifier
from monkey.errors import MonkeyArityError
from monkey.types.environment import Environment
from monkey.types.objects import Object, ObjectType


def check_arity(expected: int, args: list) -> None:
    if len(args) != expected:
        raise MonkeyArityError(
            f"wrong number of arguments, expected {expected}, but got {len(args)}"
        )


class Function(Object):
    """A first-class function with parameters, body, and closure env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(
        self, parameters: tuple[Identifier, ...], body: BlockStatement, env: Environment
    ):
        self.parameters: tuple[Identifier, ...] = tuple(parameters)
        self.body: BlockStatement = body
        # shared, not copied: bindings added later stay visible
        self.env: Environment = env

    def type(self) -> str:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        return f"fn({','.join(p.value for p in self.parameters)}){self.body}"

    def __repr__(self) -> str:
        return f"<Function {self.inspect()}>"

    def extend_env(self, args: list[Object]) -> Environment:
        """
        Bind the given argument values to this function's parameters and
        return a new Environment, child of the closure env, for the body.
        """
        check_arity(len(self.parameters), args)
        new_env = Environment(outer=self.env)
        for param, arg in zip(self.parameters, args):
            new_env.define(param.value, arg)
        return new_env


BuiltinFunction = Callable[..., Object]


class Builtin(Object):
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFunction):
        self.name = name
        self.fn = fn

    def type(self) -> str:
        return ObjectType.BUILTIN

    def inspect(self) -> str:
        return f"builtin function {self.name}"

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"

    def __call__(self, *args: Object) -> Object:
        return self.fn(*args)


class Macro(Function):
    """Like Function, but its body runs at expansion time on quoted arguments.

    The evaluator never calls a Macro; only MacroEnvironment does.
    """

    __slots__ = ()

    def type(self) -> str:
        return ObjectType.MACRO

    def inspect(self) -> str:
        return f"macro({','.join(p.value for p in self.parameters)}){self.body}"

    def __repr__(self) -> str:
        return f"<Macro {self.inspect()}>"
