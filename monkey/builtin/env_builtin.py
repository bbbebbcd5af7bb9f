"""Built-in functions for the Monkey runtime.

This module defines the fixed registry consulted when an identifier is not
bound in the environment chain. Builtins validate their argument count and
kinds and raise descriptive errors. None of them mutates its arguments.
"""
from __future__ import annotations

from monkey.errors import MonkeyTypeError
from monkey.types.function import Builtin, check_arity
from monkey.types.objects import NULL, Array, Integer, Object, String


def _unsupported(name: str, obj: Object) -> MonkeyTypeError:
    return MonkeyTypeError(f"{name}: not supported on {obj.type()}")


def len_builtin(*args: Object) -> Object:
    """Byte length of a string, element count of an array."""
    check_arity(1, list(args))
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value.encode("utf-8")))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    raise _unsupported("len", arg)


def first(*args: Object) -> Object:
    """First element of an array, or null when it is empty."""
    check_arity(1, list(args))
    arg = args[0]
    if not isinstance(arg, Array):
        raise _unsupported("first", arg)
    return arg.elements[0] if arg.elements else NULL


def last(*args: Object) -> Object:
    """Last element of an array, or null when it is empty."""
    check_arity(1, list(args))
    arg = args[0]
    if not isinstance(arg, Array):
        raise _unsupported("last", arg)
    return arg.elements[-1] if arg.elements else NULL


def rest(*args: Object) -> Object:
    """New array without the first element, or null when it is empty."""
    check_arity(1, list(args))
    arg = args[0]
    if not isinstance(arg, Array):
        raise _unsupported("rest", arg)
    if not arg.elements:
        return NULL
    return Array(arg.elements[1:])


def push(*args: Object) -> Object:
    """New array with the value appended; the original is untouched."""
    check_arity(2, list(args))
    arr, value = args
    if not isinstance(arr, Array):
        raise _unsupported("push", arr)
    return Array(arr.elements + (value,))


BUILTINS: dict[str, Builtin] = {
    "len": Builtin("len", len_builtin),
    "first": Builtin("first", first),
    "last": Builtin("last", last),
    "rest": Builtin("rest", rest),
    "push": Builtin("push", push),
}


def lookup_builtin(name: str) -> Builtin | None:
    return BUILTINS.get(name)
