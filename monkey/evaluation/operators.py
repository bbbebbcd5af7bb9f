"""Prefix and infix operator semantics.

Binary operators never coerce: both operands must be of the same kind.
  INTEGER  + - * / == != < >
  STRING   + == !=
  BOOLEAN  == !=
Everything else is an error naming both kinds and the operator.
"""

from __future__ import annotations

from monkey.errors import (
    MonkeyEvaluationError,
    MonkeyOverflowError,
    MonkeyTypeError,
    MonkeyZeroDivisionError,
)
from monkey.types.objects import (
    FALSE,
    TRUE,
    Boolean,
    Integer,
    Null,
    Object,
    String,
    native_bool_to_boolean,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def make_integer(value: int) -> Integer:
    if not INT64_MIN <= value <= INT64_MAX:
        raise MonkeyOverflowError(f"integer overflow: {value} does not fit in 64 bits")
    return Integer(value)


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    if right == 0:
        raise MonkeyZeroDivisionError("division by zero")
    q = abs(left) // abs(right)
    return q if (left < 0) == (right < 0) else -q


# -------------------------------
# Prefix
# -------------------------------
def eval_bang_operator(right: Object) -> Object:
    # not a general logical not: only false and null turn into true
    if right == TRUE:
        return FALSE
    if right == FALSE or isinstance(right, Null):
        return TRUE
    return FALSE


def eval_minus_prefix_operator(right: Object) -> Object:
    if not isinstance(right, Integer):
        raise MonkeyTypeError(f"unsupported operand for prefix '-': {right.type()}")
    return make_integer(-right.value)


def eval_prefix_expression(operator: str, right: Object) -> Object:
    if operator == "!":
        return eval_bang_operator(right)
    if operator == "-":
        return eval_minus_prefix_operator(right)
    raise MonkeyEvaluationError(f"unknown operator: {operator}{right.type()}")


# -------------------------------
# Infix
# -------------------------------
_INTEGER_ARITHMETIC = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": truncating_div,
}

_INTEGER_COMPARISON = {
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
}


def eval_integer_infix_expression(operator: str, left: Integer, right: Integer) -> Object:
    if operator in _INTEGER_ARITHMETIC:
        return make_integer(_INTEGER_ARITHMETIC[operator](left.value, right.value))
    if operator in _INTEGER_COMPARISON:
        return native_bool_to_boolean(_INTEGER_COMPARISON[operator](left.value, right.value))
    raise MonkeyTypeError(
        f"unsupported infix operator for integers: {left.type()} {operator} {right.type()}"
    )


def eval_string_infix_expression(operator: str, left: String, right: String) -> Object:
    if operator == "+":
        return String(left.value + right.value)
    if operator == "==":
        return native_bool_to_boolean(left.value == right.value)
    if operator == "!=":
        return native_bool_to_boolean(left.value != right.value)
    raise MonkeyTypeError(
        f"unsupported infix operator for strings: {left.type()} {operator} {right.type()}"
    )


def eval_boolean_infix_expression(operator: str, left: Boolean, right: Boolean) -> Object:
    # one value per truth value, so value equality is identity equality
    if operator == "==":
        return native_bool_to_boolean(left == right)
    if operator == "!=":
        return native_bool_to_boolean(left != right)
    raise MonkeyTypeError(
        f"unsupported infix operator for booleans: {left.type()} {operator} {right.type()}"
    )


def eval_infix_expression(operator: str, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return eval_integer_infix_expression(operator, left, right)
    if isinstance(left, String) and isinstance(right, String):
        return eval_string_infix_expression(operator, left, right)
    if isinstance(left, Boolean) and isinstance(right, Boolean):
        return eval_boolean_infix_expression(operator, left, right)
    if left.type() != right.type():
        raise MonkeyTypeError(f"type mismatch: {left.type()} {operator} {right.type()}")
    raise MonkeyTypeError(f"unsupported infix operator: {left.type()} {operator} {right.type()}")
