"""Object and environment model shared by the evaluator and macro expander."""

from monkey.types.objects import (
    Object,
    ObjectType,
    HashKey,
    HashPair,
    Integer,
    Boolean,
    Null,
    String,
    Array,
    Hash,
    ReturnValue,
    Quote,
    TRUE,
    FALSE,
    NULL,
    native_bool_to_boolean,
    is_hashable,
    is_truthy,
)
from monkey.types.environment import Environment
from monkey.types.function import Function, Builtin, Macro

__all__ = [
    "Object",
    "ObjectType",
    "HashKey",
    "HashPair",
    "Integer",
    "Boolean",
    "Null",
    "String",
    "Array",
    "Hash",
    "ReturnValue",
    "Quote",
    "TRUE",
    "FALSE",
    "NULL",
    "native_bool_to_boolean",
    "is_hashable",
    "is_truthy",
    "Environment",
    "Function",
    "Builtin",
    "Macro",
]
