"""Runtime values for the Monkey evaluator.

Every value reports its kind through `type()` and its display text through
`inspect()`. Booleans and null are module singletons (TRUE, FALSE, NULL);
because their dataclasses are frozen and value-compared, identity and equality
coincide.

Only Integer, Boolean and String are hashable: they expose `hash_key()`
returning a kind-tagged 64-bit HashKey.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from io import StringIO
from typing import NamedTuple

from monkey import Node


_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


class ObjectType:
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    STRING = "STRING"
    ARRAY = "ARRAY"
    HASH = "HASH"
    FUNCTION = "FUNCTION"
    BUILTIN = "BUILTIN"
    RETURN_VALUE = "RETURN_VALUE"
    QUOTE = "QUOTE"
    MACRO = "MACRO"


class HashKey(NamedTuple):
    type: str
    value: int


class Object:
    """Base for all runtime values."""

    __slots__ = ()

    def type(self) -> str:
        raise NotImplementedError

    def inspect(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.inspect()


@dataclass(frozen=True)
class Integer(Object):
    value: int

    def type(self) -> str:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(self.type(), self.value & _UINT64_MASK)


@dataclass(frozen=True)
class Boolean(Object):
    value: bool

    def type(self) -> str:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(self.type(), 1 if self.value else 0)


@dataclass(frozen=True)
class Null(Object):
    def type(self) -> str:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True)
class String(Object):
    value: str

    def type(self) -> str:
        return ObjectType.STRING

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        digest = hashlib.blake2b(self.value.encode("utf-8"), digest_size=8).digest()
        return HashKey(self.type(), int.from_bytes(digest, "big"))


@dataclass(frozen=True)
class Array(Object):
    # a tuple: arrays are never changed in place, builtins return new ones
    elements: tuple[Object, ...] = ()

    def type(self) -> str:
        return ObjectType.ARRAY

    def inspect(self) -> str:
        return "[" + ",".join(e.inspect() for e in self.elements) + "]"


class HashPair(NamedTuple):
    key: Object
    value: Object


@dataclass(frozen=True)
class Hash(Object):
    pairs: dict[HashKey, HashPair] = field(default_factory=dict)

    def type(self) -> str:
        return ObjectType.HASH

    def inspect(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(",".join(f"{p.key.inspect()}:{p.value.inspect()}" for p in self.pairs.values()))
            buffer.write("}")
            return buffer.getvalue()


@dataclass(frozen=True)
class ReturnValue(Object):
    """Control-flow marker carrying the value of a `return`."""

    value: Object

    def type(self) -> str:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


@dataclass(frozen=True)
class Quote(Object):
    """An AST node held as a value; produced by quote() and consumed by macros."""

    node: Node

    def type(self) -> str:
        return ObjectType.QUOTE

    def inspect(self) -> str:
        return f"QUOTE({self.node})"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def is_hashable(obj: Object) -> bool:
    return isinstance(obj, (Integer, Boolean, String))


def is_truthy(obj: Object) -> bool:
    """Boolean → its value, null → false, anything else (even 0) → true."""
    if isinstance(obj, Boolean):
        return obj.value
    if isinstance(obj, Null):
        return False
    return True
