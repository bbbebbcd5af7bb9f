"""AST node types.

Every node renders itself with `__str__`. The rendering is exact and
load-bearing: macro tests compare it, and re-parsing a rendered program must
render identically.

  infix        (lhs<op>rhs)
  prefix       (<op>rhs)
  index        (left[index])
  call         callee(a1,a2)
  array        [e1,e2]
  hash         {k1:v1,k2:v2}
  block        {s1;s2}
  function     fn(p1,p2){body}
  if           if(cond) {then} else {alt}
  let/return   let x = v;   return v;
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Optional, Union


class Node:
    """Marker base for all AST nodes."""

    __slots__ = ()


class Statement(Node):
    __slots__ = ()


class Expression(Node):
    __slots__ = ()


def render_statements(statements: tuple[Statement, ...]) -> str:
    """Concatenate statements; an expression statement followed by another
    statement gets a `;` so that `a; (b)` is not read back as a call."""
    with StringIO() as buffer:
        last = len(statements) - 1
        for i, stmt in enumerate(statements):
            buffer.write(str(stmt))
            if i < last and isinstance(stmt, ExpressionStatement):
                buffer.write(";")
        return buffer.getvalue()


def _join(items) -> str:
    return ",".join(str(i) for i in items)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Program(Node):
    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return render_statements(self.statements)


@dataclass(frozen=True)
class LetStatement(Statement):
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    value: Expression

    def __str__(self) -> str:
        return f"return {self.value};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


@dataclass(frozen=True)
class BlockStatement(Statement):
    statements: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return "{" + render_statements(self.statements) + "}"


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Identifier(Expression):
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NullLiteral(Expression):
    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class PrefixExpression(Expression):
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    left: Expression
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.left}{self.operator}{self.right})"


@dataclass(frozen=True)
class IfExpression(Expression):
    condition: Expression
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("if")
            # no space after `if`; conditions that do not bring their own
            # parentheses get them here so the text parses back
            if isinstance(self.condition, (InfixExpression, PrefixExpression, IndexExpression)):
                buffer.write(str(self.condition))
            else:
                buffer.write(f"({self.condition})")
            buffer.write(" ")
            buffer.write(str(self.consequence))
            if self.alternative is not None:
                buffer.write(" else ")
                buffer.write(str(self.alternative))
            return buffer.getvalue()


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    parameters: tuple[Identifier, ...]
    body: BlockStatement

    def __str__(self) -> str:
        return f"fn({_join(self.parameters)}){self.body}"


@dataclass(frozen=True)
class MacroLiteral(Expression):
    parameters: tuple[Identifier, ...]
    body: BlockStatement

    def __str__(self) -> str:
        return f"macro({_join(self.parameters)}){self.body}"


@dataclass(frozen=True)
class CallExpression(Expression):
    function: Expression
    arguments: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return f"{self.function}({_join(self.arguments)})"


@dataclass(frozen=True)
class ArrayLiteral(Expression):
    elements: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return f"[{_join(self.elements)}]"


@dataclass(frozen=True)
class IndexExpression(Expression):
    left: Expression
    index: Expression

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


@dataclass(frozen=True)
class HashLiteral(Expression):
    # ordered (key, value) pairs; keys are arbitrary expressions
    pairs: tuple[tuple[Expression, Expression], ...] = ()

    def __str__(self) -> str:
        return "{" + ",".join(f"{k}:{v}" for k, v in self.pairs) + "}"


AnyNode = Union[Program, Statement, Expression]
