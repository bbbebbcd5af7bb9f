"""Abstract syntax tree for Monkey programs.

Nodes are frozen dataclasses; `str(node)` renders source-like text that
re-parses to an identical tree. `modify` rebuilds trees bottom-up.
"""

from monkey.ast.nodes import (
    Node,
    Statement,
    Expression,
    Program,
    LetStatement,
    ReturnStatement,
    ExpressionStatement,
    BlockStatement,
    Identifier,
    IntegerLiteral,
    BooleanLiteral,
    NullLiteral,
    StringLiteral,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    MacroLiteral,
    CallExpression,
    ArrayLiteral,
    IndexExpression,
    HashLiteral,
)
from monkey.ast.modify import modify, Modifier

__all__ = [
    "Node",
    "Statement",
    "Expression",
    "Program",
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    "BlockStatement",
    "Identifier",
    "IntegerLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "StringLiteral",
    "PrefixExpression",
    "InfixExpression",
    "IfExpression",
    "FunctionLiteral",
    "MacroLiteral",
    "CallExpression",
    "ArrayLiteral",
    "IndexExpression",
    "HashLiteral",
    "modify",
    "Modifier",
]
