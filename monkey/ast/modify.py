"""Bottom-up AST rewriting.

`modify(node, modifier)` rebuilds `node` after rewriting every child slot, then
hands the rebuilt node to `modifier`. Nodes are frozen, so the parser's tree is
never aliased or mutated; unchanged subtrees are shared as-is.

Every node kind needs a case here. A kind without children falls through to the
final `modifier(node)` call.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from monkey.ast.nodes import (
    Node,
    Program,
    LetStatement,
    ReturnStatement,
    ExpressionStatement,
    BlockStatement,
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

Modifier = Callable[[Node], Node]


def _modify_all(nodes, modifier: Modifier) -> tuple:
    return tuple(modify(n, modifier) for n in nodes)


def _modify_optional(node: Optional[Node], modifier: Modifier) -> Optional[Node]:
    return None if node is None else modify(node, modifier)


def modify(node: Node, modifier: Modifier) -> Node:
    match node:
        case Program(statements=statements):
            node = replace(node, statements=_modify_all(statements, modifier))
        case BlockStatement(statements=statements):
            node = replace(node, statements=_modify_all(statements, modifier))
        case ExpressionStatement(expression=expression):
            node = replace(node, expression=modify(expression, modifier))
        case LetStatement(name=name, value=value):
            node = replace(node, name=modify(name, modifier), value=modify(value, modifier))
        case ReturnStatement(value=value):
            node = replace(node, value=modify(value, modifier))
        case PrefixExpression(right=right):
            node = replace(node, right=modify(right, modifier))
        case InfixExpression(left=left, right=right):
            node = replace(node, left=modify(left, modifier), right=modify(right, modifier))
        case IfExpression(condition=condition, consequence=consequence, alternative=alternative):
            node = replace(
                node,
                condition=modify(condition, modifier),
                consequence=modify(consequence, modifier),
                alternative=_modify_optional(alternative, modifier),
            )
        case FunctionLiteral(parameters=parameters, body=body) | MacroLiteral(parameters=parameters, body=body):
            node = replace(
                node,
                parameters=_modify_all(parameters, modifier),
                body=modify(body, modifier),
            )
        case CallExpression(function=function, arguments=arguments):
            node = replace(
                node,
                function=modify(function, modifier),
                arguments=_modify_all(arguments, modifier),
            )
        case ArrayLiteral(elements=elements):
            node = replace(node, elements=_modify_all(elements, modifier))
        case IndexExpression(left=left, index=index):
            node = replace(node, left=modify(left, modifier), index=modify(index, modifier))
        case HashLiteral(pairs=pairs):
            node = replace(
                node,
                pairs=tuple((modify(k, modifier), modify(v, modifier)) for k, v in pairs),
            )

    return modifier(node)
