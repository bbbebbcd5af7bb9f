"""Core evaluator for the Monkey interpreter.

`evaluate(node, env)` interprets one AST node against a lexical environment
and returns a runtime Object. Failures raise MonkeyEvaluationError subclasses;
the first error aborts the rest of the statement list.

Return handling is two-tiered: a Program unwraps a ReturnValue as soon as it
sees one and stops, a BlockStatement hands the wrapper up untouched so it can
escape nested blocks, and the function-call boundary unwraps it.
"""

from __future__ import annotations

from monkey.ast.nodes import (
    ArrayLiteral,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    HashLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    MacroLiteral,
    Node,
    NullLiteral,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
    StringLiteral,
)
from monkey.builtin.env_builtin import lookup_builtin
from monkey.errors import MonkeyEvaluationError, MonkeyIndexError, MonkeyTypeError, MonkeyUnboundIdentifier
from monkey.evaluation.apply import apply
from monkey.evaluation.operators import eval_infix_expression, eval_prefix_expression
from monkey.evaluation.special_forms import SPECIAL_FORMS
from monkey.types.environment import Environment
from monkey.types.function import Function, Macro
from monkey.types.objects import (
    NULL,
    Array,
    Hash,
    HashPair,
    Integer,
    Object,
    ReturnValue,
    String,
    is_hashable,
    is_truthy,
    native_bool_to_boolean,
)


def evaluate(node: Node, env: Environment) -> Object:
    match node:
        # --- Statements ---
        case Program(statements=statements):
            return eval_program(statements, env)
        case BlockStatement(statements=statements):
            return eval_block_statement(statements, env)
        case ExpressionStatement(expression=expression):
            return evaluate(expression, env)
        case LetStatement(name=name, value=value):
            env.define(name.value, evaluate(value, env))
            return NULL
        case ReturnStatement(value=value):
            return ReturnValue(evaluate(value, env))

        # --- Literals ---
        case IntegerLiteral(value=value):
            return Integer(value)
        case BooleanLiteral(value=value):
            return native_bool_to_boolean(value)
        case NullLiteral():
            return NULL
        case StringLiteral(value=value):
            return String(value)
        case ArrayLiteral(elements=elements):
            return Array(tuple(eval_expressions(elements, env)))
        case HashLiteral():
            return eval_hash_literal(node, env)
        case FunctionLiteral(parameters=parameters, body=body):
            return Function(parameters, body, env)
        case MacroLiteral(parameters=parameters, body=body):
            # only top-level macro definitions are expanded; anything else is inert
            return Macro(parameters, body, env)

        # --- Operators ---
        case PrefixExpression(operator=operator, right=right):
            return eval_prefix_expression(operator, evaluate(right, env))
        case InfixExpression(left=left, operator=operator, right=right):
            lhs = evaluate(left, env)
            rhs = evaluate(right, env)
            return eval_infix_expression(operator, lhs, rhs)
        case IfExpression():
            return eval_if_expression(node, env)
        case IndexExpression(left=left, index=index):
            return eval_index_expression(evaluate(left, env), evaluate(index, env))

        # --- Names and calls ---
        case Identifier(value=name):
            return eval_identifier(name, env)
        case CallExpression(function=function, arguments=arguments):
            if isinstance(function, Identifier) and function.value in SPECIAL_FORMS:
                return SPECIAL_FORMS[function.value](arguments, env, evaluate)
            head = evaluate(function, env)
            args = eval_expressions(arguments, env)
            return apply(head, args, evaluate)

    raise MonkeyEvaluationError(f"cannot evaluate node of type {type(node).__name__}")


def eval_program(statements: tuple[Statement, ...], env: Environment) -> Object:
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
    return result


def eval_block_statement(statements: tuple[Statement, ...], env: Environment) -> Object:
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            # keep the wrapper so enclosing blocks stop too
            return result
    return result


def eval_expressions(expressions: tuple[Expression, ...], env: Environment) -> list[Object]:
    return [evaluate(e, env) for e in expressions]


def eval_identifier(name: str, env: Environment) -> Object:
    try:
        return env.lookup(name)
    except MonkeyUnboundIdentifier:
        builtin = lookup_builtin(name)
        if builtin is None:
            raise
        return builtin


def eval_if_expression(node: IfExpression, env: Environment) -> Object:
    condition = evaluate(node.condition, env)
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


def eval_hash_literal(node: HashLiteral, env: Environment) -> Object:
    pairs: dict = {}
    for key_node, value_node in node.pairs:
        key = evaluate(key_node, env)
        if not is_hashable(key):
            raise MonkeyTypeError(f"{key.type()} is not hashable")
        value = evaluate(value_node, env)
        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)


def eval_index_expression(left: Object, index: Object) -> Object:
    if isinstance(left, Array):
        if not isinstance(index, Integer):
            raise MonkeyTypeError(f"index {index.type()} on {left.type()} is not supported")
        return eval_array_index_expression(left, index)
    if isinstance(left, Hash):
        return eval_hash_index_expression(left, index)
    raise MonkeyTypeError(f"index {index.type()} on {left.type()} is not supported")


def eval_array_index_expression(array: Array, index: Integer) -> Object:
    n = len(array.elements)
    i = index.value
    # no negative wraparound
    if i < 0 or i >= n:
        raise MonkeyIndexError(f"index out of bounds, len:{n}, visit:{i}")
    return array.elements[i]


def eval_hash_index_expression(hash_obj: Hash, key: Object) -> Object:
    if not is_hashable(key):
        raise MonkeyTypeError(f"{key.type()} is not hashable")
    pair = hash_obj.pairs.get(key.hash_key())
    if pair is None:
        return NULL
    return pair.value
