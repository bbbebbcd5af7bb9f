from monkey import EvaluatorFn, MonkeyValue, Node
from monkey.ast.modify import modify
from monkey.ast.nodes import BooleanLiteral, CallExpression, Expression, Identifier, IntegerLiteral
from monkey.errors import MonkeyArityError, MonkeyEvaluationError, MonkeyQuoteError
from monkey.types.environment import Environment
from monkey.types.objects import Boolean, Integer, Object, Quote


def is_unquote_call(node: Node) -> bool:
    return (
        isinstance(node, CallExpression)
        and isinstance(node.function, Identifier)
        and node.function.value == "unquote"
        and len(node.arguments) == 1
    )


def object_to_ast(obj: Object) -> Node:
    """Turn an evaluated value back into syntax.

    Integers, booleans and quotes only; other kinds are rejected rather than
    guessed at.
    """
    if isinstance(obj, Integer):
        return IntegerLiteral(obj.value)
    if isinstance(obj, Boolean):
        return BooleanLiteral(obj.value)
    if isinstance(obj, Quote):
        return obj.node
    raise MonkeyQuoteError(f"cannot convert {obj.type()} into an AST node")


def eval_unquote_calls(quoted: Node, env: Environment, evaluate_fn: EvaluatorFn) -> Node:
    """Replace every unquote(x) inside `quoted` with the syntax of x's value."""

    def _replace(node: Node) -> Node:
        if not is_unquote_call(node):
            return node
        value = evaluate_fn(node.arguments[0], env)
        return object_to_ast(value)

    return modify(quoted, _replace)


def quote_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MonkeyValue:
    if len(args) != 1:
        raise MonkeyArityError("quote expects exactly one argument")
    return Quote(eval_unquote_calls(args[0], env, evaluate_fn))


def unquote_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MonkeyValue:
    raise MonkeyEvaluationError("unquote is only valid inside quote")
