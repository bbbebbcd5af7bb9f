from monkey import EvaluatorFn, MonkeyValue
from monkey.ast.nodes import Expression
from monkey.errors import MonkeyArityError, MonkeyTypeError
from monkey.types.environment import Environment
from monkey.types.objects import Quote


def eval_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MonkeyValue:
    """eval(q): evaluate q, which must give a QUOTE, then run its node here."""
    if len(args) != 1:
        raise MonkeyArityError("eval expects exactly one argument")
    quoted = evaluate_fn(args[0], env)
    if not isinstance(quoted, Quote):
        raise MonkeyTypeError(f"eval expects a QUOTE, got {quoted.type()}")
    return evaluate_fn(quoted.node, env)
