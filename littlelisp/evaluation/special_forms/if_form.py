from littlelisp import EvaluatorFn
from littlelisp import LispValue
from littlelisp.errors import LispArityError
from littlelisp.types.environment import Environment
from littlelisp.types.node import Node
from littlelisp.types.undefined import Undefined


def is_true(value: LispValue) -> bool:
    """Numeric zero and Undefined are false; everything else is true."""
    if value is Undefined:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    return True


def if_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise LispArityError("if requires a condition and a then-expression")
    if len(tail) > 3:
        raise LispArityError("if takes at most a condition, a then- and an else-expression")

    cond = evaluate_fn(tail[0], env)

    if is_true(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Undefined
