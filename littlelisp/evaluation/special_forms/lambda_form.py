from littlelisp.errors import LispArityError, LispSyntaxError
from littlelisp.types.lambda_fn import Lambda

from littlelisp import EvaluatorFn, LispValue
from littlelisp.types.environment import Environment
from littlelisp.types.node import Atom, ListNode, Node


def lambda_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (p1 p2 ...) body): exactly one body form, captured unevaluated.
    if len(tail) != 2:
        raise LispArityError("lambda requires a parameter list and a single body")

    params, body = tail
    if not isinstance(params, ListNode):
        raise LispSyntaxError(f"lambda parameters must be a list, got {params}")

    formals = []
    for param in params:
        if not (isinstance(param, Atom) and param.is_symbol):
            raise LispSyntaxError(f"lambda parameter must be a symbol, got {param}")
        formals.append(param.value)

    return Lambda(formals, body, env)
