from littlelisp import EvaluatorFn, LispValue
from littlelisp.errors import LispArityError, LispSyntaxError
from littlelisp.types.environment import Environment
from littlelisp.types.node import Atom, ListNode, Node


def let_form(
    tail: list[Node],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(let ((n1 v1) (n2 v2) ...) body)

    Every initializer is evaluated in the enclosing `env`, so sibling
    bindings are not visible to each other. All names are bound at once in a
    single child frame, then `body` is evaluated there.
    """
    if len(tail) != 2:
        raise LispArityError("let requires a binding list and a single body")

    bindings, body = tail
    if not isinstance(bindings, ListNode):
        raise LispSyntaxError(f"let bindings must be a list, got {bindings}")

    values: dict[str, LispValue] = {}
    for binding in bindings:
        match binding:
            case ListNode(children=(Atom() as name, init)) if name.is_symbol:
                values[name.value] = evaluate_fn(init, env)
            case _:
                raise LispSyntaxError(f"let binding must be (name value), got {binding}")

    return evaluate_fn(body, env.child_with(values))
