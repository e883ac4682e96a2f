"""Application engine for littlelisp.

Centralizes procedure application for the evaluator:
- Lambda closures bind arguments in a child of their captured environment.
- Python callables (built-ins) are invoked as fn(env, args).
"""

from __future__ import annotations

import logging
from typing import Callable

from littlelisp import LispValue, EvaluatorFn
from littlelisp.types.environment import Environment
from littlelisp.types.lambda_fn import Lambda
from littlelisp.errors import LispTypeError

logger = logging.getLogger(__name__)


def is_applicable(head: object) -> bool:
    return isinstance(head, Lambda) or callable(head)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lisp Lambda value.

    The body is evaluated in a new frame parented on the closure's captured
    environment, never the caller's. Wrong argument counts raise
    LispArityError (from Lambda.extend_env).
    """
    new_env = fn.extend_env(list(args))
    logger.debug("applying %s to %r", fn, args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (built-ins), invoke with the runtime env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise LispTypeError(f"Cannot apply non-procedure {head!r}")
