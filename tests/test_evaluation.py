import pytest

from littlelisp.evaluation.evaluator import evaluate
from littlelisp.interpreter import global_environment
from littlelisp.reader.parser import parse
from littlelisp.types.lambda_fn import Lambda
from littlelisp.types.node import Atom, AtomKind, symbol
from littlelisp.types.undefined import Undefined
from littlelisp import errors

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

def do_sum(_, args):
    return sum(args)


@pytest.fixture
def host_env(env):
    env.define("+", do_sum)
    env.define("-", lambda _, args: args[0] - sum(args[1:]))
    env.define("x", 42)
    env.define("y", 100)
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(host_env):
    assert evaluate(Atom(AtomKind.NUMBER, 1), host_env) == 1
    assert evaluate(Atom(AtomKind.NUMBER, 3.14), host_env) == 3.14
    assert evaluate(Atom(AtomKind.STRING, "hello"), host_env) == "hello"


def test_string_named_like_a_binding_stays_a_string(host_env):
    assert evaluate(Atom(AtomKind.STRING, "x"), host_env) == "x"


def test_symbol_lookup(host_env):
    assert evaluate(symbol("x"), host_env) == 42
    assert evaluate(symbol("y"), host_env) == 100
    assert evaluate(symbol("z"), host_env) is Undefined


def test_host_procedure(host_env):
    assert evaluate(parse("(+ 1 2)"), host_env) == 3
    assert evaluate(parse("(- x 2)"), host_env) == 40


def test_lambda_evaluates_to_closure(host_env):
    lam = evaluate(parse("(lambda (a b) (+ a b))"), host_env)
    assert isinstance(lam, Lambda)
    assert lam.formals == ["a", "b"]
    assert lam.env is host_env
    assert str(lam) == "(lambda (a b) (+ a b))"


def test_lambda_body_is_not_evaluated_at_creation(host_env, capsys):
    evaluate(parse("(lambda () (print 1))"), host_env)
    assert capsys.readouterr().out == ""


def test_closure_sees_live_defining_environment(host_env):
    lam = evaluate(parse("(lambda () x)"), host_env)
    host_env.define("x", 7)
    assert evaluate(parse("((lambda (f) (f)) g)"), host_env.child_with({"g": lam})) == 7


def test_closure_uses_captured_not_caller_scope(host_env):
    source = "(let ((f (let ((x 1)) (lambda () x)))) (let ((x 2)) (f)))"
    assert evaluate(parse(source), host_env) == 1


def test_inner_binding_shadows_outer(host_env):
    assert evaluate(parse("((lambda (x) x) 5)"), host_env) == 5
    assert evaluate(symbol("x"), host_env) == 42


def test_closure_parameters_do_not_leak(host_env):
    evaluate(parse("((lambda (q) q) 5)"), host_env)
    assert evaluate(symbol("q"), host_env) is Undefined


def test_builtin_names_can_be_shadowed(host_env):
    assert evaluate(parse("(let ((first 9)) (first (1 2)))"), host_env) == [9, [1, 2]]


def test_special_form_names_are_recognised_before_lookup(host_env):
    assert evaluate(parse("(let ((if 0)) (if 1 2 3))"), host_env) == 2


def test_non_procedure_head_makes_a_data_list(host_env):
    assert evaluate(parse("(x y)"), host_env) == [42, 100]
    assert evaluate(parse('("a" 1)'), host_env) == ["a", 1]


def test_arguments_evaluated_once(host_env, capsys):
    assert evaluate(parse("(1 (print 2))"), host_env) == [1, 2]
    assert capsys.readouterr().out == "2\n"


def test_closure_arity_mismatch(host_env):
    with pytest.raises(errors.LispArityError):
        evaluate(parse("((lambda (a b) a) 1)"), host_env)
    with pytest.raises(errors.LispArityError):
        evaluate(parse("((lambda (a) a) 1 2)"), host_env)


def test_evaluate_rejects_non_nodes(host_env):
    with pytest.raises(errors.LispTypeError):
        evaluate([1, 2], host_env)


def test_deep_nesting():
    source = "(" * 50 + "1" + ")" * 50
    node = parse(source)
    result = evaluate(node, global_environment())
    for _ in range(49):
        assert len(result) == 1
        result = result[0]
    assert result == [1]
