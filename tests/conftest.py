import pytest

from rill.builtin.core_builtin import root_env
from rill.evaluation.apply import apply
from rill.reader.parser import read_str
from rill.types.function import Closure, Func
from rill.types.sequence import List
from rill.types.symbol import Symbol


# A deliberately tiny evaluator standing in for the host's special-form
# evaluator: symbols are looked up, non-empty lists are applied, everything
# else evaluates to itself.
def tiny_eval(ast, env):
    if isinstance(ast, Symbol):
        return env.get(ast)
    if isinstance(ast, List) and len(ast) > 0:
        fn, *args = [tiny_eval(x, env) for x in ast]
        return apply(fn, args)
    return ast


def _plus(args):
    return sum(args)


def _fail(args):
    raise ValueError("boom")


@pytest.fixture
def env():
    env = root_env()
    env.set("+", Func(_plus, "+"))
    env.set("fail", Func(_fail, "fail"))
    return env


@pytest.fixture
def run(env):
    def _run(source: str, scope=None):
        return tiny_eval(read_str(source), scope or env)
    return _run


@pytest.fixture
def make_closure(env):
    def _make(params: str, body: str, scope=None):
        return Closure(read_str(params), read_str(body), scope or env, tiny_eval)
    return _make
