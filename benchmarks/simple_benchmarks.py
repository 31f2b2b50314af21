from timeit import timeit

from rill.builtin.core_builtin import root_env
from rill.evaluation.apply import apply
from rill.reader.parser import read_str
from rill.types.bind import bind_arguments
from rill.types.environment import Environment
from rill.types.function import Closure, Func
from rill.types.sequence import List
from rill.types.symbol import Symbol


def _simple_eval(ast, env):
    # Symbols and calls only; enough to drive closure bodies in a benchmark
    if isinstance(ast, Symbol):
        return env.get(ast)
    if isinstance(ast, List) and len(ast) > 0:
        fn, *args = [_simple_eval(x, env) for x in ast]
        return apply(fn, args)
    return ast


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.set(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.get(key)
    # Timed
    return timeit(lambda: env.get(key), number=n_lookups)


def bench_read(code: str, rounds: int) -> float:
    read_str(code)
    return timeit(lambda: read_str(code), number=rounds)


def bench_bind(rounds: int) -> float:
    params = read_str("(a b & rest)")
    args = list(range(10))
    outer = Environment()
    return timeit(lambda: bind_arguments(outer, params, args), number=rounds)


def bench_apply_closure(rounds: int) -> float:
    env = root_env()
    env.set("+", Func(lambda args: sum(args), "+"))
    add = Closure(read_str("(x y)"), read_str("(+ x y)"), env, _simple_eval)
    apply(add, [1, 2])
    return timeit(lambda: apply(add, [1, 2]), number=rounds)


NESTED_CODE = r"""
(let* [xs (list 1 2 3 4 5)
       m {"name" "rill" :tags ["a" "b"]}]
  ^{"doc" "nested"} (fn* (a & more) `(~a ~@more @state)))
"""


if __name__ == "__main__":
    print("Benchmark: environment lookup chain")
    print(f"  time: {bench_lookup_chain():.6f}s")
    print("Benchmark: read nested form")
    print(f"  time: {bench_read(NESTED_CODE, 2000):.6f}s  [rounds=2000]")
    print("Benchmark: variadic binding")
    print(f"  time: {bench_bind(20000):.6f}s  [rounds=20000]")
    print("Benchmark: closure application")
    print(f"  time: {bench_apply_closure(20000):.6f}s  [rounds=20000]")
