# Core type aliases for Rill's data model.
# Scalars use plain Python types (bool, int, str); Nil, Symbol, List, Vector,
# HashMap, Func, Closure and Atom live in rill.types.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in environment/apply code to denote evaluated values.
# Both aliases resolve to `Any`; forms and values share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator supplied by the host: eval_fn(body, env) -> value
EvaluatorFn = Callable[..., LispValue]

# Built-in function type: fn(args) -> value
BuiltinFn = Callable[[list], LispValue]
