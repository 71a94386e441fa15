"""
A call-by-need evaluator for the untyped lambda calculus,
with terms, environments and shared thunks all out in the open.
"""
from .terms import variable, abstraction, application, literal, builtin, lambdas, apply, render
from .environment import empty, extend, lookup
from .evaluator import Thunk, suspend, recursive, force, evaluate, STATS
from .readback import normalize, read_back
from .diagnostics import EvalError, UnboundVariable, NotAFunction, DivergentThunk
