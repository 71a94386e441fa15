"""
A small zoo of well-known terms, built through the construction API.

Church numerals represent n as λf.λx.f (f (... (f x))), with n copies of f.
Booleans select one of two arguments. Everything is in de Bruijn form,
so a comment shows the named version where it helps.
"""
from .terms import Term, variable as v, abstraction, apply, lambdas, literal, builtin
from .evaluator import evaluate

# λx.x
IDENTITY = lambdas(1, v(0))

# λx.λy.x  and  λx.λy.y
CONST = lambdas(2, v(1))
SECOND = lambdas(2, v(0))

# (λx.x x) (λx.x x) reduces to itself forever.
SELF_APPLY = lambdas(1, apply(v(0), v(0)))
OMEGA = apply(SELF_APPLY, SELF_APPLY)

# λf.(λx.f (x x)) (λx.f (x x))
# Under call-by-need the self-application is only unfolded on demand.
_HALF_FIX = lambdas(1, apply(v(1), apply(v(0), v(0))))
FIX = lambdas(1, apply(_HALF_FIX, _HALF_FIX))

TRUE = CONST
FALSE = SECOND

def numeral(n:int) -> Term:
	if not isinstance(n, int) or n < 0:
		raise ValueError("Church numerals are for natural numbers; got %r." % (n,))
	body = v(0)
	for _ in range(n): body = apply(v(1), body)
	return lambdas(2, body)

ZERO = numeral(0)
ONE = numeral(1)

# λn.λf.λx.f (n f x)
SUCC = lambdas(3, apply(v(1), apply(v(2), v(1), v(0))))

# λm.λn.λf.λx.m f (n f x)
PLUS = lambdas(4, apply(v(3), v(1), apply(v(2), v(1), v(0))))

# λm.λn.λf.m (n f)
TIMES = lambdas(3, apply(v(2), apply(v(1), v(0))))

# λb.λe.e b
POWER = lambdas(2, apply(v(0), v(1)))

# λn.λf.λx.n (λg.λh.h (g f)) (λu.x) (λu.u)
PRED = lambdas(3, apply(
	v(2),
	lambdas(2, apply(v(0), apply(v(1), v(3)))),
	abstraction(v(1)),
	IDENTITY,
))

# λn.n (λx.FALSE) TRUE
IS_ZERO = lambdas(1, apply(v(0), abstraction(FALSE), TRUE))

# FIX (λfact.λn.IS_ZERO n 1 (TIMES n (fact (PRED n))))
FACTORIAL = apply(FIX, lambdas(2, apply(
	IS_ZERO, v(0),
	ONE,
	apply(TIMES, v(0), apply(v(1), apply(PRED, v(0)))),
)))

###############################################################################

def _succ_int(n): return n + 1

SUCC_INT = builtin(_succ_int, "+1")

def to_int(term:Term) -> int:
	""" Decode a numeral by handing it a host increment and a host zero. """
	return evaluate(apply(term, SUCC_INT, literal(0)))

def to_bool(term:Term) -> bool:
	return evaluate(apply(term, literal(True), literal(False)))
