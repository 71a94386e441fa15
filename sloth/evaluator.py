"""
Call-By-Need with Direct Interpretation

The machine reduces a term to weak head normal form. It keeps pending
arguments on an explicit spine, so a beta-reduction just swaps the
current term and environment and goes around the loop again. Neither
a long chain of applications nor a tail call grows the Python stack.
The one place that does nest is forcing a thunk, because the value of
a thunk is needed right then to carry on.

Arguments are never evaluated on the way in. Each one is wrapped in a
thunk over the environment current at the application, and that thunk
is what gets bound. Whoever forces it first does the work; everybody
else holding the same thunk sees the memoized value.
"""
from typing import Callable, NamedTuple
from . import terms
from .diagnostics import NotAFunction, DivergentThunk
from .environment import Environment, EMPTY
from .values import VALUE, Closure, Primitive, Free, Stuck

UNEVALUATED = "unevaluated"
IN_PROGRESS = "in progress"
EVALUATED = "evaluated"

_ABSENT = object()
_BLACK_HOLE = object()

class Statistics:
	""" Tallies of work done. Purely observational. """
	def __init__(self):
		self.reset()
	def reset(self):
		self.suspended = 0
		self.evaluated = 0
		self.memo_hits = 0
		self.beta = 0
	def as_dict(self):
		return dict(suspended=self.suspended, evaluated=self.evaluated, memo_hits=self.memo_hits, beta=self.beta)
	def __str__(self):
		return ", ".join("%s=%d" % pair for pair in self.as_dict().items())

STATS = Statistics()

###############################################################################

def refuse(head:VALUE, spine:list) -> VALUE:
	""" The normal policy: applying anything other than a function is an error. """
	raise NotAFunction(head)

def keep(head:VALUE, spine:list) -> VALUE:
	"""
	For peeking under binders: a free variable soaks up its arguments and stays put.
	So does a primitive whose argument turned out to be free or stuck.
	"""
	if isinstance(head, (Free, Primitive)): args = ()
	elif isinstance(head, Stuck): head, args = head.head, head.args
	else: raise NotAFunction(head)
	args += tuple(reversed(spine))
	spine.clear()
	return Stuck(head, args)

STUCK_POLICY = Callable[[VALUE, list], VALUE]

###############################################################################

class Thunk:
	""" A kind of not-yet-value which can be forced. """
	def __init__(self, body:terms.Term, env:Environment, stuck:STUCK_POLICY=refuse):
		assert isinstance(body, terms.Term), type(body)
		self.body = body
		self.env = env
		self.stuck = stuck
		self.value = _ABSENT
		STATS.suspended += 1

	@classmethod
	def ready(cls, value:VALUE) -> "Thunk":
		""" A thunk that was never suspended: it holds its value from the start. """
		thunk = cls.__new__(cls)
		thunk.value = value
		return thunk

	@property
	def state(self) -> str:
		if self.value is _ABSENT: return UNEVALUATED
		if self.value is _BLACK_HOLE: return IN_PROGRESS
		return EVALUATED

	def __str__(self):
		if self.value is _ABSENT:
			return "<Thunk: %s>" % terms.render(self.body)
		elif self.value is _BLACK_HOLE:
			return "<Thunk: in progress>"
		else:
			return str(self.value)

	def force(self) -> VALUE:
		if self.value is _BLACK_HOLE:
			raise DivergentThunk(self)
		if self.value is _ABSENT:
			self.value = _BLACK_HOLE
			try:
				value = evaluate(self.body, self.env, self.stuck)
			except BaseException:
				# Back to unevaluated, or a retry would report a black hole that is not there.
				self.value = _ABSENT
				raise
			self.value = value
			del self.body, self.env, self.stuck
			STATS.evaluated += 1
		else:
			STATS.memo_hits += 1
		return self.value

def suspend(body:terms.Term, env:Environment) -> Thunk:
	return Thunk(body, env)

def recursive(body:terms.Term, env:Environment) -> Thunk:
	"""
	A thunk bound at position zero of its own environment, as in letrec.
	This is the one way to tie a knot through the bindings. Whether the
	knot is productive depends on the body: recursive(variable(0), env)
	is a black hole.
	"""
	thunk = Thunk(body, EMPTY)
	thunk.env = env.extend(thunk)
	return thunk

def force(thunk:Thunk) -> VALUE:
	return thunk.force()

###############################################################################

class _Step(NamedTuple):
	term: terms.Term
	env: Environment

class _Machine:
	def __init__(self, stuck:STUCK_POLICY):
		self.spine = []
		self.stuck = stuck

	def run(self, term:terms.Term, env:Environment) -> VALUE:
		spine = self.spine
		it = _Step(term, env)
		while True:
			while isinstance(it, _Step):
				it = EVALUATE[type(it.term)](it.term, it.env, self)
			if not spine: return it
			it = self.apply(it)

	def apply(self, function:VALUE):
		""" Consume the next pending argument, or give up on the whole spine. """
		if isinstance(function, Closure):
			STATS.beta += 1
			return _Step(function.body, function.env.extend(self.spine.pop()))
		if isinstance(function, Primitive):
			argument = self.spine[-1].force()
			if isinstance(argument, (Free, Stuck)): return self.stuck(function, self.spine)
			self.spine.pop()
			return function.apply(argument)
		return self.stuck(function, self.spine)

def _eval_var(expr:terms.Var, env:Environment, machine:_Machine):
	return env.lookup(expr.index).force()

def _eval_abs(expr:terms.Abs, env:Environment, machine:_Machine):
	if machine.spine:
		STATS.beta += 1
		return _Step(expr.body, env.extend(machine.spine.pop()))
	return Closure(expr.body, env)

def _eval_app(expr:terms.App, env:Environment, machine:_Machine):
	machine.spine.append(Thunk(expr.argument, env, machine.stuck))
	return _Step(expr.function, env)

def _eval_literal(expr:terms.Literal, env:Environment, machine:_Machine):
	return expr.value

def _eval_builtin(expr:terms.Builtin, env:Environment, machine:_Machine):
	return Primitive(expr)

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v

attach_evaluation_methods(globals())

def evaluate(term:terms.Term, env:Environment=EMPTY, stuck:STUCK_POLICY=refuse) -> VALUE:
	"""
	Reduce the term to weak head normal form in the given environment.
	Raises one of the EvalError family if that cannot be done, and
	simply does not return if the reduction does not terminate.
	"""
	assert isinstance(env, Environment), type(env)
	if not isinstance(term, terms.Term): raise TypeError("Expected a Term, got %r" % (term,))
	try: EVALUATE[type(term)]
	except KeyError: raise NotImplementedError(type(term), term)
	return _Machine(stuck).run(term, env)
