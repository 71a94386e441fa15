"""
The syntax of the calculus, as plain immutable value objects.

Variables are de Bruijn indices: Var(0) refers to the nearest enclosing
binder, Var(1) to the one outside that, and so on. Because there are no
names, there is no capture and no alpha-conversion to worry about.

There is no parser. Terms are built in memory through the construction
functions at the bottom of this module.
"""
from typing import Any, Callable, Optional
from boozetools.support.foundation import Visitor

class Term:
	"""Value objects: equal when built the same way, and never mutated after construction."""

	def __init__(self, *key):
		object.__setattr__(self, "_key", key)
		# Unhashable host data in a literal leaves the term unhashable, as with a tuple holding a list.
		try: code = hash((type(self).__name__,) + key)
		except TypeError: code = None
		object.__setattr__(self, "_hash", code)
	def __setattr__(self, name, value): raise AttributeError("Terms are immutable.")
	def __hash__(self):
		if self._hash is None: raise TypeError("unhashable term: %s" % render(self))
		return self._hash
	def __eq__(self, other): return type(self) is type(other) and self._key == other._key
	def __repr__(self): return "<%s %s>" % (type(self).__name__, render(self))

class Var(Term):
	def __init__(self, index:int):
		super().__init__(index)
	@property
	def index(self) -> int: return self._key[0]

class Abs(Term):
	def __init__(self, body:Term):
		super().__init__(body)
	@property
	def body(self) -> Term: return self._key[0]

class App(Term):
	def __init__(self, function:Term, argument:Term):
		super().__init__(function, argument)
	@property
	def function(self) -> Term: return self._key[0]
	@property
	def argument(self) -> Term: return self._key[1]

class Literal(Term):
	""" Some host datum. It is already a value, so evaluating it just gives it back. """
	def __init__(self, value:Any):
		super().__init__(value)
	@property
	def value(self) -> Any: return self._key[0]

class Builtin(Term):
	"""
	A host function of one (strict) argument.
	Two builtins are the same term exactly when they wrap the same function.
	"""
	def __init__(self, function:Callable, name:Optional[str]=None):
		super().__init__(function)
		object.__setattr__(self, "name", name or getattr(function, "__name__", "builtin"))
	@property
	def function(self) -> Callable: return self._key[0]

###############################################################################

class Render(Visitor):
	""" Compact de Bruijn notation, e.g. λ.λ.1 (1 0) for the numeral one. """

	def visit_Var(self, v:Var, depth:int):
		return str(v.index)

	def visit_Abs(self, a:Abs, depth:int):
		return "λ." + self.visit(a.body, depth+1)

	def visit_App(self, a:App, depth:int):
		fn = self.visit(a.function, depth)
		if isinstance(a.function, Abs): fn = "(%s)" % fn
		arg = self.visit(a.argument, depth)
		if isinstance(a.argument, (Abs, App)): arg = "(%s)" % arg
		return fn + " " + arg

	@staticmethod
	def visit_Literal(lit:Literal, depth:int):
		return repr(lit.value)

	@staticmethod
	def visit_Builtin(b:Builtin, depth:int):
		return "<%s>" % b.name

def render(term:Term) -> str:
	return Render().visit(term, 0)

###############################################################################

def variable(index:int) -> Var:
	if not isinstance(index, int) or isinstance(index, bool):
		raise TypeError("A variable is a de Bruijn index, not %r." % (index,))
	if index < 0:
		raise ValueError("De Bruijn indices count outward from zero; got %d." % index)
	return Var(index)

def abstraction(body:Term) -> Abs:
	return Abs(_check(body))

def application(function:Term, argument:Term) -> App:
	return App(_check(function), _check(argument))

def literal(value:Any) -> Literal:
	return Literal(value)

def builtin(function:Callable, name:Optional[str]=None) -> Builtin:
	if not callable(function):
		raise TypeError("%r is not callable." % (function,))
	return Builtin(function, name)

def lambdas(count:int, body:Term) -> Term:
	""" Wrap the body in so many binders. lambdas(2, variable(1)) is the K combinator. """
	for _ in range(count): body = abstraction(body)
	return body

def apply(function:Term, *arguments:Term) -> Term:
	""" Left-nested application: apply(f, a, b) means (f a) b. """
	for a in arguments: function = application(function, a)
	return function

def _check(term):
	if not isinstance(term, Term):
		raise TypeError("Expected a term; got %r." % (term,))
	return term
