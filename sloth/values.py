"""
This module defines the specialized value-types that the evaluator operates in terms of.
Host data (from literals and builtins) play themselves, but closures and such need more help.
"""
from typing import Any, Sequence, Union
from . import terms
from .environment import Environment

class SlothValue:
	""" Root for classes that implement specialized run-time data structures """
	def describe(self) -> str: raise NotImplementedError(type(self))

class Closure(SlothValue):
	""" The body of an abstraction tied to the environment in which evaluation reached it. """

	def __init__(self, body:terms.Term, env:Environment):
		self.body = body
		self.env = env

	def describe(self): return "a closure over %s" % terms.render(self.body)
	def __repr__(self): return "<Closure λ.%s %r>" % (terms.render(self.body), self.env)

class Primitive(SlothValue):
	""" All parameters to primitive functions are strict. Also a kind of value, like a closure. """
	def __init__(self, source:terms.Builtin):
		self.source = source

	def apply(self, value:Any) -> Any:
		return self.source.function(value)

	def describe(self): return "primitive <%s>" % self.source.name
	def __repr__(self): return "<Primitive %s>" % self.source.name

class Free(SlothValue):
	"""
	An opaque variable. It stands for whatever some binder would have
	been bound to, which is how we peek under a lambda, and it is also
	how a caller can leave a hole in an environment on purpose.
	"""

	def __init__(self, level:int):
		self.level = level

	def describe(self): return "free variable #%d" % self.level
	def __repr__(self): return "<Free %d>" % self.level

class Stuck(SlothValue):
	"""
	A free variable applied to some arguments. Nothing more will happen to it.
	The head may also be a primitive that was handed something free or stuck.
	"""

	def __init__(self, head:Union[Free, Primitive], args:Sequence["Thunk"]):
		self.head = head
		self.args = tuple(args)

	def describe(self): return "a stuck application of %s" % self.head.describe()
	def __repr__(self): return "<Stuck %r/%d>" % (self.head, len(self.args))

VALUE = Union[Closure, Primitive, Free, Stuck, Any]
