"""
Simplest possible environment concept.

This is the canonical list-structured search: each binding is a cell
holding one thunk and a link to the environment it extends. Extension
conses a new cell on the front and never touches the old one, so any
number of closures can share a common tail.
"""
import abc
from .diagnostics import UnboundVariable

class Environment(abc.ABC):
	@abc.abstractmethod
	def lookup(self, index:int) -> "Thunk":
		pass
	@abc.abstractmethod
	def __len__(self) -> int:
		pass
	def extend(self, thunk:"Thunk") -> "Environment":
		return InnerEnv(thunk, self)

class NullEnv(Environment):
	""" The empty environment. There is only one. """
	def lookup(self, index:int):
		raise UnboundVariable(index)
	def __len__(self): return 0
	def __repr__(self): return "<Env>"

EMPTY = NullEnv()

class InnerEnv(Environment):

	def __init__(self, binding:"Thunk", static_link:Environment):
		self.binding = binding
		self.static_link = static_link
		self._depth = len(static_link) + 1

	def lookup(self, index:int):
		if not 0 <= index < self._depth: raise UnboundVariable(index)
		env = self
		for _ in range(index): env = env.static_link
		return env.binding

	def __len__(self): return self._depth
	def __repr__(self): return "<Env depth=%d>" % self._depth

def empty() -> Environment:
	return EMPTY

def extend(env:Environment, thunk:"Thunk") -> Environment:
	return env.extend(thunk)

def lookup(env:Environment, index:int) -> "Thunk":
	return env.lookup(index)
