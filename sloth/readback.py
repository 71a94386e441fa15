"""
Reading a value back as a term, which gets us full normal forms.

Weak head normal form stops at the first lambda. To see the rest, we
apply each closure to a fresh free variable and carry on evaluating
the body, this time with the policy that a free variable applied to
arguments is merely stuck rather than an error. Stuck applications
then read back argument by argument.

Free variables are numbered by binding depth (de Bruijn levels), so a
variable bound at level L, seen from depth D, reads back as index
D - L - 1.

Everything goes through the ordinary thunks, so sharing still holds:
a thunk forced during read-back is the same thunk a later evaluation
would find already done.
"""
from boozetools.support.foundation import Visitor
from . import terms
from .environment import Environment, EMPTY
from .evaluator import Thunk, evaluate, keep
from .values import VALUE, SlothValue, Closure, Primitive, Free, Stuck

class ReadBack(Visitor):

	def read(self, value:VALUE, depth:int) -> terms.Term:
		if isinstance(value, SlothValue): return self.visit(value, depth)
		else: return terms.literal(value)

	def visit_Closure(self, closure:Closure, depth:int):
		fresh = Thunk.ready(Free(depth))
		body = evaluate(closure.body, closure.env.extend(fresh), keep)
		return terms.abstraction(self.read(body, depth+1))

	@staticmethod
	def visit_Free(free:Free, depth:int):
		if not 0 <= free.level < depth:
			raise ValueError("Free variable at level %d cannot be read back at depth %d." % (free.level, depth))
		return terms.variable(depth - free.level - 1)

	def visit_Stuck(self, stuck:Stuck, depth:int):
		term = self.visit(stuck.head, depth)
		for arg in stuck.args:
			term = terms.application(term, self.read(arg.force(), depth))
		return term

	@staticmethod
	def visit_Primitive(primitive:Primitive, depth:int):
		return primitive.source

def read_back(value:VALUE, depth:int=0) -> terms.Term:
	return ReadBack().read(value, depth)

def normalize(term:terms.Term, env:Environment=EMPTY) -> terms.Term:
	"""
	The full normal form of a term, if it has one.
	Free variables in the environment must be numbered 0, 1, 2... from the
	outermost binding inward; len(env) is then the starting depth.
	"""
	return read_back(evaluate(term, env, keep), len(env))
