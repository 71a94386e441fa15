"""
What can go wrong, and how to tell somebody about it.

The evaluator raises these exceptions at the point of detection and
never catches them itself. Any one of them ends the evaluation it
occurs in: there is no partial result. Only the command-line driver
catches them, and it hands them to a Report to explain on the console.
"""
import sys, random

class EvalError(Exception):
	""" Root of the things that stop an evaluation short. """

class UnboundVariable(EvalError):
	def __init__(self, index:int):
		super().__init__(index)
		self.index = index
	def __str__(self):
		return "Variable %d has no binder in scope." % self.index

class NotAFunction(EvalError):
	def __init__(self, value):
		super().__init__(value)
		self.value = value
	def __str__(self):
		return "Tried to apply %s, which is not a function." % _describe(self.value)

class DivergentThunk(EvalError):
	""" Forcing a thunk required the value of that very same thunk. """
	def __init__(self, thunk):
		super().__init__(thunk)
		self.thunk = thunk
	def __str__(self):
		return "Black hole: a thunk demanded its own value while computing it."

def _describe(value):
	try: return value.describe()
	except AttributeError: return repr(value)

###############################################################################

def _outburst():
	oaths = ['Drat', 'Rats', 'Curses', 'Good Grief', 'Fiddlesticks', 'Nuts', 'Confound it']
	resignations = ['I cannot continue.', 'I am undone.', 'That did not reduce.']
	return "%s! %s" % (random.choice(oaths), random.choice(resignations))

class Report:
	""" The console side of diagnostics. Results go to stdout; everything else goes here. """

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.complaints = 0

	def info(self, *args, level:int=1):
		if self._verbose >= level:
			print(*args, file=sys.stderr)

	def complain(self, error:BaseException):
		self.complaints += 1
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
		print("  -"*20, file=sys.stderr)
		if isinstance(error, RecursionError):
			print("The host ran out of stack while forcing nested thunks.", file=sys.stderr)
			print("A normal form might exist, but it is deeper than Python will go.", file=sys.stderr)
		else:
			print("%s: %s" % (type(error).__name__, error), file=sys.stderr)
		sys.stderr.flush()

	def ok(self): return not self.complaints
	def sick(self): return bool(self.complaints)
