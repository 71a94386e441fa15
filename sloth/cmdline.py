"""
This is a demonstration driver for the sloth call-by-need evaluator.

{0}

For example:

    sloth plus 2 3

will add two Church numerals and decode the answer, and

    sloth -n lazy

will print the full normal form of K I Ω, which exists because Ω is never forced.

    sloth -h

will explain all the arguments.
"""
import sys, argparse
from . import church
from .terms import Term, variable, literal, builtin, apply, lambdas, render
from .environment import EMPTY
from .evaluator import STATS, evaluate, recursive
from .readback import normalize
from .diagnostics import Report, EvalError

def _numbers(args, *defaults):
	given = list(args)
	if len(given) > len(defaults): raise ValueError("this demo takes at most %d number(s)" % len(defaults))
	return given + list(defaults[len(given):])

def _identity(args):
	# (λx.x) 5
	_numbers(args)
	return apply(church.IDENTITY, literal(5)), evaluate

def _const(args):
	# (λx.λy.x) 5 6
	_numbers(args)
	return apply(church.CONST, literal(5), literal(6)), evaluate

def _plus(args):
	m, n = _numbers(args, 2, 3)
	return apply(church.PLUS, church.numeral(m), church.numeral(n)), church.to_int

def _times(args):
	m, n = _numbers(args, 2, 3)
	return apply(church.TIMES, church.numeral(m), church.numeral(n)), church.to_int

def _power(args):
	b, e = _numbers(args, 2, 3)
	return apply(church.POWER, church.numeral(b), church.numeral(e)), church.to_int

def _factorial(args):
	n, = _numbers(args, 4)
	return apply(church.FACTORIAL, church.numeral(n)), church.to_int

def _lazy(args):
	# K I Ω: the argument that would never finish is also never needed.
	_numbers(args)
	return apply(church.CONST, church.IDENTITY, church.OMEGA), evaluate

def _shared(args):
	# (λn.inc (inc n)) 10, counting how often inc actually runs.
	calls = []
	def inc(x):
		calls.append(x)
		return x + 1
	twice = lambdas(1, apply(builtin(inc, "inc"), apply(builtin(inc, "inc"), variable(0))))
	def decode(term:Term):
		answer = evaluate(term)
		print("inc ran %d time(s)" % len(calls), file=sys.stderr)
		return answer
	n, = _numbers(args, 10)
	return apply(twice, literal(n)), decode

def _black_hole(args):
	# letrec x = x in x
	_numbers(args)
	return variable(0), lambda term: recursive(term, EMPTY).force()

DEMOS = {
	"identity": _identity,
	"const": _const,
	"plus": _plus,
	"times": _times,
	"power": _power,
	"factorial": _factorial,
	"lazy": _lazy,
	"shared": _shared,
	"black-hole": _black_hole,
}

parser = argparse.ArgumentParser(
	prog="sloth",
	description="Demonstrations of call-by-need evaluation of the lambda calculus.",
)
parser.add_argument("demo", choices=sorted(DEMOS), help="which demonstration to run.")
parser.add_argument("numbers", nargs="*", type=int, help="natural numbers for the arithmetic demonstrations.")
parser.add_argument('-n', "--normal-form", action="store_true", help="Print the full normal form instead of the decoded answer.")
parser.add_argument('-v', "--verbose", action="count", help="Tell about the term and the work done (repeat for more).")

def run(args):
	report = Report(verbose=args.verbose)
	STATS.reset()
	try:
		term, decode = DEMOS[args.demo](args.numbers)
		report.info("Term:", render(term), level=2)
		if args.normal_form:
			print(render(normalize(term)))
		else:
			print(decode(term))
	except (EvalError, RecursionError) as ex:
		report.complain(ex)
	except ValueError as ex:
		print("Bad argument: %s" % ex, file=sys.stderr)
		return 2
	report.info("Work:", STATS)
	return 1 if report.sick() else 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
