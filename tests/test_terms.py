import unittest

from sloth.terms import (
	Var, Abs, App, Literal, Builtin,
	variable, abstraction, application, literal, builtin, lambdas, apply, render,
)

class ConstructionTests(unittest.TestCase):

	def test_structurally_equal_terms_are_equal(self):
		a = abstraction(application(variable(0), variable(0)))
		b = abstraction(application(variable(0), variable(0)))
		self.assertIsNot(a, b)
		self.assertEqual(a, b)
		self.assertEqual(hash(a), hash(b))
		self.assertNotEqual(a, abstraction(application(variable(0), variable(1))))

	def test_kinds_do_not_mix(self):
		self.assertNotEqual(variable(0), literal(0))
		self.assertNotEqual(abstraction(variable(0)), variable(0))

	def test_accessors(self):
		app = application(variable(2), abstraction(variable(0)))
		self.assertIsInstance(app, App)
		self.assertEqual(variable(2), app.function)
		self.assertEqual(2, app.function.index)
		self.assertIsInstance(app.argument, Abs)
		self.assertEqual(Var(0), app.argument.body)
		self.assertEqual(7, literal(7).value)

	def test_terms_are_immutable(self):
		v = variable(0)
		with self.assertRaises(AttributeError):
			v.index = 1
		with self.assertRaises(AttributeError):
			abstraction(v).body = v

	def test_only_structure_is_validated(self):
		for bogon in [-1, -7]:
			with self.subTest(bogon):
				self.assertRaises(ValueError, variable, bogon)
		for bogon in ["x", 1.5, None, True]:
			with self.subTest(bogon):
				self.assertRaises(TypeError, variable, bogon)
		self.assertRaises(TypeError, abstraction, 3)
		self.assertRaises(TypeError, application, variable(0), "x")
		self.assertRaises(TypeError, builtin, 42)
		# Unbound indices are fine until somebody evaluates them.
		self.assertEqual(Var(99), variable(99))

	def test_builtins_compare_by_function(self):
		def f(x): return x
		def g(x): return x
		self.assertEqual(builtin(f), builtin(f, "other name"))
		self.assertNotEqual(builtin(f), builtin(g))
		self.assertIsInstance(builtin(f), Builtin)
		self.assertEqual("f", builtin(f).name)

	def test_unhashable_literals(self):
		a = application(variable(0), literal([1, 2]))
		self.assertEqual(a, application(variable(0), literal([1, 2])))
		self.assertNotEqual(a, application(variable(0), literal([1])))
		self.assertRaises(TypeError, hash, literal({}))
		self.assertRaises(TypeError, hash, a)
		self.assertEqual(hash(literal((1, 2))), hash(literal((1, 2))))

	def test_conveniences(self):
		self.assertEqual(abstraction(abstraction(variable(1))), lambdas(2, variable(1)))
		self.assertEqual(variable(3), lambdas(0, variable(3)))
		f, a, b = variable(0), literal(1), literal(2)
		self.assertEqual(application(application(f, a), b), apply(f, a, b))
		self.assertEqual(f, apply(f))
		self.assertIsInstance(a, Literal)


class RenderTests(unittest.TestCase):

	def test_render(self):
		cases = {
			"λ.λ.1 0": lambdas(2, apply(variable(1), variable(0))),
			"λ.λ.1 (1 0)": lambdas(2, apply(variable(1), apply(variable(1), variable(0)))),
			"(λ.0) (λ.0)": apply(lambdas(1, variable(0)), lambdas(1, variable(0))),
			"0 1 2": apply(variable(0), variable(1), variable(2)),
			"5": literal(5),
		}
		for expected, term in cases.items():
			with self.subTest(expected):
				self.assertEqual(expected, render(term))

	def test_repr_mentions_the_rendering(self):
		self.assertEqual("<Abs λ.0>", repr(abstraction(variable(0))))


if __name__ == '__main__':
	unittest.main()
