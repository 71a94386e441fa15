import io
import unittest
from unittest import mock

from sloth import cmdline

def _run(*argv):
	with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
		with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
			status = cmdline.run(cmdline.parser.parse_args(list(argv)))
	return status, out.getvalue(), err.getvalue()

class DemoSmokeTests(unittest.TestCase):
	""" Run the demonstrations; Test for no smoke. """

	def test_decoded_answers(self):
		for argv, answer in [
			(["identity"], "5"),
			(["const"], "5"),
			(["plus"], "5"),
			(["plus", "4", "1"], "5"),
			(["times", "3", "3"], "9"),
			(["power", "2", "4"], "16"),
			(["factorial", "3"], "6"),
			(["shared"], "12"),
		]:
			with self.subTest(argv):
				status, out, _ = _run(*argv)
				self.assertEqual(0, status)
				self.assertEqual(answer, out.strip())

	def test_normal_form(self):
		status, out, _ = _run("-n", "lazy")
		self.assertEqual(0, status)
		self.assertEqual("λ.0", out.strip())
		status, out, _ = _run("-n", "plus", "1", "1")
		self.assertEqual("λ.λ.1 (1 0)", out.strip())

	def test_shared_reports_how_often_inc_ran(self):
		_, _, err = _run("shared")
		self.assertIn("inc ran 2 time(s)", err)

	def test_black_hole_is_a_complaint(self):
		status, out, err = _run("black-hole")
		self.assertEqual(1, status)
		self.assertEqual("", out)
		self.assertIn("DivergentThunk", err)

	def test_verbose_tells_about_the_work(self):
		_, _, err = _run("-vv", "plus")
		self.assertIn("Term:", err)
		self.assertIn("beta=", err)

	def test_bad_numbers(self):
		status, _, err = _run("plus", "-1", "2")
		self.assertEqual(2, status)
		self.assertIn("Bad argument", err)

	def test_too_many_numbers(self):
		for argv in [["plus", "1", "2", "3"], ["factorial", "3", "4"], ["identity", "1"]]:
			with self.subTest(argv):
				status, out, err = _run(*argv)
				self.assertEqual(2, status)
				self.assertEqual("", out)
				self.assertIn("Bad argument", err)

	def test_no_arguments_prints_usage(self):
		with mock.patch("sys.argv", ["sloth"]):
			with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
				cmdline.main()
		self.assertIn("usage: sloth", out.getvalue())


if __name__ == '__main__':
	unittest.main()
