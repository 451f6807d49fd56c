#!/usr/bin/env python3

import io
import sys
import unittest
from contextlib import redirect_stdout

import recipe

class CommandTest(unittest.TestCase):
    def test_invoke_once(self):
        calls = []
        command = recipe.Command("build", lambda: calls.append("build"))

        self.assertFalse(command.spent)
        command()
        self.assertTrue(command.spent)
        self.assertEqual(["build"], calls)

        with self.assertRaises(RuntimeError):
            command()

        self.assertEqual(["build"], calls)

    def test_spent_after_failure(self):
        def fail():
            raise ValueError("nope")

        command = recipe.Command("fail", fail)

        with self.assertRaises(ValueError):
            command()

        self.assertTrue(command.spent)

class ScriptTest(unittest.TestCase):
    def test_echo(self):
        out = io.StringIO()

        with redirect_stdout(out):
            recipe.script(sys.executable, "-c", "pass")()

        self.assertTrue(out.getvalue().startswith("> "))
        self.assertIn("-c pass", out.getvalue())

    def test_no_echo(self):
        out = io.StringIO()

        with redirect_stdout(out):
            recipe.script(sys.executable, "-c", "pass", echo=False)()

        self.assertEqual("", out.getvalue())

    def test_check(self):
        action = recipe.script(sys.executable, "-c", "import sys; sys.exit(2)", echo=False)

        with self.assertRaises(recipe.ScriptError) as cm:
            action()

        self.assertEqual("Script returned error code 2.", str(cm.exception))
        self.assertEqual(2, cm.exception.status.code)

    def test_no_check(self):
        action = recipe.script(sys.executable, "-c", "import sys; sys.exit(2)", echo=False, check=False)
        action()

if __name__ == "__main__":
    unittest.main()
