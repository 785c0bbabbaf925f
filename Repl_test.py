# Repl_test.py
import io, os, shutil, tempfile, unittest
from unittest import mock

import Repl
from context import ShellContext
from dispatcher import Dispatcher
from environment import ShellEnvironment
from model import DispatchOutcome
from workdir import WorkingDirectory


class ReplCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.tmp)
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.dispatcher = Dispatcher(ShellContext(
            environment=ShellEnvironment({"PATH": os.path.join(self.tmp, "bin"), "HOME": self.tmp}),
            workdir=WorkingDirectory(self.tmp),
            stdout=self.out,
        ))

    def run_lines(self, *lines):
        return Repl.run_loop(self.dispatcher, Repl.iterable_reader(lines), errors=self.err)


class TestRunLoop(ReplCase):
    def test_end_of_input_exits_zero(self):
        self.assertEqual(self.run_lines("echo one", "echo two"), 0)
        self.assertEqual(self.out.getvalue(), "one\ntwo\n")

    def test_exit_code_stops_the_loop(self):
        self.assertEqual(self.run_lines("exit 42", "echo unreachable"), 42)
        self.assertEqual(self.out.getvalue(), "")

    def test_non_numeric_exit_is_zero(self):
        self.assertEqual(self.run_lines("exit abc"), 0)

    def test_errors_are_shown_and_loop_continues(self):
        code = self.run_lines("nosuch", "cd missing", "echo after")
        self.assertEqual(code, 0)
        self.assertEqual(self.err.getvalue(),
                         "nosuch: command not found\ncd: missing: No such file or directory\n")
        self.assertEqual(self.out.getvalue(), "after\n")

    def test_blank_lines_are_skipped(self):
        self.assertEqual(self.run_lines("", "   ", "echo x"), 0)
        self.assertEqual(self.out.getvalue(), "x\n")
        self.assertEqual(self.err.getvalue(), "")

    def test_unexpected_exception_is_reported(self):
        with mock.patch.object(self.dispatcher, "execute",
                               side_effect=[RuntimeError("boom"), DispatchOutcome.terminate(5)]):
            code = self.run_lines("first", "second")
        self.assertEqual(code, 5)
        self.assertEqual(self.err.getvalue(), "Runtime error: boom\n")

    def test_keyboard_interrupt_at_prompt_continues(self):
        answers = iter([KeyboardInterrupt(), "exit 7"])

        def read():
            item = next(answers)
            if isinstance(item, BaseException):
                raise item
            return item

        with mock.patch("sys.stdout", new_callable=io.StringIO):
            code = Repl.run_loop(self.dispatcher, read, errors=self.err)
        self.assertEqual(code, 7)


class TestRunScript(ReplCase):
    def write(self, text):
        path = os.path.join(self.tmp, "script.mysh")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_script_runs_each_line(self):
        path = self.write("# comment\necho hello\n\npwd\n")
        self.assertEqual(Repl.run_script(path, self.dispatcher), 0)
        self.assertEqual(self.out.getvalue(), f"hello\n{os.path.normpath(self.tmp)}\n")

    def test_script_exit_code(self):
        path = self.write("echo a\nexit 3\necho b\n")
        self.assertEqual(Repl.run_script(path, self.dispatcher), 3)
        self.assertEqual(self.out.getvalue(), "a\n")

    def test_undecodable_bytes_do_not_abort_the_script(self):
        path = os.path.join(self.tmp, "binary.mysh")
        with open(path, "wb") as f:
            f.write(b"echo \xff\nexit 3\n")
        self.assertEqual(Repl.run_script(path, self.dispatcher), 3)
        self.assertEqual(self.out.getvalue(), "\udcff\n")

    def test_unreadable_script(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
            code = Repl.run_script(self.tmp, self.dispatcher)
        self.assertEqual(code, 1)
        self.assertIn("Cannot read script", err.getvalue())

    def test_missing_script(self):
        with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
            code = Repl.run_script(os.path.join(self.tmp, "none.mysh"), self.dispatcher)
        self.assertEqual(code, 1)
        self.assertIn("Script not found", err.getvalue())


class TestMain(ReplCase):
    def test_main_runs_script(self):
        path = os.path.join(self.tmp, "script.mysh")
        with open(path, "w", encoding="utf-8") as f:
            f.write("exit 9\n")
        self.assertEqual(Repl.main([path]), 9)

    def test_cli_flags(self):
        args = Repl.build_cli().parse_args(["--debug", "x.mysh"])
        self.assertTrue(args.debug)
        self.assertEqual(args.script, "x.mysh")


if __name__ == "__main__":
    unittest.main(verbosity=2)
