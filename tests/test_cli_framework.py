"""Tests for CLI framework components."""
from __future__ import annotations

import io
import logging
import unittest
from dataclasses import dataclass
from unittest.mock import patch

from core.cli_errors import (
    CLIError,
    ConfigError,
    NotFoundError,
    UsageError,
    ExitCode,
    handle_error,
)
from core.cli_output import (
    OutputConfig,
    OutputFormat,
    OutputWriter,
)
from core.cli_framework import CLIApp, configure_logging


class TestExitCodes(unittest.TestCase):
    """Test exit code definitions."""

    def test_exit_codes_are_integers(self):
        self.assertEqual(ExitCode.SUCCESS, 0)
        self.assertEqual(ExitCode.ERROR, 1)
        self.assertEqual(ExitCode.USAGE, 2)
        self.assertEqual(ExitCode.INTERRUPTED, 130)

    def test_error_types_have_correct_codes(self):
        self.assertEqual(ConfigError("test").code, ExitCode.CONFIG_ERROR)
        self.assertEqual(NotFoundError("test").code, ExitCode.NOT_FOUND)
        self.assertEqual(UsageError("test").code, ExitCode.USAGE)


class TestCLIError(unittest.TestCase):
    """Test CLIError class."""

    def test_error_message(self):
        err = CLIError("Something went wrong")
        self.assertEqual(str(err), "Something went wrong")

    def test_error_with_hint(self):
        err = CLIError("Failed", hint="Try again")
        self.assertEqual(err.message, "Failed")
        self.assertEqual(err.hint, "Try again")

    def test_error_default_code(self):
        err = CLIError("Error")
        self.assertEqual(err.code, ExitCode.ERROR)


class TestHandleError(unittest.TestCase):
    """Test error handling."""

    def test_handle_cli_error(self):
        err = CLIError("Test error", ExitCode.CONFIG_ERROR)
        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            code = handle_error(err)
            self.assertEqual(code, ExitCode.CONFIG_ERROR)
            self.assertIn("Test error", mock_stderr.getvalue())

    def test_handle_cli_error_with_hint(self):
        err = CLIError("Test error", hint="Check config")
        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            handle_error(err)
            output = mock_stderr.getvalue()
            self.assertIn("Test error", output)
            self.assertIn("Hint: Check config", output)

    def test_handle_keyboard_interrupt(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            code = handle_error(KeyboardInterrupt())
            self.assertEqual(code, ExitCode.INTERRUPTED)

    def test_handle_unexpected_error(self):
        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            code = handle_error(ValueError("Unexpected"))
            self.assertEqual(code, ExitCode.ERROR)
            self.assertIn("Unexpected", mock_stderr.getvalue())


class TestOutputWriter(unittest.TestCase):
    """Test output formatting."""

    def test_print_basic(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output))
        writer.print("Hello")
        self.assertEqual(output.getvalue(), "Hello\n")

    def test_print_quiet_mode(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, quiet=True))
        writer.print("Hello")
        self.assertEqual(output.getvalue(), "")

    def test_print_verbose_when_disabled(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, verbose=False))
        writer.print_verbose("Debug info")
        self.assertEqual(output.getvalue(), "")

    def test_print_json(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.JSON))
        writer.print_data({"key": "value"})
        self.assertIn('"key"', output.getvalue())
        self.assertIn('"value"', output.getvalue())

    def test_print_yaml(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.YAML))
        writer.print_data([{"name": "ls-all", "platform": "mac"}])
        self.assertEqual(output.getvalue(), "- name: ls-all\n  platform: mac\n")

    def test_print_dict(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output))
        writer.print_dict({"name": "test", "value": 42})
        out = output.getvalue()
        self.assertIn("name: test", out)
        self.assertIn("value: 42", out)

    def test_print_table(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.TABLE))
        data = [
            {"name": "Alice", "age": 30},
            {"name": "Bob", "age": 25},
        ]
        writer.print_data(data)
        out = output.getvalue()
        self.assertIn("name", out)
        self.assertIn("Alice", out)
        self.assertIn("Bob", out)

    def test_table_shows_first_line_of_multiline_cells(self):
        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.TABLE))
        writer.print_data([{"name": "loop", "command": "for f in *\ndo echo $f\ndone"}])
        out = output.getvalue()
        self.assertIn("for f in *", out)
        self.assertNotIn("done", out)


class TestCLIApp(unittest.TestCase):
    """Test CLI application framework."""

    def test_register_command_with_argument(self):
        app = CLIApp("test", "Test")

        @app.command("greet", help="Say hello")
        @app.argument("--name", "-n", help="Name to greet")
        def cmd_greet(args):
            return 0

        cmd_def = app._commands["greet"]
        self.assertEqual(cmd_def.help, "Say hello")
        self.assertEqual(len(cmd_def.arguments), 1)
        self.assertEqual(cmd_def.arguments[0].name_or_flags, ("--name", "-n"))

    def test_run_command(self):
        app = CLIApp("test", "Test", add_common_args=False)
        seen = {}

        @app.command("echo", help="Echo a message")
        @app.argument("message", help="Message to echo")
        def cmd_echo(args):
            seen["message"] = args.message
            return 0

        result = app.run(["echo", "hello"])
        self.assertEqual(result, ExitCode.SUCCESS)
        self.assertEqual(seen, {"message": "hello"})

    def test_run_without_command_prints_help(self):
        app = CLIApp("test", "Test", add_common_args=False)

        @app.command("foo", help="Foo command")
        def cmd_foo(args):
            return 0

        with patch("sys.stdout", new_callable=io.StringIO):
            result = app.run([])
            self.assertEqual(result, ExitCode.USAGE)

    def test_run_without_command_uses_default(self):
        app = CLIApp("test", "Test", default_command="menu")

        @app.command("menu", help="Interactive menu")
        def cmd_menu(args):
            return 7

        @app.command("other", help="Something else")
        def cmd_other(args):
            return 0

        self.assertEqual(app.run([]), 7)
        self.assertEqual(app.run(["other"]), 0)

    def test_error_handling(self):
        app = CLIApp("test", "Test", add_common_args=False)

        @app.command("fail", help="Always fails")
        def cmd_fail(args):
            raise CLIError("Intentional failure", ExitCode.CONFIG_ERROR)

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            result = app.run(["fail"])
            self.assertEqual(result, ExitCode.CONFIG_ERROR)
            self.assertIn("Intentional failure", mock_stderr.getvalue())

    def test_keyboard_interrupt(self):
        app = CLIApp("test", "Test", add_common_args=False)

        @app.command("wait", help="Interrupted")
        def cmd_wait(args):
            raise KeyboardInterrupt

        with patch("sys.stderr", new_callable=io.StringIO):
            self.assertEqual(app.run(["wait"]), ExitCode.INTERRUPTED)

    def test_output_writer_attached(self):
        app = CLIApp("test", "Test")
        seen = {}

        @app.command("show", help="Show")
        def cmd_show(args):
            seen["format"] = args._output.config.format
            return 0

        app.run(["--output", "json", "show"])
        self.assertEqual(seen["format"], OutputFormat.JSON)


class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        configure_logging(False)

    def test_verbose_enables_debug(self):
        configure_logging(True)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_default_is_warning(self):
        configure_logging(False)
        self.assertEqual(logging.getLogger().level, logging.WARNING)


class TestDataclassOutput(unittest.TestCase):
    """Test output with dataclasses."""

    def test_print_dataclass_as_json(self):
        @dataclass
        class Person:
            name: str
            age: int

        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.JSON))
        writer.print_data(Person("Alice", 30))
        out = output.getvalue()
        self.assertIn('"name"', out)
        self.assertIn('"Alice"', out)
        self.assertIn("30", out)

    def test_print_dataclass_as_text(self):
        @dataclass
        class Person:
            name: str
            age: int

        output = io.StringIO()
        writer = OutputWriter(OutputConfig(file=output, format=OutputFormat.TEXT))
        writer.print_data(Person("Bob", 25))
        out = output.getvalue()
        self.assertIn("name", out)
        self.assertIn("Bob", out)


if __name__ == "__main__":
    unittest.main()
