"""CLI application framework.

Provides a declarative way to build CLI applications with:
- Command registration via decorators
- Automatic argument parsing
- Consistent error handling and exit codes
- Output formatting and logging setup
- Common arguments (--verbose, --quiet, --output)
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Sequence,
)

from .cli_errors import CLIError, ExitCode, handle_error
from .cli_output import OutputConfig, OutputFormat, OutputWriter


CommandFunc = Callable[[argparse.Namespace], int]

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass
class Argument:
    """Definition of a CLI argument."""
    name_or_flags: tuple
    kwargs: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CommandDef:
    """Definition of a CLI command."""
    name: str
    func: CommandFunc
    help: str = ""
    description: str = ""
    arguments: List[Argument] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)


class CLIApp:
    """Base class for CLI applications.

    Example usage:
        app = CLIApp("cmdref", "Personal command reference")

        @app.command("list", help="List commands")
        @app.argument("--platform", help="Only this platform")
        def cmd_list(args):
            args._output.print(f"Listing {args.platform}")
            return 0

        if __name__ == "__main__":
            app.main()
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        *,
        version: Optional[str] = None,
        epilog: Optional[str] = None,
        add_common_args: bool = True,
        default_command: Optional[str] = None,
    ):
        """Initialize the CLI application.

        Args:
            name: Program name (used in help text).
            description: Program description.
            version: Optional version string.
            epilog: Optional text to display after help.
            add_common_args: Whether to add common args (--verbose, --output, etc.).
            default_command: Command to run when none is given on the command line.
                Without one, the help text is printed instead.
        """
        self.name = name
        self.description = description
        self.version = version
        self.epilog = epilog
        self.add_common_args = add_common_args
        self.default_command = default_command

        self._commands: Dict[str, CommandDef] = {}
        self._parser: Optional[argparse.ArgumentParser] = None
        self._pending_arguments: List[Argument] = []

    def command(
        self,
        name: str,
        *,
        help: str = "",
        description: str = "",
        aliases: Optional[List[str]] = None,
    ) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator to register a command.

        Args:
            name: Command name.
            help: Short help text for the command.
            description: Longer description for command help.
            aliases: Alternative names for the command.
        """
        def decorator(func: CommandFunc) -> CommandFunc:
            # Collect any pending arguments from @argument decorators
            arguments = list(reversed(self._pending_arguments))
            self._pending_arguments.clear()

            self._commands[name] = CommandDef(
                name=name,
                func=func,
                help=help,
                description=description or help,
                arguments=arguments,
                aliases=aliases or [],
            )
            return func
        return decorator

    def argument(
        self,
        *name_or_flags: str,
        **kwargs: Any,
    ) -> Callable[[CommandFunc], CommandFunc]:
        """Decorator to add an argument to the next command.

        Must be used BEFORE the @command decorator (decorators apply bottom-up).

        Args:
            *name_or_flags: Argument name(s) like "--platform" or "-p", "--platform".
            **kwargs: Keyword arguments passed to argparse.add_argument().
        """
        def decorator(func: CommandFunc) -> CommandFunc:
            self._pending_arguments.append(Argument(name_or_flags, kwargs))
            return func
        return decorator

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the argument parser."""
        parser = argparse.ArgumentParser(
            prog=self.name,
            description=self.description,
            epilog=self.epilog,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        if self.version:
            parser.add_argument(
                "--version", "-V",
                action="version",
                version=f"%(prog)s {self.version}",
            )

        if self.add_common_args:
            self._add_common_arguments(parser)

        if self._commands:
            subparsers = parser.add_subparsers(dest="command", metavar="<command>")
            for cmd_def in self._commands.values():
                cmd_parser = subparsers.add_parser(
                    cmd_def.name,
                    help=cmd_def.help,
                    description=cmd_def.description,
                    aliases=cmd_def.aliases,
                )
                for arg in cmd_def.arguments:
                    cmd_parser.add_argument(*arg.name_or_flags, **arg.kwargs)
                cmd_parser.set_defaults(_cmd_func=cmd_def.func)

        self._parser = parser
        return parser

    def _add_common_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add common arguments to the parser."""
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose output and debug logging",
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output",
        )
        parser.add_argument(
            "--output", "-o",
            choices=[fmt.value for fmt in OutputFormat],
            default="text",
            help="Output format (default: text)",
        )

    def _resolve_command(self, args: argparse.Namespace) -> Optional[CommandFunc]:
        cmd_func = getattr(args, "_cmd_func", None)
        if cmd_func is None and self.default_command:
            default = self._commands[self.default_command]
            # Fill in the defaults the default command's subparser would have set
            for arg in default.arguments:
                dest = arg.kwargs.get("dest") or arg.name_or_flags[-1].lstrip("-").replace("-", "_")
                if not hasattr(args, dest):
                    setattr(args, dest, arg.kwargs.get("default"))
            cmd_func = default.func
        return cmd_func

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the CLI application and return its exit code.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:]).
        """
        parser = self._parser
        if parser is None:
            parser = self.build_parser()
        args = parser.parse_args(argv)

        verbose = bool(getattr(args, "verbose", False))
        configure_logging(verbose)

        # Set up output writer
        output_config = OutputConfig(
            format=OutputFormat(getattr(args, "output", "text")),
            verbose=verbose,
            quiet=bool(getattr(args, "quiet", False)),
        )
        args._output = OutputWriter(output_config)

        cmd_func = self._resolve_command(args)
        if cmd_func is None:
            parser.print_help()
            return ExitCode.USAGE

        # Run the command with error handling
        try:
            return int(cmd_func(args))
        except CLIError as e:
            return handle_error(e, verbose=verbose)
        except KeyboardInterrupt:
            print("\nInterrupted.", file=sys.stderr)
            return ExitCode.INTERRUPTED
        except Exception as e:
            return handle_error(e, verbose=verbose)

    def main(self, argv: Optional[Sequence[str]] = None) -> None:
        """Run the CLI and exit with the return code."""
        sys.exit(self.run(argv))


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
