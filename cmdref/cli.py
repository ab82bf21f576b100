"""cmdref CLI: keep a personal reference of shell commands.

Run without a command for the interactive menu (Create, Update, Remove,
View, Import, Exit). The other commands are scriptable shortcuts over the
same store.
"""
from __future__ import annotations

import argparse
from typing import Optional, Sequence

from core.cli_framework import CLIApp
from core.pipeline import run_pipeline

from . import __version__
from .bridge import App
from .config import CONFIG_HOME_ENV, CmdrefConfig, resolve_config
from .context import SessionContext
from .pipeline import (
    ImportProcessor,
    ImportProducer,
    ImportRequest,
    ListProcessor,
    ListProducer,
    ListRequest,
    ShowProcessor,
    ShowProducer,
    ShowRequest,
)
from .session import run_session
from .store import LiveCommandFileOps

app = CLIApp(
    "cmdref",
    "Personal command reference: store, browse and import shell snippets",
    version=__version__,
    default_command="session",
)


def _config(args: argparse.Namespace) -> CmdrefConfig:
    return resolve_config(getattr(args, "config_dir", None))


def _file_ops(args: argparse.Namespace) -> LiveCommandFileOps:
    return LiveCommandFileOps(_config(args))


@app.command("session", help="Interactive menu (default when no command is given)")
def cmd_session(args: argparse.Namespace) -> int:
    ctx = SessionContext.from_config(_config(args))
    return run_session(ctx)


@app.command("list", help="List stored commands as 'platform - name'", aliases=["ls"])
@app.argument("--platform", help="Only list commands for this platform (case-insensitive)")
def cmd_list(args: argparse.Namespace) -> int:
    request = ListRequest(file_ops=_file_ops(args), platform=getattr(args, "platform", None))
    return run_pipeline(request, ListProcessor(), ListProducer(args._output))


@app.command("show", help="Print one stored command")
@app.argument("name", help="Command name")
def cmd_show(args: argparse.Namespace) -> int:
    request = ShowRequest(file_ops=_file_ops(args), name=args.name)
    return run_pipeline(request, ShowProcessor(), ShowProducer(args._output))


@app.command("import", help="Import commands from a JSON file (merges by default)")
@app.argument("path", help="JSON file holding a list of commands")
@app.argument("--replace", action="store_true", help="Discard existing commands instead of merging")
def cmd_import(args: argparse.Namespace) -> int:
    request = ImportRequest(file_ops=_file_ops(args), path=args.path, merge=not args.replace)
    return run_pipeline(request, ImportProcessor(), ImportProducer(args._output))


@app.command("path", help="Print the location of the commands file")
def cmd_path(args: argparse.Namespace) -> int:
    args._output.print(_file_ops(args).get_file_path())
    return 0


@app.command("raw", help="Print the commands file exactly as stored")
def cmd_raw(args: argparse.Namespace) -> int:
    bridge = App(_file_ops(args))
    args._output.print(bridge.get_commands(), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = app.build_parser()
    parser.add_argument(
        "--config-dir",
        help=f"Base config directory (default: ${CONFIG_HOME_ENV} or the user config dir); "
        "the store lives in <dir>/cmdref/cmdref.json",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the cmdref CLI."""
    build_parser()
    return app.run(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
