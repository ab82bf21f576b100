"""Shared fake/mock objects for testing.

Modules:
    cmdref - FakeCommandFileOps and ScriptedPrompter for store/session tests
"""

from __future__ import annotations

from tests.fakes.cmdref import (
    FakeCommandFileOps,
    ScriptedPrompter,
    make_command,
    make_context,
)

__all__ = [
    "FakeCommandFileOps",
    "ScriptedPrompter",
    "make_command",
    "make_context",
]
