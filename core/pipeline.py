"""Shared consumer/processor/producer scaffolding.

Non-interactive commands are expressed as a request that a processor turns
into a ``ResultEnvelope`` and a producer renders. Failures travel inside the
envelope as ``diagnostics`` (``message`` and exit ``code``) so command
functions reduce to ``return run_pipeline(...)``.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Protocol, TypeVar

from .cli_errors import CLIError, ExitCode


PayloadT = TypeVar("PayloadT")
ResultT = TypeVar("ResultT")
RequestT = TypeVar("RequestT")
T = TypeVar("T")
R = TypeVar("R")


@dataclass
class ResultEnvelope(Generic[ResultT]):
    status: str
    payload: Optional[ResultT] = None
    diagnostics: Optional[dict[str, Any]] = None

    def ok(self) -> bool:
        return self.status.lower() == "success"

    def unwrap(self) -> ResultT:
        """Return payload or raise ValueError. Use after ok() check."""
        if self.payload is None:
            msg = (self.diagnostics or {}).get("message", "No payload")
            raise ValueError(msg)
        return self.payload

    @property
    def exit_code(self) -> int:
        if self.ok():
            return ExitCode.SUCCESS
        return int((self.diagnostics or {}).get("code", ExitCode.ERROR))


class Processor(Protocol[PayloadT, ResultT]):
    def process(self, payload: PayloadT) -> ResultT:
        ...


class Producer(Protocol[ResultT]):
    def produce(self, result: ResultT) -> None:
        ...


class RequestConsumer(Generic[RequestT]):
    """Generic consumer that stores a request and returns it on consume()."""

    def __init__(self, request: RequestT) -> None:
        self._request = request

    def consume(self) -> RequestT:  # pragma: no cover - trivial
        return self._request


class BaseProducer:
    """Base class for pipeline producers with common error handling.

    Subclasses override _produce_success(); failed envelopes are reported
    on stderr here (message plus optional hint).
    """

    def produce(self, result: ResultEnvelope) -> None:
        """Template method: handle errors, delegate success to subclass."""
        if self.print_error(result):
            return
        if result.payload is not None:
            self._produce_success(result.payload, result.diagnostics)

    def _produce_success(self, payload: Any, diagnostics: Optional[Dict[str, Any]]) -> None:
        """Override in subclass to handle successful result output."""
        raise NotImplementedError("Subclass must implement _produce_success")

    @staticmethod
    def print_error(result: ResultEnvelope) -> bool:
        """Print error message if result failed. Returns True if the result failed."""
        if result.ok():
            return False
        diagnostics = result.diagnostics or {}
        msg = diagnostics.get("message")
        if msg:
            print(f"Error: {msg}", file=sys.stderr)
        hint = diagnostics.get("hint")
        if hint:
            print(f"Hint: {hint}", file=sys.stderr)
        return True


class SafeProcessor(Generic[T, R]):
    """Base processor that converts raised CLI errors into error envelopes.

    Subclasses override _process_safe(). A ``CLIError`` keeps its exit code
    and hint; any other exception is reported with the generic error code.
    """

    def process(self, payload: T) -> ResultEnvelope[R]:
        try:
            result = self._process_safe(payload)
        except CLIError as e:
            return ResultEnvelope(
                status="error",
                diagnostics={"message": e.message, "code": int(e.code), "hint": e.hint},
            )
        except Exception as e:
            return ResultEnvelope(
                status="error",
                diagnostics={"message": str(e), "code": int(ExitCode.ERROR)},
            )
        return ResultEnvelope(status="success", payload=result)

    def _process_safe(self, payload: T) -> R:
        """Override to implement processing logic without error handling boilerplate."""
        raise NotImplementedError("Subclass must implement _process_safe")


def run_pipeline(
    request: Any,
    processor: Processor[Any, ResultEnvelope],
    producer: Producer[ResultEnvelope],
) -> int:
    """Execute a pipeline and return the CLI exit code.

    1. Process the request
    2. Produce output
    3. Return 0 on success or the code carried in the diagnostics
    """
    envelope = processor.process(RequestConsumer(request).consume())
    producer.produce(envelope)
    return envelope.exit_code
