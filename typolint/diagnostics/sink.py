"""Diagnostic sinks: where emitted diagnostics go."""

from __future__ import annotations

from typing import Protocol, TextIO

from typolint.diagnostics.diagnostic import Diagnostic


class DiagnosticSink(Protocol):
    def emit(self, diagnostic: Diagnostic) -> None: ...


class CollectingSink:
    """Keeps diagnostics in emission order and optionally forwards each one."""

    def __init__(self, forward: DiagnosticSink | None = None) -> None:
        self.diagnostics: list[Diagnostic] = []
        self._forward = forward

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self._forward is not None:
            self._forward.emit(diagnostic)


class StreamSink:
    """Writes one `path:line:column: severity: message` line per diagnostic."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.count = 0

    def emit(self, diagnostic: Diagnostic) -> None:
        self._stream.write(format_diagnostic(diagnostic) + "\n")
        self.count += 1


def format_diagnostic(diagnostic: Diagnostic) -> str:
    return (
        f"{diagnostic.file_path}:{diagnostic.line}:{diagnostic.column}: "
        f"{diagnostic.severity}: {diagnostic.message}"
    )
