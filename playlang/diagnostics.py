"""Diagnostics.

Lexical, syntactic and resolution problems in PlayLang are advisory: they are
printed to the same stream as program output and the pipeline carries on. The
:class:`Diagnostics` sink does the printing and keeps a record of every message
so that callers can inspect what was reported.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """
    A single reported problem with an optional source position.
    """
    message: str
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} on line {self.line}"
        return f"{self.message} at line {self.line} col {self.column}"


class Diagnostics:
    """
    Collects and prints diagnostics.
    """
    def __init__(self, echo: bool = True):
        """
        Initialize the sink.

        Parameters:
            echo (bool): Print each diagnostic as it is reported.
        """
        self.echo = echo
        self.messages: list[Diagnostic] = []

    def report(self, message: str, line: int | None = None, column: int | None = None) -> Diagnostic:
        """
        Record a diagnostic and print it.

        Returns:
            Diagnostic: The recorded diagnostic.
        """
        diagnostic = Diagnostic(message, line, column)
        self.messages.append(diagnostic)
        if self.echo:
            print(diagnostic)
        return diagnostic
