"""Name resolution.

The resolver binds every call site to the top-level declaration with the same
name. Resolution is flat: calls inside a function body are looked up among the
same top-level declarations as calls at the top level. The built-in
``println`` is never looked up. Any other name without a declaration is
reported and left unresolved, which the interpreter treats as a no-op.

Running the resolver again over the same program gives the same bindings.


File: resolver.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from playlang.diagnostics import Diagnostics
from playlang.nodes import AstVisitor, FunctionCall, FunctionDecl, Program

BUILTINS = frozenset({"println"})


class RefResolver(AstVisitor):
    """Binds calls to their declarations."""

    def __init__(self, diagnostics: Diagnostics | None = None):
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.program: Program | None = None

    def visit_program(self, program: Program) -> None:
        self.program = program
        try:
            for stmt in program.statements:
                self.visit_statement(stmt)
        finally:
            self.program = None

    def visit_function_call(self, call: FunctionCall) -> None:
        if self.program is None:
            raise RuntimeError("RefResolver must be run through visit_program")
        if call.name in BUILTINS:
            return
        decl = self.find_function_decl(call.name)
        call.definition = decl
        if decl is None:
            self.diagnostics.report(f"Function '{call.name}' not found", call.line or None)

    def find_function_decl(self, name: str) -> FunctionDecl | None:
        """
        Find the first top-level declaration named ``name``.
        """
        for decl in self.program.declarations:
            if decl.name == name:
                return decl
        return None
