"""Interpreter.

This is a tree-walk interpreter for resolved PlayLang programs.

1. Execution Model
Top-level statements run in source order. A declaration does nothing when it
is reached; its body runs only when a call invokes it.

2. Calls
``println`` prints its first parameter, or an empty line when it has none, and
yields ``0``. A call bound to a declaration by the resolver runs each call in
the declaration's body in order and yields ``None``. An unresolved call does
nothing.

3. Recursion
There is no call depth limit of our own. A function that ends up calling
itself recurses until Python raises ``RecursionError``.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from playlang.nodes import AstVisitor, FunctionBody, FunctionCall, FunctionDecl, Program


class Interpreter(AstVisitor):
    """Tree-walk interpreter for PlayLang."""

    def visit_program(self, program: Program):
        """
        Run the program.

        Returns:
            The result of the last top-level call, or None.
        """
        result = None
        for stmt in program.statements:
            match stmt:
                case FunctionCall():
                    result = self.run_function(stmt)
                case FunctionDecl():
                    pass
                case _:
                    raise TypeError(f"Unknown statement node {stmt!r}")
        return result

    def visit_function_body(self, body: FunctionBody):
        result = None
        for call in body.calls:
            result = self.run_function(call)
        return result

    def visit_function_call(self, call: FunctionCall):
        return self.run_function(call)

    def run_function(self, call: FunctionCall):
        """
        Execute a single call.
        """
        if call.name == "println":
            if call.parameters:
                print(call.parameters[0])
            else:
                print()
            return 0
        if call.definition is not None:
            self.visit_function_body(call.definition.body)
        return None
