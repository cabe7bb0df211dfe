"""AST nodes for PlayLang.

A program is an ordered list of statements, and a statement is either a
function declaration or a function call. Declarations own a body holding the
calls they make. Calls carry their string parameters and, once the resolver has
run, a reference to the declaration they invoke.

The node classes double as the tags of the statement union: visitors dispatch
on them with ``match`` class patterns.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class FunctionCall:
    """
    A call of a named function with zero or one string parameter.

    ``definition`` is set by the resolver and points at a declaration owned by
    the program. It is left out of ``repr`` and equality so that comparing or
    printing a tree never follows it.
    """
    name: str
    parameters: list[str] = field(default_factory=list)
    definition: FunctionDecl | None = field(default=None, repr=False, compare=False)
    line: int = field(default=0, compare=False)


@dataclass
class FunctionBody:
    """The calls made by a function, in source order."""
    calls: list[FunctionCall] = field(default_factory=list)
    line: int = field(default=0, compare=False)


@dataclass
class FunctionDecl:
    """A top-level function declaration."""
    name: str
    body: FunctionBody
    line: int = field(default=0, compare=False)


Statement = Union[FunctionDecl, FunctionCall]


@dataclass
class Program:
    """The root of the tree."""
    statements: list[Statement] = field(default_factory=list)

    @property
    def declarations(self) -> list[FunctionDecl]:
        """
        Top-level declarations in source order.
        """
        return [stmt for stmt in self.statements if isinstance(stmt, FunctionDecl)]


class AstVisitor:
    """
    Base traversal over the tree.

    The default handlers recurse from a declaration into its body and from a
    body into each call; a call is a leaf.
    """

    def visit_program(self, program: Program) -> Any:
        result = None
        for stmt in program.statements:
            result = self.visit_statement(stmt)
        return result

    def visit_statement(self, stmt: Statement) -> Any:
        """
        Dispatch a statement to its handler.

        Raises:
            TypeError: If ``stmt`` is not a declaration or a call.
        """
        match stmt:
            case FunctionDecl():
                return self.visit_function_decl(stmt)
            case FunctionCall():
                return self.visit_function_call(stmt)
            case _:
                raise TypeError(f"Unknown statement node {stmt!r}")

    def visit_function_decl(self, decl: FunctionDecl) -> Any:
        return self.visit_function_body(decl.body)

    def visit_function_body(self, body: FunctionBody) -> Any:
        result = None
        for call in body.calls:
            result = self.visit_function_call(call)
        return result

    def visit_function_call(self, call: FunctionCall) -> Any:
        return None


class AstDumper(AstVisitor):
    """
    Render a tree as indented text, two spaces per level of depth.
    """

    def __init__(self):
        self.lines: list[str] = []
        self.prefix = ""

    def _indented(self, visit, node):
        saved = self.prefix
        self.prefix += "  "
        try:
            visit(node)
        finally:
            self.prefix = saved

    def visit_program(self, program: Program) -> None:
        self.lines.append(f"{self.prefix}Prog {len(program.statements)}")
        for stmt in program.statements:
            self._indented(self.visit_statement, stmt)

    def visit_function_decl(self, decl: FunctionDecl) -> None:
        self.lines.append(f"{self.prefix}FunctionDecl {decl.name}")
        self._indented(self.visit_function_body, decl.body)

    def visit_function_body(self, body: FunctionBody) -> None:
        self.lines.append(f"{self.prefix}FunctionBody")
        for call in body.calls:
            self._indented(self.visit_function_call, call)

    def visit_function_call(self, call: FunctionCall) -> None:
        suffix = " (resolved)" if call.definition is not None else ""
        self.lines.append(f"{self.prefix}FunctionCall {call.name}{suffix}")
        for param in call.parameters:
            self.lines.append(f"{self.prefix}\tParameter: {param}")


def dump(node: Program | Statement | FunctionBody) -> str:
    """
    Convert a node and its children into readable text for debugging.
    """
    dumper = AstDumper()
    match node:
        case Program():
            dumper.visit_program(node)
        case FunctionBody():
            dumper.visit_function_body(node)
        case _:
            dumper.visit_statement(node)
    return "\n".join(dumper.lines)
