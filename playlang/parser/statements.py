"""Statement parsing utilities for PlayLang.

These functions operate on a `playlang.parser.parser.Parser` instance and
implement the grammar:

    Program      := (FunctionDecl | FunctionCall)*
    FunctionDecl := "function" Identifier "(" ")" FunctionBody
    FunctionBody := "{" FunctionCall* "}"
    FunctionCall := Identifier "(" StringLiteral? ")" ";"

Every production returns its node, or ``None`` when it does not match. Failing
on the leading token is silent since the caller may try another production
there; failing after it is reported.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from playlang.lexer import TokenKind
from playlang.nodes import FunctionBody, FunctionCall, FunctionDecl, Program

if TYPE_CHECKING:
    from playlang.parser import Parser


def parse_program(parser: 'Parser') -> Program:
    """
    Parse a program by trying each statement production in turn.

    Requires a parser that can backtrack. Parsing stops at the first token
    where neither production matches; anything left after it is not parsed.

    Args:
        parser: The parser instance.

    Returns:
        Program: The parsed statements.
    """
    statements = []
    while True:
        stmt = parser.parse_function_decl()
        if stmt is None:
            stmt = parser.parse_function_call()
        if stmt is None:
            break
        statements.append(stmt)
    return Program(statements)


def parse_program_streaming(parser: 'Parser') -> Program:
    """
    Parse a program choosing each production from the lookahead token.

    A statement that fails partway is dropped and parsing resumes at whatever
    token follows the failure. A token that cannot start a statement is
    reported and skipped.

    Args:
        parser: The parser instance.

    Returns:
        Program: The parsed statements.
    """
    statements = []
    token = parser.peek()
    while token.kind is not TokenKind.EOF:
        stmt = None
        if token.kind is TokenKind.KEYWORD and token.text == "function":
            stmt = parser.parse_function_decl()
        elif token.kind is TokenKind.IDENTIFIER:
            stmt = parser.parse_function_call()
        else:
            parser.report(f"Unexpected token {parser.describe(token)} at top level", token)
            parser.next()
        if stmt is not None:
            statements.append(stmt)
        token = parser.peek()
    return Program(statements)


def parse_function_decl(parser: 'Parser') -> FunctionDecl | None:
    """
    Parse a function declaration.

    Syntax:
        function <name>() { <calls> }

    Args:
        parser: The parser instance.

    Returns:
        FunctionDecl | None: The declaration, or None if it does not match.
    """
    mark = parser.mark()
    keyword = parser.next()
    if keyword.kind is not TokenKind.KEYWORD or keyword.text != "function":
        return parser.fail(mark)

    name = parser.next()
    if name.kind is not TokenKind.IDENTIFIER:
        return parser.fail(
            mark,
            f"Expecting a function name in FunctionDecl, while we got {parser.describe(name)}",
            name,
        )
    if parser.expect("(", "FunctionDecl") is None or parser.expect(")", "FunctionDecl") is None:
        return parser.fail(mark)

    body = parser.parse_function_body()
    if body is None:
        return parser.fail(mark)
    return FunctionDecl(name.text, body, line=keyword.line)


def parse_function_body(parser: 'Parser') -> FunctionBody | None:
    """
    Parse the body of a function declaration.

    Syntax:
        { <call>* }

    Args:
        parser: The parser instance.

    Returns:
        FunctionBody | None: The body, or None if it does not match.
    """
    mark = parser.mark()
    lbrace = parser.expect("{", "FunctionBody")
    if lbrace is None:
        return parser.fail(mark)

    calls = []
    if parser.backtracking:
        call = parser.parse_function_call()
        while call is not None:
            calls.append(call)
            call = parser.parse_function_call()
    else:
        while parser.peek().kind is TokenKind.IDENTIFIER:
            call = parser.parse_function_call()
            if call is None:
                return parser.fail(mark, "Error parsing a FunctionCall in FunctionBody")
            calls.append(call)

    if parser.expect("}", "FunctionBody") is None:
        return parser.fail(mark)
    return FunctionBody(calls, line=lbrace.line)


def parse_function_call(parser: 'Parser') -> FunctionCall | None:
    """
    Parse a function call statement.

    Syntax:
        <name>(<string>?);

    Args:
        parser: The parser instance.

    Returns:
        FunctionCall | None: The call, or None if it does not match.
    """
    mark = parser.mark()
    name = parser.next()
    if name.kind is not TokenKind.IDENTIFIER:
        return parser.fail(mark)
    if parser.expect("(", "FunctionCall") is None:
        return parser.fail(mark)

    parameters = _parse_parameters(parser)
    if parameters is None:
        return parser.fail(mark)

    if parser.expect(";", "FunctionCall") is None:
        return parser.fail(mark)
    return FunctionCall(name.text, parameters, line=name.line)


def _parse_parameters(parser: 'Parser') -> list[str] | None:
    """
    Parse the parameters of a call up to and including the closing ')'.

    Only a single string literal is accepted. A ',' after a parameter is an
    error; any other token after a parameter is skipped.

    Args:
        parser: The parser instance.

    Returns:
        list[str] | None: The parameter texts, or None on a syntax error.
    """
    parameters = []
    token = parser.next()
    while not token.is_separator(")"):
        if token.kind is not TokenKind.STRING_LITERAL:
            parser.report(
                f"Expecting string literal in FunctionCall, while we got {parser.describe(token)}",
                token,
            )
            return None
        parameters.append(token.text)
        token = parser.next()
        if not token.is_separator(")"):
            if token.is_separator(","):
                # TODO: accept ',' between parameters once calls take more than one argument.
                parser.report("Unexpected ',' in FunctionCall, only one parameter is supported", token)
                return None
            token = parser.next()
    return parameters
