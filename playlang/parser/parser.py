"""Main parser entry point for PlayLang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The grammar productions themselves live in
`playlang.parser.statements`.

The parser works over either token source from `playlang.lexer`:

- over a `TokenBuffer` it backtracks: every production marks the token
  position before it starts and rewinds there when it fails, so the caller
  can try another production from the same token.
- over a streaming `Tokenizer` there is nothing to rewind to. Productions
  commit to the tokens they consume and the program loop picks a production
  from the lookahead token alone.

A production that does not match returns ``None``. Syntax errors are reported
as diagnostics, never raised.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from playlang.diagnostics import Diagnostics
from playlang.lexer import Token, TokenBuffer, TokenKind, Tokenizer
from playlang.nodes import FunctionBody, FunctionCall, FunctionDecl, Program

from . import statements as _stmt


class Parser:
    """PlayLang parser."""

    def __init__(
        self,
        tokens: TokenBuffer | Tokenizer | list[Token],
        source_file: str = "<stdin>",
        diagnostics: Diagnostics | None = None,
    ):
        """
        Initialize the parser with a token source.

        Parameters:
            tokens: A `TokenBuffer` or a list of tokens (backtracking), or a
                streaming `Tokenizer` (commit-only).
            source_file (str): The name of the script, used in messages.
            diagnostics (Diagnostics): Sink for syntax errors.
        """
        if isinstance(tokens, list):
            tokens = TokenBuffer(tokens)
        self.tokens = tokens
        self.source_file = source_file
        self.backtracking = (
            callable(getattr(tokens, "position", None))
            and callable(getattr(tokens, "rewind", None))
        )
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()


    # Token access
    def peek(self) -> Token:
        """
        Return the lookahead token without consuming it.
        """
        return self.tokens.peek()

    def next(self) -> Token:
        """
        Consume and return the current token.
        """
        return self.tokens.next()

    def mark(self) -> int | None:
        """
        Capture the current token position, or ``None`` if the source cannot rewind.
        """
        if self.backtracking:
            return self.tokens.position()
        return None

    def fail(self, mark: int | None, message: str | None = None, token: Token | None = None) -> None:
        """
        Abandon the current production.

        Reports ``message`` if given and rewinds to ``mark`` when backtracking.

        Returns:
            None: So productions can ``return parser.fail(...)``.
        """
        if message is not None:
            self.report(message, token)
        if mark is not None:
            self.tokens.rewind(mark)
        return None

    def expect(self, text: str, production: str) -> Token | None:
        """
        Consume the current token and check that it is the separator ``text``.

        Returns:
            Token | None: The token, or None (after reporting) on a mismatch.
        """
        token = self.next()
        if token.is_separator(text):
            return token
        self.report(f"Expecting '{text}' in {production}, while we got {self.describe(token)}", token)
        return None

    @staticmethod
    def describe(token: Token) -> str:
        """
        Describe a token for error messages.
        """
        if token.kind is TokenKind.EOF:
            return "end of input"
        return repr(token.text)

    def report(self, message: str, token: Token | None = None) -> None:
        """
        Report a syntax error at ``token``.
        """
        message = f"{message} in {self.source_file}"
        if token is None:
            self.diagnostics.report(message)
        else:
            self.diagnostics.report(message, token.line, token.column)


    # Production wrappers
    def parse_function_decl(self) -> FunctionDecl | None:
        """
        Parse a function declaration.
        """
        return _stmt.parse_function_decl(self)

    def parse_function_body(self) -> FunctionBody | None:
        """
        Parse the braces and calls of a function body.
        """
        return _stmt.parse_function_body(self)

    def parse_function_call(self) -> FunctionCall | None:
        """
        Parse a function call statement.
        """
        return _stmt.parse_function_call(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        if self.backtracking:
            return _stmt.parse_program(self)
        return _stmt.parse_program_streaming(self)
