"""PlayLang.

A toy language of top-level function declarations and calls with at most one
string argument, plus the built-in ``println``. Source text goes through the
lexer, the parser, the resolver and finally the tree-walk interpreter.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from playlang.diagnostics import Diagnostic, Diagnostics
from playlang.interpreter import Interpreter
from playlang.lexer import CharStream, Token, TokenBuffer, TokenKind, Tokenizer, tokenize
from playlang.nodes import AstVisitor, FunctionBody, FunctionCall, FunctionDecl, Program, dump
from playlang.parser import Parser
from playlang.resolver import RefResolver

__all__ = [
    "AstVisitor",
    "CharStream",
    "Diagnostic",
    "Diagnostics",
    "FunctionBody",
    "FunctionCall",
    "FunctionDecl",
    "Interpreter",
    "Parser",
    "Program",
    "RefResolver",
    "Token",
    "TokenBuffer",
    "TokenKind",
    "Tokenizer",
    "dump",
    "tokenize",
]
