"""
Utility functions shared across PlayLang tests.
"""
from playlang.diagnostics import Diagnostics
from playlang.interpreter import Interpreter
from playlang.lexer import CharStream, Tokenizer, tokenize
from playlang.nodes import Program
from playlang.parser import Parser
from playlang.resolver import RefResolver


def parse_source(source: str, diagnostics: Diagnostics | None = None) -> Program:
    """
    Parse source code with the backtracking parser and return the AST.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    return Parser(tokenize(source, diagnostics), diagnostics=diagnostics).parse()


def parse_streaming(source: str, diagnostics: Diagnostics | None = None) -> Program:
    """
    Parse source code with the streaming parser and return the AST.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    return Parser(Tokenizer(CharStream(source), diagnostics), diagnostics=diagnostics).parse()


def run_source(source: str, diagnostics: Diagnostics | None = None):
    """
    Parse, resolve and run source code. Returns the program and its result.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    prog = parse_source(source, diagnostics)
    RefResolver(diagnostics).visit_program(prog)
    return prog, Interpreter().visit_program(prog)
