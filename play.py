"""
PlayLang Interpreter

This is the main entry point for the PlayLang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code; the raw tokens are printed.
3. The Parser processes tokens into an AST following the language grammar.
4. The Resolver binds each call to the function it names.
5. The Interpreter walks the AST and runs the top-level calls.

The AST is printed before and after resolution, and everything, diagnostics
included, is written to standard output.
"""
import os
import sys

from playlang.diagnostics import Diagnostics
from playlang.interpreter import Interpreter
from playlang.lexer import CharStream, Tokenizer, TokenBuffer, tokenize
from playlang.nodes import dump
from playlang.parser import Parser
from playlang.resolver import RefResolver


def print_usage(prog: str = "play"):
    """
    Print usage.
    """
    print()
    print("PlayLang Interpreter")
    print()
    print("Usage:")
    print(f"    {prog} [--streaming] <script.play>")
    print()
    print("Arguments:")
    print("    <script.play>")
    print("        Path to a PlayLang source file to compile and run.")
    print()
    print("Options:")
    print("    --streaming")
    print("        Parse straight from the tokenizer with a single token of")
    print("        lookahead instead of backtracking over the token list.")
    print("    -h, --help")
    print("        Show this help message and exit.")


def compile_and_run(
    code: str,
    streaming: bool = False,
    diagnostics: Diagnostics | None = None,
    source_file: str = "<stdin>",
):
    """
    Tokenize, parse, resolve and run a PlayLang program, printing each stage.

    Returns:
        The result of the last top-level call.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    print("Source:")
    print(code)

    print("Tokens:")
    tokens = tokenize(code, diagnostics)
    for token in tokens:
        print(token)

    if streaming:
        # Tokenize a second time; the dump above has drained its own tokenizer.
        parser = Parser(Tokenizer(CharStream(code), diagnostics), source_file, diagnostics)
    else:
        parser = Parser(TokenBuffer(tokens), source_file, diagnostics)
    if os.environ.get('PLAYDEBUG'):
        print(f"Parser: {'backtracking' if parser.backtracking else 'streaming'}")

    prog = parser.parse()
    print("AST after parsing:")
    print(dump(prog))

    RefResolver(diagnostics).visit_program(prog)
    print("AST after resolution:")
    print(dump(prog))

    print("Running program:")
    result = Interpreter().visit_program(prog)
    print(f"Result: {result}")
    return result


def run_script(script_name: str, streaming: bool = False) -> int:
    """
    Run a PlayLang script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
        compile_and_run(code, streaming, source_file=script_name)
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - A script path, optionally preceded by ``--streaming``: run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    prog = os.path.basename(argv[0]) if argv else "play"
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage(prog)
        return 0

    streaming = False
    if args and args[0] == '--streaming':
        streaming = True
        args = args[1:]
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0], streaming)
    print_usage(prog)
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
