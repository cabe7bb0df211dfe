"""
Tests for the PlayLang lexer
"""
import pytest

from playlang.diagnostics import Diagnostics
from playlang.lexer import CharStream, Token, TokenBuffer, TokenKind, Tokenizer, tokenize


def kinds_and_texts(tokens):
    return [(tok.kind, tok.text) for tok in tokens]


def test_char_stream_tracks_line_and_column():
    """
    Test that the cursor counts lines and columns as it advances.
    """
    stream = CharStream("ab\nc")
    assert stream.peek() == "a"
    assert stream.advance() == "a"
    assert (stream.line, stream.column) == (1, 1)
    stream.advance()
    assert stream.advance() == "\n"
    assert (stream.line, stream.column) == (2, 0)
    assert stream.advance() == "c"
    assert stream.at_end()
    assert stream.peek() == ""
    assert stream.advance() == ""


def test_function_declaration_tokens():
    """
    Test the exact token sequence of a small declaration.
    """
    tokens = tokenize('function foo(){println("hi");}')
    assert kinds_and_texts(tokens) == [
        (TokenKind.KEYWORD, "function"),
        (TokenKind.IDENTIFIER, "foo"),
        (TokenKind.SEPARATOR, "("),
        (TokenKind.SEPARATOR, ")"),
        (TokenKind.SEPARATOR, "{"),
        (TokenKind.IDENTIFIER, "println"),
        (TokenKind.SEPARATOR, "("),
        (TokenKind.STRING_LITERAL, "hi"),
        (TokenKind.SEPARATOR, ")"),
        (TokenKind.SEPARATOR, ";"),
        (TokenKind.SEPARATOR, "}"),
        (TokenKind.EOF, ""),
    ]


def test_only_function_is_a_keyword():
    """
    Test that identifiers resembling the keyword stay identifiers.
    """
    tokens = tokenize("function functions _x x_1 9lives")
    assert kinds_and_texts(tokens)[:-1] == [
        (TokenKind.KEYWORD, "function"),
        (TokenKind.IDENTIFIER, "functions"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.IDENTIFIER, "x_1"),
        (TokenKind.IDENTIFIER, "9lives"),
    ]


def test_leading_underscore_is_unrecognized(capsys):
    """
    Test that an identifier cannot start with an underscore.
    """
    diagnostics = Diagnostics()
    tokens = tokenize("_x", diagnostics)
    assert kinds_and_texts(tokens) == [(TokenKind.IDENTIFIER, "x"), (TokenKind.EOF, "")]
    assert len(diagnostics.messages) == 1
    assert "Unrecognized character '_'" in capsys.readouterr().out


def test_operators_and_compound_operators():
    """
    Test that single and compound arithmetic operators are recognized.
    """
    tokens = tokenize("++ -- += -= *= /= + - * /")
    assert [tok.text for tok in tokens[:-1]] == [
        "++", "--", "+=", "-=", "*=", "/=", "+", "-", "*", "/",
    ]
    assert all(tok.kind is TokenKind.OPERATOR for tok in tokens[:-1])


def test_comments_are_skipped():
    """
    Test that line and block comments produce no tokens.
    """
    source = (
        "// leading comment\n"
        "foo(); /* inline */ bar();\n"
        "/*\n"
        " * multi-line\n"
        " */\n"
        "baz(); // trailing"
    )
    tokens = tokenize(source)
    names = [tok.text for tok in tokens if tok.kind is TokenKind.IDENTIFIER]
    assert names == ["foo", "bar", "baz"]


def test_unterminated_block_comment(capsys):
    """
    Test that an unterminated block comment is reported and ends tokenization.
    """
    diagnostics = Diagnostics()
    tokens = tokenize("foo(); /* never closed", diagnostics)
    assert tokens[-1].kind is TokenKind.EOF
    assert [tok.text for tok in tokens[:-1]] == ["foo", "(", ")", ";"]
    assert len(diagnostics.messages) == 1
    assert "*/" in capsys.readouterr().out


def test_unterminated_string_literal(capsys):
    """
    Test that an unterminated string reports a position and reaches EOF.
    """
    diagnostics = Diagnostics()
    tokens = tokenize('println("oops;', diagnostics)
    assert kinds_and_texts(tokens) == [
        (TokenKind.IDENTIFIER, "println"),
        (TokenKind.SEPARATOR, "("),
        (TokenKind.STRING_LITERAL, "oops;"),
        (TokenKind.EOF, ""),
    ]
    assert len(diagnostics.messages) == 1
    diagnostic = diagnostics.messages[0]
    assert (diagnostic.line, diagnostic.column) == (1, 14)
    assert "at line 1 col 14" in capsys.readouterr().out


def test_string_literal_is_raw():
    """
    Test that string literals keep backslashes and comment markers as written.
    """
    tokens = tokenize(r'println("a\n // b /* c");')
    assert tokens[2] == Token(TokenKind.STRING_LITERAL, r"a\n // b /* c")


def test_unrecognized_characters_are_skipped(capsys):
    """
    Test that unknown characters are reported and tokenization continues.
    """
    diagnostics = Diagnostics()
    tokens = tokenize("foo @ # bar", diagnostics)
    assert [tok.text for tok in tokens[:-1]] == ["foo", "bar"]
    assert [d.column for d in diagnostics.messages] == [4, 6]
    out = capsys.readouterr().out
    assert "Unrecognized character '@'" in out
    assert "Unrecognized character '#'" in out


def test_token_positions():
    """
    Test that tokens record where they start.
    """
    tokens = tokenize('foo();\n  bar("x");')
    bar = tokens[4]
    assert bar.text == "bar"
    assert (bar.line, bar.column) == (2, 2)
    assert (tokens[6].line, tokens[6].column) == (2, 6)


def test_streaming_tokenizer_peek_and_next():
    """
    Test the single-lookahead contract of the streaming tokenizer.
    """
    tokenizer = Tokenizer(CharStream("a b"))
    assert tokenizer.peek().text == "a"
    assert tokenizer.peek().text == "a"
    assert tokenizer.next().text == "a"
    assert tokenizer.next().text == "b"
    assert tokenizer.peek().kind is TokenKind.EOF
    assert tokenizer.next().kind is TokenKind.EOF
    assert tokenizer.next().kind is TokenKind.EOF
    assert not hasattr(tokenizer, "rewind")


def test_token_buffer_position_and_rewind():
    """
    Test marking and rewinding in the array-backed token source.
    """
    buffer = TokenBuffer(tokenize("a b c"))
    assert buffer.position() == 0
    mark = buffer.position()
    assert buffer.next().text == "a"
    assert buffer.next().text == "b"
    assert buffer.position() == 2
    buffer.rewind(mark)
    assert buffer.peek().text == "a"


def test_token_buffer_stops_at_eof():
    """
    Test that the buffer keeps returning EOF once the end is reached.
    """
    buffer = TokenBuffer([Token(TokenKind.IDENTIFIER, "a")])
    assert buffer.next().text == "a"
    assert buffer.next().kind is TokenKind.EOF
    assert buffer.next().kind is TokenKind.EOF
    assert buffer.position() == 1
    with pytest.raises(IndexError):
        buffer.rewind(5)


def test_token_equality_ignores_position():
    """
    Test that tokens compare by kind and text only.
    """
    assert Token(TokenKind.IDENTIFIER, "a", 1, 0) == Token(TokenKind.IDENTIFIER, "a", 7, 3)
    assert Token(TokenKind.IDENTIFIER, "a") != Token(TokenKind.STRING_LITERAL, "a")
