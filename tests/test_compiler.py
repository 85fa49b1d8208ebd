"""End-to-end tests for the compiler."""

import logging

import pytest
from tiny_compiler import (
    LexError,
    ParseError,
    code_generator,
    compiler,
    parser,
    tokenizer,
    transformer,
)


@pytest.mark.parametrize("code, expected", [
    ("(add 2 (subtract 4 2))", "add(2, subtract(4, 2));"),
    ('(write "hi")', 'write("hi");'),
    ("(a (b) (c))", "a(b(), c());"),
    ("(a) (b)", "a();\nb();"),
    ("", ""),
    ("(f)", "f();"),
    ("42", "42;"),
    ('"x" (f 1)', '"x";\nf(1);'),
    ("  (add\n\t1\n\t2)  ", "add(1, 2);"),
    ("(concat \"a b\" \"\")", 'concat("a b", "");'),
])
def test_compile(code, expected):
    assert compiler(code) == expected


@pytest.mark.parametrize("code", [
    "",
    "(add 2 (subtract 4 2))",
    '(a (b 1 "two") (c (d)))\n(e 5)',
    '7 "s" (f)',
])
def test_pipeline_composition(code):
    """Test that compiling equals running the four stages by hand."""
    assert compiler(code) == code_generator(transformer(parser(tokenizer(code))))


def test_unterminated_call():
    with pytest.raises(ParseError):
        compiler("(add 2")


def test_bad_character():
    with pytest.raises(LexError) as excinfo:
        compiler("(add #2)")
    assert excinfo.value.char == "#"


def test_lex_error_wins_over_later_parse_error():
    """Test that lexing completes, and fails, before parsing starts."""
    with pytest.raises(LexError):
        compiler(") #")


def test_stages_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="tiny_compiler.pipeline"):
        compiler("(a 1) (b)")
    messages = [record.getMessage() for record in caplog.records]
    assert "tokenized 9 characters into 7 tokens" in messages
    assert "parsed 2 top-level expressions" in messages
    assert "transformed into 2 statements" in messages
    assert "generated 10 characters of output" in messages
