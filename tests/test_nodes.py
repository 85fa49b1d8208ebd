"""Tests for AST node kinds and source rendering."""

from tiny_compiler import parser, tokenizer
from tiny_compiler.ast import NodeKind, kind_name, source, target

from conftest import call, num


def test_kinds():
    assert source.Program().kind is NodeKind.PROGRAM
    assert source.CallExpression(name="f").kind is NodeKind.CALL_EXPRESSION
    assert target.ExpressionStatement(expression=target.NumberLiteral(value="1")).kind \
        is NodeKind.EXPRESSION_STATEMENT
    assert target.Identifier(name="f").kind == "Identifier"


def test_kind_name():
    assert kind_name(target.Identifier(name="f")) == "Identifier"
    assert kind_name(object()) == "object"


def test_trees_use_distinct_classes():
    """Equal kinds and fields in different trees are still different nodes."""
    assert source.NumberLiteral(value="1") != target.NumberLiteral(value="1")


def test_source_str():
    assert str(num("12")) == "12"
    assert str(source.StringLiteral(value="hi there")) == '"hi there"'
    assert str(call("f")) == "(f)"
    assert str(call("add", num("2"), call("neg", num("4")))) == "(add 2 (neg 4))"
    program = source.Program(body=[call("a"), num("1")])
    assert str(program) == "(a)\n1"


def test_source_str_reparses_to_equal_tree():
    program = parser(tokenizer('(add 2 (concat "a b" "c")) 7'))
    assert parser(tokenizer(str(program))) == program
