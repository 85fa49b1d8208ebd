"""Pytest configuration and shared fixtures for the compiler tests."""

import pytest
from tiny_compiler import getSExprParser
from tiny_compiler.ast import source, target


@pytest.fixture
def peg_parser():
    """Create a PEG parser instance for testing."""
    return getSExprParser()


def num(value):
    """Source NumberLiteral shorthand."""
    return source.NumberLiteral(value=value)


def call(name, *params):
    """Source CallExpression shorthand."""
    return source.CallExpression(name=name, params=list(params))


def tcall(name, *arguments):
    """Target CallExpression shorthand."""
    return target.CallExpression(callee=target.Identifier(name=name), arguments=list(arguments))


def tnum(value):
    """Target NumberLiteral shorthand."""
    return target.NumberLiteral(value=value)
