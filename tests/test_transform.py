"""Tests for the source-to-target transformer."""

from tiny_compiler import Visitor, parser, tokenizer, transformer, traverser
from tiny_compiler.ast import NodeKind, source, target

from conftest import call, num, tcall, tnum


def _transform(code):
    return transformer(parser(tokenizer(code)))


def _count_calls(tree):
    count = []
    traverser(tree, {NodeKind.CALL_EXPRESSION: Visitor(exit=lambda n, p, c: count.append(n))})
    return len(count)


def _all_nodes(tree):
    nodes = []
    traverser(tree, {kind: Visitor(enter=lambda n, p, c: nodes.append(n)) for kind in NodeKind})
    return nodes


SAMPLES = [
    "",
    "42",
    "(f)",
    "(add 2 (subtract 4 2))",
    '(a (b) (c "x" (d 1 2)) 3) (e) "s" 7',
    "(f (g (h (i (j 1)))))",
]


class TestTransformer:
    """Test target trees built from source trees."""

    def test_nested_call(self):
        """Test that the outer call is wrapped and the nested one is not."""
        ast = source.Program(body=[
            call("add", num("2"), call("subtract", num("4"), num("2"))),
        ])
        assert transformer(ast) == target.Program(body=[
            target.ExpressionStatement(expression=tcall(
                "add", tnum("2"), tcall("subtract", tnum("4"), tnum("2")),
            )),
        ])

    def test_string_argument(self):
        assert _transform('(write "hi")') == target.Program(body=[
            target.ExpressionStatement(expression=tcall("write", target.StringLiteral(value="hi"))),
        ])

    def test_empty_program(self):
        assert transformer(source.Program()) == target.Program(body=[])

    def test_top_level_literal_becomes_statement(self):
        """Test that bare top-level atoms are wrapped like top-level calls."""
        assert _transform('42 "s"') == target.Program(body=[
            target.ExpressionStatement(expression=tnum("42")),
            target.ExpressionStatement(expression=target.StringLiteral(value="s")),
        ])

    def test_source_tree_is_untouched(self):
        ast = parser(tokenizer("(a 1 (b 2))"))
        before = parser(tokenizer("(a 1 (b 2))"))
        transformer(ast)
        assert ast == before

    def test_no_shared_nodes(self):
        """Test that no node object appears in both trees."""
        ast = parser(tokenizer('(a 1 "x" (b 2))'))
        new_ast = transformer(ast)
        source_ids = {id(node) for node in _all_nodes(ast)}
        assert not source_ids & {id(node) for node in _all_nodes(new_ast)}

    def test_repeated_transforms_are_independent(self):
        ast = parser(tokenizer("(a 1)"))
        first = transformer(ast)
        second = transformer(ast)
        assert first == second
        assert first.body[0].expression.arguments is not second.body[0].expression.arguments


class TestTransformerInvariants:
    """Test structural properties over a set of sample programs."""

    def test_call_count_preserved(self):
        for code in SAMPLES:
            ast = parser(tokenizer(code))
            assert _count_calls(ast) == _count_calls(transformer(ast)), code

    def test_statements_only_at_top_level(self):
        for code in SAMPLES:
            new_ast = _transform(code)
            assert all(isinstance(node, target.ExpressionStatement) for node in new_ast.body), code
            for node in _all_nodes(new_ast):
                if isinstance(node, target.CallExpression):
                    assert not any(isinstance(argument, target.ExpressionStatement)
                                   for argument in node.arguments), code

    def test_argument_order_matches_params(self):
        def shape(node):
            if isinstance(node, source.CallExpression):
                return (node.name, [shape(param) for param in node.params])
            if isinstance(node, target.ExpressionStatement):
                return shape(node.expression)
            if isinstance(node, target.CallExpression):
                return (node.callee.name, [shape(argument) for argument in node.arguments])
            return node.value

        for code in SAMPLES:
            ast = parser(tokenizer(code))
            new_ast = transformer(ast)
            assert [shape(node) for node in ast.body] == [shape(node) for node in new_ast.body], code
