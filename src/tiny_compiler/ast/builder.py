"""Grammar-driven front end: Arpeggio parse tree to the source AST.

This is an independent route from text to the tree the token pipeline
produces. ``parse_source(text)`` returns the same Program as
``parser(tokenizer(text))`` and fails with the same error class.
"""

from __future__ import annotations

from arpeggio import NoMatch, NonTerminal, PTNodeVisitor

from ..errors import CompilerError, ParseError
from ..grammar import getSExprParser
from ..lexer import tokenizer
from . import source
from .nodes import ASTNode


class ASTBuilderVisitor(PTNodeVisitor):
    """
    Visits the parse tree generated by the PEG grammar in grammar.py and builds the source AST.
    """

    def __init__(self, parser):
        """Initialize the visitor with the parser that produced the tree.

        Args:
            parser: The Arpeggio parser instance
        """
        super().__init__()
        self.parser = parser

    def visit_parse_tree(self, parse_tree) -> source.Program:
        """Visit a parse tree and return the source Program.

        Args:
            parse_tree: The root node of an Arpeggio parse tree

        Returns:
            The source Program for the parsed text
        """
        return self._visit_node(parse_tree)

    def _visit_node(self, node):
        """Recursively visit a parse tree node, children first.

        NonTerminal nodes are visited through ``visit_<rule_name>`` when such a
        method exists; otherwise they pass their visited children up as a list,
        which the parent splices into its own children. Terminal nodes without
        a visit method are passed through as the node itself.
        """
        children = []
        if isinstance(node, NonTerminal):
            for child in node:
                child_ast = self._visit_node(child)
                if isinstance(child_ast, list):
                    children.extend(child_ast)
                elif child_ast is not None:
                    children.append(child_ast)

        visit_method = getattr(self, f"visit_{node.rule_name}", None)
        if visit_method is not None:
            return visit_method(node, children)
        if isinstance(node, NonTerminal):
            return children
        return node

    def visit_TOK_NUMBER(self, node, children):
        return source.NumberLiteral(value=node.value)

    def visit_TOK_STRING(self, node, children):
        # The terminal's text includes both quote characters.
        return source.StringLiteral(value=node.value[1:-1])

    def visit_TOK_NAME(self, node, children):
        return node.value

    def visit_atom(self, node, children):
        return children[0]

    def visit_call(self, node, children):
        # Parens come through as Terminal nodes, the name as a plain string.
        name = next(child for child in children if isinstance(child, str))
        params = [child for child in children if isinstance(child, ASTNode)]
        return source.CallExpression(name=name, params=params)

    def visit_sexpr_program(self, node, children) -> source.Program:
        return source.Program(body=[child for child in children if isinstance(child, ASTNode)])


def _error_from_nomatch(code: str, error: NoMatch) -> CompilerError:
    """Translate an Arpeggio NoMatch into the error the token pipeline raises.

    Lexical problems anywhere in the text win over the grammar failure, as
    they do when lexing runs to completion before parsing.
    """
    # Raises LexError for the first bad character, if any.
    tokens = tokenizer(code)

    char_pos = error.position if isinstance(error.position, int) else 0
    for token in tokens:
        if token.position >= char_pos:
            return ParseError(token.kind, token.position)
    return ParseError(None, None)


def parse_source(code: str, parser=None) -> source.Program:
    """Parse text with the PEG grammar and return its source AST.

    Args:
        code: The source text to parse.
        parser: An Arpeggio parser from getSExprParser(). A new one is created
            when omitted.

    Returns:
        The source Program.

    Raises:
        LexError: If the text contains a character that starts no token, or
            an unterminated string.
        ParseError: If the text violates the grammar.

    Example:
        program = parse_source('(write "hi")')
    """
    if parser is None:
        parser = getSExprParser()
    try:
        parse_tree = parser.parse(code)
    except NoMatch as e:
        raise _error_from_nomatch(code, e) from e
    visitor = ASTBuilderVisitor(parser)
    return visitor.visit_parse_tree(parse_tree)
