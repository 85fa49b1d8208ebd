#######################################################################
# Compiler from a prefix call language to C-style call statements
#######################################################################

from .grammar import getSExprParser
from .errors import (
    CompilerError,
    LexError,
    ParseError,
    TraversalError,
    CodeGenError,
    format_syntax_error,
    line_column,
)
from .lexer import Token, TokenKind, tokenizer
from .syntax import parser
from .traversal import Visitor, traverser
from .transform import transformer
from .codegen import code_generator
from .pipeline import compiler


# vim: set ts=4 sw=4 expandtab:
