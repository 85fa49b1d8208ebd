"""The compiler: lexer, parser, transformer and code generator in sequence."""

from __future__ import annotations

import logging

from .codegen import code_generator
from .lexer import tokenizer
from .syntax import parser
from .transform import transformer

logger = logging.getLogger(__name__)


def compiler(text: str) -> str:
    """Compile prefix call source text into C-style call statements.

    Errors from any stage propagate unchanged and abort the remaining stages.

    Example:
        >>> compiler("(add 2 (subtract 4 2))")
        'add(2, subtract(4, 2));'
    """
    tokens = tokenizer(text)
    logger.debug("tokenized %d characters into %d tokens", len(text), len(tokens))

    ast = parser(tokens)
    logger.debug("parsed %d top-level expressions", len(ast.body))

    new_ast = transformer(ast)
    logger.debug("transformed into %d statements", len(new_ast.body))

    output = code_generator(new_ast)
    logger.debug("generated %d characters of output", len(output))
    return output
