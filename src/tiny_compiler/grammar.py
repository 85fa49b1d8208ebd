#######################################################################
# Arpeggio PEG Grammar for the prefix call language
#######################################################################

from arpeggio import ParserPython, ZeroOrMore, EOF, RegExMatch as _


# Every character str.isspace() accepts, so the grammar skips exactly what
# the tokenizer skips. None lies above U+3000.
WHITESPACE = ''.join(ch for ch in map(chr, range(0x3001)) if ch.isspace())


# --- The parser ---

def getSExprParser(debug=False):
    """Create a parser instance for the prefix call language.

    Args:
        debug: If True, enable Arpeggio's debug output (default: False)

    Returns:
        ParserPython instance whose parse() yields an Arpeggio parse tree
    """
    return ParserPython(
        sexpr_program, ws=WHITESPACE, reduce_tree=False,
        memoization=True, debug=debug
    )


# --- Language parsing root ---

def sexpr_program():
    return (ZeroOrMore(atom), EOF)


# --- Lexical rules ---

def TOK_PAREN():
    return '('


def TOK_ENDPAREN():
    return ')'


def TOK_NUMBER():
    return _(r'[0-9]+', str_repr='number')


def TOK_STRING():
    return _(r'"[^"]*"', str_repr='string')


def TOK_NAME():
    return _(r'[A-Za-z]+', str_repr='name')


# --- Grammar rules ---

def atom():
    return [TOK_NUMBER, TOK_STRING, call]


def call():
    return (TOK_PAREN, TOK_NAME, ZeroOrMore(atom), TOK_ENDPAREN)


# vim: set ts=4 sw=4 expandtab:
