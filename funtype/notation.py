"""Reading function types from text.

The notation is the one `format_ft` prints:

    Seq a -> (a -> b) -> Seq b

Names that start with an uppercase letter are type tags, names that start
with a lowercase letter (or an underscore) are variables and `Any` is the
wildcard. Parameters that have parameters of their own are parenthesized, as
in `Seq (Map Str Num)`.
"""

from typing import Generator

import parsy

from funtype.tree import Leaf, Node
from funtype.typecheck.types import ANY, FT, Typ, TypPlus, TypVar

_whitespace = parsy.regex(r'\s*')


def _lexeme(p: parsy.Parser) -> parsy.Parser:
    return p << _whitespace


_arrow = _lexeme(parsy.string('->'))
_lpar = _lexeme(parsy.string('('))
_rpar = _lexeme(parsy.string(')'))
_wildcard = _lexeme(parsy.regex(r'Any\b')).result(ANY)
_tag = _lexeme(parsy.regex(r'[A-Z][A-Za-z0-9_]*'))
_var = _lexeme(parsy.regex(r'[a-z_][A-Za-z0-9_]*')).map(TypVar)


@parsy.generate
def _param_parser() -> Generator:
    return (
        yield _wildcard
        | _var
        | _tag.map(Typ)
        | _lpar >> _leaf_parser << _rpar
    )


@parsy.generate
def _leaf_parser() -> Generator:
    return (
        yield _wildcard
        | _var
        | parsy.seq(_tag, _param_parser.many()).combine(
            lambda tag, params: Typ(tag, tuple(params))
        )
    )


@parsy.generate
def _ft_parser() -> Generator:
    argument = yield _lpar >> _ft_parser << _rpar | _leaf_parser.map(Leaf)
    rest = yield (_arrow >> _ft_parser).optional()
    if rest is None:
        return argument
    return Node(argument, rest)


def parse_ft(text: str) -> FT:
    """Read a function type. Raises parsy.ParseError on malformed text."""
    return (_whitespace >> _ft_parser).parse(text)


def parse_typ(text: str) -> TypPlus:
    """Read a single type, which can't be a function type."""
    return (_whitespace >> _leaf_parser).parse(text)
