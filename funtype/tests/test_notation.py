import unittest

import parsy
from hypothesis import given

from funtype.notation import parse_ft, parse_typ
from funtype.tests.strategies import function_types, typ_pluses
from funtype.tree import tree
from funtype.typecheck.types import (
    ANY,
    FT,
    TypPlus,
    format,
    format_ft,
    typ,
    typvar,
)

a = typvar('a')
b = typvar('b')
num = typ('Num')


def seq(t: TypPlus) -> TypPlus:
    return typ('Seq', [t])


class TestParseFT(unittest.TestCase):
    def test_leaf(self) -> None:
        self.assertEqual(tree(num), parse_ft('Num'))

    def test_curried(self) -> None:
        self.assertEqual(tree(num, num, num), parse_ft('Num -> Num -> Num'))

    def test_higher_order(self) -> None:
        self.assertEqual(
            tree(seq(a), tree(a, b), seq(b)),
            parse_ft('Seq a -> (a -> b) -> Seq b'),
        )

    def test_parenthesized_leaf(self) -> None:
        self.assertEqual(tree(seq(a), b), parse_ft('(Seq a) -> b'))

    def test_whitespace(self) -> None:
        self.assertEqual(tree(a, b), parse_ft('  a->b  '))

    def test_wildcard(self) -> None:
        self.assertEqual(tree(seq(ANY), ANY), parse_ft('Seq Any -> Any'))

    def test_tag_starting_with_any(self) -> None:
        self.assertEqual(tree(typ('Anything')), parse_ft('Anything'))

    def test_nested_parameters(self) -> None:
        self.assertEqual(
            tree(typ('Map', [typ('Str'), seq(num)])),
            parse_ft('Map Str (Seq Num)'),
        )

    def test_unbalanced_parentheses(self) -> None:
        with self.assertRaises(parsy.ParseError):
            parse_ft('(a -> b')

    def test_dangling_arrow(self) -> None:
        with self.assertRaises(parsy.ParseError):
            parse_ft('a ->')

    def test_function_as_parameter(self) -> None:
        with self.assertRaises(parsy.ParseError):
            parse_ft('Seq (a -> b)')

    @given(function_types)
    def test_reads_what_format_ft_prints(self, ft: FT) -> None:
        self.assertEqual(ft, parse_ft(format_ft(ft)))


class TestParseTyp(unittest.TestCase):
    def test_typ(self) -> None:
        self.assertEqual(seq(a), parse_typ('Seq a'))

    def test_not_a_function(self) -> None:
        with self.assertRaises(parsy.ParseError):
            parse_typ('a -> b')

    @given(typ_pluses)
    def test_reads_what_format_prints(self, t: TypPlus) -> None:
        self.assertEqual(t, parse_typ(format(t)))
