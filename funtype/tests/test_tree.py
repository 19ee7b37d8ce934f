from funtype.tests.strategies import int_trees, trees
from funtype.tree import (
    Leaf,
    Node,
    Tree,
    ZipShapeMismatch,
    fmap,
    is_node,
    leaves,
    reduce,
    tree,
    zip,
)
from funtype.typecheck.types import ANY, typ, typvar
from hypothesis import given
import hypothesis.strategies as st
from typing import Callable
import copy
import pickle
import unittest


int_functions = st.functions(
    like=lambda x: x, returns=st.integers(), pure=True
)


class TestConstruction(unittest.TestCase):
    def test_single_element_is_a_leaf(self) -> None:
        self.assertEqual(Leaf(1), tree(1))

    def test_right_associated(self) -> None:
        self.assertEqual(
            Node(Leaf(1), Node(Leaf(2), Leaf(3))), tree(1, 2, 3)
        )

    def test_subtrees_are_not_wrapped(self) -> None:
        self.assertEqual(
            Node(Node(Leaf('a'), Leaf('a')), Leaf('b')),
            tree(tree('a', 'a'), 'b'),
        )

    def test_single_tree_is_returned_as_is(self) -> None:
        t = tree(1, 2)
        self.assertIs(t, tree(t))

    def test_empty(self) -> None:
        with self.assertRaises(ValueError):
            tree()

    def test_is_node(self) -> None:
        self.assertTrue(is_node(tree(1, 2)))
        self.assertFalse(is_node(tree(1)))

    def test_immutable(self) -> None:
        t = tree(1, 2)
        assert isinstance(t, Node)
        with self.assertRaises(AttributeError):
            t.left = Leaf(3)  # type: ignore
        with self.assertRaises(AttributeError):
            t._left = Leaf(3)  # type: ignore

    def test_equality_is_structural(self) -> None:
        self.assertEqual(tree(1, 2, 3), tree(1, 2, 3))
        self.assertNotEqual(tree(1, 2, 3), tree(tree(1, 2), 3))
        self.assertNotEqual(Leaf(1), Node(Leaf(1), Leaf(1)))
        self.assertEqual(hash(tree(1, 2, 3)), hash(tree(1, 2, 3)))

    def test_repr(self) -> None:
        self.assertEqual(
            'Node(Leaf(1), Node(Leaf(2), Leaf(3)))', repr(tree(1, 2, 3))
        )

    def test_deepcopy(self) -> None:
        t = tree(1, tree(2, 3))
        copied = copy.deepcopy(t)
        self.assertEqual(t, copied)
        self.assertIsNot(t, copied)

    def test_deepcopy_of_function_type(self) -> None:
        ft = tree(typ('Seq', [typvar('a')]), tree(ANY, typ('Num')))
        self.assertEqual(ft, copy.deepcopy(ft))

    @given(int_trees)
    def test_pickle(self, t: Tree[int]) -> None:
        self.assertEqual(t, pickle.loads(pickle.dumps(t)))


class TestFunctor(unittest.TestCase):
    def test_fmap(self) -> None:
        self.assertEqual(tree(2, 3, 4), fmap(lambda x: x + 1, tree(1, 2, 3)))

    @given(int_trees)
    def test_identity(self, t: Tree[int]) -> None:
        self.assertEqual(t, fmap(lambda x: x, t))

    @given(int_trees, int_functions, int_functions)
    def test_composition(
        self,
        t: Tree[int],
        f: Callable[[int], int],
        g: Callable[[int], int],
    ) -> None:
        self.assertEqual(
            fmap(lambda x: g(f(x)), t), fmap(g, fmap(f, t))
        )

    @given(int_trees)
    def test_shape_is_preserved(self, t: Tree[int]) -> None:
        self.assertEqual(
            fmap(lambda _: None, t),
            fmap(lambda _: None, fmap(str, t)),
        )


class TestReduce(unittest.TestCase):
    def test_sum(self) -> None:
        self.assertEqual(6, reduce(lambda x, y: x + y, tree(1, 2, 3)))

    def test_order(self) -> None:
        self.assertEqual(
            'a(b(c))',
            reduce(lambda x, y: f'{x}({y})', tree('a', 'b', 'c')),
        )

    @given(st.integers())
    def test_leaf_does_not_call_f(self, x: int) -> None:
        def f(a: int, b: int) -> int:
            raise AssertionError('f was called')

        self.assertEqual(x, reduce(f, tree(x)))

    @given(int_trees)
    def test_agrees_with_leaves(self, t: Tree[int]) -> None:
        self.assertEqual(sum(leaves(t)), reduce(lambda x, y: x + y, t))


class TestZip(unittest.TestCase):
    def test_zip(self) -> None:
        self.assertEqual(
            tree((1, 'a'), (2, 'b'), (3, 'c')),
            zip(tree(1, 2, 3), tree('a', 'b', 'c')),
        )

    @given(int_trees)
    def test_zip_with_self(self, t: Tree[int]) -> None:
        self.assertEqual(fmap(lambda x: (x, x), t), zip(t, t))

    def test_leaf_against_node(self) -> None:
        with self.assertRaises(ZipShapeMismatch) as cm:
            zip(tree(1), tree(1, 2))
        self.assertEqual(Leaf(1), cm.exception.left)
        self.assertEqual(tree(1, 2), cm.exception.right)

    def test_nested_mismatch_carries_subtrees(self) -> None:
        with self.assertRaises(ZipShapeMismatch) as cm:
            zip(tree(1, tree(2, 3), 4), tree(1, 2, 3))
        self.assertEqual(tree(2, 3), cm.exception.left)
        self.assertEqual(Leaf(2), cm.exception.right)

    @given(trees(st.integers()), trees(st.integers()))
    def test_zip_succeeds_iff_same_shape(
        self, l: Tree[int], r: Tree[int]
    ) -> None:
        same_shape = fmap(lambda _: None, l) == fmap(lambda _: None, r)
        try:
            zip(l, r)
        except ZipShapeMismatch:
            self.assertFalse(same_shape)
        else:
            self.assertTrue(same_shape)


class TestLeaves(unittest.TestCase):
    def test_left_to_right(self) -> None:
        self.assertListEqual(
            [1, 2, 3, 4], list(leaves(tree(tree(1, 2), 3, 4)))
        )
