"""Persistent binary trees.

A tree is either a `Leaf` holding a value or a `Node` owning two subtrees.
Trees are never mutated: every operation here builds a new tree.
"""

from __future__ import annotations

import abc
from typing import (
    Callable,
    Generic,
    Iterator,
    Tuple,
    TypeVar,
    Union,
)

from typing_extensions import TypeIs

_T_co = TypeVar('_T_co', covariant=True)
_T = TypeVar('_T')
_U = TypeVar('_U')


class Tree(Generic[_T_co], abc.ABC):
    __slots__ = ()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'{type(self).__name__} is immutable')

    @abc.abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abc.abstractmethod
    def __hash__(self) -> int:
        pass


class Leaf(Tree[_T_co]):
    __slots__ = ('_value',)

    def __init__(self, value: _T_co) -> None:
        object.__setattr__(self, '_value', value)

    @property
    def value(self) -> _T_co:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return isinstance(other, Leaf) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Leaf, self._value))

    def __repr__(self) -> str:
        return f'Leaf({self._value!r})'

    def __reduce__(self):
        return (Leaf, (self._value,))


class Node(Tree[_T_co]):
    __slots__ = ('_left', '_right')

    def __init__(self, left: Tree[_T_co], right: Tree[_T_co]) -> None:
        object.__setattr__(self, '_left', left)
        object.__setattr__(self, '_right', right)

    @property
    def left(self) -> Tree[_T_co]:
        return self._left

    @property
    def right(self) -> Tree[_T_co]:
        return self._right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return (
            isinstance(other, Node)
            and self._left == other._left
            and self._right == other._right
        )

    def __hash__(self) -> int:
        return hash((Node, self._left, self._right))

    def __repr__(self) -> str:
        return f'Node({self._left!r}, {self._right!r})'

    def __reduce__(self):
        return (Node, (self._left, self._right))


class ZipShapeMismatch(ValueError):
    """Raised when zipping a leaf against a node."""

    def __init__(self, left: Tree[object], right: Tree[object]) -> None:
        super().__init__(
            f'Zipping a leaf with a node. left={left!r} right={right!r}'
        )
        self.left = left
        self.right = right


def tree(*xs: Union[_T, Tree[_T]]) -> Tree[_T]:
    """Build a right-associated tree.

    Plain values become leaves and trees are used as subtrees, so
    `tree(1, 2, 3)` is `Node(Leaf(1), Node(Leaf(2), Leaf(3)))` and
    `tree(1)` is just `Leaf(1)`."""
    if not xs:
        raise ValueError('tree() needs at least one element')
    *init, last = xs
    result = _as_tree(last)
    for x in reversed(init):
        result = Node(_as_tree(x), result)
    return result


def _as_tree(x: Union[_T, Tree[_T]]) -> Tree[_T]:
    if isinstance(x, Tree):
        return x
    return Leaf(x)


def is_node(t: Tree[_T]) -> TypeIs[Node[_T]]:
    return isinstance(t, Node)


def fmap(f: Callable[[_T], _U], t: Tree[_T]) -> Tree[_U]:
    if is_node(t):
        return Node(fmap(f, t.left), fmap(f, t.right))
    assert isinstance(t, Leaf)
    return Leaf(f(t.value))


def reduce(f: Callable[[_T, _T], _T], t: Tree[_T]) -> _T:
    """Fold a tree bottom-up. `f` is never called for a single leaf."""
    if is_node(t):
        return f(reduce(f, t.left), reduce(f, t.right))
    assert isinstance(t, Leaf)
    return t.value


def zip(l: Tree[_T], r: Tree[_U]) -> Tree[Tuple[_T, _U]]:
    if is_node(l) and is_node(r):
        return Node(zip(l.left, r.left), zip(l.right, r.right))
    if isinstance(l, Leaf) and isinstance(r, Leaf):
        return Leaf((l.value, r.value))
    raise ZipShapeMismatch(l, r)


def leaves(t: Tree[_T]) -> Iterator[_T]:
    """Yield leaf values from left to right."""
    if is_node(t):
        yield from leaves(t.left)
        yield from leaves(t.right)
    else:
        assert isinstance(t, Leaf)
        yield t.value
