"""Applying curried function types to argument types.

The unifier here is deliberately restricted. It matches one argument
position of a function type against an actual argument type in two passes,
first binding the argument's variables from the function's shape, then
binding the function's variables from what the argument turned out to be.
There is no occurs check and no renaming of variables, so it is only sound
for selecting one argument at a time out of non-recursive types.
"""

from __future__ import annotations

from typing import Callable

from funtype.logging import get_logger
from funtype.tree import is_node
from funtype.typecheck.errors import LeafAccessError
from funtype.typecheck.substitutions import apply_subst, calc_subst
from funtype.typecheck.types import FT, format_ft

_logger = get_logger(__name__)


def arg(ft: FT) -> FT:
    """The type of the first argument of a function type."""
    if not is_node(ft):
        raise LeafAccessError('arg', ft)
    return ft.left


def ret(ft: FT) -> FT:
    """The type left after the first argument of a function is supplied."""
    if not is_node(ft):
        raise LeafAccessError('ret', ft)
    return ft.right


def unify(at: Callable[[FT], FT], f: FT, x: FT) -> FT:
    """Unify the part of f selected by at with x.

    The bindings found are applied to the whole of f. at must only select a
    subtree; it must not build a new one."""
    f_ = at(f)
    x_ = apply_subst(x, calc_subst(f_, x))
    subst = calc_subst(x_, f_)
    _logger.debug(
        'unified {} with {}: {}', _Formatted(f_), _Formatted(x), subst
    )
    return apply_subst(f, subst)


def apply(f: FT, x: FT) -> FT:
    """The type of the result of applying a function of type f to an x."""
    result = ret(unify(arg, f, x))
    _logger.debug(
        'applied {} to {}, got {}',
        _Formatted(f),
        _Formatted(x),
        _Formatted(result),
    )
    return result


def apply_all(f: FT, *xs: FT) -> FT:
    for x in xs:
        f = apply(f, x)
    return f


class _Formatted:
    def __init__(self, ft: FT) -> None:
        self._ft = ft

    def __str__(self) -> str:
        return format_ft(self._ft)


__all__ = [
    'apply',
    'apply_all',
    'arg',
    'ret',
    'unify',
]
