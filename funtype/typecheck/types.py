"""The values a function-type tree is built from.

A leaf of a function-type tree (`FT`) holds one of three things:

- `Typ`, a concrete type such as `Num` or `Seq a`,
- `ANY`, the wildcard that carries no information,
- `TypVar`, a placeholder for a type that is not known yet.

A `Node` of an `FT` is a function type: its left child is the type of the
first argument, its right child is the type of whatever is left after that
argument has been supplied.
"""

from __future__ import annotations

import dataclasses
from typing import (
    Callable,
    Iterable,
    List,
    Tuple,
    Union,
    assert_never,
)

from funtype.tree import Leaf, Tree, is_node, leaves


@dataclasses.dataclass(frozen=True)
class Typ:
    tag: str
    params: Tuple[TypPlus, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.params, tuple):
            object.__setattr__(self, 'params', tuple(self.params))

    def __str__(self) -> str:
        return format(self)


class AnyConstraint:
    """The wildcard. There is exactly one instance, `ANY`."""

    _instance: AnyConstraint | None = None

    def __new__(cls) -> AnyConstraint:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __reduce__(self) -> str:
        return 'ANY'

    def __repr__(self) -> str:
        return 'ANY'

    def __str__(self) -> str:
        return format(self)


ANY = AnyConstraint()


@dataclasses.dataclass(frozen=True)
class TypVar:
    id: str

    def __str__(self) -> str:
        return format(self)


type TypPlus = Union[Typ, AnyConstraint, TypVar]

type FT = Tree[TypPlus]


def typ(tag: str, params: Iterable[TypPlus] = ()) -> Typ:
    return Typ(tag, tuple(params))


def any() -> AnyConstraint:
    return ANY


def typvar(id: str) -> TypVar:
    return TypVar(id)


def format(t: TypPlus) -> str:
    if isinstance(t, Typ):
        return ' '.join([t.tag, *map(_format_param, t.params)])
    if isinstance(t, AnyConstraint):
        return 'Any'
    if isinstance(t, TypVar):
        return t.id
    assert_never(t)


def _format_param(t: TypPlus) -> str:
    if isinstance(t, Typ) and t.params:
        return f'({format(t)})'
    return format(t)


def format_ft(ft: FT) -> str:
    if is_node(ft):
        left = format_ft(ft.left)
        if is_node(ft.left):
            left = f'({left})'
        return f'{left} -> {format_ft(ft.right)}'
    assert isinstance(ft, Leaf)
    return format(ft.value)


def replace_variables(f: Callable[[TypVar], TypPlus], t: TypPlus) -> TypPlus:
    """Replace every variable in t, including those nested in parameters."""
    if isinstance(t, Typ):
        return Typ(t.tag, tuple(replace_variables(f, p) for p in t.params))
    if isinstance(t, AnyConstraint):
        return t
    if isinstance(t, TypVar):
        return f(t)
    assert_never(t)


def strip_variables(t: TypPlus) -> TypPlus:
    """Replace all variables in t with the wildcard."""
    return replace_variables(lambda _: ANY, t)


def free_variables(ft: FT) -> List[str]:
    found: List[str] = []

    def collect(v: TypVar) -> TypPlus:
        if v.id not in found:
            found.append(v.id)
        return v

    for t in leaves(ft):
        replace_variables(collect, t)
    return found
