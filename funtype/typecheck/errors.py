from __future__ import annotations

import builtins
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from funtype.typecheck.types import FT, TypPlus


class TypeApplicationError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TypeMismatch(TypeApplicationError, builtins.TypeError):
    """Two types that were expected to line up do not.

    `left` and `right` are the offending values, in the order they were
    compared."""

    def __init__(
        self, message: str, left: TypPlus, right: TypPlus
    ) -> None:
        super().__init__(message)
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f'TypeMismatch({self.message!r}, left={
            self.left!r
        }, right={self.right!r})'


class LeafAccessError(TypeApplicationError, builtins.LookupError):
    def __init__(self, accessor: str, ft: FT) -> None:
        super().__init__(format_leaf_access_error(accessor, ft))
        self.accessor = accessor
        self.ft = ft


def format_type_mismatch_error(left: TypPlus, right: TypPlus) -> str:
    return f'Type mismatch: {left} cannot be matched with {right}'


def format_arity_mismatch_error(left: TypPlus, right: TypPlus) -> str:
    return (
        f'Type mismatch: {left} and {right} have different numbers of type '
        'parameters'
    )


def format_conflicting_bindings_error(
    var: str, existing: TypPlus, new: TypPlus
) -> str:
    return f'{var} is already bound to {existing}, cannot also bind it to {
        new
    }'


def format_leaf_access_error(accessor: str, ft: FT) -> str:
    from funtype.typecheck.types import format_ft

    return f'Called "{accessor}" on a leaf: {format_ft(ft)} is not a function type'
