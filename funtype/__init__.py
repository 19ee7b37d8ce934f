"""Curried function types and their application to argument types."""

from funtype.notation import parse_ft, parse_typ
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
from funtype.typecheck import apply, apply_all, arg, ret, unify
from funtype.typecheck.context import ConflictPolicy, change_settings
from funtype.typecheck.errors import (
    LeafAccessError,
    TypeApplicationError,
    TypeMismatch,
)
from funtype.typecheck.types import (
    ANY,
    FT,
    AnyConstraint,
    Typ,
    TypPlus,
    TypVar,
    any,
    format,
    format_ft,
    free_variables,
    typ,
    typvar,
)

from funtype._version import version
