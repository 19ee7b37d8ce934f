"""Substitution representation and operations.

Substitutions are computed by zipping two function-type trees together and
matching up the leaves. Matching is one-directional: only variables of the
right-hand tree get bound.

- calc_subst(A -> B, x -> y) = {x: A, y: B}
- calc_subst(x -> y, A -> B) = {}
"""

from __future__ import annotations

from typing import (
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Tuple,
    Union,
    assert_never,
)

from funtype.logging import get_logger
from funtype.tree import fmap, reduce, zip
from funtype.typecheck.context import ConflictPolicy, current_settings
from funtype.typecheck.errors import (
    TypeMismatch,
    format_arity_mismatch_error,
    format_conflicting_bindings_error,
    format_type_mismatch_error,
)
from funtype.typecheck.types import (
    ANY,
    FT,
    AnyConstraint,
    Typ,
    TypPlus,
    TypVar,
    replace_variables,
    strip_variables,
)

_logger = get_logger(__name__)


class Substitutions(Mapping[str, TypPlus]):
    """Bindings of type variable names to types.

    A bound type never mentions a variable itself; see `calc_subst_typ`."""

    def __init__(
        self,
        sub: Union[
            Iterable[Tuple[str, TypPlus]],
            Mapping[str, TypPlus],
            None,
        ] = None,
    ) -> None:
        self._sub: Dict[str, TypPlus] = {} if sub is None else dict(sub)

    def __getitem__(self, var: str) -> TypPlus:
        return self._sub[var]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sub)

    def __len__(self) -> int:
        return len(self._sub)

    def __str__(self) -> str:
        return f'{{{', '.join(f'{var}: {ty}' for var, ty in self.items())}}}'

    def __repr__(self) -> str:
        return f'Substitutions({self._sub!r})'

    def add(self, var: str, ty: TypPlus) -> None:
        """Bind var to ty, or refine the existing binding of var."""
        prev = self._sub.get(var)
        if prev is None or prev is ANY:
            self._sub[var] = ty
            return
        if prev == ty or ty is ANY:
            return
        policy = current_settings.get().conflict_policy
        if policy is ConflictPolicy.KEEP_FIRST:
            _logger.debug(
                'keeping {} = {}, ignoring conflicting {}', var, prev, ty
            )
            return
        if policy is ConflictPolicy.REJECT:
            met = _meet(prev, ty)
            if met is None:
                raise TypeMismatch(
                    format_conflicting_bindings_error(var, prev, ty),
                    prev,
                    ty,
                )
            self._sub[var] = met
            return
        assert_never(policy)

    def merge(self, other: Mapping[str, TypPlus]) -> Substitutions:
        """Add every binding of other to self, in place."""
        for var, ty in other.items():
            self.add(var, ty)
        return self


def _meet(l: TypPlus, r: TypPlus) -> Optional[TypPlus]:
    """Combine two bindings, filling each one's wildcards from the other.

    None if they disagree somewhere that neither has a wildcard."""
    if l is ANY:
        return r
    if r is ANY or l == r:
        return l
    if (
        isinstance(l, Typ)
        and isinstance(r, Typ)
        and l.tag == r.tag
        and len(l.params) == len(r.params)
    ):
        params = []
        for lp, rp in _zip_params(l, r):
            met = _meet(lp, rp)
            if met is None:
                return None
            params.append(met)
        return Typ(l.tag, tuple(params))
    return None


def _zip_params(l: Typ, r: Typ) -> Iterator[Tuple[TypPlus, TypPlus]]:
    return (
        (l.params[i], r.params[i])
        for i in range(min(len(l.params), len(r.params)))
    )


def merge_subst(x: Substitutions, y: Substitutions) -> Substitutions:
    return x.merge(y)


def merge_substs(xs: Iterable[Substitutions]) -> Substitutions:
    result = Substitutions()
    for x in xs:
        result.merge(x)
    return result


def calc_subst(l: FT, r: FT) -> Substitutions:
    """Compute the bindings that make r's variables match l.

    Raises ZipShapeMismatch if l and r have different shapes."""
    zipped = zip(l, r)
    substs = fmap(lambda pair: calc_subst_typ(*pair), zipped)
    return reduce(merge_subst, substs)


def calc_subst_typ(l: TypPlus, r: TypPlus) -> Substitutions:
    # A, B: compare structurally
    if isinstance(l, Typ) and isinstance(r, Typ):
        return _calc_subst_concrete_typ(l, r)
    # Any: nothing to learn
    if isinstance(l, AnyConstraint) or isinstance(r, AnyConstraint):
        return Substitutions()
    # a, *: variables on the left are not propagated right
    if isinstance(l, TypVar):
        return Substitutions()
    # *, a
    if isinstance(r, TypVar):
        return Substitutions({r.id: strip_variables(l)})
    raise TypeMismatch(format_type_mismatch_error(l, r), l, r)


def _calc_subst_concrete_typ(l: Typ, r: Typ) -> Substitutions:
    if l.tag != r.tag:
        raise TypeMismatch(format_type_mismatch_error(l, r), l, r)
    if len(l.params) != len(r.params):
        raise TypeMismatch(format_arity_mismatch_error(l, r), l, r)
    return merge_substs(
        calc_subst_typ(lp, rp) for lp, rp in _zip_params(l, r)
    )


def apply_subst(ft: FT, subst: Mapping[str, TypPlus]) -> FT:
    """Replace the variables of ft that subst binds. Others are left as is."""

    def replace(v: TypVar) -> TypPlus:
        return subst.get(v.id, v)

    return fmap(lambda t: replace_variables(replace, t), ft)
