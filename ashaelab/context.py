"""Local and metavariable contexts used during elaboration."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from ashaelab.names import Unique, UniqueGen
from ashaelab.terms import Term


@dataclass(frozen=True)
class LocalDecl:
    """A free variable in scope, with its type and, for lets, its value."""

    fvar: Unique
    type_: Term
    value: Optional[Term] = None


@dataclass
class LocalContext:
    """The free variables in scope, innermost last."""

    decls: list[LocalDecl] = field(default_factory=list)

    def __copy__(self) -> LocalContext:
        return LocalContext(list(self.decls))

    def push_binder(self, name: str, type_: Term, gen: UniqueGen) -> Unique:
        """Bring a new variable named ``name`` into scope and return it."""
        fvar = gen.fresh(name)
        self.decls.append(LocalDecl(fvar, type_))
        return fvar

    def push_let(self, name: str, type_: Term, value: Term, gen: UniqueGen) -> Unique:
        """Bring a new variable with a known value into scope and return it."""
        fvar = gen.fresh(name)
        self.decls.append(LocalDecl(fvar, type_, value))
        return fvar

    def lookup(self, fvar: Unique) -> Optional[LocalDecl]:
        """The declaration of ``fvar``, if it is in scope."""
        return next((d for d in self.decls if d.fvar == fvar), None)

    def lookup_name(self, name: str) -> Optional[LocalDecl]:
        """The innermost declaration shown as ``name``, if any."""
        return next(
            (d for d in reversed(self.decls) if d.fvar.display_name == name), None
        )


@dataclass(frozen=True)
class MetavarDecl:
    """A metavariable with its type and the local context it was made in."""

    mvar: Unique
    type_: Term
    lctx: LocalContext


@dataclass
class MetavarContext:
    """Metavariables created so far and the values assigned to them."""

    decls: list[MetavarDecl] = field(default_factory=list)
    assignments: dict[Unique, Term] = field(default_factory=dict)

    def fresh_mvar(self, type_: Term, lctx: LocalContext, gen: UniqueGen) -> Unique:
        """Create an unassigned metavariable of ``type_`` under ``lctx``."""
        mvar = gen.fresh_unnamed()
        self.decls.append(MetavarDecl(mvar, type_, copy.copy(lctx)))
        return mvar

    def assign(self, mvar: Unique, value: Term) -> None:
        """Assign ``value`` to ``mvar``; a metavariable is assigned only once."""
        if mvar in self.assignments:
            raise ValueError("mvar already assigned")
        self.assignments[mvar] = value

    def is_assigned(self, mvar: Unique) -> bool:
        return mvar in self.assignments

    def get_assignment(self, mvar: Unique) -> Optional[Term]:
        return self.assignments.get(mvar)

    def lookup_decl(self, mvar: Unique) -> Optional[MetavarDecl]:
        return next((d for d in self.decls if d.mvar == mvar), None)