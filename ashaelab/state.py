"""Mutable state threaded through elaboration of one module."""

from __future__ import annotations

import copy
from typing import Optional, Sequence

from ashaelab.context import LocalContext, MetavarContext
from ashaelab.environment import Environment, Namespace
from ashaelab.errors import ElabError
from ashaelab.names import ModuleId, QualifiedName, Unique, UniqueGen
from ashaelab.reduce import whnf
from ashaelab.subst import abstract_fvar, instantiate
from ashaelab.terms import App, BinderInfo, FVar, MVar, Pi, Term
from ashaelab.unify import is_def_eq

BinderFVar = tuple[Unique, BinderInfo, Term]


class ElabState:
    """Environment, contexts, name scopes and collected errors of an elaboration."""

    def __init__(self, module_id: ModuleId) -> None:
        self.env = Environment(module_id)
        self.gen = UniqueGen(module_id)
        self.mctx = MetavarContext()
        self.lctx = LocalContext()
        self.current_namespace: list[str] = []
        self.open_namespaces: list[list[str]] = []
        self.errors: list[ElabError] = []

    @classmethod
    def pre_loaded(cls, module_id: ModuleId) -> ElabState:
        """A state whose environment already holds the built-in declarations."""
        state = cls(module_id)
        state.env = Environment.pre_loaded(module_id)
        return state

    def fresh_mvar(self, type_: Term) -> MVar:
        """A new metavariable of ``type_`` made under the current local context."""
        return MVar(self.mctx.fresh_mvar(type_, self.lctx, self.gen))

    def fresh_fvar(self, name: str, type_: Term) -> tuple[Unique, FVar]:
        """Bring a new variable into scope; return its unique and its term."""
        unique = self.lctx.push_binder(name, type_, self.gen)
        return unique, FVar(unique)

    def _erroneous_term(self) -> MVar:
        return MVar(self.gen.fresh_unnamed())

    def _snapshot_lctx(self) -> LocalContext:
        return copy.copy(self.lctx)

    def resolve_name(
        self, namespace: Sequence[str], member: str
    ) -> Optional[tuple[QualifiedName, Term]]:
        """Find ``member`` and its type.

        A given namespace is searched alone; otherwise the current namespace,
        then each opened namespace, then the root are tried in turn.
        """
        root = self.env.root_namespace

        if namespace:
            qname = root.resolve(list(namespace), member)
            return None if qname is None else self.env.lookup_type(qname)

        search_paths: list[list[str]] = []
        if self.current_namespace:
            search_paths.append(self.current_namespace)
        search_paths.extend(self.open_namespaces)

        for path in search_paths:
            qname = root.resolve(path, member)
            if qname is not None:
                found = self.env.lookup_type(qname)
                if found is not None:
                    return found

        qname = root.lookup_decl(member)
        return None if qname is None else self.env.lookup_type(qname)

    def register_in_namespace(self, display_name: str, qname: QualifiedName) -> None:
        """Make ``qname`` visible as ``display_name`` in the current namespace."""
        target: Namespace = self.env.root_namespace
        for segment in self.current_namespace:
            target = target.children.setdefault(segment, Namespace())
        target.decls[display_name] = qname

    @staticmethod
    def abstract_binders(binder_fvars: Sequence[BinderFVar], term: Term) -> Term:
        """Close ``term`` over the binders, innermost last, as nested Pi types."""
        for fvar, info, type_ in reversed(binder_fvars):
            term = Pi(info, type_, abstract_fvar(term, fvar))
        return term

    def insert_implicit_args(self, term: Term, fn_type: Term) -> tuple[Term, Term]:
        """Apply ``term`` to fresh metavariables for its leading non-explicit binders."""
        return self.insert_implicit_args_until(term, fn_type, BinderInfo.EXPLICIT)

    def insert_implicit_args_until(
        self, term: Term, fn_type: Term, stop_at: BinderInfo
    ) -> tuple[Term, Term]:
        """Apply ``term`` to fresh metavariables until a binder of kind ``stop_at``."""
        while True:
            fn_type = whnf(self, fn_type)
            if not isinstance(fn_type, Pi) or fn_type.info == stop_at:
                return term, fn_type
            mvar = self.fresh_mvar(fn_type.type_)
            fn_type = instantiate(fn_type.body, mvar)
            term = App(term, mvar)

    def unify(self, a: Term, b: Term) -> bool:
        """Whether ``a`` and ``b`` are definitionally equal, assigning metavariables."""
        return is_def_eq(self, a, b)