"""Reduction of terms to weak head normal form."""

from __future__ import annotations

from typing import Any, Optional

from ashaelab.names import QualifiedName
from ashaelab.subst import instantiate
from ashaelab.terms import App, Const, Lam, Let, MVar, Term


def whnf(state: Any, term: Term) -> Term:
    """Reduce ``term`` at its head: beta, let and assigned metavariables.

    ``state`` needs an ``mctx`` attribute holding a metavariable context.
    """
    match term:
        case App(fun=fun, arg=arg):
            head = whnf(state, fun)
            if isinstance(head, Lam):
                return whnf(state, instantiate(head.body, arg))
            return App(head, arg)
        case Let(value=value, body=body):
            return whnf(state, instantiate(body, value))
        case MVar(unique=unique):
            assigned = state.mctx.get_assignment(unique)
            if assigned is None:
                return term
            return whnf(state, assigned)
        case _:
            return term


def head_const(term: Term) -> Optional[QualifiedName]:
    """The constant at the head of an application spine, if there is one."""
    match term:
        case Const(name=name):
            return name
        case App(fun=fun):
            return head_const(fun)
        case _:
            return None