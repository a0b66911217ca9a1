"""Definitional equality with first-order metavariable assignment."""

from __future__ import annotations

from typing import Any

from ashaelab.names import Unique
from ashaelab.reduce import whnf
from ashaelab.terms import (
    App,
    BVar,
    Const,
    FVar,
    Lam,
    Let,
    Level,
    LevelIMax,
    LevelMax,
    LevelMVar,
    LevelSucc,
    LevelZero,
    Lit,
    MVar,
    Pi,
    Sigma,
    Sort,
    Term,
    UnitTerm,
)

_BINDERS = (Lam, Pi, Sigma)


def is_def_eq(state: Any, a: Term, b: Term) -> bool:
    """Whether ``a`` and ``b`` are equal, assigning metavariables as needed."""
    if structural_eq(a, b):
        return True

    a = instantiate_mvars(state, a)
    b = instantiate_mvars(state, b)
    if structural_eq(a, b):
        return True
    if _try_assign_mvar(state, a, b) or _try_assign_mvar(state, b, a):
        return True

    a = whnf(state, a)
    b = whnf(state, b)
    if _try_assign_mvar(state, a, b) or _try_assign_mvar(state, b, a):
        return True

    if isinstance(a, App) and isinstance(b, App):
        return is_def_eq(state, a.fun, b.fun) and is_def_eq(state, a.arg, b.arg)
    if isinstance(a, _BINDERS) and type(a) is type(b):
        return is_def_eq(state, a.type_, b.type_) and is_def_eq(state, a.body, b.body)
    if isinstance(a, Let) and isinstance(b, Let):
        return (
            is_def_eq(state, a.type_, b.type_)
            and is_def_eq(state, a.value, b.value)
            and is_def_eq(state, a.body, b.body)
        )
    return structural_eq(a, b)


def structural_eq(a: Term, b: Term) -> bool:
    """Syntactic equality that ignores binder kinds."""
    if type(a) is not type(b):
        return False
    match a:
        case BVar() | FVar() | MVar() | Lit() | Const() | UnitTerm():
            return a == b
        case Sort(level=level):
            return _structural_eq_level(level, b.level)
        case App(fun=fun, arg=arg):
            return structural_eq(fun, b.fun) and structural_eq(arg, b.arg)
        case Lam() | Pi() | Sigma():
            return structural_eq(a.type_, b.type_) and structural_eq(a.body, b.body)
        case Let(type_=type_, value=value, body=body):
            return (
                structural_eq(type_, b.type_)
                and structural_eq(value, b.value)
                and structural_eq(body, b.body)
            )
    return False


def _structural_eq_level(a: Level, b: Level) -> bool:
    if type(a) is not type(b):
        return False
    match a:
        case LevelZero():
            return True
        case LevelSucc(level=inner):
            return _structural_eq_level(inner, b.level)
        case LevelMax() | LevelIMax():
            return _structural_eq_level(a.lhs, b.lhs) and _structural_eq_level(a.rhs, b.rhs)
        case LevelMVar(unique=unique):
            return unique == b.unique
    return False


def instantiate_mvars(state: Any, term: Term) -> Term:
    """Replace every assigned metavariable in ``term`` by its value."""
    match term:
        case MVar(unique=unique):
            assigned = state.mctx.get_assignment(unique)
            if assigned is None:
                return term
            return instantiate_mvars(state, assigned)
        case Sort(level=level):
            return Sort(_instantiate_mvars_level(level))
        case App(fun=fun, arg=arg):
            return App(instantiate_mvars(state, fun), instantiate_mvars(state, arg))
        case Lam() | Pi() | Sigma():
            return type(term)(
                term.info,
                instantiate_mvars(state, term.type_),
                instantiate_mvars(state, term.body),
            )
        case Let(type_=type_, value=value, body=body):
            return Let(
                instantiate_mvars(state, type_),
                instantiate_mvars(state, value),
                instantiate_mvars(state, body),
            )
        case _:
            return term


def _instantiate_mvars_level(level: Level) -> Level:
    # Level metavariables have no assignment table yet; they stay as they are.
    match level:
        case LevelSucc(level=inner):
            return LevelSucc(_instantiate_mvars_level(inner))
        case LevelMax(lhs=lhs, rhs=rhs):
            return LevelMax(_instantiate_mvars_level(lhs), _instantiate_mvars_level(rhs))
        case LevelIMax(lhs=lhs, rhs=rhs):
            return LevelIMax(_instantiate_mvars_level(lhs), _instantiate_mvars_level(rhs))
        case _:
            return level


def _try_assign_mvar(state: Any, a: Term, b: Term) -> bool:
    if not isinstance(a, MVar):
        return False
    mvar = a.unique
    if state.mctx.is_assigned(mvar) or occurs_in(mvar, b):
        return False
    state.mctx.assign(mvar, b)
    return True


def occurs_in(mvar: Unique, term: Term) -> bool:
    """Whether metavariable ``mvar`` appears anywhere in ``term``."""
    match term:
        case MVar(unique=unique):
            return unique == mvar
        case Sort(level=level):
            return _occurs_in_level(mvar, level)
        case App(fun=fun, arg=arg):
            return occurs_in(mvar, fun) or occurs_in(mvar, arg)
        case Lam() | Pi() | Sigma():
            return occurs_in(mvar, term.type_) or occurs_in(mvar, term.body)
        case Let(type_=type_, value=value, body=body):
            return occurs_in(mvar, type_) or occurs_in(mvar, value) or occurs_in(mvar, body)
        case _:
            return False


def _occurs_in_level(mvar: Unique, level: Level) -> bool:
    match level:
        case LevelSucc(level=inner):
            return _occurs_in_level(mvar, inner)
        case LevelMax(lhs=lhs, rhs=rhs) | LevelIMax(lhs=lhs, rhs=rhs):
            return _occurs_in_level(mvar, lhs) or _occurs_in_level(mvar, rhs)
        case LevelMVar(unique=unique):
            return unique == mvar
        case _:
            return False