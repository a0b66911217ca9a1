"""Substitution on de Bruijn-indexed terms."""

from __future__ import annotations

from typing import Callable, Optional

from ashaelab.names import Unique
from ashaelab.terms import App, BVar, FVar, Lam, Let, Pi, Sigma, Term

_Visit = Callable[[Term, int], Optional[Term]]


def _walk(term: Term, depth: int, visit: _Visit) -> Term:
    """Rebuild ``term``, letting ``visit`` replace leaves; binders raise depth."""
    replaced = visit(term, depth)
    if replaced is not None:
        return replaced
    match term:
        case App(fun=fun, arg=arg):
            return App(_walk(fun, depth, visit), _walk(arg, depth, visit))
        case Lam() | Pi() | Sigma():
            return type(term)(
                term.info,
                _walk(term.type_, depth, visit),
                _walk(term.body, depth + 1, visit),
            )
        case Let(type_=type_, value=value, body=body):
            return Let(
                _walk(type_, depth, visit),
                _walk(value, depth, visit),
                _walk(body, depth + 1, visit),
            )
        case _:
            return term


def instantiate(term: Term, replacement: Term) -> Term:
    """Replace the outermost bound variable of ``term`` with ``replacement``."""

    def visit(node: Term, depth: int) -> Optional[Term]:
        if not isinstance(node, BVar):
            return None
        if node.index == depth:
            return shift(replacement, depth)
        if node.index > depth:
            return BVar(node.index - 1)
        return node

    return _walk(term, 0, visit)


def shift(term: Term, amount: int) -> Term:
    """Raise every loose bound variable of ``term`` by ``amount``."""
    if amount == 0:
        return term

    def visit(node: Term, depth: int) -> Optional[Term]:
        if isinstance(node, BVar) and node.index >= depth:
            return BVar(node.index + amount)
        return None

    return _walk(term, 0, visit)


def abstract_fvar(term: Term, fvar: Unique) -> Term:
    """Turn occurrences of ``fvar`` into a new outermost bound variable."""

    def visit(node: Term, depth: int) -> Optional[Term]:
        if isinstance(node, FVar) and node.unique == fvar:
            return BVar(depth)
        if isinstance(node, BVar) and node.index >= depth:
            return BVar(node.index + 1)
        return None

    return _walk(term, 0, visit)