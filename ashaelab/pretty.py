"""Human-readable rendering of terms, levels and literals."""

from __future__ import annotations

from ashaelab.names import Unique
from ashaelab.terms import (
    App,
    BinderInfo,
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
    Literal,
    MVar,
    NatLit,
    Pi,
    Sigma,
    Sort,
    StrLit,
    Term,
    UnitTerm,
)

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def _quote(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif not ch.isprintable():
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _pretty_unique(unique: Unique) -> str:
    shown = "None" if unique.display_name is None else f"Some({_quote(unique.display_name)})"
    return (
        f"Unique {{ id: {unique.id}, module_id: {_quote(unique.module_id)}, "
        f"display_name: {shown} }}"
    )


def pretty_level(level: Level) -> str:
    """Render a universe level in its structural form."""
    match level:
        case LevelZero():
            return "Zero"
        case LevelSucc(level=inner):
            return f"Succ({pretty_level(inner)})"
        case LevelMax(lhs=lhs, rhs=rhs):
            return f"Max({pretty_level(lhs)}, {pretty_level(rhs)})"
        case LevelIMax(lhs=lhs, rhs=rhs):
            return f"IMax({pretty_level(lhs)}, {pretty_level(rhs)})"
        case LevelMVar(unique=unique):
            return f"MVar({_pretty_unique(unique)})"
    raise TypeError(f"not a level: {level!r}")


def pretty_literal(lit: Literal) -> str:
    """Render a literal in its structural form."""
    match lit:
        case NatLit(value=value):
            return f"Nat({value})"
        case StrLit(value=value):
            return f"Str({_quote(value)})"
    raise TypeError(f"not a literal: {lit!r}")


def binder_surrounding(info: BinderInfo, text: str) -> str:
    """Wrap ``text`` in the brackets that mark the binder kind."""
    match info:
        case BinderInfo.EXPLICIT:
            return f"({text})"
        case BinderInfo.IMPLICIT:
            return f"{{{text}}}"
        case BinderInfo.INSTANCE_IMPLICIT:
            return f"[{text}]"
        case BinderInfo.STRICT_IMPLICIT:
            return f"{{{{{text}}}}}"
    raise TypeError(f"not a binder kind: {info!r}")


def pretty_term(term: Term) -> str:
    """Render a term; raises ValueError for a constant with no display name."""
    match term:
        case MVar(unique=unique):
            return f"m{unique.id}"
        case BVar(index=index):
            return f"b{index}"
        case FVar(unique=unique):
            return f"f{unique.id}"
        case Const(name=name):
            text = name.display()
            if text is None:
                raise ValueError(f"constant has no display name: {name!r}")
            return text
        case App(fun=fun, arg=arg):
            return f"({pretty_term(fun)} {pretty_term(arg)})"
        case Pi(info=info, type_=param, body=body):
            return f"Pi {binder_surrounding(info, pretty_term(param))} -> {pretty_term(body)}"
        case Lam(info=info, type_=param, body=body):
            return f"λ {binder_surrounding(info, pretty_term(param))}. {pretty_term(body)}"
        case Sigma(info=info, type_=param, body=body):
            return f"Σ {binder_surrounding(info, pretty_term(param))} × {pretty_term(body)}"
        case Sort(level=level):
            return f"Type({pretty_level(level)})"
        case Let(type_=type_, value=value, body=body):
            return f"(let {pretty_term(type_)} = {pretty_term(value)} in {pretty_term(body)})"
        case Lit(lit=lit):
            return pretty_literal(lit)
        case UnitTerm():
            return "Unit"
    raise TypeError(f"not a term: {term!r}")