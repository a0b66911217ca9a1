"""The core term language: terms, universe levels, literals and binders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ashaelab.names import QualifiedName, Unique


class BinderInfo(Enum):
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"
    INSTANCE_IMPLICIT = "instance_implicit"
    STRICT_IMPLICIT = "strict_implicit"


@dataclass(frozen=True)
class NatLit:
    value: int


@dataclass(frozen=True)
class StrLit:
    value: str


Literal = Union[NatLit, StrLit]


@dataclass(frozen=True)
class LevelZero:
    pass


@dataclass(frozen=True)
class LevelSucc:
    level: Level


@dataclass(frozen=True)
class LevelMax:
    lhs: Level
    rhs: Level


@dataclass(frozen=True)
class LevelIMax:
    lhs: Level
    rhs: Level


@dataclass(frozen=True)
class LevelMVar:
    unique: Unique


Level = Union[LevelZero, LevelSucc, LevelMax, LevelIMax, LevelMVar]


@dataclass(frozen=True)
class BVar:
    """A bound variable as a de Bruijn index."""

    index: int


@dataclass(frozen=True)
class FVar:
    """A free variable introduced into the local context."""

    unique: Unique


@dataclass(frozen=True)
class MVar:
    """A metavariable awaiting assignment."""

    unique: Unique


@dataclass(frozen=True)
class App:
    fun: Term
    arg: Term


@dataclass(frozen=True)
class Sort:
    level: Level


@dataclass(frozen=True)
class Const:
    name: QualifiedName


@dataclass(frozen=True)
class Lam:
    info: BinderInfo
    type_: Term
    body: Term


@dataclass(frozen=True)
class Pi:
    info: BinderInfo
    type_: Term
    body: Term


@dataclass(frozen=True)
class Sigma:
    info: BinderInfo
    type_: Term
    body: Term


@dataclass(frozen=True)
class Let:
    type_: Term
    value: Term
    body: Term


@dataclass(frozen=True)
class Lit:
    lit: Literal


@dataclass(frozen=True)
class UnitTerm:
    pass


Term = Union[BVar, FVar, MVar, App, Sort, Const, Lam, Pi, Sigma, Let, Lit, UnitTerm]


def mk_app(l: Term, r: Term) -> App:
    """Apply ``l`` to ``r``."""
    return App(l, r)