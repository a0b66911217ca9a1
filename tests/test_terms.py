import dataclasses

import pytest

from ashaelab.names import PRIM_NAT, PRIM_STRING, Unique
from ashaelab.terms import (
    App,
    BinderInfo,
    BVar,
    Const,
    FVar,
    LevelIMax,
    LevelMax,
    LevelMVar,
    LevelSucc,
    LevelZero,
    Let,
    Lit,
    MVar,
    NatLit,
    Pi,
    Sort,
    StrLit,
    UnitTerm,
    mk_app,
)


def test_mk_app_builds_application():
    term = mk_app(Const(PRIM_NAT), BVar(0))
    assert term == App(Const(PRIM_NAT), BVar(0))
    assert term.fun == Const(PRIM_NAT)
    assert term.arg == BVar(0)


def test_terms_compare_structurally():
    a = Pi(BinderInfo.EXPLICIT, Const(PRIM_NAT), Sort(LevelZero()))
    b = Pi(BinderInfo.EXPLICIT, Const(PRIM_NAT), Sort(LevelZero()))
    c = Pi(BinderInfo.IMPLICIT, Const(PRIM_NAT), Sort(LevelZero()))
    assert a == b
    assert (a == c) is False


def test_terms_are_hashable_and_frozen():
    assert len({BVar(1), BVar(1), BVar(2)}) == 2
    term = BVar(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        term.index = 3


def test_variables_compare_by_unique_identity():
    assert FVar(Unique(1, "m", "x")) == FVar(Unique(1, "m", "y"))
    assert (FVar(Unique(1, "m")) == MVar(Unique(1, "m"))) is False


def test_levels_compare_structurally():
    one = LevelSucc(LevelZero())
    assert LevelSucc(LevelZero()) == one
    assert (LevelSucc(one) == one) is False
    assert (LevelMax(one, one) == LevelIMax(one, one)) is False
    assert LevelMVar(Unique(0, "m")) == LevelMVar(Unique(0, "m", "u"))


def test_literals_and_misc():
    assert Lit(NatLit(3)) == Lit(NatLit(3))
    assert (Lit(NatLit(3)) == Lit(StrLit("3"))) is False
    assert UnitTerm() == UnitTerm()
    let = Let(Const(PRIM_STRING), Lit(StrLit("s")), BVar(0))
    assert let.value == Lit(StrLit("s"))