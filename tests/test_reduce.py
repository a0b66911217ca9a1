from ashaelab.context import MetavarContext
from ashaelab.names import PRIM_ARRAY, PRIM_NAT, UniqueGen
from ashaelab.reduce import head_const, whnf
from ashaelab.terms import (
    App,
    BinderInfo,
    BVar,
    Const,
    Lam,
    Let,
    Lit,
    MVar,
    NatLit,
    Pi,
)

NAT = Const(PRIM_NAT)


class _State:
    def __init__(self):
        self.mctx = MetavarContext()


def test_beta_reduces_identity():
    term = App(Lam(BinderInfo.EXPLICIT, NAT, BVar(0)), Lit(NatLit(3)))
    assert whnf(_State(), term) == Lit(NatLit(3))


def test_let_is_unfolded():
    term = Let(NAT, Lit(NatLit(5)), BVar(0))
    assert whnf(_State(), term) == Lit(NatLit(5))


def test_assigned_mvar_is_followed_and_reduced():
    state = _State()
    gen = UniqueGen("m")
    u = gen.fresh_unnamed()
    state.mctx.assign(u, App(Lam(BinderInfo.EXPLICIT, NAT, BVar(0)), NAT))
    assert whnf(state, MVar(u)) == NAT


def test_unassigned_mvar_is_unchanged():
    u = UniqueGen("m").fresh_unnamed()
    assert whnf(_State(), MVar(u)) == MVar(u)


def test_stuck_application_keeps_argument():
    term = App(Const(PRIM_ARRAY), Let(NAT, NAT, BVar(0)))
    assert whnf(_State(), term) == term


def test_pi_is_already_whnf():
    term = Pi(BinderInfo.EXPLICIT, NAT, App(Lam(BinderInfo.EXPLICIT, NAT, BVar(0)), NAT))
    assert whnf(_State(), term) == term


def test_head_const_of_spine():
    term = App(App(Const(PRIM_ARRAY), NAT), Lit(NatLit(2)))
    assert head_const(term) == PRIM_ARRAY
    assert head_const(NAT) == PRIM_NAT
    assert head_const(BVar(0)) is None
    assert head_const(App(BVar(0), NAT)) is None