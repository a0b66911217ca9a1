from ashaelab.context import LocalContext, MetavarContext
from ashaelab.names import PRIM_ARRAY, PRIM_NAT, PRIM_STRING, UniqueGen
from ashaelab.terms import (
    App,
    BinderInfo,
    BVar,
    Const,
    Lam,
    LevelMVar,
    LevelSucc,
    LevelZero,
    Lit,
    MVar,
    NatLit,
    Pi,
    Sort,
)
from ashaelab.unify import instantiate_mvars, is_def_eq, occurs_in, structural_eq

NAT = Const(PRIM_NAT)
STR = Const(PRIM_STRING)


class _State:
    def __init__(self):
        self.mctx = MetavarContext()
        self.gen = UniqueGen("main")

    def mvar(self):
        return MVar(self.mctx.fresh_mvar(NAT, LocalContext(), self.gen))


def test_structural_eq_ignores_binder_kind():
    a = Pi(BinderInfo.EXPLICIT, NAT, NAT)
    b = Pi(BinderInfo.IMPLICIT, NAT, NAT)
    assert structural_eq(a, b)
    assert not structural_eq(a, Lam(BinderInfo.EXPLICIT, NAT, NAT))


def test_structural_eq_levels():
    assert structural_eq(Sort(LevelSucc(LevelZero())), Sort(LevelSucc(LevelZero())))
    assert not structural_eq(Sort(LevelZero()), Sort(LevelSucc(LevelZero())))


def test_distinct_constants_are_not_equal():
    state = _State()
    assert not is_def_eq(state, NAT, STR)


def test_mvar_gets_assigned():
    state = _State()
    m = state.mvar()
    assert is_def_eq(state, m, NAT)
    assert state.mctx.get_assignment(m.unique) == NAT
    assert is_def_eq(state, m, NAT)
    assert not is_def_eq(state, m, STR)


def test_mvar_on_right_gets_assigned():
    state = _State()
    m = state.mvar()
    assert is_def_eq(state, STR, m)
    assert state.mctx.get_assignment(m.unique) == STR


def test_occurs_check_blocks_assignment():
    state = _State()
    m = state.mvar()
    assert not is_def_eq(state, m, App(Const(PRIM_ARRAY), m))
    assert not state.mctx.is_assigned(m.unique)


def test_beta_redex_equals_its_result():
    state = _State()
    redex = App(Lam(BinderInfo.EXPLICIT, NAT, BVar(0)), Lit(NatLit(4)))
    assert is_def_eq(state, redex, Lit(NatLit(4)))


def test_pi_unification_assigns_inside():
    state = _State()
    m = state.mvar()
    assert is_def_eq(state, Pi(BinderInfo.EXPLICIT, m, NAT), Pi(BinderInfo.EXPLICIT, STR, NAT))
    assert state.mctx.get_assignment(m.unique) == STR


def test_instantiate_mvars_follows_chains():
    state = _State()
    m1 = state.mvar()
    m2 = state.mvar()
    state.mctx.assign(m1.unique, m2)
    state.mctx.assign(m2.unique, NAT)
    term = App(Const(PRIM_ARRAY), m1)
    assert instantiate_mvars(state, term) == App(Const(PRIM_ARRAY), NAT)


def test_occurs_in_finds_level_mvar():
    gen = UniqueGen("main")
    u = gen.fresh_unnamed()
    other = gen.fresh_unnamed()
    assert occurs_in(u, Sort(LevelSucc(LevelMVar(u))))
    assert not occurs_in(other, Sort(LevelSucc(LevelMVar(u))))
    assert occurs_in(u, Lam(BinderInfo.EXPLICIT, NAT, MVar(u)))
    assert not occurs_in(u, App(NAT, BVar(0)))