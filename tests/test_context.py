import pytest

from ashaelab.context import LocalContext, MetavarContext
from ashaelab.names import PRIM_NAT, PRIM_STRING, UniqueGen
from ashaelab.terms import Const, Lit, NatLit

NAT = Const(PRIM_NAT)
STR = Const(PRIM_STRING)


def test_push_binder_records_declaration_without_value():
    gen = UniqueGen("main")
    lctx = LocalContext()
    fvar = lctx.push_binder("x", NAT, gen)
    assert fvar.display_name == "x"
    decl = lctx.lookup(fvar)
    assert decl.type_ == NAT
    assert decl.value is None


def test_push_let_records_value():
    gen = UniqueGen("main")
    lctx = LocalContext()
    value = Lit(NatLit(3))
    fvar = lctx.push_let("y", NAT, value, gen)
    assert lctx.lookup(fvar).value == value


def test_lookup_name_prefers_innermost():
    gen = UniqueGen("main")
    lctx = LocalContext()
    outer = lctx.push_binder("x", NAT, gen)
    inner = lctx.push_binder("x", STR, gen)
    found = lctx.lookup_name("x")
    assert found.fvar == inner
    assert found.fvar != outer
    assert found.type_ == STR


def test_lookup_missing_returns_none():
    gen = UniqueGen("main")
    lctx = LocalContext()
    lctx.push_binder("x", NAT, gen)
    assert lctx.lookup_name("z") is None
    assert lctx.lookup(gen.fresh_unnamed()) is None


def test_fresh_mvar_snapshots_local_context():
    gen = UniqueGen("main")
    lctx = LocalContext()
    lctx.push_binder("x", NAT, gen)
    mctx = MetavarContext()
    mvar = mctx.fresh_mvar(NAT, lctx, gen)
    lctx.push_binder("y", NAT, gen)
    decl = mctx.lookup_decl(mvar)
    assert decl.type_ == NAT
    assert len(decl.lctx.decls) == 1
    assert len(lctx.decls) == 2
    assert mvar.display_name is None


def test_assign_and_query():
    gen = UniqueGen("main")
    mctx = MetavarContext()
    mvar = mctx.fresh_mvar(NAT, LocalContext(), gen)
    assert not mctx.is_assigned(mvar)
    assert mctx.get_assignment(mvar) is None
    mctx.assign(mvar, Lit(NatLit(7)))
    assert mctx.is_assigned(mvar)
    assert mctx.get_assignment(mvar) == Lit(NatLit(7))


def test_assign_twice_raises():
    gen = UniqueGen("main")
    mctx = MetavarContext()
    mvar = mctx.fresh_mvar(NAT, LocalContext(), gen)
    mctx.assign(mvar, NAT)
    with pytest.raises(ValueError, match="mvar already assigned"):
        mctx.assign(mvar, STR)


def test_lookup_decl_unknown_is_none():
    gen = UniqueGen("main")
    mctx = MetavarContext()
    assert mctx.lookup_decl(gen.fresh_unnamed()) is None