# ashaelab

Building blocks for elaborating a small dependently typed language: a core term
language with de Bruijn indices, substitution, weak head reduction, definitional
equality with metavariable assignment, and an elaboration state that resolves
names through namespaces.

## Modules

- `ashaelab.names`: `Unique` (identity and ordering by module and id only),
  `UniqueGen` (`fresh`, `fresh_unnamed`), the qualified names `UserName` and
  `Intrinsic`, the `IntrinsicName` enum and the built-in names `PRIM_NAT`,
  `PRIM_STRING`, `PRIM_ADD`, `PRIM_GT` and the rest.
- `ashaelab.terms`: terms (`BVar`, `FVar`, `MVar`, `App`, `Sort`, `Const`, `Lam`,
  `Pi`, `Sigma`, `Let`, `Lit`, `UnitTerm`), universe levels (`LevelZero`,
  `LevelSucc`, `LevelMax`, `LevelIMax`, `LevelMVar`), literals (`NatLit`, `StrLit`),
  `BinderInfo` and `mk_app`.
- `ashaelab.subst`: `instantiate`, `shift` and `abstract_fvar`.
- `ashaelab.pretty`: `pretty_term`, `pretty_level`, `pretty_literal` and
  `binder_surrounding`. `pretty_term` raises `ValueError` for a constant that has
  no display name.
- `ashaelab.errors`: `Span`, the error kinds (`ExpectedRoot`, `UndefinedVariable`,
  `UndefinedConstructor`, `TypeMismatch`, `NotAFunction`, `CannotProject`,
  `TypeExpected`) and the `ElabError` exception, whose `label()` gives the
  message, the offset and a length of at least one.
- `ashaelab.context`: `LocalContext` and `MetavarContext`. Assigning a
  metavariable twice raises `ValueError`.
- `ashaelab.reduce`: `whnf` (beta, let and assigned metavariables) and `head_const`.
- `ashaelab.unify`: `is_def_eq`, `structural_eq`, `instantiate_mvars`, `occurs_in`.
- `ashaelab.environment`: `Namespace`, the declarations `Definition` and
  `Constructor`, and `Environment`, whose `pre_loaded` holds the built-in types
  `Nat`, `Str`, `Fin`, `Array`, `IO` and the operators `HAdd.add` and `HGt.gt`.
  `str()` of an environment lists its declarations one per line.
- `ashaelab.state`: `ElabState` with `resolve_name`, `register_in_namespace`,
  `fresh_mvar`, `fresh_fvar`, `abstract_binders`, `insert_implicit_args`,
  `insert_implicit_args_until` and `unify`.

## Installation

```
pip install .
```

## Example

```python
from ashaelab.names import PRIM_NAT
from ashaelab.pretty import pretty_term
from ashaelab.state import ElabState
from ashaelab.subst import instantiate
from ashaelab.terms import App, BVar, Const, LevelZero, Lit, NatLit, Sort

print(pretty_term(instantiate(App(BVar(0), BVar(0)), Lit(NatLit(3)))))
# (Nat(3) Nat(3))

state = ElabState.pre_loaded("main")
name, type_ = state.resolve_name([], "Nat")
print(pretty_term(type_))                      # Type(Zero)

hole = state.fresh_mvar(Sort(LevelZero()))
print(state.unify(hole, Const(PRIM_NAT)))      # True
print(state.mctx.get_assignment(hole.unique))  # Const(name=Intrinsic(...NAT...))
```

## What it does not do

There is no lexer or parser and no command-line tool: terms are built directly
from the classes in `ashaelab.terms`. `ElabState` provides name resolution,
implicit argument insertion and unification, but does not elaborate whole
definitions, records, inductive types or classes from surface syntax.

## Tests

```
pip install .[test]
pytest
```