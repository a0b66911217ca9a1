"""Declarations, namespaces and the global environment of a module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ashaelab.errors import Span
from ashaelab.names import (
    PRIM_ADD,
    PRIM_ARRAY,
    PRIM_BOOL,
    PRIM_FIN,
    PRIM_GT,
    PRIM_IO,
    PRIM_NAT,
    PRIM_STRING,
    ModuleId,
    QualifiedName,
)
from ashaelab.pretty import pretty_term
from ashaelab.terms import BinderInfo, Const, LevelZero, Pi, Sort, Term


def _shown(name: QualifiedName) -> str:
    text = name.display()
    if text is None:
        raise ValueError(f"declaration has no display name: {name!r}")
    return text


@dataclass
class Namespace:
    """Names visible under one path, and the namespaces nested below it."""

    decls: dict[str, QualifiedName] = field(default_factory=dict)
    children: dict[str, Namespace] = field(default_factory=dict)

    def lookup_decl(self, name: str) -> Optional[QualifiedName]:
        """The declaration registered here as ``name``, if any."""
        return self.decls.get(name)

    def child(self, name: str) -> Optional[Namespace]:
        """The nested namespace called ``name``, if any."""
        return self.children.get(name)

    def walk(self, path: list[str]) -> Optional[Namespace]:
        """Follow ``path`` through nested namespaces; None if a step is missing."""
        current: Optional[Namespace] = self
        for segment in path:
            current = current.children.get(segment)
            if current is None:
                return None
        return current

    def resolve(self, path: list[str], member: str) -> Optional[QualifiedName]:
        """The declaration ``member`` inside the namespace at ``path``."""
        target = self.walk(path)
        return None if target is None else target.lookup_decl(member)


@dataclass(frozen=True)
class Definition:
    """A named definition with its type and value."""

    name: QualifiedName
    type_: Term
    value: Term
    span: Span

    def __str__(self) -> str:
        return (
            f"def {_shown(self.name)} : {pretty_term(self.type_)} := "
            f"{pretty_term(self.value)}"
        )


@dataclass(frozen=True)
class Constructor:
    """A type former, constructor or field known only by its type."""

    name: QualifiedName
    type_: Term
    span: Span

    def __str__(self) -> str:
        return f"constructor {_shown(self.name)} : {pretty_term(self.type_)}"


Declaration = Union[Definition, Constructor]


def _arrow(param: Term, result: Term) -> Pi:
    return Pi(BinderInfo.EXPLICIT, param, result)


@dataclass
class Environment:
    """Everything declared in a module plus the externals it can see."""

    module_id: ModuleId
    externals: dict[QualifiedName, Term] = field(default_factory=dict)
    decls: dict[QualifiedName, Declaration] = field(default_factory=dict)
    root_namespace: Namespace = field(default_factory=Namespace)

    @classmethod
    def pre_loaded(cls, module_id: ModuleId) -> Environment:
        """An environment holding the built-in types and operators."""
        type0 = Sort(LevelZero())
        nat = Const(PRIM_NAT)
        externals: dict[QualifiedName, Term] = {
            PRIM_NAT: type0,
            PRIM_STRING: type0,
            PRIM_FIN: _arrow(nat, type0),
            PRIM_ARRAY: _arrow(type0, _arrow(nat, type0)),
            PRIM_IO: _arrow(type0, type0),
            PRIM_ADD: _arrow(nat, _arrow(nat, nat)),
            PRIM_GT: _arrow(nat, _arrow(nat, Const(PRIM_BOOL))),
        }
        root = Namespace(
            decls={
                "Nat": PRIM_NAT,
                "Str": PRIM_STRING,
                "Fin": PRIM_FIN,
                "Array": PRIM_ARRAY,
                "IO": PRIM_IO,
            },
            children={
                "HAdd": Namespace(decls={"add": PRIM_ADD}),
                "HGt": Namespace(decls={"gt": PRIM_GT}),
            },
        )
        return cls(module_id, externals, {}, root)

    def lookup(self, name: QualifiedName) -> Optional[Declaration]:
        """The declaration stored under ``name``, if any."""
        return self.decls.get(name)

    def lookup_type(self, qname: QualifiedName) -> Optional[tuple[QualifiedName, Term]]:
        """The stored name and type of a declaration or an external."""
        decl = self.decls.get(qname)
        if decl is not None:
            return decl.name, decl.type_
        if qname in self.externals:
            stored = next(key for key in self.externals if key == qname)
            return stored, self.externals[qname]
        return None

    def __str__(self) -> str:
        return "".join(f"{self.decls[name]}\n" for name in sorted(self.decls))