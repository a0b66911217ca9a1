"""Module identifiers, unique names, and qualified names of declarations."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

ModuleId = str


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Unique:
    """A name that is unique within a module.

    Identity and ordering depend on the module and the id only; the display
    name is carried along for printing and lookup by name.
    """

    id: int
    module_id: ModuleId
    display_name: Optional[str] = None

    @classmethod
    def unnamed(cls, id: int, module_id: ModuleId) -> Unique:
        """Build a unique with no display name."""
        return cls(id, module_id, None)

    def _key(self) -> tuple[str, int]:
        return (self.module_id, self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class UniqueGen:
    """Hands out uniques with increasing ids for one module."""

    def __init__(self, module_id: ModuleId) -> None:
        self.module_id = module_id
        self._next = 0

    def _take(self) -> int:
        ident = self._next
        self._next += 1
        return ident

    def fresh(self, name: str) -> Unique:
        """Return a new unique carrying ``name`` as its display name."""
        return Unique(self._take(), self.module_id, name)

    def fresh_unnamed(self) -> Unique:
        """Return a new unique with no display name."""
        return Unique.unnamed(self._take(), self.module_id)


@functools.total_ordering
class IntrinsicName(Enum):
    """Names built into the compiler, ordered as declared."""

    NAT = "Nat"
    STR = "Str"
    FIN = "Fin"
    ARRAY = "Array"
    ARRAY_NIL = "Array.nil"
    ARRAY_CONS = "Array.cons"
    IO = "IO"
    HADD = "HAdd"
    ADD = "add"
    HSUB = "HSub"
    SUB = "sub"
    HMUL = "HMul"
    MUL = "mul"
    HDIV = "HDiv"
    DIV = "div"
    BEQ = "BEq"
    EQ = "eq"
    BNEQ = "BNeq"
    NEQ = "neq"
    HLT = "HLt"
    LT = "lt"
    HLEQ = "HLeq"
    LEQ = "leq"
    HGEQ = "HGeq"
    GEQ = "geq"
    HGT = "HGt"
    GT = "gt"

    def text(self) -> str:
        """The source-level spelling of this name."""
        return self.value

    @property
    def _index(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IntrinsicName):
            return NotImplemented
        return self._index < other._index


@functools.total_ordering
class _QualifiedName:
    """Shared ordering: user names sort before intrinsic names."""

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _QualifiedName):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


@dataclass(frozen=True)
class UserName(_QualifiedName):
    """A name declared by the program being compiled."""

    unique: Unique

    def display(self) -> Optional[str]:
        return self.unique.display_name


@dataclass(frozen=True)
class Intrinsic(_QualifiedName):
    """A name supplied by the compiler itself."""

    name: IntrinsicName

    def display(self) -> Optional[str]:
        return self.name.text()


QualifiedName = Union[UserName, Intrinsic]


def _sort_key(name: _QualifiedName) -> tuple[int, str, int]:
    if isinstance(name, UserName):
        return (0, name.unique.module_id, name.unique.id)
    if isinstance(name, Intrinsic):
        return (1, "", name.name._index)
    raise TypeError(f"not a qualified name: {name!r}")


PRIM_NAT = Intrinsic(IntrinsicName.NAT)
PRIM_BOOL = Intrinsic(IntrinsicName.NAT)
PRIM_FIN = Intrinsic(IntrinsicName.FIN)
PRIM_STRING = Intrinsic(IntrinsicName.STR)
PRIM_ARRAY = Intrinsic(IntrinsicName.ARRAY)
PRIM_ARRAY_NIL = Intrinsic(IntrinsicName.ARRAY_NIL)
PRIM_ARRAY_CONS = Intrinsic(IntrinsicName.ARRAY_CONS)
PRIM_IO = Intrinsic(IntrinsicName.IO)
PRIM_HADD = Intrinsic(IntrinsicName.HADD)
PRIM_ADD = Intrinsic(IntrinsicName.ADD)
PRIM_HSUB = Intrinsic(IntrinsicName.HSUB)
PRIM_SUB = Intrinsic(IntrinsicName.SUB)
PRIM_HMUL = Intrinsic(IntrinsicName.HMUL)
PRIM_MUL = Intrinsic(IntrinsicName.MUL)
PRIM_HDIV = Intrinsic(IntrinsicName.HDIV)
PRIM_DIV = Intrinsic(IntrinsicName.DIV)
PRIM_BEQ = Intrinsic(IntrinsicName.BEQ)
PRIM_EQ = Intrinsic(IntrinsicName.EQ)
PRIM_BNEQ = Intrinsic(IntrinsicName.BNEQ)
PRIM_NEQ = Intrinsic(IntrinsicName.NEQ)
PRIM_HLT = Intrinsic(IntrinsicName.HLT)
PRIM_LT = Intrinsic(IntrinsicName.LT)
PRIM_HLEQ = Intrinsic(IntrinsicName.HLEQ)
PRIM_LEQ = Intrinsic(IntrinsicName.LEQ)
PRIM_HGEQ = Intrinsic(IntrinsicName.HGEQ)
PRIM_GEQ = Intrinsic(IntrinsicName.GEQ)
PRIM_HGT = Intrinsic(IntrinsicName.HGT)
PRIM_GT = Intrinsic(IntrinsicName.GT)