"""Errors reported while elaborating a module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ashaelab.pretty import pretty_term
from ashaelab.terms import Term


@dataclass(frozen=True)
class Span:
    """A byte range in the source text."""

    start: int
    end: int


@dataclass(frozen=True)
class ExpectedRoot:
    def __str__(self) -> str:
        return "expected a root-level declaration"


@dataclass(frozen=True)
class UndefinedVariable:
    name: str

    def __str__(self) -> str:
        return f"undefined variable '{self.name}'"


@dataclass(frozen=True)
class UndefinedConstructor:
    name: str

    def __str__(self) -> str:
        return f"undefined constructor '{self.name}'"


@dataclass(frozen=True)
class TypeMismatch:
    expected: Term
    found: Term

    def __str__(self) -> str:
        return (
            f"type mismatch: expected '{pretty_term(self.expected)}', "
            f"found '{pretty_term(self.found)}'"
        )


@dataclass(frozen=True)
class NotAFunction:
    term: Term

    def __str__(self) -> str:
        return f"not a function: '{pretty_term(self.term)}'"


@dataclass(frozen=True)
class CannotProject:
    term: Term
    field: str

    def __str__(self) -> str:
        return f"can't project field '{self.field}' from '{pretty_term(self.term)}'"


@dataclass(frozen=True)
class TypeExpected:
    term: Term

    def __str__(self) -> str:
        return f"type expected, got '{pretty_term(self.term)}'"


ElabErrorKind = Union[
    ExpectedRoot,
    UndefinedVariable,
    UndefinedConstructor,
    TypeMismatch,
    NotAFunction,
    CannotProject,
    TypeExpected,
]


class ElabError(Exception):
    """An elaboration error of a given kind at a place in the source."""

    def __init__(self, kind: ElabErrorKind, span: Span) -> None:
        super().__init__(str(kind))
        self.kind = kind
        self.span = span

    def __str__(self) -> str:
        return str(self.kind)

    def __repr__(self) -> str:
        return f"ElabError(kind={self.kind!r}, span={self.span!r})"

    def label(self) -> tuple[str, int, int]:
        """Message, offset and length (at least one) for marking the source."""
        length = max(self.span.end - self.span.start, 0)
        return (str(self), self.span.start, max(length, 1))