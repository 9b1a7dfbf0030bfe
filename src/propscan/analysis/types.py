"""Inferred-type slice consumed by the analysis.

Type inference happens in the front end. What arrives here is the result,
reduced to what matters for property usage:

- ObjectType / UnionType: what a member was accessed through
- MixedType: the inference gave up (unknown, unbounded)
- StringType / ConstantStringType: what a computed member name can be

Subtyping is nominal and answered by a ClassHierarchy with TrinaryLogic,
so "the front end never saw that class" stays distinct from "unrelated".
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class TrinaryLogic(Enum):
    """Three-valued answer of a type relation query."""

    YES = "yes"
    MAYBE = "maybe"
    NO = "no"

    def yes(self) -> bool:
        return self is TrinaryLogic.YES

    def no(self) -> bool:
        return self is TrinaryLogic.NO

    @classmethod
    def extremes(cls, values: Iterable[TrinaryLogic]) -> TrinaryLogic:
        """YES if all are YES, NO if all are NO, MAYBE otherwise."""
        seen = set(values)
        if seen == {cls.YES}:
            return cls.YES
        if seen == {cls.NO}:
            return cls.NO
        return cls.MAYBE


def normalize_class_name(name: str) -> str:
    """Comparison key of a class name: case-folded, without a leading `\\`."""
    return name.lstrip("\\").lower()


@dataclass(frozen=True)
class ClassHierarchy:
    """Direct parent edges (superclass and interfaces) per class name.

    Class names compare case-insensitively and without a leading namespace
    separator.
    """

    parents: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {
            normalize_class_name(name): tuple(normalize_class_name(p) for p in supers)
            for name, supers in self.parents.items()
        }
        object.__setattr__(self, "parents", normalized)

    def knows(self, name: str) -> bool:
        return normalize_class_name(name) in self.parents

    def ancestors(self, name: str) -> frozenset[str]:
        """All classes reachable upwards from name, including name itself."""
        start = normalize_class_name(name)
        seen = {start}
        stack = [start]
        while stack:
            current = stack.pop()
            for parent in self.parents.get(current, ()):
                if parent not in seen:
                    seen.add(parent)
                    stack.append(parent)
        return frozenset(seen)

    def is_subclass_of(self, sub: str, sup: str) -> TrinaryLogic:
        if normalize_class_name(sup) in self.ancestors(sub):
            return TrinaryLogic.YES
        if not self.knows(sub):
            return TrinaryLogic.MAYBE
        # A known class whose chain reaches an unknown class may still
        # inherit from sup through it
        for ancestor in self.ancestors(sub):
            if not self.knows(ancestor):
                return TrinaryLogic.MAYBE
        return TrinaryLogic.NO


class Type:
    """Base of the inferred types."""

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class MixedType(Type):
    """Unknown or unbounded: nothing can be proven about the value."""

    def describe(self) -> str:
        return "mixed"


@dataclass(frozen=True)
class StringType(Type):
    """Any string; the set of possible values is unbounded."""

    def describe(self) -> str:
        return "string"


@dataclass(frozen=True)
class ConstantStringType(Type):
    value: str

    def describe(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class ObjectType(Type):
    class_name: str

    def describe(self) -> str:
        return self.class_name

    def is_super_type_of(self, other: Type, hierarchy: ClassHierarchy) -> TrinaryLogic:
        """Whether every value of other is an instance of this class."""
        if isinstance(other, ObjectType):
            return hierarchy.is_subclass_of(other.class_name, self.class_name)
        if isinstance(other, UnionType):
            return TrinaryLogic.extremes(
                self.is_super_type_of(member, hierarchy) for member in other.types
            )
        if isinstance(other, MixedType):
            return TrinaryLogic.MAYBE
        return TrinaryLogic.NO


@dataclass(frozen=True)
class UnionType(Type):
    types: tuple[Type, ...]

    def describe(self) -> str:
        return "|".join(t.describe() for t in self.types)

    def flatten(self) -> list[Type]:
        flat: list[Type] = []
        for member in self.types:
            if isinstance(member, UnionType):
                flat.extend(member.flatten())
            else:
                flat.append(member)
        return flat


def constant_strings(type_: Type) -> list[str]:
    """Literal strings a type proves possible; empty when unbounded."""
    if isinstance(type_, ConstantStringType):
        return [type_.value]
    if isinstance(type_, UnionType):
        flat = type_.flatten()
        if flat and all(isinstance(t, ConstantStringType) for t in flat):
            values: list[str] = []
            for t in flat:
                value = t.value  # type: ignore[attr-defined]
                if value not in values:
                    values.append(value)
            return values
    return []


def contains_mixed(type_: Type) -> bool:
    if isinstance(type_, MixedType):
        return True
    if isinstance(type_, UnionType):
        return any(contains_mixed(t) for t in type_.flatten())
    return False
