"""Analysis models - declarations, access facts, usage state, diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from propscan.analysis.types import ClassHierarchy, Type

RULE_ID = "propscan.unusedPrivateProperty"


class ClassKind(Enum):
    """Kind of class-like declaration."""

    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"
    ANONYMOUS = "anonymous"


class Visibility(Enum):
    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"


class AccessKind(Enum):
    READ = "read"
    WRITE = "write"


class Verdict(Enum):
    """Outcome of classifying one private property."""

    UNUSED = "unused"
    WRITE_ONLY = "write-only"
    READ_ONLY = "read-only"
    OK = "ok"
    # Read, never written, but the constructor analysis owns the report
    SUPPRESSED = "suppressed"

    @property
    def reported(self) -> bool:
        return self in (Verdict.UNUSED, Verdict.WRITE_ONLY, Verdict.READ_ONLY)


@dataclass(frozen=True)
class MemberDeclaration:
    """A property as declared in the class body."""

    name: str
    line: int
    is_static: bool = False
    has_default_value: bool = False
    doc_comment: str | None = None
    visibility: Visibility = Visibility.PRIVATE

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    @property
    def kind_label(self) -> str:
        return "static property" if self.is_static else "property"


@dataclass(frozen=True)
class AccessFact:
    """One read or write of a property somewhere in the class body.

    Exactly one of name / name_type is set: name for `$this->foo`,
    name_type for `$this->$expr` (the inferred type of expr).

    Instance access carries owner_type. Static access carries class_ref,
    the resolved name of the class reference, or None when the reference
    is an expression that does not resolve to a name.
    """

    kind: AccessKind
    name: str | None = None
    name_type: Type | None = None
    owner_type: Type | None = None
    is_static_access: bool = False
    class_ref: str | None = None
    line: int | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.name_type is None):
            raise ValueError("AccessFact needs exactly one of name / name_type")
        if not self.is_static_access and self.owner_type is None:
            raise ValueError("Instance access needs an owner_type")


@dataclass(frozen=True)
class ClassUnderAnalysis:
    """Everything the front end collected about one class."""

    name: str
    members: tuple[MemberDeclaration, ...] = ()
    accesses: tuple[AccessFact, ...] = ()
    constructors: tuple[str, ...] = ()
    kind: ClassKind = ClassKind.CLASS
    display_name: str | None = None

    @property
    def label(self) -> str:
        return self.display_name or self.name


@dataclass(frozen=True)
class AnalysisScope:
    """Where the caller says the analysis runs.

    class_name is None outside of any class; the rule refuses to run there.
    """

    class_name: str | None
    hierarchy: ClassHierarchy = field(default_factory=ClassHierarchy)

    @property
    def is_in_class(self) -> bool:
        return self.class_name is not None


@dataclass(frozen=True)
class UsageState:
    """Read/written evidence for one property.

    Forms a monoid under `|` with EMPTY as identity, so evidence can be
    combined in any order and grouping.
    """

    read: bool = False
    written: bool = False

    EMPTY: ClassVar[UsageState]

    def __or__(self, other: UsageState) -> UsageState:
        return UsageState(read=self.read or other.read, written=self.written or other.written)

    @property
    def complete(self) -> bool:
        return self.read and self.written

    @classmethod
    def of(cls, kind: AccessKind) -> UsageState:
        return cls(read=kind is AccessKind.READ, written=kind is AccessKind.WRITE)


UsageState.EMPTY = UsageState()


@dataclass
class MemberRecord:
    """Mutable per-property record; flags only ever go from False to True."""

    declaration: MemberDeclaration
    read: bool = False
    written: bool = False

    @property
    def state(self) -> UsageState:
        return UsageState(read=self.read, written=self.written)

    def merge(self, evidence: UsageState) -> None:
        self.read = self.read or evidence.read
        self.written = self.written or evidence.written


@dataclass(frozen=True)
class Diagnostic:
    """A single reported property."""

    message: str
    line: int
    member: str
    verdict: Verdict
    identifier: str = RULE_ID

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "line": self.line,
            "member": self.member,
            "verdict": self.verdict.value,
            "identifier": self.identifier,
        }
