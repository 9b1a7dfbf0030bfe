"""Wire schema of a facts document.

A front end (parser + type inference + constructor analysis) serializes
what it learned about a program into one JSON or YAML document. These
models validate it and convert it to analysis models.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from propscan.analysis.models import (
    AccessFact,
    AccessKind,
    ClassKind,
    ClassUnderAnalysis,
    MemberDeclaration,
    Visibility,
)
from propscan.analysis.types import (
    ConstantStringType,
    MixedType,
    ObjectType,
    StringType,
    Type,
    UnionType,
)


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ObjectTypeSpec(_Strict):
    kind: Literal["object"]
    class_name: str = Field(alias="class", min_length=1)

    def to_type(self) -> Type:
        return ObjectType(self.class_name)


class MixedTypeSpec(_Strict):
    kind: Literal["mixed"]

    def to_type(self) -> Type:
        return MixedType()


class StringTypeSpec(_Strict):
    kind: Literal["string"]

    def to_type(self) -> Type:
        return StringType()


class ConstantStringTypeSpec(_Strict):
    kind: Literal["constant_string"]
    value: str

    def to_type(self) -> Type:
        return ConstantStringType(self.value)


class UnionTypeSpec(_Strict):
    kind: Literal["union"]
    types: list[TypeSpec] = Field(min_length=1)

    def to_type(self) -> Type:
        return UnionType(tuple(t.to_type() for t in self.types))


TypeSpec = Annotated[
    ObjectTypeSpec | MixedTypeSpec | StringTypeSpec | ConstantStringTypeSpec | UnionTypeSpec,
    Field(discriminator="kind"),
]

UnionTypeSpec.model_rebuild()


class MemberSpec(_Strict):
    name: str = Field(min_length=1)
    line: int = Field(ge=1)
    static: bool = False
    default: bool = False
    visibility: Literal["private", "protected", "public"] = "private"
    doc: str | None = None

    def to_declaration(self) -> MemberDeclaration:
        return MemberDeclaration(
            name=self.name,
            line=self.line,
            is_static=self.static,
            has_default_value=self.default,
            doc_comment=self.doc,
            visibility=Visibility(self.visibility),
        )


class AccessSpec(_Strict):
    kind: Literal["read", "write"]
    name: str | None = None
    name_type: TypeSpec | None = None
    static: bool = False
    owner: TypeSpec | None = None
    class_ref: str | None = None
    line: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_shape(self) -> AccessSpec:
        if (self.name is None) == (self.name_type is None):
            raise ValueError("exactly one of 'name' and 'name_type' is required")
        if self.static and self.owner is not None:
            raise ValueError("static access uses 'class_ref', not 'owner'")
        if not self.static and self.class_ref is not None:
            raise ValueError("'class_ref' is only valid for static access")
        return self

    def to_fact(self) -> AccessFact:
        return AccessFact(
            kind=AccessKind(self.kind),
            name=self.name,
            name_type=self.name_type.to_type() if self.name_type is not None else None,
            # Instance access the front end could not type is mixed
            owner_type=None
            if self.static
            else (self.owner.to_type() if self.owner is not None else MixedType()),
            is_static_access=self.static,
            class_ref=self.class_ref,
            line=self.line,
        )


class ClassSpec(_Strict):
    name: str = Field(min_length=1)
    kind: Literal["class", "interface", "trait", "enum", "anonymous"] = "class"
    display_name: str | None = None
    constructors: list[str] = Field(default_factory=list)
    uninitialized: list[str] = Field(default_factory=list)
    members: list[MemberSpec] = Field(default_factory=list)
    accesses: list[AccessSpec] = Field(default_factory=list)

    def to_class(self) -> ClassUnderAnalysis:
        return ClassUnderAnalysis(
            name=self.name,
            members=tuple(m.to_declaration() for m in self.members),
            accesses=tuple(a.to_fact() for a in self.accesses),
            constructors=tuple(self.constructors),
            kind=ClassKind(self.kind),
            display_name=self.display_name,
        )


class FactsDocument(_Strict):
    hierarchy: dict[str, list[str]] = Field(default_factory=dict)
    classes: list[ClassSpec] = Field(default_factory=list)
