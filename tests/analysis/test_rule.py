"""Tests for the UnusedPrivatePropertyRule entry point.

End-to-end over one class: table, correlation, classification.
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from itertools import permutations

import pytest

from propscan.analysis.extensions import ExtensionProvider, ReadWriteExtension
from propscan.analysis.models import (
    AccessFact,
    AccessKind,
    AnalysisScope,
    ClassKind,
    ClassUnderAnalysis,
    Diagnostic,
    MemberDeclaration,
    Verdict,
    Visibility,
)
from propscan.analysis.rule import UnusedPrivatePropertyRule, no_uninitialized_properties
from propscan.analysis.types import (
    ClassHierarchy,
    ConstantStringType,
    ObjectType,
    StringType,
    UnionType,
)
from propscan.config.models import AnalysisConfig
from propscan.core.errors import ErrorCode, InternalError

HIERARCHY = ClassHierarchy({"App\\Foo": (), "App\\Bar": ()})
FOO = ObjectType("App\\Foo")
SCOPE = AnalysisScope("App\\Foo", HIERARCHY)


class RecordingOracle:
    def __init__(self, names: Set[str]) -> None:
        self.names = names
        self.calls: list[tuple[str, tuple[str, ...], int]] = []

    def __call__(
        self,
        class_name: str,
        constructors: Sequence[str],
        extensions: Sequence[ReadWriteExtension],
    ) -> Set[str]:
        self.calls.append((class_name, tuple(constructors), len(extensions)))
        return self.names


class SerializerExtension:
    """Properties whose name ends with _json are read by a serializer."""

    def is_always_read(self, declaration: MemberDeclaration, name: str) -> bool:
        return name.endswith("_json")

    def is_always_written(self, declaration: MemberDeclaration, name: str) -> bool:
        return False


class HydratorExtension:
    """Properties whose name ends with _json are written by a hydrator."""

    def is_always_read(self, declaration: MemberDeclaration, name: str) -> bool:
        return False

    def is_always_written(self, declaration: MemberDeclaration, name: str) -> bool:
        return name.endswith("_json")


def access(kind: AccessKind, name: str, owner: object = FOO) -> AccessFact:
    return AccessFact(kind=kind, name=name, owner_type=owner)  # type: ignore[arg-type]


def make_rule(
    *,
    extensions: Sequence[ReadWriteExtension] = (),
    oracle: RecordingOracle | None = None,
    **config: object,
) -> UnusedPrivatePropertyRule:
    return UnusedPrivatePropertyRule(
        ExtensionProvider(extensions),
        AnalysisConfig(**config),  # type: ignore[arg-type]
        oracle or no_uninitialized_properties,
    )


def foo(*members: MemberDeclaration, accesses: Sequence[AccessFact] = (), **kwargs: object) -> ClassUnderAnalysis:
    return ClassUnderAnalysis(name="App\\Foo", members=members, accesses=tuple(accesses), **kwargs)  # type: ignore[arg-type]


def verdicts(diagnostics: list[Diagnostic]) -> dict[str, Verdict]:
    return {d.member: d.verdict for d in diagnostics}


class TestScenarios:
    """Reference scenarios."""

    def test_assigned_only_is_write_only(self) -> None:
        cls = foo(MemberDeclaration(name="x", line=5), accesses=[access(AccessKind.WRITE, "x")])
        diagnostics = make_rule().process(cls, SCOPE)
        assert [(d.message, d.line) for d in diagnostics] == [
            ("Class App\\Foo has a write-only property $x.", 5)
        ]

    def test_default_never_referenced_is_write_only(self) -> None:
        cls = foo(MemberDeclaration(name="y", line=6, has_default_value=True))
        assert verdicts(make_rule().process(cls, SCOPE)) == {"y": Verdict.WRITE_ONLY}

    def test_read_never_assigned_is_read_only(self) -> None:
        cls = foo(MemberDeclaration(name="z", line=7), accesses=[access(AccessKind.READ, "z")])
        oracle = RecordingOracle({"z"})
        diagnostics = make_rule(oracle=oracle).process(cls, SCOPE)
        assert [d.message for d in diagnostics] == ["Class App\\Foo has a read-only property $z."]
        assert oracle.calls == []

    def test_read_never_assigned_uninitialized_is_silent(self) -> None:
        cls = foo(
            MemberDeclaration(name="z", line=7),
            accesses=[access(AccessKind.READ, "z")],
            constructors=("__construct",),
        )
        oracle = RecordingOracle({"z"})
        rule = make_rule(oracle=oracle, check_uninitialized_properties=True, extensions=[SerializerExtension()])
        assert rule.process(cls, SCOPE) == []
        assert oracle.calls == [("App\\Foo", ("__construct",), 1)]

    def test_unbounded_dynamic_name_silences_class(self) -> None:
        dynamic = AccessFact(kind=AccessKind.READ, name_type=StringType(), owner_type=FOO)
        cls = foo(
            MemberDeclaration(name="unused", line=3),
            MemberDeclaration(name="written", line=4),
            accesses=[access(AccessKind.WRITE, "written"), dynamic],
        )
        assert make_rule().process(cls, SCOPE) == []


class TestRuleBehaviour:
    """Suppression, contract and ambient behaviour."""

    def test_unused_and_static_messages(self) -> None:
        cls = foo(
            MemberDeclaration(name="a", line=3),
            MemberDeclaration(name="b", line=4, is_static=True),
            display_name="Foo",
        )
        assert [d.message for d in make_rule().process(cls, SCOPE)] == [
            "Class Foo has an unused property $a.",
            "Class Foo has an unused static property $b.",
        ]

    def test_read_and_written_is_silent(self) -> None:
        cls = foo(
            MemberDeclaration(name="x", line=3),
            accesses=[access(AccessKind.READ, "x"), access(AccessKind.WRITE, "x")],
        )
        assert make_rule().process(cls, SCOPE) == []

    def test_non_private_members_ignored(self) -> None:
        cls = foo(MemberDeclaration(name="x", line=3, visibility=Visibility.PROTECTED))
        assert make_rule().process(cls, SCOPE) == []

    @pytest.mark.parametrize(
        "kind", [ClassKind.INTERFACE, ClassKind.TRAIT, ClassKind.ENUM, ClassKind.ANONYMOUS]
    )
    def test_non_class_kinds_yield_nothing(self, kind: ClassKind) -> None:
        cls = foo(MemberDeclaration(name="x", line=3), kind=kind)
        assert make_rule().process(cls, AnalysisScope(None)) == []

    def test_outside_class_scope_is_contract_violation(self) -> None:
        cls = foo(MemberDeclaration(name="x", line=3))
        with pytest.raises(InternalError) as exc_info:
            make_rule().process(cls, AnalysisScope(None, HIERARCHY))
        assert exc_info.value.code is ErrorCode.CONTRACT_VIOLATION

    def test_scope_of_other_class_is_contract_violation(self) -> None:
        with pytest.raises(InternalError):
            make_rule().process(foo(), AnalysisScope("App\\Bar", HIERARCHY))

    def test_scope_name_matches_case_insensitively(self) -> None:
        assert make_rule().process(foo(), AnalysisScope("\\app\\foo", HIERARCHY)) == []

    def test_access_through_unrelated_type_is_not_usage(self) -> None:
        cls = foo(
            MemberDeclaration(name="x", line=3),
            accesses=[access(AccessKind.READ, "x", ObjectType("App\\Bar"))],
        )
        assert verdicts(make_rule().process(cls, SCOPE)) == {"x": Verdict.UNUSED}

    def test_bounded_dynamic_name_marks_each_candidate(self) -> None:
        dynamic = AccessFact(
            kind=AccessKind.READ,
            name_type=UnionType((ConstantStringType("a"), ConstantStringType("b"))),
            owner_type=FOO,
        )
        cls = foo(
            MemberDeclaration(name="a", line=3, has_default_value=True),
            MemberDeclaration(name="b", line=4),
            MemberDeclaration(name="c", line=5, has_default_value=True),
            accesses=[dynamic],
        )
        assert verdicts(make_rule().process(cls, SCOPE)) == {
            "b": Verdict.READ_ONLY,
            "c": Verdict.WRITE_ONLY,
        }


class TestLaws:
    """Properties that hold for every input."""

    def test_default_value_never_unused_or_read_only(self) -> None:
        for accesses in ([], [access(AccessKind.READ, "x")], [access(AccessKind.WRITE, "x")]):
            cls = foo(MemberDeclaration(name="x", line=3, has_default_value=True), accesses=accesses)
            found = verdicts(make_rule().process(cls, SCOPE))
            assert found.get("x") in (None, Verdict.WRITE_ONLY)

    def test_always_read_tag_never_unused_or_write_only(self) -> None:
        doc = "/** @serialized */"
        for accesses in ([], [access(AccessKind.WRITE, "x")]):
            cls = foo(MemberDeclaration(name="x", line=3, doc_comment=doc), accesses=accesses)
            found = verdicts(make_rule(always_read_tags=("@serialized",)).process(cls, SCOPE))
            assert found.get("x") in (None, Verdict.READ_ONLY)

    def test_always_written_tag(self) -> None:
        cls = foo(
            MemberDeclaration(name="x", line=3, doc_comment="/** @inject */"),
            accesses=[access(AccessKind.READ, "x")],
        )
        assert make_rule(always_written_tags=("@inject",)).process(cls, SCOPE) == []

    def test_extensions_combine(self) -> None:
        cls = foo(MemberDeclaration(name="payload_json", line=3))
        rule = make_rule(extensions=[SerializerExtension(), HydratorExtension()])
        assert rule.process(cls, SCOPE) == []

    def test_order_independent(self) -> None:
        members = (
            MemberDeclaration(name="a", line=3),
            MemberDeclaration(name="b", line=4, has_default_value=True),
            MemberDeclaration(name="c", line=5),
            MemberDeclaration(name="d_json", line=6),
        )
        facts = [
            access(AccessKind.READ, "a"),
            access(AccessKind.WRITE, "c", ObjectType("App\\Bar")),
            access(AccessKind.READ, "c"),
            access(AccessKind.READ, "b"),
        ]
        extension_sets = list(permutations([SerializerExtension(), HydratorExtension()]))
        outcomes = set()
        for ordered_facts in permutations(facts):
            for extensions in extension_sets:
                diagnostics = make_rule(extensions=extensions).process(
                    foo(*members, accesses=ordered_facts), SCOPE
                )
                outcomes.add(tuple(sorted(verdicts(diagnostics).items(), key=lambda kv: kv[0])))
        assert outcomes == {(("a", Verdict.READ_ONLY), ("c", Verdict.READ_ONLY))}

    def test_one_diagnostic_per_member_at_most(self) -> None:
        cls = foo(
            MemberDeclaration(name="a", line=3),
            MemberDeclaration(name="b", line=4),
            accesses=[access(AccessKind.READ, "a"), access(AccessKind.READ, "a")],
        )
        members = [d.member for d in make_rule().process(cls, SCOPE)]
        assert sorted(members) == sorted(set(members))
