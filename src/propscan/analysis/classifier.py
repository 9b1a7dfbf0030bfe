"""Verdicts and messages for the final property records.

| read  | written | uninitialized & checked | verdict    |
|-------|---------|-------------------------|------------|
| no    | no      | -                       | unused     |
| no    | yes     | -                       | write-only |
| yes   | no      | no                      | read-only  |
| yes   | no      | yes                     | suppressed |
| yes   | yes     | -                       | ok         |
"""

from __future__ import annotations

from collections.abc import Iterable, Set

from propscan.analysis.models import Diagnostic, MemberRecord, Verdict

_TEMPLATES = {
    Verdict.UNUSED: "Class {cls} has an unused {kind} ${name}.",
    Verdict.WRITE_ONLY: "Class {cls} has a write-only {kind} ${name}.",
    Verdict.READ_ONLY: "Class {cls} has a read-only {kind} ${name}.",
}


def classify(read: bool, written: bool, *, uninitialized: bool = False) -> Verdict:
    """Verdict for one property. `uninitialized` is only True when checking is enabled."""
    if not read:
        return Verdict.WRITE_ONLY if written else Verdict.UNUSED
    if written:
        return Verdict.OK
    return Verdict.SUPPRESSED if uninitialized else Verdict.READ_ONLY


def format_message(verdict: Verdict, class_label: str, record: MemberRecord) -> str:
    return _TEMPLATES[verdict].format(
        cls=class_label,
        kind=record.declaration.kind_label,
        name=record.declaration.name,
    )


def diagnose(
    class_label: str,
    records: Iterable[MemberRecord],
    uninitialized: Set[str],
    *,
    check_uninitialized: bool,
) -> list[Diagnostic]:
    """Diagnostics in record order. The uninitialized set is ignored unless checked."""
    diagnostics: list[Diagnostic] = []
    for record in records:
        name = record.declaration.name
        verdict = classify(
            record.read,
            record.written,
            uninitialized=check_uninitialized and name in uninitialized,
        )
        if not verdict.reported:
            continue
        diagnostics.append(
            Diagnostic(
                message=format_message(verdict, class_label, record),
                line=record.declaration.line,
                member=name,
                verdict=verdict,
            )
        )
    return diagnostics
