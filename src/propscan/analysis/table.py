"""Property table - one record per private property, seeded before usage."""

from __future__ import annotations

from collections.abc import Sequence

from propscan.analysis.extensions import ReadWriteExtension, resolve_overrides
from propscan.analysis.models import ClassUnderAnalysis, MemberDeclaration, MemberRecord, UsageState
from propscan.config.models import AnalysisConfig


def tag_evidence(doc_comment: str | None, config: AnalysisConfig) -> UsageState:
    """Evidence from doc markers; plain substring search over the raw comment."""
    if doc_comment is None:
        return UsageState.EMPTY
    return UsageState(
        read=any(tag in doc_comment for tag in config.always_read_tags),
        written=any(tag in doc_comment for tag in config.always_written_tags),
    )


def seed_state(
    declaration: MemberDeclaration,
    config: AnalysisConfig,
    extensions: Sequence[ReadWriteExtension],
) -> UsageState:
    state = tag_evidence(declaration.doc_comment, config)
    if not state.complete:
        state = resolve_overrides(declaration, extensions, known=state)
    return state | UsageState(written=declaration.has_default_value)


def build_member_table(
    cls: ClassUnderAnalysis,
    config: AnalysisConfig,
    extensions: Sequence[ReadWriteExtension],
) -> dict[str, MemberRecord]:
    """Initial records in declaration order. Non-private members are left out.

    A name declared twice keeps its first declaration; later duplicates are
    ignored.
    """
    table: dict[str, MemberRecord] = {}
    for declaration in cls.members:
        if not declaration.is_private or declaration.name in table:
            continue
        record = MemberRecord(declaration=declaration)
        record.merge(seed_state(declaration, config, extensions))
        table[declaration.name] = record
    return table
