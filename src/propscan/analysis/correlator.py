"""Usage correlation - attributes access facts to private properties.

Each access fact is turned into contributions (property name, evidence)
first; the table is only touched once the whole fact set has been seen.
Evidence is OR-ed, so the outcome does not depend on fact order.

A computed name whose type does not narrow to literal strings could refer
to any property. The class is then abandoned as a whole and nothing in it
is reported.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from propscan.analysis.models import AccessFact, ClassUnderAnalysis, MemberRecord, UsageState
from propscan.analysis.types import ClassHierarchy, ObjectType, Type, constant_strings, contains_mixed
from propscan.core.logging import get_logger

log = get_logger(__name__)


@dataclass
class Correlation:
    """Outcome of walking a class's access facts."""

    abandoned: bool = False
    contributions: list[tuple[str, UsageState]] = field(default_factory=list)
    skipped: int = 0
    # The fact that caused abandonment, for logging
    unbounded_fact: AccessFact | None = None


def candidate_names(fact: AccessFact) -> list[str]:
    """Property names the fact may refer to; empty means unbounded."""
    if fact.name is not None:
        return [fact.name]
    if fact.name_type is None:
        return []
    return constant_strings(fact.name_type)


def owner_type(fact: AccessFact) -> Type | None:
    """Type the property was fetched on; None when it cannot be determined."""
    if fact.is_static_access:
        if fact.class_ref is None:
            return None
        return ObjectType(fact.class_ref)
    return fact.owner_type


def targets_class(owner: Type, class_type: ObjectType, hierarchy: ClassHierarchy) -> bool:
    if class_type.is_super_type_of(owner, hierarchy).no():
        return False
    return not contains_mixed(owner)


def collect(cls: ClassUnderAnalysis, hierarchy: ClassHierarchy) -> Correlation:
    """Resolve every fact of the class into contributions."""
    class_type = ObjectType(cls.name)
    result = Correlation()
    for fact in cls.accesses:
        names = candidate_names(fact)
        if not names:
            result.abandoned = True
            result.unbounded_fact = fact
            result.contributions.clear()
            return result

        owner = owner_type(fact)
        if owner is None or not targets_class(owner, class_type, hierarchy):
            result.skipped += 1
            log.debug(
                "access_skipped",
                class_name=cls.name,
                names=names,
                owner=owner.describe() if owner is not None else None,
                line=fact.line,
            )
            continue

        evidence = UsageState.of(fact.kind)
        result.contributions.extend((name, evidence) for name in names)
    return result


def apply(table: dict[str, MemberRecord], contributions: Iterable[tuple[str, UsageState]]) -> None:
    """Fold contributions into the table; names outside it are ignored."""
    for name, evidence in contributions:
        record = table.get(name)
        if record is not None:
            record.merge(evidence)


def correlate(
    cls: ClassUnderAnalysis,
    table: dict[str, MemberRecord],
    hierarchy: ClassHierarchy,
) -> bool:
    """Update table with the class's usages. Returns False if abandoned."""
    correlation = collect(cls, hierarchy)
    if correlation.abandoned:
        fact = correlation.unbounded_fact
        log.info(
            "class_analysis_abandoned",
            class_name=cls.name,
            reason="unbounded_dynamic_property_name",
            name_type=fact.name_type.describe() if fact and fact.name_type else None,
            line=fact.line if fact else None,
        )
        return False
    apply(table, correlation.contributions)
    return True
