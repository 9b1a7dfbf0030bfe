"""Unused private property rule.

Usage::

    rule = UnusedPrivatePropertyRule(ExtensionProvider(), AnalysisConfig())
    diagnostics = rule.process(cls, AnalysisScope(cls.name, hierarchy))

Steps per class:
1. build the property table (doc markers, extensions, defaults)
2. correlate the class's access facts with it
3. classify each record, consulting the uninitialized oracle if enabled

Only concrete classes are analyzed. Anything else, and any class holding
an access with an unbounded computed name, yields no diagnostics.
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from typing import Protocol

from propscan.analysis.classifier import diagnose
from propscan.analysis.correlator import correlate
from propscan.analysis.extensions import ExtensionProvider, ReadWriteExtension
from propscan.analysis.models import AnalysisScope, ClassKind, ClassUnderAnalysis, Diagnostic
from propscan.analysis.table import build_member_table
from propscan.analysis.types import ClassHierarchy, normalize_class_name
from propscan.config.models import AnalysisConfig
from propscan.core.errors import InternalError
from propscan.core.logging import get_logger

log = get_logger(__name__)


class UninitializedPropertiesOracle(Protocol):
    """Constructor dataflow analysis, run elsewhere.

    Returns the names of properties that are not assigned on every path
    through every listed constructor.
    """

    def __call__(
        self,
        class_name: str,
        constructors: Sequence[str],
        extensions: Sequence[ReadWriteExtension],
    ) -> Set[str]: ...


def no_uninitialized_properties(
    class_name: str,  # noqa: ARG001
    constructors: Sequence[str],  # noqa: ARG001
    extensions: Sequence[ReadWriteExtension],  # noqa: ARG001
) -> Set[str]:
    """Oracle for callers without a constructor analysis."""
    return frozenset()


def _same_class(a: str, b: str) -> bool:
    return normalize_class_name(a) == normalize_class_name(b)


class UnusedPrivatePropertyRule:
    """Reports unused, write-only and read-only private properties."""

    def __init__(
        self,
        extension_provider: ExtensionProvider,
        config: AnalysisConfig,
        uninitialized_oracle: UninitializedPropertiesOracle = no_uninitialized_properties,
    ) -> None:
        self._extension_provider = extension_provider
        self._config = config
        self._uninitialized_oracle = uninitialized_oracle

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def process(self, cls: ClassUnderAnalysis, scope: AnalysisScope) -> list[Diagnostic]:
        """Analyze one class.

        Raises:
            InternalError: If scope is not inside cls. That is a caller bug,
                unlike the data-dependent suppressions which return [].
        """
        if cls.kind is not ClassKind.CLASS:
            log.debug("class_skipped", class_name=cls.name, kind=cls.kind.value)
            return []
        if scope.class_name is None:
            raise InternalError.contract_violation(
                "class properties analyzed outside of a class scope", class_name=cls.name
            )
        if not _same_class(scope.class_name, cls.name):
            raise InternalError.contract_violation(
                "scope belongs to a different class",
                class_name=cls.name,
                scope_class=scope.class_name,
            )

        return self._analyze(cls, scope.hierarchy)

    def _analyze(self, cls: ClassUnderAnalysis, hierarchy: ClassHierarchy) -> list[Diagnostic]:
        extensions = self._extension_provider.get_extensions()
        table = build_member_table(cls, self._config, extensions)
        if not correlate(cls, table, hierarchy):
            return []

        uninitialized: Set[str] = frozenset()
        if self._config.check_uninitialized_properties and any(
            r.read and not r.written for r in table.values()
        ):
            uninitialized = self._uninitialized_oracle(cls.name, cls.constructors, extensions)

        diagnostics = diagnose(
            cls.label,
            table.values(),
            uninitialized,
            check_uninitialized=self._config.check_uninitialized_properties,
        )
        log.debug(
            "class_analyzed",
            class_name=cls.name,
            properties=len(table),
            accesses=len(cls.accesses),
            diagnostics=len(diagnostics),
        )
        return diagnostics
