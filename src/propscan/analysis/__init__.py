"""Analysis module - unused private property detection."""

from propscan.analysis.extensions import ExtensionProvider, ReadWriteExtension
from propscan.analysis.models import (
    AccessFact,
    AccessKind,
    AnalysisScope,
    ClassKind,
    ClassUnderAnalysis,
    Diagnostic,
    MemberDeclaration,
    MemberRecord,
    UsageState,
    Verdict,
    Visibility,
)
from propscan.analysis.rule import (
    UninitializedPropertiesOracle,
    UnusedPrivatePropertyRule,
    no_uninitialized_properties,
)
from propscan.analysis.types import (
    ClassHierarchy,
    ConstantStringType,
    MixedType,
    ObjectType,
    StringType,
    TrinaryLogic,
    Type,
    UnionType,
)

__all__ = [
    "AccessFact",
    "AccessKind",
    "AnalysisScope",
    "ClassHierarchy",
    "ClassKind",
    "ClassUnderAnalysis",
    "ConstantStringType",
    "Diagnostic",
    "ExtensionProvider",
    "MemberDeclaration",
    "MemberRecord",
    "MixedType",
    "ObjectType",
    "ReadWriteExtension",
    "StringType",
    "TrinaryLogic",
    "Type",
    "UnionType",
    "UninitializedPropertiesOracle",
    "UnusedPrivatePropertyRule",
    "UsageState",
    "Verdict",
    "Visibility",
    "no_uninitialized_properties",
]
