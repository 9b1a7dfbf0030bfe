"""Facts document loading."""

from __future__ import annotations

import json
from collections.abc import Sequence, Set
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from propscan.analysis.extensions import ReadWriteExtension
from propscan.analysis.models import ClassUnderAnalysis
from propscan.analysis.types import ClassHierarchy, normalize_class_name
from propscan.core.errors import FactsError
from propscan.core.logging import get_logger
from propscan.facts.schema import FactsDocument

log = get_logger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class ProgramFacts:
    """Loaded facts, ready for analysis."""

    hierarchy: ClassHierarchy
    classes: list[ClassUnderAnalysis] = field(default_factory=list)
    # Keyed by normalize_class_name
    uninitialized: dict[str, frozenset[str]] = field(default_factory=dict)

    def uninitialized_oracle(
        self,
        class_name: str,
        constructors: Sequence[str],  # noqa: ARG002
        extensions: Sequence[ReadWriteExtension],  # noqa: ARG002
    ) -> Set[str]:
        """Answers recorded by the front end's constructor analysis."""
        return self.uninitialized.get(normalize_class_name(class_name), frozenset())


def _read_document(path: Path) -> Any:
    if not path.exists():
        raise FactsError.file_not_found(str(path))
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            return json.loads(text)
        if suffix in _YAML_SUFFIXES:
            return yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise FactsError.parse_error(str(path), str(e)) from e
    raise FactsError.unsupported_format(str(path))


def parse_facts(data: Any) -> ProgramFacts:
    """Validate raw document data and convert it to analysis models.

    Raises:
        FactsError: If the document does not match the schema.
    """
    try:
        document = FactsDocument.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"]) or "<root>"
        raise FactsError.invalid(location, err["msg"]) from e

    # Every declared class is known to the hierarchy, parentless unless listed
    parents: dict[str, tuple[str, ...]] = {spec.name: () for spec in document.classes}
    parents.update((name, tuple(supers)) for name, supers in document.hierarchy.items())
    facts = ProgramFacts(hierarchy=ClassHierarchy(parents))
    for spec in document.classes:
        key = normalize_class_name(spec.name)
        if key in facts.uninitialized:
            raise FactsError.invalid(f"classes.{spec.name}", "class declared more than once")
        facts.classes.append(spec.to_class())
        facts.uninitialized[key] = frozenset(spec.uninitialized)
    return facts


def load_facts(path: Path) -> ProgramFacts:
    """Load a .json, .yaml or .yml facts document."""
    facts = parse_facts(_read_document(path))
    log.info(
        "facts_loaded",
        path=str(path),
        classes=len(facts.classes),
        accesses=sum(len(c.accesses) for c in facts.classes),
    )
    return facts
