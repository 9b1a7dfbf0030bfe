"""Facts module - documents produced by a front end."""

from propscan.facts.loader import ProgramFacts, load_facts, parse_facts
from propscan.facts.schema import FactsDocument

__all__ = [
    "FactsDocument",
    "ProgramFacts",
    "load_facts",
    "parse_facts",
]
