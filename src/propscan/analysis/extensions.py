"""Read/write extensions - evidence the class body cannot show.

Frameworks read and write properties through reflection, serialization or
injection. An extension answers, per declared property, whether such a
mechanism always reads or always writes it. Answers only ever add
evidence: a False never cancels another extension's True.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from propscan.analysis.models import MemberDeclaration, UsageState


@runtime_checkable
class ReadWriteExtension(Protocol):
    """Pure predicates over a property declaration. Must not mutate state."""

    def is_always_read(self, declaration: MemberDeclaration, name: str) -> bool: ...

    def is_always_written(self, declaration: MemberDeclaration, name: str) -> bool: ...


class ExtensionProvider:
    """Ordered registry of read/write extensions.

    Every registration is kept, including several instances of one class.
    Only an explicit name makes a later registration replace an earlier one.
    """

    def __init__(self, extensions: Iterable[ReadWriteExtension] = ()) -> None:
        self._entries: list[tuple[str | None, ReadWriteExtension]] = []
        for extension in extensions:
            self.register(extension)

    def register(self, extension: ReadWriteExtension, *, name: str | None = None) -> None:
        """Register an extension; re-registering a name replaces it in place."""
        if not isinstance(extension, ReadWriteExtension):
            raise TypeError(f"{extension!r} does not implement ReadWriteExtension")
        if name is not None:
            for index, (existing, _) in enumerate(self._entries):
                if existing == name:
                    self._entries[index] = (name, extension)
                    return
        self._entries.append((name, extension))

    def get(self, name: str) -> ReadWriteExtension | None:
        for existing, extension in self._entries:
            if existing == name:
                return extension
        return None

    def get_extensions(self) -> list[ReadWriteExtension]:
        return [extension for _, extension in self._entries]

    def __len__(self) -> int:
        return len(self._entries)


def resolve_overrides(
    declaration: MemberDeclaration,
    extensions: Sequence[ReadWriteExtension],
    *,
    known: UsageState = UsageState.EMPTY,
) -> UsageState:
    """OR together the extensions' verdicts on top of already known evidence.

    Stops asking once both flags are set; a flag that is already True is
    never asked about again.
    """
    state = known
    for extension in extensions:
        if state.complete:
            break
        if not state.read and extension.is_always_read(declaration, declaration.name):
            state = state | UsageState(read=True)
        if not state.written and extension.is_always_written(declaration, declaration.name):
            state = state | UsageState(written=True)
    return state
