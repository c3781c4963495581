"""Per-document registry of composite types already expanded."""

from __future__ import annotations


class SeenSet:
    """Map descriptor handles to the reference identifier minted for them.

    Scoped to a single root-type build and never shared between documents.
    """

    def __init__(self) -> None:
        self._identifiers: dict[int, str] = {}

    def mark(self, handle: int, identifier: str) -> None:
        self._identifiers[handle] = identifier

    def identifier_for(self, handle: int) -> str | None:
        return self._identifiers.get(handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self._identifiers

    def __len__(self) -> int:
        return len(self._identifiers)
