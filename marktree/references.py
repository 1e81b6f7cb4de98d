"""Link reference definitions and their lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Reference:
    """The destination and title a link reference resolves to."""

    url: str
    title: str = ""


def normalize_label(label: str) -> str:
    """Normalise a link label: trim, collapse whitespace and case-fold."""
    return " ".join(label.split()).casefold()


class RefMap:
    """Reference definitions by normalised label.

    ``max_ref_size`` bounds the total size of URLs and titles handed out by
    ``lookup``; once exhausted, further lookups fail. None means no bound.
    """

    def __init__(self, max_ref_size: Optional[int] = None) -> None:
        self.map: Dict[str, Reference] = {}
        self.max_ref_size = max_ref_size
        self.ref_size = 0

    def __len__(self) -> int:
        return len(self.map)

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and normalize_label(label) in self.map

    def add(self, label: str, reference: Reference) -> bool:
        """Define ``label``; the first definition wins. Returns whether it was added."""
        key = normalize_label(label)
        if not key or key in self.map:
            return False
        self.map[key] = reference
        return True

    def lookup(self, label: str) -> Optional[Reference]:
        """Resolve ``label``, or None if undefined or the size budget is spent."""
        entry = self.map.get(normalize_label(label))
        if entry is None:
            return None
        size = len(entry.url.encode("utf-8")) + len(entry.title.encode("utf-8"))
        if self.max_ref_size is not None and size > self.max_ref_size - self.ref_size:
            return None
        self.ref_size += size
        return entry