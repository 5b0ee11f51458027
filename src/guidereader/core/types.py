"""Data types and result structures for reader operations."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..catalog.schema import GuideCatalog

@dataclass(frozen=True)
class ReaderState:
    """Caller-owned reader state; the reader returns a new one on every change."""
    current_file: str = ""                  # Selected guide file, '' if none
    catalog: Optional[GuideCatalog] = None  # Last successfully loaded catalog

@dataclass
class ReaderView:
    """What the presentation layer should show."""
    kind: str                               # "document" | "empty" | "placeholder" | "error"
    display_name: str = ""
    sentences: List[str] = field(default_factory=list)
    message: Optional[str] = None           # Placeholder or error text

    @property
    def count(self) -> int:
        """Number of sentences in the view."""
        return len(self.sentences)
