"""Pydantic schemas for the guide catalog (list.json)."""

from pydantic import BaseModel, Field
from typing import List, Optional

class GuideEntry(BaseModel):
    """One guide: a display name and the .txt file holding its narration."""
    name: str = Field(min_length=1, description="Human-readable guide name, e.g. 故宫")
    file: str = Field(min_length=1, description="Text file name relative to the text directory")

    class Config:
        extra = "ignore"  # catalogs may carry extra per-item metadata

class GuideCatalog(BaseModel):
    """Ordered list of valid guide entries."""
    entries: List[GuideEntry] = Field(default_factory=list, description="Guides in catalog order")
    skipped: int = Field(default=0, ge=0, description="Items dropped as invalid while parsing")

    class Config:
        extra = "forbid"

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def first(self) -> Optional[GuideEntry]:
        """First entry, or None for an empty catalog."""
        return self.entries[0] if self.entries else None

    def find(self, file: str) -> Optional[GuideEntry]:
        """Entry whose file name equals `file` exactly."""
        for entry in self.entries:
            if entry.file == file:
                return entry
        return None

    def files(self) -> List[str]:
        return [entry.file for entry in self.entries]

    def validate_entries(self) -> List[str]:
        """Validate entry configuration and return any issues."""
        issues = []

        files = self.files()
        duplicates = sorted(set(x for x in files if files.count(x) > 1))
        if duplicates:
            issues.append(f"Duplicate guide files: {duplicates}")

        blank_names = [e.file for e in self.entries if not e.name.strip()]
        if blank_names:
            issues.append(f"Guides with blank names: {blank_names}")

        return issues
