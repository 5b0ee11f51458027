"""Guide reader: catalog refresh, selection and document opening."""

from dataclasses import replace
from typing import Optional, Tuple
from ..core.types import ReaderState, ReaderView
from ..core.abc import DocumentSource, Segmenter, Logger, Meter
from ..catalog.loader import load_catalog_from_string, CatalogLoadError
from ..catalog.schema import GuideEntry
from ..segmenters.sentence import SentenceSegmenter
from ..store import DocumentLoadError

class GuideReader:
    """
    Turns catalog and document content into views.
    Holds no selection state of its own: every operation takes a
    ReaderState and returns the next one.
    """

    def __init__(self, *, source: DocumentSource, segmenter: Optional[Segmenter] = None,
                 catalog_format: str = "json",
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize reader with its collaborators.

        Args:
            source: Where guide bodies and the catalog are read from
            segmenter: Optional text segmenter (fallback to deterministic)
            catalog_format: "json" or "yaml"
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.source = source
        self.segmenter = segmenter or SentenceSegmenter()
        self.catalog_format = catalog_format
        self.log = logger
        self.meter = meter

    def refresh(self, state: ReaderState) -> Tuple[ReaderState, ReaderView]:
        """
        Reload the catalog and open the current guide (or the first one).

        Args:
            state: Current reader state

        Returns:
            Tuple of (new state, view to display)
        """
        try:
            catalog = load_catalog_from_string(self.source.read_catalog(),
                                               fmt=self.catalog_format)
        except (CatalogLoadError, DocumentLoadError) as e:
            if self.log:
                self.log.error("catalog_load_failed", error=str(e))
            if self.meter:
                self.meter.inc("guidereader.catalog_error")
            return state, ReaderView(kind="error", message=f"无法加载文件列表: {e}")

        if self.log:
            self.log.info("catalog_loaded", entries=len(catalog.entries), skipped=catalog.skipped)

        if catalog.is_empty:
            return (replace(state, catalog=catalog),
                    ReaderView(kind="placeholder", message="list.json中无有效条目"))

        target = catalog.find(state.current_file) if state.current_file else None
        if target is None:
            if state.current_file and self.log:
                self.log.warn("current_file_missing", file=state.current_file)
            target = catalog.first()

        new_state = ReaderState(current_file=target.file, catalog=catalog)
        return new_state, self.open(target)

    def select(self, state: ReaderState, file: str) -> Tuple[ReaderState, ReaderView]:
        """
        Switch to another guide.

        Args:
            state: Current reader state
            file: File name picked by the user; '' clears the selection

        Returns:
            Tuple of (new state, view to display)
        """
        if not file:
            return (replace(state, current_file=""),
                    ReaderView(kind="placeholder", message="请选择导游词"))

        entry = state.catalog.find(file) if state.catalog else None
        if entry is None:
            # catalog out of date, reload it
            if self.log:
                self.log.warn("unknown_selection", file=file)
            return self.refresh(replace(state, current_file=file))

        return replace(state, current_file=entry.file), self.open(entry)

    def open(self, entry: GuideEntry) -> ReaderView:
        """Read and segment one guide."""
        try:
            content = self.source.read(entry.file)
        except DocumentLoadError as e:
            if self.log:
                self.log.error("document_load_failed", file=entry.file, error=str(e))
            if self.meter:
                self.meter.inc("guidereader.document_error")
            return ReaderView(kind="error", display_name=entry.name,
                              message=f"读取失败: {entry.name} ({e})")

        if not content.strip():
            return ReaderView(kind="empty", display_name=entry.name, message="没有内容")

        sentences = self.segmenter.segment(content)
        if self.meter:
            self.meter.observe("guidereader.sentences", len(sentences), file=entry.file)
        if self.log:
            self.log.info("document_opened", file=entry.file, sentences=len(sentences))

        return ReaderView(kind="document", display_name=entry.name, sentences=sentences)
