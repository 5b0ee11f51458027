"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any

class Segmenter(Protocol):
    """Text segmenter. If None, the deterministic sentence segmenter is used."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into display units (sentences).

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of text segments
        """
        ...

class DocumentSource(Protocol):
    """Where guide bodies and the guide catalog come from (directory, server, ...)."""

    def read(self, file: str) -> str:
        """
        Return the full, unmodified content of a guide document.

        Raises:
            DocumentLoadError: If the document cannot be read
        """
        ...

    def read_catalog(self) -> str:
        """Return the raw catalog (list.json) content."""
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
