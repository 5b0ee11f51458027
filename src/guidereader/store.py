"""Local text-directory source for guide documents and their catalog."""

from pathlib import Path
from typing import Union


class DocumentLoadError(Exception):
    """Exception raised when a guide document cannot be read."""
    pass


class TextDirectoryStore:
    """
    Reads guides from a directory laid out as:

        text/
          list.json
          gugong.txt
          ...
    """

    def __init__(self, text_dir: Union[str, Path], catalog_name: str = "list.json",
                 encoding: str = "utf-8-sig"):
        self.text_dir = Path(text_dir)
        self.catalog_name = catalog_name
        self.encoding = encoding

    @property
    def catalog_path(self) -> Path:
        return self.text_dir / self.catalog_name

    def _resolve(self, file: str) -> Path:
        """Resolve a file name inside text_dir, rejecting anything outside it."""
        root = self.text_dir.resolve()
        path = (root / file).resolve()
        if path == root or root not in path.parents:
            raise DocumentLoadError(f"File is outside the text directory: {file}")
        return path

    def _read_path(self, path: Path) -> str:
        if not path.is_file():
            raise DocumentLoadError(f"File not found: {path.name}")
        try:
            return path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"Cannot decode {path.name} as {self.encoding}: {e}") from e
        except OSError as e:
            raise DocumentLoadError(f"Cannot read {path.name}: {e}") from e

    def read(self, file: str) -> str:
        """
        Return the full content of a guide document.

        Args:
            file: File name relative to the text directory

        Raises:
            DocumentLoadError: If the file is missing, unreadable or outside text_dir
        """
        return self._read_path(self._resolve(file))

    def read_catalog(self) -> str:
        """Return the raw catalog content."""
        return self._read_path(self._resolve(self.catalog_name))
