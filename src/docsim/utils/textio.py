from __future__ import annotations

"""Reading documents and writing comparison results."""

from pathlib import Path

DEFAULT_ENCODING = "utf-8"


class DocumentNotFoundError(FileNotFoundError):
    """Raised when an input document does not exist."""


def require_existing(path: Path, label: str = "Document") -> Path:
    if not path.exists():
        raise DocumentNotFoundError(f"{label} does not exist: {path}")
    return path


def read_document(path: Path, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the whole of *path* as text."""

    require_existing(path)
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_result(path: Path, content: str, *, encoding: str = DEFAULT_ENCODING) -> Path:
    """Write *content* to *path*, replacing any existing file.

    Missing parent directories are created. A path naming a directory is
    rejected with :class:`IsADirectoryError`.
    """

    if path.is_dir():
        raise IsADirectoryError(f"Path points to a directory, not a file: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
    return path
