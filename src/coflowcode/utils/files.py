"""File handling utilities."""

import re
import unicodedata
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path (for chaining)
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_filename(name: str, extension: str = ".json", max_length: int = 255) -> str:
    """Convert a title to a download-safe filename.

    Runs of characters other than ASCII letters and digits collapse to a
    single underscore and leading/trailing underscores are dropped.

    Args:
        name: Title or original filename
        extension: Extension appended to the result (with the dot)
        max_length: Maximum length of the stem

    Returns:
        Safe filename string
    """
    name = unicodedata.normalize("NFKD", name)
    name = name.encode("ascii", "ignore").decode("ascii")

    stem = re.sub(r"[^a-zA-Z0-9]+", "_", name).strip("_")
    stem = stem[:max_length]

    if not stem:
        stem = "assignment"

    return f"{stem}{extension}"


def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: Path, content: str) -> Path:
    """Write UTF-8 text, creating parent directories."""
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return path
