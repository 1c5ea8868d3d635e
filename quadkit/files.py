"""Loading files from disk, optionally relative to an assets folder."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

_assets_folder: Optional[str] = None


class FileError(Exception):
    """A file could not be loaded."""

    def __init__(self, kind: OSError, path: str) -> None:
        self.kind = kind
        self.path = path
        reason = kind.strerror or str(kind)
        super().__init__(f"Couldn't load file {path}: {reason}")


def set_pc_assets_folder(path: Optional[str]) -> None:
    """Make later loads resolve paths inside this folder; None turns it off."""
    global _assets_folder
    _assets_folder = path


def _resolve(path: str) -> str:
    if _assets_folder is not None:
        return f"{_assets_folder}/{path}"
    return path


def load_file(path: str) -> bytes:
    """Read the whole file; raise FileError if it cannot be read."""
    full_path = _resolve(path)
    try:
        return Path(full_path).read_bytes()
    except OSError as exc:
        raise FileError(exc, full_path) from exc


def load_string(path: str) -> str:
    """Read a file as UTF-8 text, replacing undecodable bytes."""
    return load_file(path).decode("utf-8", errors="replace")