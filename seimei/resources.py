"""Location of the kanji dictionaries and name lists the package reads."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR_ENV = "SEIMEI_DATA_DIR"


def data_dir() -> Path:
    """Return the directory that holds the data files.

    The environment variable ``SEIMEI_DATA_DIR`` overrides the default,
    which is the ``data`` directory next to this module.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent / "data"


def read_bytes(relative_path: str | os.PathLike[str]) -> bytes:
    """Read a data file given by its path relative to :func:`data_dir`."""
    relative = Path(relative_path)
    if relative.is_absolute():
        raise ValueError(f"data path must be relative: {str(relative)!r}")
    return (data_dir() / relative).read_bytes()