"""
Resource enumeration.

Walks a directory tree and maps every file with a given extension to a display
name (its path relative to the root, with forward slashes). Walk errors are
raised, never skipped.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    locator: Path
    name: str

    @contextmanager
    def open(self) -> Iterator[BinaryIO]:
        with open(self.locator, "rb") as fh:
            yield fh

    def read_bytes(self) -> bytes:
        with self.open() as fh:
            return fh.read()


def _raise(err: OSError) -> None:
    raise err


def scan(root: Union[str, Path], extension: str) -> Dict[Path, str]:
    root = Path(root)
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    suffix = "." + extension.lstrip(".")
    found: Dict[Path, str] = {}

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        for filename in filenames:
            if not filename.endswith(suffix):
                continue
            path = Path(dirpath, filename)
            found[path.resolve()] = path.relative_to(root).as_posix()

    logger.debug("scan %s for *%s: %d match(es)", root, suffix, len(found))
    return found
