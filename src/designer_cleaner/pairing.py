"""
File Pair Resolver.

A designer file ``Customer.Designer.cs`` pairs with the hand-authored
companion ``Customer.cs`` in the same directory. This module derives the
companion name, enumerates designer files and loads both halves of a pair.

Loading failures are raised as PairError subclasses; callers turn them into
per-pair messages and carry on with the next pair.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from designer_cleaner.syntax import SyntaxTree, parse, warn_if_broken


DESIGNER_SUFFIX = ".Designer.cs"
SOURCE_EXTENSION = ".cs"


class PairError(Exception):
    """Base class for per-pair errors. ``str(error)`` is the console message."""
    pass


class PairFileNotFound(PairError):
    """Raised when the designer or the companion file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"File not found: {path}")


class PairReadError(PairError):
    """Raised when a file of the pair exists but cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading files: {reason}")


@dataclass
class SourceFile:
    """A source file read from disk and parsed."""
    path: Path
    tree: SyntaxTree

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class SourcePair:
    """Designer file plus its companion."""
    designer: SourceFile
    companion: SourceFile


def is_designer_file(file_name: str) -> bool:
    return file_name.lower().endswith(DESIGNER_SUFFIX.lower())


def companion_name(designer_name: str) -> str:
    """
    Derive the companion file name from a designer file name.

    ``Order.Designer.cs`` -> ``Order.cs``. The suffix match is
    case-insensitive; a name without the suffix is returned unchanged.
    """
    if is_designer_file(designer_name):
        return designer_name[:-len(DESIGNER_SUFFIX)] + SOURCE_EXTENSION
    return designer_name


def companion_path(designer_path: Union[str, Path]) -> Path:
    designer_path = Path(designer_path)
    return designer_path.with_name(companion_name(designer_path.name))


def iter_designer_files(directory: Union[str, Path]) -> List[Path]:
    """
    Designer files directly inside ``directory`` (not recursive).

    Sorted by name so that one run always processes pairs in the same order.
    """
    found = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_file() and is_designer_file(entry.name):
                found.append(Path(entry.path))
    return sorted(found, key=lambda p: p.name)


def load_source(path: Union[str, Path]) -> SourceFile:
    """
    Read and parse one file.

    Raises:
        PairFileNotFound: If the file doesn't exist
        PairReadError: If reading or decoding fails
    """
    path = Path(path)
    if not path.is_file():
        raise PairFileNotFound(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise PairReadError(path, e.strerror or str(e))

    try:
        tree = parse(data)
    except UnicodeDecodeError as e:
        raise PairReadError(path, str(e))
    warn_if_broken(tree, str(path))
    return SourceFile(path=path, tree=tree)


def load_pair(designer_path: Union[str, Path]) -> SourcePair:
    """
    Load a designer file and its companion.

    Both files are checked for existence before either is read, so a missing
    companion never causes the designer file to be opened.
    """
    designer_path = Path(designer_path)
    partial_path = companion_path(designer_path)

    for path in (designer_path, partial_path):
        if not path.is_file():
            raise PairFileNotFound(path)

    return SourcePair(designer=load_source(designer_path), companion=load_source(partial_path))


__all__ = [
    "DESIGNER_SUFFIX",
    "SOURCE_EXTENSION",
    "PairError",
    "PairFileNotFound",
    "PairReadError",
    "SourceFile",
    "SourcePair",
    "is_designer_file",
    "companion_name",
    "companion_path",
    "iter_designer_files",
    "load_source",
    "load_pair",
]
