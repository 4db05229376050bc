"""
Designer Rewriter.

Applies a DuplicateVerdict to the designer file: the class keeps only the
members marked kept, everything else in the file stays as it was, and the
result replaces the designer file atomically.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from designer_cleaner.analyzer import analyze_duplicates, verdict_messages
from designer_cleaner.config import CleanerConfig
from designer_cleaner.model import (
    ClassDeclaration,
    DuplicateVerdict,
    PairOutcome,
    PairStatus,
)
from designer_cleaner.pairing import PairError, load_pair
from designer_cleaner.syntax import SyntaxTree, find_class, print_tree, property_names, replace_members


class DesignerWriteError(Exception):
    """Raised when the rewritten designer file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error writing file: {path} - {reason}")


def rewrite_designer(
    tree: SyntaxTree, designer_class: ClassDeclaration, verdict: DuplicateVerdict
) -> bytes:
    """Return the designer file bytes with every dropped member removed."""
    new_tree = replace_members(tree, designer_class, verdict.kept_members)
    return print_tree(new_tree)


def write_atomic(path: Union[str, Path], data: bytes) -> None:
    """
    Replace ``path`` with ``data`` in one step.

    The bytes go to a temporary sibling first; the target is only swapped in
    once they are on disk, so a failure never leaves a truncated file.
    """
    path = Path(path)
    try:
        fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise DesignerWriteError(path, e.strerror or str(e))

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            shutil.copymode(path, tmp)
        os.replace(tmp, path)
    except OSError as e:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise DesignerWriteError(path, e.strerror or str(e))


def clean_pair(designer_path: Union[str, Path], config: CleanerConfig) -> PairOutcome:
    """
    Remove duplicate members from one designer file.

    Every failure is reported in the returned outcome; nothing is raised for
    problems limited to this pair.
    """
    designer_path = Path(designer_path)
    designer_file = designer_path.name

    try:
        pair = load_pair(designer_path)
    except PairError as e:
        return PairOutcome(designer_file, PairStatus.SKIPPED, [f"❌ {e}"])

    designer_class = find_class(pair.designer.tree)
    if designer_class is None:
        return PairOutcome(
            designer_file,
            PairStatus.SKIPPED,
            [f"❌ No class found in designer file: {designer_file}"],
        )

    verdict = analyze_duplicates(
        designer_class,
        property_names(pair.companion.tree),
        config,
        designer_file=designer_file,
    )
    messages = verdict_messages(verdict)

    if not verdict.has_drops:
        messages.append(f"✅ No duplicates found: - class: {designer_file}")
        return PairOutcome(designer_file, PairStatus.UNCHANGED, messages, verdict=verdict)

    try:
        write_atomic(designer_path, rewrite_designer(pair.designer.tree, designer_class, verdict))
    except DesignerWriteError as e:
        messages.append(f"❌ {e}")
        return PairOutcome(designer_file, PairStatus.FAILED, messages, verdict=verdict)

    messages.append(f"✅ Designer file updated: - class: {designer_file}")
    return PairOutcome(designer_file, PairStatus.UPDATED, messages, verdict=verdict)


__all__ = [
    "DesignerWriteError",
    "rewrite_designer",
    "write_atomic",
    "clean_pair",
]
