"""
Duplicate Analyzer — decides which designer members are redundant.

A designer member is a duplicate when the hand-authored companion file
already declares it:
    - a designer property whose name is a companion property
    - a designer field whose variable is a backing field of a companion
      property (prefix + name, first letter of the name in either case)

IMPORTANT: This module does NOT modify anything. It produces a
DuplicateVerdict that the rewriter applies.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from designer_cleaner.config import CleanerConfig
from designer_cleaner.model import (
    ClassDeclaration,
    DropReason,
    DuplicateVerdict,
    Member,
    MemberKind,
    MemberVerdict,
)


def backing_field_candidate(variable: str, prefix: str) -> Optional[str]:
    """
    Property name a field variable would back, or None.

    ``fName`` with prefix ``f`` -> ``Name``. Variables that don't start with
    the prefix (case-sensitive) are never backing fields.
    """
    if not variable.startswith(prefix):
        return None
    return variable[len(prefix):]


def matches_backing_field(variable: str, properties: Set[str], prefix: str) -> bool:
    """
    Whether ``variable`` backs one of ``properties``.

    The candidate matches as written or with its first letter upper-cased,
    so ``fname`` backs ``Name``. A variable that is exactly the prefix has an
    empty candidate and never matches.
    """
    candidate = backing_field_candidate(variable, prefix)
    if not candidate:
        return False
    return candidate in properties or (candidate[0].upper() + candidate[1:]) in properties


def _judge(member: Member, properties: Set[str], prefix: str) -> MemberVerdict:
    if member.kind is MemberKind.PROPERTY:
        if member.name in properties:
            return MemberVerdict(
                member=member,
                kept=False,
                reason=DropReason.DUPLICATE_PROPERTY,
                matched_names=[member.name],
            )

    elif member.kind is MemberKind.FIELD:
        # Matched per variable, dropped per declaration
        matched = [v for v in member.names if matches_backing_field(v, properties, prefix)]
        if matched:
            return MemberVerdict(
                member=member,
                kept=False,
                reason=DropReason.BACKING_FIELD,
                matched_names=matched,
            )

    return MemberVerdict(member=member)


def analyze_duplicates(
    designer_class: ClassDeclaration,
    companion_properties: Iterable[str],
    config: CleanerConfig,
    designer_file: str = "",
) -> DuplicateVerdict:
    """
    Compute the keep/drop verdict for every member of the designer class.

    Args:
        designer_class: Class parsed from the designer file
        companion_properties: Every property name declared in the companion file
        config: Run configuration (backing-field prefix)
        designer_file: File name used in messages

    Returns:
        DuplicateVerdict with one entry per member, in member order
    """
    properties = set(companion_properties)
    entries: List[MemberVerdict] = [
        _judge(member, properties, config.prefix) for member in designer_class.members
    ]
    return DuplicateVerdict(
        designer_file=designer_file,
        class_name=designer_class.name,
        entries=entries,
    )


def verdict_messages(verdict: DuplicateVerdict) -> List[str]:
    """Console lines announcing each removal, in member order."""
    lines = []
    for entry in verdict.dropped:
        if entry.reason is DropReason.DUPLICATE_PROPERTY:
            lines.append(
                f"⚠️ Removing duplicate property: {entry.member.name} - class: {verdict.designer_file}"
            )
        else:
            for name in entry.matched_names:
                lines.append(
                    f"    ↳ Removing associated field: {name} - class: {verdict.designer_file}"
                )
    return lines


__all__ = [
    "backing_field_candidate",
    "matches_backing_field",
    "analyze_duplicates",
    "verdict_messages",
]
