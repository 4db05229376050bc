"""
Core Model Objects

Defines the data structures shared by the analyzer, the rewriter and the
reporter.

These are pure data classes representing:
    - Members (declarations inside a class body)
    - Classes (the partial class found in a source file)
    - Verdicts (which designer members are duplicates, and why)
    - Report findings (read-only duplicate summary)
    - Pair outcomes (what happened to one designer/companion pair)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about file I/O
        - Carry syntax nodes only as opaque handles
        - Represent structure, not behavior
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


class MemberKind(Enum):
    """The three kinds of class members the cleaner distinguishes."""
    PROPERTY = "property"
    FIELD = "field"
    OTHER = "other"


@dataclass(frozen=True)
class Member:
    """
    A single declaration inside a class body.

    Properties:
        kind:
            PROPERTY, FIELD or OTHER

        names:
            PROPERTY: a one-element tuple with the property name
            FIELD: every variable bound by the declaration, in order
                   (``private int fA, fB;`` -> ("fA", "fB"))
            OTHER: empty

        type_name:
            Declared type text for fields and properties (documentation only,
            no semantic type information is modeled)

        line:
            1-based line of the declaration in its source file

        node:
            Opaque syntax node handle, used by the syntax layer when the
            member list is rewritten. Not part of equality.

    IMPORTANT:
        OTHER members are always preserved untouched.
    """

    kind: MemberKind
    names: Tuple[str, ...] = ()
    type_name: Optional[str] = None
    line: int = 0
    node: Any = field(default=None, compare=False, repr=False)

    @property
    def name(self) -> str:
        """First declared name (the property name for properties)."""
        return self.names[0] if self.names else ""


@dataclass
class ClassDeclaration:
    """
    The class found in a source file.

    Only the first class declaration of a file is considered relevant.
    """

    name: str
    members: List[Member] = field(default_factory=list)
    line: int = 0
    node: Any = field(default=None, compare=False, repr=False)

    def properties(self) -> List[Member]:
        return [m for m in self.members if m.kind is MemberKind.PROPERTY]

    def fields(self) -> List[Member]:
        return [m for m in self.members if m.kind is MemberKind.FIELD]


class DropReason(Enum):
    """Why a designer member is considered a duplicate."""
    DUPLICATE_PROPERTY = "duplicate_property"
    BACKING_FIELD = "backing_field"


@dataclass
class MemberVerdict:
    """
    Keep/drop decision for one designer member.

    matched_names lists the names that triggered the drop: the property
    name, or every bound field variable that matched the backing-field rule.
    """

    member: Member
    kept: bool = True
    reason: Optional[DropReason] = None
    matched_names: List[str] = field(default_factory=list)


@dataclass
class DuplicateVerdict:
    """
    Analysis result for one designer/companion pair.

    Entries follow the designer class member order, one per member.
    """

    designer_file: str
    class_name: str
    entries: List[MemberVerdict] = field(default_factory=list)

    @property
    def kept_members(self) -> List[Member]:
        return [e.member for e in self.entries if e.kept]

    @property
    def dropped(self) -> List[MemberVerdict]:
        return [e for e in self.entries if not e.kept]

    @property
    def has_drops(self) -> bool:
        return any(not e.kept for e in self.entries)


@dataclass
class ReportFinding:
    """A companion property that the designer file declares again."""
    property_name: str
    backing_field: Optional[str] = None


@dataclass
class PairReport:
    """Read-only report for one designer file."""
    designer_file: str
    class_name: str = ""
    findings: List[ReportFinding] = field(default_factory=list)


class PairStatus(Enum):
    """Final state of one designer/companion pair."""
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    REPORTED = "reported"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class PairOutcome:
    """
    Everything that happened to one pair.

    messages are the console lines for the pair, in order. The orchestrator
    is the only place that prints them.
    """

    designer_file: str
    status: PairStatus
    messages: List[str] = field(default_factory=list)
    verdict: Optional[DuplicateVerdict] = None
    report: Optional[PairReport] = None
