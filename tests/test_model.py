"""
Tests for Core Model Objects

These tests verify:
    - Member identity and accessors
    - Verdict helpers used by the rewriter
"""

from designer_cleaner.model import (
    ClassDeclaration,
    DropReason,
    DuplicateVerdict,
    Member,
    MemberKind,
    MemberVerdict,
)


class TestMember:

    def test_property_name(self):
        member = Member(kind=MemberKind.PROPERTY, names=("Name",))
        assert member.name == "Name"

    def test_other_has_no_name(self):
        assert Member(kind=MemberKind.OTHER).name == ""

    def test_node_not_part_of_equality(self):
        a = Member(kind=MemberKind.FIELD, names=("fA",), node=object())
        b = Member(kind=MemberKind.FIELD, names=("fA",), node=object())
        assert a == b


class TestClassDeclaration:

    def test_filters(self):
        p = Member(kind=MemberKind.PROPERTY, names=("A",))
        f = Member(kind=MemberKind.FIELD, names=("fA",))
        o = Member(kind=MemberKind.OTHER)
        cls = ClassDeclaration(name="C", members=[p, f, o])

        assert cls.properties() == [p]
        assert cls.fields() == [f]


class TestDuplicateVerdict:

    def test_kept_and_dropped(self):
        keep = Member(kind=MemberKind.PROPERTY, names=("A",), line=1)
        drop = Member(kind=MemberKind.PROPERTY, names=("B",), line=2)
        verdict = DuplicateVerdict(
            designer_file="C.Designer.cs",
            class_name="C",
            entries=[
                MemberVerdict(member=keep),
                MemberVerdict(member=drop, kept=False, reason=DropReason.DUPLICATE_PROPERTY),
            ],
        )

        assert verdict.has_drops
        assert verdict.kept_members == [keep]
        assert [e.member for e in verdict.dropped] == [drop]

    def test_empty(self):
        verdict = DuplicateVerdict(designer_file="C.Designer.cs", class_name="C")
        assert not verdict.has_drops
        assert verdict.kept_members == []
