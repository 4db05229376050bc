"""
Test the example designer/companion pair.

Validates that the example files parse into the expected classes, so the
other tests can rely on them.
"""

from designer_cleaner.examples import EXAMPLE_COMPANION, EXAMPLE_DESIGNER, write_example_pair
from designer_cleaner.model import MemberKind
from designer_cleaner.syntax import find_class, parse_text, property_names


def test_example_designer_structure():
    tree = parse_text(EXAMPLE_DESIGNER)
    cls = find_class(tree)

    assert not tree.has_errors
    assert cls.name == "Customer"
    assert [m.kind for m in cls.members] == [
        MemberKind.FIELD,
        MemberKind.PROPERTY,
        MemberKind.FIELD,
        MemberKind.PROPERTY,
        MemberKind.OTHER,
    ]
    assert [m.names for m in cls.fields()] == [("fName",), ("fAge",)]


def test_example_companion_properties():
    tree = parse_text(EXAMPLE_COMPANION)
    assert property_names(tree) == ["Name"]


def test_write_example_pair_renames_class(tmp_path):
    designer, companion = write_example_pair(tmp_path / "pair", "Supplier")

    assert designer.name == "Supplier.Designer.cs"
    assert companion.name == "Supplier.cs"
    assert find_class(parse_text(designer.read_text(encoding="utf-8"))).name == "Supplier"
