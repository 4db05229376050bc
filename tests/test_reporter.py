"""
Tests for the Duplicate Reporter (report mode never writes).
"""

from designer_cleaner.config import CleanerConfig
from designer_cleaner.examples import EXAMPLE_DESIGNER, write_example_pair
from designer_cleaner.model import PairStatus, ReportFinding
from designer_cleaner.reporter import build_report, render_report, report_pair
from designer_cleaner.syntax import parse_text


CONFIG = CleanerConfig()


class TestBuildReport:
    """Findings from parsed trees."""

    def test_property_with_backing_field(self):
        tree = parse_text("partial class A { string fName; public string Name { get; set; } }")
        report = build_report(tree, ["Name"], CONFIG, designer_file="A.Designer.cs")

        assert report.class_name == "A"
        assert report.findings == [ReportFinding("Name", "fName")]

    def test_property_without_backing_field(self):
        tree = parse_text("partial class A { public string Name { get; set; } }")
        report = build_report(tree, ["Name"], CONFIG)
        assert report.findings == [ReportFinding("Name", None)]

    def test_only_literal_prefixed_name_is_associated(self):
        """Clean mode would drop fname for Name; the report does not associate it."""
        tree = parse_text("partial class A { string fname; public string Name { get; set; } }")
        report = build_report(tree, ["Name"], CONFIG)
        assert report.findings == [ReportFinding("Name", None)]

    def test_field_without_duplicate_property_not_reported(self):
        tree = parse_text("partial class A { string fName; }")
        assert build_report(tree, ["Name"], CONFIG).findings == []

    def test_companion_order_and_uniqueness(self):
        tree = parse_text(
            "partial class A { public int B { get; set; } public int A1 { get; set; } int fB; }"
        )
        report = build_report(tree, ["A1", "B", "A1", "Missing"], CONFIG)
        assert report.findings == [ReportFinding("A1", None), ReportFinding("B", "fB")]

    def test_custom_prefix(self):
        tree = parse_text("partial class A { int _Id; int fId; public int Id { get; set; } }")
        report = build_report(tree, ["Id"], CleanerConfig(prefix="_"))
        assert report.findings == [ReportFinding("Id", "_Id")]

    def test_conditional_block_duplicates_are_reported(self):
        """Clean mode leaves #if blocks alone; the report still lists them."""
        tree = parse_text(
            "partial class A\n"
            "{\n"
            "#if DEBUG\n"
            "    string fName;\n"
            "    public string Name { get; set; }\n"
            "#endif\n"
            "}\n"
        )
        report = build_report(tree, ["Name"], CONFIG)
        assert report.findings == [ReportFinding("Name", "fName")]


class TestRenderReport:

    def test_lines(self):
        tree = parse_text(EXAMPLE_DESIGNER)
        report = build_report(tree, ["Name"], CONFIG, designer_file="Customer.Designer.cs")

        assert render_report(report) == [
            "🔍 Analyzing duplicates...",
            "⚠️ Duplicate property found: Name - class: Customer.Designer.cs",
            "    ↳ Associated private field: fName - class: Customer.Designer.cs",
            "✅ Analysis completed: - class: Customer.Designer.cs",
        ]


class TestReportPair:
    """Report mode on files."""

    def test_scenario_a(self, tmp_path):
        designer, companion = write_example_pair(tmp_path)
        before = (designer.read_bytes(), companion.read_bytes())

        outcome = report_pair(designer, CONFIG)

        assert outcome.status is PairStatus.REPORTED
        assert sum(1 for m in outcome.messages if "Duplicate property found" in m) == 1
        assert sum(1 for m in outcome.messages if "Associated private field" in m) == 1
        assert (designer.read_bytes(), companion.read_bytes()) == before

    def test_no_class(self, tmp_path):
        (tmp_path / "A.Designer.cs").write_text("namespace N { }")
        (tmp_path / "A.cs").write_text("partial class A { }")

        outcome = report_pair(tmp_path / "A.Designer.cs", CONFIG)

        assert outcome.status is PairStatus.SKIPPED
        assert outcome.messages == ["❌ No class found in designer file: A.Designer.cs"]

    def test_missing_companion(self, tmp_path):
        (tmp_path / "A.Designer.cs").write_text("partial class A { }")

        outcome = report_pair(tmp_path / "A.Designer.cs", CONFIG)

        assert outcome.status is PairStatus.SKIPPED
        assert outcome.messages == [f"❌ File not found: {tmp_path / 'A.cs'}"]
