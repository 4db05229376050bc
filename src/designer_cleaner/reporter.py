"""
Duplicate Reporter — read-only summary of designer/companion overlap.

For each companion property the designer file declares again, the report
names the property and, when present, its backing field. Only the literal
``prefix + PropertyName`` field is looked up here; the rewriter's
case-insensitive first-letter match is intentionally not applied.

IMPORTANT: Nothing in this module writes to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from designer_cleaner.config import CleanerConfig
from designer_cleaner.model import PairOutcome, PairReport, PairStatus, ReportFinding
from designer_cleaner.pairing import PairError, load_pair
from designer_cleaner.syntax import SyntaxTree, field_variable_names, find_class, property_names


def build_report(
    designer_tree: SyntaxTree,
    companion_properties: Iterable[str],
    config: CleanerConfig,
    designer_file: str = "",
) -> PairReport:
    """
    Collect duplicate properties and their backing fields.

    Designer properties and fields are looked up anywhere in the designer
    file, not only in its first class.
    """
    designer_properties = set(property_names(designer_tree))
    designer_fields = set(field_variable_names(designer_tree))
    designer_class = find_class(designer_tree)

    report = PairReport(
        designer_file=designer_file,
        class_name=designer_class.name if designer_class else "",
    )

    for name in dict.fromkeys(companion_properties):
        if name not in designer_properties:
            continue
        backing_field = config.prefix + name
        report.findings.append(ReportFinding(
            property_name=name,
            backing_field=backing_field if backing_field in designer_fields else None,
        ))

    return report


def render_report(report: PairReport) -> List[str]:
    """Console lines for one report."""
    lines = ["🔍 Analyzing duplicates..."]
    for finding in report.findings:
        lines.append(f"⚠️ Duplicate property found: {finding.property_name} - class: {report.designer_file}")
        if finding.backing_field:
            lines.append(f"    ↳ Associated private field: {finding.backing_field} - class: {report.designer_file}")
    lines.append(f"✅ Analysis completed: - class: {report.designer_file}")
    return lines


def report_pair(designer_path: Union[str, Path], config: CleanerConfig) -> PairOutcome:
    """Report duplicates for one designer file without touching it."""
    designer_path = Path(designer_path)
    designer_file = designer_path.name

    try:
        pair = load_pair(designer_path)
    except PairError as e:
        return PairOutcome(designer_file, PairStatus.SKIPPED, [f"❌ {e}"])

    if find_class(pair.designer.tree) is None:
        return PairOutcome(
            designer_file,
            PairStatus.SKIPPED,
            [f"❌ No class found in designer file: {designer_file}"],
        )

    report = build_report(
        pair.designer.tree,
        property_names(pair.companion.tree),
        config,
        designer_file=designer_file,
    )
    return PairOutcome(designer_file, PairStatus.REPORTED, render_report(report), report=report)


__all__ = ["build_report", "render_report", "report_pair"]
