"""
Serialization helpers for duplicate reports.

Provides JSON/YAML export via an intermediate dict representation, so that
report-mode results can be consumed by other tools. The dict structure is
kept stable and explicit.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

from designer_cleaner.model import PairReport, ReportFinding


def finding_to_dict(f: ReportFinding) -> Dict[str, Any]:
    return {"property": f.property_name, "backing_field": f.backing_field}


def finding_from_dict(d: Dict[str, Any]) -> ReportFinding:
    return ReportFinding(property_name=d["property"], backing_field=d.get("backing_field"))


def report_to_dict(r: PairReport) -> Dict[str, Any]:
    return {
        "designer_file": r.designer_file,
        "class_name": r.class_name,
        "duplicates": [finding_to_dict(f) for f in r.findings],
    }


def report_from_dict(d: Dict[str, Any]) -> PairReport:
    return PairReport(
        designer_file=d["designer_file"],
        class_name=d.get("class_name", ""),
        findings=[finding_from_dict(f) for f in d.get("duplicates", [])],
    )


def reports_to_dict(reports: Sequence[PairReport]) -> Dict[str, Any]:
    return {"reports": [report_to_dict(r) for r in reports]}


def reports_from_dict(d: Dict[str, Any]) -> List[PairReport]:
    return [report_from_dict(r) for r in d.get("reports", [])]


def reports_to_json(reports: Sequence[PairReport]) -> str:
    return json.dumps(reports_to_dict(reports), ensure_ascii=False, indent=2)


def reports_from_json(s: str) -> List[PairReport]:
    return reports_from_dict(json.loads(s))


def reports_to_yaml(reports: Sequence[PairReport]) -> str:
    return yaml.safe_dump(reports_to_dict(reports), allow_unicode=True, sort_keys=False)


def reports_from_yaml(s: str) -> List[PairReport]:
    return reports_from_dict(yaml.safe_load(s))


def save_reports(reports: Sequence[PairReport], path: Union[str, Path]) -> None:
    """
    Write reports to ``path``; the extension picks the format.

    Raises:
        ValueError: If the extension is not .json, .yaml or .yml
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        text = reports_to_json(reports)
    elif suffix in (".yaml", ".yml"):
        text = reports_to_yaml(reports)
    else:
        raise ValueError(f"Unsupported export format: {path.suffix or path.name}")
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
