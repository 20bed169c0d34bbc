import json

import pandas as pd
import pytest

from artifacts import ExportError, ReportExporter, render_markdown
from password_policy import collect_invalid


@pytest.fixture
def report(valid_password):
    return collect_invalid(["short", valid_password, None])


def test_export_csv(tmp_path, report):
    path = ReportExporter(tmp_path / "out" / "report.csv").export(report)
    df = pd.read_csv(path, dtype=str)
    assert list(df.columns) == ["password", "kind", "reason"]
    assert list(df["kind"]) == ["LengthError", "LengthError"]
    assert df.loc[0, "password"] == "short"
    assert pd.isna(df.loc[1, "password"])


def test_export_json(tmp_path, report):
    path = ReportExporter(tmp_path / "report.json").export(report)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["total"] == 3
    assert data["valid_count"] == 1
    assert data["invalid_count"] == 2
    assert data["invalid"][1] == {"password": None, "kind": "LengthError", "reason": "Password cannot be null."}


def test_export_markdown(tmp_path, report):
    path = ReportExporter(tmp_path / "report.md").export(report)
    text = path.read_text(encoding="utf-8")
    assert text.startswith("# Password Validation Report")
    assert "| 1 | `short` | LengthError |" in text
    assert "`(null)`" in text


def test_markdown_all_valid(valid_password):
    assert "All passwords passed validation." in render_markdown(collect_invalid([valid_password]))


def test_unsupported_report_format(tmp_path):
    with pytest.raises(ExportError, match="Unsupported report format"):
        ReportExporter(tmp_path / "report.xml")


def test_refuses_to_overwrite(tmp_path, report):
    path = tmp_path / "report.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ExportError, match="already exists"):
        ReportExporter(path, overwrite=False).export(report)
