"""Tests for the honeyhealth command-line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from honeyhealth.cli import main
from honeyhealth.cli.check import check
from honeyhealth.cli.index import index_cmd
from honeyhealth.cli.report import report

# No last_written timestamps, so every dataset counts as recent
UNDATED_EXPORT = """\
datasets:
  - slug: checkout
    columns:
      - key_name: http.request.method
        values: [GET, PATCH]
      - key_name: UserId
      - key_name: db.system
  - slug: inventory
    columns:
      - key_name: db.system
        values: [mssql]
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def undated_export(tmp_path: Path) -> Path:
    path = tmp_path / "columns.yaml"
    path.write_text(UNDATED_EXPORT)
    return path


class TestCheck:
    def test_table_output(self, runner, model_dir):
        result = runner.invoke(check, ["-m", str(model_dir), "http.method", "database"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "http.method Matching"
        assert lines[1] == "   database Bad      NoNamespace"

    def test_json_output(self, runner, model_dir):
        result = runner.invoke(
            check, ["-m", str(model_dir), "--format", "json", "http.Method", "http.method"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert [p["name"] for p in payload] == ["http.Method", "http.method"]
        assert payload[0]["verdict"] == "Bad"
        assert payload[0]["comments"][0] == {"kind": "wrong_case"}
        assert payload[1] == {"name": "http.method", "verdict": "Matching", "comments": []}

    def test_strict_fails_on_bad(self, runner, model_dir):
        result = runner.invoke(check, ["-m", str(model_dir), "--strict", "UserId"])
        assert result.exit_code == 1

    def test_strict_passes_on_missing(self, runner, model_dir):
        result = runner.invoke(check, ["-m", str(model_dir), "--strict", "app.tier"])
        assert result.exit_code == 0, result.output

    def test_model_from_environment(self, runner, model_dir, monkeypatch):
        monkeypatch.setenv("HONEYHEALTH_MODEL_PATHS", str(model_dir))
        result = runner.invoke(check, ["db.system"])
        assert result.exit_code == 0, result.output
        assert "Matching" in result.output

    def test_no_model_is_usage_error(self, runner):
        result = runner.invoke(check, ["db.system"])
        assert result.exit_code == 2
        assert "No convention model" in result.output

    def test_missing_model_dir(self, runner, tmp_path):
        result = runner.invoke(check, ["-m", str(tmp_path / "nope"), "db.system"])
        assert result.exit_code == 1
        assert "is not a directory" in result.output

    def test_malformed_model(self, runner, model_dir):
        (model_dir / "db" / "broken.yaml").write_text("groups: [\n")
        result = runner.invoke(check, ["-m", str(model_dir), "db.system"])
        assert result.exit_code == 1
        assert "broken.yaml" in result.output


class TestReport:
    def test_multi_dataset_writes_csv(self, runner, model_dir, undated_export, tmp_path):
        out = tmp_path / "report.csv"
        result = runner.invoke(
            report,
            ["-m", str(model_dir), "--export", str(undated_export), "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert f"Wrote {out}" in result.output
        assert out.read_text().splitlines()[0] == "Name,Type,SemConv,Hint,Usage,checkout,inventory,"
        assert "checkout" in result.output
        assert "inventory" in result.output

    def test_single_dataset_lists_columns(self, runner, model_dir, undated_export, tmp_path):
        out = tmp_path / "report.csv"
        result = runner.invoke(
            report,
            [
                "-m", str(model_dir),
                "--export", str(undated_export),
                "-d", "checkout",
                "-o", str(out),
            ],
        )
        assert result.exit_code == 0, result.output
        assert not out.exists()
        assert "UserId Bad" in result.output
        assert "http.request.method: PATCH" in result.output

    def test_markdown(self, runner, model_dir, undated_export, tmp_path):
        md = tmp_path / "report.md"
        result = runner.invoke(
            report,
            [
                "-m", str(model_dir),
                "--export", str(undated_export),
                "-o", str(tmp_path / "report.csv"),
                "--markdown", str(md),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "| `db.system` | error | `mssql` |" in md.read_text()

    def test_no_datasets(self, runner, model_dir, undated_export):
        result = runner.invoke(
            report, ["-m", str(model_dir), "--export", str(undated_export), "-d", "nope"]
        )
        assert result.exit_code == 0, result.output
        assert "No datasets found" in result.output

    def test_bad_export(self, runner, model_dir, tmp_path):
        export = tmp_path / "columns.json"
        export.write_text("[]")
        result = runner.invoke(report, ["-m", str(model_dir), "--export", str(export)])
        assert result.exit_code == 1
        assert "expected a mapping" in result.output

    def test_last_written_days_must_be_positive(self, runner, model_dir, undated_export):
        result = runner.invoke(
            report, ["-m", str(model_dir), "--export", str(undated_export), "-l", "0"]
        )
        assert result.exit_code == 2


class TestIndex:
    def test_text_summary(self, runner, model_dir):
        result = runner.invoke(index_cmd, ["-m", str(model_dir)])
        assert result.exit_code == 0, result.output
        assert "Documents:  3" in result.output
        assert "Templates:  1" in result.output
        assert "Deprecated: 1" in result.output
        assert "Enumerated: 2" in result.output

    def test_json_duplicates(self, runner, model_dir, tmp_path):
        extra = tmp_path / "extra"
        extra.mkdir()
        (extra / "db.yaml").write_text(
            "groups:\n  - prefix: db\n    attributes:\n      - id: statement\n        type: string\n"
        )
        result = runner.invoke(
            index_cmd, ["-m", str(model_dir), "-m", str(extra), "--format", "json"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert len(payload["documents"]) == 4
        assert [d["name"] for d in payload["duplicates"]] == ["db.statement"]


class TestMain:
    def test_commands_registered(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for command in ("check", "report", "index"):
            assert command in result.output

    def test_log_options(self, runner, model_dir):
        result = runner.invoke(
            main,
            ["--log-level", "error", "--log-format", "json", "check", "-m", str(model_dir), "error"],
        )
        assert result.exit_code == 0, result.output
        assert "Matching" in result.output
