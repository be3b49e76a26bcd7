"""End-to-end tests for the valuescope command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from valuescope.cli import cli

from .conftest import CHART, NGINX_15_0_0, NGINX_15_1_0


def _invoke(*args: str) -> Result:
    return CliRunner().invoke(cli, ["--log-level", "error", *args])


@pytest.fixture
def values_dir(tmp_path: Path) -> Path:
    (tmp_path / "nginx@15.0.0.yaml").write_text(NGINX_15_0_0, encoding="utf-8")
    (tmp_path / "nginx@15.1.0.yaml").write_text(NGINX_15_1_0, encoding="utf-8")
    (tmp_path / "README.md").write_text("not values", encoding="utf-8")
    (tmp_path / "bitnami").mkdir()
    (tmp_path / "bitnami" / "nginx@15.0.0.yaml").write_text(NGINX_15_0_0, encoding="utf-8")
    (tmp_path / "bitnami" / "nginx@15.1.0.yaml").write_text(NGINX_15_1_0, encoding="utf-8")
    (tmp_path / "broken@0.1.0.yaml").write_bytes(b"\xff\xfe")
    return tmp_path


class TestLogLevelOption:
    def test_unknown_level_rejected(self, values_dir: Path) -> None:
        values = str(values_dir / "nginx@15.0.0.yaml")
        result = CliRunner().invoke(cli, ["--log-level", "verbose", "path", values, "2"])
        assert result.exit_code == 2
        assert "verbose" in result.output

    def test_level_is_case_insensitive(self, values_dir: Path) -> None:
        values = str(values_dir / "nginx@15.0.0.yaml")
        result = CliRunner().invoke(cli, ["--log-level", "ERROR", "path", values, "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "replicaCount"


class TestDiffCommand:
    def test_prints_prefixed_records(self, values_dir: Path) -> None:
        result = _invoke("diff", str(values_dir / "nginx@15.0.0.yaml"), str(values_dir / "nginx@15.1.0.yaml"))
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert "-   tag: 1.25.3" in lines
        assert "+   tag: 1.25.4" in lines
        assert lines.index("-   tag: 1.25.3") + 1 == lines.index("+   tag: 1.25.4")
        assert lines[-1] == "-   port: 9113"

    def test_identical_files(self, values_dir: Path) -> None:
        path = str(values_dir / "nginx@15.0.0.yaml")
        result = _invoke("diff", path, path)
        assert result.exit_code == 0
        assert result.output.strip() == "No differences."

    def test_context_and_line_numbers(self, values_dir: Path) -> None:
        result = _invoke(
            "diff",
            "--context",
            "0",
            "--line-numbers",
            str(values_dir / "nginx@15.0.0.yaml"),
            str(values_dir / "nginx@15.1.0.yaml"),
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "    7 -   tag: 1.25.3"
        assert len(lines) == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        result = _invoke("diff", str(tmp_path / "a.yaml"), str(tmp_path / "b.yaml"))
        assert result.exit_code != 0


class TestCompareCommand:
    def test_compare_versions_from_directory(self, values_dir: Path) -> None:
        result = _invoke("compare", "nginx", "15.0.0", "15.1.0", "--values-dir", str(values_dir))
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == "nginx: 15.0.0 -> 15.1.0 (+2 -2)"

    def test_repo_prefixed_chart_name(self, values_dir: Path) -> None:
        result = _invoke("compare", CHART, "15.0.0", "15.1.0", "--values-dir", str(values_dir))
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == f"{CHART}: 15.0.0 -> 15.1.0 (+2 -2)"

    def test_unknown_version(self, values_dir: Path) -> None:
        result = _invoke("compare", "nginx", "15.0.0", "16.0.0", "--values-dir", str(values_dir))
        assert result.exit_code == 1
        assert "nginx@16.0.0" in result.output


class TestPathCommand:
    def test_resolves_one_based_line(self, values_dir: Path) -> None:
        result = _invoke("path", str(values_dir / "nginx@15.0.0.yaml"), "13")
        assert result.exit_code == 0
        assert result.output.strip() == "service.ports.http"

    def test_unresolvable_line_exits_one(self, values_dir: Path) -> None:
        result = _invoke("path", str(values_dir / "nginx@15.0.0.yaml"), "1")
        assert result.exit_code == 1

    def test_line_must_be_positive(self, values_dir: Path) -> None:
        result = _invoke("path", str(values_dir / "nginx@15.0.0.yaml"), "0")
        assert result.exit_code == 2


class TestSearchCommand:
    def test_lists_matches_with_paths(self, values_dir: Path) -> None:
        result = _invoke("search", "--with-path", str(values_dir / "nginx@15.0.0.yaml"), "LOG_level")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["22:   - name: LOG_LEVEL  [extraEnvVars]"]

    def test_no_matches(self, values_dir: Path) -> None:
        result = _invoke("search", str(values_dir / "nginx@15.0.0.yaml"), "redis")
        assert result.exit_code == 0
        assert result.output == ""
