"""Tests for the CLI commands using Click's CliRunner."""

import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from funcdoc.cli import commands
from funcdoc.cli.commands import funcdoc
from funcdoc.utils.config import AppConfig


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking into CLI defaults."""
    monkeypatch.delenv("FUNCDOC_REGISTRY", raising=False)
    monkeypatch.delenv("LOGLEVEL", raising=False)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def annotated_source(tmp_path: Path) -> Path:
    """Create a JavaScript file annotating two standard functions."""
    path = tmp_path / "helpers.js"
    path.write_text(
        textwrap.dedent("""\
            // fn upper: shouts *s*.
            function upper(s) { return s.toUpperCase(); }

            // fn divmod: divides *a* by *b*.
            // Returns quotient and remainder.
            function divmod(a, b) { return [Math.floor(a / b), a % b]; }
        """)
    )
    return path


@pytest.fixture
def yaml_registry(tmp_path: Path) -> Path:
    """Create a YAML registry describing Add."""
    path = tmp_path / "registry.yaml"
    path.write_text("Add:\n  params: [int, int]\n  returns: [int]\n")
    return path


class TestFuncdocGroup:
    """Tests for the main funcdoc command group."""

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["--help"])
        assert result.exit_code == 0
        assert "Function Documentation Extractor" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestExtractCommand:
    """Tests for the 'extract' command."""

    def test_extract_help(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["extract", "--help"])
        assert result.exit_code == 0
        assert "Generate a function reference" in result.output

    def test_standard_functions(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["extract"])
        assert result.exit_code == 0
        assert "upper(s str) str\nreturns s converted to uppercase.\n" in result.output
        assert "divmod(a int, b int) (int, int)" in result.output

    def test_custom_source(self, runner: CliRunner, annotated_source: Path) -> None:
        result = runner.invoke(funcdoc, ["extract", str(annotated_source)])
        assert result.exit_code == 0
        assert "upper(s str) str\nshouts s.\n" in result.output
        assert "divides a by b. Returns quotient and remainder." in result.output

    def test_yaml_registry(
        self, runner: CliRunner, tmp_path: Path, yaml_registry: Path
    ) -> None:
        source = tmp_path / "functions.go"
        source.write_text("package main\n\n// fn Add: adds *a* and *b* together.\n")
        output = tmp_path / "out.txt"
        result = runner.invoke(
            funcdoc,
            ["extract", str(source), "-r", str(yaml_registry), "-o", str(output)],
        )
        assert result.exit_code == 0
        assert output.read_text() == "Add(a int, b int) int\nadds a and b together.\n\n"

    def test_markdown_format(self, runner: CliRunner, annotated_source: Path) -> None:
        result = runner.invoke(
            funcdoc, ["extract", str(annotated_source), "--format", "markdown"]
        )
        assert result.exit_code == 0
        assert "# Function Reference" in result.output
        assert "### `upper(s str) str`" in result.output

    def test_markdown_to_file(
        self, runner: CliRunner, annotated_source: Path, tmp_path: Path
    ) -> None:
        output = tmp_path / "docs" / "functions.md"
        result = runner.invoke(
            funcdoc,
            ["extract", str(annotated_source), "--format", "markdown", "-o", str(output)],
        )
        assert result.exit_code == 0
        assert "### `divmod(a int, b int) (int, int)`" in output.read_text()

    def test_malformed_source(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "broken.js"
        source.write_text("// fn upper: shouts *s*.\nfunction (\n")
        result = runner.invoke(funcdoc, ["extract", str(source)])
        assert result.exit_code != 0
        assert "Error" in result.output
        assert "upper(" not in result.output

    def test_missing_source(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(funcdoc, ["extract", str(tmp_path / "missing.py")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_bad_registry(self, runner: CliRunner, annotated_source: Path) -> None:
        result = runner.invoke(
            funcdoc, ["extract", str(annotated_source), "-r", "no_such_module:FUNCS"]
        )
        assert result.exit_code == 1
        assert "Cannot import" in result.output


class TestCoverageCommand:
    """Tests for the 'coverage' command."""

    def test_coverage_help(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["coverage", "--help"])
        assert result.exit_code == 0
        assert "without documentation" in result.output

    def test_standard_functions_fully_documented(self, runner: CliRunner) -> None:
        result = runner.invoke(funcdoc, ["coverage"])
        assert result.exit_code == 0
        assert "24 of 24 functions documented" in result.output

    def test_missing_documentation(
        self, runner: CliRunner, annotated_source: Path
    ) -> None:
        result = runner.invoke(funcdoc, ["coverage", str(annotated_source)])
        assert result.exit_code == 1
        assert "Missing: lower" in result.output
        assert "2 of 24 functions documented" in result.output


class TestConfigLoading:
    """Tests for configuration handling across commands."""

    def test_config_loaded_once(
        self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[None] = []

        def counting_load_config() -> AppConfig:
            calls.append(None)
            return AppConfig()

        monkeypatch.setattr(commands, "load_config", counting_load_config)
        result = runner.invoke(funcdoc, ["coverage"])
        assert result.exit_code == 0
        assert len(calls) == 1

    def test_configured_title_used(
        self,
        runner: CliRunner,
        monkeypatch: pytest.MonkeyPatch,
        annotated_source: Path,
    ) -> None:
        config = AppConfig()
        config.output.title = "Template Helpers"
        monkeypatch.setattr(commands, "load_config", lambda: config)
        result = runner.invoke(
            funcdoc, ["extract", str(annotated_source), "--format", "markdown"]
        )
        assert result.exit_code == 0
        assert "# Template Helpers" in result.output
