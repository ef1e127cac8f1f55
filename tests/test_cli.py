"""Tests for the expocheck command line."""

import json

import pytest
from click.testing import CliRunner

from expocheck.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestValidateCommand:

    def test_clean_project_exits_zero(self, runner, make_project):
        result = runner.invoke(cli, ["validate", str(make_project())])

        assert result.exit_code == 0
        assert "All checks passed!" in result.output

    def test_warnings_exit_zero(self, runner, make_project):
        root = make_project(files={"nativewind-env.d.ts": None})
        result = runner.invoke(cli, ["validate", str(root)])

        assert result.exit_code == 0
        assert "Passed with 1 warning(s)" in result.output

    def test_exit_code_is_error_count(self, runner, make_project):
        root = make_project(files={"global.css": None, "babel.config.js": None})
        result = runner.invoke(cli, ["validate", str(root)])

        assert result.exit_code == 2
        assert "Failed with 2 error(s)" in result.output

    def test_missing_manifest(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path)])

        assert result.exit_code == 1

    def test_json_output(self, runner, make_project):
        root = make_project(files={"metro.config.js": None})
        result = runner.invoke(cli, ["validate", str(root), "--json"])

        data = json.loads(result.stdout)
        assert result.exit_code == 1
        assert data["status"] == "failed"
        assert data["error_count"] == 1
        assert {"id": "file:metro.config.js", "outcome": "fail",
                "message": "Missing file: metro.config.js", "details": []} in data["results"]

    def test_parallel_workers(self, runner, make_project):
        result = runner.invoke(cli, ["validate", str(make_project()), "--workers", "4", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["status"] == "passed"

    def test_project_profile_applied(self, runner, make_project):
        root = make_project(files={
            ".expocheck.yaml": "optional_dependencies: []\noptional_files: []\n",
            "nativewind-env.d.ts": None,
        })
        manifest_path = root / "package.json"
        data = json.loads(manifest_path.read_text())
        del data["dependencies"]["zustand"]
        manifest_path.write_text(json.dumps(data))

        result = runner.invoke(cli, ["validate", str(root), "--json"])
        report = json.loads(result.stdout)

        assert report["warning_count"] == 0
        assert "dependency:zustand" not in [r["id"] for r in report["results"]]

    def test_invalid_profile_exits_two(self, runner, make_project):
        root = make_project(files={".expocheck.yaml": "entrypoint: index.js\n"})
        result = runner.invoke(cli, ["validate", str(root)])

        assert result.exit_code == 2

    def test_profile_from_environment(self, runner, make_project, tmp_path):
        profile = tmp_path / "strict.yaml"
        profile.write_text("required_files: [tsconfig.json, eslint.config.js]\n")
        result = runner.invoke(
            cli,
            ["validate", str(make_project()), "--json"],
            env={"EXPOCHECK_PROFILE": str(profile)},
        )

        assert result.exit_code == 1
        assert json.loads(result.stdout)["results"][-1]["outcome"] == "pass"


class TestChecksCommand:

    def test_lists_check_table(self, runner, make_project):
        result = runner.invoke(cli, ["checks", str(make_project())])

        assert result.exit_code == 0
        assert "entry-point" in result.output
        assert "required" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
