"""Integration tests for the tweakgraph command-line interface."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from tweakgraph.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestCommands:
    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("apps", "render", "check", "types", "version"):
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_apps(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apps"])
        assert result.exit_code == 0
        assert "floating-policy" in result.output

    def test_types(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["types"])
        assert result.exit_code == 0
        assert "AWS::S3::Bucket" in result.output

    def test_check(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_check_strict(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--strict", "check"])
        assert result.exit_code == 0


class TestRender:
    def test_render_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "constructor-props"])
        assert result.exit_code == 0
        assert "BucketBucketPolicy" in result.output

    def test_render_json_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "doc.json"
        result = runner.invoke(cli, ["render", "floating-policy", "-o", str(out)])
        assert result.exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["Bucket"]["properties"]["BucketName"] == "MyBucket"

    def test_render_yaml_file(self, runner: CliRunner, tmp_path: Path) -> None:
        out = tmp_path / "doc.yaml"
        result = runner.invoke(cli, ["render", "fully-explicit", "--format", "yaml", "-o", str(out)])
        assert result.exit_code == 0
        document = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert document["BucketBucketPolicy"]["properties"]["Bucket"] == {"Ref": "Bucket"}

    def test_unknown_app(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "no-such-app"])
        assert result.exit_code == 1

    def test_invalid_format(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "fancy-bucket", "--format", "xml"])
        assert result.exit_code == 2
