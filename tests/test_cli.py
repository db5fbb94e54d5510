from pathlib import Path

from html_prototype.cli import cli
from html_prototype.library import prototype_js
from typer.testing import CliRunner

runner = CliRunner()


def test_write_js(tmp_path: Path):
	target = tmp_path / "static" / "prototype.js"
	result = runner.invoke(cli, ["js", str(target)])
	assert result.exit_code == 0
	assert target.read_text(encoding="utf-8") == prototype_js()


def test_write_js_refuses_to_overwrite(tmp_path: Path):
	target = tmp_path / "prototype.js"
	target.write_text("keep me")
	result = runner.invoke(cli, ["js", str(target)])
	assert result.exit_code == 1
	assert target.read_text() == "keep me"


def test_write_js_force(tmp_path: Path):
	target = tmp_path / "prototype.js"
	target.write_text("old")
	result = runner.invoke(cli, ["js", str(target), "--force"])
	assert result.exit_code == 0
	assert target.read_text(encoding="utf-8") == prototype_js()


def test_write_js_to_stdout():
	result = runner.invoke(cli, ["js", "-"])
	assert result.exit_code == 0
	assert result.stdout == prototype_js()


def test_stylesheet():
	result = runner.invoke(cli, ["stylesheet"])
	assert result.exit_code == 0
	assert result.stdout.startswith("div.auto_complete {")


def test_stylesheet_tag():
	result = runner.invoke(cli, ["stylesheet", "--tag"])
	assert result.exit_code == 0
	assert result.stdout.startswith("<style>")


def test_version():
	result = runner.invoke(cli, ["version"])
	assert result.exit_code == 0
	assert "(Prototype 1.2.0)" in result.stdout
