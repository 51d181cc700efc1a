import json

import yaml
from typer.testing import CliRunner

from site_metadata import METADATA
from site_metadata.cli import app
from site_metadata.export import write_file

runner = CliRunner()


def test_show_whole_record():
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == METADATA.to_dict()


def test_show_field():
    result = runner.invoke(app, ["show", "social.github"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "https://github.com/slinkydeveloper"


def test_show_nested_record():
    result = runner.invoke(app, ["show", "author"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["name"] == "Francesco Guardiani"


def test_show_unknown_field():
    result = runner.invoke(app, ["show", "social.myspace"])
    assert result.exit_code == 1
    assert "Error: Unknown metadata field: social.myspace" in result.output


def test_export_yaml_to_stdout():
    result = runner.invoke(app, ["export", "--format", "yaml"])
    assert result.exit_code == 0
    assert yaml.safe_load(result.stdout) == METADATA.to_dict()


def test_export_to_file(tmp_path):
    target = tmp_path / "metadata.yaml"
    result = runner.invoke(app, ["export", "-f", "yaml", "-o", str(target)])
    assert result.exit_code == 0
    assert yaml.safe_load(target.read_text()) == METADATA.to_dict()


def test_export_rejects_mismatched_suffix(tmp_path):
    result = runner.invoke(app, ["export", "-f", "yaml", "-o", str(tmp_path / "metadata.json")])
    assert result.exit_code == 1
    assert not (tmp_path / "metadata.json").exists()
    assert "Error: Output file" in result.output
    assert "does not match format yaml" in result.output


def test_export_unknown_format():
    result = runner.invoke(app, ["export", "--format", "toml"])
    assert result.exit_code == 1
    assert "Error: Unsupported format: toml" in result.output


def test_render(tmp_path):
    result = runner.invoke(app, ["render", str(tmp_path / "out")])
    assert result.exit_code == 0
    assert (tmp_path / "out" / "head.html").exists()
    assert "Rendered 4 files" in result.stdout


def test_source_option(tmp_path):
    raw = METADATA.to_dict()
    raw["title"] = "staging"
    source = tmp_path / "staging.json"
    source.write_text(json.dumps(raw))
    result = runner.invoke(app, ["--source", str(source), "show", "title"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "staging"


def test_source_from_environment(tmp_path, monkeypatch):
    source = write_file(METADATA, tmp_path / "metadata.yml")
    monkeypatch.setenv("SITE_METADATA_SOURCE", str(source))
    result = runner.invoke(app, ["show", "language"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "en"


def test_bad_source(tmp_path):
    source = tmp_path / "broken.json"
    source.write_text('{"title": "only"}')
    result = runner.invoke(app, ["--source", str(source), "show"])
    assert result.exit_code == 1
    assert "Error: Missing metadata key" in result.output


def test_missing_source_file(tmp_path):
    result = runner.invoke(app, ["--source", str(tmp_path / "absent.yaml"), "show"])
    assert result.exit_code == 1
    assert "Error: Missing metadata file" in result.output
    assert "absent.yaml" in result.output


def test_source_that_is_not_utf8(tmp_path):
    source = tmp_path / "latin1.yaml"
    source.write_bytes(b"title: \xff\xfe\n")
    result = runner.invoke(app, ["--source", str(source), "show"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Error: Metadata file" in result.output
    assert "is not valid UTF-8" in result.output
