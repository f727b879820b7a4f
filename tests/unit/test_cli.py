import json

from typer.testing import CliRunner

from hashauth.cli import app

runner = CliRunner()


def _issue(config_file, *args: str) -> str:
    result = runner.invoke(app, ["issue", "--config", str(config_file), *args])
    assert (
        result.exit_code == 0
    ), f"Command failed with exit code {result.exit_code}. Output: {result.output}"
    return result.output.strip()


def test_issue_then_parse(config_file):
    token = _issue(config_file, "--data", '{"user": "alice"}', "--claim", "role=admin")

    result = runner.invoke(
        app, ["parse", token, "--config", str(config_file), "--context", "role=admin"]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"user": "alice"}


def test_parse_rejects_wrong_claim(config_file):
    token = _issue(config_file, "--data", '{"user": "alice"}', "--claim", "role=admin")

    result = runner.invoke(
        app, ["parse", token, "--config", str(config_file), "--context", "role=user"]
    )
    assert result.exit_code == 1
    assert "Token rejected" in result.output


def test_parse_rejects_malformed_token(config_file):
    result = runner.invoke(app, ["parse", "garbage", "--config", str(config_file)])
    assert result.exit_code == 1
    assert "invalid token" in result.output


def test_issue_plain_string_data(config_file):
    token = _issue(config_file, "--data", "hello")

    result = runner.invoke(app, ["parse", token, "--config", str(config_file)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == "hello"


def test_issue_without_key_material(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("HASHAUTH_CONFIG", "HASHAUTH_SIGNATURE_KEY", "HASHAUTH_TOKEN_KEY"):
        monkeypatch.delenv(name, raising=False)

    result = runner.invoke(app, ["issue", "--data", "{}"])
    assert result.exit_code == 1
    assert "Cannot issue token" in result.output


def test_bad_claim_pair(config_file):
    result = runner.invoke(
        app, ["issue", "--config", str(config_file), "--data", "{}", "--claim", "role"]
    )
    assert result.exit_code == 2


def test_invalid_configuration_is_reported(config_file, monkeypatch):
    monkeypatch.setenv("HASHAUTH_MISSING_CLAIMS", "bogus")

    result = runner.invoke(app, ["parse", "abcd-ef", "--config", str(config_file)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_malformed_yaml_is_reported(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("keys: [unclosed\n")

    result = runner.invoke(app, ["issue", "--data", "{}", "--config", str(path)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
