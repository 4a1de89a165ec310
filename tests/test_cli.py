import json
import logging

import pytest

from chain_config import cli


def test_show_prints_full_config(monkeypatch, capsys):
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "8545")
    assert cli.main(["show"]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "compilers": {},
        "mocha": {"timeout": 20000},
        "networks": {"development": {"host": "localhost", "network_id": "*", "port": "8545"}},
    }


def test_show_unset_env_renders_null(capsys):
    assert cli.main(["show"]) == cli.EXIT_OK
    dev = json.loads(capsys.readouterr().out)["networks"]["development"]
    assert dev["host"] is None
    assert dev["port"] is None


def test_show_single_network(monkeypatch, capsys):
    monkeypatch.setenv("HOST", "127.0.0.1")
    assert cli.main(["show", "--network", "development", "--indent", "0"]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"host": "127.0.0.1", "port": None, "network_id": "*"}


def test_show_is_byte_identical_across_runs(monkeypatch, capsys):
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "8545")
    cli.main(["show"])
    first = capsys.readouterr().out
    cli.main(["show"])
    assert capsys.readouterr().out == first


def test_show_unknown_network(capsys):
    assert cli.main(["--log-level", "INFO", "--log-format", "plain", "show", "-n", "mainnet"]) == cli.EXIT_CONFIG_ERROR
    err = capsys.readouterr().err
    assert err.count("Unknown network: 'mainnet'") == 1


@pytest.mark.parametrize("command", ["show", "check"])
def test_empty_network_name_is_unknown_for_every_command(command, capsys):
    assert cli.main(["--log-level", "INFO", "--log-format", "plain", command, "--network", ""]) == cli.EXIT_CONFIG_ERROR
    assert "Unknown network: ''" in capsys.readouterr().err


def test_check_reports_problems(capsys):
    assert cli.main(["--log-level", "INFO", "--log-format", "json", "check"]) == cli.EXIT_PROBLEMS
    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.strip()]
    problems = [line["problem"] for line in lines if "problem" in line]
    assert problems == [
        "networks.development.host is not set",
        "networks.development.port is not set",
    ]
    assert all(line["level"] == "WARNING" for line in lines)


def test_check_passes_when_env_set(monkeypatch):
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "8545")
    assert cli.main(["check", "--network", "development"]) == cli.EXIT_OK


def test_check_reads_dotenv_unless_disabled(tmp_path):
    (tmp_path / ".env").write_text("HOST=localhost\nPORT=8545\n", encoding="utf-8")
    assert cli.main(["--no-dotenv", "check"]) == cli.EXIT_PROBLEMS
    assert cli.main(["check"]) == cli.EXIT_OK


def test_command_is_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_configure_logging_plain_and_json():
    cli.configure_logging("debug", "plain")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert not isinstance(root.handlers[0].formatter, cli.JsonFormatter)

    cli.configure_logging("not-a-level", "json")
    assert root.level == logging.INFO
    assert isinstance(root.handlers[0].formatter, cli.JsonFormatter)
