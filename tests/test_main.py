import json

from journal_app import main as cli


def test_cli_prints_parsed_line_as_json(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))

    exit_code = cli.main(["--today", "2024-01-10", "task", "next", "monday", "call", "Bob"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["input"]["flags"] == "task"
    assert payload["input"]["offset"] == 5
    assert payload["date"] == "2024-01-15"
    logged = (tmp_path / "parses.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(logged) == 1


def test_cli_exit_code_signals_rejected_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOGGING_ENABLED", "false")

    exit_code = cli.main(["todo"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)["status"] == "invalid"
    assert not (tmp_path / "parses.jsonl").exists()


def test_interactive_loop_stops_on_quit(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("LOGGING_ENABLED", "false")
    lines = iter(["+2 trip", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    exit_code = cli.main(["--today", "2024-01-10"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert '"offset": 2' in out
    assert "Goodbye!" in out
