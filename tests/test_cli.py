"""Tests for CLI module."""
from __future__ import annotations

import json
from pathlib import Path


def test_cli_imports():
    from dirscope import cli

    assert hasattr(cli, "main")


def test_to_tool_args():
    from dirscope.cli import build_parser, to_tool_args

    parsed = build_parser().parse_args(
        ["src", "--depth", "2", "-e", "py", "-e", "md", "--files-only", "--sort-by", "size", "--page", "3", "--strict"]
    )
    args = to_tool_args(parsed)
    assert args["path"] == "src"
    assert args["depth"] == 2
    assert args["extensions"] == ["py", "md"]
    assert args["filesOnly"] is True
    assert args["sortBy"] == "size"
    assert args["entryPageNumber"] == 3
    assert args["strictPagination"] is True
    assert "limit" not in args
    assert "charLength" not in args


def test_cli_json_output(sandbox: Path, capsys):
    from dirscope.cli import main

    (sandbox / "dir").mkdir()
    (sandbox / "dir" / "a.txt").write_text("a", encoding="utf8")
    code = main(["dir", "--json", "--no-log-json"])
    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["status"] == "hasResults"
    assert [entry["name"] for entry in result["entries"]] == ["a.txt"]


def test_cli_human_output(sandbox: Path, capsys):
    from dirscope.cli import main

    (sandbox / "src").mkdir()
    (sandbox / "notes.md").write_text("hello", encoding="utf8")
    code = main([".", "--no-log-json"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[FILE] notes.md (5.0B)" in out
    assert "[DIR] src/" in out


def test_cli_error_exit_code(sandbox: Path, capsys):
    from dirscope.cli import main

    code = main(["missing", "--json", "--no-log-json"])
    assert code == 1
    result = json.loads(capsys.readouterr().out)
    assert result["errorCode"] == "pathValidationFailed"


def test_cli_quiet_mode(sandbox: Path, capsys):
    from dirscope.cli import main

    (sandbox / "a.txt").write_text("a", encoding="utf8")
    assert main(["--quiet", "--no-log-json"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_writes_json_log(sandbox: Path):
    from dirscope.cli import main

    log_file = sandbox / "run.jsonl"
    main(["--quiet", "--log-json", str(log_file)])
    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert [record["type"] for record in records] == ["request", "result"]
    assert records[1]["status"] == "empty"


def test_cli_sandbox(sandbox: Path, capsys):
    from dirscope.cli import main

    (sandbox / "inner").mkdir()
    (sandbox / "inner" / "x.txt").write_text("x", encoding="utf8")
    code = main(["..", "--sandbox", str(sandbox / "inner"), "--json", "--no-log-json"])
    assert code == 1
    assert json.loads(capsys.readouterr().out)["errorCode"] == "pathValidationFailed"


def test_cli_json_with_undecodable_names(sandbox: Path, capsys):
    import os

    from dirscope.cli import main

    base = os.path.join(os.fsencode(sandbox), b"proj")
    os.mkdir(base)
    os.mkdir(os.path.join(base, b"d\xff"))
    code = main(["proj", "--depth", "1", "--json", "--no-log-json"])
    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["entries"] == [{"name": "d\ufffd", "type": "dir"}]
