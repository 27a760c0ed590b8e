import json
from pathlib import Path

import pytest
from suggest.__main__ import main


@pytest.mark.e2e
def test_cli_single_query(capsys):
    rc = main(["--commands", "help", "branch", "install", "--q", "isntall"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Similar matches: install" in out
    assert "Autocorrect: install" in out


@pytest.mark.e2e
def test_cli_json_without_autocorrect(capsys):
    rc = main(["--commands", "tests", "sitting", "mittens", "--q", "kittens", "--json", "--no-autocorrect"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert data == {"query": "kittens", "autocorrect": "", "matches": ["mittens", "sitting"]}


@pytest.mark.e2e
def test_cli_no_match_exit_code(capsys):
    rc = main(["--commands", "key", "value", "--q", "unique"])
    assert rc == 1
    assert "(no close matches)" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_exact(capsys):
    rc = main(["--commands", "key", "Test", "--q", "TEST", "--exact"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "Test"


@pytest.mark.e2e
def test_cli_files(tmp_path: Path, capsys):
    cmds = tmp_path / "commands.txt"
    cmds.write_text("tests\nsitting\nmittens\n", encoding="utf-8")
    opts = tmp_path / "options.json"
    opts.write_text(json.dumps({"similarityminimum": 2}), encoding="utf-8")

    rc = main(["--commands-file", str(cmds), "--options", str(opts), "--q", "kittens", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert data["matches"] == ["mittens"]


@pytest.mark.e2e
def test_cli_requires_commands():
    with pytest.raises(SystemExit) as exc:
        main(["--q", "anything"])
    assert exc.value.code == 2


@pytest.mark.e2e
def test_cli_bad_options_file(tmp_path: Path):
    opts = tmp_path / "options.json"
    opts.write_text('{"costdeletion": "lots"}', encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--commands", "foo", "--options", str(opts), "--q", "foo"])
    assert exc.value.code == 2
