import os

import pytest

from pipex.pipeline import USAGE, main, run_pipeline


@pytest.fixture
def env():
    return {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\nworld\n")
    return path


def test_pipeline_transforms_input(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    code = run_pipeline(str(infile), "cat", "tr a-z A-Z", str(out), env)
    assert code == 0
    assert out.read_text() == infile.read_text().upper()


def test_pipeline_truncates_existing_output(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    out.write_text("old content that is much longer than the input\n" * 5)
    assert run_pipeline(str(infile), "cat", "cat", str(out), env) == 0
    assert out.read_text() == infile.read_text()


def test_pipeline_creates_output_with_mode(tmp_path, infile, env):
    out = tmp_path / "new.txt"
    old_mask = os.umask(0)
    try:
        run_pipeline(str(infile), "cat", "cat", str(out), env)
    finally:
        os.umask(old_mask)
    assert out.stat().st_mode & 0o777 == 0o644


def test_pipeline_status_is_last_command(tmp_path, infile, env):
    out = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "false", str(out), env) == 1
    assert run_pipeline(str(infile), "false", "cat", str(out), env) == 0


def test_pipeline_second_command_not_found(tmp_path, infile, env, capsys):
    out = tmp_path / "out.txt"
    code = run_pipeline(str(infile), "cat", "no-such-command-xyz", str(out), env)
    assert code == 127
    assert "Command not found\n" in capsys.readouterr().err


def test_pipeline_first_command_not_found(tmp_path, infile, env, capsys):
    out = tmp_path / "out.txt"
    code = run_pipeline(str(infile), "no-such-command-xyz", "cat", str(out), env)
    assert code == 0
    assert out.read_text() == ""
    assert "Command not found" in capsys.readouterr().err


def test_pipeline_empty_command_is_invalid(tmp_path, infile, env, capsys):
    out = tmp_path / "out.txt"
    assert run_pipeline(str(infile), "cat", "   ", str(out), env) == 1
    assert "Invalid command" in capsys.readouterr().err


def test_pipeline_missing_infile(tmp_path, env, capsys):
    out = tmp_path / "out.txt"
    code = run_pipeline(str(tmp_path / "absent"), "cat", "cat", str(out), env)
    err = capsys.readouterr().err
    assert code == 0
    assert out.read_text() == ""
    assert "open infile failed" in err
    assert "dup2 infile failed" in err


def test_pipeline_unwritable_outfile(tmp_path, infile, env, capsys):
    out = tmp_path / "missing-dir" / "out.txt"
    code = run_pipeline(str(infile), "cat", "cat", str(out), env)
    err = capsys.readouterr().err
    assert code == 1
    assert "open outfile failed" in err
    assert "dup2 outfile failed" in err


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 0
    assert capsys.readouterr().err == USAGE


def test_main_runs_pipeline(tmp_path, infile, monkeypatch):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()