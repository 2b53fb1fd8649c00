"""Run two commands connected by a pipe, from an input file to an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Tuple, Union

from .command import resolve_command
from .errors import PipexError, report_error

USAGE = "Usage: pipex infile cmd1 cmd2 outfile\n"

_Stage = Union[subprocess.Popen, int]


def _system_error(message: str, cause: OSError) -> PipexError:
    error = PipexError(message, 1)
    error.__cause__ = cause
    return error


def _open(path: str, flags: int, message: str) -> Tuple[Optional[int], Optional[OSError]]:
    try:
        return os.open(path, flags, 0o644), None
    except OSError as exc:
        report_error(_system_error(message, exc))
        return None, exc


def _launch(command: str, stdin: int, stdout: int, env: Mapping[str, str]) -> _Stage:
    """Start one stage; a stage that cannot start yields its exit code."""
    try:
        program, argv = resolve_command(command, env)
    except PipexError as error:
        return report_error(error)
    try:
        return subprocess.Popen(
            argv, executable=program, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        return report_error(_system_error("execve failed", exc))


def _wait(stage: _Stage) -> int:
    if isinstance(stage, int):
        return stage
    code = stage.wait()
    # A stage ended by a signal leaves the pipeline's status at 0.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``first < infile | second > outfile`` and return the second's status."""
    environment = os.environ if env is None else env
    try:
        read_end, write_end = os.pipe()
    except OSError as exc:
        raise _system_error("pipe", exc) from exc
    fd_in, _ = _open(infile, os.O_RDONLY, "open infile failed")
    fd_out, out_error = _open(
        outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, "open outfile failed"
    )
    try:
        if fd_in is None:
            bad_fd = OSError(errno.EBADF, os.strerror(errno.EBADF))
            first_stage: _Stage = report_error(
                _system_error("dup2 infile failed", bad_fd)
            )
        else:
            first_stage = _launch(first, fd_in, write_end, environment)
        if fd_out is None:
            cause = out_error or OSError(errno.EBADF, os.strerror(errno.EBADF))
            second_stage: _Stage = report_error(
                _system_error("dup2 outfile failed", cause)
            )
        else:
            second_stage = _launch(second, read_end, fd_out, environment)
    finally:
        for fd in (fd_in, fd_out, read_end, write_end):
            if fd is not None:
                os.close(fd)
    _wait(first_stage)
    return _wait(second_stage)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        return report_error(PipexError(USAGE, 0))
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile)
    except PipexError as error:
        return report_error(error)