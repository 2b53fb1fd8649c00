# pipex

`pipex` runs two commands connected by a pipe. The first command reads
from an input file. The second command reads the first command's output
and writes to an output file. It does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

How it behaves:

- Each command is split on spaces. Empty pieces are dropped. Quotes and
  other shell syntax are not interpreted.
- A command name is used as written if it names an executable file.
  Otherwise `pipex` looks for it in each directory listed in `PATH`, in
  order. If `PATH` is not set, only the name as written is tried.
- The output file is created with mode `0644`, or truncated if it
  already exists.
- If the input file cannot be opened, an error is printed and the first
  command is not started. The second command still runs, with an empty
  input.
- If the output file cannot be opened, an error is printed and the
  second command is not started. The exit status is then 1.
- The exit status is the second command's exit status. A command that
  cannot be found gives status 127. An empty command gives status 1. If
  the second command is ended by a signal, the status is 0.
- Any number of arguments other than four prints
  `Usage: pipex infile cmd1 cmd2 outfile` to standard error and exits
  with status 0.

Errors go to standard error. System errors are printed as
`message: reason`, for example `open infile failed: No such file or directory`.

## Using it from Python

```python
import os
from pipex.pipeline import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)
```

`run_pipeline` returns the exit status described above. If `env` is
left out, the current environment is used. It raises
`pipex.errors.PipexError` only if the pipe itself cannot be created.
`pipex.pipeline.main(argv)` is the command entry point and returns the
exit status.

`pipex.command` has the pieces for finding programs:

- `split_words(text, separator)` splits text and drops empty pieces.
- `path_from_env(env)` returns the `PATH` value from a mapping, or `None`.
- `find_command_path(name, env)` returns the path of an executable, or
  `None`.
- `resolve_command(command, env)` returns `(program_path, argv)`. It
  raises `InvalidCommand` (exit code 1) for an empty command and
  `CommandNotFound` (exit code 127) when the program cannot be found.

Both exceptions are subclasses of `pipex.errors.PipexError`, which
carries `message` and `exit_code`. `pipex.errors.report_error(error, stream)`
writes an error to a stream (standard error by default) and returns its
exit code. `pipex.errors.print_string(text, stream)` writes text to a
stream (standard output by default), writes `(null)` for `None`, and
returns the number of characters written.

## Limits

`pipex` joins exactly two commands. It does not support more commands
in a chain, here-documents, or appending to the output file.