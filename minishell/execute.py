"""Running builtin and external commands."""

from __future__ import annotations

import os
import subprocess
import sys


def tokenize(line: str) -> list[str]:
    """Split ``line`` on spaces, dropping empty words."""
    return [word for word in line.split(" ") if word]


def split_pipeline(tokens) -> list[list[str]]:
    """Split a token list into the commands separated by ``|``."""
    segments: list[list[str]] = [[]]
    for token in tokens:
        if token == "|":
            segments.append([])
        else:
            segments[-1].append(token)
    if len(segments) > 1 and not all(segments):
        raise ValueError("syntax error near '|'")
    return segments


def run_external(line: str) -> list[subprocess.Popen]:
    """Start the pipeline in ``line`` and return its processes, the last one last.

    The last process writes to the shell's standard output; the caller waits.
    """
    segments = split_pipeline(tokenize(line))
    if not segments[0]:
        raise ValueError("empty command")
    processes: list[subprocess.Popen] = []
    upstream = None
    try:
        for index, argv in enumerate(segments):
            last = index == len(segments) - 1
            process = subprocess.Popen(
                argv, stdin=upstream, stdout=None if last else subprocess.PIPE
            )
            if upstream is not None:
                upstream.close()
            upstream = process.stdout
            processes.append(process)
    except OSError:
        if upstream is not None:
            upstream.close()
        for process in processes:
            process.kill()
            process.wait()
        raise
    return processes


def run_internal(line: str, out=None) -> None:
    """Execute the builtins ``exit``, ``cd <dir>`` and ``pwd``."""
    out = out if out is not None else sys.stdout
    if line == "exit":
        raise SystemExit(0)
    if line.startswith("cd "):
        try:
            os.chdir(line[3:])
        except OSError:
            out.write("Invalid path\n")
    elif line.startswith("pwd"):
        out.write(os.getcwd() + "\n")
    out.flush()