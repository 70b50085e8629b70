"""Interactive shell loop."""

from __future__ import annotations

import argparse
import os
import signal
import sys
import threading

from .commands import CommandType, classify, get_command, load_external_commands
from .execute import run_external, run_internal
from .jobs import JobTable

GREEN = "\x1b[32m"
RESET = "\x1b[0m"
DEFAULT_PROMPT = "minishell$:"


class Shell:
    """A small shell with builtins, external pipelines and job control."""

    def __init__(self, external_commands, out=None) -> None:
        self.external_commands = list(external_commands)
        self.out = out if out is not None else sys.stdout
        self.prompt = DEFAULT_PROMPT
        self.status = 0
        self.jobs = JobTable()
        self.child_pid: int | None = None
        self.current_line = ""

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")
        self.out.flush()

    def _echo(self, argument: str) -> None:
        if argument == "$$":
            self._say(f"Pid is {os.getpid()}")
        elif argument == "$?":
            self._say(f"Exit code {self.status}")
        elif argument == "$SHELL":
            self._say(f"PATH: {os.environ.get('SHELL', '(null)')}")
        else:
            self._say("Invalid command")

    def _run_external(self, line: str) -> None:
        try:
            processes = run_external(line)
        except (OSError, ValueError):
            self._say("Command not found")
            return
        last = processes[-1]
        self.child_pid = last.pid
        try:
            _, status = os.waitpid(last.pid, os.WUNTRACED)
        finally:
            self.child_pid = None
        self.status = status
        if os.WIFSTOPPED(status):
            self.jobs.push(line, last.pid)
            return
        last.returncode = os.waitstatus_to_exitcode(status)
        for process in processes[:-1]:
            process.wait()

    def handle_line(self, line: str) -> None:
        """Execute one input line."""
        if not line:
            return
        if line.startswith("PS1=") and line[4:5] != " ":
            self.prompt = line[4:]
            return
        kind = classify(get_command(line), self.external_commands)
        if kind is CommandType.BUILTIN:
            if line.startswith("echo "):
                self._echo(line[5:])
            else:
                run_internal(line, self.out)
        elif kind is CommandType.EXTERNAL:
            self._run_external(line)
        elif line == "bg":
            self.jobs.background(self.out)
        elif line == "fg":
            status = self.jobs.foreground(self.out)
            if status is not None:
                self.status = status
        elif line == "jobs":
            self.jobs.list_jobs(self.out)
        else:
            self._say("Command not found")

    def _on_signal(self, signum, frame) -> None:
        if not self.current_line:
            self.out.write(f"\n{GREEN} {self.prompt}: {RESET}")
            self.out.flush()
        elif signum == signal.SIGTSTP and self.child_pid is not None:
            os.kill(self.child_pid, signal.SIGTSTP)

    def run(self, stream) -> None:
        """Prompt for and execute lines from ``stream`` until it is exhausted."""
        previous = {}
        if threading.current_thread() is threading.main_thread():
            for signum in (signal.SIGINT, signal.SIGTSTP):
                previous[signum] = signal.signal(signum, self._on_signal)
        try:
            while True:
                self.current_line = ""
                self.out.write(f"{GREEN} {self.prompt} {RESET}")
                self.out.flush()
                line = stream.readline()
                if not line:
                    break
                self.current_line = line.rstrip("\n")
                self.handle_line(self.current_line)
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv=None) -> int:
    """Start an interactive shell on standard input."""
    parser = argparse.ArgumentParser(prog="minishell")
    parser.add_argument(
        "--commands",
        default="external_commands.txt",
        help="file listing the external command names",
    )
    args = parser.parse_args(argv)
    if sys.stdout.isatty():
        sys.stdout.write("\x1b[H\x1b[2J")
    try:
        external = load_external_commands(args.commands)
    except OSError as error:
        print(f"fopen: {error.strerror}", file=sys.stderr)
        print("ERROR: Unable to open file", file=sys.stderr)
        external = []
    shell = Shell(external, sys.stdout)
    try:
        shell.run(sys.stdin)
    except SystemExit as stop:
        return stop.code if isinstance(stop.code, int) else 0
    return 0