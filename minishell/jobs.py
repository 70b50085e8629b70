"""Table of stopped jobs."""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass


@dataclass
class Job:
    """A stopped command and the process running it."""

    command: str
    pid: int


class JobTable:
    """Stack of stopped jobs, most recently stopped first."""

    def __init__(self) -> None:
        self._jobs: list[Job] = []

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self):
        return reversed(self._jobs)

    def push(self, command: str, pid: int) -> Job:
        """Record a newly stopped job."""
        job = Job(command, pid)
        self._jobs.append(job)
        return job

    def pop(self) -> Job:
        """Remove and return the most recent job."""
        if not self._jobs:
            raise IndexError("no jobs")
        return self._jobs.pop()

    def background(self, out=None) -> None:
        """Resume the most recent job without waiting for it."""
        out = out if out is not None else sys.stdout
        if not self._jobs:
            out.write("No command running\n")
        else:
            job = self._jobs[-1]
            out.write(f"{job.command} \n")
            os.kill(job.pid, signal.SIGCONT)
            self.pop()
        out.flush()

    def foreground(self, out=None) -> int | None:
        """Resume the most recent job and wait until it ends or stops.

        Returns the raw wait status, or None when there is no job.
        """
        out = out if out is not None else sys.stdout
        if not self._jobs:
            out.write("No command running\n")
            out.flush()
            return None
        job = self._jobs[-1]
        os.kill(job.pid, signal.SIGCONT)
        out.write(f"{job.command}\n")
        out.flush()
        _, status = os.waitpid(job.pid, os.WUNTRACED)
        self.pop()
        return status

    def list_jobs(self, out=None) -> None:
        """Print every stopped job, numbered from 1."""
        out = out if out is not None else sys.stdout
        if not self._jobs:
            out.write("No jobs in progress\n")
        for number, job in enumerate(self, start=1):
            out.write(f"[{number}] Stopped   {job.command}\n")
        out.flush()