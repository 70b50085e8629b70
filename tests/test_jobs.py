import io
import os
import signal
import subprocess
import sys
from unittest import mock

import pytest

from minishell.jobs import Job, JobTable


def test_push_pop_is_last_in_first_out():
    table = JobTable()
    table.push("first", 10)
    table.push("second", 20)
    assert table.pop() == Job("second", 20)
    assert table.pop() == Job("first", 10)
    assert len(table) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        JobTable().pop()


def test_list_jobs_empty():
    out = io.StringIO()
    JobTable().list_jobs(out)
    assert out.getvalue() == "No jobs in progress\n"


def test_list_jobs_most_recent_first():
    table = JobTable()
    table.push("sleep 10", 1)
    table.push("cat", 2)
    out = io.StringIO()
    table.list_jobs(out)
    assert out.getvalue() == "[1] Stopped   cat\n[2] Stopped   sleep 10\n"


def test_background_empty():
    out = io.StringIO()
    JobTable().background(out)
    assert out.getvalue() == "No command running\n"


def test_foreground_empty():
    out = io.StringIO()
    assert JobTable().foreground(out) is None
    assert out.getvalue() == "No command running\n"


@mock.patch("os.kill")
def test_background_resumes_and_removes(kill):
    table = JobTable()
    table.push("sleep 5", 4321)
    out = io.StringIO()
    table.background(out)
    kill.assert_called_once_with(4321, signal.SIGCONT)
    assert out.getvalue() == "sleep 5 \n"
    assert len(table) == 0


def test_foreground_waits_for_stopped_process():
    process = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(0.3)"])
    os.kill(process.pid, signal.SIGSTOP)
    os.waitpid(process.pid, os.WUNTRACED)
    table = JobTable()
    table.push("sleeper", process.pid)
    out = io.StringIO()
    status = table.foreground(out)
    process.returncode = 0
    assert os.WIFEXITED(status)
    assert os.WEXITSTATUS(status) == 0
    assert out.getvalue() == "sleeper\n"
    assert len(table) == 0