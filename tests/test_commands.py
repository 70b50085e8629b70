import pytest

from minishell.commands import CommandType, classify, get_command, load_external_commands


def test_get_command_takes_first_word():
    assert get_command("ls -l /tmp") == "ls"


def test_get_command_whole_line_without_space():
    assert get_command("pwd") == "pwd"


def test_get_command_empty():
    assert get_command("") == ""


def test_classify_external():
    assert classify("ls", ["cat", "ls"]) is CommandType.EXTERNAL


def test_classify_builtin():
    assert classify("cd", []) is CommandType.BUILTIN
    assert classify("exit", ["ls"]) is CommandType.BUILTIN


def test_classify_unknown():
    assert classify("frobnicate", ["ls"]) is CommandType.NO_COMMAND


def test_external_list_wins_over_builtins():
    assert classify("echo", ["echo"]) is CommandType.EXTERNAL


def test_load_external_commands(tmp_path):
    path = tmp_path / "external_commands.txt"
    path.write_text("ls\ncat   grep\n\nsort\n")
    assert load_external_commands(path) == ["ls", "cat", "grep", "sort"]


def test_load_external_commands_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_external_commands(tmp_path / "absent.txt")