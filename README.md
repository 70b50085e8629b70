# minishell

A small interactive command shell for POSIX systems. It shows a green prompt,
reads one line at a time and does one of the following:

- runs a builtin: `cd <dir>`, `pwd` or `exit`;
- answers the special `echo` forms: `echo $$` prints the shell's process id,
  `echo $?` prints the raw wait status of the last external command, and
  `echo $SHELL` prints the `SHELL` environment variable. Any other `echo`
  argument prints `Invalid command`;
- runs an external program, either alone or as a pipeline joined with ` | `;
- manages stopped jobs with `jobs`, `fg` and `bg`.

Press Ctrl+Z while a program is running to stop it. The stopped program is put
on the job list. Press Ctrl+C or Ctrl+Z at an empty prompt to get a fresh prompt.

The prompt can be changed with `PS1=<text>`. There must be no space after the `=`.

## Installing

```
pip install .
```

## Running

```
minishell
minishell --commands path/to/commands.txt
```

The shell clears the terminal when it starts, if standard output is a terminal.
It stops at `exit` or at the end of input.

The shell checks the first word of each line against a list of known external
commands. By default it reads that list from `external_commands.txt` in the
current directory, and `--commands` names a different file. The file holds
command names separated by whitespace, for example:

```
ls
cat
grep
wc
sort
```

If the file cannot be opened, the shell prints an error to standard error and
starts with an empty list. A command that is in neither the list nor the builtin
names gives `Command not found`. The exceptions are the job-control words `jobs`,
`fg` and `bg`. `Command not found` is also printed when a listed program cannot
be started or a pipeline has an empty stage.

Builtin names other than `echo`, `cd`, `pwd` and `exit`, such as `export` or
`type`, are recognised as builtins but do nothing.

## Job control

- `jobs` lists the stopped jobs, most recent first, as `[1] Stopped   <line>`.
  It prints `No jobs in progress` when the list is empty.
- `fg` resumes the most recent job and waits for it to finish or stop again.
- `bg` resumes the most recent job without waiting for it and removes it from
  the list.

For a pipeline, the shell waits on the last process only, and Ctrl+Z sends the
stop signal to that process only.

## Example session

```
 minishell$:  pwd
/home/user
 minishell$:  ls | wc -l
12
 minishell$:  PS1=mysh>
 mysh>  jobs
No jobs in progress
 mysh>  exit
```

## Using it as a library

```python
import io
from minishell.commands import CommandType, classify, get_command
from minishell.execute import split_pipeline, tokenize
from minishell.shell import Shell

print(classify(get_command("ls -l"), ["ls"]) is CommandType.EXTERNAL)  # True
print(split_pipeline(tokenize("ls -l | wc -l")))  # [['ls', '-l'], ['wc', '-l']]

out = io.StringIO()
shell = Shell(["ls", "cat"], out)
shell.handle_line("echo $?")
print(out.getvalue())        # Exit code 0
```

The modules are:

- `minishell.commands`: `get_command`, `classify`, `load_external_commands`
  and the `CommandType` enum;
- `minishell.execute`: `tokenize`, `split_pipeline`, `run_external` (starts a
  pipeline and returns its `subprocess.Popen` objects) and `run_internal`;
- `minishell.jobs`: `Job` and `JobTable`;
- `minishell.shell`: `Shell`, with `handle_line` and `run`, and `main`.

## What it does not do

Words are split on spaces only. There is no quoting, no escaping, no variable
expansion beyond the three `echo` forms, no input or output redirection, no `&`
for starting jobs in the background, no globbing, no history and no line editing.

## Running the tests

```
pip install .[test]
pytest
```