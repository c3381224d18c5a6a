# minishell

Building blocks for a small POSIX-style shell:

- **Lexing**: a command line is split into words, redirections (`<`, `>`,
  `<<`, `>>`) and pipe separators (`|`). Quoted text, blanks included,
  stays inside one word.
- **Environment**: an ordered list of `NAME=value` entries that can be
  looked up, set, unset and used to expand `$NAME` references in text.
- **Built-in commands**: `cd`, `echo` (with `-n`), `env`, `export`, `pwd`,
  `unset` and `exit`. Each one keeps the shell's status and prints the same
  messages as a usual shell.
- **External commands**: a program is looked up on `PATH` and run with the
  shell's environment and the given standard input and output descriptors.
- **Prompt**: a `user@host$ ` prompt, built from `whoami` and `hostname`.

The package depends only on the standard library and needs Python 3.10 or
later. The tests use pytest, which the `test` extra installs.

## Modules

| Module                  | What it provides                                                                 |
|-------------------------|----------------------------------------------------------------------------------|
| `minishell.utils`       | `atoll`, `quotes_len`, `skip_whitespace`, `split`, `is_name_start`, `is_name_char`, `report_error` |
| `minishell.environment` | `Environment`, `name_length`, `get_var`, `get_value`                             |
| `minishell.lexer`       | `TokenType`, `Token`, `get_token`, `token_type`, `tokenize`                      |
| `minishell.executor`    | `Command`, `find_executable`, `run_command`, `capture_output`                    |
| `minishell.builtins`    | `Shell`, `ShellExit`, `run_builtin`, `echo`, `cd`, `env`, `export`, `pwd`, `unset`, `exit_status`, `exit_shell` |
| `minishell.prompt`      | `build_prompt`, `read_command_line`                                              |

## Environment and lexing

```python
from minishell.environment import Environment
from minishell.lexer import tokenize

env = Environment(["HOME=/home/demo", "GREETING=hello"])
print(env.value("GREETING"))           # hello
print(env.expand("$GREETING world"))   # hello world

env.set("EDITOR=vi")
env.unset("GREETING")
print(list(env))                       # ['HOME=/home/demo', 'EDITOR=vi']

for token in tokenize("echo 'a b' > out.txt | wc -l"):
    print(token.text, token.type.name)
```

`Environment.set` adds the entry at the end and replaces any earlier entry
with the same name. It raises `ValueError` when the text is not a name
followed directly by `=`. In `expand`, an unset variable becomes empty text
and a `$` that is not followed by a name is dropped.

`Environment.from_environ()` copies the process environment but leaves out
`OLDPWD`. Until `cd` has been run once, `cd -` reports that `OLDPWD` is not
set.

## Running commands

```python
from minishell.environment import Environment
from minishell.executor import Command, capture_output, run_command

env = Environment.from_environ()
status = run_command(Command(["ls", "-l"]), env)
print(capture_output("/bin/hostname", env))
```

`run_command` waits for the program and returns its exit status. If the
program cannot be started, it returns 1. When it has finished, it closes the
command's descriptors, except 0 and 1. `capture_output` runs a command line
split on spaces. It reads back at most 255 bytes and drops the last
character, which is usually the trailing newline.

## Built-ins and exit status

`run_builtin(shell, args)` runs `args` as a built-in command. If `args[0]`
is not the name of a built-in, it returns `False`. The last status is kept
in `Shell.status`. `exit_status(args)` works out the code that `exit` would
use:

- with no argument, the code is 0;
- with one numeric argument, the code is that number modulo 256;
- with a non-numeric argument or one outside the signed 64-bit range, the
  code is 255 and a "numeric argument required" message is printed;
- with more than one argument, the code is 1 and a "too many arguments"
  message is printed.

`exit_shell` prints `exit` and raises `ShellExit` with that code. The caller
decides how the program ends.

`read_command_line(shell)` shows the prompt and returns one line. Line
editing and history come from `readline` where it is available. At end of
input it calls `exit_shell`.

## What is not included

The package provides parts of a shell. It does not provide a shell you can
start:

- There is no command to run and no read-evaluate loop.
- Tokens are not assembled into pipelines, and no redirections are applied.
- Here-documents (`<<`) are recognised as tokens but are not read.
- `$NAME` expansion is not applied to tokens automatically.
- Interrupt and quit signals are not handled.