# minishell

The parsing and builtin commands of a small shell. You can use it to:

- split a command line into tokens;
- build a syntax tree for pipes (`|`), redirections (`<`, `>`, `>>`) and here-documents (`<<`);
- run the builtins `echo` (with `-n`), `cd`, `pwd`, `env`, `export`, `unset` and `exit` against an environment held as a list of `NAME=value` strings.

## Installing

```
pip install .
```

## Parsing

`minishell.lexer.tokenize` turns a line into a flat list of `minishell.tokens.Token`.
Quoted text becomes a single word without its quotes. An unmatched quote raises
`minishell.tokens.ParseError`.

`minishell.ast.parse` tokenizes a line and joins adjacent words. It builds the tree
and returns its root, or `None` for an empty line. A syntax error raises
`ParseError`. `minishell.ast.format_ast` renders a tree:

```python
from minishell.ast import parse, format_ast

print(format_ast(parse("echo hi | wc -c > count.txt")), end="")
```

```
PIPE (|)
|-- BUILTIN (echo)
|   |-- STRING (hi)
|-- OUTPUT_REDIRECT (>)
|   |-- STRING (wc)
|   |   |-- STRING (-c)
|   |-- STRING (count.txt)
```

A command's arguments hang as a chain to its right. `Token.iter_arguments` walks
that chain.

## Builtins

`minishell.commands.run_builtin` takes a command node, the environment list and
the last exit status. It removes one pair of surrounding quotes from each argument
and dispatches to the builtin. It returns the builtin's status, or 127 for an
unknown name.

```python
from minishell.ast import parse
from minishell.commands import run_builtin

env = ["HOME=/home/user"]
run_builtin(parse("export NAME=value"), env)
# env is now ["HOME=/home/user", "NAME=value"]
```

The builtins can also be called directly:

- `minishell.echo.echo`. `$?` is replaced by the status you pass, via `expand_exit_status`.
- `minishell.builtins.cd`, `pwd` and `exit_builtin`. `exit_builtin` raises `minishell.builtins.ShellExit`, whose `status` is the status to end with.
- `minishell.env_builtins.env_builtin`, `export`, `display_export` and `unset`. `export` and `unset` change the list they are given in place.

`minishell.environment` holds the lookup and update helpers behind them. `minishell.envsort` orders entries by name.

## What it does not do

This package does not include an interactive prompt or a command to start one.
It does not run a syntax tree. It does not start external programs, connect
pipelines, apply redirections to files or read here-document bodies. It parses
lines and runs builtins. Driving them is left to the caller.

## Tests

```
pip install .[test]
pytest
```