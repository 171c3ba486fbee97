# minishell

A small shell toolkit. It provides the shell built-ins `echo`, `env`, `pwd`
and `exit`, an environment snapshot, a minimal printf-style formatter, a
buffered line reader and a set of C-style string helpers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minishell
```

This prints every entry of a copy of the current environment, one
`NAME=value` per line, and then the values of `HOME`, `USER` and `SHELL`
(`(null)` for any that is unset). It takes no options.

## Library use

### Built-ins (`minishell.builtins`)

Each built-in writes to the given text stream (standard output when it is
`None`) and returns an exit status:

```python
import sys
from minishell.builtins import echo, env, pwd, is_n_option

echo(["echo", "-nnn", "hello", "world"], sys.stdout)  # prints "hello world" with no newline
is_n_option("-nn")                                     # True
env(["HOME=/home/user", "LANG=C"], sys.stdout)         # one entry per line, returns 0
env(None)                                              # returns 1, prints nothing
pwd(sys.stdout)                                        # prints the working directory
```

`exit_shell(value, stream)` writes `exit` and then raises `SystemExit` with
the given status.

### Environment snapshots (`minishell.environment`)

```python
import os
from minishell.environment import Environment

snapshot = Environment.from_mapping(os.environ)
duplicate = snapshot.copy()
print(len(duplicate))
for entry in duplicate:
    print(entry)
```

An `Environment` is an ordered list of `NAME=value` strings; it can also be
built directly from such strings with `Environment(entries)`. Two
environments compare equal when their entries are the same.

### Formatting (`minishell.printf`)

Supported conversions are `%c %s %p %d %i %u %x %X %%`:

```python
import sys
from minishell.printf import format_string, printf, FormatError

format_string("%d items, %x hex", 42, 255)   # '42 items, ff hex'
printf("%s\n", "hi", stream=sys.stdout)      # returns 3, the characters written
```

`%d`, `%i`, `%u`, `%x` and `%X` wrap their argument to 32 bits; `%s` of
`None` gives `(null)` and `%p` of `None` or 0 gives `(nil)`. An unknown
conversion is copied through unchanged. A `%` at the end of the template, a
`%` followed by a space, or too few arguments raise `FormatError`.

### Reading lines (`minishell.reader`)

```python
import io
from minishell.reader import LineReader

reader = LineReader(io.StringIO("one\ntwo\n"), buffer_size=4)
list(reader)   # ['one\n', 'two\n']
```

`LineReader` works on text or binary streams, reads in chunks of
`buffer_size` (8192 by default), and `next_line()` returns `None` once the
stream is exhausted. A last line without a newline is returned as it is.

### String helpers (`minishell.text`)

`atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
`strjoin`, `strchr`, `strrchr`, `is_alpha`, `is_digit`, `is_alnum`,
`is_ascii`, `is_print`, `to_upper` and `to_lower`. The search functions
(`strnstr`, `strchr`, `strrchr`) return an index or `None`; `itoa` raises
`OverflowError` outside the 32-bit signed range.

## What it does not do

This is not an interactive shell. There is no prompt, no reading or parsing
of command lines, no pipes or redirections, and it does not run programs.
The `cd`, `export` and `unset` built-ins are not provided; the environment
snapshot is read-only apart from copying.