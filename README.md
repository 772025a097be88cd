# konosubash

Building blocks for a small POSIX-style shell, usable as a library. It needs
nothing beyond the standard library and runs on Python 3.10 or later.

| Module | What it provides |
| --- | --- |
| `konosubash.env` | `Environment`, an ordered list of `NAME=value` entries, and `is_valid_identifier` |
| `konosubash.nodes` | `Node`, `NodeType`, `Token` and `TokenType` for command trees and tokens |
| `konosubash.textutils` | character classes, `atoi`/`itoa`, C-style comparison and search |
| `konosubash.strops` | `split`, `join`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strtrim`, `substr` |
| `konosubash.linkedlist` | `LinkedList` and `ListNode` |
| `konosubash.linereader` | `LineReader` and `get_next_line` over raw file descriptors |
| `konosubash.printf` | a small `printf` dialect and writers to file descriptors |

## The environment

```python
from konosubash.env import Environment, is_valid_identifier

env = Environment(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.set("EDITOR", "vi")            # appended; an existing entry is replaced in place
print(env.get("EDITOR"))           # vi
print(env.unset("EDITOR"))         # True
print("EDITOR" in env)             # False
print(env.sorted_entries())        # ['HOME=/home/user', 'PATH=/usr/bin:/bin']
print(is_valid_identifier("1ABC")) # False
```

`get` returns `None` for a name that is not set. `entries()` and `copy()` give
independent copies; iterating and `len()` work over the entries.

## Command trees and tokens

```python
from konosubash.nodes import Node, NodeType, Token, TokenType

cmd = Node(NodeType.COMMAND, content="ls", args=["ls", "-l"])
redir = Node(NodeType.REDIR_OUT, file="out.txt", left=cmd)
print(redir.is_redirection())      # True
print(Token("A=1", TokenType.ASSIGNMENT))
```

A command keeps its name in `content` and its argument vector in `args`; a
redirection keeps its target (or heredoc delimiter) in `file` and its command
in `left`; a pipe joins `left` and `right`. Tokens marked `literal=True` are
meant to be left unexpanded.

## Text helpers

```python
from konosubash.textutils import atoi, itoa, str_compare, find_char, find_substring
from konosubash.strops import split, strtrim, substr, strlcpy, strlcat

print(atoi("  -42abc"), itoa(-7))        # -42 -7   (atoi wraps like a 32-bit int)
print(str_compare("abc", "abd"))         # -1
print(find_char("a=b", "="))             # 1
print(find_substring("haystack", "st", 8))  # 3
print(split("/usr/bin::/bin", ":"))      # ['/usr/bin', '/bin']
print(strtrim("  padded  ", " "))        # 'padded'
print(substr("konosubash", 4, 4))        # 'suba'
print(strlcpy("hello", 3))               # ('he', 5)
print(strlcat("ab", "cd", 4))            # ('abc', 4)
```

The `textutils` helpers follow C string rules: a NUL character ends a string,
and the search functions return an index or `None`.

## Linked lists

```python
from konosubash.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
print(list(items), len(items))           # [0, 1, 2, 3] 4
print(list(items.map(lambda x: x * 2)))  # [0, 2, 4, 6]
items.clear(print)                       # passes each content to the callback
```

If the function given to `map` raises, the contents mapped so far are passed to
its `delete` callback and the exception propagates.

## Reading lines from a descriptor

```python
import os
from konosubash.linereader import LineReader

read_fd, write_fd = os.pipe()
os.write(write_fd, b"first\nsecond")
os.close(write_fd)
print(list(LineReader(read_fd)))         # ['first\n', 'second']
os.close(read_fd)
```

Lines keep their newline. `get_next_line(fd)` keeps a separate reader for each
descriptor and returns `None` at the end of the input.

## printf

```python
from konosubash.printf import format_printf, format_pointer, format_unsigned_base, printf

print(format_printf("%s has %d items (%x)", "list", 255, 255))  # list has 255 items (ff)
print(format_pointer(0))                  # (nil)
print(format_unsigned_base(255, "01"))    # 11111111
count = printf("%c%c\n", "o", "k")        # writes to fd 1, returns 3
```

Conversions are `%c %s %p %d %i %u %x %X %%`; a `%s` given `None` prints
`(null)`. `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write
straight to a file descriptor.

## What this package does not do

There is no command-line parser, no `$NAME` expansion, no builtins such as
`cd` or `export`, no `PATH` lookup, and nothing that runs programs,
pipelines, redirections or here-documents. The `Node` and `Token` classes
describe command trees, but nothing in the package executes them, and there is
no interactive prompt or command to start.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.