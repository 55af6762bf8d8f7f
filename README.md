# rtkit

These are small building blocks for the scene loader of a ray tracer:

- `rtkit.chars` classifies ASCII characters and converts their case:
  `is_alpha`, `is_alnum`, `is_digit`, `is_lower`, `is_upper`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` and `count_if`. Each function takes
  either an integer code or a one-character string.
- `rtkit.memory` provides byte-buffer helpers for `bytearray`, `bytes` and
  `memoryview`: `memset`, `bzero`, `memcpy`, `memccpy`, `memmove`, `memchr`,
  `memcmp` and `memindex`. The search functions return indices, not
  pointers.
- `rtkit.search` compares and searches strings with C-string semantics:
  `strcmp`, `strncmp`, `strequ`, `strnequ`, `strstr`, `strnstr`, `strchr`,
  `strrchr` and `strindex`.
- `rtkit.convert` parses and formats integers with `atoi` and `itoa`. The
  result of `atoi` wraps to a signed 32-bit value. If the text holds more
  than 18 digits, `atoi` returns -1 for a positive number and 0 for a
  negative one.
- `rtkit.strings` builds strings: `strcat`, `strncat`, `strlcat`, `strjoin`,
  `strmap`, `strmapi`, `strreplace`, `strsplit`, `strsub` and `strtrim`.
- `rtkit.output` writes characters, strings, lines and integers to a text
  stream with `put_char`, `put_str`, `put_endl` and `put_nbr`. The stream
  defaults to standard output.
- `rtkit.lines` provides `LineReader`. It reads newline-terminated lines
  from file descriptors and keeps the leftover data of each descriptor
  apart. Call `next_line(fd)` to get one line, or `None` at end of input.
  Call `lines(fd)` to iterate over the remaining lines.
- `rtkit.scene` holds the vocabulary of the XML-like scene format:
  - the `ObjectType`, `TextureKind`, `Matter` and `LightKind` enums;
  - the tags allowed at each nesting level, through `tags_at_level`;
  - the tags allowed inside each element, through `allowed_children`;
  - `is_known_tag`;
  - `SceneError`, which is raised for unknown tags and invalid levels.

## Installing

```
pip install .
```

The package needs nothing beyond the standard library.

## Examples

```python
from rtkit.convert import atoi, itoa
from rtkit.strings import strsplit, strtrim

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
strsplit("**a*bc**", "*") # ["a", "bc"]
strtrim("\t hello \n")    # "hello"
```

Reading lines from a descriptor:

```python
import os
from rtkit.lines import LineReader

fd = os.open("scene.xml", os.O_RDONLY)
try:
    for line in LineReader(32).lines(fd):
        print(line)
finally:
    os.close(fd)
```

Checking scene tags:

```python
from rtkit.scene import allowed_children, is_known_tag, tags_at_level

tags_at_level(0)                       # ("rt",)
"radius" in allowed_children("sphere") # True
allowed_children("position")           # ("x", "y", "z")
is_known_tag("camera")                 # True
```

## What it does not do

The package describes which tags a scene file may hold and where they may
appear. It does not do any of the following:

- read a scene file into objects;
- check that required tags are present;
- trace rays;
- render images;
- open a window.

It also installs no command.

## Running the tests

```
pip install ".[test]"
pytest
```