# xenodon

Building blocks for a volume renderer, in pure Python with no third-party
dependencies:

- `xenodon.errors`: the `Error` exception, built from a `str.format`-style
  message and its arguments.
- `xenodon.logger`: a `Logger` that stamps each message with the local time
  (`[HH:MM:SS] `) and hands it to every sink added with `add_sink`.
  `ConsoleSink` prints lines. `FileSink` writes lines to a file, which it
  truncates when it opens it, and can be used as a context manager. A shared
  instance is available as `LOGGER`.
- `xenodon.parser`: a character-level `Parser` that tracks line and column,
  plus value parsers `parse_size`, `parse_string`, `pair_parser`,
  `parse_offset2d` and `parse_extent2d`. `parse` runs one of these over a
  whole string or stream and requires the input to end afterwards. Failures
  raise `ParseError` with the position in the message.
- `xenodon.arg_parse`: a declarative command-line parser. A `Command` is
  built from `Flag`, `Parameter` and `Positional` entries, and value
  converters come from `string_opt`, `int_range_opt`, `float_range_opt`,
  `path_opt` and `parse_float`. Invalid input raises `ArgParseError`.
- `xenodon.cli`: the option set of the `render` subcommand (`RenderOptions`,
  `RenderParameters`, `HeadlessOptions`, `DirectOptions`, `XorgOptions`),
  together with `parse_voxel_ratio` and `parse_render_args`.
- `xenodon.vec` and `xenodon.quat`: small-dimension vectors (`Vec`) and
  quaternions (`Quat`) with `dot`, `cross`, `mix`, `normalize`, `distance`,
  `vec_map`, `lerp`, `slerp` and more.

## Parsing values

```python
from xenodon.parser import parse, parse_size, parse_string, pair_parser

parse("1234", parse_size)                             # 1234
parse('"hello\\n"', parse_string)                     # 'hello\n'
parse("(3, 4)", pair_parser(parse_size, parse_size))  # (3, 4)
```

In single-line mode, which is the default, a `#` starts a comment that runs
to the end of the line, and a newline is an error. With `multiline=True`,
newlines are allowed and counted, and `#` is rejected.

## Parsing command-line arguments

```python
from xenodon.arg_parse import Command, Flag, Parameter, Positional, int_range_opt, parse, path_opt

cmd = Command(
    flags=[Flag("verbose", "--verbose", "v")],
    parameters=[Parameter("count", int_range_opt(0, 10), "count", "--count", "c")],
    positional=[Positional("source", path_opt(), "source path")],
)
values = parse(["-v", "--count", "3", "input.tiff"], cmd)
# {'verbose': True, 'count': 3, 'source': PosixPath('input.tiff')}
```

Every flag appears in the result and is `False` unless it was given.
Parameters appear only when given. All positionals are required. An option
that is repeated, unknown or missing its value raises `ArgParseError`. So do
a value that its converter rejects and a missing or surplus positional.

## Options of the `render` subcommand

```python
from xenodon.cli import parse_render_args

opts = parse_render_args(["--headless", "config.cfg", "volume.tiff"])
opts.headless.output   # 'out-{}.png'
```

`parse_render_args` raises `Error` when no backend, or more than one of
`--xorg`, `--headless` and `--direct`, is given. It also raises `Error` when
`--discard-output`, `--output` or `--xorg-multi-gpu` is used without the
backend it belongs to, and when `--discard-output` and `--output` are given
together. `--voxel-ratio` takes `x:y:z` with three positive numbers.

## Vectors and quaternions

```python
import math
from xenodon.vec import Vec, cross
from xenodon.quat import Quat, slerp

x = Vec(1.0, 0.0, 0.0)
y = Vec(0.0, 1.0, 0.0)
z = cross(x, y)                   # Vec(0.0, 0.0, 1.0)

q = Quat.axis_angle(z, math.pi / 2)
half_way = slerp(Quat.identity(), q, 0.5)
```

## What this package does not do

This package contains no renderer, display backend or GPU code. It does not
read or convert volume files, it has no reader for structured configuration
files, and it does not install a command-line program. `parse_render_args`
only parses and checks the options of `render`; nothing here acts on them.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.