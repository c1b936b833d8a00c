# antfarm

A solver for the ant farm puzzle. An ant farm is made of rooms joined by
tunnels. Every ant starts in the `##start` room and has to reach the `##end`
room. Each turn an ant may move through one tunnel, and apart from the start
and end rooms a room holds only one ant at a time. The solver searches for a
set of paths that share no rooms and that get every ant to the end in the
fewest turns, then prints each turn's moves.

## Installation

```
pip install .
```

## Usage

The farm description is read from standard input:

```
lem-in < farm.map
lem-in --solution < farm.map
lem-in --paths < farm.map
```

* With no options the farm description is printed back, then an empty line,
  then the moves.
* `--solution` prints the moves only.
* `--paths` does not print the farm description. It prints the paths that are
  tried and how many rounds each set of paths would need, then an empty line,
  then the moves.

Unknown arguments are ignored. If arguments are given and none of them is
`--paths` or `--solution`, a usage line is printed and nothing is solved.
If the input is invalid, or there is no path from start to end, `ERROR` is
written to standard error and the command exits with a non-zero status.

## Input format

```
3
##start
start 1 0
a 2 0
##end
end 3 0
start-a
a-end
```

* The number of ants comes first and must be a positive integer that fits in
  32 bits. Comments are not allowed before it.
* Each room is written as `name x y` with integer coordinates. Two rooms may
  not share a name or a pair of coordinates. `##start` and `##end` mark the
  room on the next line, and each must appear exactly once.
* Tunnels are written as `name1-name2` and must name known rooms. The first
  line containing `-` ends the list of rooms, so room names cannot contain
  `-`. A tunnel given twice is kept once.
* After the ant count, lines that begin with `#` are comments, and `##`
  commands other than `##start` and `##end` are ignored. `##start` and
  `##end` may not appear among the tunnels.
* No line may be empty or begin with `L`.

## Output format

Each line is one turn. `Lk-room` means ant `k` moves into `room`. For the
farm above:

```
L1-a
L1-end L2-a
L2-end L3-a
L3-end
```

When the start and end rooms are directly linked, all ants move to the end
in a single turn.

## Library use

```python
import sys
from antfarm.cli import parse_options, run

options = parse_options(["--solution"])
with open("farm.map") as stream:
    run(stream, options, sys.stdout, sys.stderr)
```

`run` returns 0 on success and -1 after writing `ERROR`. The steps can also be
called one at a time:

```python
from antfarm.reader import read_input
from antfarm.parser import get_antfarm
from antfarm.paths import get_path
from antfarm.ants import ant_moves

with open("farm.map") as stream:
    lines = read_input(stream)
farm = get_antfarm(lines)
paths = get_path(farm)
for turn in ant_moves(farm, paths):
    print(turn)
```

Invalid input, and a farm whose end cannot be reached, raise
`antfarm.model.LemInError`.