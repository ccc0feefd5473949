# cslib

A small library of building blocks for introductory programming: geometry
helpers, file-name utilities, string-keyed maps, a priority queue, a graph
abstraction, command-line option parsing, simple console input, and an
in-memory model of graphical objects, interactors, events and windows.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cslib.gmath` | `PI`, `E`, `sin_degrees`, `cos_degrees`, `tan_degrees`, `to_degrees`, `to_radians`, `vector_distance`, `vector_angle` |
| `cslib.gtypes` | frozen dataclasses `GPoint`, `GDimension`, `GRectangle` (with `is_empty` and `contains`) |
| `cslib.filelib` | path splitting (`get_root`, `get_extension`, `get_head`, `get_tail`), `default_extension`, search paths (`find_on_path`, `open_on_path`), file and directory tests and creation, `list_directory`, `iter_directory`, `iter_directory_tree`, `match_filename_pattern` |
| `cslib.maps` | `HashMap` and `Map`, mutable mappings with string keys; `Map` iterates in sorted key order |
| `cslib.pqueue` | `PriorityQueue`, where lower numbers come out first and ties keep their order; `EmptyQueueError` |
| `cslib.graph` | `Graph`, `Node`, `Arc` |
| `cslib.options` | `parse_options`, `parse_shell_args`, `Options`, `show_usage`, `OptionError` |
| `cslib.simpio` | `get_integer`, `get_long`, `get_real`, `get_line`, `read_line`, `read_lines_from_stream`, `read_lines_from_file` |
| `cslib.gevents` | `EventClass`, `EventType`, `Modifier`, `KeyCode`, the `GEvent` family, `EventQueue`, `GTimer` |
| `cslib.gobjects` | `GObject`, `GRect`, `GRoundRect`, `G3DRect`, `GOval`, `GLine`, `GArc`, `GCompound`, `normalize_color` |
| `cslib.gfigures` | `GLabel`, `GImage`, `GPolygon` |
| `cslib.ginteractors` | `GButton`, `GCheckBox`, `GSlider`, `GTextField`, `GChooser` |
| `cslib.gwindow` | `GWindow` and `pause` |

## Examples

Angles in degrees:

```python
from cslib.gmath import sin_degrees, vector_angle

sin_degrees(30)        # 0.5, to floating-point accuracy
vector_angle(1, -1)    # about 45.0: the y axis points down on screen
```

File names:

```python
from cslib.filelib import get_root, get_extension, get_head, get_tail

get_root("notes.txt")       # "notes"
get_extension("notes.txt")  # ".txt"
get_head("a/b")             # "a"
get_tail("/a")              # "a"
```

Matching file names against shell-style patterns:

```python
from cslib.filelib import match_filename_pattern

match_filename_pattern("report.txt", "*.txt")     # True
match_filename_pattern("b.c", "[^a]*.c")          # True
```

A sorted map:

```python
from cslib.maps import Map

m = Map()
m["pear"] = 2
m["apple"] = 1
list(m)            # ["apple", "pear"]
m.get("plum")      # None
```

A priority queue:

```python
from cslib.pqueue import PriorityQueue

pq = PriorityQueue()
pq.enqueue("later", 2.0)
pq.enqueue("first", 1.0)
pq.dequeue()   # "first"
```

A graph:

```python
from cslib.graph import Graph

g = Graph()
a = g.add_node("A")
b = g.add_node("B")
g.add_arc(a, b)
a.is_connected(b)   # True
a.neighbors()       # [Node('B')]
```

Command-line options and shell-style splitting:

```python
from cslib.options import parse_options, parse_shell_args

opts = parse_options(["-n", "3", "input.txt"], ["-n <int>", "-v"])
opts.get_int("-n", 1)        # 3
opts.get_bool("-v", False)   # False
opts.args                    # ["input.txt"]

parse_shell_args('copy "my file" dest')   # ["copy", "my file", "dest"]
```

Events:

```python
from cslib.gevents import EventClass, EventQueue, EventType, GMouseEvent

queue = EventQueue()
queue.post(GMouseEvent(EventType.MOUSE_CLICKED, None, 10, 20))
event = queue.wait_for_event(EventClass.MOUSE_EVENT, timeout=1.0)
(event.x, event.y)   # (10, 20)
```

A window with a filled oval on its background and a shape in its
foreground:

```python
from cslib.gobjects import GRect
from cslib.gwindow import GWindow

gw = GWindow(800, 600)
gw.color = "ORANGE"
gw.fill_oval(100, 150, 200, 200)

rect = GRect(10, 10, 50, 30)
rect.color = "Dark Gray"
gw.add(rect)
gw.get_object_at(20, 20) is rect   # True
```

## What the package does not do

The graphics modules keep a model of windows, shapes and controls in
memory; nothing is drawn on the screen. `GWindow.repaint` returns the
display list instead of painting it, and events only arrive when code posts
them to an `EventQueue` (interactors do this through `activate`, timers from
a background thread, windows when closed). Text sizes in `GLabel` and
control sizes in the interactors come from fixed nominal metrics rather
than real fonts. `GImage` reads only an image's dimensions, using Pillow.
There is no sound playback and no loading of compiled code.