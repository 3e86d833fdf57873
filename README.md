# sogame

A small top-down puzzle game played on a rectangular tile map. Walk the
hero around the room, pick up every key, then head for the stairs to win.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
sogame path/to/map.ber
```

The command takes exactly one argument, the map file. With any other
number of arguments it prints a usage message and exits with status 1.

The game opens a window 100 pixels per tile, titled "So long". It loads
its sprites from a directory named `img` in the current working
directory; every image listed below must be there, or the game prints an
`Error` message and does not start.

Controls (acted on when the key is released):

- `W`, `A`, `S`, `D` move the hero one tile up, left, down or right
- `Escape`, or closing the window, quits

Keys are picked up when you press a key while standing on them. The exit
blocks the way until every key has been collected; walking into it after
that ends the game. After each move the move counter (`moves : N`) is
drawn in red in the top-left corner.

## Map format

A map is a plain text file made of these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | floor             |
| `C`  | key (collectible) |
| `E`  | exit (stairs)     |
| `P`  | player start      |

Rules a map must meet:

- every line has the same length, and the file has between 3 and 14 lines;
- no blank lines, and no trailing newline after the last line;
- exactly one `E` and exactly one `P`;
- the border is made up entirely of walls;
- every key and the exit can be reached from the start.

Example:

```
1111111
1P0C0E1
1111111
```

An empty or unreadable file prints `Error` followed by
`Wrong map sorry... Retry !`; a map that breaks the layout rules prints
`Invalid map... Retry !`; one whose keys or exit cannot be reached prints
`Map is impossible... Sorry... Retry !`. In each case the game does not
start and the command exits with status 1.

## Sprites

The `img` directory must hold these XPM files (see `sogame.layout.Sprite`):

`Longwall-top.xpm`, `Longwall-bottom.xpm`, `Longwall-left.xpm`,
`Longwall-right.xpm`, `Corner-top-left.xpm`, `Corner-top-right.xpm`,
`Corner-bottom-left.xpm`, `Corner-bottom-right.xpm`, `White.xpm`,
`White-top-left.xpm`, `White-top-right.xpm`, `White-bottom-left.xpm`,
`White-bottom-right.xpm`, `White-mid-top.xpm`, `White-mid-bottom.xpm`,
`White-mid-left.xpm`, `White-mid-right.xpm`, `interior_walls.xpm`,
`Key1.xpm` to `Key4.xpm`, `door1.xpm`, `door2.xpm`, `hero1.xpm` to
`hero4.xpm`, `stairs.xpm`.

The package does not ship any of these images; you supply them.

## Using it as a library

```python
from sogame.mapcheck import load_map
from sogame.game import Game, Direction, Key

game_map = load_map("maps/small.ber")
game = Game(game_map)
game.step(Direction.RIGHT)      # move without picking anything up
game.press_key(Key.D)           # pick up, then move, as the window does
print(game.status_text())       # "moves : 2"
print(game.running, game.won)
```

Modules:

- `sogame.mapcheck` — `parse_map` and `load_map` validate map text and
  return a `GameMap`; `validate_layout`, `check_walls` and `flood_fill`
  are the individual checks; failures raise `MapError`.
- `sogame.game` — `Game` holds the play state (`step`, `collect`,
  `press_key`, `tile_at`, `status_text`); `Direction` and `Key` name the
  moves and key symbols.
- `sogame.layout` — `base_scene` and the `*_tiles` functions return the
  `Placement`s (sprite and pixel position) that make up the opening
  screen.
- `sogame.xpm` — `load_xpm` and `parse_xpm` read XPM images into
  `XpmImage` objects; `strip_comments` and `split_words` are helpers;
  failures raise `XpmError`.
- `sogame.colors` — `text_to_rgb` resolves X11 colour names and
  `#rrggbb` values to integers (`"none"` gives -1, unknown names 0).
- `sogame.app` — `load_sprites` builds a `SpriteSet` of pygame surfaces,
  `run` plays one map in a window and returns the final `Game`, and
  `main` is the `sogame` command.