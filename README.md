# solong

A small top-down puzzle game played on a tile map. Walk the player around
the map, pick up every coin, then step onto the exit to win.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, the drawing and the
keyboard.

## Playing

```
solong maps/level1.ber
```

The command takes one argument: the path of a map file whose name ends in
`.ber`. With no argument it prints `Error` and `Map not found`; with more
than one argument it does nothing. When the file name, the file or the map
is not valid, or a sprite cannot be read, it prints `Error` followed by the
reason. The command always exits with status 0.

Sprites are read as XPM images from a `sprite/` directory in the current
working directory:

| File                           | Used for                      |
|--------------------------------|-------------------------------|
| `wall.xpm` (or `duvar.xpm`)    | walls                         |
| `background.xpm`               | floor and the player's start  |
| `exit.xpm`                     | the exit                      |
| `coin.xpm`, `coin2.xpm`        | coins (the two images alternate) |
| `left.xpm`, `right.xpm`, `up.xpm`, `down.xpm` | the player, facing each way |

Each tile is drawn 64 × 64 pixels, and the window is sized to the map.

Controls:

| Key     | Action     |
|---------|------------|
| `W`     | move up    |
| `A`     | move left  |
| `S`     | move down  |
| `D`     | move right |
| `Esc`   | quit       |

Closing the window also quits. Moves into walls are ignored. Each move is
counted and printed as `move N`; the move count and the number of coins
still on the map are shown at the top of the window. The game ends when
every coin has been taken and the player stands on the exit.

## Map format

A map is plain text, one row per line:

| Character | Meaning          |
|-----------|------------------|
| `1`       | wall             |
| `0`       | floor            |
| `P`       | player start     |
| `C`       | coin             |
| `E`       | exit             |

Example:

```
1111111111
1P0000C001
1000110001
1C0000000E
1111111111
```

Rows are read with the width of the first line, one newline apart, so every
row must have that width. Every newline starts a new row, so a newline at
the very end of the file adds an empty last row and the map is rejected.

A map is rejected if it

* has no exit,
* has no coins,
* has no player or more than one player,
* is not closed by walls on its top, bottom, left and right edges, or
* contains any other character.

## Using it as a library

* `solong.gamemap.GameMap` reads maps (`GameMap.load`, `GameMap.from_text`),
  gives access to cells (`cell`, `set_cell`) and checks them
  (`validate`, which raises `MapError`). `has_ber_extension`, `line_length`
  and `row_count` are the helpers it uses.
* `solong.game.Game` holds the play state and applies key codes
  (`Game.handle_key`, `Game.check_finished`); the end of a game is signalled
  by `GameExit`, whose `finished` flag tells a win from a quit. `Key` holds
  the key codes, `Facing` the player's direction, and `CoinAnimation`
  alternates two images on a fixed period.
* `solong.xpm` parses XPM images (`load_xpm`, `parse_xpm_text`,
  `parse_xpm_lines`) into `XpmImage` objects, raising `XpmError` on bad
  data. Colour names are resolved by `solong.colors.lookup_color` and
  `solong.colors.parse_color`.
* `solong.render` draws a game with `pygame`: `SpriteSet.load` reads the
  sprites, `xpm_to_surface` converts an image, and `Renderer.draw_frame` and
  `Renderer.draw_hud` draw the map and the counters.
* `solong.cli.prepare_game` loads and checks a map; `solong.cli.run` plays
  it in a window and returns `True` when the level was finished.

## What it does not include

No sprite images and no maps come with the package; supply your own
`sprite/` directory of XPM files and your own `.ber` maps.