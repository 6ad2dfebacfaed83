# breakout-arcade

A small Breakout game written on top of a minimal 2D game framework. The
game draws every pixel into its own 512×288 back buffer. That buffer is
scaled up three times and shown in a pygame window.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
breakout-arcade
```

The command has no options apart from `--help`.

### Controls

- **Left / Right arrows**: move the paddle.
- **A**: serve the ball. If the paddle is moving left when you serve, the
  ball goes up and to the left. Otherwise it goes up and to the right.
- **A** after "Game Over": start a new game.
- Close the window to quit.

### Rules

- You start with three spare lives. They are shown as red circles at the
  bottom left of the screen.
- If the ball falls below the paddle, you lose a life and serve again.
- If you lose the ball when no spare lives are left, the game is over.
- Each destroyed block adds its points to the score. The score is shown at
  the top left of the playing field.
- The ball speeds up in three cases:
  - after the fourth block you destroy;
  - the first time you destroy a block filled with `163 30 10` (red);
  - the first time you destroy a block filled with `193 133 10` (orange).
- A level is complete when every block is either destroyed or unbreakable.
  The game then moves to the next level.
- After the last level the game wraps back to the first one. Going back to
  the first level resets the score, the lives and the ball speed.

## Assets

The package does not ship any assets. The game reads them from an `assets/`
directory. That directory sits next to the program that was started, which is
the directory of `sys.argv[0]`. For an installed `breakout-arcade` this is the
directory that holds the script. Two sets of files are needed:

- `BreakoutLevels.txt` holds the level layouts.
- `ArcadeFont.bmp` and `ArcadeFont.txt` hold the bitmap font.

If the font cannot be loaded, `breakout-arcade` prints an error and exits
with status 1. If the levels file is missing or holds no levels, starting the
game raises an error.

### Command files

Levels and sprite sheets use the same plain-text format. A command is a line
that starts with `:name`. Its value follows after a single space. Lines
without a `:` are ignored.

A levels file looks like this:

```
:level
:block
:symbol R
:fillcolor 163 30 10 255
:hp 1
:points 1
:layout 2
RRRRRRRRRRRRRRR
---------------
```

- `:level` starts a new level.
- `:block` starts a block kind. A block kind is set up by the commands that
  follow it:
  - `:symbol` gives the character that places the block;
  - `:fillcolor r g b a` gives the fill colour;
  - `:hp` gives the hit points, where `-1` means unbreakable;
  - `:points` gives the score the block is worth.
- `:width` and `:height` are accepted, but they do not change where blocks
  are placed.
- `:layout N` is followed by N rows. Empty lines are skipped and do not
  count. Each character is one cell, 16×8 pixels in size. A `-` is an empty
  cell, and any other character places the block kind with that symbol.

A sprite sheet's `.txt` file lists its sprites:

```
:sprite
:key A
:xPos 0
:yPos 0
:width 5
:height 7
```

Sprite keys are matched without regard to case. A font looks up each
character of a text as a sprite key.

## Using the framework

The game is built from modules that can be used on their own.

- `breakout_arcade.vec2d`: `Vec2D`, an immutable vector. Its equality is
  tolerant to within `EPSILON`.
- `breakout_arcade.line2d`: `Line2D`, with `closest_point`,
  `min_distance_from`, `length`, `slope` and `mid_point`.
- `breakout_arcade.shapes`: `AARectangle`, `Circle` and `Triangle`.
  `AARectangle` corners are inclusive pixel positions, and
  `AARectangle.from_size` builds one from a position and a size.
- `breakout_arcade.excluder`: `Excluder`. Its `has_collided` returns the
  `BoundaryEdge` that a rectangle hit, or `None`. Its `collision_offset`
  returns how far to push the rectangle back out.
- `breakout_arcade.color`: `Color`, an RGBA colour. Its `pixel_color` packs
  the colour as `0xRRGGBBAA`, and `Color.blend` does alpha blending.
- `breakout_arcade.command_loader`: `FileCommandLoader`, `Command` and
  `CommandType` for command files, plus `read_int`, `read_color`,
  `read_size`, `read_string` and `read_char`.
- `breakout_arcade.sprites`: `BMPImage`, `SpriteSheet` and
  `load_sprite_sections`.
- `breakout_arcade.bitmap_font`: `BitmapFont`, with `size_of` and
  `draw_position`. The alignment is set with `XAlignment` and `YAlignment`.
- `breakout_arcade.screen`:
  - `ScreenBuffer`, a grid of blended pixels;
  - `Screen`, which draws points, lines, rectangles, triangles, circles,
    sprites and text into the buffer, and presents it in a window with
    `swap_screen`.
- `breakout_arcade.input`: `GameController`, which holds key and mouse
  bindings, and `InputController`, which sends pygame events to those
  bindings.
- `breakout_arcade.scene`: the abstract classes `Game` and `Scene`, and
  `GameScene`, which hosts a `Game`.
- `breakout_arcade.app`: `App`. It loads the font, opens the window, and runs
  the top scene with a fixed 10 ms update step until the window is closed.

The Breakout pieces are in `ball`, `block`, `paddle`, `level_boundary`,
`level` (`BreakoutGameLevel.load_levels_from_file`) and `breakout_game`
(`BreakOut` and `main`).

To run a game of your own, follow these steps:

1. Subclass `Game`.
2. Wrap your game in a `GameScene`.
3. Call `App.init`.
4. Pass the scene to `App.push_scene`.
5. Call `App.run`.

## What it does not do

- There is no sound.
- Scores are not saved.
- The game has no settings or options, and no menu screen.
- The game does not use the mouse, although `GameController` can hold mouse
  bindings.
- The level and font assets are not included and must be supplied as
  described above.