# hexmatch

This package holds the game model of a match-three puzzle played on a hexagonal board. It also
includes the small 2D framework the game is built on. It is plain Python and needs no window or
GPU. You can drive and test the layouts, pieces, pages and frame logic headless. The only
dependency is `numpy`, which is used for the matrices.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `hexmatch.transform`

- `Transform` holds a translation, a rotation in radians and a scale. By default these are `(0, 0)`, `0` and `(1, 1)`.
- `uniform_matrices(transform, size, z_index, window_width, window_height)` returns a `Matrices` object.
  - `model` is the model matrix.
  - `projection` is the combined projection-view matrix.
  - Screen coordinates have their origin at the centre of the window.

### `hexmatch.color`

`Color` is a frozen RGBA colour with 8 bits per channel. It has four constructors:

- `Color.from_rgb(r, g, b, a=255)`
- `Color.from_hex(value)`, where `value` is `0xRRGGBBAA` given as an int or a hex string.
- `Color.from_hsl(h, s, l, a=1.0)`
- `Color.from_hsv(h, s, v, a=1.0)`

A channel outside 0..255, or a hex string that does not parse, raises `ValueError`.

### `hexmatch.clock`

`Clock` measures time using an injectable counter. It uses `time.perf_counter_ns` by default.

- `elapsed_ms()` returns the milliseconds since the clock was created.
- `update()` marks the end of a frame and recomputes `delta_ms`.

### `hexmatch.animation`

`Animation(frames, play, interval, looping, cooldown)` steps through a list of frames. Its state is an `AnimationState`: `PLAY`, `PAUSE`, `COOLDOWN` or `ENDED`.

- Control it with `play()`, `pause()`, `set_current_frame(index)` and `update(now_ms, delta_ms)`.
- When the last frame is passed, the animation does one of two things:
  - A looping animation enters cooldown, then restarts.
  - A non-looping animation ends.

### `hexmatch.scene`

`GameObject` is a node with these parts:

- a drawable, which is any object with a `size` and a `draw(matrices)` method
- a `Transform`, a z-index, a pivot, a visibility flag and children

`draw()` works like this:

- A visible object with a drawable hands its matrices to the drawable and returns them.
- Otherwise `draw()` returns `None`.

`Renderer` holds root objects and has these methods:

- `add_child`, `remove_child` and `add_children` manage the roots.
- `render_order()` returns every object in the tree, sorted by ascending z-index.
- `update()` draws the objects in that order.

### `hexmatch.input`

`InputState` keeps the previous-frame and current-frame state of each key.

- `press`, `release` and `begin_frame` change the key state.
- `is_key_pressed`, `is_key_down` and `is_key_up` query it.
- `mouse_key(button)` gives the key code for a mouse button. The module also defines `MOUSE_LB`, `MOUSE_MB` and `MOUSE_RB`.
- `set_cursor_from_window(x, y, width, height)` stores a window pixel position as centre-origin coordinates with y pointing up.

### `hexmatch.textfile`

`load_text_file(path)` returns the whole content of a UTF-8 file and leaves line endings as they are. If the file cannot be read, it raises `OSError`.

### `hexmatch.board`

This module holds the game data.

- The enums `BlockColor`, `BlockKind` and `GamePhase`.
- `ObjectInformation` describes one cell: its stage, position number, six clockwise neighbours (`-1` where there is none) and screen position.
  - `set_neighbors` checks that it gets exactly six values.
  - `set_neighbor` checks that the direction is in range.
- `build_stage(stage)` returns the cell records for stage 1 or stage 2. The list is indexed by cell number, and index 0 is a sentinel. Any other stage raises `ValueError`.
- `object_image(color, kind)` returns the image path for a piece.
- `Progress` records which of the 12 levels are cleared and the points for each level.
  - Use `is_cleared`, `mark_cleared` and `button_image` with it.
  - `button_image` returns the "clear" image for a cleared level, the "current" image for the next level to play, and the plain level image otherwise.

### `hexmatch.characters`

`Character` is a sprite with an image path, a position and a rectangular hit box. It has these methods:

- `collides(other)`
- `is_clicked(cursor, mouse_down)`
- `set_image` and `reset_position`

`GameCharacter` is a piece on a board. It carries its `ObjectInformation` and its game flags. It has these methods:

- `appear()` and `disappear()`
- `place(stage, position_number, neighbors, position)`
- `set_information(information)`
- `switch_position(other)`
- `drop(move, goal)`, which raises `ValueError` if `goal` cannot be reached in whole steps of `move`.
- `debug_move(input_state, speed)`, which moves the piece with the arrow keys.
- `blink_frames()`

`describe_appearance(objects)` returns one line per piece, giving its position number and its appear flag.

### `hexmatch.pages`

- `JumpPage` is the start, end and pause overlay, with its play, cancel, pause, continue and stop buttons.
  - The current page is recorded as a `JumpStatus`.
  - The `clicked_*` methods report a click only on a button that is visible.
- `ScoreText` is the score display. Its `text` changes when `update_text()` is called.
- `BackgroundImage` is the background picture. `scale_matrix(screen_size, image_size)` fits the image inside the screen, keeping its aspect ratio and offsetting it by the pivot.

## Example

```python
from hexmatch.board import BlockColor, BlockKind, Progress, build_stage, object_image
from hexmatch.characters import GameCharacter

cells = build_stage(1)
piece = GameCharacter(object_image(BlockColor.BLUE, BlockKind.NORMAL))
cell = cells[6]
piece.place(1, cell.position_number, cell.neighbors, cell.position)

progress = Progress()
progress.mark_cleared(1)
print(progress.is_cleared(1), progress.button_image(2))
```

The example places a blue piece on cell 6 of stage 1 and marks level 1 as cleared. The last line
prints `True`, followed by the "current level" image path for level 2.

## What this package does not do

- It has no window, no image or font loading, and no GPU drawing. Drawables are whatever objects you pass to a `GameObject`.
- It has no application loop and no command to start a game.
- It does not contain the stage rules: finding matches, clearing pieces, special-piece effects, dropping and refilling the board, and scoring. It supplies only the board layouts, pieces and pages those rules would act on.