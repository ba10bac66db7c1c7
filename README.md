# tilebreaker

A small side-scrolling arcade game built on pygame. You run and jump across
a level made of 16×16 tiles and fire projectiles that break the tiles they
hit. Character animations come from GIF files, which the package decodes
and plays back itself.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from the directory that holds the `assets/` folder:

```
tilebreaker
```

The command takes no options. It opens a 1920×1080 window titled
"Final Project 10xxxxxxx" on a menu. Press **Enter** to start.

| Key     | Action                 |
|---------|------------------------|
| `A`     | move left              |
| `D`     | move right             |
| `W`     | jump (when on ground)  |
| `Space` | attack (fire a shot)   |

A shot leaves the character on the third frame of the attack animation,
travels horizontally and removes every solid tile it touches; after
breaking 100 tiles it disappears. Close the window to quit.

If the game cannot start (for example an asset is missing), the command
prints `Error message: ...` to standard error and exits with status 1.

## Assets

The package does not ship any assets. The game loads its images, sounds,
font and level map from `assets/`, relative to the working directory:

- `assets/image/chara_idle.gif`, `chara_run.gif`, `chara_attack.gif` — the
  character's animations
- `assets/image/projectile.png` — the shot
- `assets/image/white_house_background.png` and `white_house_ground.png` —
  the level background and tile sheet
- `assets/image/icon.jpg` — window icon (skipped if missing)
- `assets/sound/menu.mp3` and `atk_sound.wav` — menu music and attack sound,
  used only when the pygame mixer is available
- `assets/font/pirulen.ttf` — the menu font
- `assets/map/white_house_mask.txt` — the level mask: 67 rows of 120
  whitespace-separated integers, where `1` marks a solid tile

## Using the pieces

The parts of the package can also be used on their own.

### Collision shapes — `tilebreaker.shapes`

`Point`, `Rectangle` and `Circle` all derive from `Shape` and support
`overlap(other)`, `move(dx, dy)`, `center_x()` and `center_y()`.

```python
from tilebreaker.shapes import Rectangle, Circle

box = Rectangle(0, 0, 16, 16)
ball = Circle(20, 8, 5)
box.overlap(ball)   # True
ball.move(10, 0)
box.overlap(ball)   # False
```

### GIF decoding — `tilebreaker.gif`, `tilebreaker.lzw`, `tilebreaker.bitmap`

`read_gif(path)` (or `load_raw(stream)` for an open binary stream) returns a
`GifImage` with the logical screen size, global palette, loop count and a
list of `GifFrame`s, each holding an `IndexedBitmap` of palette indices,
its offset, duration in hundredths of a second, disposal method and
transparent index. Malformed or truncated data raises `GifFormatError`.

### Animation playback — `tilebreaker.animation`

```python
from tilebreaker.gif import read_gif
from tilebreaker.animation import GifAnimation

image = read_gif("assets/image/chara_run.gif")
print(image.width, image.height, len(image.frames))

anim = GifAnimation.load("assets/image/chara_run.gif", -1)
surface = anim.frame_at(1.25)   # pygame.Surface to show at clock time 1.25 s
```

`frame_at` starts timing from the first time it is called; a loop value of
`-1` plays the animation once, `0` loops forever, and a positive number
plays it that many times. When playback ends, `done` becomes true and the
first frame is returned. `render_frames(image)` renders each frame of a
`GifImage` onto its own transparent surface.

### Scenes and elements — `tilebreaker.scene`, `tilebreaker.element`

A `Scene` holds `Element`s grouped by `ElementLabel`. Each frame,
`Scene.update()` updates every element, lets each interact with the scene,
then removes those marked `to_delete`. `Ground`, `Character`, `Projectile`,
`Teleport` and `Tree` are the element types; `Menu` and `GameScene` are the
scenes, built by `tilebreaker.scene_manager.create_scene`.

## What the game does not do

- The level holds only the ground and the character. `Teleport` and `Tree`
  exist as elements but are not placed in it.
- Shots are removed only when worn out; `Projectile.check_bounds()` exists
  but the game does not call it, and `Character.is_blocked_by_wall()` is not
  used in movement.
- There is one level, no score, no saving and no in-game way to quit other
  than closing the window.