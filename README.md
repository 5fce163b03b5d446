# spacerocks

An arcade asteroids game built on pygame. You fly a small ship across an
800×600 field that wraps at its edges. You shoot rocks, and each hit splits a
rock into a smaller piece or destroys the smallest ones. Saucers cross the
field and fire at you. Clear every rock to move on to the next level.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
spacerocks [BASE_DIR]
```

`BASE_DIR` is the directory that holds the data files described below. It
defaults to the current directory. If the files cannot be loaded, the command
prints the reason and exits with one of these codes:

- 1 means the level file is missing or malformed.
- 2 means an image list, an image description or a sprite sheet could not be
  loaded.
- 3 means any other problem, such as a missing sound file.

The welcome screen asks you to pick a control mode. Click **mouse** or
**keyboard** to start.

| Action      | Mouse mode          | Keyboard mode                 |
|-------------|---------------------|-------------------------------|
| Thrust      | hold left button    | hold Up arrow                 |
| Fire        | right button        | Spacebar (one shot per press) |
| Rotate ship | scroll wheel        | hold Left / Right arrow       |
| Hyperjump   | middle click        | Down arrow                    |

A hyperjump moves the ship to a random spot at least 50 pixels from the edges.

These keys work on every screen:

- `p` pauses the game and resumes it.
- `s` runs one frame while the game is paused.
- `r` lays out the current level again.
- `u` saves the screen to `screenshot.jpg` in the base directory.
- `Esc` quits.

The game runs at 30 frames per second. You start with three spare ships, shown
in the top-left corner. Each time your score passes a multiple of the
points-per-ship setting, you earn another. The game is over when a ship is lost
with no spares left. The game-over screen then offers **Replay**, which returns
to the welcome screen, and **Quit**. After the last level, that level is played
again.

### Scoring

- A rock broken by one of your shots scores 100 for the largest size, 200 for
  the next and 300 for the smallest.
- When your ship collides with a rock, the rock splits and you score the value
  the level file gives for that rock's size. The ship is lost.
- Destroying a saucer scores the saucer value from the level file.
- Saucer shots split rocks too, but those hits score nothing.

The score is shown as six digits in the top-right corner.

## Data files

All paths are relative to the base directory.

### `levels_config.txt`

This file holds whitespace-separated numbers in the following order:

1. Points per extra ship, the number of player shots, the player's shot speed,
   the ship's top speed, its acceleration and its damping.
2. The saucer value and the saucer shot speed.
3. The three rock values, largest rock first.
4. The number of levels. There must be at least one.

For each level, it then holds:

- a rock count, followed by one entry per rock: frame set, frame delay, x, y,
  vx, vy;
- a saucer count, followed by one entry per saucer: normal set, killed set,
  fire interval, launch delay, x, y, vx, vy.

### `bmpImages/list_config_files.txt`

This file names five image-set description files, one per line, in this order:

1. player ship
2. saucers
3. rocks
4. shots
5. score digits

Each description file holds:

- the path of a sprite sheet on its first line;
- then the number of frame sets, the number of columns, and the cell width and
  height;
- then one entry per frame set: starting row, frame count, width and height.

The sheet's path is looked up under the base directory first, then next to the
description file. Cells on the sheet are separated by a one-pixel gap. Black
pixels are drawn as transparent.

### `AudioClips/list_audio_files.txt`

This file names five sound clips, one per line, in this order:

1. player fire
2. saucer fire
3. explosion
4. welcome music
5. game-over music

All five files must exist. If no audio device can be opened, the game runs
silently.

## Library use

The game logic can be used without opening a window:

- `spacerocks.levels.parse_levels` and `load_levels` return a `GameSettings`
  and a list of `LevelData`. They raise `LevelFormatError` on bad input.
- `spacerocks.imageset.parse_config` reads an image-set description.
  `ImageSet.from_config` loads a description and its sheet.
- `spacerocks.game.Game` advances one frame for each call to `update()`, which
  returns `False` once the game is over. The sounds it wants played collect in
  `Game.sounds` as `SoundEvent` values. Its other methods are `start_level`,
  `new_game`, `fire_player_shot`, `hyperjump` and `draw`.
- `spacerocks.app.Application` ties these parts together with pygame. It offers
  `handle_event`, `tick` and `render`, and `run` opens the window.

## Running the tests

```
pip install ".[test]"
pytest
```