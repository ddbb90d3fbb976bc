# Bomby Explody

A small arcade game built on pygame. Enemies walk in from the right side of
the screen. Click to throw a bomb at the pointer. When a bomb goes off it
deals one point of damage to every enemy within 100 units and sets off every
other bomb in that range, so a single blast can start a chain.

## Install

```
pip install .
```

## Play

```
bomby-explody
```

Options:

- `--assets DIR`: directory holding the sound effects and music
  (default: `assets`). If the directory does not exist, the game runs
  without sound.
- `--debug`: start with the debug overlay on and log at debug level.

The game opens a 1280×720 window on a short splash screen (about 1.8
seconds, fading the title in and out), then shows the title menu. Press
Escape to skip the splash.

Controls:

- **Left mouse button**: throw a bomb at the pointer during gameplay. The
  bomb flies in from the left edge over half a second, burns its fuse for
  2.75 seconds, and explodes a quarter of a second later. Bombs caught in
  another blast explode a quarter of a second after it.
- **P** or **Escape**: pause and open the pause menu. P closes it again;
  Escape also goes back from the pause, settings and credits menus.
- **Backquote** (`` ` ``): turn the debug overlay on and off. It outlines
  buttons, enemies and bombs and shows the current screen, menu and loading
  stage.

Menus:

- **Title**: Play, Settings, Credits, Exit.
- **Pause**: Continue, Settings, Quit to title.
- **Settings**: master volume, changed in steps of 10% between 0% and 300%.
  Playback itself never goes above full volume.
- **Credits**: who made the game and its assets.

Enemies have 10 health. A hit makes one flash red and stop for half a
second; at zero health it fades out. A spawner sends a new enemy every second
at a random height and speed, as long as fewer than five are on screen.

### Sound files

With `--assets DIR`, sounds are read from these paths under `DIR`:

- `audio/sound_effects/bomb_1.ogg` … `bomb_4.ogg` (one chosen at random per blast)
- `audio/sound_effects/button_hover.ogg`, `audio/sound_effects/button_click.ogg`
- `audio/music/Fluffing A Duck.ogg` (gameplay music)
- `audio/music/Monkeys Spinning Monkeys.ogg` (credits music)

A missing file is logged as a warning and skipped.

## What it does not do

The game loads no images. Enemies are drawn as coloured squares, bombs and
explosions as circles, and the splash screen shows the title as text. There
is no walking player character in the game: `bomby_explody.player` holds a
player animation (`PlayerAnimation`) and movement controller
(`MovementController`) that the game does not use. There is no score,
no losing condition and nothing is saved between runs.

## Using the pieces

The game logic runs without a window and can be driven directly:

- `bomby_explody.timer`: `Timer` and `TimerMode`, countdown timers ticked
  with frame deltas in seconds.
- `bomby_explody.components`: `Vec2`, `AnimationConfig`, `MovementConfig`,
  `Health`, `BlastEvent`, `DamageEvent`.
- `bomby_explody.entities`: `Bomb`, `Enemy`, `Explosion`, `create_bomb`,
  `create_enemy`, `create_explosion`, `apply_movement`, `screen_wrap`.
- `bomby_explody.world`: `GameWorld` (with `place_bomb` and `update`) and
  `EnemySpawner`.
- `bomby_explody.screens`: `Screen`, `AssetsState`, `SplashFade`.
- `bomby_explody.menus`: `Menu`, `Navigator` (with `tick`, `press`,
  `activate`, `buttons`), `lower_volume`, `raise_volume`, `volume_label`,
  `grid_cells`.
- `bomby_explody.theme`: the colour palette, `Interaction`,
  `InteractionPalette` and `Button`.
- `bomby_explody.app`: `Game` (with `handle_event`, `update`, `draw`) and
  `main`, the entry point of the `bomby-explody` command.

```python
import random
from bomby_explody.components import Vec2
from bomby_explody.world import GameWorld

world = GameWorld(rng=random.Random(1))
world.place_bomb(Vec2(100.0, 0.0))
for _ in range(240):
    world.update(1 / 60)
print(len(world.enemies), len(world.explosions), world.sounds)
```

## Tests

```
pip install .[test]
pytest
```