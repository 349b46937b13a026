# spacewar

A small vertical-scrolling space shooter. You fly a fighter in a 400×800
window while the background scrolls. An enemy ship drops in from the top about
once a second at a random horizontal position.

A boss arrives once your score is at least five and ten seconds have passed
since the game started. It drifts sideways, dives toward the lower middle of
the screen and climbs back up, choosing a new move every fifth of a second.
Every three seconds it fires a fan of three bullets: one straight down and one
on each side at 45°. The boss takes twenty hits to destroy and is worth fifty
bonus points. The next boss comes once you have scored ten more points and at
least ten seconds have passed since the last one went down.

The round ends if an enemy ship, the boss or a boss bullet touches you.

## Installing

```
pip install .
```

This installs pygame along with the package.

## Running

```
spacewar [--assets DIR]
```

The game loads its images, sounds and font from an `assets/` directory below
`DIR`, which defaults to the current directory. The layout it expects:

```
assets/
  figures/
    fighter1.png      player
    enemy1.png        enemy
    background1.png   scrolling background
    bullet1.png       player bullet
    fighter3.png      boss
    bullet2.png       boss bullet
  musics/
    shoot.wav
    gameOver.mp3
    explosion-01.wav
  fonts/
    arial.ttf
```

If a texture cannot be loaded, the game prints which one failed, for example
`Failed to load boss texture!`, and exits with status -1. If the font or a
sound cannot be loaded, or anything else goes wrong while the game runs, it
prints `An exception occurred: ...` and exits with status 1.

## Controls

| Key                  | Action                                                |
|----------------------|-------------------------------------------------------|
| Arrow keys           | Move (diagonal movement is normalised)                |
| Space                | Shoot (at most 3 bullets in flight, 0.25 s cooldown)  |
| Mouse, on game over  | Click **Play Again** or **Quit**                      |

Closing the window also quits.

## Using the pieces

The rules live in `spacewar.game.GameState`, which needs no window or sound
device. It is built from the pixel sizes of the six textures (player, enemy,
player bullet, boss, boss bullet), and takes an optional start time and a
`random.Random` for repeatable games. Time deltas are in milliseconds;
`now` is in seconds.

```python
import random

from spacewar.game import GameState

state = GameState((100, 50), (100, 98), (20, 40), (200, 200), (20, 20),
                  rng=random.Random(1))
state.move_player((1.0, 0.0), 16.0)
state.player_shoot(now=1.0)
state.update(16.0, now=1.0)
print(state.score, state.game_over, len(state.enemies))
print(state.events)   # SoundEvent values the frame asked to be played
state.events.clear()
```

`GameState.reset()` starts a new round after a game over. The collision checks
(`check_collisions_enemy`, `check_collisions_bullet`, `check_collisions_boss`,
`check_collisions_boss_bullet`) and `spawn_boss` can also be called directly.

The other building blocks are:

- `spacewar.player.Player`, `spacewar.enemy.Enemy`, `spacewar.boss.Boss` and
  `spacewar.bullet.Bullet`: the moving objects, each with `update`, `bounds`
  and `draw`.
- `spacewar.geometry.FloatRect` and `spacewar.geometry.Body`: rectangles with
  `intersects` and `contains`, and sprite placement with `bounds`, `move` and
  `clamp_to_window`.
- `spacewar.constants`: window size, speeds, the boss activation score and
  `TexturePaths`, whose `resolve(root)` joins the image paths onto a directory.
- `spacewar.main.load_assets(root)`: loads the six images below `root`,
  raising `RuntimeError` that names the first one that fails.

`spacewar.game.Game` wraps a `GameState` with a pygame window, font and sounds,
and runs the main loop through `Game.run()`.

## Tests

```
pip install .[test]
pytest
```