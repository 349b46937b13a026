"""Window size, speeds, score thresholds and asset locations."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

WINDOW_WIDTH = 400
WINDOW_HEIGHT = 800
PLAYER_SPEED = 0.2
SCROLL_SPEED = 0.01
ENEMY_SPEED = 0.05
BOSS_ACTIVATION_SCORE = 5

FONT_PATH = "assets/fonts/arial.ttf"
SHOOT_SOUND_PATH = "assets/musics/shoot.wav"
GAME_OVER_SOUND_PATH = "assets/musics/gameOver.mp3"
EXPLOSION_SOUND_PATH = "assets/musics/explosion-01.wav"


@dataclass(frozen=True)
class TexturePaths:
    """Locations of the image files, relative to the game's asset root."""

    player: str = "assets/figures/fighter1.png"
    enemy: str = "assets/figures/enemy1.png"
    background: str = "assets/figures/background1.png"
    bullet: str = "assets/figures/bullet1.png"
    boss: str = "assets/figures/fighter3.png"
    boss_bullet: str = "assets/figures/bullet2.png"

    def resolve(self, root: str | Path) -> TexturePaths:
        """Return a copy whose paths are joined onto ``root``."""
        base = Path(root)
        return replace(
            self,
            **{f.name: str(base / getattr(self, f.name)) for f in fields(self)},
        )