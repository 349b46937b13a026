"""Command-line entry point: load the images and start the game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from spacewar.constants import TexturePaths
from spacewar.game import Game

# Loading order and the names used in error messages.
_TEXTURES = (
    ("player", "player"),
    ("enemy", "enemy"),
    ("background", "background"),
    ("bullet", "bullet"),
    ("boss_bullet", "boss bullet"),
    ("boss", "boss"),
)


@dataclass(frozen=True)
class Textures:
    """The six images the game draws with."""

    player: pygame.Surface
    enemy: pygame.Surface
    background: pygame.Surface
    bullet: pygame.Surface
    boss: pygame.Surface
    boss_bullet: pygame.Surface


def load_assets(root: str | Path) -> Textures:
    """Load every texture below ``root``; raise RuntimeError naming the first that fails."""
    paths = TexturePaths().resolve(root)
    loaded = {}
    for field, label in _TEXTURES:
        try:
            loaded[field] = pygame.image.load(getattr(paths, field))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Failed to load {label} texture!") from exc
    return Textures(**loaded)


def main(argv: list[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="spacewar", description="A vertical space shooter.")
    parser.add_argument(
        "--assets",
        default=".",
        help="directory that holds the assets/ folder (default: current directory)",
    )
    args = parser.parse_args(argv)

    try:
        textures = load_assets(args.assets)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return -1

    try:
        game = Game(
            textures.player,
            textures.enemy,
            textures.background,
            textures.bullet,
            textures.boss,
            textures.boss_bullet,
            asset_root=args.assets,
        )
        game.run()
    except Exception as exc:
        print(f"An exception occurred: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())