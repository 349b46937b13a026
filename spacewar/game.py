"""Game rules and the window that plays them."""

from __future__ import annotations

import math
import random
import time
from enum import Enum, auto
from pathlib import Path

import pygame

from spacewar.boss import Boss
from spacewar.bullet import Bullet
from spacewar.constants import (
    BOSS_ACTIVATION_SCORE,
    ENEMY_SPEED,
    EXPLOSION_SOUND_PATH,
    FONT_PATH,
    GAME_OVER_SOUND_PATH,
    PLAYER_SPEED,
    SCROLL_SPEED,
    SHOOT_SOUND_PATH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from spacewar.enemy import Enemy
from spacewar.geometry import FloatRect
from spacewar.player import Player

BOSS_POWER = 20
BOSS_BONUS = 50
BOSS_RESPAWN_SCORE_GAP = 10
BOSS_RESPAWN_COOLDOWN = 10.0
ENEMY_SPAWN_INTERVAL = 1.0
ENEMY_SPAWN_Y = -50.0
PLAYER_START = (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 1.5)
BOSS_START = (WINDOW_WIDTH / 2, 100.0)
PLAYER_TIME_FACTOR = 1.5

WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
BLACK = (0, 0, 0)


class SoundEvent(Enum):
    """Sounds the game asks to be played."""

    SHOOT = auto()
    GAME_OVER = auto()
    EXPLOSION = auto()


class GameState:
    """Everything the game knows, advanced without any window or sound."""

    def __init__(
        self,
        player_size: tuple[float, float],
        enemy_size: tuple[float, float],
        bullet_size: tuple[float, float],
        boss_size: tuple[float, float],
        boss_bullet_size: tuple[float, float],
        now: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.enemy_size = enemy_size
        self.boss_size = boss_size
        self.boss_bullet_size = boss_bullet_size
        self._rng = rng if rng is not None else random.Random()
        self.player = Player(PLAYER_START, PLAYER_SPEED, player_size, bullet_size, now=now)
        self.score = 0
        self.game_over = False
        self.enemies: list[Enemy] = []
        self.boss: Boss | None = None
        self.boss_active = False
        self.boss_power = BOSS_POWER
        self.next_boss_spawn_score = BOSS_ACTIVATION_SCORE
        self.boss_respawn_cooldown = BOSS_RESPAWN_COOLDOWN
        self.background_offsets = [0.0, -float(WINDOW_HEIGHT)]
        self.events: list[SoundEvent] = []
        self._enemy_spawn_start = now
        self._boss_respawn_start = now

    def reset(self) -> None:
        """Start a new round after a game over."""
        self.game_over = False
        self.score = 0
        self.player.reset_position(PLAYER_START)
        self.player.bullets.clear()
        self.enemies.clear()
        self.boss = None
        self.boss_active = False
        self.boss_power = BOSS_POWER
        self.background_offsets = [0.0, -float(WINDOW_HEIGHT)]

    def move_player(self, direction: tuple[float, float], delta_time: float) -> None:
        """Move the player along ``direction``, normalised, unless the game is over."""
        if self.game_over:
            return
        dx, dy = direction
        length = math.hypot(dx, dy)
        if length:
            dx, dy = dx / length, dy / length
        self.player.update((dx, dy), delta_time * PLAYER_TIME_FACTOR)

    def player_shoot(self, now: float) -> Bullet | None:
        if self.game_over:
            return None
        bullet = self.player.shoot(now)
        if bullet is not None:
            self.events.append(SoundEvent.SHOOT)
        return bullet

    def update(self, delta_time: float, now: float) -> None:
        """Advance one frame of play; nothing moves while the game is over."""
        if self.game_over:
            return

        step = SCROLL_SPEED * delta_time
        self.background_offsets = [
            -float(WINDOW_HEIGHT) if offset + step >= WINDOW_HEIGHT else offset + step
            for offset in self.background_offsets
        ]

        if now - self._enemy_spawn_start > ENEMY_SPAWN_INTERVAL:
            x = float(self._rng.randrange(WINDOW_WIDTH))
            self.enemies.append(Enemy((x, ENEMY_SPAWN_Y), ENEMY_SPEED, self.enemy_size))
            self._enemy_spawn_start = now

        for enemy in self.enemies:
            enemy.update(delta_time)
        self.enemies = [e for e in self.enemies if not e.is_off_screen()]

        self.check_collisions_enemy()
        self.check_collisions_bullet(now)

        if (
            not self.boss_active
            and self.score >= self.next_boss_spawn_score
            and now - self._boss_respawn_start >= self.boss_respawn_cooldown
        ):
            self.spawn_boss(now)

        if self.boss is not None and self.boss_active:
            self.boss.update(delta_time, now)
            if self.boss.shoot(now):
                self.events.append(SoundEvent.SHOOT)
            self.check_collisions_boss()
            self.check_collisions_boss_bullet()

    def spawn_boss(self, now: float) -> Boss:
        self.boss = Boss(BOSS_START, self.boss_size, self.boss_bullet_size, now=now, rng=self._rng)
        self.boss_active = True
        self.boss_power = BOSS_POWER
        return self.boss

    def _end_game(self) -> None:
        self.game_over = True
        self.events.append(SoundEvent.GAME_OVER)

    def check_collisions_enemy(self) -> None:
        player_box = self.player.bounds()
        if any(player_box.intersects(enemy.bounds()) for enemy in self.enemies):
            self._end_game()

    def check_collisions_bullet(self, now: float) -> None:
        """Let player bullets destroy enemies and wear down the boss."""
        for bullet in self.player.bullets:
            box = bullet.bounds()
            for enemy in self.enemies:
                if box.intersects(enemy.bounds()):
                    enemy.mark_for_removal()
                    bullet.mark_for_removal()
                    self.score += 1
                    break

            if self.boss is not None and self.boss_active and box.intersects(self.boss.bounds()):
                self.boss_power -= 1
                if self.boss_power <= 0:
                    self.events.append(SoundEvent.EXPLOSION)
                    self.boss = None
                    self.boss_active = False
                    self.boss_power = BOSS_POWER
                    self.score += BOSS_BONUS
                    self.next_boss_spawn_score = self.score + BOSS_RESPAWN_SCORE_GAP
                    self._boss_respawn_start = now
                bullet.mark_for_removal()

        self.player.bullets = [b for b in self.player.bullets if not b.marked_for_removal]
        self.enemies = [e for e in self.enemies if not e.marked_for_removal]

    def check_collisions_boss(self) -> None:
        if self.boss is not None and self.player.bounds().intersects(self.boss.bounds()):
            self._end_game()

    def check_collisions_boss_bullet(self) -> None:
        if self.boss is None:
            return
        player_box = self.player.bounds()
        for bullet in self.boss.bullets:
            if bullet.bounds().intersects(player_box):
                bullet.mark_for_removal()
                self._end_game()


def _load_sound(path: Path, message: str) -> pygame.mixer.Sound:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as exc:
        raise RuntimeError(message) from exc


class Game:
    """The playable window: reads input, advances the state, draws and plays sounds."""

    def __init__(
        self,
        player_image,
        enemy_image,
        background_image,
        bullet_image,
        boss_image,
        boss_bullet_image,
        asset_root: str | Path = ".",
    ) -> None:
        pygame.init()
        root = Path(asset_root)
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Space War")

        self.player_image = player_image
        self.enemy_image = enemy_image
        self.background_image = background_image
        self.bullet_image = bullet_image
        self.boss_image = boss_image
        self.boss_bullet_image = boss_bullet_image

        try:
            self.title_font = pygame.font.Font(str(root / FONT_PATH), 50)
            self.font = pygame.font.Font(str(root / FONT_PATH), 30)
        except (OSError, pygame.error) as exc:
            raise RuntimeError("Failed to load font!") from exc
        self.title_font.set_bold(True)

        self.sounds = {
            SoundEvent.SHOOT: _load_sound(root / SHOOT_SOUND_PATH, "Failed to load shoot sound effect!"),
            SoundEvent.GAME_OVER: _load_sound(root / GAME_OVER_SOUND_PATH, "Failed to load hit sound effect!"),
            SoundEvent.EXPLOSION: _load_sound(
                root / EXPLOSION_SOUND_PATH, "Failed to load explosion sound effect!"
            ),
        }

        self.game_over_position = (WINDOW_WIDTH / 8, WINDOW_HEIGHT / 4)
        self.score_position = (10, WINDOW_HEIGHT - 40)
        self.play_again_position = (WINDOW_WIDTH / 2 - 70, WINDOW_HEIGHT / 2)
        self.quit_position = (WINDOW_WIDTH / 2 - 30, WINDOW_HEIGHT / 2 + 50)
        self.play_again_rect = self._text_rect("Play Again", self.play_again_position)
        self.quit_rect = self._text_rect("Quit", self.quit_position)
        self.mouse_over_play_again = False
        self.mouse_over_quit = False

        self._start = time.perf_counter()
        self._running = True
        self.state = GameState(
            player_image.get_size(),
            enemy_image.get_size(),
            bullet_image.get_size(),
            boss_image.get_size(),
            boss_bullet_image.get_size(),
        )

    def _text_rect(self, text: str, position: tuple[float, float]) -> FloatRect:
        width, height = self.font.size(text)
        return FloatRect(position[0], position[1], width, height)

    def _handle_input(self, delta_time: float, now: float) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

        state = self.state
        if state.game_over and pygame.mouse.get_pressed()[0]:
            mx, my = pygame.mouse.get_pos()
            if self.play_again_rect.contains(mx, my):
                state.reset()
                self.sounds[SoundEvent.GAME_OVER].stop()
            if self.quit_rect.contains(mx, my):
                self._running = False

        if not state.game_over:
            keys = pygame.key.get_pressed()
            dx = dy = 0.0
            if keys[pygame.K_LEFT]:
                dx = -1.0
            if keys[pygame.K_RIGHT]:
                dx = 1.0
            if keys[pygame.K_UP]:
                dy = -1.0
            if keys[pygame.K_DOWN]:
                dy = 1.0
            state.move_player((dx, dy), delta_time)
            if keys[pygame.K_SPACE]:
                state.player_shoot(now)

    def _update(self, delta_time: float, now: float) -> None:
        if self.state.game_over:
            mx, my = pygame.mouse.get_pos()
            self.mouse_over_play_again = self.play_again_rect.contains(mx, my)
            self.mouse_over_quit = self.quit_rect.contains(mx, my)
        self.state.update(delta_time, now)
        for event in self.state.events:
            self.sounds[event].play()
        self.state.events.clear()

    def _render(self) -> None:
        state = self.state
        self.window.fill(BLACK)
        width, height = self.background_image.get_size()
        background = self.background_image.subsurface(
            (0, 0, min(WINDOW_WIDTH, width), min(WINDOW_HEIGHT, height))
        )
        for offset in state.background_offsets:
            self.window.blit(background, (0, round(offset)))

        state.player.draw(self.window, self.player_image, self.bullet_image)
        for enemy in state.enemies:
            enemy.draw(self.window, self.enemy_image)
        if state.boss is not None and state.boss_active and state.score > BOSS_ACTIVATION_SCORE:
            state.boss.draw(self.window, self.boss_image, self.boss_bullet_image)

        if state.game_over:
            self.window.blit(self.title_font.render("GAME OVER", True, RED), self.game_over_position)
            self.window.blit(self.font.render(f"Score: {state.score}", True, WHITE), self.score_position)
            play_colour = YELLOW if self.mouse_over_play_again else WHITE
            quit_colour = YELLOW if self.mouse_over_quit else WHITE
            self.window.blit(self.font.render("Play Again", True, play_colour), self.play_again_position)
            self.window.blit(self.font.render("Quit", True, quit_colour), self.quit_position)

        pygame.display.flip()

    def run(self) -> None:
        """Play until the window is closed or Quit is chosen."""
        last = time.perf_counter()
        try:
            while self._running:
                current = time.perf_counter()
                delta_time = (current - last) * 1000.0
                last = current
                now = current - self._start
                self._handle_input(delta_time, now)
                if not self._running:
                    break
                self._update(delta_time, now)
                self._render()
        finally:
            pygame.quit()