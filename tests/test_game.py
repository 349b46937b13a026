import math
import random

import pytest

from spacewar.bullet import Bullet
from spacewar.constants import BOSS_ACTIVATION_SCORE, SCROLL_SPEED, WINDOW_HEIGHT, WINDOW_WIDTH
from spacewar.enemy import Enemy
from spacewar.game import (
    BOSS_BONUS,
    BOSS_POWER,
    BOSS_RESPAWN_COOLDOWN,
    BOSS_RESPAWN_SCORE_GAP,
    BOSS_START,
    PLAYER_START,
    GameState,
    SoundEvent,
)

PLAYER_SIZE = (100, 50)
ENEMY_SIZE = (100, 98)
BULLET_SIZE = (10, 20)
BOSS_SIZE = (200, 200)


class ScriptedRandom:
    def __init__(self, values=()):
        self.values = list(values)

    def randrange(self, n):
        if not self.values:
            raise AssertionError("unexpected random draw")
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def make_state(rng=None):
    return GameState(
        PLAYER_SIZE,
        ENEMY_SIZE,
        BULLET_SIZE,
        BOSS_SIZE,
        BULLET_SIZE,
        now=0.0,
        rng=rng if rng is not None else random.Random(0),
    )


def test_initial_state():
    state = make_state()
    assert state.score == 0
    assert not state.game_over
    assert state.player.position == PLAYER_START
    assert state.boss is None
    assert state.boss_power == BOSS_POWER


def test_enemy_spawns_after_interval():
    state = make_state(ScriptedRandom([123]))
    state.update(0.0, now=0.5)
    assert state.enemies == []
    state.update(0.0, now=1.5)
    assert len(state.enemies) == 1
    assert state.enemies[0].position == (123.0, -50.0)


def test_enemy_hits_player_ends_game():
    state = make_state()
    state.enemies.append(Enemy(state.player.position, 0.05, ENEMY_SIZE))
    state.check_collisions_enemy()
    assert state.game_over
    assert state.events == [SoundEvent.GAME_OVER]


def test_bullet_destroys_enemy():
    state = make_state()
    state.enemies.append(Enemy((100.0, 100.0), 0.05, ENEMY_SIZE))
    state.player.bullets.append(Bullet((100.0, 100.0), (0.0, -1.0), BULLET_SIZE))
    state.check_collisions_bullet(now=1.0)
    assert state.score == 1
    assert state.enemies == []
    assert state.player.bullets == []


def test_missed_bullet_keeps_enemy():
    state = make_state()
    state.enemies.append(Enemy((100.0, 100.0), 0.05, ENEMY_SIZE))
    state.player.bullets.append(Bullet((300.0, 600.0), (0.0, -1.0), BULLET_SIZE))
    state.check_collisions_bullet(now=1.0)
    assert state.score == 0
    assert len(state.enemies) == 1
    assert len(state.player.bullets) == 1


def test_boss_needs_score_and_cooldown():
    state = make_state()
    state.score = BOSS_ACTIVATION_SCORE
    state.update(0.0, now=BOSS_RESPAWN_COOLDOWN / 2)
    assert not state.boss_active
    state.update(0.0, now=BOSS_RESPAWN_COOLDOWN)
    assert state.boss_active
    assert state.boss.position == BOSS_START


def test_bullet_damages_boss():
    state = make_state()
    boss = state.spawn_boss(now=0.0)
    state.player.bullets.append(Bullet(boss.position, (0.0, -1.0), BULLET_SIZE))
    state.check_collisions_bullet(now=1.0)
    assert state.boss_power == BOSS_POWER - 1
    assert state.player.bullets == []
    assert state.boss_active


def test_boss_destroyed_gives_bonus():
    state = make_state()
    boss = state.spawn_boss(now=0.0)
    state.boss_power = 1
    state.score = 7
    state.player.bullets.append(Bullet(boss.position, (0.0, -1.0), BULLET_SIZE))
    state.check_collisions_bullet(now=30.0)
    assert state.boss is None
    assert not state.boss_active
    assert state.boss_power == BOSS_POWER
    assert state.score == 7 + BOSS_BONUS
    assert state.next_boss_spawn_score == state.score + BOSS_RESPAWN_SCORE_GAP
    assert SoundEvent.EXPLOSION in state.events


def test_boss_respawn_waits_after_kill():
    state = make_state()
    boss = state.spawn_boss(now=0.0)
    state.boss_power = 1
    state.score = 100
    state.player.bullets.append(Bullet(boss.position, (0.0, -1.0), BULLET_SIZE))
    state.check_collisions_bullet(now=30.0)
    state.score = state.next_boss_spawn_score
    state.update(0.0, now=30.0 + BOSS_RESPAWN_COOLDOWN / 2)
    assert not state.boss_active
    state.update(0.0, now=30.0 + BOSS_RESPAWN_COOLDOWN)
    assert state.boss_active


def test_player_touching_boss_ends_game():
    state = make_state()
    boss = state.spawn_boss(now=0.0)
    state.player.reset_position(boss.position)
    state.check_collisions_boss()
    assert state.game_over


def test_boss_bullet_hits_player():
    state = make_state()
    boss = state.spawn_boss(now=0.0)
    boss.bullets.append(Bullet(state.player.position, (0.0, 1.0), BULLET_SIZE))
    state.check_collisions_boss_bullet()
    assert state.game_over
    assert boss.bullets[0].marked_for_removal
    assert state.events == [SoundEvent.GAME_OVER]


def test_player_shoot_records_sound():
    state = make_state()
    bullet = state.player_shoot(now=1.0)
    assert state.player.bullets == [bullet]
    assert state.events == [SoundEvent.SHOOT]


def test_diagonal_move_is_normalised():
    straight = make_state()
    diagonal = make_state()
    straight.move_player((1.0, 0.0), 20.0)
    diagonal.move_player((1.0, 1.0), 20.0)
    d_straight = math.dist(straight.player.position, PLAYER_START)
    d_diagonal = math.dist(diagonal.player.position, PLAYER_START)
    assert d_straight > 0
    assert d_diagonal == pytest.approx(d_straight)


def test_no_movement_when_game_over():
    state = make_state()
    state.game_over = True
    state.move_player((1.0, 0.0), 20.0)
    assert state.player_shoot(now=1.0) is None
    assert state.player.position == PLAYER_START


def test_update_frozen_when_game_over():
    state = make_state(ScriptedRandom())
    state.game_over = True
    state.update(100.0, now=5.0)
    assert state.enemies == []
    assert state.background_offsets == [0.0, -float(WINDOW_HEIGHT)]


def test_background_wraps():
    state = make_state(ScriptedRandom())
    state.update(WINDOW_HEIGHT / SCROLL_SPEED, now=0.0)
    assert state.background_offsets[0] == -WINDOW_HEIGHT
    assert state.background_offsets[1] == pytest.approx(0.0, abs=1e-6)
    for offset in state.background_offsets:
        assert -WINDOW_HEIGHT <= offset < WINDOW_HEIGHT


def test_reset_restores_round():
    state = make_state()
    state.spawn_boss(now=0.0)
    state.score = 12
    state.game_over = True
    state.enemies.append(Enemy((10.0, 10.0), 0.05, ENEMY_SIZE))
    state.player.reset_position((WINDOW_WIDTH, WINDOW_HEIGHT))
    state.reset()
    assert not state.game_over
    assert state.score == 0
    assert state.enemies == []
    assert state.boss is None
    assert not state.boss_active
    assert state.player.position == PLAYER_START