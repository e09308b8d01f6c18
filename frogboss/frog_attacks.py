"""The frog boss attack cycle: tongue lashes, a jump onto the player, a ground slam."""

from __future__ import annotations

import math
from dataclasses import replace

from frogboss.state import GameState
from frogboss.tongue import tongue_step

TONGUE_AIM_FRAME = 50
JUMP_TIME_SCALE = 1.5
JUMP_DURATION = 0.7
LANDING_DAMAGE = 40
SLAM_DAMAGE = 25
SLAM_DURATION = 0.3
SLAM_RANGE_FACTOR = 3.5
COOLDOWN_STEP = 0.1
MIN_COOLDOWN = 1.5


def _damage_player(state: GameState, amount: int) -> None:
    player = state.player
    player.health -= amount
    if player.health < 0:
        player.health = 0
        player.dead = True


def _distance_to_player(state: GameState) -> float:
    p = state.player.position
    f = state.frog.position
    return math.hypot(p.x - f.x, p.y - f.y)


def _tongue_phase(state: GameState, dt: float) -> None:
    frog = state.frog
    if frog.waiting_tongue:
        frog.tongue_timer -= dt
        if frog.tongue_timer <= 0.0:
            frog.waiting_tongue = False
            frog.tongue_active = True
            frog.attack_timer = frog.attack_cooldown

    if not frog.tongue_active:
        return
    if frog.tongues_left <= 0:
        frog.tongue_active = False
        frog.waiting_jump = True
        frog.jump_timer = frog.jump_cooldown
        return

    if state.tongue_frame == TONGUE_AIM_FRAME:
        state.tongue.tip = replace(frog.position)
        state.tongue.target = replace(state.player.position)
    elif state.tongue_frame > TONGUE_AIM_FRAME:
        if frog.position.y == state.player.position.y:
            frog.position.y += 1
        if frog.position.x == state.player.position.x:
            frog.position.x += 1
        tongue_step(state)
    state.tongue_frame += 1


def _jump_phase(state: GameState, dt: float) -> None:
    frog = state.frog
    if frog.waiting_jump:
        frog.jump_timer -= dt
        if frog.jump_timer <= 0.0:
            frog.waiting_jump = False
            frog.jumping = True
            frog.jump_target = replace(state.player.position)
            frog.start_position = replace(frog.position)
            frog.jump_elapsed = 0.0

    if not frog.jumping:
        return
    frog.jump_elapsed += dt * JUMP_TIME_SCALE
    progress = min(frog.jump_elapsed / JUMP_DURATION, 1.0)

    start, target = frog.start_position, frog.jump_target
    frog.position.x = start.x + (target.x - start.x) * progress
    arc = -4 * (progress - 0.5) ** 2 + 1
    frog.position.y = start.y - arc * frog.jump_height + (target.y - start.y) * progress

    if progress >= 1.0:
        frog.position.y = target.y
        frog.jumping = False
        frog.waiting_slam = True
        frog.slam_timer = frog.slam_cooldown
        if _distance_to_player(state) <= frog.radius:
            _damage_player(state, LANDING_DAMAGE)


def _finish_slam(state: GameState) -> None:
    frog = state.frog
    frog.slamming = False
    frog.waiting_tongue = True
    frog.tongue_timer = frog.tongue_cooldown
    frog.slam_damage_applied = False

    if frog.reduce_tongues:
        frog.tongue_count -= 1
        frog.tongue_cooldown -= COOLDOWN_STEP
        frog.slam_cooldown -= COOLDOWN_STEP
        frog.jump_cooldown -= COOLDOWN_STEP
        if frog.tongue_count < 1:
            frog.tongue_count = 1
            frog.tongue_cooldown = MIN_COOLDOWN
            frog.slam_cooldown = MIN_COOLDOWN
            frog.jump_cooldown = MIN_COOLDOWN
            frog.reduce_tongues = False

    frog.tongues_left = frog.tongue_count


def _slam_phase(state: GameState, dt: float) -> None:
    frog = state.frog
    if frog.waiting_slam:
        frog.slam_timer -= dt
        if frog.slam_timer <= 0.0:
            frog.waiting_slam = False
            frog.slamming = True
            frog.slam_remaining = SLAM_DURATION

    if not frog.slamming:
        return
    frog.slam_remaining -= dt
    if frog.slam_remaining > 0.0:
        if not frog.slam_damage_applied:
            reach = _distance_to_player(state) + state.player.radius
            if reach <= SLAM_RANGE_FACTOR * frog.radius:
                _damage_player(state, SLAM_DAMAGE)
            frog.slam_damage_applied = True
    else:
        _finish_slam(state)


def frog_attacks(state: GameState, dt: float) -> None:
    """Advance the frog's attack cycle by ``dt`` seconds."""
    _tongue_phase(state, dt)
    _jump_phase(state, dt)
    _slam_phase(state, dt)