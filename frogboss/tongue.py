"""The frog's tongue lash: extend toward a target, retract, deal damage on contact."""

from __future__ import annotations

import math

from frogboss.state import GameState

TONGUE_HITBOX = 20.0
TONGUE_DAMAGE = 12
EXTEND_FACTOR = 0.01
RETRACT_FACTOR = 0.06


def _hit_player(state: GameState) -> None:
    player = state.player
    player.health -= TONGUE_DAMAGE
    if player.health <= 0:
        player.health = 0
        player.dead = True
    state.frog.tongue_damage_applied = True
    state.tongue.retracting = True


def _back_at_frog(state: GameState) -> bool:
    frog = state.frog.position
    tongue = state.tongue
    target, tip = tongue.target, tongue.tip
    if target.x == frog.x or target.y == frog.y:
        return False
    passed_x = tip.x <= frog.x if target.x > frog.x else tip.x >= frog.x
    passed_y = tip.y <= frog.y if target.y > frog.y else tip.y >= frog.y
    return passed_x or passed_y


def tongue_step(state: GameState) -> None:
    """Advance the tongue by one frame, damaging the player on first contact."""
    frog = state.frog
    tongue = state.tongue
    player = state.player

    dx = tongue.target.x - frog.position.x
    dy = tongue.target.y - frog.position.y
    length = math.hypot(dx, dy)

    tip_to_player = math.hypot(tongue.tip.x - player.position.x, tongue.tip.y - player.position.y)
    if tip_to_player <= TONGUE_HITBOX and not frog.tongue_damage_applied:
        _hit_player(state)

    if not tongue.retracting:
        if length > 0:
            step = EXTEND_FACTOR * length
            tongue.tip.x += dx / step
            tongue.tip.y += dy / step
        reach = math.hypot(tongue.tip.x - frog.position.x, tongue.tip.y - frog.position.y)
        if reach >= length:
            tongue.retracting = True
    else:
        if length > 0:
            step = RETRACT_FACTOR * length
            tongue.tip.x -= dx / step
            tongue.tip.y -= dy / step
        if _back_at_frog(state):
            tongue.retracting = False
            frog.tongues_left -= 1
            state.tongue_frame = -1
            frog.tongue_damage_applied = False