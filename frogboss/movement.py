"""Player movement, dashing and the sword's direction and hit points."""

from __future__ import annotations

import math
from collections.abc import Collection
from enum import Enum, auto

from frogboss.state import HEIGHT, WIDTH, GameState, Player, Vec2

WALK_STEP = 4
DASH_STEP = 20
DASH_FRAMES = 10
DASH_RECHARGE = 150
TOP_MARGIN = 50
SWORD_LENGTH = 5
SWORD_REACH = 6
DIAGONAL_DIVISOR = 1.4
SWORD_SPREAD = math.pi / 12


class Key(Enum):
    """Logical inputs the player can hold down."""

    UP = auto()
    LEFT = auto()
    DOWN = auto()
    RIGHT = auto()
    DASH = auto()
    ATTACK = auto()


def _tick_dash_timer(state: GameState) -> None:
    if state.dash_timer > DASH_FRAMES:
        state.dash_timer += 1
    if state.dash_timer >= DASH_RECHARGE:
        state.dash_timer = 0


def _move_up(state: GameState, dashing: bool) -> None:
    player = state.player
    pos = player.position
    if dashing:
        if pos.y - player.radius - DASH_STEP < TOP_MARGIN:
            pos.y = TOP_MARGIN + player.radius
        else:
            pos.y -= DASH_STEP
        state.dash_timer += 1
    elif pos.y - player.radius - WALK_STEP > TOP_MARGIN:
        pos.y -= WALK_STEP


def _move_left(state: GameState, dashing: bool) -> None:
    player = state.player
    pos = player.position
    if dashing:
        if pos.x - player.radius - DASH_STEP < 0:
            pos.x = player.radius
        else:
            pos.x -= DASH_STEP
        state.dash_timer += 1
    elif pos.x - player.radius - WALK_STEP > 0:
        pos.x -= WALK_STEP


def _move_down(state: GameState, dashing: bool) -> None:
    player = state.player
    pos = player.position
    if dashing:
        room = HEIGHT - pos.y - player.radius
        pos.y += room if room < DASH_STEP else DASH_STEP
        state.dash_timer += 1
    elif pos.y + player.radius + WALK_STEP < HEIGHT:
        pos.y += WALK_STEP


def _move_right(state: GameState, dashing: bool) -> None:
    player = state.player
    pos = player.position
    if dashing:
        room = WIDTH - pos.x - player.radius
        pos.x += room if room < DASH_STEP else DASH_STEP
        state.dash_timer += 1
    elif pos.x + player.radius + WALK_STEP < WIDTH:
        pos.x += WALK_STEP


def move_player(state: GameState, keys: Collection[Key]) -> None:
    """Move the player for one frame given the keys currently held."""
    _tick_dash_timer(state)
    sword = state.player.sword
    up, left, down, right = (k in keys for k in (Key.UP, Key.LEFT, Key.DOWN, Key.RIGHT))
    wants_dash = Key.DASH in keys

    def can_dash() -> bool:
        return wants_dash and state.dash_timer <= DASH_FRAMES

    if up:
        sword.y = -SWORD_LENGTH
        sword.x = 0
        _move_up(state, can_dash())
    if left:
        if not up and not down:
            sword.y = 0
        sword.x = -SWORD_LENGTH
        _move_left(state, can_dash())
    if down:
        if not left and not right:
            sword.x = 0
        sword.y = SWORD_LENGTH
        _move_down(state, can_dash())
    if right:
        if not up and not down:
            sword.y = 0
        sword.x = SWORD_LENGTH
        _move_right(state, can_dash())

    square = SWORD_LENGTH * SWORD_LENGTH
    if sword.x * sword.x == sword.y * sword.y == square:
        scale = SWORD_LENGTH / DIAGONAL_DIVISOR
        sword.x = math.copysign(scale, sword.x)
        sword.y = math.copysign(scale, sword.y)


def sword_points(player: Player) -> tuple[Vec2, Vec2, Vec2]:
    """Return the sword's centre hit point and the two points rotated either side."""
    sx = SWORD_REACH * player.sword.x
    sy = SWORD_REACH * player.sword.y
    px, py = player.position.x, player.position.y
    cos, sin = math.cos(SWORD_SPREAD), math.sin(SWORD_SPREAD)
    return (
        Vec2(px + sx, py + sy),
        Vec2(sx * cos - sy * sin + px, sx * sin + sy * cos + py),
        Vec2(sx * cos + sy * sin + px, -sx * sin + sy * cos + py),
    )