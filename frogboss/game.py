"""Game setup, the player's sword attack, the HUD and the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import replace

import pygame

from frogboss.frog_attacks import frog_attacks
from frogboss.movement import Key, move_player, sword_points
from frogboss.state import (
    CENTER_X,
    CENTER_Y,
    HEIGHT,
    PLAYER_ATTACK_COOLDOWN,
    PLAYER_START_X,
    PLAYER_START_Y,
    WIDTH,
    GameState,
    Vec2,
)

SWORD_DAMAGE = 5
BAR_WIDTH = 200
BAR_HEIGHT = 20
BAR_MARGIN = 20
FPS = 60
TITLE = "sapo"

JUMP_MESSAGE = "PULO CARREGANDO"
SLAM_MESSAGE = "PORRADÃO CARREGANDO"
TONGUE_MESSAGE = "LINGUADA CARREGANDO"
DEATH_MESSAGE = "MORREU"

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_GRAY = (130, 130, 130)
_GREEN = (0, 228, 48)
_RED = (230, 41, 55)
_BLUE = (0, 121, 241)
_ORANGE = (255, 161, 0)
_YELLOW = (253, 249, 0)

_KEY_CODES = {
    Key.UP: pygame.K_w,
    Key.LEFT: pygame.K_a,
    Key.DOWN: pygame.K_s,
    Key.RIGHT: pygame.K_d,
    Key.DASH: pygame.K_LCTRL,
    Key.ATTACK: pygame.K_p,
}


def new_game() -> GameState:
    """Return a fresh game with the player and the frog in their starting places."""
    state = GameState()
    state.player.position = Vec2(PLAYER_START_X, PLAYER_START_Y)
    state.player.health = 100
    frog = state.frog
    frog.position = Vec2(CENTER_X, CENTER_Y)
    frog.health = 100
    frog.start_position = replace(frog.position)
    frog.tongue_timer = frog.tongue_cooldown
    frog.tongues_left = frog.tongue_count
    return state


def sword_hitbox_check(state: GameState, dt: float, attack_pressed: bool) -> None:
    """Swing the sword if allowed, damaging the frog when a hit point touches it."""
    frog = state.frog
    if attack_pressed and state.player_attack_timer == 0:
        state.player_attack_timer += dt
        reach = frog.radius * frog.radius
        if any(
            (frog.position.x - p.x) ** 2 + (frog.position.y - p.y) ** 2 <= reach
            for p in sword_points(state.player)
        ):
            frog.health -= SWORD_DAMAGE
    elif state.player_attack_timer > 0:
        state.player_attack_timer += dt
    if state.player_attack_timer >= PLAYER_ATTACK_COOLDOWN:
        state.player_attack_timer = 0


def health_bar_widths(state: GameState) -> tuple[float, float]:
    """Return the filled widths of the player's and the frog's health bars."""
    return (
        state.player.health / 100.0 * BAR_WIDTH,
        state.frog.health / 100.0 * BAR_WIDTH,
    )


def status_messages(state: GameState) -> list[str]:
    """Return the status lines to show for the current state, in drawing order."""
    frog = state.frog
    flags = (
        (frog.waiting_jump, JUMP_MESSAGE),
        (frog.waiting_slam, SLAM_MESSAGE),
        (frog.waiting_tongue, TONGUE_MESSAGE),
        (state.player.dead, DEATH_MESSAGE),
    )
    return [message for active, message in flags if active]


def _held_keys() -> set[Key]:
    pressed = pygame.key.get_pressed()
    return {key for key, code in _KEY_CODES.items() if pressed[code]}


def _draw(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    screen.fill(_BLACK)

    player_width, boss_width = health_bar_widths(state)
    boss_x = WIDTH - BAR_WIDTH - BAR_MARGIN
    pygame.draw.rect(screen, _GRAY, (BAR_MARGIN, BAR_MARGIN, BAR_WIDTH, BAR_HEIGHT))
    pygame.draw.rect(screen, _GREEN, (BAR_MARGIN, BAR_MARGIN, max(0, player_width), BAR_HEIGHT))
    pygame.draw.rect(screen, _GRAY, (boss_x, BAR_MARGIN, BAR_WIDTH, BAR_HEIGHT))
    pygame.draw.rect(screen, _RED, (boss_x, BAR_MARGIN, max(0, boss_width), BAR_HEIGHT))

    for message in status_messages(state):
        where = (500, 20) if message == DEATH_MESSAGE else (20, 680)
        screen.blit(font.render(message, True, _WHITE), where)

    frog = state.frog
    player = state.player
    if frog.tongue_active and state.tongue_frame > 51:
        pygame.draw.line(
            screen,
            _YELLOW,
            (frog.position.x, frog.position.y),
            (state.tongue.tip.x, state.tongue.tip.y),
        )
    if state.player_attack_timer > 0:
        for point in sword_points(player):
            pygame.draw.circle(screen, _RED, (point.x, point.y), 5)

    pygame.draw.circle(screen, _BLUE, (player.position.x, player.position.y), player.radius)
    pygame.draw.circle(screen, _RED, (frog.position.x, frog.position.y), frog.radius)
    if frog.slamming and frog.slam_remaining > 0:
        pygame.draw.circle(
            screen, _ORANGE, (frog.position.x, frog.position.y), 2.5 * frog.radius, width=1
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="frogboss", description="Fight the frog boss.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 26)
        clock = pygame.time.Clock()
        state = new_game()
        dt = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            keys = _held_keys()
            frog_attacks(state, dt)
            move_player(state, keys)
            sword_hitbox_check(state, dt, Key.ATTACK in keys)
            _draw(screen, font, state)
            pygame.display.flip()
            dt = clock.tick(FPS) / 1000.0
    finally:
        pygame.quit()
    return 0