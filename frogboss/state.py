"""Game state shared by the player, the frog boss and its tongue."""

from __future__ import annotations

from dataclasses import dataclass, field

WIDTH = 1080
HEIGHT = 720
CENTER_X = WIDTH / 2
CENTER_Y = HEIGHT / 2

PLAYER_START_X = 540
PLAYER_START_Y = 630

ATTACK_COOLDOWN_VEC = 1
PLAYER_ATTACK_COOLDOWN = 0.5


@dataclass
class Vec2:
    """A mutable point or displacement in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Player:
    """The player: position, sword direction, size and health."""

    position: Vec2 = field(default_factory=Vec2)
    sword: Vec2 = field(default_factory=Vec2)
    radius: float = 20.0
    health: int = 100
    dead: bool = False


@dataclass
class Frog:
    """The frog boss and the timers driving its attack cycle."""

    position: Vec2 = field(default_factory=Vec2)
    start_position: Vec2 = field(default_factory=Vec2)
    jump_target: Vec2 = field(default_factory=Vec2)

    tongue_active: bool = False
    jumping: bool = False
    slamming: bool = False
    reduce_tongues: bool = True
    waiting_jump: bool = False
    waiting_slam: bool = False
    waiting_tongue: bool = True

    slam_damage_applied: bool = False
    tongue_damage_applied: bool = False

    tongue_count: int = 5
    tongues_left: int = 0
    health: int = 100

    attack_cooldown: float = 0.1
    attack_timer: float = 0.0

    jump_cooldown: float = 2.0
    jump_timer: float = 0.0

    slam_cooldown: float = 2.0
    slam_timer: float = 0.0

    tongue_cooldown: float = 2.0
    tongue_timer: float = 0.0

    jump_speed: float = 1500.0
    radius: float = 40.0
    jump_height: float = 100.0

    jump_elapsed: float = 0.0
    slam_remaining: float = 0.0


@dataclass
class Tongue:
    """The frog's tongue: its tip, where it aims, and whether it is retracting."""

    tip: Vec2 = field(default_factory=Vec2)
    target: Vec2 = field(default_factory=Vec2)
    retracting: bool = False


@dataclass
class GameState:
    """Everything that changes from frame to frame."""

    player: Player = field(default_factory=Player)
    frog: Frog = field(default_factory=Frog)
    tongue: Tongue = field(default_factory=Tongue)
    dash_timer: int = 0
    attack1_cooldown: int = 0
    tongue_frame: int = 0
    player_attack_timer: float = 0.0