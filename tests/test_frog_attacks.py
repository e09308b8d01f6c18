import math

from frogboss.frog_attacks import frog_attacks
from frogboss.state import GameState, Vec2


def _state():
    state = GameState()
    state.frog.position = Vec2(540.0, 360.0)
    state.player.position = Vec2(540.0, 630.0)
    state.frog.tongue_timer = state.frog.tongue_cooldown
    state.frog.tongues_left = state.frog.tongue_count
    return state


def _end_slam(state):
    state.frog.waiting_tongue = False
    state.frog.slamming = True
    state.frog.slam_remaining = 0.0
    frog_attacks(state, 0.01)


def test_tongue_windup_then_activation():
    state = _state()
    frog_attacks(state, 1.0)
    assert state.frog.waiting_tongue and not state.frog.tongue_active
    frog_attacks(state, 1.0)
    assert state.frog.tongue_active and not state.frog.waiting_tongue
    assert state.frog.attack_timer == state.frog.attack_cooldown


def test_frames_before_aiming_only_count():
    state = _state()
    state.frog.waiting_tongue = False
    state.frog.tongue_active = True
    state.tongue_frame = 10
    frog_attacks(state, 0.016)
    assert state.tongue_frame == 11
    assert state.tongue.target == Vec2()


def test_aim_frame_locks_on_player():
    state = _state()
    state.frog.waiting_tongue = False
    state.frog.tongue_active = True
    state.tongue_frame = 50
    frog_attacks(state, 0.016)
    assert state.tongue.tip == state.frog.position
    assert state.tongue.target == state.player.position
    assert state.tongue_frame == 51
    state.player.position.x += 10
    assert state.tongue.target != state.player.position


def test_tongue_phase_ends_when_no_lashes_left():
    state = _state()
    state.frog.waiting_tongue = False
    state.frog.tongue_active = True
    state.frog.tongues_left = 0
    frog_attacks(state, 0.016)
    assert not state.frog.tongue_active
    assert state.frog.waiting_jump
    assert state.frog.jump_timer == state.frog.jump_cooldown


def test_jump_starts_from_frog_toward_player():
    state = _state()
    state.frog.waiting_tongue = False
    state.frog.waiting_jump = True
    state.frog.jump_timer = 0.05
    frog_attacks(state, 0.1)
    assert state.frog.jumping
    assert state.frog.start_position == Vec2(540.0, 360.0)
    assert state.frog.jump_target == state.player.position


def test_jump_peaks_at_midpoint():
    state = _state()
    frog = state.frog
    frog.waiting_tongue = False
    frog.jumping = True
    frog.start_position = Vec2(100.0, 200.0)
    frog.jump_target = Vec2(300.0, 500.0)
    frog_attacks(state, 0.7 / 3)
    assert math.isclose(frog.position.x, 200.0, abs_tol=1e-6)
    assert math.isclose(frog.position.y, 350.0 - frog.jump_height, abs_tol=1e-6)


def test_landing_on_player_deals_damage():
    state = _state()
    frog = state.frog
    frog.waiting_tongue = False
    frog.jumping = True
    frog.start_position = Vec2(540.0, 360.0)
    frog.jump_target = Vec2(540.0, 630.0)
    frog_attacks(state, 1.0)
    assert frog.position == frog.jump_target
    assert frog.waiting_slam and not frog.jumping
    assert state.player.health == 60


def test_landing_away_from_player_is_harmless():
    state = _state()
    frog = state.frog
    frog.waiting_tongue = False
    frog.jumping = True
    frog.start_position = Vec2(540.0, 360.0)
    frog.jump_target = Vec2(100.0, 100.0)
    frog_attacks(state, 1.0)
    assert state.player.health == 100
    assert frog.waiting_slam


def test_landing_for_exactly_remaining_health_leaves_player_alive_flag():
    state = _state()
    state.player.health = 40
    frog = state.frog
    frog.waiting_tongue = False
    frog.jumping = True
    frog.jump_target = Vec2(540.0, 630.0)
    frog_attacks(state, 1.0)
    assert state.player.health == 0
    assert not state.player.dead


def test_landing_overkill_clamps_and_kills():
    state = _state()
    state.player.health = 10
    frog = state.frog
    frog.waiting_tongue = False
    frog.jumping = True
    frog.jump_target = Vec2(540.0, 630.0)
    frog_attacks(state, 1.0)
    assert state.player.health == 0
    assert state.player.dead


def test_slam_hits_once_in_range():
    state = _state()
    state.player.position = Vec2(540.0, 400.0)
    frog = state.frog
    frog.waiting_tongue = False
    frog.waiting_slam = True
    frog.slam_timer = 0.01
    frog_attacks(state, 0.05)
    assert frog.slamming
    assert frog.slam_damage_applied
    damaged = state.player.health
    assert damaged < 100
    frog_attacks(state, 0.05)
    assert state.player.health == damaged


def test_slam_out_of_range_is_harmless():
    state = _state()
    state.player.position = Vec2(540.0, 700.0)
    frog = state.frog
    frog.waiting_tongue = False
    frog.waiting_slam = True
    frog.slam_timer = 0.01
    frog_attacks(state, 0.05)
    assert frog.slam_damage_applied
    assert state.player.health == 100


def test_slam_end_starts_new_cycle_with_fewer_lashes():
    state = _state()
    _end_slam(state)
    frog = state.frog
    assert frog.waiting_tongue and not frog.slamming
    assert frog.tongue_timer == 2.0
    assert frog.tongue_count == 4
    assert frog.tongues_left == frog.tongue_count
    assert math.isclose(frog.tongue_cooldown, 1.9)
    assert frog.jump_cooldown == frog.slam_cooldown == frog.tongue_cooldown


def test_cycles_settle_at_minimum():
    state = _state()
    for _ in range(5):
        _end_slam(state)
    frog = state.frog
    assert frog.tongue_count == 1
    assert frog.tongue_cooldown == frog.slam_cooldown == frog.jump_cooldown == 1.5
    assert not frog.reduce_tongues
    _end_slam(state)
    assert frog.tongue_count == 1
    assert frog.tongue_cooldown == 1.5