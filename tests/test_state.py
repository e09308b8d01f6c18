from dataclasses import replace

from frogboss.state import (
    Frog,
    GameState,
    Player,
    Tongue,
    Vec2,
)


def test_game_states_do_not_share_components():
    first = GameState()
    second = GameState()
    first.player.position.x = 123.0
    first.frog.position.y = 45.0
    first.tongue.tip.x = 7.0
    assert second.player.position == Vec2()
    assert second.frog.position == Vec2()
    assert second.tongue.tip == Vec2()


def test_vec2_replace_gives_independent_copy():
    original = Vec2(3.0, 4.0)
    copy = replace(original)
    copy.x += 1
    assert original == Vec2(3.0, 4.0)
    assert copy.x == original.x + 1


def test_new_frog_is_waiting_only_for_the_tongue():
    frog = Frog()
    phases = [
        frog.tongue_active,
        frog.jumping,
        frog.slamming,
        frog.waiting_jump,
        frog.waiting_slam,
        frog.waiting_tongue,
    ]
    assert phases.count(True) == 1
    assert frog.waiting_tongue
    assert frog.reduce_tongues


def test_frog_defaults_follow_its_design():
    frog = Frog()
    assert frog.tongue_count == 5
    assert frog.jump_cooldown == frog.slam_cooldown == frog.tongue_cooldown
    assert frog.health == Player().health


def test_player_starts_alive_and_smaller_than_frog():
    player = Player()
    assert not player.dead
    assert player.radius < Frog().radius


def test_tongue_starts_extending():
    tongue = Tongue()
    assert tongue.retracting is False
    assert tongue.tip == tongue.target