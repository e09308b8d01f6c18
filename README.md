# frogboss

A one-screen arcade boss fight. You are the blue circle. The red circle in
the middle of the arena is a frog that cycles through three attacks:

1. **Tongue lash**: after a short charge, the frog fires its tongue at the
   spot where you stood when it took aim. It does this several times in a
   row. A hit costs 12 health.
2. **Leap**: the frog jumps in an arc to your position. If you are within
   the frog's radius when it lands, you lose 40 health.
3. **Slam**: after another charge, the frog slams the ground. If you are
   within the shock radius, you lose 25 health.

The frog starts with five tongue lashes and 2 second charges. After each
full cycle it throws one lash fewer and each charge is 0.1 second shorter.
Once the lashes run out it settles at a single lash and 1.5 second charges.

## Installing

```
pip install .
```

## Playing

```
frogboss
```

Controls:

| Key          | Action                                   |
|--------------|------------------------------------------|
| W A S D      | Move                                     |
| Left Ctrl    | Dash in the direction you are moving     |
| P            | Swing the sword (5 damage to the frog)   |
| Esc / close  | Quit                                     |

The dash lasts a short burst of frames and then has to recharge. The sword
points in the last direction you moved. You can swing it again half a second
after the previous swing.

Health bars sit at the top of the screen: yours is green on the left and the
frog's is red on the right. A line at the bottom of the screen shows which
attack the frog is charging. "MORREU" appears at the top when your health
reaches zero.

## What the game does not do

There is no ending, score, pause or restart.

- When your health reaches zero you are marked dead, but play carries on.
- When the frog's health runs out nothing happens, and the frog keeps
  attacking.
- To play again, close the window and run `frogboss` again.

## Using the game logic directly

The simulation does not depend on the window. You can drive it one step at
a time:

```python
from frogboss.game import new_game, sword_hitbox_check, health_bar_widths, status_messages
from frogboss.frog_attacks import frog_attacks
from frogboss.movement import Key, move_player

state = new_game()
frog_attacks(state, 1 / 60)
move_player(state, {Key.RIGHT, Key.DASH})
sword_hitbox_check(state, 1 / 60, attack_pressed=True)
print(health_bar_widths(state))
print(status_messages(state))
```

The modules:

- `frogboss.state` holds the dataclasses `Vec2`, `Player`, `Frog`, `Tongue`
  and `GameState`.
- `frogboss.frog_attacks.frog_attacks(state, dt)` advances the frog's attack
  cycle.
- `frogboss.tongue.tongue_step(state)` moves the tongue by one frame.
- `frogboss.movement` provides `Key`, `move_player(state, keys)` and
  `sword_points(player)`.
- `frogboss.game` provides `new_game()`, `sword_hitbox_check(...)`,
  `health_bar_widths(state)`, `status_messages(state)` and `main()`.

## Running the tests

```
pip install .[test]
pytest
```