# peril

Game logic and message-broker helpers for **Peril**, a small multiplayer
war game. Each player keeps track of their own armies. Players and a game
server exchange moves, pauses, war declarations and logs over RabbitMQ.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## What is inside

- `peril.routing` holds the exchange names (`EXCHANGE_PERIL_DIRECT`,
  `EXCHANGE_PERIL_TOPIC`) and the routing keys (`ARMY_MOVES_PREFIX`,
  `WAR_RECOGNITIONS_PREFIX`, `PAUSE_KEY`, `GAME_LOG_SLUG`). It also holds the
  message models `PlayingState` and `GameLog`. Each model has `to_dict()` and
  `from_dict()` for JSON payloads. `GameLog` times are written as RFC 3339
  strings.
- `peril.gamedata` holds the game's data types: `UnitRank`, `Unit`,
  `Player`, `ArmyMove` and `RecognitionOfWar`. `all_ranks()` returns the
  valid ranks and `all_locations()` the valid locations: americas, europe,
  africa, asia, australia and antarctica.
- `peril.gamestate` holds `GameState`, one player's view of the game. Its
  methods are guarded by a lock, so threads can share it.
  - `command_spawn(words)` adds a unit and returns it. The new unit's ID is
    the current number of units plus one.
  - `command_move(words)` moves units and returns the `ArmyMove`.
  - `command_status()` prints the pause state and the player's units.
  - `handle_move(move)` returns a `MoveOutcome`.
  - `handle_pause(playing_state)` pauses or resumes the game.
  - `handle_war(recognition)` returns a `WarOutcome` together with the
    winner's and loser's usernames.

  Invalid commands raise `GameCommandError`. Moving while paused also raises
  it. The module also provides `overlapping_location()` and
  `units_to_power_level()`.
- `peril.gamelogic` holds the console helpers:
  - `print_client_help()`, `print_server_help()` and `print_quit()` print
    their text and also return it.
  - `get_input()` reads one line from standard input and splits it into
    words.
  - `client_welcome()` asks for a username. It raises `ValueError` if none
    is entered.
  - `get_malicious_log()` returns a random quotation.
- `peril.logs` provides `write_log(game_log, path="game.log", delay=1.0)`.
  It waits `delay` seconds, then appends the log as one line to `path`. It
  raises `OSError` if the file cannot be opened or written.
- `peril.pubsub` provides two thin helpers over a `pika` channel and
  connection. `publish_json()` declares a durable direct exchange and
  publishes a value there as JSON. `declare_and_bind()` declares a queue and
  binds it to an exchange. `QueueType.DURABLE` and `QueueType.TRANSIENT`
  choose the kind of queue; a transient queue is exclusive and auto-deleted.

## Example

```python
from peril.gamestate import GameState

state = GameState("alice")
state.command_spawn(["spawn", "europe", "infantry"])
state.command_spawn(["spawn", "europe", "cavalry"])
move = state.command_move(["move", "asia", "1"])
state.command_status()
```

## Units and power

Each unit is worth some power:

- infantry: 1
- cavalry: 5
- artillery: 10

A war is fought in the first location where both players have units.

`handle_war` is only resolved in the attacker's own state. It returns
`WarOutcome.NOT_INVOLVED` for the defender and for everyone else.

If the attacker loses, the attacker's units in that location are removed.
In a draw, they are removed as well.

## What this package does not do

This package does not include a client or server program, and it installs
no commands. It provides the game state, the message models, the console
helpers and the broker helpers. Reading commands in a loop and subscribing
to queues is left to the application that uses them.