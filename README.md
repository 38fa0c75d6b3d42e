# amazons

The Game of the Amazons on an 8x8 board. The package includes a rules engine,
a text interface, a greedy computer player and JSON save files. It can also
drive an external bot that uses the Botzone line protocol.

## Rules in brief

Each player has four amazons. On a turn, the player moves one amazon like a
chess queen through empty squares. The amazon then shoots an arrow from its
new square, also like a queen. The arrow blocks its square for the rest of
the game. The square the amazon just left counts as empty for the shot.
White moves first. A player who has no legal move on their turn loses.

## Installing

    pip install .

## Playing

    amazons --text

Options:

- `--text`, `-t`: use the text interface.
- `--graphical`, `-g`: ask for the graphical interface. This is the default.
  The package has no graphical interface, so the program prints a notice and
  uses the text interface.
- `--help`, `-h`: show usage and exit.

The main menu has four entries:

1. New Game: human vs human, human vs AI (the AI plays Black), or AI vs AI.
   An AI vs AI game stops after 200 moves.
2. Load Game: pick a save from a numbered list.
3. Save Game: save the current game under a name you type. If the name is
   already in use, you are asked before it is overwritten.
4. Exit.

When input runs out, the menu ends.

### Entering moves

On a human turn, type six numbers:
`from_row from_col to_row to_col arrow_row arrow_col`. For example, White's
opening move `0 5 3 5 3 2` moves the amazon on row 0, column 5 to row 3,
column 5, and shoots at row 3, column 2. Rows and columns run from 0 to 7.

You can also type these commands:

- `help` or `h` lists every legal move.
- `undo` or `u` takes back the last move.
- `save` or `s` saves the game.
- `exit`, `quit` or `q` returns to the main menu. You are asked to confirm.

### Saved games

Saves are `<name>.json` files. They go in `data/saves/` under the current
directory. If that directory does not exist but `../data/saves/` does, they go
there instead. A save stores the board, the side to move, the turn number and
the game mode. It does not store the move history, so a loaded game cannot be
undone past the point where it was loaded.

## Using the library

```python
from amazons.game_state import GameState
from amazons.basic_ai import BasicAI
from amazons.move import Move

state = GameState()                      # standard start, White to move
state.make_move(Move.from_string("0 5 3 5 3 2"))
reply = BasicAI().best_move(state)
state.make_move(reply)
print(state.turn_number, state.current_player, state.is_game_over())
```

The modules:

- `amazons.position.Position` and `amazons.move.Move` are frozen dataclasses.
  `Move` has the fields `origin`, `destination` and `arrow`. Both classes
  have `from_string` and `is_valid`, and `str()` gives the same text form.
- `amazons.board.Board` holds the grid of `Cell` values. Its methods include
  `legal_moves`, `legal_shots` and `count_reachable_squares`.
- `amazons.game_state.GameState` provides:
  - `legal_moves` and `legal_moves_for_player`
  - `is_valid_move`
  - `make_move`, which raises `ValueError` for an illegal move
  - `undo_last_move`
  - `is_game_over`
  - `winner`, which raises `RuntimeError` while the game is still going
  - `copy`
- `amazons.basic_ai.BasicAI` has two ways to pick a move:
  - `best_move` picks the move that leaves it the most legal moves compared
    with the opponent.
  - `random_move` picks a legal move at random.
- `amazons.serializer.Serializer` provides `save_game`, `load_game`,
  `load_game_with_mode`, `saved_games`, `save_exists` and `delete_save`.
  Pass `Serializer(save_dir=...)` to use another directory. The functions
  `serialize_game_state` and `deserialize_game_state` work on the JSON text
  directly.
- `amazons.text_display.TextDisplay` renders boards and game states as text.
  It writes to any text stream.
- `amazons.input_handler.InputHandler` prompts for and parses positions,
  moves, menu choices and yes/no answers.
- `amazons.menu_controller.MenuController` runs the text menu. It can read
  from and write to any streams.

### External bots

`amazons.botzone_ai.BotzoneAI` takes the path of an executable, or a command
given as a list of arguments. It starts the bot as a child process and sends
it the move history on stdin. It reads the reply `x0 y0 x1 y1 x2 y2` from
stdout, waiting up to 5 seconds. If the bot then prints
`>>>BOTZONE_REQUEST_KEEP_RUNNING<<<`, it stays running. Later turns send it
only the last move. `amazons.bot_process.BotProcess` is the lower-level pipe
driver.

The menu and the command do not use external bots. They are available only
through the library.

## What this package does not do

There is no graphical or windowed interface. There is no mouse input. The
only interface is text in a terminal.

## Tests

    pip install .[test]
    pytest