# invaders

A small Space Invaders game for the terminal. It is played one turn at a time.

Three rows of seven aliens march from side to side across a board that is 40
columns wide and 20 rows high. When the formation reaches an edge, it drops one
row and turns back. The aliens speed up on the first turn and again every ten
turns after that. At first only the bottom row of aliens fires. When you shoot
an alien, the lowest living alien left in that column may fire from then on.

## Installing

```
pip install .
```

## Playing

```
invaders
invaders --seed 42
```

`--seed` fixes the random numbers that decide when aliens fire, so a game can
be replayed exactly.

On each turn the board is drawn with the score and your remaining lives, and
then the game reads one key from standard input. Type the keys and press Enter.
Each character other than whitespace is one turn, so a line such as `aas` plays
three turns.

| Key | Action                        |
|-----|-------------------------------|
| `a` | move left                     |
| `d` | move right                    |
| `s` | shoot (one bullet at a time)  |

Any other key passes the turn.

Each alien you hit scores 10 points. You start with three lives. Every alien
bullet that reaches you costs one life.

You win when every alien is destroyed. You lose if your lives run out or an
alien reaches the bottom row. The game also stops when the input runs out.
When the game ends, a final line shows the result and your score.

When the output is a terminal, the screen is cleared between turns.

The game is turn-based. The aliens do not move while it waits for your key, and
there is no real-time keyboard handling.

## Using the game from Python

`invaders.game.Game` holds the whole state of one game. It takes an optional
random source, for example `random.Random(seed)`.

- `Game.step(key)` plays one turn and returns the frame drawn for that turn.
- `Game.run(input_stream, output_stream)` plays a whole game over any pair of
  text streams and returns the final score.
- `Game.render()` returns the current board as text.
- `Game.game_over`, `Game.score` and `Game.all_aliens_dead()` report how the
  game stands.

```python
import io
import random
from invaders.game import Game

game = Game(random.Random(1))
out = io.StringIO()
score = game.run(io.StringIO("s\n" * 200), out)
print(out.getvalue().splitlines()[-1])
```

The pieces on the board, and the board's size constants, are in
`invaders.entities`. The pieces are `Position`, `Bullet`, `Player` and `Alien`.

## Running the tests

```
pip install .[test]
pytest
```