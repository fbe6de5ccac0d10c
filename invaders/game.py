"""The game loop: alien formation, collisions, drawing and keyboard commands."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator
from typing import TextIO

from .entities import (
    ALIEN_ROWS,
    ALIEN_SPACING_X,
    ALIEN_START_ROW,
    ALIENS_PER_ROW,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    INITIAL_LIVES,
    PLAYER_START_Y,
    Alien,
    Player,
    Position,
    RandomSource,
)

SPEED_UP_EVERY = 10
POINTS_PER_ALIEN = 10
SEPARATOR = "--------------------------------"
INSTRUCTIONS = "Press 'a' to move left, 'd' to move right, 's' to shoot."
_CLEAR_SCREEN = "\033[H\033[2J"


def _keys(stream: TextIO) -> Iterator[str]:
    """Yield the non-whitespace characters of a stream one at a time."""
    for line in stream:
        for char in line:
            if not char.isspace():
                yield char


class Game:
    """State of one game of invaders."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.player = Player(Position(BOARD_WIDTH // 2, PLAYER_START_Y), INITIAL_LIVES)
        self.aliens = [
            Alien(
                Position(col * ALIEN_SPACING_X, ALIEN_START_ROW + row),
                can_shoot=row == ALIEN_ROWS - 1,
            )
            for row in range(ALIEN_ROWS)
            for col in range(ALIENS_PER_ROW)
        ]
        self.game_speed = 1
        self.score = 0
        self.game_over = False
        self.alien_direction = 1
        self._round = 0

    def move_aliens(self) -> None:
        """Move the formation sideways; at a wall drop one row and reverse."""
        shift_down = False
        for alien in self.aliens:
            if not alien.alive:
                continue
            alien.move(self.alien_direction * self.game_speed, 0)
            x = alien.pos.x
            if x >= BOARD_WIDTH - self.game_speed or x <= self.game_speed - 1:
                shift_down = True
        if shift_down:
            for alien in self.aliens:
                if alien.alive:
                    alien.move(0, 1)
            self.alien_direction *= -1

    def arm_lowest_alien(self, x: int) -> Alien | None:
        """Let the lowest living alien in column ``x`` shoot; return it, if any."""
        column = [alien for alien in self.aliens if alien.alive and alien.pos.x == x]
        if not column:
            return None
        lowest = max(column, key=lambda alien: alien.pos.y)
        lowest.can_shoot = True
        return lowest

    def check_collisions(self) -> None:
        """Resolve hits between bullets, aliens and the player."""
        player_bullet = self.player.bullet
        for alien in self.aliens:
            if alien.alive and player_bullet.active and alien.pos == player_bullet.pos:
                alien.destroy()
                self.player.reset_bullet()
                self.score += POINTS_PER_ALIEN
                self.arm_lowest_alien(player_bullet.pos.x)
            if alien.bullet.active and alien.bullet.pos == self.player.pos:
                self.player.take_damage()
                if alien.alive:
                    alien.reset_bullet()
            if alien.bullet.active and alien.bullet.pos.y >= BOARD_HEIGHT:
                alien.reset_bullet()
        if player_bullet.active and player_bullet.pos.y < 0:
            self.player.reset_bullet()

    def render(self) -> str:
        """Return the board followed by the score line."""
        board = [[" "] * BOARD_WIDTH for _ in range(BOARD_HEIGHT)]

        def place(pos: Position, symbol: str) -> None:
            if 0 <= pos.y < BOARD_HEIGHT and 0 <= pos.x < BOARD_WIDTH:
                board[pos.y][pos.x] = symbol

        place(self.player.pos, self.player.symbol)
        if self.player.bullet.active:
            place(self.player.bullet.pos, self.player.bullet.symbol)
        for alien in self.aliens:
            if alien.alive:
                place(alien.pos, alien.symbol)
            if alien.bullet.active:
                place(alien.bullet.pos, alien.bullet.symbol)

        lines = ["".join(row) for row in board]
        lines.append(f"Score: {self.score} Lives: {self.player.lives}")
        return "\n".join(lines)

    def handle_input(self, key: str) -> None:
        """Apply one command: 'a' left, 'd' right, 's' shoot; others are ignored."""
        if key == "a":
            self.player.move_left()
        elif key == "d":
            self.player.move_right()
        elif key == "s":
            self.player.shoot()

    def advance_shots(self) -> None:
        """Move the player's bullet, let armed aliens fire and move their bullets."""
        if self.player.bullet.active:
            self.player.update_bullet()
        for alien in self.aliens:
            if alien.alive and not alien.bullet.active:
                alien.try_to_shoot(self.rng)
            if alien.bullet.active:
                alien.update_bullet()

    def all_aliens_dead(self) -> bool:
        return not any(alien.alive for alien in self.aliens)

    def check_game_over(self) -> None:
        """End the game on no lives, no aliens, or an alien reaching the bottom."""
        if not self.player.is_alive():
            self.game_over = True
        if any(alien.pos.y >= BOARD_HEIGHT - 1 for alien in self.aliens):
            self.game_over = True
        if self.all_aliens_dead():
            self.game_over = True

    def _begin_round(self) -> None:
        if self._round % SPEED_UP_EVERY == 0:
            self.game_speed += 1
            self._round = 0
        self.move_aliens()
        self.check_collisions()

    def _finish_round(self, key: str) -> None:
        self.handle_input(key)
        self.advance_shots()
        self._round += 1
        self.check_game_over()

    def step(self, key: str) -> str:
        """Play one full round with ``key`` as the command; return the frame shown."""
        self._begin_round()
        frame = self.render()
        self._finish_round(key)
        return frame

    def run(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> int:
        """Play until the game ends or input runs out; return the final score."""
        source = sys.stdin if input_stream is None else input_stream
        out = sys.stdout if output_stream is None else output_stream
        clear = out.isatty()

        print(SEPARATOR, file=out)
        print(INSTRUCTIONS, file=out)
        print(SEPARATOR, file=out)

        keys = _keys(source)
        while not self.game_over:
            self._begin_round()
            print(self.render(), file=out)
            out.flush()
            key = next(keys, None)
            if key is None:
                break
            self._finish_round(key)
            if clear:
                out.write(_CLEAR_SCREEN)

        outcome = "You win!" if self.all_aliens_dead() else "You lose!"
        print(f"{outcome} Your score: {self.score}", file=out)
        return self.score


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="invaders", description="Play invaders in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the alien fire")
    args = parser.parse_args(argv)
    Game(random.Random(args.seed)).run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())