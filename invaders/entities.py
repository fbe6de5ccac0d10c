"""Board constants and the moving pieces of the game: bullets, the player and aliens."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

BOARD_WIDTH = 40
BOARD_HEIGHT = 20
PLAYER_START_Y = BOARD_HEIGHT - 2

ALIEN_START_ROW = 2
ALIENS_PER_ROW = 7
ALIEN_ROWS = 3
ALIEN_SPACING_X = 3

INITIAL_LIVES = 3

ALIEN_SHOT_CHANCE = 5  # percent per attempt

PLAYER_SYMBOL = "O"
ALIEN_SYMBOL = "X"
PLAYER_BULLET_SYMBOL = "|"
ALIEN_BULLET_SYMBOL = "v"


class RandomSource(Protocol):
    """Anything with a ``randrange(stop)`` method, such as ``random.Random``."""

    def randrange(self, stop: int) -> int: ...


@dataclass
class Position:
    """A cell on the board."""

    x: int = 0
    y: int = 0


@dataclass
class Bullet:
    """A single shot travelling vertically; inactive until fired."""

    pos: Position = field(default_factory=Position)
    symbol: str = " "
    direction_y: int = 0
    active: bool = False

    def activate(self, x: int, y: int, symbol: str, direction_y: int) -> None:
        """Fire the bullet from (x, y) moving by ``direction_y`` rows per update."""
        self.pos = Position(x, y)
        self.symbol = symbol
        self.direction_y = direction_y
        self.active = True

    def update(self) -> None:
        """Advance one row; a bullet that leaves the board goes inactive."""
        if not self.active:
            return
        self.pos.y += self.direction_y
        if not 0 <= self.pos.y < BOARD_HEIGHT:
            self.active = False

    def deactivate(self) -> None:
        self.active = False


@dataclass
class Player:
    """The player's ship at the bottom of the board, with a single bullet."""

    pos: Position
    lives: int = INITIAL_LIVES
    symbol: str = PLAYER_SYMBOL
    bullet: Bullet = field(default_factory=Bullet)

    def move_left(self) -> None:
        if self.pos.x > 0:
            self.pos.x -= 1

    def move_right(self) -> None:
        if self.pos.x < BOARD_WIDTH - 1:
            self.pos.x += 1

    def shoot(self) -> None:
        """Fire upwards unless the bullet is already in flight."""
        if not self.bullet.active:
            self.bullet.activate(self.pos.x, self.pos.y - 1, PLAYER_BULLET_SYMBOL, -1)

    def update_bullet(self) -> None:
        self.bullet.update()

    def take_damage(self) -> None:
        self.lives -= 1

    def is_alive(self) -> bool:
        return self.lives > 0

    def reset_bullet(self) -> None:
        self.bullet.deactivate()


@dataclass
class Alien:
    """One invader; only aliens allowed to shoot ever fire their bullet."""

    pos: Position
    can_shoot: bool = False
    alive: bool = True
    symbol: str = ALIEN_SYMBOL
    bullet: Bullet = field(default_factory=Bullet)

    def move(self, dx: int, dy: int) -> None:
        self.pos.x += dx
        self.pos.y += dy

    def destroy(self) -> None:
        self.alive = False

    def try_to_shoot(self, rng: RandomSource) -> bool:
        """Fire downwards with a small chance; return whether a shot was fired."""
        if self.alive and rng.randrange(100) < ALIEN_SHOT_CHANCE and self.can_shoot:
            if not self.bullet.active:
                self.bullet.activate(self.pos.x, self.pos.y + 1, ALIEN_BULLET_SYMBOL, 1)
                return True
        return False

    def update_bullet(self) -> None:
        if self.bullet.active:
            self.bullet.update()

    def reset_bullet(self) -> None:
        self.bullet.deactivate()