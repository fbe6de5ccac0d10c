import pytest

from invaders.entities import (
    ALIEN_BULLET_SYMBOL,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    INITIAL_LIVES,
    PLAYER_BULLET_SYMBOL,
    Alien,
    Bullet,
    Player,
    Position,
)


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def randrange(self, stop):
        self.calls += 1
        return self.value


def test_position_equality():
    assert Position(3, 4) == Position(3, 4)
    assert not Position(3, 4) == Position(4, 3)


def test_bullet_starts_inactive():
    bullet = Bullet()
    assert bullet.active is False


def test_bullet_activate_sets_fields():
    bullet = Bullet()
    bullet.activate(5, 7, "|", -1)
    assert bullet.active
    assert bullet.pos == Position(5, 7)
    assert bullet.symbol == "|"
    assert bullet.direction_y == -1


def test_bullet_update_moves_in_direction():
    bullet = Bullet()
    bullet.activate(5, 7, "v", 1)
    bullet.update()
    assert bullet.pos == Position(5, 8)
    assert bullet.active


def test_bullet_leaving_top_deactivates():
    bullet = Bullet()
    bullet.activate(1, 0, "|", -1)
    bullet.update()
    assert bullet.active is False


def test_bullet_leaving_bottom_deactivates():
    bullet = Bullet()
    bullet.activate(1, BOARD_HEIGHT - 1, "v", 1)
    bullet.update()
    assert bullet.active is False


def test_inactive_bullet_does_not_move():
    bullet = Bullet()
    bullet.activate(2, 5, "v", 1)
    bullet.deactivate()
    bullet.update()
    assert bullet.pos == Position(2, 5)


def test_player_move_stops_at_left_edge():
    player = Player(Position(0, 10))
    player.move_left()
    assert player.pos.x == 0


def test_player_move_stops_at_right_edge():
    player = Player(Position(BOARD_WIDTH - 1, 10))
    player.move_right()
    assert player.pos.x == BOARD_WIDTH - 1


def test_player_moves_left_and_right_round_trip():
    player = Player(Position(10, 10))
    player.move_left()
    player.move_right()
    assert player.pos == Position(10, 10)


def test_player_shoot_fires_from_above():
    player = Player(Position(10, 18))
    player.shoot()
    assert player.bullet.active
    assert player.bullet.pos == Position(10, 17)
    assert player.bullet.symbol == PLAYER_BULLET_SYMBOL
    assert player.bullet.direction_y == -1


def test_player_cannot_shoot_twice_while_bullet_flies():
    player = Player(Position(10, 18))
    player.shoot()
    player.update_bullet()
    player.move_left()
    player.shoot()
    assert player.bullet.pos == Position(10, 16)


def test_player_reset_bullet():
    player = Player(Position(10, 18))
    player.shoot()
    player.reset_bullet()
    assert player.bullet.active is False


def test_player_dies_after_losing_all_lives():
    player = Player(Position(10, 18))
    assert player.lives == INITIAL_LIVES
    for _ in range(INITIAL_LIVES - 1):
        player.take_damage()
    assert player.is_alive()
    player.take_damage()
    assert not player.is_alive()


def test_alien_move_and_destroy():
    alien = Alien(Position(3, 4))
    alien.move(2, 1)
    assert alien.pos == Position(5, 5)
    alien.destroy()
    assert alien.alive is False


def test_alien_shoots_when_roll_is_low():
    alien = Alien(Position(3, 4), can_shoot=True)
    assert alien.try_to_shoot(FixedRng(0)) is True
    assert alien.bullet.active
    assert alien.bullet.pos == Position(3, 5)
    assert alien.bullet.symbol == ALIEN_BULLET_SYMBOL
    assert alien.bullet.direction_y == 1


@pytest.mark.parametrize("roll", [5, 50, 99])
def test_alien_does_not_shoot_on_high_roll(roll):
    alien = Alien(Position(3, 4), can_shoot=True)
    assert alien.try_to_shoot(FixedRng(roll)) is False
    assert alien.bullet.active is False


def test_alien_without_permission_never_shoots():
    alien = Alien(Position(3, 4))
    assert alien.try_to_shoot(FixedRng(0)) is False
    assert alien.bullet.active is False


def test_dead_alien_never_shoots():
    alien = Alien(Position(3, 4), can_shoot=True)
    alien.destroy()
    assert alien.try_to_shoot(FixedRng(0)) is False


def test_alien_does_not_refire_active_bullet():
    alien = Alien(Position(3, 4), can_shoot=True)
    alien.try_to_shoot(FixedRng(0))
    alien.update_bullet()
    assert alien.try_to_shoot(FixedRng(0)) is False
    assert alien.bullet.pos == Position(3, 6)


def test_alien_reset_bullet():
    alien = Alien(Position(3, 4), can_shoot=True)
    alien.try_to_shoot(FixedRng(0))
    alien.reset_bullet()
    assert alien.bullet.active is False