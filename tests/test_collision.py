"""Tests for collision classification."""

from block_snake.collision import Collision, classify
from block_snake.grid import Grid
from block_snake.snake import Snake


class TestClassify:
    def test_safe(self):
        grid = Grid(rows=6, cols=6)
        assert classify(grid, Snake([(3, 3)]), (3, 4)) is Collision.SAFE

    def test_wall_on_each_side(self):
        grid = Grid(rows=6, cols=6)
        snake = Snake([(0, 0)])
        for candidate in [(-1, 0), (0, -1), (6, 0), (0, 6)]:
            assert classify(grid, snake, candidate) is Collision.WALL

    def test_self_collision_with_body(self):
        grid = Grid(rows=6, cols=6)
        snake = Snake([(2, 2), (2, 3), (2, 4)])
        assert classify(grid, snake, (2, 3)) is Collision.SELF

    def test_moving_into_tail_cell_is_self_collision(self):
        grid = Grid(rows=6, cols=6)
        # Head at (1, 1), tail at (2, 1) directly below it.
        snake = Snake([(1, 1), (1, 2), (2, 2), (2, 1)])
        assert classify(grid, snake, (2, 1)) is Collision.SELF

    def test_wall_checked_before_body(self):
        grid = Grid(rows=2, cols=2)
        snake = Snake([(0, 0), (0, 1)])
        assert classify(grid, snake, (0, 2)) is Collision.WALL


class TestCollisionMessages:
    def test_messages(self):
        assert Collision.WALL.message == "Wall Collision!"
        assert Collision.SELF.message == "Self-Collision!"
        assert Collision.SAFE.message == ""
