"""Tests for the Snake module."""

import pytest

from snake_arcade.snake import Direction, Snake, line_body


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.LEFT.opposite is Direction.RIGHT
        for d in Direction:
            assert d.opposite.opposite is d

    def test_from_name(self):
        assert Direction.from_name("left") is Direction.LEFT
        assert Direction.from_name(" UP ") is Direction.UP

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("north")


class TestLineBody:
    def test_extends_opposite_to_direction(self):
        assert line_body((5, 10), Direction.RIGHT, 3) == [
            (5, 10), (4, 10), (3, 10),
        ]

    def test_extends_down_when_heading_up(self):
        assert line_body((5, 5), Direction.UP, 3) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            line_body((0, 0), Direction.RIGHT, 0)


class TestSnakeInit:
    def test_creation(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3
        assert snake.direction == Direction.RIGHT
        assert snake.growth_pending == 0

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError, match="at least one segment"):
            Snake([])

    def test_non_contiguous_rejected(self):
        with pytest.raises(ValueError, match="not contiguous"):
            Snake([(5, 5), (3, 5)])

    def test_diagonal_rejected(self):
        with pytest.raises(ValueError, match="not contiguous"):
            Snake([(5, 5), (6, 6)])

    def test_overlap_rejected(self):
        with pytest.raises(ValueError, match="overlaps"):
            Snake([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])

    def test_initialize_replaces_body_and_growth(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.schedule_growth(3)
        snake.initialize([(1, 1), (1, 2)], Direction.UP)
        assert list(snake.body) == [(1, 1), (1, 2)]
        assert snake.direction == Direction.UP
        assert snake.growth_pending == 0


class TestSnakeMovement:
    def test_propose_next_head(self):
        snake = Snake([(5, 5), (4, 5)], Direction.RIGHT)
        assert snake.propose_next_head() == (6, 5)
        assert snake.propose_next_head(Direction.UP) == (5, 4)
        assert snake.propose_next_head(Direction.DOWN) == (5, 6)

    def test_propose_does_not_mutate(self):
        snake = Snake([(5, 5), (4, 5)], Direction.RIGHT)
        snake.propose_next_head(Direction.UP)
        assert list(snake.body) == [(5, 5), (4, 5)]
        assert snake.direction == Direction.RIGHT

    def test_advance_without_growth(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        vacated = snake.advance((6, 5))
        assert snake.head == (6, 5)
        assert len(snake) == 3
        assert vacated == (3, 5)

    def test_advance_with_growth(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        vacated = snake.advance((6, 5), grow=True)
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5), (3, 5)]
        assert vacated is None

    def test_growth_counter_consumed_one_per_move(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.schedule_growth(2)
        snake.advance((6, 5), grow=True)
        assert snake.growth_pending == 1
        snake.advance((7, 5), grow=True)
        assert snake.growth_pending == 0
        assert len(snake) == 4
        snake.advance((8, 5), grow=True)
        assert snake.growth_pending == 0


class TestSnakeQueries:
    def test_occupied_cells(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.occupied_cells() == {(5, 5), (4, 5), (3, 5)}


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake([(5, 5), (4, 5)], Direction.RIGHT)
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [4, 5]]
        assert d["direction"] == "right"
