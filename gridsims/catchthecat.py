"""Catch-the-cat: a cat tries to escape a hexagonal board while a catcher blocks cells."""

from __future__ import annotations

import argparse
import math
import random
import time
from abc import ABC, abstractmethod
from typing import NamedTuple, Sequence


class Point(NamedTuple):
    """A cell on the board; the centre is (0, 0)."""

    x: int
    y: int


def e(p: Point) -> Point:
    """Cell to the east."""
    return Point(p.x + 1, p.y)


def w(p: Point) -> Point:
    """Cell to the west."""
    return Point(p.x - 1, p.y)


def ne(p: Point) -> Point:
    """Cell to the north-east."""
    if p.y % 2:
        return Point(p.x + 1, p.y - 1)
    return Point(p.x, p.y - 1)


def nw(p: Point) -> Point:
    """Cell to the north-west."""
    if p.y % 2:
        return Point(p.x, p.y - 1)
    return Point(p.x - 1, p.y - 1)


def se(p: Point) -> Point:
    """Cell to the south-east."""
    if p.y % 2:
        return Point(p.x, p.y + 1)
    return Point(p.x - 1, p.y + 1)


def sw(p: Point) -> Point:
    """Cell to the south-west."""
    if p.y % 2:
        return Point(p.x + 1, p.y + 1)
    return Point(p.x, p.y + 1)


def neighbors(p: Point) -> list[Point]:
    """The six neighbouring cells, in search order."""
    return [ne(p), nw(p), e(p), w(p), sw(p), se(p)]


def is_neighbor(p1: Point, p2: Point) -> bool:
    """True if p2 is one of the six cells around p1."""
    return p2 in (ne(p1), nw(p1), e(p1), w(p1), se(p1), sw(p1))


class Agent(ABC):
    """Something that picks a cell each turn."""

    @abstractmethod
    def move(self, world: "World") -> Point:
        """Return the cell chosen for this turn."""


class Cat(Agent):
    """Moves one cell along the cheapest path to the border."""

    def move(self, world: "World") -> Point:
        return world.path_detection()


class Catcher(Agent):
    """Blocks the cell where the cat's escape path leaves the board."""

    def move(self, world: "World") -> Point:
        return world.path_detection()


class World:
    """The board, the two agents and the turn state."""

    def __init__(self, side_size: int = 11, rng: random.Random | None = None) -> None:
        if side_size % 2 == 0:
            raise ValueError("side size must be odd")
        self._setup(side_size, rng)
        self.clear_world()

    def _setup(self, side_size: int, rng: random.Random | None) -> None:
        self.side_size = side_size
        self.rng = rng if rng is not None else random.Random()
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.cat_turn = True
        self.is_simulating = False
        self.cat_position = Point(0, 0)
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self.cat = Cat()
        self.catcher = Catcher()
        self.state: list[bool] = [False] * (side_size * side_size)

    @classmethod
    def from_state(
        cls,
        side_size: int,
        cat_turn: bool,
        cat_position: tuple[int, int],
        state: Sequence[bool],
    ) -> "World":
        """Build a world from an explicit board; True means blocked."""
        if len(state) != side_size * side_size:
            raise ValueError("state length does not match the board size")
        world = cls.__new__(cls)
        world._setup(side_size, None)
        world.cat_turn = cat_turn
        world.cat_position = Point(*cat_position)
        world.state = [bool(cell) for cell in state]
        return world

    def _index(self, p: Point) -> int:
        half = self.side_size // 2
        return (p.y + half) * self.side_size + p.x + half

    def clear_world(self) -> None:
        """Reset the board with a few random blocked cells and the cat at the centre."""
        size = self.side_size * self.side_size
        self.state = [False] * size
        for _ in range(math.ceil(size * 0.05)):
            self.state[self.rng.randint(0, size - 1)] = True
        self.cat_position = Point(0, 0)
        self.state[size // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def get_content(self, p: Point) -> bool:
        """True if the cell is blocked."""
        if not self.is_valid_position(p):
            raise IndexError(f"position {tuple(p)} is outside the board")
        return self.state[self._index(p)]

    def is_valid_position(self, p: Point) -> bool:
        """True if the cell lies on the board."""
        half = self.side_size // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def render(self) -> str:
        """Text picture of the board: C for the cat, # blocked, . free."""
        cat_index = self._index(self.cat_position)
        side = self.side_size
        parts = []
        for i, blocked in enumerate(self.state, start=1):
            parts.append("C" if i - 1 == cat_index else ("#" if blocked else "."))
            if (i + side) % (2 * side) == 0:
                parts.append("\n ")
            elif i % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self.cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(self.get_content(n) for n in neighbors(self.cat_position))

    def step(self) -> None:
        """Play one turn; after a win the next step resets the board."""
        if self.cat_won or self.catcher_won:
            self.clear_world()
            return

        start = time.perf_counter()
        if self.cat_turn:
            move = self.cat.move(self)
            if self.cat_can_move_to_position(move):
                self.cat_position = Point(*move)
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self.catcher.move(self)
            if self.catcher_can_move_to_position(move):
                self.state[self._index(Point(*move))] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = int((time.perf_counter() - start) * 1_000_000)
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the timer and play a turn when it runs out."""
        if self.is_simulating:
            self.time_for_next_tick -= delta_time
            if self.time_for_next_tick < 0:
                self.step()
                self.time_for_next_tick = self.time_between_ai_ticks

    def cat_can_move_to_position(self, p: Point) -> bool:
        """True if p is a free cell next to the cat."""
        return (
            is_neighbor(self.cat_position, p)
            and self.is_valid_position(p)
            and not self.get_content(p)
        )

    def catcher_can_move_to_position(self, p: Point) -> bool:
        """True if p is on the board and not the cat's cell."""
        half = self.side_size // 2
        return (
            (p.x != self.cat_position.x or p.y != self.cat_position.y)
            and abs(p.x) <= half
            and abs(p.y) <= half
        )

    def cat_wins_on_space(self, p: Point) -> bool:
        """True if p lies on the border."""
        half = self.side_size // 2
        return abs(p.x) == half or abs(p.y) == half

    def path_detection(self) -> Point:
        """Search from the cat towards the border.

        On the cat's turn, returns the first step of the path found; on the
        catcher's turn, returns the last cell of that path before the border.
        Returns (0, 0) when no path exists.
        """
        visited: set[Point] = set()
        came_from: dict[Point, Point] = {}
        cat = self.cat_position
        queue: list[tuple[Point, int]] = [(cat, 0)]

        while queue:
            queue.sort(key=lambda entry: entry[1])
            position, weight = queue.pop(0)
            visited.add(position)

            for neighbor in neighbors(position):
                if not self.is_valid_position(neighbor):
                    if not self.cat_turn or position == cat:
                        return position
                    step = position
                    while came_from[step] != cat:
                        step = came_from[step]
                    return step

                if self.get_content(neighbor):
                    continue

                new_weight = weight
                weight += 1
                if neighbor not in visited and all(q != neighbor for q, _ in queue):
                    queue.append((neighbor, new_weight))
                    came_from[neighbor] = position

        return Point(0, 0)


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game in the terminal until one side wins."""
    parser = argparse.ArgumentParser(description="Catch the cat on a hexagonal board.")
    parser.add_argument("--size", type=int, default=21, help="odd side size of the board")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        world = World(args.size, random.Random(args.seed))
    except ValueError as exc:
        parser.error(str(exc))

    print(world.render())
    while not (world.cat_won or world.catcher_won):
        mover = "cat" if world.cat_turn else "catcher"
        world.step()
        print(f"Turn: {mover} ({world.move_duration} us)")
        print(world.render())
    print("The cat wins!" if world.cat_won else "The catcher wins!")
    return 0