"""Maze board made of shared walls, driven step by step by a maze generator."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from gridsims.catchthecat import Point

Color = tuple[int, int, int, int]

DARK_GRAY: Color = (64, 64, 64, 255)

_NORTH_BIT = 1
_EAST_BIT = 1 << 1
_SOUTH_BIT = 1 << 2
_WEST_BIT = 1 << 3


@dataclass
class Node:
    """The four walls around one cell."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    @classmethod
    def from_byte(cls, data: int) -> "Node":
        """Decode walls from bits: north=1, east=2, south=4, west=8."""
        if not 0 <= data <= 0xFF:
            raise ValueError("node data must fit in one byte")
        return cls(
            north=bool(data & _NORTH_BIT),
            east=bool(data & _EAST_BIT),
            south=bool(data & _SOUTH_BIT),
            west=bool(data & _WEST_BIT),
        )

    def to_byte(self) -> int:
        """Encode walls as bits: north=1, east=2, south=4, west=8."""
        return (
            (_NORTH_BIT if self.north else 0)
            | (_EAST_BIT if self.east else 0)
            | (_SOUTH_BIT if self.south else 0)
            | (_WEST_BIT if self.west else 0)
        )


class MazeGeneratorBase(ABC):
    """A maze generator that carves the world one step at a time."""

    name: str = ""

    @abstractmethod
    def step(self, world: "MazeWorld") -> bool:
        """Make one change; return True if the world was changed."""

    @abstractmethod
    def clear(self, world: "MazeWorld") -> None:
        """Forget all exploration state."""


class MazeGenerator(MazeGeneratorBase):
    """Generator that never changes the world; it only counts its steps."""

    name = "deprecated"

    def __init__(self) -> None:
        self.steps_taken = 0

    def step(self, world: "MazeWorld") -> bool:
        self.steps_taken += 1
        return False

    def clear(self, world: "MazeWorld") -> None:
        self.steps_taken = 0


class MazeWorld:
    """A square maze whose neighbouring cells share their walls.

    Walls are kept per vertex of a (side+1) x (side+1) lattice: each vertex
    holds the wall running north of it (to its right) and the wall running
    west of it (downwards). The centre cell is (0, 0).
    """

    def __init__(
        self,
        side_size: int = 11,
        generators: Iterable[MazeGeneratorBase] | None = None,
    ) -> None:
        if side_size <= 0:
            raise ValueError("side size must be positive")
        self.side_size = side_size
        self.generators: list[MazeGeneratorBase] = (
            list(generators) if generators is not None else [MazeGenerator()]
        )
        if not self.generators:
            raise ValueError("at least one generator is required")
        self.generator_id = 0
        self.is_simulating = False
        self.time_between_ai_ticks = 0.0
        self.time_for_next_tick = 0.0
        self.move_duration = 0
        self.total_time = 0
        self.walls: list[bool] = []
        self.colors: list[Color] = []
        self.clear()

    @property
    def generator(self) -> MazeGeneratorBase:
        """The generator currently selected."""
        return self.generators[self.generator_id]

    def _check(self, point: Point) -> None:
        half = self.side_size // 2
        if not (-half <= point[0] <= half and -half <= point[1] <= half):
            raise IndexError(f"position {tuple(point)} is outside the maze")

    def _vertex_index(self, point: Point) -> int:
        self._check(point)
        half = self.side_size // 2
        x, y = point
        return (y + half) * (self.side_size + 1) * 2 + (x + half) * 2

    def _north_index(self, point: Point) -> int:
        return self._vertex_index(point)

    def _west_index(self, point: Point) -> int:
        return self._vertex_index(point) + 1

    def _east_index(self, point: Point) -> int:
        return self._vertex_index(point) + 3

    def _south_index(self, point: Point) -> int:
        return self._vertex_index(point) + (self.side_size + 1) * 2

    def get_node(self, point: Point) -> Node:
        """All four walls of a cell."""
        return Node(
            north=self.get_north(point),
            east=self.get_east(point),
            south=self.get_south(point),
            west=self.get_west(point),
        )

    def set_node(self, point: Point, node: Node) -> None:
        """Set all four walls of a cell."""
        self.set_north(point, node.north)
        self.set_east(point, node.east)
        self.set_south(point, node.south)
        self.set_west(point, node.west)

    def get_north(self, point: Point) -> bool:
        return self.walls[self._north_index(point)]

    def get_east(self, point: Point) -> bool:
        return self.walls[self._east_index(point)]

    def get_south(self, point: Point) -> bool:
        return self.walls[self._south_index(point)]

    def get_west(self, point: Point) -> bool:
        return self.walls[self._west_index(point)]

    def set_north(self, point: Point, state: bool) -> None:
        self.walls[self._north_index(point)] = bool(state)

    def set_east(self, point: Point, state: bool) -> None:
        self.walls[self._east_index(point)] = bool(state)

    def set_south(self, point: Point, state: bool) -> None:
        self.walls[self._south_index(point)] = bool(state)

    def set_west(self, point: Point, state: bool) -> None:
        self.walls[self._west_index(point)] = bool(state)

    def _color_index(self, point: Point) -> int:
        self._check(point)
        half = self.side_size // 2
        x, y = point
        return (y + half) * self.side_size + x + half

    def set_node_color(self, point: Point, color: Color) -> None:
        """Paint a cell."""
        self.colors[self._color_index(point)] = tuple(color)

    def get_node_color(self, point: Point) -> Color:
        """The colour of a cell."""
        return self.colors[self._color_index(point)]

    def start(self) -> None:
        """Prepare the world for a run."""
        self.clear()

    def clear(self) -> None:
        """Stop, close every cell, reset colours, generators and timers."""
        self.is_simulating = False
        row = (self.side_size + 1) * 2
        self.walls = [
            not (i % row == row - 2 or (i // row == self.side_size and i % 2 == 1))
            for i in range((self.side_size + 1) * (self.side_size + 1) * 2)
        ]
        self.colors = [DARK_GRAY] * (self.side_size * self.side_size)
        for generator in self.generators:
            generator.clear(self)
        self.total_time = 0
        self.move_duration = 0

    def step(self) -> None:
        """Run one generator step; stop the simulation when nothing changes."""
        start = time.perf_counter()
        if not self.generator.step(self):
            self.is_simulating = False
        self.move_duration = int((time.perf_counter() - start) * 1_000_000)
        self.total_time += self.move_duration

    def update(self, delta_time: float) -> None:
        """Advance the timer and step when it runs out."""
        if self.is_simulating:
            self.time_for_next_tick -= delta_time
            if self.time_for_next_tick < 0:
                self.step()
                self.time_for_next_tick = self.time_between_ai_ticks