import pytest

from gridsims.catchthecat import Point
from gridsims.maze import (
    DARK_GRAY,
    MazeGenerator,
    MazeGeneratorBase,
    MazeWorld,
    Node,
)


class CountingGenerator(MazeGeneratorBase):
    name = "counting"

    def __init__(self, limit):
        self.limit = limit
        self.steps = 0
        self.clears = 0

    def step(self, world):
        if self.steps >= self.limit:
            return False
        self.steps += 1
        world.set_north(Point(0, 0), False)
        return True

    def clear(self, world):
        self.clears += 1
        self.steps = 0


def all_points(world):
    half = world.side_size // 2
    return [Point(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


@pytest.mark.parametrize("data", range(16))
def test_node_byte_round_trip(data):
    assert Node.from_byte(data).to_byte() == data


def test_node_bit_layout():
    assert Node(north=True).to_byte() == 1
    assert Node(east=True).to_byte() == 2
    assert Node(south=True).to_byte() == 4
    assert Node(west=True).to_byte() == 8


def test_node_from_byte_rejects_large_value():
    with pytest.raises(ValueError):
        Node.from_byte(256)


def test_deprecated_generator_does_nothing():
    world = MazeWorld(5)
    gen = MazeGenerator()
    assert gen.name == "deprecated"
    assert gen.step(world) is False


def test_clear_closes_every_cell():
    world = MazeWorld(5)
    for p in all_points(world):
        assert world.get_node(p) == Node(True, True, True, True)


def test_clear_sets_colors():
    world = MazeWorld(7)
    assert all(world.get_node_color(p) == DARK_GRAY for p in all_points(world))


def test_shared_walls():
    world = MazeWorld(5)
    world.set_east(Point(0, 0), False)
    assert world.get_west(Point(1, 0)) is False
    world.set_south(Point(-1, -1), False)
    assert world.get_north(Point(-1, 0)) is False


def test_set_node_round_trip():
    world = MazeWorld(5)
    node = Node(north=False, east=True, south=False, west=True)
    world.set_node(Point(1, -2), node)
    assert world.get_node(Point(1, -2)) == node


def test_node_color_round_trip():
    world = MazeWorld(5)
    world.set_node_color(Point(2, 2), (255, 0, 0, 255))
    assert world.get_node_color(Point(2, 2)) == (255, 0, 0, 255)
    assert world.get_node_color(Point(-2, -2)) == DARK_GRAY


def test_outside_point_raises():
    world = MazeWorld(5)
    with pytest.raises(IndexError):
        world.get_north(Point(3, 0))
    with pytest.raises(IndexError):
        world.set_node_color(Point(0, -3), DARK_GRAY)


def test_step_stops_when_generator_is_done():
    gen = CountingGenerator(limit=1)
    world = MazeWorld(5, [gen])
    world.is_simulating = True
    world.step()
    assert world.is_simulating is True
    assert world.get_north(Point(0, 0)) is False
    world.step()
    assert world.is_simulating is False
    assert gen.steps == 1


def test_clear_resets_generators_and_walls():
    gen = CountingGenerator(limit=3)
    world = MazeWorld(5, [gen])
    world.step()
    world.start()
    assert gen.steps == 0
    assert world.total_time == 0
    assert world.get_north(Point(0, 0)) is True


def test_update_steps_when_timer_runs_out():
    gen = CountingGenerator(limit=5)
    world = MazeWorld(5, [gen])
    world.time_between_ai_ticks = 1.0
    world.time_for_next_tick = 1.0
    world.is_simulating = True
    world.update(0.5)
    assert gen.steps == 0
    world.update(0.6)
    assert gen.steps == 1
    assert world.time_for_next_tick == 1.0


def test_update_idle_when_not_simulating():
    gen = CountingGenerator(limit=5)
    world = MazeWorld(5, [gen])
    world.update(10.0)
    assert gen.steps == 0


def test_requires_a_generator():
    with pytest.raises(ValueError):
        MazeWorld(5, [])