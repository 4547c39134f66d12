import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cmdlayout.chain import Command
from cmdlayout.chain_placer import CommandBlock, PlacementAttempt
from cmdlayout.coordinate import Coordinate, Direction, Orientation
from cmdlayout.placer import NotEnoughSpaceError, initial_side_length, place, place_blocks


def record(index, command, coordinate, direction):
    return (index, command, coordinate, direction)


def prefix_placer(chain, curve):
    """Succeeds whenever the curve is at least as long as the chain."""
    if len(curve) < len(chain):
        return PlacementAttempt.failure("curve too short")
    return PlacementAttempt.success(
        [CommandBlock(command, curve[i], Direction.UP) for i, command in enumerate(chain)]
    )


class RecordingPlacer:
    def __init__(self):
        self.curve_lengths = []

    def __call__(self, chain, curve):
        self.curve_lengths.append(len(curve))
        return prefix_placer(chain, curve)


class TestInitialSideLength(unittest.TestCase):

    def test_values(self):
        expected = {0: 1, 1: 1, 2: 2, 8: 2, 9: 3, 26: 3, 27: 3, 28: 4, 64: 4, 125: 5, 1000: 10, 1001: 11}
        for count, side in expected.items():
            with self.subTest(count=count):
                self.assertEqual(initial_side_length(count), side)


class TestPlace(unittest.TestCase):

    def setUp(self):
        self.origin = Coordinate(0, 0, 0)
        self.orientation = Orientation()

    def test_eight_commands_in_unit_cube(self):
        chain = [Command(f"say {i}") for i in range(8)]
        placer = RecordingPlacer()
        result = place(chain, self.origin, Coordinate(2, 2, 2), self.orientation, record,
                       chain_placer=placer)
        self.assertEqual(placer.curve_lengths, [8])
        self.assertEqual([entry[0] for entry in result], list(range(8)))
        self.assertEqual([entry[1] for entry in result], chain)
        coordinates = [entry[2] for entry in result]
        self.assertEqual(len(set(coordinates)), 8)
        for previous, current in zip(coordinates, coordinates[1:]):
            self.assertEqual(previous.manhattan(current), 1)

    def test_single_cell_box_too_small(self):
        chain = [Command("say")] * 1000
        placer = RecordingPlacer()
        with self.assertRaises(NotEnoughSpaceError) as ctx:
            place(chain, self.origin, Coordinate(1, 1, 1), self.orientation, record,
                  chain_placer=placer)
        self.assertEqual(placer.curve_lengths, [1])
        self.assertEqual(ctx.exception.chain_size, 1000)
        self.assertIn("curve too short", str(ctx.exception))

    def test_grows_until_placer_succeeds(self):
        calls = []

        def picky_placer(chain, curve):
            calls.append(len(curve))
            if len(curve) < 27:
                return PlacementAttempt.failure("too small")
            return prefix_placer(chain, curve)

        result = place([Command("x")] * 5, self.origin, Coordinate(10, 10, 10), self.orientation,
                       record, chain_placer=picky_placer)
        self.assertEqual(calls, [8, 27])
        self.assertEqual(len(result), 5)

    def test_candidate_is_clipped_to_box(self):
        placer = RecordingPlacer()
        blocks = place_blocks([Command("x")] * 20, self.origin, Coordinate(10, 2, 10),
                              self.orientation, chain_placer=placer)
        # side 3 is clipped to 3x2x3 = 18 cells, side 4 gives 4x2x4 = 32
        self.assertEqual(placer.curve_lengths, [18, 32])
        self.assertEqual(len(blocks), 20)
        for block in blocks:
            self.assertLess(block.coordinate.y, 2)

    def test_more_commands_than_volume(self):
        with self.assertRaises(NotEnoughSpaceError):
            place([Command("x")] * 30, self.origin, Coordinate(3, 3, 3), self.orientation, record)

    def test_fits_exact_volume_with_default_placer(self):
        result = place([Command("x")] * 27, Coordinate(-5, 10, 3), Coordinate(-2, 13, 6),
                       self.orientation, record)
        self.assertEqual(len(result), 27)
        self.assertEqual({entry[2] for entry in result},
                         {Coordinate(x, y, z) for x in range(-5, -2)
                          for y in range(10, 13) for z in range(3, 6)})

    def test_empty_chain(self):
        self.assertEqual(place([], self.origin, Coordinate(4, 4, 4), self.orientation, record), [])

    def test_blocks_stay_inside_box(self):
        low = Coordinate(2, 3, 4)
        high = Coordinate(7, 6, 9)
        blocks = place_blocks([Command("x")] * 50, low, high, Orientation.parse("-y+x-z"))
        for block in blocks:
            self.assertEqual(Coordinate.maximum(low, block.coordinate), block.coordinate)
            self.assertEqual(Coordinate.minimum(high - Coordinate.uniform(1), block.coordinate),
                             block.coordinate)

    def test_deterministic(self):
        chain = [Command(f"c{i}", conditional=i % 3 == 2) for i in range(40)]
        args = (chain, self.origin, Coordinate(8, 8, 8), Orientation.parse("+z-x+y"), record)
        self.assertEqual(place(*args), place(*args))

    def test_factory_results_in_index_order(self):
        seen = []

        def factory(index, command, coordinate, direction):
            seen.append(index)
            return command.text

        result = place([Command(str(i)) for i in range(10)], self.origin, Coordinate(5, 5, 5),
                       self.orientation, factory)
        self.assertEqual(seen, list(range(10)))
        self.assertEqual(result, [str(i) for i in range(10)])

    def test_invalid_arguments(self):
        chain = [Command("x")]
        box = (self.origin, Coordinate(2, 2, 2))
        with self.assertRaises(ValueError):
            place(chain, *box, self.orientation, None)
        with self.assertRaises(ValueError):
            place(None, *box, self.orientation, record)
        with self.assertRaises(ValueError):
            place(chain, None, box[1], self.orientation, record)
        with self.assertRaises(ValueError):
            place(chain, box[0], None, self.orientation, record)
        with self.assertRaises(ValueError):
            place(chain, *box, None, record)
        for bad_max in (Coordinate(0, 2, 2), Coordinate(2, 0, 2), Coordinate(2, 2, -1)):
            with self.subTest(max=bad_max):
                with self.assertRaises(ValueError):
                    place(chain, self.origin, bad_max, self.orientation, record)

    def test_none_factory_checked_before_search(self):
        placer = RecordingPlacer()
        with self.assertRaises(ValueError):
            place([Command("x")], self.origin, Coordinate(2, 2, 2), self.orientation, None,
                  chain_placer=placer)
        self.assertEqual(placer.curve_lengths, [])


if __name__ == '__main__':
    unittest.main()
