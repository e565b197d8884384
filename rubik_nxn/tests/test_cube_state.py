import unittest

from rubik_nxn.core import CubeState, Face, InvalidConfiguration
from rubik_nxn.core.move_engine import apply_moves
from rubik_nxn.logic.moves import parse_sequence


class TestCubeState(unittest.TestCase):
    def test_starts_solved(self):
        for n in (2, 3, 4, 5):
            c = CubeState(n)
            self.assertTrue(c.is_solved())
            for f in Face:
                self.assertEqual(c.grids[f], [[int(f)] * n for _ in range(n)])

    def test_rejects_small_or_non_int_size(self):
        for bad in (1, 0, -3, 2.5, "3", True):
            with self.assertRaises(InvalidConfiguration):
                CubeState(bad)

    def test_invalid_configuration_is_value_error(self):
        with self.assertRaises(ValueError):
            CubeState(1)

    def test_n_is_read_only(self):
        c = CubeState(4)
        with self.assertRaises(AttributeError):
            c.n = 5

    def test_color_counts_solved(self):
        c = CubeState(4)
        self.assertEqual(c.color_counts(), {k: 16 for k in range(6)})

    def test_copy_is_independent(self):
        c = CubeState(3)
        d = c.copy()
        apply_moves(d, parse_sequence("R U"))
        self.assertTrue(c.is_solved())
        self.assertNotEqual(c, d)

    def test_reset(self):
        c = CubeState(3)
        apply_moves(c, parse_sequence("R U F' M"))
        self.assertFalse(c.is_solved())
        c.reset()
        self.assertTrue(c.is_solved())
        self.assertEqual(c, CubeState(3))

    def test_persisted_layout_order(self):
        c = CubeState(2)
        lists = c.to_lists()
        self.assertEqual(len(lists), 6)
        # Up, Down, Front, Back, Left, Right
        self.assertEqual([g[0][0] for g in lists], [0, 1, 2, 3, 4, 5])
        self.assertEqual(c.stickers(), [f for f in range(6) for _ in range(4)])

    def test_from_lists_restores_scrambled_state(self):
        c = CubeState(3)
        apply_moves(c, parse_sequence("R U R' F2 S E' M"))
        restored = CubeState.from_lists(c.to_lists())
        self.assertEqual(restored, c)
        self.assertEqual(restored.to_hashable(), c.to_hashable())

    def test_to_lists_is_a_copy(self):
        c = CubeState(3)
        lists = c.to_lists()
        lists[0][0][0] = 5
        self.assertTrue(c.is_solved())

    def test_from_lists_rejects_bad_layouts(self):
        good = CubeState(3).to_lists()

        with self.assertRaises(InvalidConfiguration):
            CubeState.from_lists(good[:5])

        ragged = CubeState(3).to_lists()
        ragged[2][1] = [2, 2]
        with self.assertRaises(InvalidConfiguration):
            CubeState.from_lists(ragged)

        out_of_range = CubeState(3).to_lists()
        out_of_range[0][0][0] = 6
        with self.assertRaises(InvalidConfiguration):
            CubeState.from_lists(out_of_range)

        not_conserved = CubeState(3).to_lists()
        not_conserved[0][0][0] = 1
        with self.assertRaises(InvalidConfiguration):
            CubeState.from_lists(not_conserved)

    def test_hashable_and_equal(self):
        a = CubeState(3)
        b = CubeState(3)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(CubeState(2), CubeState(3))


if __name__ == "__main__":
    unittest.main()
