import random
import unittest
from itertools import permutations

from rubik_nxn.core import CubeState, Face, InvalidMove
from rubik_nxn.core.move_engine import apply_move, apply_moves
from rubik_nxn.logic.moves import ALL_KINDS, Direction, Move, MoveKind, parse_sequence
from rubik_nxn.logic.scramble import scramble

CW = Direction.CLOCKWISE
CCW = Direction.COUNTERCLOCKWISE
OPPOSITE = {
    MoveKind.U: MoveKind.D,
    MoveKind.D: MoveKind.U,
    MoveKind.F: MoveKind.B,
    MoveKind.B: MoveKind.F,
    MoveKind.L: MoveKind.R,
    MoveKind.R: MoveKind.L,
}


def labelled(n):
    """Cubo con un número distinto en cada sticker, para seguir la permutación."""
    c = CubeState(n)
    k = 0
    for f in Face:
        grid = []
        for _ in range(n):
            grid.append(list(range(k, k + n)))
            k += n
        c.grids[f] = grid
    return c


def scrambled(n, seed):
    c = CubeState(n)
    scramble(c, 30, random.Random(seed))
    return c


class TestMoveEngine(unittest.TestCase):
    def test_scenario_a_u_clockwise(self):
        c = CubeState(3)
        apply_move(c, Move(MoveKind.U, CW))

        self.assertEqual(c.grids[Face.UP], [[0] * 3] * 3)
        self.assertEqual(c.grids[Face.FRONT][0], [5, 5, 5])  # era Right
        self.assertEqual(c.grids[Face.LEFT][0], [2, 2, 2])  # era Front
        self.assertEqual(c.grids[Face.BACK][0], [4, 4, 4])  # era Left
        self.assertEqual(c.grids[Face.RIGHT][0], [3, 3, 3])  # era Back
        for f in (Face.FRONT, Face.LEFT, Face.BACK, Face.RIGHT):
            self.assertEqual(c.grids[f][1:], [[int(f)] * 3] * 2)
        self.assertEqual(c.grids[Face.DOWN], [[1] * 3] * 3)
        self.assertFalse(c.is_solved())

    def test_scenario_b_u_then_u_prime(self):
        c = CubeState(3)
        before = c.to_hashable()
        apply_move(c, Move(MoveKind.U, CW))
        apply_move(c, Move(MoveKind.U, CCW))
        self.assertEqual(before, c.to_hashable())

    def test_u_rotates_own_face_clockwise(self):
        c = labelled(3)
        up = [row[:] for row in c.grids[Face.UP]]
        apply_move(c, Move(MoveKind.U))
        self.assertEqual(c.grids[Face.UP], [[up[2][0], up[1][0], up[0][0]],
                                            [up[2][1], up[1][1], up[0][1]],
                                            [up[2][2], up[1][2], up[0][2]]])

    def test_f_strip_cycle(self):
        n = 4
        c = labelled(n)
        old = c.copy()
        apply_move(c, Move(MoveKind.F))
        g, o = c.grids, old.grids
        for i in range(n):
            self.assertEqual(g[Face.RIGHT][i][0], o[Face.UP][n - 1][i])
            self.assertEqual(g[Face.DOWN][0][n - 1 - i], o[Face.RIGHT][i][0])
            self.assertEqual(g[Face.LEFT][i][n - 1], o[Face.DOWN][0][i])
            self.assertEqual(g[Face.UP][n - 1][n - 1 - i], o[Face.LEFT][i][n - 1])

    def test_l_strip_cycle(self):
        n = 3
        c = labelled(n)
        old = c.copy()
        apply_move(c, Move(MoveKind.L))
        g, o = c.grids, old.grids
        for i in range(n):
            self.assertEqual(g[Face.FRONT][i][0], o[Face.UP][i][0])
            self.assertEqual(g[Face.DOWN][i][0], o[Face.FRONT][i][0])
            self.assertEqual(g[Face.BACK][n - 1 - i][n - 1], o[Face.DOWN][i][0])
            self.assertEqual(g[Face.UP][n - 1 - i][0], o[Face.BACK][i][n - 1])

    def test_slice_directions_on_solved_3x3(self):
        c = CubeState(3)
        apply_move(c, Move(MoveKind.M))
        self.assertEqual([row[1] for row in c.grids[Face.FRONT]], [0, 0, 0])  # Up -> Front
        self.assertEqual([row[1] for row in c.grids[Face.UP]], [3, 3, 3])  # Back -> Up

        c = CubeState(3)
        apply_move(c, Move(MoveKind.E))
        self.assertEqual(c.grids[Face.RIGHT][1], [2, 2, 2])  # Front -> Right
        self.assertEqual(c.grids[Face.FRONT][1], [4, 4, 4])  # Left -> Front

        c = CubeState(3)
        apply_move(c, Move(MoveKind.S))
        self.assertEqual([row[1] for row in c.grids[Face.RIGHT]], [0, 0, 0])  # Up -> Right
        self.assertEqual(c.grids[Face.DOWN][1], [5, 5, 5])  # Right -> Down

    def test_slices_leave_corners_in_place(self):
        c = labelled(5)
        old = c.copy()
        apply_moves(c, [Move(MoveKind.M), Move(MoveKind.E), Move(MoveKind.S)])
        for f in Face:
            for r, col in ((0, 0), (0, 4), (4, 0), (4, 4)):
                self.assertEqual(c.grids[f][r][col], old.grids[f][r][col])
        self.assertNotEqual(c, old)

    def test_even_n_middle_slice_uses_index_n_div_2(self):
        c = CubeState(4)
        apply_move(c, Move(MoveKind.M))
        front = c.grids[Face.FRONT]
        self.assertEqual([row[2] for row in front], [0] * 4)
        for col in (0, 1, 3):
            self.assertEqual([row[col] for row in front], [2] * 4)
        self.assertEqual([row[2] for row in c.grids[Face.BACK]], [1] * 4)

        c = CubeState(4)
        apply_move(c, Move(MoveKind.E))
        self.assertEqual(c.grids[Face.RIGHT][2], [2] * 4)
        self.assertEqual(c.grids[Face.RIGHT][1], [5] * 4)

    def test_order_four_closure(self):
        for n in (2, 3, 4, 5):
            base = scrambled(n, seed=n)
            for kind in ALL_KINDS:
                for direction in (CW, CCW):
                    c = base.copy()
                    for _ in range(4):
                        apply_move(c, Move(kind, direction))
                    self.assertEqual(c, base, f"{kind} {direction} n={n}")

    def test_inverse_law(self):
        for n in (2, 3, 4, 5):
            base = scrambled(n, seed=100 + n)
            for kind in ALL_KINDS:
                c = base.copy()
                apply_move(c, Move(kind, CW))
                apply_move(c, Move(kind, CCW))
                self.assertEqual(c, base)

                c = base.copy()
                apply_move(c, Move(kind, CCW))
                apply_move(c, Move(kind, CW))
                self.assertEqual(c, base)

    def test_counterclockwise_equals_three_clockwise(self):
        for n in (2, 3, 4):
            base = scrambled(n, seed=200 + n)
            for kind in ALL_KINDS:
                a = base.copy()
                b = base.copy()
                apply_move(a, Move(kind, CCW))
                for _ in range(3):
                    apply_move(b, Move(kind, CW))
                self.assertEqual(a, b)

    def test_every_move_is_a_permutation(self):
        for n in (2, 3, 4, 5):
            for kind in ALL_KINDS:
                c = labelled(n)
                labels = sorted(c.stickers())
                apply_move(c, Move(kind))
                self.assertEqual(sorted(c.stickers()), labels)

    def test_conservation_after_random_moves(self):
        for n in (2, 3, 4, 6):
            c = scrambled(n, seed=300 + n)
            self.assertEqual(c.color_counts(), {k: n * n for k in range(6)})
            self.assertTrue(all(0 <= x <= 5 for x in c.stickers()))

    def test_face_commutator_has_order_six(self):
        # (X Y X' Y') repetido 6 veces vuelve al estado inicial en un cubo real.
        for n in (2, 3):
            for x, y in permutations(OPPOSITE, 2):
                if OPPOSITE[x] is y:
                    continue
                c = CubeState(n)
                seq = [Move(x), Move(y), Move(x, CCW), Move(y, CCW)]
                apply_moves(c, seq * 6)
                self.assertTrue(c.is_solved(), f"[{x.value},{y.value}] n={n}")

    def test_sexy_move_once_is_not_identity(self):
        c = CubeState(3)
        apply_moves(c, parse_sequence("R U R' U'"))
        self.assertFalse(c.is_solved())

    def test_invalid_move_raises(self):
        c = CubeState(3)
        with self.assertRaises(InvalidMove):
            apply_move(c, "U")
        with self.assertRaises(InvalidMove):
            apply_move(c, Move("U", CW))
        with self.assertRaises(InvalidMove):
            apply_move(c, Move(MoveKind.U, "cw"))
        self.assertTrue(c.is_solved())


if __name__ == "__main__":
    unittest.main()
