# rubik_nxn/core/face_rotator.py
from __future__ import annotations

from typing import List

Grid = List[List[int]]


def rotate_clockwise(grid: Grid) -> Grid:
    """Rota una grilla cuadrada 90° en sentido horario.

    La celda origen `(i, j)` pasa a la celda destino `(j, n-1-i)`.

    Args:
        grid: Grilla `n x n` (lista de filas). No se modifica.

    Returns:
        Una grilla nueva, rotada.
    """
    n = len(grid)
    out: Grid = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            out[j][n - 1 - i] = grid[i][j]
    return out


def rotate_counterclockwise(grid: Grid) -> Grid:
    """Rota 90° antihorario, definido como tres giros horarios."""
    for _ in range(3):
        grid = rotate_clockwise(grid)
    return grid


def rotate_clockwise_in_place(grid: Grid) -> None:
    """Rota la grilla horario escribiendo sobre la misma lista.

    Se lee de una copia completa: cada destino también es origen.

    Args:
        grid: Grilla `n x n` viva (por ejemplo, `state.grids[face]`).
    """
    snapshot = [row[:] for row in grid]
    n = len(snapshot)
    for i in range(n):
        for j in range(n):
            grid[j][n - 1 - i] = snapshot[i][j]
