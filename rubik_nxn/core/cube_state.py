# rubik_nxn/core/cube_state.py
from __future__ import annotations

import logging
from collections import Counter
from enum import IntEnum
from typing import Dict, List, Sequence, Tuple

from rubik_nxn.config import MIN_SIZE
from rubik_nxn.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

Grid = List[List[int]]
CubeHash = Tuple[Tuple[Tuple[int, ...], ...], ...]


class Face(IntEnum):
    """Caras del cubo, en el orden fijo del layout persistido.

    El valor entero es además el índice del color resuelto de la cara.
    """

    UP = 0
    DOWN = 1
    FRONT = 2
    BACK = 3
    LEFT = 4
    RIGHT = 5


FACES: List[Face] = list(Face)
NUM_COLORS: int = len(FACES)


class CubeState:
    """Estado lógico de un cubo NxNxN: seis grillas NxN de índices de color.

    Representación:
        - `grids[face]` es una grilla `n x n` (lista de filas) con colores 0..5.
        - Cada grilla se ve desde afuera de su cara. En el desplegado estándar:
            - Up: fila n-1 toca Front, columna 0 toca Left.
            - Down: fila 0 toca Front, columna 0 toca Left.
            - Front/Left/Right/Back: fila 0 toca Up.
            - Left: columna n-1 toca Front. Right: columna 0 toca Front.
            - Back: columna 0 toca Right, columna n-1 toca Left.

    El estado solo se modifica a través de `rubik_nxn.core.move_engine.apply_move`
    (y `reset`). Entre movimientos se puede leer libremente.
    """

    def __init__(self, n: int = 3) -> None:
        """Crea un cubo resuelto: la cara f queda llena con el color f.

        Args:
            n: Lado del cubo (>= 2).

        Raises:
            InvalidConfiguration: Si `n` no es entero o es menor que 2.
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < MIN_SIZE:
            raise InvalidConfiguration(f"El lado del cubo debe ser un entero >= {MIN_SIZE}: {n!r}")
        self._n: int = n
        self.grids: Dict[Face, Grid] = {}
        self.reset()

    @property
    def n(self) -> int:
        """Lado del cubo (inmutable)."""
        return self._n

    # --------------------------
    # Public API
    # --------------------------
    def reset(self) -> None:
        """Reinicia el cubo a estado resuelto."""
        n = self._n
        self.grids = {f: [[int(f)] * n for _ in range(n)] for f in FACES}
        logger.debug("Cubo %dx%dx%d reiniciado", n, n, n)

    def face(self, face: Face) -> Grid:
        """Devuelve la grilla viva de una cara (no una copia)."""
        return self.grids[face]

    def copy(self) -> CubeState:
        """Copia profunda del estado."""
        c = CubeState(self._n)
        c.grids = {f: [row[:] for row in self.grids[f]] for f in FACES}
        return c

    def is_solved(self) -> bool:
        """Indica si cada cara tiene un único color."""
        for f in FACES:
            first = self.grids[f][0][0]
            if any(x != first for row in self.grids[f] for x in row):
                return False
        return True

    def color_counts(self) -> Dict[int, int]:
        """Cuenta cuántas veces aparece cada color en las 6·n² posiciones."""
        counts = Counter(x for f in FACES for row in self.grids[f] for x in row)
        return {c: counts.get(c, 0) for c in range(NUM_COLORS)}

    def to_hashable(self) -> CubeHash:
        """Convierte el estado a tuplas anidadas (hasheable), en el orden de `FACES`."""
        return tuple(tuple(tuple(row) for row in self.grids[f]) for f in FACES)

    def stickers(self) -> List[int]:
        """Lista plana de 6·n² stickers: caras en orden de `FACES`, fila-columna."""
        return [x for f in FACES for row in self.grids[f] for x in row]

    def to_lists(self) -> List[Grid]:
        """Layout persistido: seis grillas `n x n` en orden Up, Down, Front, Back, Left, Right."""
        return [[row[:] for row in self.grids[f]] for f in FACES]

    @classmethod
    def from_lists(cls, grids: Sequence[Sequence[Sequence[int]]]) -> CubeState:
        """Reconstruye un estado desde el layout persistido.

        Args:
            grids: Seis grillas cuadradas del mismo tamaño, en el orden de `FACES`.

        Returns:
            Un `CubeState` nuevo con esas grillas.

        Raises:
            InvalidConfiguration: Si el número de caras, la forma de las grillas,
                el rango de los colores o la cantidad de cada color no es válida.
        """
        if len(grids) != NUM_COLORS:
            raise InvalidConfiguration(f"Se esperaban {NUM_COLORS} caras, llegaron {len(grids)}")

        n = len(grids[0])
        state = cls(n)
        for f, grid in zip(FACES, grids):
            if len(grid) != n or any(len(row) != n for row in grid):
                raise InvalidConfiguration(f"La cara {f.name} no es una grilla {n}x{n}")
            for row in grid:
                for x in row:
                    if isinstance(x, bool) or not isinstance(x, int) or not 0 <= x < NUM_COLORS:
                        raise InvalidConfiguration(f"Color fuera de rango en {f.name}: {x!r}")
            state.grids[f] = [list(row) for row in grid]

        counts = state.color_counts()
        if any(v != n * n for v in counts.values()):
            raise InvalidConfiguration(f"Cada color debe aparecer {n * n} veces: {counts}")
        return state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._n == other._n and self.to_hashable() == other.to_hashable()

    def __hash__(self) -> int:
        return hash(self.to_hashable())

    def __repr__(self) -> str:
        return f"CubeState(n={self._n}, solved={self.is_solved()})"
