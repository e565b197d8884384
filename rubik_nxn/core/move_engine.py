# rubik_nxn/core/move_engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from rubik_nxn.core.cube_state import CubeState, Face
from rubik_nxn.core.errors import InvalidMove
from rubik_nxn.core.face_rotator import rotate_clockwise_in_place
from rubik_nxn.logic.moves import Direction, Move, MoveKind

logger = logging.getLogger(__name__)


class Axis(Enum):
    ROW = "row"
    COL = "col"


class Layer(Enum):
    """Índice simbólico de una tira; se resuelve contra `n` al aplicar el giro."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"

    def resolve(self, n: int) -> int:
        if self is Layer.FIRST:
            return 0
        if self is Layer.LAST:
            return n - 1
        # Para n par no existe slice central: se usa n // 2 igual que para n impar.
        return n // 2


@dataclass(frozen=True)
class Strip:
    """Una fila o columna completa de una cara."""

    face: Face
    axis: Axis
    layer: Layer


@dataclass(frozen=True)
class HandOff:
    """La tira `src` pasa a ocupar `dst`; con `reverse` se invierte el orden."""

    src: Strip
    dst: Strip
    reverse: bool = False


@dataclass(frozen=True)
class Wiring:
    own_face: Optional[Face]
    cycle: Tuple[HandOff, ...]


def _s(face: Face, axis: Axis, layer: Layer) -> Strip:
    return Strip(face, axis, layer)


_ROW, _COL = Axis.ROW, Axis.COL
_FIRST, _MID, _LAST = Layer.FIRST, Layer.MIDDLE, Layer.LAST
U, D, F, B, L, R = Face.UP, Face.DOWN, Face.FRONT, Face.BACK, Face.LEFT, Face.RIGHT


def _ring(own: Optional[Face], *strips: Tuple[Strip, bool]) -> Wiring:
    """Arma el 4-ciclo: cada tira pasa a la siguiente; el flag marca inversión al entrar."""
    hand_offs = []
    for k, (src, _) in enumerate(strips):
        dst, reverse = strips[(k + 1) % 4]
        hand_offs.append(HandOff(src, dst, reverse))
    return Wiring(own, tuple(hand_offs))


# Tablas de giro horario. En `_ring` el flag de cada tira indica si la tira
# que llega a ella se invierte.
WIRING: Dict[MoveKind, Wiring] = {
    MoveKind.U: _ring(
        U,
        (_s(F, _ROW, _FIRST), False),
        (_s(L, _ROW, _FIRST), False),
        (_s(B, _ROW, _FIRST), False),
        (_s(R, _ROW, _FIRST), False),
    ),
    MoveKind.D: _ring(
        D,
        (_s(F, _ROW, _LAST), False),
        (_s(R, _ROW, _LAST), False),
        (_s(B, _ROW, _LAST), False),
        (_s(L, _ROW, _LAST), False),
    ),
    MoveKind.F: _ring(
        F,
        (_s(U, _ROW, _LAST), True),
        (_s(R, _COL, _FIRST), False),
        (_s(D, _ROW, _FIRST), True),
        (_s(L, _COL, _LAST), False),
    ),
    MoveKind.B: _ring(
        B,
        (_s(U, _ROW, _FIRST), False),
        (_s(L, _COL, _FIRST), True),
        (_s(D, _ROW, _LAST), False),
        (_s(R, _COL, _LAST), True),
    ),
    MoveKind.L: _ring(
        L,
        (_s(U, _COL, _FIRST), True),
        (_s(F, _COL, _FIRST), False),
        (_s(D, _COL, _FIRST), False),
        (_s(B, _COL, _LAST), True),
    ),
    MoveKind.R: _ring(
        R,
        (_s(U, _COL, _LAST), False),
        (_s(B, _COL, _FIRST), True),
        (_s(D, _COL, _LAST), True),
        (_s(F, _COL, _LAST), False),
    ),
    # Slices centrales: mismo sentido que L, D y F respectivamente.
    MoveKind.M: _ring(
        None,
        (_s(U, _COL, _MID), True),
        (_s(F, _COL, _MID), False),
        (_s(D, _COL, _MID), False),
        (_s(B, _COL, _MID), True),
    ),
    MoveKind.E: _ring(
        None,
        (_s(F, _ROW, _MID), False),
        (_s(R, _ROW, _MID), False),
        (_s(B, _ROW, _MID), False),
        (_s(L, _ROW, _MID), False),
    ),
    MoveKind.S: _ring(
        None,
        (_s(U, _ROW, _MID), True),
        (_s(R, _COL, _MID), False),
        (_s(D, _ROW, _MID), True),
        (_s(L, _COL, _MID), False),
    ),
}


def _index(strip: Strip, n: int) -> int:
    idx = strip.layer.resolve(n)
    if not 0 <= idx < n:
        raise InvalidMove(f"Índice de capa fuera de rango en {strip.face.name}: {idx} (n={n})")
    return idx


def read_strip(state: CubeState, strip: Strip) -> List[int]:
    """Lee una fila (izquierda a derecha) o columna (arriba a abajo) de una cara."""
    grid = state.grids[strip.face]
    idx = _index(strip, state.n)
    if strip.axis is Axis.ROW:
        return grid[idx][:]
    return [row[idx] for row in grid]


def write_strip(state: CubeState, strip: Strip, values: List[int]) -> None:
    grid = state.grids[strip.face]
    idx = _index(strip, state.n)
    if strip.axis is Axis.ROW:
        grid[idx][:] = values
    else:
        for r, v in enumerate(values):
            grid[r][idx] = v


def _apply_cw(state: CubeState, kind: MoveKind) -> None:
    """Aplica un giro horario: rota la cara propia (si la hay) y cicla las 4 tiras."""
    wiring = WIRING[kind]
    # Leer todas las tiras antes de escribir: un destino es también origen.
    sources = [read_strip(state, h.src) for h in wiring.cycle]

    if wiring.own_face is not None:
        rotate_clockwise_in_place(state.grids[wiring.own_face])

    for h, values in zip(wiring.cycle, sources):
        write_strip(state, h.dst, values[::-1] if h.reverse else values)


def apply_move(state: CubeState, move: Move) -> None:
    """Aplica un giro al cubo, modificándolo in place.

    El giro antihorario se aplica como tres giros horarios.

    Args:
        state: Cubo a modificar.
        move: Giro a aplicar.

    Raises:
        InvalidMove: Si `move` no es un `Move` con tipo y dirección conocidos.
    """
    if not isinstance(move, Move) or not isinstance(move.kind, MoveKind) or not isinstance(move.direction, Direction):
        raise InvalidMove(f"Movimiento no soportado: {move!r}")

    turns = 1 if move.direction is Direction.CLOCKWISE else 3
    for _ in range(turns):
        _apply_cw(state, move.kind)
    logger.debug("Aplicado %s (n=%d)", move, state.n)


def apply_moves(state: CubeState, moves: Iterable[Move]) -> None:
    """Aplica una secuencia de giros en orden."""
    for m in moves:
        apply_move(state, m)
