# rubik_nxn/logic/actions.py
from __future__ import annotations

from typing import List

from rubik_nxn.core.cube_state import CubeState
from rubik_nxn.core.errors import InvalidMove
from rubik_nxn.core.move_engine import apply_move
from rubik_nxn.logic.moves import Direction, Move, MoveKind

# Orden de caras de la codificación discreta: Top, Bottom, Left, Right, Front, Back.
# Es un contrato externo (políticas ya entrenadas), no cambiar.
ACTION_FACES: List[MoveKind] = [MoveKind.U, MoveKind.D, MoveKind.L, MoveKind.R, MoveKind.F, MoveKind.B]
ACTION_COUNT: int = 2 * len(ACTION_FACES)


def action_to_move(action: int) -> Move:
    """Convierte una acción discreta 0..11 en un giro de cara exterior.

    `action % 6` elige la cara; `action < 6` es horario, `action >= 6` antihorario.

    Raises:
        InvalidMove: Si la acción no es un entero en 0..11.
    """
    if isinstance(action, bool) or not isinstance(action, int) or not 0 <= action < ACTION_COUNT:
        raise InvalidMove(f"Acción fuera de rango (0..{ACTION_COUNT - 1}): {action!r}")
    kind = ACTION_FACES[action % len(ACTION_FACES)]
    direction = Direction.CLOCKWISE if action < len(ACTION_FACES) else Direction.COUNTERCLOCKWISE
    return Move(kind, direction)


def move_to_action(move: Move) -> int:
    """Inversa de `action_to_move`. Los slices M/E/S no tienen acción.

    Raises:
        InvalidMove: Si el giro es un slice central.
    """
    if move.kind not in ACTION_FACES:
        raise InvalidMove(f"El giro {move} no tiene codificación discreta")
    offset = 0 if move.direction is Direction.CLOCKWISE else len(ACTION_FACES)
    return ACTION_FACES.index(move.kind) + offset


def apply_action(state: CubeState, action: int) -> Move:
    """Aplica una acción discreta al cubo y devuelve el giro aplicado."""
    move = action_to_move(action)
    apply_move(state, move)
    return move
