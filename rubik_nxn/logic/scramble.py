# rubik_nxn/logic/scramble.py
from __future__ import annotations

import logging
import random
from typing import List, Optional

from rubik_nxn.core.cube_state import CubeState
from rubik_nxn.core.move_engine import apply_move
from rubik_nxn.logic.moves import ALL_DIRECTIONS, ALL_KINDS, Move, format_sequence

logger = logging.getLogger(__name__)


def random_moves(move_count: int, rng: Optional[random.Random] = None) -> List[Move]:
    """Genera `move_count` giros aleatorios sin aplicarlos.

    Cada giro sortea de forma independiente y uniforme uno de los nueve tipos
    (U D F B L R M E S) y uno de los dos sentidos. No se evitan pares que se
    cancelan (por ejemplo "U U'").

    Args:
        move_count: Cantidad de giros (>= 0).
        rng: Generador aleatorio opcional; si es None se usa uno nuevo sin semilla.

    Returns:
        Lista de `Move`.

    Raises:
        ValueError: Si `move_count` es negativo.
    """
    if move_count < 0:
        raise ValueError("move_count no puede ser negativo.")

    rng = rng if rng is not None else random.Random()
    return [Move(rng.choice(ALL_KINDS), rng.choice(ALL_DIRECTIONS)) for _ in range(move_count)]


def scramble(state: CubeState, move_count: int, rng: Optional[random.Random] = None) -> List[Move]:
    """Mezcla el cubo aplicando `move_count` giros aleatorios.

    Args:
        state: Cubo a mezclar (se modifica in place).
        move_count: Cantidad de giros.
        rng: Generador aleatorio opcional (para scrambles reproducibles).

    Returns:
        Los giros aplicados, en orden.
    """
    applied = random_moves(move_count, rng)
    for move in applied:
        apply_move(state, move)

    logger.debug("Scramble de %d giros: %s", len(applied), format_sequence(applied))
    return applied
