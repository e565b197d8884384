# rubik_nxn/logic/detector.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from rubik_nxn.config import SCAN_CENTER_INDEX, SCAN_LENGTH, SCAN_STICKERS_PER_FACE, UNDETECTED
from rubik_nxn.core.cube_state import FACES, NUM_COLORS, CubeState
from rubik_nxn.core.errors import IncompleteScan

logger = logging.getLogger(__name__)

ScanResult = Sequence[int]


@dataclass(frozen=True)
class SolveReport:
    """Resultado de inspeccionar un cubo.

    Attributes:
        face_solved: Seis flags, uno por cara (orden Up, Down, Front, Back, Left, Right).
        correct_counts: Seis contadores de stickers iguales al centro de su cara.
        cube_solved: True si las seis caras están resueltas.
    """

    face_solved: Tuple[bool, ...]
    correct_counts: Tuple[int, ...]
    cube_solved: bool

    @classmethod
    def from_faces(cls, face_solved: Sequence[bool], correct_counts: Sequence[int]) -> SolveReport:
        return cls(tuple(face_solved), tuple(correct_counts), all(face_solved))


def _block_solved(block: Sequence[int]) -> bool:
    first = block[0]
    if first == UNDETECTED:
        return False
    return all(x == first for x in block)


def _block_correct_count(block: Sequence[int], center: int) -> int:
    if center == UNDETECTED:
        return 0
    return sum(1 for x in block if x == center)


def inspect_state(state: CubeState) -> SolveReport:
    """Modo directo: uniformidad y conteo por cara a partir de un `CubeState`.

    El centro de una cara es la celda `(n // 2, n // 2)`; para n par es la
    celda abajo-derecha del centro geométrico.
    """
    mid = state.n // 2
    solved: List[bool] = []
    counts: List[int] = []
    for f in FACES:
        grid = state.grids[f]
        block = [x for row in grid for x in row]
        solved.append(_block_solved(block))
        counts.append(_block_correct_count(block, grid[mid][mid]))
    return SolveReport.from_faces(solved, counts)


def _normalize_scan(scan: ScanResult) -> List[int]:
    # Cualquier valor fuera de 0..5 se trata como no detectado.
    return [x if isinstance(x, int) and 0 <= x < NUM_COLORS else UNDETECTED for x in scan]


def inspect_scan(scan: ScanResult, require_complete: bool = False) -> SolveReport:
    """Modo escaneo (solo 3x3): inspecciona una lista plana de 54 stickers.

    Los bloques de 9 siguen el orden de caras Up, Down, Front, Back, Left, Right.
    Un bloque con algún -1 nunca está resuelto; si el centro (índice 4 del bloque)
    es -1, su conteo es 0.

    Un escaneo de longitud distinta de 54 no falla: se informa con un warning y
    todas las caras quedan como no resueltas con conteo 0.

    Args:
        scan: Stickers escaneados, 0..5 o -1 para "no detectado".
        require_complete: Si True, un escaneo incompleto lanza `IncompleteScan`.

    Returns:
        Un `SolveReport`.

    Raises:
        IncompleteScan: Solo con `require_complete=True`, si la longitud no es 54
            o hay stickers sin clasificar.
    """
    if len(scan) != SCAN_LENGTH:
        if require_complete:
            raise IncompleteScan(f"Se esperaban {SCAN_LENGTH} stickers, llegaron {len(scan)}")
        logger.warning("Escaneo incompleto: %d stickers (se esperaban %d)", len(scan), SCAN_LENGTH)
        return SolveReport.from_faces([False] * len(FACES), [0] * len(FACES))

    values = _normalize_scan(scan)
    missing = values.count(UNDETECTED)
    if missing:
        if require_complete:
            raise IncompleteScan(f"{missing} stickers sin clasificar")
        logger.warning("Escaneo con %d stickers sin clasificar", missing)

    solved: List[bool] = []
    counts: List[int] = []
    for k in range(len(FACES)):
        block = values[k * SCAN_STICKERS_PER_FACE:(k + 1) * SCAN_STICKERS_PER_FACE]
        solved.append(_block_solved(block))
        counts.append(_block_correct_count(block, block[SCAN_CENTER_INDEX]))
    return SolveReport.from_faces(solved, counts)


def observation(stickers: Sequence[int], report: SolveReport) -> List[int]:
    """Vector de observación para un agente.

    Layout: stickers, seis flags de cara resuelta, flag de cubo resuelto y los
    seis contadores de stickers correctos. Los flags se codifican como 0/1.
    """
    out = list(stickers)
    out.extend(int(s) for s in report.face_solved)
    out.append(int(report.cube_solved))
    out.extend(report.correct_counts)
    return out


def observe_state(state: CubeState) -> List[int]:
    """Observación de un `CubeState`: 6·n² stickers + 13 valores de progreso."""
    return observation(state.stickers(), inspect_state(state))
