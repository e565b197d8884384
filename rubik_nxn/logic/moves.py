# rubik_nxn/logic/moves.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from rubik_nxn.core.errors import InvalidMove


class MoveKind(Enum):
    """Capas que se pueden girar: seis caras exteriores y tres slices centrales."""

    U = "U"
    D = "D"
    F = "F"
    B = "B"
    L = "L"
    R = "R"
    M = "M"  # slice paralelo a L/R, sigue el sentido de L
    E = "E"  # slice paralelo a U/D, sigue el sentido de D
    S = "S"  # slice paralelo a F/B, sigue el sentido de F

    @property
    def is_slice(self) -> bool:
        return self in (MoveKind.M, MoveKind.E, MoveKind.S)


class Direction(Enum):
    CLOCKWISE = "cw"
    COUNTERCLOCKWISE = "ccw"

    def flipped(self) -> Direction:
        if self is Direction.CLOCKWISE:
            return Direction.COUNTERCLOCKWISE
        return Direction.CLOCKWISE


FACE_KINDS: List[MoveKind] = [MoveKind.U, MoveKind.D, MoveKind.F, MoveKind.B, MoveKind.L, MoveKind.R]
ALL_KINDS: List[MoveKind] = list(MoveKind)
ALL_DIRECTIONS: List[Direction] = list(Direction)


@dataclass(frozen=True)
class Move:
    """Un giro de 90° de una capa.

    Attributes:
        kind: Capa girada (U D F B L R M E S).
        direction: Sentido del giro visto desde la cara correspondiente.
    """

    kind: MoveKind
    direction: Direction = Direction.CLOCKWISE

    def inverse(self) -> Move:
        """Mismo tipo, sentido opuesto."""
        return Move(self.kind, self.direction.flipped())

    @classmethod
    def parse(cls, token: str) -> Move:
        """Parsea un token simple ("R" o "R'"). Para "R2" usar `parse_sequence`."""
        moves = parse_token(token)
        if len(moves) != 1:
            raise InvalidMove(f"Se esperaba un único giro de 90°: {token!r}")
        return moves[0]

    def __str__(self) -> str:
        suffix = "'" if self.direction is Direction.COUNTERCLOCKWISE else ""
        return self.kind.value + suffix


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta la capa en minúscula ("r" -> "R").
    - Corrige el caso típico "D2'" -> "D2" (el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "M2", "D2'").

    Returns:
        Token normalizado. Un token vacío devuelve "".

    Raises:
        InvalidMove: Si la capa o el sufijo no son válidos.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    base = tok[0].upper()
    suf = tok[1:]

    if base not in MoveKind.__members__:
        raise InvalidMove(f"Movimiento inválido: {tok}")

    if suf == "2'":
        suf = "2"

    if suf not in ("", "'", "2"):
        raise InvalidMove(f"Sufijo inválido en: {tok}")

    return base + suf


def parse_token(tok: str) -> List[Move]:
    """Convierte un token en giros de 90°. "X2" se expande en dos giros horarios."""
    tok = normalize_token(tok)
    if not tok:
        return []

    kind = MoveKind(tok[0])
    suf = tok[1:]
    if suf == "2":
        return [Move(kind), Move(kind)]
    if suf == "'":
        return [Move(kind, Direction.COUNTERCLOCKWISE)]
    return [Move(kind)]


def parse_sequence(text: str) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de giros.

    La entrada separa movimientos por espacios. Por ejemplo:
        "R U R' U'" -> [R, U, R', U']
        "F2 M'"     -> [F, F, M']

    Raises:
        InvalidMove: Si algún token es inválido.
    """
    out: List[Move] = []
    for t in text.split():
        out.extend(parse_token(t))
    return out


def format_sequence(moves: Iterable[Move]) -> str:
    """Notación de una secuencia, separada por espacios."""
    return " ".join(str(m) for m in moves)


def inverse_move(m: Move) -> Move:
    return m.inverse()


def inverse_sequence(moves: Iterable[Move]) -> List[Move]:
    """Secuencia que deshace `moves`: orden inverso y cada giro invertido."""
    return [m.inverse() for m in reversed(list(moves))]
