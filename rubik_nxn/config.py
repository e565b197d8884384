"""config.py: constantes del simulador
-----------------------------------

Valores por defecto del modelo lógico del cubo NxNxN y de la ventana de control.
Son constantes de módulo: el punto de entrada (`main.py`) permite sobrescribir
el tamaño del cubo y el nivel de logging por línea de comandos.
"""

from typing import Dict, List, Tuple

# ---------------- Cubo ----------------

# Lado mínimo admitido (2x2x2). Un valor menor es InvalidConfiguration.
MIN_SIZE: int = 2
DEFAULT_SIZE: int = 3
# La GUI limita el tamaño; el modelo no tiene máximo.
MAX_GUI_SIZE: int = 9

# ---------------- Scramble ----------------

DEFAULT_SCRAMBLE_MOVES: int = 20
MAX_SCRAMBLE_MOVES: int = 200

# ---------------- Escaneo externo (solo 3x3) ----------------

# Un escaneo es una lista plana de 6 bloques de 9 stickers, fila-columna,
# en el orden de caras Up, Down, Front, Back, Left, Right.
SCAN_STICKERS_PER_FACE: int = 9
SCAN_LENGTH: int = 6 * SCAN_STICKERS_PER_FACE
SCAN_CENTER_INDEX: int = 4
# Valor de un sticker que el detector físico no pudo clasificar.
UNDETECTED: int = -1

# ---------------- Colores ----------------

# El índice de color f es el color resuelto de la cara f.
COLOR_NAMES: List[str] = ["white", "yellow", "blue", "green", "red", "orange"]
FACE_COLORS_RGB: Dict[int, Tuple[int, int, int]] = {
    0: (245, 245, 245),
    1: (250, 215, 20),
    2: (20, 70, 220),
    3: (20, 160, 60),
    4: (210, 30, 30),
    5: (255, 128, 0),
}
UNKNOWN_COLOR_RGB: Tuple[int, int, int] = (20, 20, 20)

# ---------------- Logging ----------------

LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
