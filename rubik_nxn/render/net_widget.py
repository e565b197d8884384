# rubik_nxn/render/net_widget.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from PySide6.QtCore import QRectF, QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from rubik_nxn.config import FACE_COLORS_RGB, UNKNOWN_COLOR_RGB
from rubik_nxn.core.cube_state import CubeState, Face

# Posición (columna, fila) de cada cara en el desplegado en cruz.
NET_LAYOUT: Dict[Face, Tuple[int, int]] = {
    Face.UP: (1, 0),
    Face.LEFT: (0, 1),
    Face.FRONT: (1, 1),
    Face.RIGHT: (2, 1),
    Face.BACK: (3, 1),
    Face.DOWN: (1, 2),
}


class CubeNetWidget(QWidget):
    """Vista 2D del cubo desplegado en cruz.

    Es una vista derivada: en cada `paintEvent` lee `model.grids` y no guarda
    estado propio del cubo. Llamar a `update()` luego de cada giro.
    """

    def __init__(self, model: CubeState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.model: CubeState = model
        self.gap: float = 6.0
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(360, 270)

    def set_model(self, model: CubeState) -> None:
        """Reemplaza el cubo mostrado (por ejemplo, al cambiar N)."""
        self.model = model
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(640, 480)

    def _face_size(self) -> float:
        """Lado de una cara en píxeles, para que entren 4x3 caras con separación."""
        w = (self.width() - 5 * self.gap) / 4.0
        h = (self.height() - 4 * self.gap) / 3.0
        return max(1.0, min(w, h))

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(26, 26, 31))

        side = self._face_size()
        n = self.model.n
        cell = side / n
        pen = QPen(QColor(0, 0, 0))
        pen.setWidthF(max(1.0, cell * 0.06))
        painter.setPen(pen)

        for face, (col, row) in NET_LAYOUT.items():
            x0 = self.gap + col * (side + self.gap)
            y0 = self.gap + row * (side + self.gap)
            grid = self.model.grids[face]
            for r in range(n):
                for c in range(n):
                    rgb = FACE_COLORS_RGB.get(grid[r][c], UNKNOWN_COLOR_RGB)
                    painter.setBrush(QColor(*rgb))
                    painter.drawRect(QRectF(x0 + c * cell, y0 + r * cell, cell, cell))

            painter.setPen(QColor(200, 200, 200))
            painter.drawText(QRectF(x0, y0, side, side), Qt.AlignCenter, face.name[0])
            painter.setPen(pen)

        painter.end()
