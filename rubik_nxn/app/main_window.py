# rubik_nxn/app/main_window.py
from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from rubik_nxn.config import (
    DEFAULT_SCRAMBLE_MOVES,
    DEFAULT_SIZE,
    MAX_GUI_SIZE,
    MAX_SCRAMBLE_MOVES,
    MIN_SIZE,
)
from rubik_nxn.core.cube_state import FACES, CubeState
from rubik_nxn.core.errors import CubeError
from rubik_nxn.core.move_engine import apply_move
from rubik_nxn.logic.detector import inspect_state
from rubik_nxn.logic.moves import ALL_KINDS, Direction, Move, parse_sequence
from rubik_nxn.logic.scramble import scramble
from rubik_nxn.render.net_widget import CubeNetWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ventana principal: controlador interactivo del cubo NxNxN.

    Esta clase coordina:
    - El estado lógico del cubo (`CubeState`), única fuente de verdad.
    - La vista desplegada (`CubeNetWidget`), que solo lee el estado.
    - El historial (undo/redo) mediante giros inversos.
    - El reporte de progreso por cara (`inspect_state`).
    """

    def __init__(self, n: int = DEFAULT_SIZE, rng: Optional[random.Random] = None) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales.

        Args:
            n: Lado inicial del cubo.
            rng: Generador aleatorio para los scrambles (opcional).
        """
        super().__init__()
        self.setWindowTitle("Rubik NxN - PySide6")

        # --- Modelo + vista ---
        self.model: CubeState = CubeState(n)
        self.net_widget: CubeNetWidget = CubeNetWidget(self.model, self)
        self._rng: random.Random = rng if rng is not None else random.Random()

        # --- Historial ---
        self.history: List[Move] = []
        self.redo_stack: List[Move] = []

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.net_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(340)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        # Tamaño
        row_size = QHBoxLayout()
        self.spin_size = QSpinBox()
        self.spin_size.setRange(MIN_SIZE, MAX_GUI_SIZE)
        self.spin_size.setValue(n)
        self.btn_new = QPushButton("Nuevo cubo")
        row_size.addWidget(QLabel("N"), 0)
        row_size.addWidget(self.spin_size, 1)
        row_size.addWidget(self.btn_new, 1)
        panel_layout.addLayout(row_size)

        # Botones principales
        row_main = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        row_main.addWidget(self.btn_reset)
        row_main.addWidget(self.btn_undo)
        row_main.addWidget(self.btn_redo)
        panel_layout.addLayout(row_main)

        # Giros: una fila por tipo, horario y antihorario
        panel_layout.addWidget(QLabel("Giros"))
        grid_moves = QGridLayout()
        for i, kind in enumerate(ALL_KINDS):
            for j, direction in enumerate((Direction.CLOCKWISE, Direction.COUNTERCLOCKWISE)):
                mv = Move(kind, direction)
                btn = QPushButton(str(mv))
                btn.clicked.connect(lambda _checked=False, m=mv: self.on_move(m))
                grid_moves.addWidget(btn, j, i)
        panel_layout.addLayout(grid_moves)

        # Scramble
        panel_layout.addWidget(QLabel("Scramble (mezclar)"))
        row_scr = QHBoxLayout()
        self.spin_scramble = QSpinBox()
        self.spin_scramble.setRange(1, MAX_SCRAMBLE_MOVES)
        self.spin_scramble.setValue(DEFAULT_SCRAMBLE_MOVES)
        self.btn_scramble = QPushButton("Scramble")
        row_scr.addWidget(self.spin_scramble, 1)
        row_scr.addWidget(self.btn_scramble, 1)
        panel_layout.addLayout(row_scr)

        # Aplicar secuencia
        panel_layout.addWidget(QLabel("Aplicar secuencia (ej: R U R' U' M2)"))
        self.txt_seq = QLineEdit()
        self.txt_seq.setPlaceholderText("Ej: R U R' U'")
        panel_layout.addWidget(self.txt_seq)
        self.btn_apply = QPushButton("Aplicar")
        panel_layout.addWidget(self.btn_apply)

        # Progreso por cara
        panel_layout.addWidget(QLabel("Caras (resuelta / stickers correctos)"))
        self.list_faces = QListWidget()
        panel_layout.addWidget(self.list_faces, 1)

        # Historial (movimientos)
        panel_layout.addWidget(QLabel("Historial de movimientos"))
        self.list_history = QListWidget()
        panel_layout.addWidget(self.list_history, 1)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_new.clicked.connect(self.on_new_cube)
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_scramble.clicked.connect(self.on_scramble)
        self.btn_apply.clicked.connect(self.on_apply_sequence)
        self.txt_seq.returnPressed.connect(self.on_apply_sequence)
        self.btn_undo.clicked.connect(self.on_undo)
        self.btn_redo.clicked.connect(self.on_redo)

        # Atajos
        self.btn_undo.setShortcut("Ctrl+Z")
        self.btn_redo.setShortcut("Ctrl+Y")
        self.btn_reset.setShortcut("Ctrl+R")

        self._refresh_state()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh_state(self) -> None:
        """Repinta el cubo y actualiza el estado general y el detalle por cara."""
        report = inspect_state(self.model)
        self.lbl_state.setText(
            "Estado: resuelto ✅" if report.cube_solved else "Estado: mezclado 🔄"
        )

        total = self.model.n * self.model.n
        self.list_faces.clear()
        for face, solved, count in zip(FACES, report.face_solved, report.correct_counts):
            mark = "✔" if solved else "·"
            self.list_faces.addItem(f"{mark} {face.name:<5} {count}/{total}")

        self.btn_undo.setEnabled(bool(self.history))
        self.btn_redo.setEnabled(bool(self.redo_stack))
        self.net_widget.update()

    def _apply(self, moves: Iterable[Move], record: bool = True) -> None:
        """Aplica giros al modelo y, si corresponde, los agrega al historial.

        Args:
            moves: Giros a aplicar, en orden.
            record: False para undo (el giro inverso no se registra).
        """
        for mv in moves:
            apply_move(self.model, mv)
            if record:
                self.history.append(mv)
                self.list_history.addItem(str(mv))
        self.list_history.scrollToBottom()
        self._refresh_state()

    # -------------------
    # Botones
    # -------------------
    def on_move(self, move: Move) -> None:
        """Giro manual: se aplica y se invalida el redo."""
        self.redo_stack.clear()
        self._apply([move])

    def on_new_cube(self) -> None:
        """Crea un cubo nuevo con el N elegido."""
        self.model = CubeState(int(self.spin_size.value()))
        self.net_widget.set_model(self.model)
        self.on_reset()

    def on_reset(self) -> None:
        """Resetea el cubo y el historial."""
        self.model.reset()
        self.history.clear()
        self.redo_stack.clear()
        self.list_history.clear()
        self._refresh_state()

    def on_undo(self) -> None:
        """Revierte el último movimiento aplicando su inverso."""
        if not self.history:
            return

        last = self.history.pop()
        self.list_history.takeItem(self.list_history.count() - 1)
        self.redo_stack.append(last)
        self._apply([last.inverse()], record=False)

    def on_redo(self) -> None:
        """Re-aplica el último movimiento deshecho."""
        if not self.redo_stack:
            return

        mv = self.redo_stack.pop()
        self._apply([mv])

    def on_apply_sequence(self) -> None:
        """Aplica una secuencia ingresada por el usuario (ej: 'R U R' U'')."""
        text = self.txt_seq.text().strip()
        if not text:
            return

        try:
            moves = parse_sequence(text)
        except CubeError as exc:
            logger.error("Secuencia inválida %r: %s", text, exc)
            QMessageBox.warning(self, "Secuencia inválida", str(exc))
            return

        self.redo_stack.clear()
        self._apply(moves)

    def on_scramble(self) -> None:
        """Mezcla el cubo aplicando una secuencia aleatoria de N movimientos."""
        count = int(self.spin_scramble.value())
        applied = scramble(self.model, count, self._rng)

        self.redo_stack.clear()
        for mv in applied:
            self.history.append(mv)
            self.list_history.addItem(str(mv))
        self.list_history.scrollToBottom()
        self._refresh_state()
