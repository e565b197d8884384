# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from PySide6.QtWidgets import QApplication

from rubik_nxn.app.main_window import MainWindow
from rubik_nxn.config import DEFAULT_SIZE, LOG_FORMAT

logger = logging.getLogger("main")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulador lógico de cubo Rubik NxNxN")
    parser.add_argument("--size", "-n", type=int, default=DEFAULT_SIZE, help="lado del cubo (>= 2)")
    parser.add_argument("--debug", action="store_true", help="logging detallado (cada giro)")
    return parser.parse_args(argv)


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Configura logging, crea la instancia de `QApplication`, construye la ventana
    principal (`MainWindow`) y ejecuta el loop de eventos de Qt.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Modo debug activado.")

    app = QApplication(sys.argv[:1])
    w = MainWindow(args.size)
    w.show()
    logger.info("Cubo %dx%dx%d listo.", args.size, args.size, args.size)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
