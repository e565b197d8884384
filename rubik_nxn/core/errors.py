# rubik_nxn/core/errors.py
from __future__ import annotations


class CubeError(ValueError):
    """Error base del modelo del cubo.

    Hereda de `ValueError` para que el código que ya captura `ValueError`
    (por ejemplo, al parsear notación) siga funcionando.
    """


class InvalidConfiguration(CubeError):
    """El cubo no puede construirse: `n < 2` o un layout persistido inválido."""


class InvalidMove(CubeError):
    """Movimiento mal formado: tipo/dirección desconocidos, token o acción inválidos,
    o un índice de capa fuera de rango."""


class IncompleteScan(CubeError):
    """Escaneo con longitud distinta de 54 o con stickers sin clasificar (-1)."""
