from rubik_nxn.core.cube_state import FACES, CubeState, Face
from rubik_nxn.core.errors import CubeError, IncompleteScan, InvalidConfiguration, InvalidMove

__all__ = [
    "FACES",
    "CubeState",
    "Face",
    "CubeError",
    "IncompleteScan",
    "InvalidConfiguration",
    "InvalidMove",
]
