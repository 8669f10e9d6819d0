"""Domain Enums."""

from ecosort.domain.enums.material import Material
from ecosort.domain.enums.scan_phase import ScanPhase
from ecosort.domain.enums.waste_stream import BinColor, WasteStream

__all__ = [
    "BinColor",
    "Material",
    "ScanPhase",
    "WasteStream",
]
