"""Waste Stream / Bin Color Enums."""

from enum import Enum


class WasteStream(str, Enum):
    """배출 스트림.

    재활용 비율 집계: RECYCLABLES만 재활용으로 카운트.
    """

    RECYCLABLES = "Recyclables"
    RESIDUAL = "Residual"
    ORGANIC = "Organic"
    EWASTE = "E-waste"
    HAZARDOUS = "Hazardous"


class BinColor(str, Enum):
    """수거함 색상."""

    BLUE = "Blue"
    WHITE = "White"
    GREEN = "Green"
    BLACK = "Black"
    BROWN = "Brown"
    YELLOW = "Yellow"
    RED = "Red"
    NONE = "None"
