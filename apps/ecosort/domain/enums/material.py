"""Material Enum."""

from enum import Enum


class Material(str, Enum):
    """폐기물 재질 카테고리 (닫힌 집합)."""

    PAPER = "paper"
    PLASTIC = "plastic"
    GLASS = "glass"
    METAL = "metal"
    ORGANIC = "organic"
    EWASTE = "ewaste"
    HAZARDOUS = "hazardous"
    MIXED = "mixed"
    OTHER = "other"
