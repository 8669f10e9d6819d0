"""Domain Value Objects."""

from ecosort.domain.value_objects.classification import (
    BinRecommendation,
    ClassificationPayload,
    GroundingSource,
    WasteClassification,
)
from ecosort.domain.value_objects.game import GameProgress, SortGameItem, SortOutcome
from ecosort.domain.value_objects.location import DEFAULT_COUNTRY, Location
from ecosort.domain.value_objects.scan_history import HistoryEntry, HistoryStats

__all__ = [
    "BinRecommendation",
    "ClassificationPayload",
    "DEFAULT_COUNTRY",
    "GameProgress",
    "GroundingSource",
    "HistoryEntry",
    "HistoryStats",
    "Location",
    "SortGameItem",
    "SortOutcome",
    "WasteClassification",
]
