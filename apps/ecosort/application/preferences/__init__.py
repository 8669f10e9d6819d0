"""Preferences Feature - 지역 설정."""

from ecosort.application.preferences.location_store import (
    LOCATION_KEY,
    LocationPreferenceStore,
)

__all__ = ["LOCATION_KEY", "LocationPreferenceStore"]
