"""EcoSort Domain Layer."""
