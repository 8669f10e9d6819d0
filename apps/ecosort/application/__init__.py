"""EcoSort Application Layer."""
